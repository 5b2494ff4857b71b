import argparse
from chemexpand import logger, DEFAULT_TABLE_FILE
from chemexpand.chem import SymbolTable


def add_subcommand(subparsers):
    parser = subparsers.add_parser('table', help='Print the symbol table sorted by value',
                                   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-t', '--table', default=DEFAULT_TABLE_FILE, type=str,
                        help='symbol table with one symbol and one integer per line')

    parser.set_defaults(func=main)


def main(args):
    try:
        table = SymbolTable.open(args.table)
    except OSError as e:
        logger.error('Cannot load symbol table: %s' % e)
        return 1

    print('%-6s | %6s' % ('Symbol', 'Value'))
    print('-' * 15)
    for symbol, value in table.to_series().items():
        print('%-6s | %6i' % (symbol, value))
    print('%i entries' % len(table))
    return 0
