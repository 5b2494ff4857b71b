import argparse
from chemexpand import logger, DEFAULT_TABLE_FILE
from chemexpand.chem import SymbolTable, validate_file, count_file, UNKNOWN_ERROR, UNKNOWN_SENTINEL
from chemexpand.chem import DEFAULT_MAX_MULTIPLIER, DEFAULT_MAX_SYMBOLS


def add_subcommand(subparsers):
    parser = subparsers.add_parser('count', help='Write the sum of table values of each formula',
                                   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-i', '--input', required=True, type=str, help='file with one formula per line')
    parser.add_argument('-o', '--output', required=True, type=str, help='output file')
    parser.add_argument('-t', '--table', default=DEFAULT_TABLE_FILE, type=str,
                        help='symbol table with one symbol and one integer per line')
    parser.add_argument('--allow-unknown', action='store_true',
                        help='count unknown symbols as %i instead of skipping the formula' % SymbolTable.NOT_FOUND)
    parser.add_argument('--max-multiplier', default=DEFAULT_MAX_MULTIPLIER, type=int,
                        help='reject formulas with larger multipliers')
    parser.add_argument('--max-symbols', default=DEFAULT_MAX_SYMBOLS, type=int,
                        help='reject formulas expanded into more symbols')

    parser.set_defaults(func=main)


def main(args):
    unknown = UNKNOWN_SENTINEL if args.allow_unknown else UNKNOWN_ERROR
    try:
        table = SymbolTable.open(args.table)
        if not validate_file(args.input):
            logger.error('Imbalanced parentheses in file %s. Cannot proceed with counting' % args.input)
            return 1

        logger.info('Compute total values of formulas in %s' % args.input)
        count_file(args.input, args.output, table, unknown, args.max_multiplier, args.max_symbols)
    except OSError as e:
        logger.error('Cannot count formulas: %s' % e)
        return 1

    return 0
