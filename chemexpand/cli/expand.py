import argparse
from chemexpand import logger
from chemexpand.chem import validate_file, expand_file, DEFAULT_MAX_MULTIPLIER, DEFAULT_MAX_SYMBOLS


def add_subcommand(subparsers):
    parser = subparsers.add_parser('expand', help='Write the expanded version of formulas',
                                   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-i', '--input', required=True, type=str, help='file with one formula per line')
    parser.add_argument('-o', '--output', required=True, type=str, help='output file')
    parser.add_argument('--max-multiplier', default=DEFAULT_MAX_MULTIPLIER, type=int,
                        help='reject formulas with larger multipliers')
    parser.add_argument('--max-symbols', default=DEFAULT_MAX_SYMBOLS, type=int,
                        help='reject formulas expanded into more symbols')

    parser.set_defaults(func=main)


def main(args):
    try:
        if not validate_file(args.input):
            logger.error('Imbalanced parentheses in file %s. Cannot proceed with formula expansion' % args.input)
            return 1

        logger.info('Compute expanded version of formulas in %s' % args.input)
        expand_file(args.input, args.output, args.max_multiplier, args.max_symbols)
    except OSError as e:
        logger.error('Cannot expand formulas: %s' % e)
        return 1

    return 0
