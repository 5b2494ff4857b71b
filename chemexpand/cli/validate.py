import argparse
from chemexpand import logger
from chemexpand.chem import validate_file


def add_subcommand(subparsers):
    parser = subparsers.add_parser('validate', help='Check balanced parentheses of formulas',
                                   formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-i', '--input', required=True, type=str, help='file with one formula per line')

    parser.set_defaults(func=main)


def main(args):
    logger.info('Verify balanced parentheses in %s' % args.input)
    try:
        balanced = validate_file(args.input)
    except OSError as e:
        logger.error('Cannot read formulas: %s' % e)
        return 1

    if not balanced:
        return 1
    logger.info('Parentheses are balanced for all chemical formulas')
    return 0
