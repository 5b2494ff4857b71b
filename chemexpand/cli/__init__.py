import argparse
from chemexpand import logger
from . import validate, expand, count, table


def main():
    parser = argparse.ArgumentParser(prog="chemexpand", description="Chemical formula expander",
                                     formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    parser.add_argument('-v', '--verbose', action='store_true', help='print debug messages')
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Add subcommands
    validate.add_subcommand(subparsers)
    expand.add_subcommand(subparsers)
    count.add_subcommand(subparsers)
    table.add_subcommand(subparsers)

    args = parser.parse_args()
    if args.verbose:
        logger.setLevel('DEBUG')
    return args.func(args)  # Call the function associated with the subcommand
