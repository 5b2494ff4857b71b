'''
Process files with one formula per line.
'''

from chemexpand import logger
from chemexpand.errors import ChemExpandError
from .balance import find_unbalanced_lines
from .formula import expand, DEFAULT_MAX_MULTIPLIER, DEFAULT_MAX_SYMBOLS
from .aggregate import aggregate, UNKNOWN_ERROR

__all__ = [
    'iter_formulas',
    'validate_file',
    'expand_file',
    'count_file',
]


def iter_formulas(f):
    '''
    Read the formulas from an opened file one line at a time, with the line breaks stripped.

    Parameters
    ----------
    f : file object

    Yields
    ------
    formula : str
    '''
    for line in f:
        yield line.rstrip('\n')


def validate_file(file):
    '''
    Check the parentheses of every formula in a file.

    Each unbalanced line is reported with its line number.

    Parameters
    ----------
    file : str

    Returns
    -------
    balanced : bool
        True only if all the formulas are balanced
    '''
    with open(file) as f:
        line_numbers = find_unbalanced_lines(iter_formulas(f))
    for n in line_numbers:
        logger.error('Parentheses NOT balanced in line: %i' % n)
    return len(line_numbers) == 0


def _process(lines, func):
    # A failed line is reported and skipped. The next line is processed only after the result is consumed
    for i, line in enumerate(lines):
        try:
            result = func(line)
        except (ChemExpandError, MemoryError) as e:
            logger.error('Error processing formula in line %i: %s' % (i + 1, str(e) or type(e).__name__))
            continue
        yield result


def expand_file(file, output, max_multiplier=DEFAULT_MAX_MULTIPLIER, max_symbols=DEFAULT_MAX_SYMBOLS):
    '''
    Expand every formula in a file and write one space-separated line for each.

    A formula which cannot be expanded is reported and skipped.

    Parameters
    ----------
    file : str
    output : str
    max_multiplier : int, optional
    max_symbols : int, optional

    Returns
    -------
    n_written : int
    '''
    n_written = 0
    with open(file) as fin, open(output, 'w') as f:
        lines = iter_formulas(fin)
        for expanded in _process(lines, lambda x: ' '.join(expand(x, max_multiplier, max_symbols))):
            f.write(expanded + '\n')
            n_written += 1
    logger.info('%i formulas expanded into %s' % (n_written, output))
    return n_written


def count_file(file, output, table, unknown=UNKNOWN_ERROR,
               max_multiplier=DEFAULT_MAX_MULTIPLIER, max_symbols=DEFAULT_MAX_SYMBOLS):
    '''
    Expand every formula in a file and write the sum of its values in the table, one integer per line.

    A formula which cannot be expanded or contains unknown symbols under the error policy is reported and skipped.

    Parameters
    ----------
    file : str
    output : str
    table : SymbolTable
    unknown : str
    max_multiplier : int, optional
    max_symbols : int, optional

    Returns
    -------
    n_written : int
    '''
    n_written = 0
    with open(file) as fin, open(output, 'w') as f:
        lines = iter_formulas(fin)
        for total in _process(lines, lambda x: aggregate(expand(x, max_multiplier, max_symbols), table, unknown)):
            f.write('%i\n' % total)
            n_written += 1
    logger.info('%i formulas counted into %s' % (n_written, output))
    return n_written
