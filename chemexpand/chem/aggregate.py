from chemexpand import logger
from chemexpand.errors import FormulaError, UnknownSymbolError
from .formula import Token, iter_tokens
from .table import SymbolTable

__all__ = [
    'UNKNOWN_ERROR',
    'UNKNOWN_SENTINEL',
    'split_symbols',
    'aggregate',
]

#: Raise UnknownSymbolError for a symbol not in the table
UNKNOWN_ERROR = 'error'
#: Add SymbolTable.NOT_FOUND into the total for a symbol not in the table
UNKNOWN_SENTINEL = 'sentinel'


def split_symbols(expanded):
    '''
    Split an expanded formula string into symbols with the same greedy rule used for expansion.

    Parameters
    ----------
    expanded : str
        Expanded formula. It should not contain multipliers or parentheses.

    Returns
    -------
    symbols : list of str
    '''
    symbols = []
    for token in iter_tokens(expanded, max_multiplier=None):
        if token.kind != Token.SYMBOL:
            raise FormulaError('Formula is not expanded: %s' % expanded)
        symbols.append(token.value)
    return symbols


def aggregate(expanded, table: SymbolTable, unknown=UNKNOWN_ERROR):
    '''
    Sum up the values of all symbols in an expanded formula.

    e.g. with atomic numbers in the table, this gives the total number of protons.

    Parameters
    ----------
    expanded : str or list of str
        Expanded formula, either as a string or as a list of symbols
    table : SymbolTable
    unknown : str
        How to handle the symbols not in the table.
        :data:`UNKNOWN_ERROR` raises UnknownSymbolError.
        :data:`UNKNOWN_SENTINEL` adds :attr:`SymbolTable.NOT_FOUND` into the total.

    Returns
    -------
    total : int
    '''
    if unknown not in (UNKNOWN_ERROR, UNKNOWN_SENTINEL):
        raise ValueError('Invalid policy for unknown symbols: %s' % unknown)

    if isinstance(expanded, str):
        symbols = split_symbols(expanded)
    else:
        symbols = expanded

    total = 0
    for symbol in symbols:
        value = table.lookup(symbol)
        if value == SymbolTable.NOT_FOUND:
            if unknown == UNKNOWN_ERROR:
                raise UnknownSymbolError(symbol)
            logger.warning('Symbol not found in table: %s' % symbol)
        total += value
    return total
