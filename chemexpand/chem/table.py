import string
import numpy as np
from pandas import Series
from chemexpand import logger


class SymbolTable():
    '''
    Lookup table from element symbols to integer values, e.g. atomic numbers.

    The table is built once from a two-column text source and is not modified afterwards.
    It holds at most :attr:`capacity` entries.
    When the capacity is reached, the remaining entries of the source are ignored, so the first N entries win.
    If a symbol appears more than once, the first entry wins and the later ones are ignored with a warning.

    Parameters
    ----------
    capacity : int
        Maximum number of entries

    Examples
    --------
    >>> table = SymbolTable.open('periodic_table.txt')
    >>> table.lookup('Fe')
    26
    '''

    #: The number of known chemical elements
    MAX_CAPACITY = 118
    #: Value returned by :meth:`lookup` for a symbol not in the table
    NOT_FOUND = -1
    #: Maximum length of a symbol
    MAX_SYMBOL_LENGTH = 3

    def __init__(self, capacity=MAX_CAPACITY):
        if capacity < 0:
            raise ValueError('Capacity of symbol table should be non-negative')
        self.capacity = capacity
        self._values = {}

    def __repr__(self):
        return f'<SymbolTable: {len(self)} entries>'

    def __len__(self):
        return len(self._values)

    def __contains__(self, symbol):
        return symbol in self._values

    def __iter__(self):
        return iter(self._values)

    @property
    def is_full(self):
        return len(self._values) >= self.capacity

    def items(self):
        '''
        The (symbol, value) pairs in the order they were added.

        Returns
        -------
        items : list of tuple of (str, int)
        '''
        return list(self._values.items())

    def add(self, symbol, value):
        '''
        Add a new entry into the table.

        Parameters
        ----------
        symbol : str
        value : int

        Returns
        -------
        added : bool
            False if the symbol already exists or the table is full.
        '''
        if not SymbolTable.is_valid_symbol(symbol):
            raise ValueError('Invalid symbol: %s' % symbol)
        if value < 0:
            raise ValueError('Value of symbol %s should be non-negative' % symbol)
        if symbol in self._values:
            logger.warning('Duplicated symbol %s ignored, keep the value %i' % (symbol, self._values[symbol]))
            return False
        if self.is_full:
            return False
        self._values[symbol] = value
        return True

    def lookup(self, symbol):
        '''
        Get the value of a symbol.

        Parameters
        ----------
        symbol : str

        Returns
        -------
        value : int
            The value of this symbol, or :attr:`NOT_FOUND` if it is not in the table.
        '''
        return self._values.get(symbol, SymbolTable.NOT_FOUND)

    def sorted_by_value(self):
        '''
        The entries sorted by value in ascending order.

        Entries with the same value keep the order they were added.
        This is for display only. Lookup does not depend on the order.

        Returns
        -------
        items : list of tuple of (str, int)
        '''
        items = self.items()
        if not items:
            return []
        values = np.array([v for _, v in items], dtype=np.int64)
        order = np.argsort(values, kind='stable')
        return [items[i] for i in order]

    def to_series(self, sort=True):
        '''
        Convert the table into a Series indexed by symbol.

        Parameters
        ----------
        sort : bool
            Sort the entries by value

        Returns
        -------
        series : Series
        '''
        items = self.sorted_by_value() if sort else self.items()
        return Series([v for _, v in items], index=[s for s, _ in items], name='value', dtype='int64')

    @staticmethod
    def is_valid_symbol(symbol):
        return (0 < len(symbol) <= SymbolTable.MAX_SYMBOL_LENGTH
                and all(c in string.ascii_letters for c in symbol))

    @staticmethod
    def open(file, capacity=MAX_CAPACITY):
        '''
        Load the table from a two-column text file.

        Parameters
        ----------
        file : str
        capacity : int

        Returns
        -------
        table : SymbolTable
        '''
        with open(file) as f:
            lines = f.read().splitlines()
        return SymbolTable.parse(lines, capacity=capacity)

    @staticmethod
    def parse(lines, capacity=MAX_CAPACITY):
        '''
        Build the table from lines of two-column text.

        Each line should be a symbol and an integer separated by whitespace.
        Empty lines and lines start with `#` are ignored.
        Invalid lines are skipped with a warning.

        Parameters
        ----------
        lines : iterable of str
        capacity : int

        Returns
        -------
        table : SymbolTable
        '''
        table = SymbolTable(capacity)
        n_ignored = 0
        for i, line in enumerate(lines):
            if line.startswith('#') or line.strip() == '':
                continue

            if table.is_full:
                n_ignored += 1
                continue

            words = line.split()
            if len(words) != 2:
                logger.warning('Invalid line %i in symbol table ignored: %s' % (i + 1, line))
                continue

            symbol = words[0]
            if len(symbol) > SymbolTable.MAX_SYMBOL_LENGTH:
                logger.warning('Chemical symbol %s at line %i exceeds maximum length' % (symbol, i + 1))
                continue
            if not SymbolTable.is_valid_symbol(symbol):
                logger.warning('Invalid chemical symbol %s at line %i' % (symbol, i + 1))
                continue

            try:
                value = int(words[1])
            except ValueError:
                logger.warning('Invalid value for symbol %s at line %i: %s' % (symbol, i + 1, words[1]))
                continue
            if value < 0:
                logger.warning('Negative value for symbol %s at line %i ignored' % (symbol, i + 1))
                continue

            table.add(symbol, value)

        if n_ignored:
            logger.warning('Symbol table is full with %i entries. %i entries ignored' % (table.capacity, n_ignored))

        logger.debug('%i entries loaded into symbol table' % len(table))
        return table
