import string
from chemexpand.errors import FormulaError, UnbalancedFormulaError, MultiplierOverflowError, ExpansionLimitError

__all__ = [
    'DEFAULT_MAX_MULTIPLIER',
    'DEFAULT_MAX_SYMBOLS',
    'Token',
    'iter_tokens',
    'expand',
    'expand_to_str',
    'Formula',
]

#: Largest multiplier accepted in a formula
DEFAULT_MAX_MULTIPLIER = 100000
#: Largest number of symbols an expanded formula may contain
DEFAULT_MAX_SYMBOLS = 1000000


class Token():
    '''
    A token of a chemical formula.

    Parameters
    ----------
    kind : str
        One of :attr:`SYMBOL`, :attr:`MULTIPLIER`, :attr:`GROUP_OPEN` and :attr:`GROUP_CLOSE`
    value : str or int
        The symbol, the multiplier or the delimiter character
    '''
    SYMBOL = 'symbol'
    MULTIPLIER = 'multiplier'
    GROUP_OPEN = 'group_open'
    GROUP_CLOSE = 'group_close'

    __slots__ = ('kind', 'value')

    def __init__(self, kind, value):
        self.kind = kind
        self.value = value

    def __repr__(self):
        return f'<Token: {self.kind} {self.value}>'

    def __eq__(self, other):
        return isinstance(other, Token) and (self.kind, self.value) == (other.kind, other.value)

    def __hash__(self):
        return hash((self.kind, self.value))


def _is_lower(formula, i):
    return i < len(formula) and formula[i] in string.ascii_lowercase


def _symbol_length(formula, i):
    # Longest match first: Xyz, then Xy, then any single letter. The table is not consulted.
    if formula[i] in string.ascii_uppercase and _is_lower(formula, i + 1):
        if _is_lower(formula, i + 2):
            return 3
        return 2
    return 1


def _parse_multiplier(digits, max_multiplier):
    # Compare the length first so that a very long digit run is never converted
    stripped = digits.lstrip('0') or '0'
    if max_multiplier is not None:
        if len(stripped) > len(str(max_multiplier)) or int(stripped) > max_multiplier:
            raise MultiplierOverflowError('Multiplier %s exceeds the limit %i' % (digits, max_multiplier))
    return int(stripped)


def iter_tokens(formula, max_multiplier=DEFAULT_MAX_MULTIPLIER):
    '''
    Scan a formula from left to right and yield the tokens lazily.

    A symbol is an uppercase letter followed by two lowercase letters,
    or else an uppercase letter followed by one lowercase letter,
    or else any single letter.
    A run of digits is one multiplier.
    Characters other than letters, digits and parentheses are skipped.

    Parameters
    ----------
    formula : str
    max_multiplier : int, optional
        Raise MultiplierOverflowError if a multiplier is larger than this value.
        Set to None to disable the check.

    Yields
    ------
    token : Token
    '''
    i = 0
    n = len(formula)
    while i < n:
        c = formula[i]
        if c in string.ascii_letters:
            length = _symbol_length(formula, i)
            yield Token(Token.SYMBOL, formula[i:i + length])
            i += length
        elif c in string.digits:
            j = i + 1
            while j < n and formula[j] in string.digits:
                j += 1
            yield Token(Token.MULTIPLIER, _parse_multiplier(formula[i:j], max_multiplier))
            i = j
        elif c == '(':
            yield Token(Token.GROUP_OPEN, c)
            i += 1
        elif c == ')':
            yield Token(Token.GROUP_CLOSE, c)
            i += 1
        else:
            i += 1


def expand(formula, max_multiplier=DEFAULT_MAX_MULTIPLIER, max_symbols=DEFAULT_MAX_SYMBOLS):
    '''
    Expand a formula into a flat list of symbols in writing order.

    A multiplier right after a symbol repeats that symbol.
    A multiplier right after a closing parenthesis repeats the whole group, keeping the order inside the group.
    A group without multiplier is used once. A multiplier of zero removes the symbol or the group.

    e.g. Co3(Fe(CN)6)2 is expanded into three Co, followed by Fe and six CN pairs, repeated twice.

    Parameters
    ----------
    formula : str
    max_multiplier : int, optional
    max_symbols : int, optional
        Raise ExpansionLimitError if the expanded formula would be longer than this.
        Set to None to disable the check.

    Returns
    -------
    symbols : list of str
    '''
    # frames[0] collects the result, every open group pushes a new frame
    frames = [[]]
    closed = None  # group popped by ')' and waiting for its multiplier
    last = None
    n_symbol = 0

    def _repeat(symbols, n):
        nonlocal n_symbol
        n_new = n_symbol + len(symbols) * (n - 1)
        if max_symbols is not None and n_new > max_symbols:
            raise ExpansionLimitError('Expanded formula exceeds %i symbols: %s' % (max_symbols, formula))
        n_symbol = n_new
        for _ in range(n):
            frames[-1].extend(symbols)

    for token in iter_tokens(formula, max_multiplier):
        if token.kind == Token.MULTIPLIER:
            if closed is not None:
                _repeat(closed, token.value)
                closed = None
            elif last == Token.SYMBOL:
                _repeat([frames[-1].pop()], token.value)
            else:
                raise FormulaError('Multiplier %i should follow a symbol or a closing parenthesis: %s'
                                   % (token.value, formula))
            last = token.kind
            continue

        if closed is not None:
            _repeat(closed, 1)
            closed = None

        if token.kind == Token.SYMBOL:
            if max_symbols is not None and n_symbol + 1 > max_symbols:
                raise ExpansionLimitError('Expanded formula exceeds %i symbols: %s' % (max_symbols, formula))
            frames[-1].append(token.value)
            n_symbol += 1
        elif token.kind == Token.GROUP_OPEN:
            frames.append([])
        elif token.kind == Token.GROUP_CLOSE:
            if len(frames) == 1:
                raise UnbalancedFormulaError('Unmatched closing parenthesis: %s' % formula)
            closed = frames.pop()
        last = token.kind

    if closed is not None:
        _repeat(closed, 1)
    if len(frames) > 1:
        raise UnbalancedFormulaError('Unmatched opening parenthesis: %s' % formula)

    return frames[0]


def expand_to_str(formula, max_multiplier=DEFAULT_MAX_MULTIPLIER, max_symbols=DEFAULT_MAX_SYMBOLS):
    '''
    Expand a formula and join the symbols with single spaces.

    Parameters
    ----------
    formula : str
    max_multiplier : int, optional
    max_symbols : int, optional

    Returns
    -------
    expanded : str
    '''
    return ' '.join(expand(formula, max_multiplier, max_symbols))


class Formula():
    '''
    Expanded form of a chemical formula with nested groups.

    e.g. H4C3(COH2)2 will be expanded as H H H H C C C C O H H C O H H.

    Parameters
    ----------
    mol_str : str
    max_multiplier : int, optional
    max_symbols : int, optional

    Attributes
    ----------
    formula : str
        The formula as written
    symbols : list of str
        The symbols after expansion, in writing order
    '''

    def __init__(self, mol_str, max_multiplier=DEFAULT_MAX_MULTIPLIER, max_symbols=DEFAULT_MAX_SYMBOLS):
        self.formula = mol_str
        self.symbols = expand(mol_str, max_multiplier, max_symbols)

    def __repr__(self):
        return f'<Formula: {self.formula}>'

    @property
    def atoms(self):
        '''
        Number of each symbol, in the order of first appearance.

        Returns
        -------
        atoms : dict, [str, int]
        '''
        atoms = {}
        for symbol in self.symbols:
            atoms[symbol] = atoms.get(symbol, 0) + 1
        return atoms

    @property
    def n_symbol(self):
        return len(self.symbols)

    def to_str(self):
        '''
        The expanded formula with symbols separated by single spaces.

        Returns
        -------
        expanded : str
        '''
        return ' '.join(self.symbols)
