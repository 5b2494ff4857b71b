__all__ = [
    'DELIMITER_PAIRS',
    'check_balance',
    'find_unbalanced_lines',
]

#: Opening delimiter and its closing counterpart
DELIMITER_PAIRS = {'(': ')'}


def check_balance(formula, pairs=None):
    '''
    Check whether the group delimiters in a formula are balanced and correctly nested.

    Other characters are ignored, so the symbol table is not required.
    An empty formula is balanced.

    Parameters
    ----------
    formula : str
    pairs : dict, [str, str], optional
        Opening delimiters and their closing counterparts.
        Default is :data:`DELIMITER_PAIRS`.

    Returns
    -------
    balanced : bool
    '''
    if pairs is None:
        pairs = DELIMITER_PAIRS
    closings = set(pairs.values())

    stack = []
    for c in formula:
        if c in pairs:
            stack.append(c)
        elif c in closings:
            if not stack:
                return False
            if pairs[stack.pop()] != c:
                return False

    return len(stack) == 0


def find_unbalanced_lines(lines, pairs=None):
    '''
    Check the balance of each formula and collect the failed ones.

    Parameters
    ----------
    lines : iterable of str
    pairs : dict, [str, str], optional

    Returns
    -------
    line_numbers : list of int
        The 1-based line numbers of unbalanced formulas
    '''
    return [i + 1 for i, line in enumerate(lines) if not check_balance(line, pairs)]
