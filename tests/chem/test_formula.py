#!/usr/bin/env python3

import pytest
from chemexpand.chem.formula import Formula, Token, iter_tokens, expand, expand_to_str
from chemexpand.errors import FormulaError, UnbalancedFormulaError, MultiplierOverflowError, ExpansionLimitError


def test_tokens():
    tokens = list(iter_tokens('Uus(Fe12)2'))
    assert tokens == [Token(Token.SYMBOL, 'Uus'),
                      Token(Token.GROUP_OPEN, '('),
                      Token(Token.SYMBOL, 'Fe'),
                      Token(Token.MULTIPLIER, 12),
                      Token(Token.GROUP_CLOSE, ')'),
                      Token(Token.MULTIPLIER, 2),
                      ]


def test_symbol_length():
    assert [t.value for t in iter_tokens('NaCl')] == ['Na', 'Cl']
    assert [t.value for t in iter_tokens('CN')] == ['C', 'N']
    assert [t.value for t in iter_tokens('Uuok')] == ['Uuo', 'k']
    assert [t.value for t in iter_tokens('xY')] == ['x', 'Y']
    # lookahead stops at the end of string
    assert [t.value for t in iter_tokens('Ca')] == ['Ca']
    assert [t.value for t in iter_tokens('C')] == ['C']


def test_skip_other_characters():
    assert [t.value for t in iter_tokens(' H2 O\t')] == ['H', 2, 'O']
    assert [t.value for t in iter_tokens('Hé')] == ['H']


def test_expand():
    assert expand('H2O') == ['H', 'H', 'O']
    assert expand('(OH)2') == ['O', 'H', 'O', 'H']
    assert expand('Ca(OH)2') == ['Ca', 'O', 'H', 'O', 'H']
    assert expand('C10H22') == ['C'] * 10 + ['H'] * 22
    assert expand('') == []


def test_expand_nested():
    unit = ['Fe'] + ['C', 'N'] * 6
    assert expand('Co3(Fe(CN)6)2') == ['Co'] * 3 + unit * 2

    formula = Formula('Co3(Fe(CN)6)2')
    assert formula.atoms == {'Co': 3, 'Fe': 2, 'C': 12, 'N': 12}
    assert formula.n_symbol == 29


def test_group_without_multiplier():
    assert expand('A(BC)D') == ['A', 'B', 'C', 'D']
    assert expand('((H))') == ['H']
    assert expand('()2O') == ['O']


def test_zero_multiplier():
    assert expand('H0O') == ['O']
    assert expand('H(OH)0') == ['H']
    assert expand('(H2(O)0)3') == ['H'] * 6
    assert expand('H00O') == ['O']


def test_multiplier_after_group_and_symbol():
    # the multiplier after H only applies to H, the one after ')' to the whole group
    assert expand('(CH3)2') == ['C', 'H', 'H', 'H', 'C', 'H', 'H', 'H']
    assert expand('(C2H)3H2') == ['C', 'C', 'H'] * 3 + ['H', 'H']
    assert expand('H2(O)2') == ['H', 'H', 'O', 'O']


def test_expand_already_expanded():
    expanded = 'Co Co Co Fe C N C N'
    assert expand_to_str(expanded) == expanded
    assert expand_to_str('CoCoCoFeCNCN') == expanded
    assert expand_to_str('  H   H O ') == 'H H O'


def test_to_str():
    formula = Formula('H4C3(COH2)2')
    assert formula.to_str() == 'H H H H C C C C O H H C O H H'
    assert formula.atoms == {'H': 8, 'C': 5, 'O': 2}
    assert str(Formula('H2O').symbols) == "['H', 'H', 'O']"


def test_new_list_for_each_call():
    a = expand('H2O')
    a.append('X')
    assert expand('H2O') == ['H', 'H', 'O']


def test_misplaced_multiplier():
    with pytest.raises(FormulaError):
        expand('2H')
    with pytest.raises(FormulaError):
        expand('(2H)')
    with pytest.raises(FormulaError):
        expand('H2 3')
    with pytest.raises(FormulaError):
        expand('(H)2 3')


def test_unbalanced():
    with pytest.raises(UnbalancedFormulaError):
        expand('(H2O')
    with pytest.raises(UnbalancedFormulaError):
        expand('H2O)')
    with pytest.raises(UnbalancedFormulaError):
        expand(')(')


def test_multiplier_overflow():
    assert expand('H100000') == ['H'] * 100000
    with pytest.raises(MultiplierOverflowError):
        expand('H100001')
    with pytest.raises(MultiplierOverflowError):
        expand('H' + '9' * 5000)
    assert expand('H' + '0' * 50 + '3') == ['H'] * 3
    assert expand('H12', max_multiplier=12) == ['H'] * 12
    with pytest.raises(MultiplierOverflowError):
        expand('H13', max_multiplier=12)
    assert len(expand('H123456', max_multiplier=None)) == 123456


def test_expansion_limit():
    with pytest.raises(ExpansionLimitError):
        expand('((((H100)100)100)100)100')
    assert len(expand('(H10)10', max_symbols=100)) == 100
    with pytest.raises(ExpansionLimitError):
        expand('(H10)10O', max_symbols=100)
    with pytest.raises(ExpansionLimitError):
        expand('HHH', max_symbols=2)
    # cancelled symbols do not count
    assert expand('H5H0O', max_symbols=6) == ['H', 'H', 'H', 'H', 'H', 'O']
