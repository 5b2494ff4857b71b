class ChemExpandError(Exception):
    pass


class FormulaError(ChemExpandError):
    '''
    The formula on the current line cannot be expanded.
    '''
    pass


class UnbalancedFormulaError(FormulaError):
    pass


class MultiplierOverflowError(FormulaError):
    pass


class ExpansionLimitError(FormulaError):
    '''
    The expanded formula would contain more symbols than allowed.
    '''
    pass


class UnknownSymbolError(ChemExpandError):
    def __init__(self, symbol):
        super().__init__('Symbol not found in table: %s' % symbol)
        self.symbol = symbol
