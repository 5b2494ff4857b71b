from .table import SymbolTable
from .balance import *
from .formula import *
from .aggregate import *
from .batch import *
