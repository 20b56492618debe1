'''
Four register RPN calculator.

X, Y, Z and T, like the classic HP scientific calculators: a fixed depth
stack that rolls up as numbers are entered and drops as binary operators
consume them. Numbers are keyed into an entry buffer digit by digit. Eight
variables, A through H, and the stack survive between sessions in a small
semicolon separated state file.

The engine only keeps state and does arithmetic. Presenting it, whether as
a window full of buttons or the bundled command line, is up to the caller.
'''

from .cli import CLI
from .engine import CalculatorEngine
from .lexer import CommandLexer, parse_number
from .ops import BinaryOp, UnaryOp, NullaryOp
from .storage import FileStorage, MemoryStorage
from .util import RPNError, ParseError


__all__ = ('CalculatorEngine', 'CommandLexer', 'CLI',
           'BinaryOp', 'UnaryOp', 'NullaryOp',
           'FileStorage', 'MemoryStorage',
           'RPNError', 'ParseError', 'parse_number')
