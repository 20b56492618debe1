'''
Operator tables.

Every operator is a member of a closed enumeration whose value is the label
printed on the calculator key. Each enumeration has a table mapping every
member to a pure function on floats.

Arithmetic is done with numpy float64 ufuncs with all floating point
warnings silenced, so domain errors come back as nan, inf or -inf instead of
raising like the math module does.
'''

from enum import Enum
from functools import wraps

import numpy as np


class BinaryOp(Enum):
    ADD = '+'
    SUBTRACT = '−'
    MULTIPLY = '×'
    DIVIDE = '÷'
    POWER = 'yˣ'
    ROOT = 'ˣ√y'


class UnaryOp(Enum):
    SQUARE = 'x²'
    SQRT = '√x'
    LOG10 = 'log x'
    LN = 'ln x'
    EXP10 = '10ˣ'
    EXP = 'eˣ'
    SIN = 'sin'
    COS = 'cos'
    TAN = 'tan'
    ASIN = 'sin⁻¹'
    ACOS = 'cos⁻¹'
    ATAN = 'tan⁻¹'


class NullaryOp(Enum):
    PI = 'π'
    E = 'e'


def _ieee(f):
    '''
    Run a numpy function on plain floats, returning a plain float.
    '''
    @wraps(f)
    def wrapped(*args):
        with np.errstate(all='ignore'):
            return float(f(*[np.float64(arg) for arg in args]))
    return wrapped


def _root(y, x):
    return np.power(y, np.divide(1.0, x))


# result = f(Y, X)
BINARY = {
    BinaryOp.ADD: _ieee(np.add),
    BinaryOp.SUBTRACT: _ieee(np.subtract),
    BinaryOp.MULTIPLY: _ieee(np.multiply),
    BinaryOp.DIVIDE: _ieee(np.true_divide),
    BinaryOp.POWER: _ieee(np.power),
    BinaryOp.ROOT: _ieee(_root),
}

UNARY = {
    # Powers & logarithms
    UnaryOp.SQUARE: _ieee(np.square),
    UnaryOp.SQRT: _ieee(np.sqrt),
    UnaryOp.LOG10: _ieee(np.log10),
    UnaryOp.LN: _ieee(np.log),
    UnaryOp.EXP10: _ieee(lambda x: np.power(10.0, x)),
    UnaryOp.EXP: _ieee(np.exp),

    # Trigonometry, radians
    UnaryOp.SIN: _ieee(np.sin),
    UnaryOp.COS: _ieee(np.cos),
    UnaryOp.TAN: _ieee(np.tan),
    UnaryOp.ASIN: _ieee(np.arcsin),
    UnaryOp.ACOS: _ieee(np.arccos),
    UnaryOp.ATAN: _ieee(np.arctan),
}

NULLARY = {
    NullaryOp.PI: float(np.pi),
    NullaryOp.E: float(np.e),
}

assert set(BINARY) == set(BinaryOp)
assert set(UNARY) == set(UnaryOp)
assert set(NULLARY) == set(NullaryOp)


def lookup(kind, op):
    '''
    Resolve an operator member or key label to a member of kind.

    Return None if op names nothing in kind.
    '''
    if isinstance(op, kind):
        return op
    try:
        return kind(op)
    except ValueError:
        return None


def symbols():
    '''
    All key labels, of every arity.
    '''
    return [op.value
            for kind in (BinaryOp, UnaryOp, NullaryOp)
            for op in kind]
