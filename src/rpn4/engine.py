import logging

from .util import ParseError
from .lexer import parse_number
from .storage import FileStorage, format_record, parse_record, SLOTS
from . import ops


logger = logging.getLogger(__name__)


class CalculatorEngine:
    '''
    RPN calculator with four registers X, Y, Z, T, like the HP calculators.

    Numbers are typed into the entry buffer a digit, a comma or a sign change
    at a time, and pushed onto the stack with enter(). roll_set_x() pushes a
    value directly. Operations are preferably performed through:

    1. binop(), merging X and Y into X and dropping the stack,
    2. unop(), replacing X with a function of X,
    3. nilop(), pushing a known constant.

    Eight variables, A through H, can be stored from and recalled into X.
    State is loaded from storage on creation and written back by exit().
    '''

    SEPARATOR = ','
    NAMES = 'ABCDEFGH'

    assert len(NAMES) == SLOTS

    def __init__(self, storage=None):
        '''
        Create calculator, loading previous state if storage has any.

        :param storage: Where state persists. Defaults to the state file.
        '''
        self.storage = storage if storage is not None else FileStorage()
        self.x = self.y = self.z = self.t = 0.0
        self.entry = ''
        self.selected = None
        self.slots = [None] * SLOTS
        self.load()

    def load(self):
        '''
        Replace registers and variables with what's in storage, if anything.

        Leaves the calculator untouched if the record doesn't parse.
        '''
        if not self.storage.exists():
            logger.info('No saved state in %r', self.storage)
            return
        (x, y, z, t), slots = parse_record(self.storage.read())
        self.x, self.y, self.z, self.t = x, y, z, t
        self.slots = slots
        logger.info('Loaded state from %r', self.storage)

    def save(self):
        '''
        Write registers and variables to storage, overwriting.
        '''
        self.storage.write(format_record(self.registers, self.slots))
        logger.info('Saved state to %r', self.storage)

    def exit(self):
        '''
        Called on exit. Saves state.
        '''
        self.save()

    @property
    def registers(self):
        '''
        (X, Y, Z, T)
        '''
        return self.x, self.y, self.z, self.t

    def stack_string(self):
        '''
        T, Z, Y, X and the entry buffer, one per line.
        '''
        return '\n'.join([repr(self.t), repr(self.z), repr(self.y),
                          repr(self.x), self.entry])

    def var_string(self):
        '''
        The variable slots, one per line, then the selected variable name.
        '''
        return ''.join(('' if slot is None else slot) + '\n'
                       for slot in self.slots) + \
            ('' if self.selected is None else str(self.selected))

    # Entry buffer

    def entry_add_num(self, digit):
        '''
        Add a digit to the entry buffer.

        Anything that isn't a string of digits is ignored.
        '''
        if isinstance(digit, str) and digit.isascii() and digit.isdigit():
            self.entry += str(int(digit))

    def entry_add_comma(self):
        '''
        Add the decimal separator, unless there already is one.
        '''
        if type(self).SEPARATOR not in self.entry:
            self.entry += type(self).SEPARATOR

    def entry_change_sign(self):
        '''
        Flip a leading sign, or prepend a minus if there's none.
        '''
        if self.entry[:1] == '+':
            self.entry = '-' + self.entry[1:]
        elif self.entry[:1] == '-':
            self.entry = '+' + self.entry[1:]
        else:
            self.entry = '-' + self.entry

    def enter(self):
        '''
        Push the entry buffer onto the stack as X, and clear the buffer.

        Does nothing if the buffer is empty. Raises ParseError, changing
        nothing, if the buffer isn't a number yet (e.g., just a sign).
        '''
        if self.entry:
            self.roll_set_x(parse_number(self.entry))
            self.entry = ''

    # Stack movement

    def set_x(self, new_x):
        '''
        Overwrite X.
        '''
        self.x = float(new_x)

    def drop(self):
        '''
        Drop X and roll down. T is duplicated into Z.
        '''
        self.x, self.y, self.z = self.y, self.z, self.t

    def drop_set_x(self, new_x):
        '''
        Replace X and Y with new_x, rolling down. T is duplicated into Z.
        '''
        self.x, self.y, self.z = float(new_x), self.z, self.t

    def roll(self):
        '''
        Rotate the stack up; T comes around into X.
        '''
        self.x, self.y, self.z, self.t = self.t, self.x, self.y, self.z

    def roll_set_x(self, new_x):
        '''
        Roll up, losing T, and put new_x in X.
        '''
        self.x, self.y, self.z, self.t = float(new_x), self.x, self.y, self.z

    # Operations

    def binop(self, op):
        '''
        X ← op(Y, X), dropping the stack.

        Unknown operators are ignored.
        '''
        found = ops.lookup(ops.BinaryOp, op)
        if found is None:
            logger.debug('Ignoring unknown binary operator %r', op)
            return
        self.drop_set_x(ops.BINARY[found](self.y, self.x))

    def unop(self, op):
        '''
        X ← op(X).

        Unknown operators are ignored.
        '''
        found = ops.lookup(ops.UnaryOp, op)
        if found is None:
            logger.debug('Ignoring unknown unary operator %r', op)
            return
        self.set_x(ops.UNARY[found](self.x))

    def nilop(self, op):
        '''
        Push constant op.

        Unknown constants are ignored.
        '''
        found = ops.lookup(ops.NullaryOp, op)
        if found is None:
            logger.debug('Ignoring unknown constant %r', op)
            return
        self.roll_set_x(ops.NULLARY[found])

    # Variables

    def set_address(self, name):
        '''
        Select the variable the next set_var() or get_var() uses.
        '''
        self.selected = name

    def _slot(self):
        '''
        Index of selected variable, or None.
        '''
        if isinstance(self.selected, str) and len(self.selected) == 1:
            index = type(self).NAMES.find(self.selected)
            if index >= 0:
                return index
        logger.debug('No such variable %r', self.selected)
        return None

    def set_var(self):
        '''
        Store X in the selected variable.
        '''
        index = self._slot()
        if index is not None:
            self.slots[index] = repr(self.x)

    def get_var(self):
        '''
        Push the selected variable onto the stack.

        Raises ParseError if it was never set.
        '''
        index = self._slot()
        if index is None:
            return
        slot = self.slots[index]
        if slot is None:
            raise ParseError('Variable {0} is not set'.format(self.selected))
        self.roll_set_x(parse_number(slot))
