'''
Where calculator state lives between sessions, and what it looks like there.

The record is one line of semicolon terminated fields:

    X;Y;Z;T;A;B;C;D;E;F;G;H;

Registers are written with repr(), so they read back exactly. Variable slots
are written verbatim, unset slots as empty fields.
'''

from os import environ, makedirs, path
import logging

from .util import ParseError
from .lexer import parse_number


logger = logging.getLogger(__name__)

DELIMITER = ';'
REGISTERS = 4
SLOTS = 8
FIELDS = REGISTERS + SLOTS

ENVIRONMENT_VARIABLE = 'RPN4_FILE'
DEFAULT_FILE = '~/.rpn4.clc'


def default_path():
    '''
    Return the state file location: $RPN4_FILE, else ~/.rpn4.clc.
    '''
    return path.expanduser(environ.get(ENVIRONMENT_VARIABLE) or DEFAULT_FILE)


def format_record(registers, slots):
    '''
    Serialize registers (X, Y, Z, T) and variable slots to a record.
    '''
    fields = [repr(float(register)) for register in registers]
    fields.extend('' if slot is None else slot for slot in slots)
    return ''.join(field + DELIMITER for field in fields)


def parse_record(text):
    '''
    Parse a record into ((X, Y, Z, T), slots).

    Fields past the twelfth (normally just the empty one after the final
    delimiter) are ignored.
    '''
    fields = text.strip('\r\n').split(DELIMITER)
    if len(fields) < FIELDS:
        raise ParseError('Expected {0} fields in state record, got {1}'
                         .format(FIELDS, len(fields)))
    registers = tuple(parse_number(field) for field in fields[:REGISTERS])
    slots = [field or None for field in fields[REGISTERS:FIELDS]]
    return registers, slots


class FileStorage:
    '''
    State kept in a text file, read and written whole.
    '''

    def __init__(self, filename=None):
        self.filename = filename or default_path()

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.filename)

    def exists(self):
        return path.exists(self.filename)

    def read(self):
        with open(self.filename, encoding='utf-8') as fp:
            return fp.read()

    def write(self, text):
        directory = path.dirname(self.filename)
        if directory and not path.isdir(directory):
            logger.debug('Creating directory %s', directory)
            makedirs(directory)
        with open(self.filename, 'w', encoding='utf-8') as fp:
            fp.write(text)


class MemoryStorage:
    '''
    State kept in memory. For tests, and for sessions that shouldn't persist.
    '''

    def __init__(self, text=None):
        self.text = text

    def __repr__(self):
        return '{0}({1!r})'.format(type(self).__name__, self.text)

    def exists(self):
        return self.text is not None

    def read(self):
        return self.text

    def write(self, text):
        self.text = text
