from functools import reduce
import operator

import regex

from .util import RPNError, ParseError
from . import ops


# Number, as typed into the entry buffer, or as written by repr(float) into
# the state file and variable slots. Comma or dot as decimal separator.
NUMBER = r'''
          [+-]?
          (?:
              (?:
                  # 1, 12, 1, (notice trailing separator), 1,5, 1.5
                  [0-9]+
                  (?:
                      [.,]
                      [0-9]*
                  )?
                  |
                  # ,5 or .5
                  [.,]
                  [0-9]+
              )
              # 1e+20, 5e-324
              (?:
                  [eE]
                  [+-]?
                  [0-9]+
              )?
              |
              # Special values stored in registers after bad math
              inf(?:inity)?
              |
              nan
          )
          '''
NUMBER_FLAGS = reduce(operator.__or__,
                      {regex.VERBOSE,
                       regex.IGNORECASE},
                      0)


def parse_number(text):
    '''
    Convert entry buffer or stored text to a float.

    Raises ParseError on anything that isn't a whole number literal, so a
    lone sign or separator is rejected rather than read as zero.
    '''
    if text is None or regex.fullmatch(NUMBER, text,
                                       flags=NUMBER_FLAGS) is None:
        raise ParseError("Couldn't parse {0!r} as a number".format(text))
    return float(text.replace(',', '.'))


class CommandLexer:
    '''
    Lexer for the command line keystroke grammar.

    One lexeme per key press on a real calculator: a digit, the separator,
    the sign key, an operator key, a store or recall, a command word, or
    whitespace (the ENTER key).

    For consistency, for now, needs to be instantiated, despite holding no
    internal state.
    '''
    # ASCII spellings of the operator keys
    ALIASES = {
        '-': ops.BinaryOp.SUBTRACT.value,
        '*': ops.BinaryOp.MULTIPLY.value,
        '/': ops.BinaryOp.DIVIDE.value,
        '^': ops.BinaryOp.POWER.value,
        'root': ops.BinaryOp.ROOT.value,
        'sq': ops.UnaryOp.SQUARE.value,
        'sqrt': ops.UnaryOp.SQRT.value,
        'log': ops.UnaryOp.LOG10.value,
        'ln': ops.UnaryOp.LN.value,
        'alog': ops.UnaryOp.EXP10.value,
        'exp': ops.UnaryOp.EXP.value,
        'asin': ops.UnaryOp.ASIN.value,
        'acos': ops.UnaryOp.ACOS.value,
        'atan': ops.UnaryOp.ATAN.value,
        'pi': ops.NullaryOp.PI.value,
    }
    COMMANDS = frozenset({'drop', 'roll', 'vars'})

    # Longest first, so sin⁻¹ wins over sin. Alphabetic operators must not
    # be followed by another letter, so exp isn't e followed by xp.
    OPERATOR = r'(?:' + r'|'.join(
        regex.escape(symbol) + (r'(?![a-z])' if symbol[-1].isalpha() else '')
        for symbol
        in sorted(set(ops.symbols()) | set(ALIASES), key=len, reverse=True)
    ) + r')'
    STORE = r'>[A-Z]'
    RECALL = r'<[A-Z]'
    DIGIT = r'[0-9]'
    SEPARATOR = r'[.,]'
    SIGN = r'_'
    WORD = r'[a-z]+'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<operator>' + OPERATOR + r')|' \
             r'(?<store>' + STORE + r')|' \
             r'(?<recall>' + RECALL + r')|' \
             r'(?<digit>' + DIGIT + r')|' \
             r'(?<separator>' + SEPARATOR + r')|' \
             r'(?<sign>' + SIGN + r')|' \
             r'(?<word>' + WORD + r')|' \
             r'(?<space>' + SPACE + r')'
    FLAGS = regex.DOTALL

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Raises RPNError at the first thing that isn't a lexeme.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise RPNError("Couldn't lex {0}".format(line.strip()))

    def matchedgroups(self, match):
        '''
        Return the lexeme's kind and text.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def resolve(self, symbol):
        '''
        Translate an operator lexeme to its key label.
        '''
        return type(self).ALIASES.get(symbol, symbol)
