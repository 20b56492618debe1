from os import isatty, path
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import RPNError, wrap_user_errors
from .engine import CalculatorEngine
from .lexer import CommandLexer
from .logging_config import setup_logging
from .storage import FileStorage
from . import ops


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history_file=None):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        history = None
        if self.history_file:
            history = FileHistory(path.expanduser(self.history_file))
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    history=history,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.

    Each line is a sequence of key presses; the stack is printed after each.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.rpn4_history'

    def _operator(self, symbol):
        '''
        Press an operator key. Pending entry is pushed first.
        '''
        label = self.lexer.resolve(symbol)
        self.engine.enter()
        if ops.lookup(ops.BinaryOp, label) is not None:
            self.engine.binop(label)
        elif ops.lookup(ops.UnaryOp, label) is not None:
            self.engine.unop(label)
        else:
            self.engine.nilop(label)

    def _store(self, lexeme):
        self.engine.enter()
        self.engine.set_address(lexeme[1:])
        self.engine.set_var()

    def _recall(self, lexeme):
        self.engine.enter()
        self.engine.set_address(lexeme[1:])
        self.engine.get_var()

    def _word(self, word):
        if word not in self.lexer.COMMANDS:
            raise RPNError('Unknown command {0}'.format(word))
        if word == 'vars':
            print(self.engine.var_string())
            return
        self.engine.enter()
        if word == 'drop':
            self.engine.drop()
        elif word == 'roll':
            self.engine.roll()

    @wrap_user_errors('Cannot run {2!r}')
    def feed(self, kind, lexeme):
        '''
        Run one lexeme on the calculator.
        '''
        if kind == 'digit':
            self.engine.entry_add_num(lexeme)
        elif kind == 'separator':
            self.engine.entry_add_comma()
        elif kind == 'sign':
            self.engine.entry_change_sign()
        elif kind == 'space':
            self.engine.enter()
        elif kind == 'operator':
            self._operator(lexeme)
        elif kind == 'store':
            self._store(lexeme)
        elif kind == 'recall':
            self._recall(lexeme)
        elif kind == 'word':
            self._word(lexeme)

    def executor(self):
        '''
        Run calculator on the input lines, saving on the way out.
        '''
        self.engine = CalculatorEngine(FileStorage(self.args.file))
        self.lexer = CommandLexer()
        for line in self.args.expressions:
            try:
                for match in self.lexer.lex(line):
                    for kind, lexeme in self.lexer.matchedgroups(match).items():
                        self.feed(kind, lexeme)
                # End of line is ENTER
                self.engine.enter()
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                logger.debug('Line %r failed', line, exc_info=True)
                print(e.args[0], file=sys.stderr)
            print(self.engine.stack_string())
        if self.args.save:
            self.engine.exit()

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(CommandLexer.LEXEME)

    def _prompting_input(self):
        '''
        Return prompting input if either:

        - prompt explicitly specified.
        - both stdin/out are a tty

        Otherwise stdin.
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=self.HISTORY_FILE)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-f', '--file',
                                          help='state file (default: '
                                               '$RPN4_FILE or ~/.rpn4.clc)')
        self.argument_parser.add_argument('--no-save',
                                          action='store_false',
                                          dest='save',
                                          help="don't save state on exit")
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-G', '--raw-grammar',
                                          action='store_const',
                                          const=self.raw_grammar,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        setup_logging(logging.DEBUG if self.args.verbose else logging.WARNING)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except (RPNError, OSError) as e:
            print(e, file=sys.stderr)
            exit(2)
        except KeyboardInterrupt:
            engine = getattr(self, 'engine', None)
            if engine is not None and self.args.save:
                engine.exit()
            exit(1)
