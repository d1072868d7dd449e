from os import path
import sys
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalcError
from .engine import Engine
from .keys import Lexer


def _precision(text):
    '''
    Parse a %g precision: a non-negative int.
    '''
    precision = int(text)
    if precision < 0:
        raise ArgumentTypeError('must not be negative: {}'.format(precision))
    return precision


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def __iter__(self):
        history = None
        if self.history:
            history = FileHistory(path.expanduser(self.history))
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
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.chaincalc_history'

    def dumper(self):
        '''
        Dump all lexemes matches and their logical keys.
        '''
        lexer = Lexer()
        print('[group]\t<repr(lexeme)>\t<key>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                if not lexer.isfeedable(match):
                    continue
                groups = lexer.matchedgroups(match)
                print(*groups.keys(),
                      repr(match.group(0)),
                      lexer.logical(match),
                      sep='\t')

    def executor(self):
        '''
        Run the calculator, printing the display after each line.
        '''
        engine = Engine(precision=self.args.precision)
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for key in lexer.keys(line):
                    engine.feed(key)
                    if self.args.verbose:
                        print(key, engine.display_value, sep='\t',
                              file=sys.stderr)
            # Abort entire rest of line
            except CalcError as e:
                print(e.args[0], file=sys.stderr)
                if self.args.verbose and len(e.args) > 1:
                    print(repr(e.args[1]), file=sys.stderr)
            print(engine.display_value)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return an interactive session instead of stdin...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=self.args.history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Chaining four-function calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=_precision,
                                          default=Engine.DEFAULT_PRECISION,
                                          help='significant digits, as %%g')
        self.argument_parser.add_argument('--history',
                                          default=self.HISTORY_FILE,
                                          help='interactive history file')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
        except CalcError as e:
            print(e.args[0], file=sys.stderr)
            sys.exit(2)
