from os import isatty
from sys import stdin, stdout, exit
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession

from .util import RPNError
from .machine import Machine
from .lexer import Lexer
from .radix import format_value


logger = logging.getLogger(__name__)

REGISTERS = 'T', 'Z', 'Y', 'X'


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=None,
                                    # Registers and display mode
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Debatable. Interferes with X11 selection.
                                    mouse_support=True,
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def render_x(machine):
    '''
    Text of the X line: the entry being typed, else X in the display mode.
    '''
    if machine.input_mode and machine.current_input:
        return machine.current_display
    x = machine.stack[-1] if machine.stack else 0
    return format_value(x, machine.display_mode)


def render_registers(machine):
    '''
    T/Z/Y/X lines, X last, in the display mode. Unused registers are blank.
    '''
    values = machine.display_stack
    values = [None] * (len(REGISTERS) - len(values)) + values
    lines = []
    for register, value in zip(REGISTERS, values):
        if register == 'X':
            text = render_x(machine)
        elif value is None:
            text = ''
        else:
            text = format_value(value, machine.display_mode)
        lines.append('{}: {}'.format(register, text))
    return lines


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes matches and the operation they run.
        '''
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>')
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    groups = lexer.matchedgroups(match)
                    print(*groups.keys(), repr(match.group(0)), sep='\t')
            except RPNError as e:
                print(e.args[0], file=sys.stderr)

    def executor(self):
        '''
        Run machine (RPN calculator), printing X after every line.
        '''
        machine = self.machine
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        machine.feed(lexer.matchedgroups(match))
            # Abort entire rest of line
            except RPNError as e:
                logger.debug('Rejected line %r', line, exc_info=True)
                print(e.args[0], file=sys.stderr)
            if not self._interactive():
                print(render_x(machine))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def toolbar(self):
        lines = render_registers(self.machine)
        return '\n'.join(lines + ['[{}]'.format(self.machine.display_mode)])

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=self.toolbar)
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
        self.argument_parser.add_argument('-m', '--mode',
                                          choices=Machine.DISPLAY_MODES,
                                          default=Machine.DEFAULT_DISPLAY_MODE,
                                          help='initial display mode')
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
                                          expressions=stdin)

    def _interactive(self):
        return isinstance(self.args.expressions, InteractiveInput)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING,
                            format='%(name)s: %(message)s')
        self.machine = Machine(display_mode=self.args.mode)
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
