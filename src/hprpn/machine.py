from functools import partial
import logging
import math
import operator

import regex

from .history import History, OPERATION, STACK_OPERATION
from .radix import DISPLAY_MODES
from .util import RPNError, format_number, parse_number, wrap_user_errors


logger = logging.getLogger(__name__)

_DIGITS = regex.compile(r'[0-9]+')


def _divide(left, right):
    '''
    Divide, with anything divided by zero being zero.
    '''
    if right == 0:
        return 0.0
    return left / right


class Machine:
    '''
    Four register RPN calculator engine, HP style.

    Holds the entry being typed, the T/Z/Y/X stack, an undo history and the
    display mode. Every operation runs to completion; conditions like an empty
    stack or a half-typed number make an operation a no-op rather than an
    error.

    Not safe for concurrent callers. Use one instance per session.
    '''

    STACK_DEPTH = 4
    HISTORY_LIMIT = 50
    DISPLAY_MODES = DISPLAY_MODES
    DEFAULT_DISPLAY_MODE = 'decimal'

    # Y on the left, X on the right.
    OPERATORS = {
        '+': operator.__add__,
        '-': operator.__sub__,
        '\N{MINUS SIGN}': operator.__sub__,
        '*': operator.__mul__,
        '\N{MULTIPLICATION SIGN}': operator.__mul__,
        '/': _divide,
        '\N{DIVISION SIGN}': _divide,
    }

    def __init__(self, display_mode=None):
        '''
        Create a machine with an empty stack, no entry and no history.

        :param display_mode: One of DISPLAY_MODES.
        '''
        self.stack = []
        self.history = History(type(self).HISTORY_LIMIT)
        self.display_mode = type(self).DEFAULT_DISPLAY_MODE
        self._reset_input()
        self.last_operation_was_enter = False
        if display_mode is not None:
            self.set_display_mode(display_mode)

    def _reset_input(self):
        self.current_input = ''
        self.input_mode = False
        self.eex_mode = False
        self.exponent = ''
        self.eex_just_entered = False

    # Entry

    def input_digit(self, digit):
        '''
        Type a digit, into the exponent when composing one.
        '''
        if _DIGITS.fullmatch(digit) is None:
            raise RPNError('Not a digit {!r}'.format(digit))
        if self.eex_mode:
            self.exponent += digit
            self.eex_just_entered = False
        elif not self.input_mode:
            self.current_input = digit
            self.input_mode = True
        elif self.current_input == '0':
            # Literal comparison; '0.0' keeps its zeros.
            self.current_input = digit
        else:
            self.current_input += digit
        self.last_operation_was_enter = False

    def input_decimal(self):
        '''
        Type a decimal point. Exponents are integral, so ignored there.
        '''
        if not self.eex_mode:
            if not self.input_mode:
                self.current_input = '0.'
                self.input_mode = True
            elif '.' not in self.current_input:
                self.current_input += '.'
        self.last_operation_was_enter = False

    def toggle_sign(self):
        '''
        Flip the sign of the exponent or, failing that, of the entry.
        '''
        if self.eex_mode:
            self.exponent = _toggled(self.exponent)
        elif self.input_mode and self.current_input:
            self.current_input = _toggled(self.current_input)

    def input_eex(self):
        '''
        Start typing a power of ten exponent for the entry.

        Without an entry, the mantissa defaults to 1.
        '''
        if not (self.input_mode and self.current_input):
            self.current_input = '1'
            self.input_mode = True
        self.eex_mode = True
        self.exponent = ''
        self.eex_just_entered = True
        self.last_operation_was_enter = False

    def delete_last_digit(self):
        '''
        Backspace. Leaves EEX mode once the exponent is empty.
        '''
        if self.eex_mode:
            if self.exponent:
                self.exponent = self.exponent[:-1]
            if not self.exponent:
                self.eex_mode = False
                self.eex_just_entered = False
        elif self.input_mode and self.current_input:
            self.current_input = self.current_input[:-1]
            if not self.current_input:
                self.input_mode = False

    def _resolve_input(self):
        '''
        Return value of the entry, None if it isn't a finite number.
        '''
        mantissa = parse_number(self.current_input)
        if mantissa is None:
            return None
        if not self.eex_mode:
            value = mantissa
        else:
            exponent = parse_number(self.exponent or '0')
            if exponent is None:
                return None
            try:
                value = mantissa * 10.0 ** exponent
            except OverflowError:
                return None
        if not math.isfinite(value):
            return None
        return value

    # Stack

    def _save_to_history(self, kind, name):
        self.history.save(kind, self.stack, self.current_input, name)

    def _lift(self, value):
        '''
        Push value, dropping T off the top when all registers are in use.
        '''
        if len(self.stack) == type(self).STACK_DEPTH:
            del self.stack[0]
        self.stack.append(value)

    def enter_number(self):
        '''
        Push the entry, or duplicate X when there is no entry.
        '''
        if self.input_mode and self.current_input:
            value = self._resolve_input()
            if value is None:
                logger.debug('Ignoring unparsable entry %r e %r',
                             self.current_input, self.exponent)
                return
            self._save_to_history(STACK_OPERATION, 'enter')
            self._lift(value)
            self._reset_input()
            logger.debug('Entered %r', value)
        elif self.stack:
            self._save_to_history(STACK_OPERATION, 'enter_duplicate')
            self._lift(self.stack[-1])
        else:
            return
        self.last_operation_was_enter = True

    @wrap_user_errors('No such operator {1!r}')
    def perform_operation(self, op):
        '''
        Replace Y and X with Y op X, entering any pending entry first.
        '''
        f = type(self).OPERATORS[op]
        if self.input_mode and self.current_input:
            self.enter_number()
        if len(self.stack) < 2:
            return
        left, right = self.stack[-2:]
        result = f(left, right)
        if not math.isfinite(result):
            logger.debug('Ignoring %r %s %r: not finite', left, op, right)
            return
        self._save_to_history(OPERATION, op)
        del self.stack[-2:]
        self.stack.append(result)
        self.last_operation_was_enter = False
        logger.debug('%r %s %r = %r', left, op, right, result)

    def drop_stack(self):
        '''
        Discard X.
        '''
        if not self.stack:
            return
        self._save_to_history(STACK_OPERATION, 'drop')
        self.stack.pop()
        self.last_operation_was_enter = False

    def swap_stack(self):
        '''
        Exchange X and Y.
        '''
        if len(self.stack) < 2:
            return
        self._save_to_history(STACK_OPERATION, 'swap')
        self.stack[-2:] = self.stack[-1], self.stack[-2]
        self.last_operation_was_enter = False

    # History

    def undo_last_operation(self):
        '''
        Restore stack and entry to before the last stack action.

        An exponent being typed at the time is not restored.
        '''
        item = self.history.pop()
        if item is not None:
            logger.debug('Undoing %s', item.operation)
            self.stack = list(item.stack_before)
            self._reset_input()
            self.current_input = item.input_before
            self.input_mode = item.input_before != ''
        self.last_operation_was_enter = False

    def clear_all(self):
        '''
        Clear stack, entry and history. The display mode stays.
        '''
        self.stack = []
        self._reset_input()
        self.history.clear()
        self.last_operation_was_enter = False

    # Display

    def set_display_mode(self, mode):
        if mode not in type(self).DISPLAY_MODES:
            raise RPNError('No such display mode {!r}'.format(mode))
        self.display_mode = mode

    def toggle_display_mode(self):
        '''
        Cycle decimal, binary, octal, hexadecimal, then back to decimal.
        '''
        modes = type(self).DISPLAY_MODES
        index = modes.index(self.display_mode)
        self.display_mode = modes[(index + 1) % len(modes)]

    @property
    def display_stack(self):
        '''
        Up to four values for the T/Z/Y/X registers, entry included.
        '''
        values = list(self.stack)
        if self.input_mode and self.current_input:
            values.append(parse_number(self.current_input) or 0.0)
        return values[-type(self).STACK_DEPTH:]

    @property
    def current_display(self):
        '''
        Text for the entry line: the entry being typed, or X.
        '''
        if self.input_mode and self.current_input:
            if self.eex_mode:
                return self.current_input + 'e' + self.exponent
            return self.current_input
        if self.stack:
            return format_number(self.stack[-1])
        return '0'

    # Keys

    def feed(self, groups):
        '''
        Run one lexeme on the machine.

        :param groups: Matched groups of a lexeme, as from Lexer.matchedgroups.
        '''
        if 'digit' in groups:
            self.input_digit(groups['digit'])
        elif 'decimal' in groups:
            self.input_decimal()
        elif 'operator' in groups:
            self.perform_operation(groups['operator'])
        elif 'command' in groups:
            type(self).COMMANDS[groups['command']](self)
        else:
            raise RPNError('Nothing to run in {!r}'.format(groups))

    # Key names to operations taking no argument.
    COMMANDS = {
        'enter': enter_number,
        'drop': drop_stack,
        'swap': swap_stack,
        'del': delete_last_digit,
        'chs': toggle_sign,
        'eex': input_eex,
        'undo': undo_last_operation,
        'clear': clear_all,
        'dec': partial(set_display_mode, mode='decimal'),
        'bin': partial(set_display_mode, mode='binary'),
        'oct': partial(set_display_mode, mode='octal'),
        'hex': partial(set_display_mode, mode='hexadecimal'),
        'base': toggle_display_mode,
    }

    # Terse aliases of oft used commands.
    SHORTHAND = {
        'e': 'eex',
        '_': 'chs',
    }
    for alias, name in SHORTHAND.items():
        COMMANDS[alias] = COMMANDS[name]
    del alias, name


def _toggled(text):
    if text.startswith('-'):
        return text[1:]
    return '-' + text
