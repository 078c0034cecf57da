'''
Alternate base rendering of stack values.

Only the integer part is shown, truncated toward zero. Negative values are
shown as their 32-bit two's-complement bit pattern, the way a fixed-width
register would hold them. Used for display only; stored values never change.
'''

import math

from .util import format_number, wrap_user_errors


DISPLAY_MODES = 'decimal', 'binary', 'octal', 'hexadecimal'

ERROR = 'Error'

_WORD = 1 << 32


def _to_base_string(value, spec, prefix):
    if not math.isfinite(value):
        return ERROR
    if value == 0:
        return prefix + '0'
    integral = math.trunc(value)
    if integral < 0:
        integral %= _WORD
    return prefix + format(integral, spec)


def to_binary_string(value):
    '''
    Render integer part of value in base 2, e.g. -8 to 0b111...1000.
    '''
    return _to_base_string(value, 'b', '0b')


def to_octal_string(value):
    return _to_base_string(value, 'o', '0o')


def to_hex_string(value):
    '''
    Render integer part of value in base 16, uppercase digits.
    '''
    return _to_base_string(value, 'X', '0x')


FORMATTERS = {
    'decimal': format_number,
    'binary': to_binary_string,
    'octal': to_octal_string,
    'hexadecimal': to_hex_string,
}


@wrap_user_errors('No such display mode {1!r}')
def format_value(value, mode):
    '''
    Render a stack value for the given display mode.
    '''
    return FORMATTERS[mode](value)
