from decimal import Decimal
from functools import wraps
import math

import regex


# Entry grammar: optional sign, digits, optional point, digits. Not both
# sides of the point empty.
_NUMBER = regex.compile(r'-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)')

# Decimal exponents (point position) shown positionally, (-6, 21].
# Outside, 1e-7 and 1e+21 are shown in exponent form.
_POSITIONAL_MIN = -6
_POSITIONAL_MAX = 21


class RPNError(Exception):
    pass


def wrap_user_errors(fmt):
    '''
    Decorator that converts unexpected exceptions into RPNErrors.

    Passes through RPNErrors.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except RPNError:
                raise
            except Exception as e:
                raise RPNError(fmt.format(*args, **kwargs), e)
        return wrapper
    return decorator


def parse_number(text):
    '''
    Parse entry text into a float.

    Returns None when the text is not a complete number (``''``, ``'-'``,
    ``'-.'``, ...).
    '''
    if not text or _NUMBER.fullmatch(text) is None:
        return None
    return float(text)


def format_number(value):
    '''
    Render a number the way the decimal display shows it.

    Shortest round-trip digits. Integral values have no fractional part,
    zeros past the shortest digits (2**60 is ``1152921504606847000``).
    Below 1e-6 and from 1e21 on, exponent form (``1e-7``, ``1.5e+21``).
    '''
    if not math.isfinite(value):
        return 'Error'
    if value == 0:
        # Also -0.0
        return '0'
    sign = '-' if value < 0 else ''
    shortest = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = ''.join(map(str, shortest.digits))
    # Position of the point relative to the first digit: 0.digits × 10**point
    point = shortest.exponent + len(digits)
    if len(digits) <= point <= _POSITIONAL_MAX:
        return sign + digits + '0' * (point - len(digits))
    if 0 < point <= _POSITIONAL_MAX:
        return sign + digits[:point] + '.' + digits[point:]
    if _POSITIONAL_MIN < point <= 0:
        return sign + '0.' + '0' * -point + digits
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += '.' + digits[1:]
    return '{}{}e{:+d}'.format(sign, mantissa, point - 1)
