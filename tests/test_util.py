'''
Number text parsing and formatting.
'''

import math

from pytest import mark, raises

from hprpn.util import RPNError, format_number, parse_number, wrap_user_errors


@mark.parametrize('text, expected', [
    ('0', 0.0),
    ('15', 15.0),
    ('-15', -15.0),
    ('12.', 12.0),
    ('0.', 0.0),
    ('0.25', 0.25),
    ('-0.5', -0.5),
    ('.5', 0.5),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@mark.parametrize('text', ['', '-', '.', '-.', '1.2.3', '--1', 'inf', 'nan',
                           '1e5', ' 1'])
def test_parse_number_rejects(text):
    assert parse_number(text) is None


@mark.parametrize('value, expected', [
    (0.0, '0'),
    (-0.0, '0'),
    (15.0, '15'),
    (-8.0, '-8'),
    (15.7, '15.7'),
    (0.1 + 0.2, '0.30000000000000004'),
    (1e-5, '0.00001'),
    (1e-6, '0.000001'),
    (1e-7, '1e-7'),
    (1.5e-7, '1.5e-7'),
    (-2.5e-7, '-2.5e-7'),
    (1e-8, '1e-8'),
    (2.5e-10, '2.5e-10'),
    (1e16, '10000000000000000'),
    (2.0 ** 53, '9007199254740992'),
    (2.0 ** 60, '1152921504606847000'),
    (-2.0 ** 60, '-1152921504606847000'),
    (123456.789, '123456.789'),
    (1e21, '1e+21'),
    (1.5e22, '1.5e+22'),
    (math.inf, 'Error'),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_wrap_user_errors():
    @wrap_user_errors('Cannot halve {0!r}')
    def halve(value):
        return value / 2

    assert halve(3) == 1.5
    with raises(RPNError, match="Cannot halve 'x'"):
        halve('x')


def test_wrap_user_errors_passes_rpn_errors():
    @wrap_user_errors('Wrapped')
    def fail():
        raise RPNError('Original')

    with raises(RPNError, match='^Original$'):
        fail()
