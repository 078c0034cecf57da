'''
Typing numbers: digits, decimal point, sign, exponent and backspace.
'''

from pytest import raises

from hprpn.util import RPNError


def test_first_digit_starts_entry(machine):
    machine.input_digit('5')
    assert machine.current_input == '5'
    assert machine.input_mode
    assert machine.stack == []


def test_leading_zero_replaced(press, machine):
    press('0', '0', '7')
    assert machine.current_input == '7'


def test_zero_point_zero_keeps_zeros(press, machine):
    press('0', '.', '0', '1')
    assert machine.current_input == '0.01'


def test_multi_digit_key(machine):
    machine.input_digit('10')
    machine.input_digit('20')
    assert machine.current_input == '1020'


def test_bad_digit(machine):
    with raises(RPNError, match='Not a digit'):
        machine.input_digit('x')
    assert machine.current_input == ''
    assert not machine.input_mode


def test_decimal_starts_entry_with_zero(machine):
    machine.input_decimal()
    assert machine.current_input == '0.'
    assert machine.input_mode


def test_second_decimal_ignored(press, machine):
    press('1', '.', '2', '.', '3')
    assert machine.current_input == '1.23'


def test_decimal_ignored_in_exponent(press, machine):
    press('2', 'eex', '3')
    machine.last_operation_was_enter = True
    machine.input_decimal()
    assert machine.exponent == '3'
    assert machine.current_input == '2'
    assert not machine.last_operation_was_enter


def test_toggle_sign(press, machine):
    press('1', '2')
    machine.toggle_sign()
    assert machine.current_input == '-12'
    machine.toggle_sign()
    assert machine.current_input == '12'


def test_toggle_sign_without_entry(press, machine):
    press('4', 'enter')
    machine.toggle_sign()
    assert machine.current_input == ''
    assert machine.stack == [4]
    # Flag untouched
    assert machine.last_operation_was_enter


def test_toggle_sign_of_exponent(press, machine):
    press('5', 'eex', '3', 'chs')
    assert machine.exponent == '-3'
    assert machine.current_input == '5'
    assert machine.current_display == '5e-3'


def test_eex_from_nothing_defaults_mantissa(machine):
    machine.input_eex()
    assert machine.current_input == '1'
    assert machine.input_mode
    assert machine.eex_mode
    assert machine.eex_just_entered
    assert machine.exponent == ''
    assert machine.current_display == '1e'


def test_eex_digit_clears_just_entered(press, machine):
    press('eex', '4')
    assert not machine.eex_just_entered
    assert machine.exponent == '4'
    assert machine.current_display == '1e4'


def test_eex_keeps_mantissa(press, machine):
    press('2', '.', '5', 'eex')
    assert machine.current_input == '2.5'
    assert machine.eex_mode


def test_delete_digit(press, machine):
    press('1', '2', '3', 'del')
    assert machine.current_input == '12'
    assert machine.input_mode


def test_delete_to_nothing_leaves_input_mode(press, machine):
    press('5', 'chs', 'del')
    assert machine.current_input == '-'
    assert machine.input_mode
    machine.delete_last_digit()
    assert machine.current_input == ''
    assert not machine.input_mode


def test_delete_without_entry(press, machine):
    press('8', 'enter', 'del')
    assert machine.stack == [8]
    assert machine.current_input == ''
    assert not machine.input_mode


def test_delete_exponent_then_leave_eex(press, machine):
    press('7', 'eex', '1', '2', 'del')
    assert machine.exponent == '1'
    assert machine.eex_mode
    machine.delete_last_digit()
    assert machine.exponent == ''
    assert not machine.eex_mode
    assert machine.current_input == '7'
    assert machine.current_display == '7'
    machine.delete_last_digit()
    assert machine.current_input == ''
    assert not machine.input_mode


def test_delete_in_empty_exponent_leaves_eex(press, machine):
    press('3', 'eex', 'del')
    assert not machine.eex_mode
    assert machine.current_input == '3'


def test_digit_clears_enter_flag(press, machine):
    press('5', 'enter')
    assert machine.last_operation_was_enter
    press('3')
    assert not machine.last_operation_was_enter


def test_current_display(press, machine):
    assert machine.current_display == '0'
    press('1', '5', '.', '5')
    assert machine.current_display == '15.5'
    press('enter')
    assert machine.current_display == '15.5'
    press('2', 'enter', '+')
    assert machine.current_display == '17.5'


def test_display_stack_includes_entry(press, machine):
    press('1', 'enter', '2', 'enter', '3', 'enter', '4', 'enter', '5')
    assert machine.display_stack == [2, 3, 4, 5]
    assert machine.stack == [1, 2, 3, 4]


def test_display_stack_partial_entry(press, machine):
    press('chs')
    assert machine.display_stack == []
    press('7', 'chs', 'del')
    assert machine.current_input == '-'
    assert machine.display_stack == [0]


def test_eex_clears_enter_flag(press, machine):
    press('5', 'enter')
    assert machine.last_operation_was_enter
    machine.input_eex()
    assert not machine.last_operation_was_enter
    assert machine.current_input == '1'
    assert machine.stack == [5]


def test_current_display_small_value_in_exponent_form(press, machine):
    press('1', 'eex', '7', 'chs', 'enter')
    assert machine.current_display == '1e-7'
    press('1', 'eex', '6', 'chs', 'enter')
    assert machine.current_display == '0.000001'
