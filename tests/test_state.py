'''
Pure transition tests
'''

from dataclasses import FrozenInstanceError

from chaincalc import state
from chaincalc.arithmetic import Operator
from chaincalc.state import Entry, Error, ERROR_MESSAGE
from chaincalc.util import CalcError

from pytest import mark, raises


def test_initial():
    s = state.initial()
    assert s == Entry(display='0', operand=None, operator=None, reset=False)
    assert not s.pending


def test_transitions_return_new_states():
    before = Entry(display='4')
    after = state.input_digit(before, '2')
    assert before.display == '4'
    assert after.display == '42'
    with raises(FrozenInstanceError):
        before.display = '7'


def test_digit_after_operator_starts_fresh():
    s = Entry(display='8', operand=8.0, operator=Operator.ADD, reset=True)
    s = state.input_digit(s, '3')
    assert s.display == '3'
    assert not s.reset
    assert s.operand == 8.0


def test_digit_replaces_leading_zero():
    assert state.input_digit(Entry(), '7').display == '7'
    assert state.input_digit(Entry(display='0.'), '7').display == '0.7'


@mark.parametrize('digit', ['a', '10', '', '.', '٣'])
def test_bad_digit(digit):
    with raises(CalcError):
        state.input_digit(Entry(), digit)


def test_single_decimal_point():
    s = state.input_decimal_point(Entry(display='1'))
    assert s.display == '1.'
    assert state.input_decimal_point(s) is s


def test_decimal_point_ignores_reset():
    s = Entry(display='8', operand=8.0, operator=Operator.ADD, reset=True)
    s = state.input_decimal_point(s)
    assert s.display == '8.'
    assert s.reset


def test_first_operator_stores_operand():
    s = state.input_operator(Entry(display='5'), Operator.MULTIPLY)
    assert s == Entry(display='5', operand=5.0,
                      operator=Operator.MULTIPLY, reset=True)


def test_operator_resolves_pending():
    s = Entry(display='3', operand=5.0, operator=Operator.ADD)
    s = state.input_operator(s, '×')
    assert s == Entry(display='8', operand=8.0,
                      operator=Operator.MULTIPLY, reset=True)


def test_bad_operator():
    with raises(CalcError):
        state.input_operator(Entry(), '^')


def test_operator_division_by_zero():
    s = Entry(display='0', operand=5.0, operator=Operator.DIVIDE)
    assert state.input_operator(s, Operator.ADD) == Error(ERROR_MESSAGE)


def test_equals_resolves_and_ends_chain():
    s = Entry(display='2', operand=8.0, operator=Operator.MULTIPLY)
    s = state.input_equals(s)
    assert s == Entry(display='16', operand=None, operator=None, reset=False)


def test_equals_keeps_reset():
    s = Entry(display='5', operand=5.0, operator=Operator.ADD, reset=True)
    s = state.input_equals(s)
    assert s.display == '10'
    assert s.reset


def test_equals_without_pending():
    s = Entry(display='9')
    assert state.input_equals(s) is s
    s = Entry(display='9', operand=9.0)
    assert state.input_equals(s) is s


def test_equals_division_by_zero():
    s = Entry(display='0', operand=5.0, operator=Operator.DIVIDE)
    assert isinstance(state.input_equals(s), Error)


def test_percent_and_sign_keep_chain():
    s = Entry(display='50', operand=4.0, operator=Operator.ADD)
    s = state.input_percent(s)
    assert s == Entry(display='0.5', operand=4.0, operator=Operator.ADD)
    s = state.input_sign_toggle(s)
    assert s == Entry(display='-0.5', operand=4.0, operator=Operator.ADD)


def test_precision():
    s = Entry(display='3', operand=1.0, operator=Operator.DIVIDE)
    assert state.input_equals(s, precision=6).display == '0.333333'
    assert state.input_equals(s).display == '0.3333333333333333'


@mark.parametrize('transition, args', [
    (state.input_digit, ('1',)),
    (state.input_decimal_point, ()),
    (state.input_operator, (Operator.ADD,)),
    (state.input_equals, ()),
    (state.input_percent, ()),
    (state.input_sign_toggle, ()),
])
def test_error_latches(transition, args):
    error = Error()
    assert transition(error, *args) is error


def test_clear():
    assert state.clear(Error()) == Entry()
    s = Entry(display='3.5', operand=1.0, operator=Operator.ADD, reset=True)
    assert state.clear(s) == Entry()


@mark.parametrize('display', ['1e+16', '1e-05', 'inf', '-inf', 'nan'])
def test_no_typing_onto_results(display):
    s = Entry(display=display)
    assert not s.typeable
    assert state.input_decimal_point(s) is s
    assert state.input_digit(s, '3').display == '3'


def test_typeable():
    assert Entry(display='-0.5').typeable
    assert Entry(display='12.').typeable
