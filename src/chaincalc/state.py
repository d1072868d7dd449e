'''
Calculator state, and the pure transitions between states.

A calculator is either building an entry, or latched on an error. Every
transition takes a state and returns the next one; an Error state comes back
as is from all of them, except clear.
'''

from dataclasses import dataclass, replace
from functools import wraps
from typing import Optional

from .arithmetic import Operator, evaluate, format_number
from .util import CalcError, DivisionByZero


ERROR_MESSAGE = 'Error: Division by Zero'
DIGITS = frozenset('0123456789')
# Characters of a display that more keys can be typed onto.
TYPEABLE = DIGITS | {'-', '.'}


@dataclass(frozen=True)
class Entry:
    '''
    Number being shown, and the chain waiting on it.
    '''
    display: str = '0'
    operand: Optional[float] = None
    operator: Optional[Operator] = None
    # Next digit starts a new display instead of appending.
    reset: bool = False

    @property
    def value(self):
        return float(self.display)

    @property
    def pending(self):
        return self.operand is not None and self.operator is not None

    @property
    def typeable(self):
        '''
        False for results shown as 1e+16, inf or nan.
        '''
        return set(self.display) <= TYPEABLE


@dataclass(frozen=True)
class Error:
    message: str = ERROR_MESSAGE

    @property
    def display(self):
        return self.message


def initial():
    return Entry()


def _entry_only(transition):
    '''
    Decorator making a transition a no-op on an Error state.
    '''
    @wraps(transition)
    def wrapper(state, *args, **kwargs):
        if isinstance(state, Error):
            return state
        return transition(state, *args, **kwargs)
    return wrapper


@_entry_only
def input_digit(state, digit):
    if digit not in DIGITS:
        raise CalcError('Not a digit: {}'.format(repr(digit)))
    if state.reset or not state.typeable:
        return replace(state, display=digit, reset=False)
    elif state.display == '0':
        return replace(state, display=digit)
    return replace(state, display=state.display + digit)


@_entry_only
def input_decimal_point(state):
    # Ignores reset: after an operator, the point lands on the old display.
    if '.' in state.display or not state.typeable:
        return state
    return replace(state, display=state.display + '.')


@_entry_only
def input_operator(state, op, precision=None):
    '''
    Resolve any pending operation against the display, then wait on op.

    Division by zero moves to Error, discarding op.
    '''
    if not isinstance(op, Operator):
        try:
            op = Operator(op)
        except ValueError:
            raise CalcError('Not an operator: {}'.format(repr(op))) from None
    value = state.value
    if state.pending:
        try:
            result = evaluate(state.operand, value, state.operator)
        except DivisionByZero:
            return Error()
        state = replace(state,
                        display=format_number(result, precision),
                        operand=result)
    else:
        state = replace(state, operand=value)
    return replace(state, operator=op, reset=True)


@_entry_only
def input_equals(state, precision=None):
    '''
    Resolve the pending operation, if any, ending the chain.

    Leaves reset alone.
    '''
    if not state.pending:
        return state
    try:
        result = evaluate(state.operand, state.value, state.operator)
    except DivisionByZero:
        return Error()
    return replace(state,
                   display=format_number(result, precision),
                   operand=None,
                   operator=None)


@_entry_only
def input_percent(state, precision=None):
    return replace(state, display=format_number(state.value / 100, precision))


@_entry_only
def input_sign_toggle(state, precision=None):
    return replace(state, display=format_number(-state.value, precision))


def clear(state=None):
    '''
    Back to the initial state, from anywhere, Error included.
    '''
    return initial()
