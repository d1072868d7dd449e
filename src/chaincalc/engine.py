from functools import partial

from . import state as transitions
from .arithmetic import Operator
from .util import CalcError, wrap_user_errors


class Engine:
    '''
    Chaining four-function calculator.

    Holds one state and replaces it on each key. Operators evaluate
    left to right as they are pressed; there is no precedence. Dividing by
    zero latches an error that only clear() gets out of.

    Not thread safe; feed it from one place.
    '''

    # None: shortest round-trip digits. An int: that many %g digits.
    DEFAULT_PRECISION = None

    def __init__(self, precision=None):
        '''
        Create a cleared calculator.

        :param precision: Significant digits of results, as in %g.
        '''
        if precision is None:
            precision = type(self).DEFAULT_PRECISION
        elif precision < 0:
            raise CalcError('Bad precision {}'.format(precision))
        self.precision = precision
        self.state = transitions.initial()

    def input_digit(self, digit):
        self.state = transitions.input_digit(self.state, digit)

    def input_decimal_point(self):
        self.state = transitions.input_decimal_point(self.state)

    def input_operator(self, op):
        self.state = transitions.input_operator(self.state, op,
                                                precision=self.precision)

    def input_equals(self):
        self.state = transitions.input_equals(self.state,
                                              precision=self.precision)

    def input_percent(self):
        self.state = transitions.input_percent(self.state,
                                               precision=self.precision)

    def input_sign_toggle(self):
        self.state = transitions.input_sign_toggle(self.state,
                                                   precision=self.precision)

    def clear(self):
        self.state = transitions.clear(self.state)

    @property
    def display_value(self):
        return self.state.display

    def get_display_value(self):
        return self.display_value

    def is_error(self):
        return isinstance(self.state, transitions.Error)

    @wrap_user_errors('Cannot press {1}')
    def feed(self, key):
        '''
        Run one logical key: a digit, '.', an operator symbol, '=', '%',
        '+/-', or 'AC'.
        '''
        if key in transitions.DIGITS:
            return self.input_digit(key)
        type(self).KEYS[key](self)

    # Logical keys other than digits.
    KEYS = {
        '.': input_decimal_point,
        '=': input_equals,
        '%': input_percent,
        '+/-': input_sign_toggle,
        'AC': clear,
    }
    for op in Operator:
        KEYS[op.value] = partial(input_operator, op=op)
    del op
