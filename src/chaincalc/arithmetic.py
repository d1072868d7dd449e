'''
Binary operators, their evaluation, and display formatting of results.
'''

from enum import Enum
import operator

from .util import DivisionByZero


class Operator(Enum):
    '''
    Pending binary operation of a chain, keyed by its ASCII symbol.

    Button glyphs (−, ×, ÷) are accepted as aliases on lookup.
    '''

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

    @classmethod
    def _missing_(cls, value):
        return {
            '\N{MINUS SIGN}': cls.SUBTRACT,
            '\N{MULTIPLICATION SIGN}': cls.MULTIPLY,
            'x': cls.MULTIPLY,
            'X': cls.MULTIPLY,
            '\N{DIVISION SIGN}': cls.DIVIDE,
        }.get(value)


FUNCTIONS = {
    Operator.ADD: operator.__add__,
    Operator.SUBTRACT: operator.__sub__,
    Operator.MULTIPLY: operator.__mul__,
    Operator.DIVIDE: operator.__truediv__,
}


def evaluate(left, right, op):
    '''
    Apply op to two floats.

    :raises DivisionByZero: dividing by zero, of either sign.
    '''
    if op is Operator.DIVIDE and right == 0:
        raise DivisionByZero('{} / {}'.format(left, right))
    return FUNCTIONS[op](left, right)


def format_number(value, precision=None):
    '''
    Render a float the way a %g conversion would, without padding.

    With no precision, use the shortest digits that read back as the same
    float. Otherwise, exactly '%.<precision>g'.
    '''
    if precision is not None:
        return '{:.{}g}'.format(value, precision)
    # repr() already switches to exponents past 1e16 and under 1e-4.
    text = repr(float(value))
    if text.endswith('.0'):
        text = text[:-2]
    return text
