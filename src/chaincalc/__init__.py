'''
Chaining four-function calculator.

Works like the pocket kind: every operator resolves what came before it, so
5 + 3 × 2 = is 16, not 11. Dividing by zero shows an error that only AC
clears.

Feed it key presses, either through the Engine API, or as lines of keys
(5+3*2=, or 5 × 3 enter) through the command line.
'''

from .cli import CLI
from .keys import Lexer
from .engine import Engine
from .arithmetic import Operator


__all__ = 'Engine', 'Operator', 'Lexer', 'CLI'
