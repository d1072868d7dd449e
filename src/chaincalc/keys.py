from functools import reduce
import operator

import regex

from .arithmetic import Operator
from .util import CalcError


class Lexer:
    '''
    Lexer for key presses, as typed or as named by a keyboard or keypad.

    Turns a line like ``5 × 3 enter`` into the logical keys the engine
    understands: ``5``, ``*``, ``3``, ``=``.
    '''
    DIGIT = r'[0-9]'
    POINT = r'\.'
    # Keyboard symbols, then keypad glyphs.
    OPERATOR = r'''
               [+\-*/]
               |
               [−×÷]
               |
               x
               '''
    EQUALS = r'''
             =
             |
             return
             |
             enter
             '''
    PERCENT = r'%'
    # No sign key on a keyboard; underscore stands in.
    NEGATE = r'''
             \+/-
             |
             ±
             |
             _
             |
             neg
             '''
    CLEAR = r'''
            ac
            |
            c
            |
            clear
            |
            delete
            |
            backspace
            |
            esc(?:ape)?
            '''
    SPACE = r'\s+'

    # All possible lexemes. Longest wins, so +/- is never + then -.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<point>' + POINT + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<equals>' + EQUALS + r')|' \
             r'(?<percent>' + PERCENT + r')|' \
             r'(?<negate>' + NEGATE + r')|' \
             r'(?<clear>' + CLEAR + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.IGNORECASE,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    # Logical key for each group, when not the matched text itself.
    LOGICAL = {
        'equals': '=',
        'negate': '+/-',
        'clear': 'AC',
    }

    def lex(self, line):
        '''
        Take a line and yield all lexemes.

        Raises a CalcError on the first bad one, after the good ones before it.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to an engine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return matched groups of a lexeme, by name.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    def logical(self, match):
        '''
        Return the logical key of a lexeme.
        '''
        (group, text), = self.matchedgroups(match).items()
        if group == 'operator':
            return Operator(text.lower()).value
        return type(self).LOGICAL.get(group, text)

    def keys(self, line):
        '''
        Yield the logical keys in a line, skipping whitespace.
        '''
        for match in self.lex(line):
            if self.isfeedable(match):
                yield self.logical(match)
