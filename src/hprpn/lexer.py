from functools import reduce
import operator

import regex

from .util import RPNError
from .machine import Machine


class Lexer:
    '''
    Lexer for calculator keys typed as text, e.g. ``12.5 e 3 enter 4 ×``.

    Every lexeme is one key press. For consistency, needs to be instantiated,
    despite holding no internal state.
    '''
    # One digit key; 12 is two presses.
    DIGIT = r'[0-9]'
    DECIMAL = r'\.'

    OPERATOR = r'(?:' + r'|'.join(map(regex.escape, Machine.OPERATORS)) + r')'
    # Leftmost-longest matching keeps 'enter' from lexing as 'e' 'nter'.
    COMMAND = r'(?:' + r'|'.join(map(regex.escape, Machine.COMMANDS)) + r')'
    SPACE = r'\s+'

    # Immediate, as in not part of a number being typed
    IMMEDIATE = r'(?<operator>' + OPERATOR + r')|' \
                r'(?<command>' + COMMAND + r')|' \
                r'(?<space>' + SPACE + r')'
    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<decimal>' + DECIMAL + r')|' \
             r'(?<immediate>' + IMMEDIATE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Raises RPNError on the first bad lexeme, having yielded those before.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise RPNError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return matched named groups, other than the immediate wrapper.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value and key != 'immediate'}
