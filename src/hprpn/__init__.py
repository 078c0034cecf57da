'''
HP style four register RPN calculator.

The engine (Machine) models the calculator proper: typing a number key by key,
scientific notation entry, the T/Z/Y/X stack with its lift on enter and drop
on operate, undo, and the choice of decimal, binary, octal or hexadecimal
display. Anything that draws buttons or reads keys drives it from outside; a
small terminal front end (CLI) is included.

Keys are typed as text for the terminal, one line at a time, e.g.::

    $ hprpn -e "3 enter 4 +" "1e4 enter 2 ÷" "hex 255 enter"
    7
    5000
    0xFF
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine
from .radix import to_binary_string, to_octal_string, to_hex_string


__all__ = ('Machine', 'Lexer', 'CLI',
           'to_binary_string', 'to_octal_string', 'to_hex_string')
