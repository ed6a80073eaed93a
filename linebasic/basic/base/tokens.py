"""
LineBASIC - tokens.py
BASIC keywords and token classes

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import string


# character classes
DIGITS = string.digits
UPPERCASE = string.ascii_uppercase
LOWERCASE = UPPERCASE.lower()
LETTERS = UPPERCASE + LOWERCASE
ALPHANUMERIC = LETTERS + DIGITS

# allowable as chars 2.. in a word (first char must be a letter)
NAME_CHARS = ALPHANUMERIC + u'_'
# token separators
BLANKS = u' \t\r\n'

# token types
EOF = u'EOF'
NUMBER = u'NUMBER'
WORD = u'WORD'
OPERATOR = u'OPERATOR'

# keywords, compared after uppercasing
REM = u'REM'
LET = u'LET'
PRINT = u'PRINT'
INPUT = u'INPUT'
END = u'END'
GOTO = u'GOTO'
IF = u'IF'
THEN = u'THEN'
LIST = u'LIST'
CLEAR = u'CLEAR'
RUN = u'RUN'
QUIT = u'QUIT'
MOD = u'MOD'

# keywords that may start a stored program line
STATEMENTS = (REM, LET, PRINT, INPUT, END, GOTO, IF)
# keywords accepted in direct mode
COMMANDS = (LET, PRINT, INPUT, LIST, CLEAR, RUN, GOTO, IF, REM, END, QUIT)
KEYWORDS = frozenset(COMMANDS + (THEN, MOD))

# operator characters
O_PLUS = u'+'
O_MINUS = u'-'
O_TIMES = u'*'
O_DIV = u'/'
O_EQ = u'='
O_LT = u'<'
O_GT = u'>'
O_LPAREN = u'('
O_RPAREN = u')'

# combined relational operators
O_LE = O_LT + O_EQ
O_GE = O_GT + O_EQ
O_NE = O_LT + O_GT
