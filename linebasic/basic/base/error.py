"""
LineBASIC - error.py
Error constants and exceptions

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

# error constants
SYNTAX_ERROR = 2
UNDEFINED_LINE_NUMBER = 8
DIVISION_BY_ZERO = 11
UNDEFINED_VARIABLE = 13
INVALID_NUMBER = 14

# shorthand
STX = SYNTAX_ERROR


class Interrupt(Exception):
    """Base type for exceptions."""

    message = u''

    def __repr__(self):
        """String representation of exception."""
        return self.message

    def get_message(self):
        """Error message."""
        return self.message


class Exit(Interrupt):
    """Exit interpreter."""
    message = u'Exit'


class BASICError(Interrupt):
    """Runtime error."""

    default_message = u'Unprintable error'
    messages = {
        2: u'SYNTAX ERROR',
        8: u'LINE NUMBER ERROR',
        11: u'DIVIDE BY ZERO',
        13: u'VARIABLE NOT DEFINED',
        14: u'INVALID NUMBER',
    }

    def __init__(self, value):
        """Initialise error."""
        Interrupt.__init__(self)
        self.err = value
        try:
            self.message = self.messages[self.err]
        except KeyError:
            self.message = self.default_message

    def __str__(self):
        return self.message


def throw_if(bool, err=STX):
    """Raise error if condition is met."""
    if bool:
        raise BASICError(err)
