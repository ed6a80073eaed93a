"""
LineBASIC - scanner.py
Token scanner for program and command lines

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io

from . import error
from . import tokens as tk
from .tokens import DIGITS, LETTERS


class TokenScanner(object):
    """Restartable token stream over a line of text."""

    # whitespace
    blanks = tk.BLANKS

    def __init__(self, text=u''):
        """Initialise the scanner."""
        self.set_input(text)

    def __repr__(self):
        """Debugging representation."""
        pos = self._stream.tell()
        rest = self._stream.read()
        self._stream.seek(pos)
        return '<TokenScanner saved=%r rest=%r>' % (self._saved, rest)

    def set_input(self, text):
        """Point the scanner at a new line; pushed-back tokens are dropped."""
        self._stream = io.StringIO(text)
        # stack of tokens pushed back with save_token
        self._saved = []

    def peek(self):
        """Peek next char in stream."""
        pos = self._stream.tell()
        d = self._stream.read(1)
        self._stream.seek(pos)
        return d

    def skip_blank(self):
        """Skip whitespace, then peek next."""
        while True:
            d = self.peek()
            # blanks must not include ''
            if d == u'' or d not in self.blanks:
                return d
            self._stream.read(1)

    def _read_while(self, in_range):
        """Read as long as chars are in range."""
        out = []
        while True:
            d = self.peek()
            if d == u'' or d not in in_range:
                return u''.join(out)
            out.append(self._stream.read(1))

    def has_more_tokens(self):
        """Check whether any token remains, saved or unread."""
        return bool(self._saved) or self.skip_blank() != u''

    def next_token(self):
        """Read the next token; empty string at end of line."""
        if self._saved:
            return self._saved.pop()
        d = self.skip_blank()
        if not d:
            return u''
        if d in DIGITS:
            return self._read_while(DIGITS)
        if d in LETTERS:
            return self._read_while(tk.NAME_CHARS)
        # any other character is a single-char operator
        return self._stream.read(1)

    def save_token(self, token):
        """Push a token back onto the stream."""
        self._saved.append(token)

    @staticmethod
    def get_token_type(token):
        """Classify a token."""
        if not token:
            return tk.EOF
        if token[0] in DIGITS:
            return tk.NUMBER
        if token[0] in LETTERS:
            return tk.WORD
        return tk.OPERATOR

    def require_end(self, err=error.STX):
        """Raise an error if any token remains."""
        error.throw_if(self.has_more_tokens(), err)

    def read_line_number(self):
        """Read a line number token, or raise syntax error."""
        token = self.next_token()
        error.throw_if(self.get_token_type(token) != tk.NUMBER)
        return int(token)
