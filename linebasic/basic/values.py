"""
LineBASIC - values.py
Integer arithmetic, comparisons and conversions

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import re

from .base import error


# range of values accepted by INPUT
INT_MIN = -2**31
INT_MAX = 2**31 - 1

# optional sign followed by decimal digits
_INT_LITERAL = re.compile(u'[+-]?[0-9]+\\Z')


def from_repr(text):
    """Convert an integer literal to int; None if invalid or out of range."""
    if not _INT_LITERAL.match(text):
        return None
    value = int(text)
    if not (INT_MIN <= value <= INT_MAX):
        return None
    return value


###############################################################################
# arithmetic

def neg(num):
    """Negation (unary -)."""
    return -num

def pos(num):
    """Unary +."""
    return num

def add(left, right):
    """Add two numbers."""
    return left + right

def sub(left, right):
    """Subtract two numbers."""
    return left - right

def mul(left, right):
    """Left*right."""
    return left * right

def div(left, right):
    """Integer division, rounding toward zero."""
    error.throw_if(right == 0, error.DIVISION_BY_ZERO)
    # BASIC division rounds to zero, Python's floordiv to -inf
    if (left >= 0) == (right >= 0):
        return left // right
    return -(abs(left) // abs(right))

def mod_(left, right):
    """Left modulo right, with the sign of the dividend."""
    error.throw_if(right == 0, error.DIVISION_BY_ZERO)
    return left - right * div(left, right)


###############################################################################
# comparisons

def eq(left, right):
    """True if left == right."""
    return left == right

def neq(left, right):
    """True if left != right."""
    return left != right

def gt(left, right):
    """Ordering: True if left > right."""
    return left > right

def gte(left, right):
    """Ordering: True if left >= right."""
    return left >= right

def lt(left, right):
    """Ordering: True if left < right."""
    return left < right

def lte(left, right):
    """Ordering: True if left <= right."""
    return left <= right
