"""
LineBASIC - scalars.py
Scalar variable management

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .base import error


class Scalars(object):
    """Scalar variables."""

    def __init__(self):
        """Initialise scalars."""
        self.clear()

    def __contains__(self, varname):
        """Check if a scalar has been defined."""
        return varname in self._vars

    def __iter__(self):
        """Return an iterable over all scalar names."""
        return iter(self._vars)

    def __len__(self):
        return len(self._vars)

    def __repr__(self):
        """Debugging representation of variable dictionary."""
        return '\n'.join('%s: %s' % (n, v) for n, v in sorted(self._vars.items()))

    def clear(self):
        """Clear scalar variables."""
        self._vars = {}

    def set(self, name, value):
        """Assign a value to a variable."""
        self._vars[name] = int(value)

    def get(self, name):
        """Retrieve the value of a scalar variable."""
        try:
            return self._vars[name]
        except KeyError:
            raise error.BASICError(error.UNDEFINED_VARIABLE)
