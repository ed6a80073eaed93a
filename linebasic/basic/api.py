"""
LineBASIC - api.py
Session API

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io

from .base import error
from . import implementation


class Session(object):
    """Public API to a BASIC session; the interpreter is created on first use."""

    def __init__(self, input_stream=None, output_stream=None):
        """Keep the stream parameters for when the session starts."""
        self._input_stream = input_stream
        self._output_stream = output_stream
        self._impl = None

    def __enter__(self):
        return self

    def __exit__(self, ex_type, ex_val, tb):
        """Close the session; QUIT ends the with block quietly."""
        self.close()
        return ex_type is not None and issubclass(ex_type, error.Exit)

    def start(self):
        """Create the interpreter if it isn't there; True if it was created."""
        if self._impl is not None:
            return False
        self._impl = implementation.Implementation(self._input_stream, self._output_stream)
        return True

    def execute(self, command):
        """Run one or more lines as if typed and return the text they write."""
        self.start()
        captured = io.StringIO()
        console = self._impl.console
        console.toggle_echo(captured)
        try:
            for line in command.splitlines():
                self._impl.execute(line)
        finally:
            console.toggle_echo(captured)
        return captured.getvalue()

    def evaluate(self, expression):
        """Value of an expression, or None after reporting an error."""
        self.start()
        return self._impl.evaluate(expression)

    def set_variable(self, name, value):
        self.start()
        self._impl.set_variable(name, value)

    def get_variable(self, name):
        self.start()
        return self._impl.get_variable(name)

    def interact(self):
        """Read and run lines from the input stream until QUIT or end of input."""
        self.start()
        self._impl.interact()

    def set_hook(self, step_function):
        """Call step_function(line_number) before each line a run executes."""
        self.start()
        self._impl.interpreter.step = step_function

    @property
    def info(self):
        self.start()
        return SessionInfo(self._impl)

    def close(self):
        """Drop the interpreter; program and variables are lost."""
        self._impl = None


class SessionInfo(object):
    """Debugging views of a running session."""

    def __init__(self, impl):
        self._impl = impl

    def repr_scalars(self):
        """Variables, one `name: value` per line."""
        return repr(self._impl.scalars)

    def repr_program(self):
        """Program listing with parsed lines marked."""
        return repr(self._impl.program)

    def get_current_line(self):
        """Line number being executed, or None in direct mode."""
        interpreter = self._impl.interpreter
        return interpreter.current_line if interpreter.run_mode else None
