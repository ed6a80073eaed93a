"""
LineBASIC - interpreter.py
Program run loop

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .base.scanner import TokenScanner


class Interpreter(object):
    """BASIC interpreter."""

    def __init__(self, program, scalars, parser):
        """Initialise interpreter."""
        self._program = program
        self._scalars = scalars
        # statement syntax parser
        self.parser = parser
        # True while a program is running
        self.run_mode = False
        # line being executed
        self.current_line = None
        # additional operations on program step (debugging)
        self.step = lambda line_number: None

    def run(self, start_line):
        """Execute stored statements from the given line until stopped."""
        error.throw_if(start_line not in self._program, error.UNDEFINED_LINE_NUMBER)
        logging.debug('Running from line %d', start_line)
        self._program.reset_control()
        self.run_mode = True
        try:
            current = start_line
            while current is not None:
                statement = self._ensure_parsed(current)
                self.current_line = current
                self.step(current)
                statement.execute(self._scalars, self._program)
                if self._program.stop_requested():
                    logging.debug('END in line %d', current)
                    break
                if self._program.has_jump():
                    target = self._program.consume_jump()
                    error.throw_if(target not in self._program, error.UNDEFINED_LINE_NUMBER)
                    current = target
                else:
                    # falling off the end of the program is a silent stop
                    current = self._program.next_line(current)
        finally:
            self.run_mode = False
            self.current_line = None

    def _ensure_parsed(self, line_number):
        """Get the cached statement for a line, parsing the stored text if needed."""
        statement = self._program.get_parsed(line_number)
        if statement is None:
            ins = TokenScanner(self._program.get_line(line_number))
            # skip the line number
            ins.read_line_number()
            statement = self.parser.parse_line(ins)
            self._program.set_parsed(line_number, statement)
            logging.debug('Parsed line %d: %r', line_number, statement)
        return statement
