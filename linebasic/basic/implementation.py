"""
LineBASIC - implementation.py
Top-level implementation: line dispatcher and interactive loop

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging
from functools import partial
from contextlib import contextmanager

from .base import error
from .base import tokens as tk
from .base.scanner import TokenScanner
from .console import Console
from .interpreter import Interpreter
from .program import Program
from .scalars import Scalars
from .statements import StatementParser


class Implementation(object):
    """Interpreter session, implementation class."""

    def __init__(self, input_stream=None, output_stream=None):
        """Initialise the interpreter session."""
        self.console = Console(input_stream, output_stream)
        # variable environment
        self.scalars = Scalars()
        # program buffer
        self.program = Program()
        # statement syntax parser
        self.parser = StatementParser(self.console)
        self.interpreter = Interpreter(self.program, self.scalars, self.parser)
        self._init_commands()

    def _init_commands(self):
        """Initialise the direct-mode command table."""
        self._commands = {
            tk.LET: partial(self._execute_direct, tk.LET),
            tk.PRINT: partial(self._execute_direct, tk.PRINT),
            tk.INPUT: partial(self._execute_direct, tk.INPUT),
            tk.LIST: self.list_,
            tk.CLEAR: self.clear_,
            tk.RUN: self.run_,
            tk.GOTO: partial(self._jump_and_run, tk.GOTO),
            tk.IF: partial(self._jump_and_run, tk.IF),
            tk.REM: partial(self._execute_direct, tk.REM),
            tk.END: self.end_,
            tk.QUIT: self.quit_,
        }

    def execute(self, command):
        """Store a program line or execute a command line."""
        with self._handle_exceptions():
            self._store_line(command)

    def evaluate(self, expression):
        """Evaluate a BASIC expression."""
        with self._handle_exceptions():
            expr = self.parser.expression_parser.parse_text(expression)
            return expr.evaluate(self.scalars)
        return None

    def set_variable(self, name, value):
        """Set a variable in memory."""
        self.scalars.set(name, value)

    def get_variable(self, name):
        """Get a variable in memory."""
        return self.scalars.get(name)

    def interact(self):
        """Interactive interpreter session."""
        while True:
            line = self.console.read_line()
            if line is None:
                break
            self.execute(line)

    def _store_line(self, line):
        """Store a program line or dispatch a command line."""
        ins = TokenScanner(line)
        if not ins.has_more_tokens():
            return
        first = ins.next_token()
        kind = ins.get_token_type(first)
        if kind == tk.NUMBER:
            line_number = int(first)
            if not ins.has_more_tokens():
                self.program.remove_line(line_number)
                return
            # the text is kept even if it fails to parse
            self.program.set_line(line_number, line)
            self.program.set_parsed(line_number, self.parser.parse_line(ins))
        elif kind == tk.WORD:
            try:
                command = self._commands[first.upper()]
            except KeyError:
                raise error.BASICError(error.STX)
            command(ins)
        else:
            raise error.BASICError(error.STX)

    ##############################################################################
    # error handling

    @contextmanager
    def _handle_exceptions(self):
        """Context guard to handle BASIC exceptions."""
        try:
            yield
        except error.BASICError as e:
            self._handle_error(e)

    def _handle_error(self, e):
        """Handle a BASIC error through error message."""
        logging.debug('%s reported', e.message)
        self.console.write_line(e.get_message())

    ###########################################################################
    # callbacks

    def _execute_direct(self, keyword, ins):
        """LET, PRINT, INPUT, REM: construct and execute without storing."""
        statement = self.parser.parse_statement(keyword, ins)
        statement.execute(self.scalars, self.program)

    def _jump_and_run(self, keyword, ins):
        """GOTO, IF: run the program from the jump target, if taken."""
        statement = self.parser.parse_statement(keyword, ins)
        self.program.reset_control()
        statement.execute(self.scalars, self.program)
        if self.program.has_jump():
            self.interpreter.run(self.program.consume_jump())

    def list_(self, ins):
        """LIST: output program lines."""
        ins.require_end()
        for line in self.program.list_lines():
            self.console.write_line(line)

    def clear_(self, ins):
        """CLEAR: erase program and variables."""
        ins.require_end()
        self.program.clear()
        self.scalars.clear()

    def run_(self, ins):
        """RUN: start program execution."""
        ins.require_end()
        start = self.program.first_line()
        if start is not None:
            self.interpreter.run(start)

    def end_(self, ins):
        """END: no effect in direct mode."""
        ins.require_end()

    def quit_(self, ins):
        """QUIT: exit interpreter."""
        ins.require_end()
        raise error.Exit()
