"""
LineBASIC - program.py
Program buffer: source lines, parse cache and control registers

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import bisect
import logging

from .base import error


class Program(object):
    """BASIC program."""

    def __init__(self):
        """Initialise program."""
        self.clear()

    def __repr__(self):
        """Return a listing marking which lines have a cached parse (for debugging)."""
        output = []
        for linum in self.line_numbers:
            output.append('%s [%05d] %s' % (
                '*' if linum in self._parsed else ' ',
                linum,
                self._source[linum]
            ))
        return '\n'.join(output)

    def __contains__(self, line_number):
        """Check if a line is stored."""
        return line_number in self._source

    def __len__(self):
        """Number of stored lines."""
        return len(self._source)

    def clear(self):
        """Erase the program from memory."""
        # line number -> text as entered
        self._source = {}
        # line number -> Statement; absent if not yet parsed or invalidated
        self._parsed = {}
        # sorted line numbers
        self.line_numbers = []
        self.reset_control()

    ###########################################################################
    # source lines

    def set_line(self, line_number, text):
        """Store or replace a source line; drops its cached parse."""
        if line_number not in self._source:
            bisect.insort(self.line_numbers, line_number)
        self._source[line_number] = text
        self._parsed.pop(line_number, None)
        logging.debug('Stored line %d', line_number)

    def remove_line(self, line_number):
        """Delete a source line and its cached parse, if present."""
        if line_number not in self._source:
            return
        del self._source[line_number]
        self._parsed.pop(line_number, None)
        self.line_numbers.remove(line_number)
        logging.debug('Deleted line %d', line_number)

    def get_line(self, line_number):
        """Source text of a line; empty if there is no such line."""
        return self._source.get(line_number, u'')

    def first_line(self):
        """Lowest stored line number, or None if the program is empty."""
        if not self.line_numbers:
            return None
        return self.line_numbers[0]

    def next_line(self, line_number):
        """Lowest stored line number above the given one, or None."""
        index = bisect.bisect_right(self.line_numbers, line_number)
        if index >= len(self.line_numbers):
            return None
        return self.line_numbers[index]

    def list_lines(self):
        """All source lines in ascending order."""
        return [self._source[_linum] for _linum in self.line_numbers]

    ###########################################################################
    # parse cache

    def get_parsed(self, line_number):
        """Cached statement for a line, or None."""
        return self._parsed.get(line_number)

    def set_parsed(self, line_number, statement):
        """Attach a parsed statement to a stored line."""
        # a statement can't outlive its source line
        error.throw_if(line_number not in self._source, error.UNDEFINED_LINE_NUMBER)
        self._parsed[line_number] = statement

    ###########################################################################
    # control registers

    def request_jump(self, line_number):
        """Set the jump register."""
        self.pending_jump = line_number

    def has_jump(self):
        """Check if a jump is pending."""
        return self.pending_jump is not None

    def consume_jump(self):
        """Read and clear the jump register."""
        target, self.pending_jump = self.pending_jump, None
        return target

    def request_stop(self):
        """Set the stop flag."""
        self.stop_flag = True

    def stop_requested(self):
        """Check the stop flag."""
        return self.stop_flag

    def reset_control(self):
        """Reset jump register and stop flag."""
        self.pending_jump = None
        self.stop_flag = False
