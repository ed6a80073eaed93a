"""
LineBASIC - console.py
Line-oriented console input and output

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging


class Console(object):
    """Text console over an input stream and output streams."""

    def __init__(self, input_stream=None, output_stream=None):
        """Initialise the console; a missing input stream is always at end."""
        self._input_stream = input_stream
        self._output_streams = []
        if output_stream is not None:
            self._output_streams.append(output_stream)

    def toggle_echo(self, stream):
        """Add or remove an echo stream."""
        if stream in self._output_streams:
            self._output_streams.remove(stream)
        else:
            self._output_streams.append(stream)

    def write(self, text):
        """Write text to all output streams."""
        for stream in self._output_streams:
            stream.write(text)
            stream.flush()

    def write_line(self, text=u''):
        """Write text followed by a line break."""
        self.write(text + u'\n')

    def read_line(self, prompt=u''):
        """Show prompt and read a line without its terminator; None at end of input."""
        if prompt:
            self.write(prompt)
        if self._input_stream is None:
            return None
        line = self._input_stream.readline()
        if not line:
            logging.debug('End of input')
            return None
        return line.rstrip(u'\r\n')
