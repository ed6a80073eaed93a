"""
LineBASIC - compat
Entry-point guard and option-string utilities

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import re
import sys
from contextlib import contextmanager


##################################################################################################
# console script guard

def _silence(stream):
    """Point a standard stream's descriptor at the null device."""
    try:
        os.dup2(os.open(os.devnull, os.O_WRONLY), stream.fileno())
    except (OSError, ValueError, AttributeError):
        pass


@contextmanager
def script_entry_point_guard():
    """Exit quietly on Ctrl-C and on a closed output pipe."""
    # e.g. printf "10 PRINT 1\nRUN\n" | linebasic | head -n 0
    failed = True
    try:
        yield
        failed = False
    except KeyboardInterrupt:
        failed = False
    except BrokenPipeError:
        pass
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.flush()
        except (OSError, ValueError):
            failed = True
    if failed:
        # avoid a second broken-pipe error when the interpreter shuts down
        _silence(sys.stdout)
        _silence(sys.stderr)
    sys.exit(failed)


##################################################################################################
# option strings

def _build_split_regexp(split_by, quote):
    """Regular expression matching one chunk between separators, quoted blocks kept whole."""
    separator = u'\\s' if split_by is None else re.escape(split_by)
    if not quote:
        return u'[^%s]+' % (separator,)
    quote = re.escape(quote)
    # a chunk is a run of plain characters and quoted blocks; \ escapes inside quotes
    return u'(?:[^{sep}{q}]|[{q}](?:\\\\.|[^{q}])*[{q}])+'.format(sep=separator, q=quote)

def split_quoted(line, split_by=None, quote=None, strip_quotes=False):
    """Split a string at separators outside quoted blocks."""
    chunks = re.findall(_build_split_regexp(split_by, quote), line)
    if strip_quotes:
        return [_chunk.strip(quote) for _chunk in chunks]
    return chunks

def split_pair(line, split_by=None, quote=None):
    """Split a string at the first separator outside quoted blocks; always two parts."""
    match = re.search(_build_split_regexp(split_by, quote), line)
    if not match:
        return u'', u''
    return match.group(), line[match.end()+1:]
