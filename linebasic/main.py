"""
LineBASIC - main.py
Command-line entry point

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io
import sys
import logging

from . import config
from .basic import Session
from .basic import NAME, VERSION, COPYRIGHT
from .data import read_usage
from .compat import script_entry_point_guard


def main(*arguments):
    """Initialise, parse arguments and perform requested operations."""
    # get settings and prepare logging
    settings = config.Settings(arguments)
    try:
        if settings.version:
            # print version and exit
            _show_version()
        elif settings.help:
            # print usage and exit
            _show_usage()
        else:
            # start an interpreter session with standard i/o
            _run_session(**settings.launch_params)
    finally:
        settings.close()


def _show_usage():
    """Show usage description."""
    sys.stdout.write(read_usage())

def _show_version():
    """Show version and copyright."""
    sys.stdout.write(u'%s %s\n%s\n' % (NAME, VERSION, COPYRIGHT))


def _run_session(prog=None, commands=(), input_stream=None, output_stream=None):
    """Run an interactive BASIC session; QUIT ends it early."""
    session = Session(
        input_stream=input_stream or sys.stdin,
        output_stream=output_stream or sys.stdout,
    )
    with session:
        if prog:
            _load_program(session, prog)
        for cmd in commands:
            session.execute(cmd)
        session.interact()


def _load_program(session, prog):
    """Enter the lines of a program file as if typed."""
    try:
        with io.open(prog, 'r', encoding='utf-8', errors='replace') as progfile:
            lines = progfile.read()
    except EnvironmentError as e:
        logging.error('Could not open program file `%s`: %s', prog, e.strerror)
        return
    logging.debug('Loading program file `%s`', prog)
    session.execute(lines)
