"""
LineBASIC - config.py
Command-line and configuration file options

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io
import os
import sys
import logging
import configparser
from collections import deque

from .compat import split_quoted, split_pair


# options file looked for in the working directory if --config is not given
CONFIG_NAME = u'LINEBASIC.INI'
# section of the options file we read
CONFIG_SECTION = u'linebasic'

# log record layout
LOGGING_FORMAT = u'[%(asctime)s.%(msecs)04d] %(levelname)s: %(message)s'
LOGGING_FORMATTER = logging.Formatter(fmt=LOGGING_FORMAT, datefmt=u'%H:%M:%S')

# spellings of boolean option values
TRUES = (u'YES', u'TRUE', u'ON', u'1')
FALSES = (u'NO', u'FALSE', u'OFF', u'0')

# only the program file may be given without an option name
NUM_POSITIONAL = 1

# single-letter options: long name and, for flags, the implied value
SHORT_ARGS = {
    u'h': (u'help', u'True'),
    u'v': (u'version', u'True'),
    u'q': (u'quit', u'True'),
    u'l': (u'load', None),
    u'r': (u'run', None),
    u'e': (u'exec', None),
}

# long options with type and default
ARGUMENTS = {
    u'load': {u'type': u'string', u'default': u''},
    u'run': {u'type': u'string', u'default': u''},
    u'exec': {u'type': u'string', u'default': u''},
    u'quit': {u'type': u'bool', u'default': False},
    u'config': {u'type': u'string', u'default': u''},
    u'logfile': {u'type': u'string', u'default': u''},
    u'debug': {u'type': u'bool', u'default': False},
    u'version': {u'type': u'bool', u'default': False},
    u'help': {u'type': u'bool', u'default': False},
}


##########################################################################
# logging

class Lumberjack(object):
    """Root logger set-up; records are held back until the target is known."""

    def __init__(self):
        logging.captureWarnings(True)
        root_logger = self.reset()
        root_logger.setLevel(logging.INFO)
        self._backlog = io.StringIO()
        # log file opened by prepare, if any
        self.logstream = None
        self._attach(root_logger, self._backlog)

    @staticmethod
    def _attach(root_logger, stream):
        """Send formatted records to a stream."""
        handler = logging.StreamHandler(stream)
        handler.setFormatter(LOGGING_FORMATTER)
        root_logger.addHandler(handler)

    def reset(self):
        """Detach all handlers from the root logger."""
        root_logger = logging.getLogger()
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
        return root_logger

    def prepare(self, logfile, debug):
        """Point the root logger at stderr or the log file and replay the backlog."""
        root_logger = self.reset()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)
        target = sys.stderr
        if logfile:
            try:
                self.logstream = io.open(logfile, 'w', encoding='utf_8', errors='replace')
                target = self.logstream
            except EnvironmentError as e:
                self._backlog.write(u'Could not open log file `%s`: %s\n' % (logfile, e.strerror))
        target.write(self._backlog.getvalue())
        self._attach(root_logger, target)

    def close(self):
        """Detach the handlers and close the log file."""
        self.reset()
        if self.logstream is not None:
            self.logstream.close()
            self.logstream = None


##############################################################################
# settings container

class Settings(object):
    """Options from the command line and the configuration file."""

    def __init__(self, arguments=None):
        """Parse the options and set up logging."""
        argv = list(arguments) if arguments else sys.argv[1:]
        self._lumberjack = Lumberjack()
        try:
            self._options = ArgumentParser().retrieve_options(argv)
        except Exception:
            # don't keep messages in the backlog if we fail here
            self._lumberjack.reset()
            raise
        self._lumberjack.prepare(self.get('logfile'), self.get('debug'))

    def close(self):
        """Stop logging to the log file."""
        self._lumberjack.close()

    def get(self, name, get_default=True):
        """Value of an option; unset or empty options give the default, or None."""
        value = self._options.get(name)
        if value is not None and value != u'':
            return value
        if not get_default:
            return None
        if name in ARGUMENTS:
            return ARGUMENTS[name][u'default']
        return u''

    @property
    def launch_params(self):
        """Program file and commands for the session."""
        # colons separate commands
        commands = split_quoted(self.get('exec'), split_by=u':', quote=u'"')
        if self.get('run'):
            commands.append(u'RUN')
        if self.get('quit'):
            commands.append(u'QUIT')
        return {
            'prog': self.get('run') or self.get('load') or self.get(0),
            'commands': commands,
        }

    @property
    def version(self):
        """Version operating mode."""
        return self.get('version')

    @property
    def help(self):
        """Help operating mode."""
        return self.get('help')

    @property
    def debug(self):
        """Debugging log level."""
        return self.get('debug')


##############################################################################
# argument parsing

class ArgumentParser(object):
    """Turn command-line arguments and the configuration file into an options dict."""

    def retrieve_options(self, argv):
        """Command-line options override the configuration file."""
        cmdline = self._get_arguments_dict(argv)
        options = self._read_config_file(cmdline.pop(u'config', None))
        options.update(self._select_known(cmdline))
        return {_name: self._parse_type(_name, _value) for _name, _value in options.items()}

    def _get_arguments_dict(self, argv):
        """Collect options by long name and positional arguments by index."""
        args = {}
        queue = deque(argv)
        position = 0
        options_ended = False
        while queue:
            arg = queue.popleft()
            if options_ended or not arg.startswith(u'-'):
                args[position] = self._unquote(arg)
                position += 1
            elif arg == u'--':
                # everything after -- is positional
                options_ended = True
            elif arg.startswith(u'--'):
                name, value = split_pair(arg[2:], split_by=u'=', quote=u'"\'')
                if name:
                    self._append_arg(args, name, value)
            else:
                flags, value = split_pair(arg[1:], split_by=u'=', quote=u'"\'')
                if not value and queue and not queue[0].startswith(u'-'):
                    # short options may take the next argument as value
                    value = queue.popleft()
                leftover = self._append_short_args(args, flags, value)
                if leftover:
                    queue.appendleft(leftover)
        return args

    @staticmethod
    def _unquote(arg):
        """Strip a matched pair of enclosing quotes."""
        for quote in u'"\'':
            if len(arg) > 1 and arg[0] == quote and arg[-1] == quote:
                return arg[1:-1]
        return arg

    def _append_short_args(self, args, flags, value):
        """Expand combined single-letter options; return the value if no option took it."""
        for letter in flags[:-1]:
            self._append_short_arg(args, letter, None)
        if not flags:
            return value
        return self._append_short_arg(args, flags[-1], value)

    def _append_short_arg(self, args, letter, value):
        """Record one single-letter option; return the value if it is a flag."""
        try:
            name, implied = SHORT_ARGS[letter]
        except KeyError:
            logging.warning(u'Ignored unrecognised option `-%s`', letter)
            return value
        if implied is None:
            self._append_arg(args, name, value)
            return None
        self._append_arg(args, name, implied)
        return value

    @staticmethod
    def _append_arg(args, name, value):
        """Record an option; repeated options are joined with commas."""
        value = value or u''
        if args.get(name) and value:
            args[name] += u',' + value
        elif not args.get(name):
            args[name] = value

    def _read_config_file(self, config_file):
        """Options from the configuration file section, if there is one."""
        if config_file is None and os.path.exists(CONFIG_NAME):
            config_file = CONFIG_NAME
        if not config_file:
            return {}
        parser = configparser.RawConfigParser(allow_no_value=True)
        try:
            # utf_8_sig skips a byte order mark
            with io.open(config_file, 'r', encoding='utf_8_sig', errors='replace') as f:
                parser.read_file(WhitespaceStripper(f))
        except (configparser.Error, EnvironmentError):
            logging.warning(u'Could not read configuration file `%s`', config_file)
            return {}
        for section in parser.sections():
            if section != CONFIG_SECTION:
                logging.warning(u'Ignored section `[%s]` in configuration file', section)
        if not parser.has_section(CONFIG_SECTION):
            return {}
        options = {}
        for name, value in parser.items(CONFIG_SECTION):
            if name in ARGUMENTS:
                options[name] = value or u''
            else:
                logging.warning(u'Ignored unrecognised option `%s` in configuration file', name)
        return options

    @staticmethod
    def _select_known(args):
        """Drop unknown options and surplus positional arguments."""
        known = {}
        for name, value in args.items():
            if name in ARGUMENTS or name in range(NUM_POSITIONAL):
                known[name] = value
            elif isinstance(name, int):
                logging.warning(u'Ignored surplus positional argument `%s`', value)
            else:
                logging.warning(u'Ignored unrecognised option `--%s`', name)
        return known

    ##########################################################################
    # type conversions

    def _parse_type(self, name, value):
        """Convert an option value to its declared type."""
        if name in ARGUMENTS and ARGUMENTS[name][u'type'] == u'bool':
            return self._to_bool(name, value)
        return value

    @staticmethod
    def _to_bool(name, value):
        """Boolean option; given without a value means True."""
        if value.upper() in FALSES:
            return False
        if value and value.upper() not in TRUES:
            logging.warning(u'Boolean option `%s=%s` interpreted as `%s=True`', name, value, name)
        return True


class WhitespaceStripper(object):
    """Line iterator for ConfigParser that drops indentation."""

    def __init__(self, file):
        self._file = file

    def __iter__(self):
        return self

    def __next__(self):
        line = self._file.readline()
        if not line:
            raise StopIteration()
        return line.lstrip(u' \t')
