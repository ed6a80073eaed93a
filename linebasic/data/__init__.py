"""
LineBASIC - application data package
Metadata and usage text

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import json as _json
from importlib import resources as _resources


def _read_binary(name):
    """Read a data file from this package."""
    return _resources.files(__package__).joinpath(name).read_bytes()


# copyright metadata
_METADATA = _json.loads(_read_binary('meta.json'))
NAME, VERSION, AUTHOR, COPYRIGHT = (_METADATA[_key] for _key in (
    'name', 'version', 'author', 'copyright'
))


def read_usage():
    """Usage text for --help."""
    return _read_binary('USAGE.txt').decode('utf-8', 'replace')
