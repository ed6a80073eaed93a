#!/usr/bin/env python3
"""
LineBASIC install script

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import os
import json
from io import open

from setuptools import find_packages, setup


###############################################################################
# get descriptions and version number

# file location
HERE = os.path.abspath(os.path.dirname(__file__))

# obtain metadata without importing the package (to avoid breaking sdist install)
with open(os.path.join(HERE, 'linebasic', 'data', 'meta.json'), 'r') as meta:
    _METADATA = json.load(meta)
    VERSION = _METADATA['version']
    AUTHOR = _METADATA['author']


###############################################################################
# setup parameters

SETUP_OPTIONS = dict(
    name='linebasic',
    version=VERSION,
    author=AUTHOR,
    description='Line-numbered integer BASIC interpreter',
    license='GPLv3',
    python_requires='>=3.9',

    # contents
    # only include the linebasic package and its subpackages: exclude tests
    packages=find_packages(include=['linebasic', 'linebasic.*']),
    ext_modules=[],
    # include package data from MANIFEST.in
    include_package_data=True,
    package_data={'linebasic.data': ['meta.json', 'USAGE.txt']},
    extras_require={
        'test': ['pytest'],
    },
    # launchers
    entry_points=dict(
        console_scripts=['linebasic=linebasic:main'],
    ),
)

###############################################################################
# run the setup

# perform the installation
setup(**SETUP_OPTIONS)
