"""
LineBASIC - parser package
Expression parser and operator tables

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from .expressions import ExpressionParser
