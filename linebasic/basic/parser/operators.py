"""
LineBASIC - operators.py
Integer and relational operators

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from ..base import tokens as tk
from .. import values


# operators and precedence
# key is tuple (token, nargs)
PRECEDENCE = {
    (tk.O_PLUS, 1): 12,
    (tk.O_MINUS, 1): 12,
    (tk.O_TIMES, 2): 11,
    (tk.O_DIV, 2): 11,
    (tk.MOD, 2): 9,
    (tk.O_PLUS, 2): 8,
    (tk.O_MINUS, 2): 8,
}
OPERATORS = set(operator_arity[0] for operator_arity in PRECEDENCE)

# unary operators
UNARY = {
    tk.O_MINUS: values.neg,
    tk.O_PLUS: values.pos,
}

# binary operators
BINARY = {
    tk.O_TIMES: values.mul,
    tk.O_DIV: values.div,
    tk.MOD: values.mod_,
    tk.O_PLUS: values.add,
    tk.O_MINUS: values.sub,
}

# relational operators of IF ... THEN
RELATIONAL = {
    tk.O_EQ: values.eq,
    tk.O_LT: values.lt,
    tk.O_GT: values.gt,
    tk.O_LE: values.lte,
    tk.O_GE: values.gte,
    tk.O_NE: values.neq,
}
