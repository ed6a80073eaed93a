"""
LineBASIC - expressions.py
Expression trees and expression parser

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from collections import deque

from ..base import tokens as tk
from ..base import error
from ..base.scanner import TokenScanner
from . import operators as op


class Expression(object):
    """Node of an expression tree."""

    def evaluate(self, scalars):
        """Compute the integer value of the (sub-)expression."""
        raise NotImplementedError()


class Constant(Expression):
    """Integer literal."""

    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return '%d' % (self.value,)

    def evaluate(self, scalars):
        return self.value


class Identifier(Expression):
    """Variable reference."""

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return self.name

    def evaluate(self, scalars):
        return scalars.get(self.name)


class UnaryOperation(Expression):
    """Unary operator applied to one operand."""

    def __init__(self, operator, operand):
        self.operator = operator
        self.operand = operand

    def __repr__(self):
        return '(%s%r)' % (self.operator, self.operand)

    def evaluate(self, scalars):
        return op.UNARY[self.operator](self.operand.evaluate(scalars))


class BinaryOperation(Expression):
    """Binary operator applied to two operands."""

    def __init__(self, operator, left, right):
        self.operator = operator
        self.left = left
        self.right = right

    def __repr__(self):
        return '(%r %s %r)' % (self.left, self.operator, self.right)

    def evaluate(self, scalars):
        # left operand is evaluated first
        left = self.left.evaluate(scalars)
        right = self.right.evaluate(scalars)
        return op.BINARY[self.operator](left, right)


class ExpressionParser(object):
    """Expression parser."""

    def parse(self, ins):
        """Parse an expression taking up the rest of the token stream."""
        expr = self._parse(ins)
        # unbalanced closing bracket
        ins.require_end()
        return expr

    def parse_text(self, text):
        """Parse an expression from a string."""
        return self.parse(TokenScanner(text))

    def _parse(self, ins):
        """Parse tokens up to end of stream or unmatched closing bracket."""
        operations = deque()
        units = deque()
        # see https://en.wikipedia.org/wiki/Shunting-yard_algorithm
        expect_unit = True
        while True:
            token = ins.next_token()
            if not token:
                break
            d = token.upper()
            if d in op.OPERATORS:
                if expect_unit:
                    nargs = 1
                    # a binary operator without left operand is an illegal unary
                    error.throw_if((d, nargs) not in op.PRECEDENCE)
                else:
                    nargs = 2
                    self._drain(op.PRECEDENCE[(d, nargs)], operations, units)
                operations.append((d, nargs, op.PRECEDENCE[(d, nargs)]))
                expect_unit = True
            elif token == tk.O_RPAREN:
                # leave it for the caller to match
                ins.save_token(token)
                break
            elif not expect_unit:
                # repeated unit
                raise error.BASICError(error.STX)
            elif token == tk.O_LPAREN:
                units.append(self._parse(ins))
                error.throw_if(ins.next_token() != tk.O_RPAREN)
                expect_unit = False
            elif ins.get_token_type(token) == tk.WORD:
                # keywords are not variable names
                error.throw_if(d in tk.KEYWORDS)
                units.append(Identifier(token))
                expect_unit = False
            elif ins.get_token_type(token) == tk.NUMBER:
                units.append(Constant(int(token)))
                expect_unit = False
            else:
                raise error.BASICError(error.STX)
        # raises IndexError for insufficient operands
        try:
            self._drain(0, operations, units)
            return units[0]
        except IndexError:
            # empty expression or missing operand
            raise error.BASICError(error.STX)

    def _drain(self, precedence, operations, units):
        """Drain operator stack until an operator of lower precedence is on top."""
        while operations:
            if precedence > operations[-1][2]:
                break
            oper, narity, _ = operations.pop()
            # this raises IndexError if there are not enough operands
            if narity == 1:
                units.append(UnaryOperation(oper, units.pop()))
            else:
                right = units.pop()
                left = units.pop()
                units.append(BinaryOperation(oper, left, right))
