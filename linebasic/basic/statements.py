"""
LineBASIC - statements.py
Statement kinds and statement parser

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from .base import tokens as tk
from .base.scanner import TokenScanner
from .parser import ExpressionParser
from .parser import operators as op
from . import values


class Statement(object):
    """Parsed statement; constructed from the tokens following its keyword."""

    keyword = None

    def __repr__(self):
        return '<%s>' % (self.keyword,)

    def execute(self, scalars, program):
        """Execute the statement against the variables and program."""
        raise NotImplementedError()


class RemStatement(Statement):
    """REM: comment."""

    keyword = tk.REM

    def __init__(self, ins, parser):
        # discard the rest of the line
        while ins.has_more_tokens():
            ins.next_token()

    def execute(self, scalars, program):
        pass


class LetStatement(Statement):
    """LET: assign a variable."""

    keyword = tk.LET

    def __init__(self, ins, parser):
        self.name = parser.parse_name(ins)
        error.throw_if(ins.next_token() != tk.O_EQ)
        self.expr = parser.parse_expression(ins)

    def __repr__(self):
        return '<LET %s = %r>' % (self.name, self.expr)

    def execute(self, scalars, program):
        scalars.set(self.name, self.expr.evaluate(scalars))


class PrintStatement(Statement):
    """PRINT: write the value of an expression."""

    keyword = tk.PRINT

    def __init__(self, ins, parser):
        self._console = parser.console
        self.expr = parser.parse_expression(ins)

    def __repr__(self):
        return '<PRINT %r>' % (self.expr,)

    def execute(self, scalars, program):
        self._console.write_line(u'%d' % (self.expr.evaluate(scalars),))


class InputStatement(Statement):
    """INPUT: read an integer from the console."""

    keyword = tk.INPUT
    prompt = u' ? '

    def __init__(self, ins, parser):
        self._console = parser.console
        token = ins.next_token()
        # numeric-looking names are accepted here
        error.throw_if(ins.get_token_type(token) not in (tk.WORD, tk.NUMBER))
        ins.require_end()
        self.name = token

    def __repr__(self):
        return '<INPUT %s>' % (self.name,)

    def execute(self, scalars, program):
        while True:
            line = self._console.read_line(self.prompt)
            if line is None:
                # end of input: leave the variable alone
                return
            line = line.strip()
            value = values.from_repr(line)
            if value is not None:
                break
            logging.debug('Invalid number `%s` on INPUT', line)
            self._console.write_line(error.BASICError(error.INVALID_NUMBER).message)
        self._console.write_line(line)
        scalars.set(self.name, value)


class EndStatement(Statement):
    """END: stop the program."""

    keyword = tk.END

    def __init__(self, ins, parser):
        ins.require_end()

    def execute(self, scalars, program):
        program.request_stop()


class GotoStatement(Statement):
    """GOTO: unconditional jump."""

    keyword = tk.GOTO

    def __init__(self, ins, parser):
        self.target = ins.read_line_number()
        ins.require_end()

    def __repr__(self):
        return '<GOTO %d>' % (self.target,)

    def execute(self, scalars, program):
        # target must exist by the time the jump is taken
        error.throw_if(self.target not in program, error.UNDEFINED_LINE_NUMBER)
        program.request_jump(self.target)


class IfStatement(Statement):
    """IF ... THEN: conditional jump."""

    keyword = tk.IF

    def __init__(self, ins, parser):
        # left operand runs up to the relational operator
        lhs = []
        self.operator = None
        while ins.has_more_tokens():
            token = ins.next_token()
            if token in (tk.O_LT, tk.O_GT, tk.O_EQ):
                self.operator = self._read_relational(ins, token)
                break
            lhs.append(token)
        error.throw_if(self.operator is None)
        # right operand runs up to THEN
        rhs = []
        while True:
            token = ins.next_token()
            error.throw_if(not token)
            if token.upper() == tk.THEN:
                break
            rhs.append(token)
        self.target = ins.read_line_number()
        ins.require_end()
        # operands are independent expressions
        self.lhs = parser.parse_expression(TokenScanner(u' '.join(lhs)))
        self.rhs = parser.parse_expression(TokenScanner(u' '.join(rhs)))

    @staticmethod
    def _read_relational(ins, token):
        """Complete <, > to <=, <> or >= by look-ahead."""
        if token == tk.O_EQ:
            return token
        follow = ins.next_token()
        if token + follow in (tk.O_LE, tk.O_NE, tk.O_GE):
            return token + follow
        if follow:
            ins.save_token(follow)
        return token

    def __repr__(self):
        return '<IF %r %s %r THEN %d>' % (self.lhs, self.operator, self.rhs, self.target)

    def execute(self, scalars, program):
        left = self.lhs.evaluate(scalars)
        right = self.rhs.evaluate(scalars)
        if op.RELATIONAL[self.operator](left, right):
            error.throw_if(self.target not in program, error.UNDEFINED_LINE_NUMBER)
            program.request_jump(self.target)


class StatementParser(object):
    """BASIC statement parser."""

    def __init__(self, console):
        """Initialise statement context."""
        self.console = console
        # expression parser
        self.expression_parser = ExpressionParser()
        # initialise syntax parser tables
        self._init_syntax()

    def _init_syntax(self):
        """Initialise the keyword table."""
        kinds = {_cls.keyword: _cls for _cls in Statement.__subclasses__()}
        self._statements = {_keyword: kinds[_keyword] for _keyword in tk.STATEMENTS}

    def parse_statement(self, keyword, ins):
        """Construct a statement from its keyword and the following tokens."""
        try:
            statement_class = self._statements[keyword.upper()]
        except KeyError:
            raise error.BASICError(error.STX)
        return statement_class(ins, self)

    def parse_line(self, ins):
        """Construct a statement from a scanner positioned before its keyword."""
        keyword = ins.next_token()
        error.throw_if(ins.get_token_type(keyword) != tk.WORD)
        return self.parse_statement(keyword, ins)

    def parse_name(self, ins):
        """Get variable name from token stream."""
        name = ins.next_token()
        error.throw_if(ins.get_token_type(name) != tk.WORD)
        error.throw_if(name.upper() in tk.KEYWORDS)
        return name

    def parse_expression(self, ins):
        """Parse the expression taking up the rest of the stream."""
        return self.expression_parser.parse(ins)
