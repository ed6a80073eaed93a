"""
LineBASIC test.session
unit tests for session API, line dispatcher and run loop

(c) 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import io

from linebasic import Session
from linebasic.basic import BASICError, UNDEFINED_VARIABLE
from tests.unit.utils import TestCase, run_tests


class SessionTest(TestCase):
    """Unit tests for Session."""

    tag = u'session'

    def test_session(self):
        """Test basic Session API."""
        with Session() as s:
            s.execute('a=1')
            assert s.execute('LET a = 1') == u''
            assert s.evaluate('a+2') == 3
            s.set_variable('B', 41)
            assert s.get_variable('B') == 41
            assert s.evaluate('B + a') == 42

    def test_session_getset_variable(self):
        """Variables are case-sensitive; undefined ones raise."""
        with Session() as s:
            s.set_variable('x', 1)
            s.set_variable('X', 2)
            assert s.get_variable('x') == 1
            assert s.get_variable('X') == 2
            with self.assertRaises(BASICError) as cm:
                s.get_variable('y')
            assert cm.exception.err == UNDEFINED_VARIABLE

    def test_session_evaluate(self):
        """Evaluate reports errors and returns None."""
        with Session() as s:
            assert s.evaluate('7 / 2') == 3
            assert s.evaluate('-7 MOD 2') == -1
            assert s.evaluate('1 / 0') is None
            assert s.evaluate('nothing') is None
            assert s.evaluate('1 +') is None

    def test_session_execute(self):
        """Execute returns the output of each line."""
        with Session() as s:
            assert s.execute('PRINT 1 + 1') == u'2\n'
            assert s.execute('PRINT 1\nPRINT 2') == u'1\n2\n'
            assert s.execute('') == u''
            assert s.execute('   ') == u''

    def test_session_iostreams(self):
        """Session with input and output streams."""
        out = io.StringIO()
        with Session(input_stream=io.StringIO(u'10 PRINT 3\nRUN\n'), output_stream=out) as s:
            s.interact()
        assert out.getvalue() == u'3\n'

    def test_session_execute_and_stream(self):
        """Output goes to the output stream and the return value."""
        out = io.StringIO()
        with Session(output_stream=out) as s:
            assert s.execute('PRINT 5') == u'5\n'
        assert out.getvalue() == u'5\n'

    def test_session_quit(self):
        """QUIT ends the session context."""
        out = io.StringIO()
        with Session(input_stream=io.StringIO(u'PRINT 1\nQUIT\nPRINT 2\n'), output_stream=out) as s:
            s.interact()
        assert out.getvalue() == u'1\n'

    def test_session_quit_execute(self):
        """QUIT through execute leaves the with block."""
        reached = False
        with Session() as s:
            s.execute('QUIT')
            reached = True
        assert not reached

    def test_session_quit_syntax(self):
        """QUIT takes no arguments."""
        with Session() as s:
            assert s.execute('QUIT 1') == u'SYNTAX ERROR\n'
            assert s.execute('PRINT 1') == u'1\n'

    def test_session_close(self):
        """A closed session starts afresh."""
        s = Session()
        s.set_variable('a', 1)
        s.close()
        assert s.evaluate('a') is None

    def test_session_info(self):
        """Session info shows variables and program."""
        with Session() as s:
            s.execute('10 PRINT 1\n20 PRINT')
            s.execute('LET b = 2\nLET a = 1')
            assert s.info.repr_scalars() == u'a: 1\nb: 2'
            assert s.info.repr_program() == u'* [00010] 10 PRINT 1\n  [00020] 20 PRINT'
            assert s.info.get_current_line() is None

    def test_session_hook(self):
        """The step hook sees every executed line."""
        lines = []
        with Session() as s:
            s.set_hook(lambda line_number: lines.append((line_number, s.info.get_current_line())))
            s.execute('10 PRINT 1\n20 GOTO 40\n30 PRINT 3\n40 END')
            assert s.execute('RUN') == u'1\n'
        assert lines == [(10, 10), (20, 20), (40, 40)]


class DispatcherTest(TestCase):
    """Unit tests for program lines and direct-mode commands."""

    tag = u'dispatcher'

    def test_run(self):
        """Store and run a small program."""
        with Session() as s:
            s.execute('10 LET X = 5\n20 PRINT X\n30 END')
            assert s.execute('RUN') == u'5\n'

    def test_keywords_case(self):
        """Keywords are case-insensitive."""
        with Session() as s:
            s.execute('10 let x = 5\n20 Print x\n30 eNd')
            assert s.execute('run') == u'5\n'

    def test_list_order(self):
        """LIST shows lines in ascending order regardless of entry order."""
        with Session() as s:
            s.execute('30 END\n10 LET a = 1\n20 PRINT a')
            assert s.execute('LIST') == u'10 LET a = 1\n20 PRINT a\n30 END\n'

    def test_list_verbatim(self):
        """LIST shows lines as typed."""
        with Session() as s:
            s.execute('  10 print   1+2  ')
            assert s.execute('LIST') == u'  10 print   1+2  \n'

    def test_list_syntax(self):
        """LIST takes no arguments."""
        with Session() as s:
            assert s.execute('LIST 10') == u'SYNTAX ERROR\n'

    def test_replace_line(self):
        """Re-entering a line replaces it and its parse."""
        with Session() as s:
            s.execute('10 PRINT 1')
            assert s.execute('RUN') == u'1\n'
            s.execute('10 PRINT 2')
            assert s.execute('RUN') == u'2\n'
            assert s.execute('LIST') == u'10 PRINT 2\n'

    def test_delete_line(self):
        """A bare line number deletes; a jump to it fails at execution."""
        with Session() as s:
            s.execute('10 GOTO 20\n20 PRINT 1\n20\n99')
            assert s.execute('LIST') == u'10 GOTO 20\n'
            assert s.execute('RUN') == u'LINE NUMBER ERROR\n'

    def test_forward_goto(self):
        """Jump targets may be entered after the jump."""
        with Session() as s:
            s.execute('10 GOTO 30\n20 PRINT 2')
            s.execute('30 PRINT 3')
            assert s.execute('RUN') == u'3\n'

    def test_loop(self):
        """Count down with IF and GOTO."""
        with Session() as s:
            s.execute(
                '10 LET n = 3\n'
                '20 PRINT n\n'
                '30 LET n = n - 1\n'
                '40 IF n > 0 THEN 20\n'
                '50 PRINT 0'
            )
            assert s.execute('RUN') == u'3\n2\n1\n0\n'

    def test_relational(self):
        """IF jumps if and only if the relation holds."""
        cases = (
            (-1, 1, {'=': 0, '<': 1, '>': 0, '<=': 1, '>=': 0, '<>': 1}),
            (2, 2, {'=': 1, '<': 0, '>': 0, '<=': 1, '>=': 1, '<>': 0}),
            (3, -3, {'=': 0, '<': 0, '>': 1, '<=': 0, '>=': 1, '<>': 1}),
        )
        with Session() as s:
            s.execute('20 PRINT 0\n30 END\n40 PRINT 1')
            for a, b, results in cases:
                s.set_variable('a', a)
                s.set_variable('b', b)
                for operator, result in results.items():
                    s.execute('10 IF a %s b THEN 40' % (operator,))
                    output = s.execute('RUN')
                    assert output == u'%d\n' % (result,), (a, operator, b, output)

    def test_fall_off(self):
        """Running past the last line halts silently."""
        with Session() as s:
            s.execute('10 PRINT 1\n20 PRINT 2')
            assert s.execute('RUN') == u'1\n2\n'
            assert s.execute('PRINT 3') == u'3\n'

    def test_run_empty(self):
        """RUN without a program does nothing."""
        with Session() as s:
            assert s.execute('RUN') == u''
            assert s.execute('RUN 10') == u'SYNTAX ERROR\n'

    def test_end(self):
        """END stops the run; in direct mode it does nothing."""
        with Session() as s:
            s.execute('10 PRINT 1\n20 END\n30 PRINT 2')
            assert s.execute('RUN') == u'1\n'
            assert s.execute('END') == u''
            assert s.execute('END 1') == u'SYNTAX ERROR\n'

    def test_run_keeps_variables(self):
        """Variables survive between runs."""
        with Session() as s:
            s.execute('10 PRINT a')
            s.set_variable('a', 7)
            assert s.execute('RUN') == u'7\n'

    def test_clear(self):
        """CLEAR erases program and variables."""
        with Session() as s:
            s.execute('10 PRINT 1\nLET a = 1')
            assert s.execute('CLEAR') == u''
            assert s.execute('LIST') == u''
            assert s.execute('PRINT a') == u'VARIABLE NOT DEFINED\n'
            assert s.execute('CLEAR 1') == u'SYNTAX ERROR\n'

    def test_direct_goto(self):
        """Direct GOTO runs from the target, if it exists."""
        with Session() as s:
            s.execute('10 PRINT 1\n20 PRINT 2')
            s.set_variable('a', 5)
            assert s.execute('GOTO 20') == u'2\n'
            assert s.execute('GOTO 15') == u'LINE NUMBER ERROR\n'
            assert s.get_variable('a') == 5
            assert s.execute('LIST') == u'10 PRINT 1\n20 PRINT 2\n'
            assert s.execute('GOTO') == u'SYNTAX ERROR\n'

    def test_direct_if(self):
        """Direct IF runs from the target when true."""
        with Session() as s:
            s.execute('10 PRINT 10\n20 PRINT 20')
            assert s.execute('IF 1 < 2 THEN 20') == u'20\n'
            assert s.execute('IF 2 < 1 THEN 10') == u''
            assert s.execute('IF 2 < 1 THEN 99') == u''
            assert s.execute('IF 1 < 2 THEN 99') == u'LINE NUMBER ERROR\n'

    def test_direct_statements(self):
        """LET, PRINT and REM run at once and are not stored."""
        with Session() as s:
            assert s.execute('LET a = 6\nPRINT a * 7\nREM nothing') == u'42\n'
            assert s.execute('LIST') == u''

    def test_direct_input(self):
        """INPUT in direct mode."""
        with Session(input_stream=io.StringIO(u'abc\n7\n')) as s:
            assert s.execute('INPUT n') == u' ? INVALID NUMBER\n ? 7\n'
            assert s.get_variable('n') == 7

    def test_program_input(self):
        """INPUT in a program reads the next line of input."""
        with Session(input_stream=io.StringIO(u'-5\n99999999999\n+6\n')) as s:
            s.execute('10 INPUT a\n20 INPUT b\n30 PRINT a + b')
            assert s.execute('RUN') == u' ? -5\n ? INVALID NUMBER\n ? +6\n1\n'

    def test_input_end(self):
        """INPUT at end of input leaves the variable undefined."""
        with Session() as s:
            assert s.execute('INPUT n') == u' ? '
            assert s.evaluate('n') is None

    def test_syntax_errors(self):
        """Bad lines report a syntax error."""
        with Session() as s:
            for line in ('FOO', '+5', 'THEN', 'LET PRINT = 1', 'PRINT 1 2', '= 3'):
                assert s.execute(line) == u'SYNTAX ERROR\n', line

    def test_stored_syntax_error(self):
        """A line that fails to parse is kept and fails again when run."""
        with Session() as s:
            assert s.execute('10 PRINT') == u'SYNTAX ERROR\n'
            assert s.execute('20 LIST') == u'SYNTAX ERROR\n'
            assert s.execute('LIST') == u'10 PRINT\n20 LIST\n'
            assert s.execute('RUN') == u'SYNTAX ERROR\n'

    def test_runtime_errors(self):
        """Runtime errors stop the run and keep the state."""
        with Session() as s:
            s.execute('10 LET a = 1\n20 PRINT 1 / 0\n30 LET a = 2')
            assert s.execute('RUN') == u'DIVIDE BY ZERO\n'
            assert s.get_variable('a') == 1
            assert s.execute('PRINT y') == u'VARIABLE NOT DEFINED\n'


if __name__ == '__main__':
    run_tests()
