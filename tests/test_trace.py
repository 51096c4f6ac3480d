"""
Test suite for trace sinks and event rendering.
"""

import io
import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sccparse.lexer import Symbol, Token
from sccparse.parser import (
    Rule, RecordingTrace, StreamTrace, NullTrace,
    RuleStarted, RuleFinished, TerminalAccepted, ParseSucceeded, ErrorReported,
)


class TestEventRendering(unittest.TestCase):
    """Each event renders to the trace line format."""

    def test_rule_events(self):
        self.assertEqual(RuleStarted(Rule.STATEMENT_LIST).render(), ["BEGIN <statement list>"])
        self.assertEqual(RuleFinished(Rule.FACTOR).render(), ["END <factor>"])

    def test_terminal_with_lexeme(self):
        event = TerminalAccepted(Token(Symbol.NUMBER_CONSTANT, "12", 3))

        self.assertEqual(event.render(), ["TOKEN numberConstant '12' on line 3"])

    def test_terminal_without_lexeme(self):
        event = TerminalAccepted(Token(Symbol.NOT_EQUAL, "/=", 7))

        self.assertEqual(event.render(), ["TOKEN notEqual on line 7"])

    def test_outcomes(self):
        self.assertEqual(ParseSucceeded().render(), ["SUCCESS"])
        self.assertEqual(
            ErrorReported(Token(Symbol.END, "end", 2), "'then' at line 2").render(),
            ["COMPILATION_EXCEPTION", "EXPECTED 'then' at line 2, found: 'end'"],
        )


class TestSinks(unittest.TestCase):

    def test_recording_trace(self):
        trace = RecordingTrace()
        trace.begin_rule(Rule.CONDITION)
        trace.insert_terminal(Token(Symbol.IDENTIFIER, "x", 1))
        trace.end_rule(Rule.CONDITION)
        trace.report_success()

        self.assertEqual(len(trace), 4)
        self.assertEqual(trace.lines(), [
            "BEGIN <condition>",
            "TOKEN identifier 'x' on line 1",
            "END <condition>",
            "SUCCESS",
        ])

    def test_stream_trace_prefix(self):
        out = io.StringIO()
        trace = StreamTrace(out, prefix="rgg")
        trace.begin_rule(Rule.STATEMENT_PART)
        trace.report_error(Token(Symbol.EOF, "", 1), "'begin' at line 1")

        self.assertEqual(out.getvalue(), (
            "rggBEGIN <statement part>\n"
            "rggCOMPILATION_EXCEPTION\n"
            "rggEXPECTED 'begin' at line 1, found: ''\n"
        ))

    def test_stream_trace_outcome_only(self):
        out = io.StringIO()
        trace = StreamTrace(out, rules=False)
        trace.begin_rule(Rule.STATEMENT_PART)
        trace.insert_terminal(Token(Symbol.BEGIN, "begin", 1))
        trace.end_rule(Rule.STATEMENT_PART)
        trace.report_success()

        self.assertEqual(out.getvalue(), "SUCCESS\n")

    def test_null_trace(self):
        NullTrace().report_success()


if __name__ == '__main__':
    unittest.main()
