"""
Test suite for syntax error chains.

Tests cover:
- Frame construction for rules
- Functional extension of the chain
- Nested rendering and the explicit analysis result
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sccparse.lexer import Symbol, Token
from sccparse.parser import AnalysisResult, ErrorFrame, Rule, SyntaxAnalysisError


class TestSyntaxAnalysisError(unittest.TestCase):
    """Test cases for the chained syntax error."""

    def setUp(self):
        self.found = Token(Symbol.SEMICOLON, ";", 4)
        self.error = SyntaxAnalysisError("'identifier' at line 4", self.found)

    def test_origin_frame(self):
        self.assertEqual(len(self.error.frames), 1)
        self.assertEqual(self.error.origin.message, "expected 'identifier' at line 4, found: ';'")
        self.assertEqual(self.error.line, 4)
        self.assertEqual(self.error.rules, ())

    def test_rule_frame(self):
        frame = ErrorFrame.for_rule(Rule.WHILE_STATEMENT, 2)

        self.assertEqual(frame, ErrorFrame("<while statement>", 2, "'<while statement>' at line 2."))

    def test_within_extends_a_copy(self):
        """Adding context leaves the inner error untouched."""
        outer = self.error.within(Rule.FACTOR, 4).within(Rule.EXPRESSION, 3)

        self.assertEqual(len(self.error.frames), 1)
        self.assertEqual(outer.rules, ("<factor>", "<expression>"))
        self.assertEqual(outer.found, self.found)
        self.assertEqual(str(outer), str(self.error))

    def test_trace_nests_outermost_first(self):
        error = self.error.within(Rule.FACTOR, 4).within(Rule.STATEMENT_PART, 1)

        self.assertEqual(error.trace(), (
            "'<statement part>' at line 1.\n"
            "  '<factor>' at line 4.\n"
            "    expected 'identifier' at line 4, found: ';'"
        ))

    def test_trace_custom_indent(self):
        error = self.error.within(Rule.FACTOR, 4)

        self.assertEqual(error.trace(indent="\t"), (
            "'<factor>' at line 4.\n"
            "\texpected 'identifier' at line 4, found: ';'"
        ))


class TestAnalysisResult(unittest.TestCase):

    def test_success(self):
        result = AnalysisResult()

        self.assertTrue(result.succeeded)
        self.assertTrue(result)
        self.assertEqual(result.frames, ())

    def test_failure(self):
        error = SyntaxAnalysisError("'end' at line 1", Token(Symbol.EOF, "", 1))
        result = AnalysisResult(error)

        self.assertFalse(result.succeeded)
        self.assertFalse(result)
        self.assertEqual(result.frames, error.frames)


if __name__ == '__main__':
    unittest.main()
