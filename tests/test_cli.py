"""
Test suite for the sccparse command line interface.
"""

import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from sccparse.cli import main, EXIT_SUCCESS, EXIT_SYNTAX_ERROR, EXIT_INPUT_ERROR


class TestCli(unittest.TestCase):
    """Test cases for the check and lex commands."""

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, source: str, name: str = "prog.scc") -> str:
        path = os.path.join(self.tmp.name, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(source)
        return path

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(argv))
        return status, out.getvalue(), err.getvalue()

    def test_check_success(self):
        path = self._write('begin\n  x := "a"\nend\n')

        status, out, err = self._run("check", path)

        self.assertEqual(status, EXIT_SUCCESS)
        lines = out.splitlines()
        self.assertEqual(lines[0], "BEGIN <statement part>")
        self.assertEqual(lines[-1], "SUCCESS")
        self.assertNotIn("Compilation Exception", out)
        self.assertEqual(err, "")

    def test_check_syntax_error(self):
        path = self._write("begin\n  x := ;\nend\n")

        status, out, _ = self._run("check", path)

        self.assertEqual(status, EXIT_SYNTAX_ERROR)
        lines = out.splitlines()
        self.assertNotIn("SUCCESS", lines)
        self.assertEqual(lines.count("COMPILATION_EXCEPTION"), 1)
        self.assertIn("EXPECTED 'identifier', 'numberConstant' or '(' at line 2, found: ';'", lines)
        trail = lines[lines.index("Compilation Exception") + 1:]
        self.assertEqual(trail[0], "'<statement part>' at line 1.")
        self.assertEqual(trail[-1].strip(), "expected 'identifier', 'numberConstant' or '(' at line 2, found: ';'")
        self.assertEqual(len(trail), 8)

    def test_check_prefix(self):
        path = self._write('begin x := "a" end')

        _, out, _ = self._run("check", "--prefix", "rgg", path)

        self.assertTrue(all(line.startswith("rgg") for line in out.splitlines()))
        self.assertIn("rggSUCCESS", out.splitlines())

    def test_check_quiet(self):
        path = self._write('begin x := "a" end')

        status, out, _ = self._run("check", "--quiet", path)

        self.assertEqual(status, EXIT_SUCCESS)
        self.assertEqual(out, "SUCCESS\n")

    def test_check_fragment(self):
        path = self._write("call p ( a , b )")

        status, _, _ = self._run("check", "--start", "STATEMENT", path)

        self.assertEqual(status, EXIT_SUCCESS)

    def test_check_missing_file(self):
        status, out, err = self._run("check", os.path.join(self.tmp.name, "missing.scc"))

        self.assertEqual(status, EXIT_INPUT_ERROR)
        self.assertEqual(out, "")
        self.assertIn("cannot read", err)

    def test_check_lexer_error(self):
        path = self._write("begin x := 1 # end")

        status, out, err = self._run("check", path)

        self.assertEqual(status, EXIT_INPUT_ERROR)
        self.assertNotIn("Compilation Exception", out)
        self.assertIn("Invalid character: '#'", err)

    def test_check_verbose(self):
        path = self._write('begin x := "a" end')

        status, _, _ = self._run("-v", "check", path)

        self.assertEqual(status, EXIT_SUCCESS)

    def test_check_deep_nesting(self):
        depth = sys.getrecursionlimit()
        path = self._write("begin " + "while x > 1 loop " * depth + "y := 1" + " end loop" * depth + " end")

        status, out, err = self._run("check", "--quiet", path)

        self.assertEqual(status, EXIT_INPUT_ERROR)
        self.assertEqual(out, "")
        self.assertIn("nests too deeply", err)

    def test_check_several_files(self):
        good = self._write('begin x := "a" end', "good.scc")
        bad = self._write("begin x := ; end", "bad.scc")

        status, out, _ = self._run("check", "--quiet", good, bad, good)

        self.assertEqual(status, EXIT_SYNTAX_ERROR)
        lines = out.splitlines()
        self.assertEqual(lines.count("SUCCESS"), 2)
        self.assertEqual(lines.count("Compilation Exception"), 1)

    def test_check_input_error_outranks_syntax_error(self):
        bad = self._write("begin x := ; end")

        status, _, _ = self._run("check", bad, os.path.join(self.tmp.name, "missing.scc"))

        self.assertEqual(status, EXIT_INPUT_ERROR)

    def test_lex(self):
        path = self._write('begin\n  x := "hi"\nend')

        status, out, _ = self._run("lex", path)

        self.assertEqual(status, EXIT_SUCCESS)
        self.assertEqual(out.splitlines(), [
            "1: begin",
            "2: identifier 'x'",
            "2: becomes",
            "2: stringConstant 'hi'",
            "3: end",
            "3: eof",
        ])


if __name__ == '__main__':
    unittest.main()
