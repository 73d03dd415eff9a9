"""
Tests for the ``lox`` command line.

Author: xwest
"""

import os
import sys
import tempfile
import unittest

from click.testing import CliRunner

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox._version import __version__
from lox.cli import main


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self.tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, name: str, content) -> str:
        """Write ``content`` (str or bytes) into the temp dir, return its path."""
        path = os.path.join(self.tmp.name, name)
        if isinstance(content, bytes):
            with open(path, "wb") as f:
                f.write(content)
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(content)
        return path

    def test_too_many_arguments(self):
        result = self.runner.invoke(main, ["a.lox", "b.lox"])
        self.assertEqual(result.exit_code, 64)
        self.assertIn("Usage: lox [script]", result.output)
        self.assertNotIn("EOF", result.output)

    def test_clean_file_exits_zero(self):
        path = self._write("ok.lox", "var x = 1;\n")
        result = self.runner.invoke(main, [path])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("VAR var", result.output)
        self.assertIn("NUMBER(1.0) 1", result.output)

    def test_file_with_lexical_error_exits_65(self):
        path = self._write("bad.lox", 'print "open;\n')
        result = self.runner.invoke(main, [path])
        self.assertEqual(result.exit_code, 65)
        self.assertIn("[line 1] Error: Unterminated string.", result.output)

    def test_missing_file_exits_66(self):
        path = os.path.join(self.tmp.name, "missing.lox")
        result = self.runner.invoke(main, [path])
        self.assertEqual(result.exit_code, 66)
        self.assertIn(f"Could not read '{path}'", result.output)

    def test_file_that_is_not_utf8_exits_66(self):
        path = self._write("latin1.lox", b"print \xff;\n")
        result = self.runner.invoke(main, [path])
        self.assertEqual(result.exit_code, 66)
        self.assertIn(f"Could not read '{path}'", result.output)
        self.assertNotIn("PRINT", result.output)

    def test_interactive_mode(self):
        result = self.runner.invoke(main, [], input="@\n(\n")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("> LEFT_PAREN (", result.output)
        self.assertIn("[line 1] Error: Unexpected character '@'.", result.output)

    def test_version(self):
        result = self.runner.invoke(main, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)


if __name__ == '__main__':
    unittest.main()
