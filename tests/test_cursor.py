"""
Tests for the scanner cursor.

Author: xwest
"""

import unittest
import sys
import os

project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox.lexer.cursor import Cursor


class TestCursor(unittest.TestCase):

    def test_starts_at_line_one(self):
        cursor = Cursor("abc")
        self.assertEqual((cursor.start, cursor.current, cursor.line), (0, 0, 1))
        self.assertFalse(cursor.at_end())

    def test_advance_returns_characters_in_order(self):
        cursor = Cursor("ab")
        self.assertEqual(cursor.advance(), "a")
        self.assertEqual(cursor.advance(), "b")
        self.assertTrue(cursor.at_end())

    def test_advance_past_end_raises(self):
        cursor = Cursor("")
        with self.assertRaises(IndexError):
            cursor.advance()

    def test_newline_increments_line(self):
        cursor = Cursor("a\n\nb")
        for _ in range(4):
            cursor.advance()
        self.assertEqual(cursor.line, 3)

    def test_peek_does_not_consume(self):
        cursor = Cursor("xy")
        self.assertEqual(cursor.peek(), "x")
        self.assertEqual(cursor.peek_next(), "y")
        self.assertEqual(cursor.current, 0)

    def test_peek_at_end_returns_nul(self):
        cursor = Cursor("x")
        self.assertEqual(cursor.peek_next(), "\0")
        cursor.advance()
        self.assertEqual(cursor.peek(), "\0")

    def test_match(self):
        cursor = Cursor("=>")
        self.assertFalse(cursor.match(">"))
        self.assertEqual(cursor.current, 0)
        self.assertTrue(cursor.match("="))
        self.assertEqual(cursor.current, 1)
        self.assertTrue(cursor.match(">"))
        self.assertFalse(cursor.match(">"))

    def test_offsets_count_characters_not_bytes(self):
        cursor = Cursor("∑x")
        self.assertEqual(cursor.advance(), "∑")
        self.assertEqual(cursor.current, 1)
        self.assertEqual(cursor.peek(), "x")

    def test_lexeme_spans_start_to_current(self):
        cursor = Cursor("foo bar")
        cursor.advance()
        cursor.advance()
        cursor.advance()
        self.assertEqual(cursor.lexeme, "foo")
        cursor.advance()
        cursor.mark_start()
        cursor.advance()
        self.assertEqual(cursor.lexeme, "b")


if __name__ == '__main__':
    unittest.main()
