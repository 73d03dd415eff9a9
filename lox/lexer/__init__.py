"""
Lox Lexer Package

Implements the lexical front end of the Lox interpreter: converts raw
source text into a line-annotated list of classified tokens for the
parser.

Key Features:
- One-character lookahead for two-character operators and comments
- String, number and identifier literals with reserved keywords
- Error recovery: every lexical error in a pass is reported
- Line tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .cursor import Cursor
from .scanner import Scanner, tokenize_string, tokenize_file
from .errors import Diagnostic, Diagnostics, LexerError

__all__ = [
    "Scanner",
    "Cursor",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "Diagnostics",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
