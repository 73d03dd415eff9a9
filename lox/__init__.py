"""
Lox Interpreter Package

Front end of an interpreter for Lox, a small dynamically typed scripting
language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── session.py       # File and interactive drivers
    └── cli.py           # Command line entry point

Author: xwest
License: MIT
"""

from ._version import __version__

__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType
from .session import Lox

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "Lox",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
