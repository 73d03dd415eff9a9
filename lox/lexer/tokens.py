"""
Token definitions for the Lox scanner.

This module defines every token type the scanner can produce:
- Single-character punctuation
- One or two character operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The end-of-input sentinel

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Tuple, Union


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Punctuation
    # ========================================================================
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACE = auto()             # {
    RIGHT_BRACE = auto()            # }
    COMMA = auto()                  # ,
    DOT = auto()                    # .
    MINUS = auto()                  # -
    PLUS = auto()                   # +
    SEMICOLON = auto()              # ;
    DIVIDE = auto()                 # /
    MULTIPLY = auto()               # *

    # ========================================================================
    # One or two character operators
    # ========================================================================
    LOGICAL_NOT = auto()            # !
    NOT_EQUAL = auto()              # !=
    ASSIGN = auto()                 # =
    EQUAL = auto()                  # ==
    GREATER_THAN = auto()           # >
    GREATER_EQUAL = auto()          # >=
    LESS_THAN = auto()              # <
    LESS_EQUAL = auto()             # <=

    # ========================================================================
    # Literals
    # ========================================================================
    IDENTIFIER = auto()             # counter, _tmp, x1
    STRING = auto()                 # "hello"
    NUMBER = auto()                 # 42, 3.14

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # ========================================================================
    # Special Tokens
    # ========================================================================
    EOF = auto()                    # End of input


# Token types whose Token carries a literal payload
LITERAL_TYPES = frozenset({TokenType.STRING, TokenType.NUMBER})


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), literal payload and the
    line it was scanned on. Only STRING and NUMBER tokens carry a literal;
    every other type leaves it as None.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Union[str, float, None]
    line: int

    def describe(self) -> str:
        """Stable textual tag for the token kind, payload included."""
        if self.type in LITERAL_TYPES:
            return f"{self.type.name}({self.literal!r})"
        return self.type.name

    def __str__(self) -> str:
        return f"{self.describe()} {self.lexeme}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def is_literal(self) -> bool:
        """Check if this token is a string or number literal."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type in KEYWORD_TYPES


# Lookup tables used by the scanner for token recognition

KEYWORDS = {
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "fun": TokenType.FUN,
    "for": TokenType.FOR,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
}

KEYWORD_TYPES = frozenset(KEYWORDS.values())

# Punctuation that never starts a longer token.
# "/" is absent: it may open a line comment.
SINGLE_CHAR = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.MULTIPLY,
}

# Operators that become a two-character token when followed by "="
TWO_CHAR: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.LOGICAL_NOT, TokenType.NOT_EQUAL),
    "=": (TokenType.ASSIGN, TokenType.EQUAL),
    ">": (TokenType.GREATER_THAN, TokenType.GREATER_EQUAL),
    "<": (TokenType.LESS_THAN, TokenType.LESS_EQUAL),
}


def lookup_keyword(lexeme: str) -> TokenType:
    """Classify an identifier-shaped lexeme as a keyword or IDENTIFIER."""
    return KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
