"""
Lox Scanner - turns source text into a flat list of tokens.

One token per loop iteration. Ambiguous prefixes ("!" vs "!=",
"/" vs "//") are settled with a single character of lookahead, so the
scanner never backtracks. Errors are recorded and scanning continues.

xwest
"""

from typing import List, Optional

from .cursor import Cursor
from .tokens import (
    Token, TokenType, SINGLE_CHAR, TWO_CHAR, lookup_keyword
)
from .errors import (
    Diagnostics, LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)

WHITESPACE = frozenset(' \r\t')


def is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


class Scanner:
    """
    Lox lexical analyzer.

    Converts one source unit into tokens, always terminated by a single
    EOF token. Unrecognized input is routed to ``diagnostics``.
    """

    def __init__(self, source: str, diagnostics: Optional[Diagnostics] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: Source code string
            diagnostics: Reporter that receives lexical errors
        """
        self.cursor = Cursor(source)
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.tokens: List[Token] = []

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        while not self.cursor.at_end():
            self.cursor.mark_start()
            try:
                self._scan_token()
            except LexerError as e:
                self.diagnostics.record(e.diagnostic)

        self.tokens.append(Token(TokenType.EOF, "", None, self.cursor.line))
        return list(self.tokens)

    def _scan_token(self):
        char = self.cursor.advance()

        if char in SINGLE_CHAR:
            self._add_token(SINGLE_CHAR[char])
        elif char in TWO_CHAR:
            one_char, two_char = TWO_CHAR[char]
            self._add_token(two_char if self.cursor.match('=') else one_char)
        elif char == '/':
            if self.cursor.match('/'):
                self._skip_line_comment()
            else:
                self._add_token(TokenType.DIVIDE)
        elif char in WHITESPACE or char == '\n':
            # Cursor.advance already counted the newline
            pass
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            raise create_unexpected_character_error(char, self.cursor.line)

    def _skip_line_comment(self):
        # The newline itself is left for the main loop
        while self.cursor.peek() != '\n' and not self.cursor.at_end():
            self.cursor.advance()

    def _string(self):
        start_line = self.cursor.line

        while self.cursor.peek() != '"' and not self.cursor.at_end():
            self.cursor.advance()

        if self.cursor.at_end():
            raise create_unterminated_string_error(start_line)

        self.cursor.advance()  # Closing quote

        # Escape sequences are not interpreted
        value = self.cursor.source[self.cursor.start + 1:self.cursor.current - 1]
        self._add_token(TokenType.STRING, value, line=start_line)

    def _number(self):
        while is_digit(self.cursor.peek()):
            self.cursor.advance()

        # A trailing "." without a digit after it is left for the next token
        if self.cursor.peek() == '.' and is_digit(self.cursor.peek_next()):
            self.cursor.advance()
            while is_digit(self.cursor.peek()):
                self.cursor.advance()

        self._add_token(TokenType.NUMBER, float(self.cursor.lexeme))

    def _identifier(self):
        while is_alphanumeric(self.cursor.peek()):
            self.cursor.advance()

        self._add_token(lookup_keyword(self.cursor.lexeme))

    def _add_token(self, token_type: TokenType, literal=None, line: Optional[int] = None):
        self.tokens.append(Token(
            token_type,
            self.cursor.lexeme,
            literal,
            self.cursor.line if line is None else line
        ))

    def has_errors(self) -> bool:
        """Check if the scanner reported any errors."""
        return self.diagnostics.had_error


def tokenize_string(source: str, diagnostics: Optional[Diagnostics] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        diagnostics: Reporter for lexical errors

    Returns:
        List of tokens
    """
    return Scanner(source, diagnostics).scan_tokens()


def tokenize_file(filepath: str, diagnostics: Optional[Diagnostics] = None) -> List[Token]:
    """
    Convenience function to scan a source file.

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, diagnostics)
