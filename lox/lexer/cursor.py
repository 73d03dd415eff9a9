"""
Positional bookkeeping for the Lox scanner.

Offsets count characters (code points) of the source string, never bytes,
so a multi-byte character is always consumed as a single unit.

Author: xwest
"""


class Cursor:
    """
    Tracks the start of the current lexeme, the scan position and the line.
    """

    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.current = 0
        self.line = 1

    def at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        """Consume and return the next character, counting newlines."""
        if self.at_end():
            raise IndexError("advance() past end of source")
        char = self.source[self.current]
        self.current += 1
        if char == '\n':
            self.line += 1
        return char

    def peek(self) -> str:
        """Look at the next character without consuming it ('\\0' at end)."""
        if self.at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        """Consume the next character only if it equals ``expected``."""
        if self.at_end() or self.source[self.current] != expected:
            return False
        self.advance()
        return True

    def mark_start(self):
        self.start = self.current

    @property
    def lexeme(self) -> str:
        """Source text between the lexeme start and the scan position."""
        return self.source[self.start:self.current]
