"""
Error handling for the Lox scanner.

Provides line-tagged diagnostics and the reporter that collects them.
Lexical errors never stop a scan pass: each one is recorded and the
scanner carries on, so a single pass surfaces every error in the source.

Author: xwest
"""

import sys
from typing import Optional, List, TextIO
from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
    """A single line-tagged error message."""
    line: int
    message: str
    where: str = ""                 # Location qualifier, empty for lexical errors
    code: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"


class LexerError(Exception):
    """
    Raised inside the scanner when the current lexeme is invalid.

    The scan loop catches it and hands the diagnostic to the reporter;
    it never escapes a scan pass.
    """

    def __init__(self, message: str, line: int, code: Optional[str] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(line=line, message=message, code=code)

    def __str__(self) -> str:
        return str(self.diagnostic)


class Diagnostics:
    """
    Collects diagnostics for one session and tracks whether any occurred.

    Every diagnostic is written to ``stream`` as soon as it is recorded.
    The stream defaults to whatever ``sys.stderr`` is at write time.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.had_error = False
        self.diagnostics: List[Diagnostic] = []

    def error(self, line: int, message: str):
        self.report(line, "", message)

    def report(self, line: int, where: str, message: str):
        self.record(Diagnostic(line=line, message=message, where=where))

    def record(self, diagnostic: Diagnostic):
        """Emit a diagnostic and mark the session as failed."""
        self.diagnostics.append(diagnostic)
        print(diagnostic, file=self.stream or sys.stderr)
        self.had_error = True

    def reset(self):
        """Clear the failed flag before an independent submission."""
        self.had_error = False
        self.diagnostics.clear()


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        message = f"Unexpected character '{char}'."
    else:
        message = f"Unexpected character U+{ord(char):04X}."
    return LexerError(message, line, code="L001")


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that reaches end of input."""
    return LexerError("Unterminated string.", line, code="L002")
