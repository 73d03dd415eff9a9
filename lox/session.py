"""
Lox session - runs source through the scanner and reports the tokens.

A session owns the Diagnostics reporter and therefore the had-error
flag. Independent sessions never share state.

Author: xwest
"""

from typing import List, Optional, TextIO

import click

from .lexer import Diagnostics, Scanner, Token

# Process exit statuses (sysexits.h)
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


class Lox:
    """
    Driver for one-shot file runs and the interactive prompt.

    Tokens are printed one per line to ``out``; diagnostics go to ``err``.
    Both default to the process streams at write time.
    """

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.out = out
        self.diagnostics = Diagnostics(err)

    @property
    def had_error(self) -> bool:
        return self.diagnostics.had_error

    def run(self, source: str) -> List[Token]:
        """Scan ``source`` and report every token in scan order."""
        tokens = Scanner(source, self.diagnostics).scan_tokens()

        # The parser will take these over once it exists
        for token in tokens:
            click.echo(str(token), file=self.out)

        return tokens

    def run_file(self, path: str) -> int:
        """
        Run a whole file as one source unit.

        Returns:
            EX_DATAERR if any lexical error was reported, EX_OK otherwise

        Raises:
            OSError: If the file cannot be read
        """
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()

        self.run(source)
        return EX_DATAERR if self.had_error else EX_OK

    def run_prompt(self, stdin: Optional[TextIO] = None):
        """Read, scan and report one line at a time until end of input."""
        if stdin is None:
            stdin = click.get_text_stream('stdin')

        while True:
            click.echo(PROMPT, nl=False, file=self.out)

            line = stdin.readline()
            if not line:
                break

            self.run(line)
            # A mistake on one line must not poison the next
            self.diagnostics.reset()
