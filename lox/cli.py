"""
Command line entry point: ``lox [script]``.

With no argument an interactive prompt is started; with one argument the
named file is scanned. Anything else is a usage error.

Author: xwest
"""

import click

from ._version import __version__
from .session import Lox, EX_USAGE, EX_NOINPUT

USAGE = "Usage: lox [script]"


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("args", nargs=-1, metavar="[script]")
@click.version_option(__version__, prog_name="lox")
@click.pass_context
def main(ctx: click.Context, args):
    """Scan a Lox script, or start an interactive prompt."""
    if len(args) > 1:
        click.echo(USAGE, err=True)
        ctx.exit(EX_USAGE)

    lox = Lox()

    if not args:
        lox.run_prompt()
        return

    try:
        status = lox.run_file(args[0])
    except (OSError, UnicodeDecodeError) as e:
        reason = getattr(e, "strerror", None) or e
        click.echo(f"Could not read '{args[0]}': {reason}", err=True)
        ctx.exit(EX_NOINPUT)

    ctx.exit(status)
