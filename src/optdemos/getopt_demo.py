"""POSIX short-option parsing with ``getopt``.

Recognizes ``-a`` and ``-b VALUE``, reports each occurrence in command-line
order, then echoes the remaining positional arguments::

    $ getopt-demo -a -b foo x y
    Option -a
    Option -b with value 'foo'
    Argument: x
    Argument: y
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import typer

from optdemos.logging import get_logger
from optdemos.shortopts import describe_getopt_error, scan

PROG = "getopt-demo"
SHORTOPTS = "ab:"
USAGE = "Usage: {prog} [-a] [-b value]"

logger = get_logger("getopt_demo")


def main(argv: Sequence[str] | None = None, *, prog: str = PROG) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    result = scan(args, SHORTOPTS)
    logger.debug("scanned %r: %s", args, result)

    for opt, value in result.opts:
        if opt == "-a":
            typer.echo("Option -a")
        elif opt == "-b":
            typer.echo(f"Option -b with value '{value}'")

    if result.error is not None:
        typer.echo(describe_getopt_error(prog, result.error, SHORTOPTS), err=True)
        typer.echo(USAGE.format(prog=prog), err=True)
        return 1

    for operand in result.operands:
        typer.echo(f"Argument: {operand}")

    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
