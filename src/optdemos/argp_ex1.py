"""The smallest useful argp-style program.

It takes no options or arguments of its own: it exits quietly when run bare,
rejects any argument with a usage error, and answers ``--help`` and
``--usage`` with the synthesized defaults.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import typer

from optdemos.argp import GNU_CONTEXT_SETTINGS, run_app, usage_option

PROG = "argp-ex1"

app = typer.Typer(add_completion=False)


@app.command(context_settings=GNU_CONTEXT_SETTINGS)
def argp_ex1(usage: bool = usage_option()) -> None:
    pass


def main(argv: Sequence[str] | None = None, *, prog: str = PROG) -> int:
    return run_app(app, sys.argv[1:] if argv is None else argv, prog_name=prog)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
