"""An argp-style program that declares its metadata.

No options or arguments are used, but the program version, bug-report
address and documentation string feed the synthesized ``--version`` and
``--help`` output, as GNU standards ask.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import typer

from optdemos.argp import (
    GNU_CONTEXT_SETTINGS,
    bug_report_epilog,
    run_app,
    usage_option,
    version_option,
)

PROG = "argp-ex2"
PROGRAM_VERSION = "argp-ex2 1.0"
BUG_ADDRESS = "<bug-gnu-utils@gnu.org>"
DOC = "Argp example #2 -- a pretty minimal program using argp"

app = typer.Typer(add_completion=False)


@app.command(
    help=DOC,
    epilog=bug_report_epilog(BUG_ADDRESS),
    context_settings=GNU_CONTEXT_SETTINGS,
)
def argp_ex2(
    version: bool = version_option(PROGRAM_VERSION),
    usage: bool = usage_option(),
) -> None:
    pass


def main(argv: Sequence[str] | None = None, *, prog: str = PROG) -> int:
    return run_app(app, sys.argv[1:] if argv is None else argv, prog_name=prog)


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
