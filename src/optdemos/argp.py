"""GNU-style command-line conventions on top of typer.

argp gives every program ``-?``/``--help`` and ``--usage`` for free, plus
``-V``/``--version`` and a ``Report bugs to ...`` trailer when the program
declares a version string and a bug address. The helpers here hand the same
set to a single-command typer app.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import typer

__all__ = [
    "GNU_CONTEXT_SETTINGS",
    "bug_report_epilog",
    "run_app",
    "usage_option",
    "version_option",
]

GNU_CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-?", "--help"]}


def bug_report_epilog(bug_address: str | None) -> str | None:
    if bug_address is None:
        return None
    return f"Report bugs to {bug_address}."


def _usage_callback(ctx: typer.Context, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    typer.echo(ctx.get_usage())
    raise typer.Exit()


def usage_option() -> Any:
    return typer.Option(
        False,
        "--usage",
        callback=_usage_callback,
        is_eager=True,
        help="Give a short usage message.",
    )


def version_option(version: str) -> Any:
    def _version_callback(ctx: typer.Context, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        typer.echo(version)
        raise typer.Exit()

    return typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print program version.",
    )


def run_app(app: typer.Typer, argv: Sequence[str], *, prog_name: str) -> int:
    """Run ``app`` over ``argv`` and return its exit status instead of exiting."""
    command = typer.main.get_command(app)
    try:
        command.main(args=list(argv), prog_name=prog_name, standalone_mode=True)
    except SystemExit as exc:
        if exc.code is None:
            return 0
        if isinstance(exc.code, int):
            return exc.code
        return 1
    return 0
