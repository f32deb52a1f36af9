from __future__ import annotations

import typer

from optdemos.config import GLOBAL_OPTIONS
from optdemos.demos import DEMOS
from optdemos.logging import configure_logger
from optdemos.logging_utils import logger, setup_rich_logging
from optdemos.version import __version__

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="optdemos: command-line option parsing demonstrations.",
)


@app.callback()
def main(
    verbose: int = typer.Option(
        0, "-v", "--verbose", count=True, help="Increase log verbosity (repeatable)."
    ),
) -> None:
    GLOBAL_OPTIONS.verbose = verbose
    level = setup_rich_logging(verbose)
    configure_logger(level=level if verbose else None, force=True)


@app.command()
def version() -> None:
    """Print version and exit."""
    typer.echo(__version__)


@app.command("list")
def list_demos() -> None:
    """List the available demo programs."""
    logger.table(
        "Demos",
        name=[demo.name for demo in DEMOS.values()],
        description=[demo.description for demo in DEMOS.values()],
    )


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def run(
    ctx: typer.Context,
    demo: str = typer.Argument(..., help="Demo program to run (see `optdemos list`)."),
) -> None:
    """Run a demo program, passing the remaining arguments through verbatim."""
    entry = DEMOS.get(demo)
    if entry is None:
        raise typer.BadParameter(
            f"Unknown demo: {demo}. Choose from: {', '.join(DEMOS)}.",
            param_hint="DEMO",
        )

    logger.debug(f"Running {demo} with {ctx.args}")
    status = entry(ctx.args)
    logger.info(f"{demo} exited with status {status}")
    raise typer.Exit(code=status)
