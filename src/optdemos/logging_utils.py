from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table


class Colors(Enum):
    PRIMARY = "#87AFA3"
    NUMERIC = "bold cyan"


class RichLogger:
    """Console output for the ``optdemos`` umbrella CLI.

    Records go through a ``RichHandler`` on ``optdemos.cli`` and land on
    stderr; ``table`` renders to stdout.
    """

    def __init__(
        self,
        level: int = logging.WARNING,
        console: Console | None = None,
        name: str = "optdemos.cli",
        err_console: Console | None = None,
    ) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False
        self._logger.handlers.clear()
        self._logger.addHandler(
            RichHandler(
                console=self.err_console,
                show_path=False,
                markup=False,
                show_time=True,
                rich_tracebacks=True,
            )
        )

    def setLevel(self, level: int) -> None:
        self._logger.setLevel(level)

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)

    def table(self, title: str, **columns: Sequence[Any]) -> None:
        """Render equally long ``columns`` as a table; numeric columns align right."""
        assert columns, "Must provide at least one column"

        table = Table(
            title=title,
            box=box.ASCII_DOUBLE_HEAD,
            title_style=f"bold {Colors.PRIMARY.value}",
            title_justify="left",
        )
        for name, values in columns.items():
            numeric = bool(values) and all(isinstance(v, int | float) for v in values)
            table.add_column(
                name,
                overflow="fold",
                justify="right" if numeric else "left",
                style=Colors.NUMERIC.value if numeric else None,
            )

        for row in zip(*columns.values(), strict=True):
            table.add_row(*("" if value is None else str(value) for value in row))

        self.console.print(table)


logger = RichLogger()


def setup_rich_logging(verbosity: int = 0) -> int:
    """Map a ``-v`` count onto a log level and apply it to the console logger."""
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logger.setLevel(level)
    return level
