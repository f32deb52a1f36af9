from __future__ import annotations

import os
from collections.abc import Iterator

import pytest
from typer.testing import CliRunner

from optdemos.config import GLOBAL_OPTIONS
from optdemos.logging import configure_logger
from optdemos.logging_utils import setup_rich_logging


class Aborted(Exception):
    """Raised in place of ``os.abort()`` so abort paths can be asserted."""


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def fake_abort(monkeypatch: pytest.MonkeyPatch) -> type[Aborted]:
    def _abort() -> None:
        raise Aborted()

    monkeypatch.setattr(os, "abort", _abort)
    return Aborted


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    # CLI invocations may point handlers at streams that close after the test.
    yield
    GLOBAL_OPTIONS.verbose = 0
    setup_rich_logging(0)
    configure_logger(level="WARNING", force=True)
