from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class GlobalOptions:
    """Holds process-wide CLI options set by the ``optdemos`` callback."""

    verbose: int = 0


GLOBAL_OPTIONS = GlobalOptions()
