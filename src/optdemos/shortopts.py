"""Short-option scanning that keeps what was parsed before a failure.

``getopt.gnu_getopt`` validates the whole argument list before returning
anything, while C getopt hands options back one at a time. ``scan`` bridges
the two: when the full list is rejected it re-parses the longest accepted
prefix, so callers can act on every option that precedes the bad one and
only then report the error.
"""

from __future__ import annotations

import getopt
from collections.abc import Sequence
from dataclasses import dataclass, field

from optdemos.env import posixly_correct

__all__ = ["Scan", "describe_getopt_error", "scan"]


@dataclass(slots=True)
class Scan:
    opts: list[tuple[str, str]] = field(default_factory=list)
    operands: list[str] = field(default_factory=list)
    error: getopt.GetoptError | None = None


def _option_string(shortopts: str) -> str:
    if posixly_correct() and not shortopts.startswith("+"):
        return "+" + shortopts
    return shortopts


def _accepted_prefix(args: list[str], shortopts: str) -> list[tuple[str, str]]:
    for end in range(len(args) - 1, -1, -1):
        candidates = [args[:end]]
        token = args[end]
        if token.startswith("-") and not token.startswith("--"):
            # options clustered ahead of the bad one in the same argument
            candidates[:0] = [args[:end] + [token[:cut]] for cut in range(len(token) - 1, 1, -1)]
        for candidate in candidates:
            try:
                opts, _ = getopt.gnu_getopt(candidate, shortopts)
            except getopt.GetoptError:
                continue
            return opts
    return []


def scan(args: Sequence[str], shortopts: str) -> Scan:
    """Parse ``args`` against ``shortopts`` with GNU permutation.

    On success ``opts`` and ``operands`` are what ``gnu_getopt`` returns. On
    failure ``error`` holds the ``GetoptError``, ``opts`` the options that
    precede the offending argument and ``operands`` is empty.
    """
    args = list(args)
    option_string = _option_string(shortopts)
    try:
        opts, operands = getopt.gnu_getopt(args, option_string)
    except getopt.GetoptError as err:
        return Scan(_accepted_prefix(args, option_string), [], err)
    return Scan(opts, operands)


def describe_getopt_error(prog: str, err: getopt.GetoptError, shortopts: str) -> str:
    """Render a ``GetoptError`` the way glibc's getopt reports it."""
    if err.msg.startswith("option --"):
        return f"{prog}: unrecognized option '--{err.opt}'"
    if err.opt in shortopts.replace(":", "").lstrip("+"):
        return f"{prog}: option requires an argument -- '{err.opt}'"
    return f"{prog}: invalid option -- '{err.opt}'"
