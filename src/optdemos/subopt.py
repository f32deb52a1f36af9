"""Suboption scanning for mount-style option values.

A suboption string is a comma-separated list of ``name`` or ``name=value``
pieces, typically the value of a single short option::

    -o ro,rsize=4096,wsize=8192

``getsubopt`` walks such a string against an ordered table of known names
and reports, for each piece, which table entry it matched (or ``UNKNOWN``)
along with its value.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

__all__ = ["UNKNOWN", "Suboption", "atoi", "getsubopt"]

UNKNOWN = -1

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


@dataclass(frozen=True, slots=True)
class Suboption:
    """One piece of a suboption string.

    ``value`` follows getsubopt conventions: for a known name it is the text
    after ``=`` (``None`` when the piece has no ``=``); for an unknown name it
    is the whole piece.
    """

    index: int
    name: str
    value: str | None
    token: str

    @property
    def known(self) -> bool:
        return self.index != UNKNOWN


def getsubopt(text: str, tokens: Sequence[str]) -> Iterator[Suboption]:
    rest = text
    while rest:
        token, _, rest = rest.partition(",")
        name, sep, value = token.partition("=")
        for index, candidate in enumerate(tokens):
            if candidate == name:
                yield Suboption(index, name, value if sep else None, token)
                break
        else:
            yield Suboption(UNKNOWN, name, token, token)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped and parsing stops at the first character
    that is not a digit; text without any leading digits yields 0.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return int(match.group(1))
