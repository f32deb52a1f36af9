"""Mount-style option parsing: ``getopt`` for the flags, ``getsubopt`` for ``-o``.

    $ getsubopt-demo -t nfs -o rsize=4096,wsize=8192,ro

Unknown suboptions are reported and skipped. An unknown flag, or ``rsize`` /
``wsize`` given without a value, aborts the process.
"""

from __future__ import annotations

import getopt
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

import typer

from optdemos.logging import get_logger
from optdemos.shortopts import scan
from optdemos.subopt import atoi, getsubopt

PROG = "getsubopt-demo"
SHORTOPTS = "at:o:"

RO_OPTION, RW_OPTION, READ_SIZE_OPTION, WRITE_SIZE_OPTION = range(4)
MOUNT_OPTS = ("ro", "rw", "rsize", "wsize")

logger = get_logger("getsubopt_demo")


class MountOptionError(Exception):
    """A known suboption is missing its required value."""


@dataclass(slots=True)
class MountOptions:
    do_all: bool = False
    type: str | None = None
    read_size: int = 0
    write_size: int = 0
    read_only: bool = False


def apply_suboptions(options: MountOptions, text: str) -> None:
    for sub in getsubopt(text, MOUNT_OPTS):
        if not sub.known:
            typer.echo(f"Unknown suboption `{sub.token}'")
        elif sub.index == RO_OPTION:
            options.read_only = True
        elif sub.index == RW_OPTION:
            options.read_only = False
        else:
            if sub.value is None:
                raise MountOptionError(f"suboption {sub.name!r} requires a value")
            if sub.index == READ_SIZE_OPTION:
                options.read_size = atoi(sub.value)
            else:
                options.write_size = atoi(sub.value)


def parse_mount_args(argv: Sequence[str]) -> MountOptions:
    """Parse ``argv`` into ``MountOptions``.

    Options are applied in command-line order. Raises ``MountOptionError``
    for ``rsize``/``wsize`` without a value and ``getopt.GetoptError`` for an
    unknown flag or a flag missing its value, in each case after applying
    the options that precede it. Positional arguments are ignored.
    """
    options = MountOptions()
    result = scan(argv, SHORTOPTS)
    for opt, value in result.opts:
        if opt == "-a":
            options.do_all = True
        elif opt == "-t":
            options.type = value
        elif opt == "-o":
            apply_suboptions(options, value)
    if result.error is not None:
        raise result.error
    return options


def main(argv: Sequence[str] | None = None, *, prog: str = PROG) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        options = parse_mount_args(args)
    except (getopt.GetoptError, MountOptionError) as exc:
        logger.debug("%s: aborting: %s", prog, exc)
        os.abort()

    logger.debug("%s: %s", prog, options)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
