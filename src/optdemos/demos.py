from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from optdemos import argp_ex1, argp_ex2, getopt_demo, getsubopt_demo


@dataclass(frozen=True, slots=True)
class Demo:
    name: str
    description: str
    main: Callable[..., int]

    def __call__(self, argv: Sequence[str]) -> int:
        return self.main(argv, prog=self.name)


DEMOS: dict[str, Demo] = {
    demo.name: demo
    for demo in (
        Demo(argp_ex1.PROG, "Minimal argp program: no options, no arguments.", argp_ex1.main),
        Demo(argp_ex2.PROG, "argp program with version, bug address and docs.", argp_ex2.main),
        Demo(getopt_demo.PROG, "getopt over -a and -b VALUE, then operands.", getopt_demo.main),
        Demo(
            getsubopt_demo.PROG,
            "getopt over -a, -t TYPE, -o SUBOPTS with mount-style suboptions.",
            getsubopt_demo.main,
        ),
    )
}
