"""Command that checks whether a list of operations sorts the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from .parsing import InputError, parse_stack
from .stacks import Op, Stacks


class InstructionError(ValueError):
    """A line of input is not a known instruction."""


def parse_instruction(line: str) -> Op:
    """Read one input line, which must be an instruction name ended by a newline."""
    if not line.endswith("\n"):
        raise InstructionError(f"instruction not ended by a newline: {line!r}")
    try:
        return Op(line[:-1])
    except ValueError:
        raise InstructionError(f"unknown instruction: {line!r}") from None


def run_instructions(values: Iterable[int], lines: Iterable[str]) -> Stacks:
    """Apply each instruction line in turn to stacks built from ``values``."""
    stacks = Stacks(list(values), record=False)
    for line in lines:
        stacks.apply(parse_instruction(line))
    return stacks


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """True when the instructions leave the stacks in ascending order."""
    return run_instructions(values, lines).is_sorted()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``.

    Invalid numbers or instructions print ``Error`` on standard error.
    Already sorted input prints ``OK`` at once, without reading, and gives 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    if Stacks(values, record=False).is_sorted():
        sys.stdout.write("OK\n")
        return 1
    try:
        result = check(values, sys.stdin)
    except InstructionError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())