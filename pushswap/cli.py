"""Command that prints the operations sorting the numbers it is given."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .parsing import InputError, parse_stack
from .sorting import sort_stacks
from .stacks import Stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Print one operation per line that sorts the given numbers.

    With no arguments nothing is printed. Invalid input prints ``Error`` on
    standard error. Input that is already sorted prints nothing and gives 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_stack(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    stacks = Stacks(values)
    if stacks.is_sorted():
        return 1
    sort_stacks(stacks)
    sys.stdout.write("".join(f"{op}\n" for op in stacks.ops))
    return 0


if __name__ == "__main__":
    sys.exit(main())