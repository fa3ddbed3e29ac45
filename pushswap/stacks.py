"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Op(str, Enum):
    """An operation, valued by the instruction name it is written as."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


@dataclass
class Stacks:
    """Stacks a and b kept in one list.

    ``values[:index_a]`` holds stack b with its top at ``index_a - 1``;
    ``values[index_a:]`` holds stack a with its top at ``index_a``.
    When ``record`` is true, every operation that would be written out
    is appended to ``ops``.
    """

    values: list[int]
    index_a: int = 0
    record: bool = True
    ops: list[Op] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.values = list(self.values)
        if not 0 <= self.index_a <= len(self.values):
            raise ValueError("index_a lies outside the stack")

    @property
    def size(self) -> int:
        """Total number of values in both stacks."""
        return len(self.values)

    @property
    def stack_a(self) -> list[int]:
        """Stack a, top first."""
        return self.values[self.index_a:]

    @property
    def stack_b(self) -> list[int]:
        """Stack b, top first."""
        return self.values[: self.index_a][::-1]

    def _log(self, op: Op) -> None:
        if self.record:
            self.ops.append(op)

    def _rotate_a(self, reverse: bool) -> None:
        segment = self.values[self.index_a:]
        if segment:
            segment = segment[-1:] + segment[:-1] if reverse else segment[1:] + segment[:1]
            self.values[self.index_a:] = segment

    def _rotate_b(self, reverse: bool) -> None:
        segment = self.values[: self.index_a]
        if segment:
            segment = segment[1:] + segment[:1] if reverse else segment[-1:] + segment[:-1]
            self.values[: self.index_a] = segment

    def _swap_a(self) -> None:
        i = self.index_a
        self.values[i], self.values[i + 1] = self.values[i + 1], self.values[i]

    def _swap_b(self) -> None:
        i = self.index_a
        self.values[i - 1], self.values[i - 2] = self.values[i - 2], self.values[i - 1]

    def pa(self) -> None:
        """Move the top of b onto a; nothing happens when b is empty."""
        if self.index_a > 0:
            self.index_a -= 1
            self._log(Op.PA)

    def pb(self) -> None:
        """Move the top of a onto b; nothing happens when a is empty."""
        if self.size - self.index_a > 0:
            self.index_a += 1
            self._log(Op.PB)

    def sa(self) -> None:
        """Swap the two top values of a, if it holds at least two."""
        if self.size - self.index_a > 1:
            self._swap_a()
            self._log(Op.SA)

    def sb(self) -> None:
        """Swap the two top values of b, if it holds at least two."""
        if self.index_a > 1:
            self._swap_b()
            self._log(Op.SB)

    def ss(self) -> None:
        """Swap the tops of both stacks, only when each holds at least two."""
        if self.index_a > 1 and self.size - self.index_a > 1:
            self._swap_b()
            self._swap_a()
            self._log(Op.SS)

    def ra(self) -> None:
        """Rotate a: its top value goes to the bottom."""
        self._rotate_a(reverse=False)
        self._log(Op.RA)

    def rb(self) -> None:
        """Rotate b: its top value goes to the bottom."""
        self._rotate_b(reverse=False)
        self._log(Op.RB)

    def rr(self) -> None:
        """Rotate both stacks at once."""
        self._rotate_a(reverse=False)
        self._rotate_b(reverse=False)
        self._log(Op.RR)

    def rra(self) -> None:
        """Reverse-rotate a: its bottom value goes to the top."""
        self._rotate_a(reverse=True)
        self._log(Op.RRA)

    def rrb(self) -> None:
        """Reverse-rotate b: its bottom value goes to the top."""
        self._rotate_b(reverse=True)
        self._log(Op.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks at once."""
        self._rotate_a(reverse=True)
        self._rotate_b(reverse=True)
        self._log(Op.RRR)

    def apply(self, op: Op | str) -> None:
        """Perform an operation given as an Op or by its name."""
        getattr(self, Op(op).value)()

    def is_sorted(self) -> bool:
        """True when the whole underlying list, b then a, is in ascending order."""
        return all(left <= right for left, right in zip(self.values, self.values[1:]))

    def min_value_in_a(self) -> int:
        """The smallest value in stack a."""
        if self.index_a >= self.size:
            raise ValueError("stack a is empty")
        return min(self.stack_a)

    def min_index_in_a(self) -> int:
        """Position, counted from the top of a, of the first smallest value in a."""
        stack_a = self.stack_a
        if not stack_a:
            raise ValueError("stack a is empty")
        return stack_a.index(min(stack_a))