"""Cost of moving a value from stack b into place in stack a, and the move itself."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from .stacks import Stacks


class Move(Enum):
    """The four ways of combining rotations before pushing a value back onto a."""

    RR = 1
    RA_RRB = 2
    RRA_RB = 3
    RRR = 4


def _fits(stack_a: list[int], position: int, value: int) -> bool:
    """True when ``value`` belongs just above ``stack_a[position]``, cyclically."""
    return not (value > stack_a[position] or stack_a[position - 1] > value)


def _first_fit(stack_a: list[int], value: int, order: Iterable[int]) -> int:
    for count, position in enumerate(order):
        if _fits(stack_a, position, value):
            return count
    raise ValueError(f"no place for {value} in stack a")


def cost_ra(stacks: Stacks, value: int) -> int:
    """Number of ``ra`` needed before ``value`` can be pushed onto a in order."""
    if stacks.min_value_in_a() > value:
        return stacks.min_index_in_a()
    stack_a = stacks.stack_a
    return _first_fit(stack_a, value, range(len(stack_a)))


def cost_rra(stacks: Stacks, value: int) -> int:
    """Number of ``rra`` needed before ``value`` can be pushed onto a in order."""
    stack_a = stacks.stack_a
    if stacks.min_value_in_a() > value:
        return len(stack_a) - stacks.min_index_in_a()
    order = [0, *range(len(stack_a) - 1, 0, -1)]
    return _first_fit(stack_a, value, order)


def cost_rb(stacks: Stacks, value: int) -> int:
    """Number of ``rb`` that bring ``value`` to the top of b."""
    return stacks.stack_b.index(value)


def cost_rrb(stacks: Stacks, value: int) -> int:
    """Number of ``rrb`` that bring ``value`` to the top of b."""
    stack_b = stacks.stack_b
    position = stack_b.index(value)
    return 0 if position == 0 else len(stack_b) - position


def best_move(ra: int, rb: int, rra: int, rrb: int) -> Move:
    """Pick the cheapest combination; ties go to the earlier Move."""
    rr = max(ra, rb)
    ra_rrb = ra + rrb
    rra_rb = rra + rb
    rrr = max(rra, rrb)
    if rr <= ra_rrb and rr <= rra_rb and rr <= rrr:
        return Move.RR
    if ra_rrb <= rr and ra_rrb <= rra_rb and ra_rrb <= rrr:
        return Move.RA_RRB
    if rra_rb <= rr and rra_rb <= ra_rrb and rra_rb <= rrr:
        return Move.RRA_RB
    return Move.RRR


def _costs(stacks: Stacks, i: int) -> tuple[int, int, int, int]:
    if not 0 <= i < stacks.index_a:
        raise IndexError("i must point into stack b")
    value = stacks.values[i]
    return (
        cost_ra(stacks, value),
        cost_rb(stacks, value),
        cost_rra(stacks, value),
        cost_rrb(stacks, value),
    )


def find_cost(stacks: Stacks, i: int) -> int:
    """Rotations needed to put ``stacks.values[i]``, which lies in b, into place."""
    ra, rb, rra, rrb = _costs(stacks, i)
    move = best_move(ra, rb, rra, rrb)
    if move is Move.RR:
        return max(ra, rb)
    if move is Move.RA_RRB:
        return ra + rrb
    if move is Move.RRA_RB:
        return rra + rb
    return max(rra, rrb)


def _repeat(action, times: int) -> None:
    for _ in range(times):
        action()


def do_ops(stacks: Stacks, i: int) -> None:
    """Rotate both stacks the cheapest way and push ``stacks.values[i]`` onto a."""
    ra, rb, rra, rrb = _costs(stacks, i)
    move = best_move(ra, rb, rra, rrb)
    if move is Move.RR:
        both = min(ra, rb)
        _repeat(stacks.rr, both)
        _repeat(stacks.ra, ra - both)
        _repeat(stacks.rb, rb - both)
    elif move is Move.RA_RRB:
        _repeat(stacks.ra, ra)
        _repeat(stacks.rrb, rrb)
    elif move is Move.RRA_RB:
        _repeat(stacks.rra, rra)
        _repeat(stacks.rb, rb)
    else:
        both = min(rra, rrb)
        _repeat(stacks.rrr, both)
        _repeat(stacks.rra, rra - both)
        _repeat(stacks.rrb, rrb - both)
    stacks.pa()