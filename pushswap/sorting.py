"""Strategies that sort stack a and record the operations used."""

from __future__ import annotations

from collections.abc import Iterable

from .cost import do_ops, find_cost
from .parsing import has_doubles
from .stacks import Op, Stacks


def _partition(array: list[int], low: int, high: int) -> int:
    pivot = array[high]
    store = low
    for j in range(low, high):
        if array[j] <= pivot:
            array[store], array[j] = array[j], array[store]
            store += 1
    array[store], array[high] = array[high], array[store]
    return store


def quicksort(values: Iterable[int]) -> list[int]:
    """Return a sorted copy, using quicksort with the last value as pivot."""
    array = list(values)
    pending = [(0, len(array) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = _partition(array, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return array


def find_median(stacks: Stacks) -> int:
    """The lower median of the values in stack a."""
    stack_a = stacks.stack_a
    if not stack_a:
        raise ValueError("stack a is empty")
    if has_doubles(stack_a):
        raise ValueError("stack a holds duplicate values")
    return quicksort(stack_a)[(len(stack_a) - 1) // 2]


def _size_a(stacks: Stacks) -> int:
    return stacks.size - stacks.index_a


def median_sorting(stacks: Stacks) -> None:
    """Push everything below the median to b until three values remain in a."""
    while _size_a(stacks) > 3:
        median = find_median(stacks)
        kept = 0
        while kept < _size_a(stacks):
            if stacks.values[stacks.index_a] < median:
                stacks.pb()
            else:
                kept += 1
                stacks.ra()
    sort_three(stacks)


def sort_three(stacks: Stacks) -> None:
    """Sort the (at most three) values of stack a."""
    stack_a = stacks.stack_a
    if not stack_a:
        raise ValueError("stack a is empty")
    largest = stack_a.index(max(stack_a))
    if largest == 0:
        stacks.ra()
    elif largest == 1:
        stacks.rra()
    top = stacks.index_a
    if top + 1 < stacks.size and stacks.values[top] > stacks.values[top + 1]:
        stacks.sa()


def sort_small(stacks: Stacks) -> None:
    """Sort a stack of two or three values."""
    if stacks.size == 2:
        if stacks.values[0] > stacks.values[1]:
            stacks.sa()
    elif stacks.size == 3:
        sort_three(stacks)


def _bring_min_to_top_of_four(stacks: Stacks) -> None:
    position = stacks.min_index_in_a()
    if position == 1:
        stacks.sa()
    elif position == 2:
        stacks.rra()
        stacks.rra()
    elif position == 3:
        stacks.rra()


def sort_four(stacks: Stacks) -> None:
    """Sort a stack of four values."""
    _bring_min_to_top_of_four(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()


def _push_min_of_five(stacks: Stacks) -> None:
    position = stacks.min_index_in_a()
    if position == 1:
        stacks.sa()
    elif position == 2:
        stacks.ra()
        stacks.ra()
    elif position == 3:
        stacks.rra()
        stacks.rra()
    elif position == 4:
        stacks.rra()
    stacks.pb()


def _rotate_if_top_above_bottom(stacks: Stacks) -> None:
    if stacks.values[stacks.index_a] > stacks.values[-1]:
        stacks.ra()


def sort_five(stacks: Stacks) -> None:
    """Sort a stack of five values."""
    _push_min_of_five(stacks)
    _bring_min_to_top_of_four(stacks)
    stacks.pb()
    sort_three(stacks)
    stacks.pa()
    _rotate_if_top_above_bottom(stacks)
    stacks.pa()
    _rotate_if_top_above_bottom(stacks)


def _final_rotations(stacks: Stacks) -> None:
    position = stacks.min_index_in_a()
    if position < stacks.size // 2:
        for _ in range(position):
            stacks.ra()
    else:
        for _ in range(stacks.size - position):
            stacks.rra()


def sorting_back(stacks: Stacks) -> None:
    """Push b back onto a, cheapest value first, then bring the minimum to the top."""
    while stacks.index_a > 0:
        cheapest = min(range(stacks.index_a), key=lambda i: find_cost(stacks, i))
        do_ops(stacks, cheapest)
    _final_rotations(stacks)


def sort_everything(stacks: Stacks) -> None:
    """Sort a stack of any size by median splitting and cheapest reinsertion."""
    median_sorting(stacks)
    if stacks.is_sorted():
        while stacks.index_a > 0:
            stacks.pa()
    sorting_back(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack a with the strategy that suits its size; sorted input is left alone."""
    if stacks.is_sorted():
        return
    if stacks.size in (2, 3):
        sort_small(stacks)
    elif stacks.size == 4:
        sort_four(stacks)
    elif stacks.size == 5:
        sort_five(stacks)
    else:
        sort_everything(stacks)


def solve(values: Iterable[int]) -> list[Op]:
    """The operations that sort ``values``, given top first."""
    stacks = Stacks(list(values))
    sort_stacks(stacks)
    return list(stacks.ops)