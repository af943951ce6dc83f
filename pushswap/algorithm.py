"""Sorting stack ``a`` with the puzzle's operations."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.positions import (
    best_value,
    compute_steps,
    position_in_b,
    rotation_kind,
    rotations_to,
)
from pushswap.stacks import Operation, Stacks, is_sorted


def _repeat(stacks: Stacks, op: Operation, times: int) -> None:
    for _ in range(times):
        stacks.apply(op)


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three unsorted values in at most two moves."""
    a = stacks.a
    high, low = max(a), min(a)
    if a[0] == high:
        stacks.apply(Operation.RA)
        if a[1] == low:
            stacks.apply(Operation.SA)
    elif a[0] == low:
        stacks.apply(Operation.SA)
        stacks.apply(Operation.RA)
    elif a[1] == low:
        stacks.apply(Operation.SA)
    else:
        stacks.apply(Operation.RRA)


def _move_separately(stacks: Stacks, best: int) -> None:
    cost_a = rotations_to(stacks.a, best, False)
    cost_b = position_in_b(stacks.b, best, False)
    size_a = len(stacks.a)
    if cost_a > size_a // 2:
        _repeat(stacks, Operation.RRA, size_a - cost_a)
    else:
        _repeat(stacks, Operation.RA, cost_a)
    size_b = len(stacks.b)
    if cost_b > size_b // 2:
        _repeat(stacks, Operation.RRB, size_b - cost_b)
    else:
        _repeat(stacks, Operation.RB, cost_b)


def _move_to_b(stacks: Stacks, best: int) -> None:
    kind, cost_a, cost_b = rotation_kind(
        rotations_to(stacks.a, best, False),
        position_in_b(stacks.b, best, False),
        len(stacks.a),
        len(stacks.b),
    )
    if kind is None:
        _move_separately(stacks, best)
    else:
        if kind is Operation.RR:
            single_a, single_b = Operation.RA, Operation.RB
        else:
            single_a, single_b = Operation.RRA, Operation.RRB
        _repeat(stacks, kind, min(cost_a, cost_b))
        rest = cost_a - cost_b
        _repeat(stacks, single_a, rest)
        _repeat(stacks, single_b, -rest)
    stacks.apply(Operation.PB)


def _bring_min_to_top(stacks: Stacks) -> None:
    items = list(stacks.a)
    size = len(items)
    move = items.index(min(items))
    if move > size // 2:
        _repeat(stacks, Operation.RRA, size - move)
    else:
        _repeat(stacks, Operation.RA, move)


def _make_room(stacks: Stacks) -> None:
    """Turn ``a`` so that the top of ``b`` can be pushed in order."""
    value = stacks.b[0]
    items = list(stacks.a)
    size = len(items)
    following = items[1:] + items[:1]
    below = next(
        index
        for index, (lower, upper) in enumerate(zip(items, following))
        if lower < value < upper
    )
    move = below + 1
    previous = items[(below - 1) % size]
    before_previous = items[(below - 2) % size]
    if move <= size // 2:
        _repeat(stacks, Operation.RA, move)
    else:
        _repeat(stacks, Operation.RRA, size - move)
    if before_previous < value < previous and len(stacks.a) >= 2:
        # this adjustment turns stack a but is logged as rrb
        stacks.apply(Operation.RRA, record=False)
        stacks.record(Operation.RRB)


def _settle_min(stacks: Stacks) -> None:
    low = min(stacks.a)
    index = list(stacks.a).index(low)
    op = Operation.RA if index <= len(stacks.a) // 2 else Operation.RRA
    while stacks.a[0] != low:
        stacks.apply(op)


def _fill_a(stacks: Stacks) -> None:
    for _ in range(len(stacks.b)):
        top = stacks.b[0]
        if top > max(stacks.a) or top < min(stacks.a):
            _bring_min_to_top(stacks)
        else:
            _make_room(stacks)
        stacks.apply(Operation.PA)
    _settle_min(stacks)


def _fill_b(stacks: Stacks) -> None:
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(stacks.a):
            stacks.apply(Operation.PB)
            remaining -= 1
    while remaining > 3 and not is_sorted(stacks.a):
        steps = compute_steps(stacks.a, stacks.b)
        _move_to_b(stacks, best_value(stacks.a, steps))
        remaining -= 1
    if not is_sorted(stacks.a):
        sort_three(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` in place, logging every operation on ``stacks``."""
    size = len(stacks.a)
    if size == 2 and not is_sorted(stacks.a):
        stacks.apply(Operation.SA)
    elif size == 3 and not is_sorted(stacks.a):
        sort_three(stacks)
    else:
        _fill_b(stacks)
    if stacks.b:
        _fill_a(stacks)


def solve(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values``."""
    stacks = Stacks(values)
    sort_stacks(stacks)
    return stacks.operations