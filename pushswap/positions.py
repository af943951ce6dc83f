"""Rotation costs used to choose which value moves between the stacks next."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stacks import Operation


def _shortest(index: int, size: int, signed: bool) -> int:
    """Turn a forward rotation count into a negative, reverse one when shorter."""
    if signed and size > 2 and index > size // 2:
        return index - size
    return index


def position_in_b(b: Sequence[int], value: int, signed: bool) -> int:
    """Rotations of ``b`` that bring the place for ``value`` to the top.

    Stack ``b`` is kept in descending circular order.  With ``signed`` set, a
    reverse rotation is reported as a negative count when it is shorter.
    """
    items = list(b)
    size = len(items)
    low, high = min(items), max(items)
    if value < low or value > high:
        if items[0] == low and value < low:
            return 0
        index = items.index(low) + 1
    else:
        if items[-1] > value > items[0]:
            return 0
        following = items[1:] + items[:1]
        index = next(
            (
                position
                for position, (upper, lower) in enumerate(zip(items, following), start=1)
                if upper > value > lower
            ),
            None,
        )
        if index is None:
            raise ValueError(f"no place for {value} in stack b")
    index = _shortest(index, size, signed)
    return 0 if index == size else index


def rotations_to(stack: Sequence[int], value: int, signed: bool) -> int:
    """Rotations that bring ``value`` to the top of ``stack``.

    Raises ``ValueError`` if ``value`` is not in the stack.
    """
    items = list(stack)
    return _shortest(items.index(value), len(items), signed)


def rotation_kind(
    cost_a: int, cost_b: int, len_a: int, len_b: int
) -> tuple[Operation | None, int, int]:
    """Decide whether both stacks can turn together.

    Returns the shared operation (``RRR`` or ``RR``), or ``None`` when the
    stacks must move separately, with the costs to use; a cost in the
    reverse direction is replaced by its length from the bottom.
    """
    reverse_a = cost_a != 0 and cost_a >= len_a // 2
    forward_a = cost_a != 0 and not reverse_a
    reverse_b = cost_b != 0 and cost_b >= len_b // 2
    forward_b = cost_b != 0 and not reverse_b
    if reverse_a:
        cost_a = len_a - cost_a
    if reverse_b:
        cost_b = len_b - cost_b
    if reverse_a and reverse_b:
        return Operation.RRR, cost_a, cost_b
    if forward_a and forward_b:
        return Operation.RR, cost_a, cost_b
    return None, cost_a, cost_b


def combined_cost(cost_a: int, cost_b: int) -> int:
    """Number of moves for two signed rotation counts.

    Counts in the same direction share moves; opposite ones add up.
    """
    if cost_a < 0 and cost_b < 0:
        return -min(cost_a, cost_b)
    if cost_a > 0 and cost_b > 0:
        return max(cost_a, cost_b)
    return abs(cost_a) + abs(cost_b)


def compute_steps(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Cost of moving each value of ``a`` to its place in ``b``, in stack order."""
    return [
        combined_cost(rotations_to(a, value, True), position_in_b(b, value, True))
        for value in a
    ]


def best_value(a: Sequence[int], steps: Sequence[int]) -> int:
    """The first value of ``a`` whose step is the smallest."""
    items = list(a)
    step_list = list(steps)
    return items[step_list.index(min(step_list))]