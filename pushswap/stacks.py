"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum

_RED = "\033[1;31m"
_BLUE = "\033[1;34m"
_GREEN = "\033[1;32m"
_RESET = "\033[0m"


class Operation(str, Enum):
    """The instructions understood on stacks ``a`` and ``b``."""

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


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(source: deque[int], dest: deque[int]) -> None:
    if source:
        dest.appendleft(source.popleft())


def _rotate(stack: deque[int], step: int) -> bool:
    """Rotate ``stack``; report whether anything moved."""
    if len(stack) < 2:
        return False
    stack.rotate(step)
    return True


class Stacks:
    """Stack ``a`` holding the values, an empty stack ``b`` and a log of operations.

    The top of each stack is its first element.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _perform(self, op: Operation) -> bool:
        """Carry out ``op``; return whether it is one that gets logged."""
        match op:
            case Operation.SA:
                _swap(self.a)
            case Operation.SB:
                _swap(self.b)
            case Operation.SS:
                _swap(self.a)
                _swap(self.b)
            case Operation.PA:
                _push(self.b, self.a)
            case Operation.PB:
                _push(self.a, self.b)
            case Operation.RA:
                return _rotate(self.a, -1)
            case Operation.RB:
                return _rotate(self.b, -1)
            case Operation.RR:
                _rotate(self.a, -1)
                _rotate(self.b, -1)
            case Operation.RRA:
                return _rotate(self.a, 1)
            case Operation.RRB:
                return _rotate(self.b, 1)
            case Operation.RRR:
                _rotate(self.a, 1)
                _rotate(self.b, 1)
        return True

    def apply(self, op: Operation | str, record: bool = True) -> None:
        """Perform ``op`` and, if ``record`` is true, log it.

        A single-stack rotation of a stack with fewer than two values does
        nothing and is never logged.
        """
        op = Operation(op)
        if self._perform(op) and record:
            self.operations.append(op)

    def record(self, op: Operation | str) -> None:
        """Log ``op`` without performing it."""
        self.operations.append(Operation(op))


def is_sorted(values: Iterable[int]) -> bool:
    """Return whether ``values`` are in non-decreasing order."""
    items = list(values)
    return all(first <= second for first, second in zip(items, items[1:]))


def has_duplicates(values: Iterable[int]) -> bool:
    """Return whether any value occurs more than once."""
    items = list(values)
    return len(set(items)) != len(items)


def _node(index: int, value: int) -> str:
    return f"{_BLUE} NODE {index}\n  [{_GREEN}{value}{_BLUE}]\n   |\n   v\n{_RESET}"


def format_stack(values: Iterable[int], name: str) -> str:
    """Render a stack as a coloured chain of nodes that loops back to the first."""
    items = list(values)
    if not items:
        return f"ERROR\nliste : {name} doesn't exist\n"
    parts = [f"{_RED}liste : {name}\n{_RESET}"]
    parts.extend(_node(index, value) for index, value in enumerate(items, start=1))
    parts.append(_node(1, items[0]))
    parts.append(f"{_BLUE} [...]\n{_RESET}")
    return "".join(parts)