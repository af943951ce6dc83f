"""The command that checks whether a list of operations sorts its arguments."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import ParseError, parse_arguments
from pushswap.stacks import Operation, Stacks, is_sorted

NO_ARGUMENT = "ERROR\nThe program need at least 1 argument"

_INSTRUCTIONS = {
    "sa\n": Operation.SA,
    "pa\n": Operation.PA,
    "pb\n": Operation.PB,
    "ra\n": Operation.RA,
    "rb\n": Operation.RB,
    "rr\n": Operation.RR,
    "rra\n": Operation.RRA,
    "rrb\n": Operation.RRB,
    "rrr\n": Operation.RRR,
}


def run_instruction(stacks: Stacks, line: str | None) -> bool:
    """Perform the instruction on ``line`` without logging it.

    The line must begin with a known instruction followed by a newline;
    anything else is ignored.  Returns whether an instruction ran.
    """
    if line is None:
        return False
    for text, op in _INSTRUCTIONS.items():
        if line.startswith(text):
            stacks.apply(op, record=False)
            return True
    return False


def check(values: Iterable[int], lines: Iterable[str]) -> bool:
    """Run ``lines`` on ``values``; true if ``a`` ends sorted and ``b`` empty."""
    stacks = Stacks(values)
    for line in lines:
        run_instruction(stacks, line)
    return is_sorted(stacks.a) and not stacks.b


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print ``OK`` or ``KO``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(NO_ARGUMENT)
        return 0
    try:
        values = parse_arguments(args)
    except ParseError as error:
        sys.stderr.write(error.message)
        return error.exit_status
    sys.stdout.write("OK\n" if check(values, sys.stdin) else "KO\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())