"""The command that prints the operations sorting its arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithm import solve
from pushswap.parsing import (
    DUPLICATES,
    EMPTY_STACK,
    NO_ARGUMENT,
    ParseError,
    parse_int,
    split_argument,
)
from pushswap.stacks import format_stack, has_duplicates, is_sorted


def main(argv: Sequence[str] | None = None) -> int:
    """Show stack ``a``, then print one operation per line that sorts it.

    Returns the exit status.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        sys.stderr.write(NO_ARGUMENT)
        return 0
    words = split_argument(args[0]) if len(args) == 1 else args
    try:
        values = [parse_int(word) for word in words]
    except ParseError as error:
        sys.stderr.write(error.message)
        return error.exit_status
    sys.stdout.write(format_stack(values, "a"))
    if not values:
        sys.stderr.write(EMPTY_STACK)
        return 1
    if has_duplicates(values):
        sys.stderr.write(DUPLICATES)
        return 1
    if is_sorted(values):
        return 0
    for op in solve(values):
        sys.stdout.write(f"{op}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())