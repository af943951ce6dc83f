"""Reading the command-line values that fill stack ``a``."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pushswap.stacks import has_duplicates

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_VALID_NUMBER = re.compile(r"(?:-?[0-9])*")
_LEADING_NUMBER = re.compile(r"-?[0-9]*")

NO_ARGUMENT = "ERROR\nThe program need at least 1 argument\n"
NOT_NUMBERS = "ERROR\nAll arguments are not numbers"
OUT_OF_RANGE = "ERROR\nOne argument is bigger than INT max or lower than INT min"
EMPTY_STACK = "ERROR\nProblem with allocation of stack"
DUPLICATES = "ERROR\n"


class ParseError(ValueError):
    """Invalid input; carries the text for standard error and the exit status."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status

    def __str__(self) -> str:
        return self.message


def split_argument(text: str) -> list[str]:
    """Split a single argument on spaces, dropping empty words."""
    return [word for word in text.split(" ") if word]


def parse_int(text: str) -> int:
    """Convert one argument to an int within the 32-bit signed range.

    Every digit may be preceded by a single minus sign; anything else is
    rejected.  The value is read from the leading ``-digits`` only.
    """
    if not _VALID_NUMBER.fullmatch(text):
        raise ParseError(NOT_NUMBERS, exit_status=0)
    leading = _LEADING_NUMBER.match(text).group()
    value = int(leading) if leading.lstrip("-") else 0
    if not INT_MIN <= value <= INT_MAX:
        raise ParseError(OUT_OF_RANGE, exit_status=0)
    return value


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Turn the program arguments into the values of stack ``a``.

    A lone argument is split on spaces; several arguments are taken one each.
    """
    if not args:
        raise ParseError(NO_ARGUMENT, exit_status=0)
    words = split_argument(args[0]) if len(args) == 1 else list(args)
    values = [parse_int(word) for word in words]
    if not values:
        raise ParseError(EMPTY_STACK)
    if has_duplicates(values):
        raise ParseError(DUPLICATES)
    return values