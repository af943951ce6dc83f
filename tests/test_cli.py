from itertools import permutations

import pytest

from pushswap.algorithm import solve
from pushswap.checker import check
from pushswap.cli import main
from pushswap.parsing import (
    DUPLICATES,
    EMPTY_STACK,
    NO_ARGUMENT,
    NOT_NUMBERS,
    OUT_OF_RANGE,
)
from pushswap.stacks import format_stack


def _operations(output: str, values: list[int]) -> list[str]:
    header = format_stack(values, "a")
    assert output.startswith(header)
    return output[len(header):].splitlines()


def test_no_argument(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.err == NO_ARGUMENT
    assert captured.out == ""


def test_sorted_input_prints_only_the_stack(capsys):
    assert main(["1 2 3"]) == 0
    captured = capsys.readouterr()
    assert captured.out == format_stack([1, 2, 3], "a")
    assert captured.err == ""


def test_two_values_swapped(capsys):
    assert main(["2 1"]) == 0
    out = capsys.readouterr().out
    assert _operations(out, [2, 1]) == ["sa"]


def test_separate_arguments(capsys):
    assert main(["3", "1", "2"]) == 0
    out = capsys.readouterr().out
    ops = _operations(out, [3, 1, 2])
    assert ops == [str(op) for op in solve([3, 1, 2])]


@pytest.mark.parametrize("values", list(permutations([5, -4, 12])))
def test_output_sorts_three_values(capsys, values):
    values = list(values)
    assert main([" ".join(map(str, values))]) == 0
    ops = _operations(capsys.readouterr().out, values)
    assert check(values, [f"{op}\n" for op in ops])


def test_larger_input_matches_solver(capsys):
    values = [8, 3, 11, -2, 7, 0, 5]
    assert main([str(v) for v in values]) == 0
    ops = _operations(capsys.readouterr().out, values)
    assert ops == [str(op) for op in solve(values)]
    assert ops


def test_duplicates_fail_after_display(capsys):
    assert main(["4 2 4"]) == 1
    captured = capsys.readouterr()
    assert captured.out == format_stack([4, 2, 4], "a")
    assert captured.err == DUPLICATES


def test_not_a_number(capsys):
    assert main(["1 x 2"]) == 0
    captured = capsys.readouterr()
    assert captured.err == NOT_NUMBERS
    assert captured.out == ""


def test_out_of_range(capsys):
    assert main(["1", "2147483648"]) == 0
    assert capsys.readouterr().err == OUT_OF_RANGE


def test_empty_argument(capsys):
    assert main([""]) == 1
    captured = capsys.readouterr()
    assert captured.out == format_stack([], "a")
    assert captured.err == EMPTY_STACK