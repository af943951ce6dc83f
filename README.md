# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, printing each operation it performs. A companion checker reads a
list of operations and reports whether they sort the numbers.

## Operations

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the first two elements of `a`               |
| `sb`  | swap the first two elements of `b`               |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` to the top of `a`            |
| `pb`  | move the top of `a` to the top of `b`            |
| `ra`  | rotate `a` upward (first element becomes last)   |
| `rb`  | rotate `b` upward                                |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` downward (last element becomes first) |
| `rrb` | rotate `b` downward                              |
| `rrr` | `rra` and `rrb` together                         |

## Install

```
pip install .
```

## Sorting: `push-swap`

Give the numbers as separate arguments, or as one argument separated by
spaces:

```
push-swap 3 2 1 5 4
push-swap "3 2 1 5 4"
```

The command first prints stack `a` as a coloured chain of nodes, then one
operation per line that sorts it. If the numbers are already sorted, only
the stack is shown.

Each number must be written with digits and an optional leading minus sign
(a `+` sign is rejected) and must lie within the 32-bit signed range.
Errors go to standard error:

- no argument: `ERROR` and a message, exit status 0;
- a word that is not a number, or a number out of range: `ERROR` and a
  message, exit status 0;
- a repeated number: `ERROR`, exit status 1.

## Checking: `push-swap-checker`

Feed a list of operations on standard input, one per line:

```
printf 'sa\nrra\n' | push-swap-checker 2 1 3
```

The checker prints `OK` when the operations leave `a` sorted and `b` empty,
and `KO` otherwise. It runs `sa`, `pa`, `pb`, `ra`, `rb`, `rr`, `rra`, `rrb`
and `rrr`; any other line, including `sb` and `ss`, is ignored. Its
arguments are read and checked the same way as for `push-swap`.

## From Python

```python
from pushswap.algorithm import solve
from pushswap.checker import check

ops = solve([3, 2, 1, 5, 4])
print(check([3, 2, 1, 5, 4], [f"{op}\n" for op in ops]))  # True
```

- `pushswap.stacks.Stacks` holds the two stacks (`a` and `b`, as deques whose
  first element is the top) and the list of operations applied;
  `Stacks.apply` performs an `Operation` and logs it.
- `pushswap.algorithm.solve` returns the list of `Operation` values that
  sorts the given numbers; `sort_stacks` sorts a `Stacks` in place.
- `pushswap.parsing.parse_arguments` turns command-line style arguments into
  integers and raises `pushswap.parsing.ParseError` on bad input; the error
  carries `message` and `exit_status`.
- `pushswap.checker.check` runs instruction lines on a list of numbers and
  returns whether they end sorted with `b` empty.

The package also contains small helper modules:

- `pushswap.textutils`: string helpers such as `atoi` (32-bit wrap-around),
  `split`, `strncmp`, `strnstr`, `strtrim` and `substr`;
- `pushswap.chartypes`: ASCII classification and case conversion on
  character codes;
- `pushswap.bytesutils`: byte-buffer operations (`memset`, `memmove`,
  `strlcpy`, `strlcat`, ...);
- `pushswap.formatting`: `format_printf` for `%c %s %p %d %i %u %x %X %%`,
  and helpers that write to a stream;
- `pushswap.linereader`: `LineReader`, which yields the lines of a stream
  read through a fixed-size buffer;
- `pushswap.chainlist`: a singly linked list (`Node`) with `size`, `last`,
  `add_front`, `add_back`, `for_each`, `map_list` and `clear`.

## Tests

```
pip install .[test]
pytest
```