# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations, and prints the operations it used, one per line.

## Operations

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two items of `a`                    |
| `sb`  | swap the top two items of `b`                    |
| `ss`  | `sa` and `sb` together                           |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` up: the top item goes to the bottom   |
| `rb`  | rotate `b` up                                    |
| `rr`  | `ra` and `rb` together                           |
| `rra` | rotate `a` down: the bottom item goes to the top |
| `rrb` | rotate `b` down                                  |
| `rrr` | `rra` and `rrb` together                         |

A single-stack move that cannot act (fewer than two items to swap or rotate,
or nothing to push) does nothing and is not recorded. The combined moves
`ss`, `rr` and `rrr` are always recorded.

## Command line

Install the package, then pass the numbers either as separate arguments or
as a single whitespace-separated argument:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
```

The same entry point can be run as `python -m pushswap.cli`.

The first number given is the top of stack `a`. Nothing is printed when the
input is already sorted or when no numbers are given. `Error` is printed
when the input is invalid:

- a token that is not plain ASCII digits with an optional leading `-`
  (a leading `+` is rejected);
- a value outside the 32-bit signed range;
- the same token given twice (tokens are compared as text, so `1` and `01`
  are not treated as repeats);
- with separate arguments, an argument longer than 11 characters, or longer
  than 10 characters without a leading `-`.

The command always exits with status 0.

Two numbers take at most one move, three numbers at most two, four and five
numbers use a small dedicated routine, and larger inputs a binary radix sort
over the numbers' ranks.

## Library

```python
from pushswap.sorting import solve
from pushswap.parsing import parse_arguments, InputError
from pushswap.stacks import Stacks

moves = solve([3, 2, 1])          # ["ra", "sa"]

values = parse_arguments(["5 1 4"])   # [5, 1, 4]

stacks = Stacks([2, 1, 3])
stacks.sa()
print(stacks.values_a())          # [1, 2, 3]
print(stacks.moves)               # ["sa"]
```

- `pushswap.stacks` — `Item` (a value and its rank) and `Stacks`, which holds
  the deques `a` and `b`, the list `moves`, one method per operation, and
  `values_a()` / `values_b()`.
- `pushswap.parsing` — `parse_arguments`, `split_argument`,
  `validate_tokens`, `validate_arguments`, `is_number`, `checked_int`,
  `to_int`; invalid input raises `InputError` (a `ValueError`).
- `pushswap.sorting` — `solve`, `sort_stacks` and the routines behind it:
  `assign_orders`, `is_ordered`, `values_sorted`, `sort_three`, `sort_four`,
  `bring_to_top`, `radix_pass`, `radix_sort`.
- `pushswap.cli` — `main(argv=None)`, the command-line entry point.

## What it does not do

The package only produces moves. It has no checker command that reads a
list of moves and verifies that they sort a given input.

## Tests

```
pip install -e ".[test]"
pytest
```