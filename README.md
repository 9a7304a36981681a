# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
fixed set of operations, and prints the sequence of operations it used.

The numbers start on stack `a`, with the first argument on top. Stack `b`
starts empty. The allowed operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top element of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate `a`, `b`, or both: the bottom element goes to the top |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints one operation per line:

```
sa
rra
```

The same command is available as `python -m pushswap.cli`.

Rules for the input:

- every argument is one integer, with an optional leading `+` or `-`
  and nothing else around the digits;
- values must fit in a signed 32-bit integer;
- duplicates are not allowed.

On invalid input the program writes `Error` to standard error and exits
with status 1. With no arguments it prints nothing; with a single valid
argument, or input that is already sorted, it also prints nothing.

How the numbers are sorted depends on how many there are:

- two values are swapped;
- three values are sorted directly in at most two operations;
- four or five values: the smallest are pushed to `b`, the remaining
  three are sorted, and the others are pushed back;
- more values: all but three are pushed to `b`, the three are sorted,
  and then the element of `b` that is cheapest to put in place is moved
  back onto `a` again and again, combining rotations of both stacks
  (`rr`, `rrr`) where possible. Finally `a` is rotated so its smallest
  value is on top.

Before sorting, the numbers are replaced by their ranks (1 for the
smallest), which does not change the operations needed.

## Library use

```python
from pushswap.cli import solve

moves = solve([5, 4, 3, 2, 1])
print(len(moves), moves)
```

`solve` returns the list of operations as strings; it expects distinct
values and returns an empty list for fewer than two values or sorted input.

The modules:

- `pushswap.parsing`: `parse_int`, `parse_arguments`, `is_sorted` and
  `normalize`; bad input raises `InputError` (a `ValueError`).
- `pushswap.stack`: `Stack`, a named stack iterated from top to bottom
  (`values()`, `position_of_min()`, `position_of_max()`), and `Board`,
  which holds stacks `a` and `b` and carries out the operations
  (`push`, `swap`, `swap_both`, `rotate`, `rotate_both`,
  `reverse_rotate`, `reverse_rotate_both`). Each operation is passed by
  name to the `emit` callback given to `Board`; by default it is written
  to standard output.
- `pushswap.sorting`: `sort_stack`, which picks a strategy by size, and
  the strategies `sort_three`, `sort_five` and `sort_large`, plus
  `is_sorted_stack`.
- `pushswap.cheapest`: `find_target`, `plan_move`, `cheapest_move` and
  `move_cheapest`, with the `MovePlan` and `MoveOp` types describing the
  rotations used to insert an element of `b` into `a`.

```python
from pushswap.stack import Board
from pushswap.sorting import sort_stack

ops = []
board = Board([3, 1, 2], emit=ops.append)
sort_stack(board)
print(ops, board.a.values())
```

## What it does not do

The package only produces operations. It has no checker that reads
operations and verifies that they sort a given input.

## Tests

```
pip install ".[test]"
pytest
```