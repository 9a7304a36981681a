"""Command-line entry point: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .parsing import InputError, is_sorted, normalize, parse_arguments
from .sorting import sort_stack
from .stack import Board


def solve(values: Sequence[int]) -> list[str]:
    """Return the operations that sort ``values`` on stack ``a``.

    The values are expected to be distinct. Sorted input needs no operations.
    """
    if len(values) <= 1 or is_sorted(values):
        return []
    ops: list[str] = []
    board = Board(normalize(values), emit=ops.append)
    sort_stack(board)
    return ops


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the numbers in ``argv``, print the sorting operations and return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    for op in solve(values):
        sys.stdout.write(op + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())