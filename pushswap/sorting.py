"""Sorting strategies that solve the puzzle for stacks of any size."""

from __future__ import annotations

from itertools import pairwise

from .cheapest import move_cheapest
from .stack import Board, Stack, StackRef


def _stack_of(board: Board, stack: StackRef) -> Stack:
    if isinstance(stack, Stack):
        return stack
    if stack == "a":
        return board.a
    if stack == "b":
        return board.b
    raise ValueError(f"unknown stack {stack!r}")


def is_sorted_stack(stack: Stack) -> bool:
    """Return whether the values ascend from the top of ``stack`` to its bottom."""
    return all(upper <= lower for upper, lower in pairwise(stack))


def sort_three(board: Board, stack: StackRef) -> None:
    """Sort a stack of exactly three values in at most two operations."""
    target = _stack_of(board, stack)
    if len(target) != 3:
        raise ValueError(f"stack {target.name} must hold exactly three values")
    top, mid, last = target.values()
    if top > mid > last:
        board.swap(target)
        board.reverse_rotate(target)
    elif top > mid and mid < last and top > last:
        board.rotate(target)
    elif top < mid and mid > last and top > last:
        board.reverse_rotate(target)
    elif top > mid and mid < last and top < last:
        board.swap(target)
    elif top < mid and mid > last and top < last:
        board.reverse_rotate(target)
        board.swap(target)


def _bring_to_top(board: Board, position: int) -> None:
    size = len(board.a)
    if position < size // 2:
        for _ in range(position):
            board.rotate("a")
    else:
        for _ in range(size - position):
            board.reverse_rotate("a")


def sort_five(board: Board) -> None:
    """Sort four or five values by parking the smallest on ``b``."""
    while len(board.a) > 3:
        _bring_to_top(board, board.a.position_of_min())
        board.push("a", "b")
    sort_three(board, "a")
    board.push("b", "a")
    board.push("b", "a")


def _bring_min_to_top(board: Board) -> None:
    position = board.a.position_of_min()
    if position == 0:
        return
    forward = position
    backward = len(board.a) - position
    if forward > backward:
        for _ in range(backward):
            board.reverse_rotate("a")
    else:
        for _ in range(forward):
            board.rotate("a")


def sort_large(board: Board) -> None:
    """Sort a long stack by moving all but three to ``b`` and reinserting cheaply."""
    while len(board.a) > 3:
        board.push("a", "b")
    sort_three(board, "a")
    while len(board.b):
        move_cheapest(board)
    _bring_min_to_top(board)


def sort_stack(board: Board) -> None:
    """Sort stack ``a`` with the strategy that suits its size."""
    size = len(board.a)
    if size < 2:
        return
    if size == 2:
        board.swap("a")
    elif size == 3:
        sort_three(board, "a")
    elif size <= 5:
        sort_five(board)
    else:
        sort_large(board)