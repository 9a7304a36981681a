"""Choosing and performing the cheapest insertion of a value from stack ``b`` into ``a``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .stack import Board, Stack


class MoveOp(Enum):
    """How the two stacks are turned before a value is pushed back onto ``a``."""

    RR = "rr"
    RRR = "rrr"
    RA_RRB = "ra+rrb"
    RB_RRA = "rb+rra"


@dataclass(frozen=True)
class MovePlan:
    """Rotations needed to bring a value of ``b`` and its target in ``a`` to the top."""

    cost: int
    shared: int
    residual_a: int
    residual_b: int
    op: MoveOp


def find_target(value: int, stack: Stack) -> int:
    """Return the position in ``stack`` whose top insertion of ``value`` keeps it ordered.

    The target is the smallest value greater than ``value``; when ``value`` lies
    outside the range of the stack, the target is the smallest value.
    """
    if not len(stack):
        raise ValueError(f"stack {stack.name} is empty")
    values = stack.values()
    lowest = values[stack.position_of_min()]
    highest = values[stack.position_of_max()]
    if value < lowest or value > highest:
        return stack.position_of_min()
    if lowest < value < highest:
        greater = (pos for pos, v in enumerate(values) if v > value)
        return min(greater, key=values.__getitem__)
    return stack.position_of_max()


def plan_move(
    b_position: int, target_position: int, size_a: int, size_b: int
) -> MovePlan:
    """Return the cheapest way to bring both positions to the top of their stacks.

    Positions are counted from zero at the top. Among plans of equal cost the
    last one considered is chosen.
    """
    rb = b_position
    ra = target_position
    rra = 0 if ra == 0 else size_a - ra
    rrb = 0 if rb == 0 else size_b - rb

    shared_fwd = min(ra, rb)
    shared_rev = min(rra, rrb)
    candidates = (
        MovePlan(max(ra, rb), shared_fwd, ra - shared_fwd, rb - shared_fwd, MoveOp.RR),
        MovePlan(
            max(rra, rrb), shared_rev, rra - shared_rev, rrb - shared_rev, MoveOp.RRR
        ),
        MovePlan(ra + rrb, 0, ra, rrb, MoveOp.RA_RRB),
        MovePlan(rb + rra, 0, rra, rb, MoveOp.RB_RRA),
    )
    best = candidates[0]
    for plan in candidates[1:]:
        if plan.cost <= best.cost:
            best = plan
    return best


def cheapest_move(board: Board) -> Optional[tuple[int, MovePlan]]:
    """Return the position in ``b`` of the cheapest value to move, with its plan.

    Returns ``None`` when either stack is empty. Ties go to the value nearest the top.
    """
    size_a, size_b = len(board.a), len(board.b)
    if size_a == 0 or size_b == 0:
        return None
    best: Optional[tuple[int, MovePlan]] = None
    for position, value in enumerate(board.b):
        plan = plan_move(position, find_target(value, board.a), size_a, size_b)
        if best is None or plan.cost < best[1].cost:
            best = (position, plan)
    return best


def _repeat(action: Callable[[], None], count: int) -> None:
    for _ in range(count):
        action()


def _execute(board: Board, plan: MovePlan) -> None:
    if plan.op is MoveOp.RR:
        _repeat(board.rotate_both, plan.shared)
        _repeat(lambda: board.rotate("a"), plan.residual_a)
        _repeat(lambda: board.rotate("b"), plan.residual_b)
    elif plan.op is MoveOp.RRR:
        _repeat(board.reverse_rotate_both, plan.shared)
        _repeat(lambda: board.reverse_rotate("a"), plan.residual_a)
        _repeat(lambda: board.reverse_rotate("b"), plan.residual_b)
    elif plan.op is MoveOp.RA_RRB:
        _repeat(lambda: board.rotate("a"), plan.residual_a)
        _repeat(lambda: board.reverse_rotate("b"), plan.residual_b)
    else:
        _repeat(lambda: board.rotate("b"), plan.residual_b)
        _repeat(lambda: board.reverse_rotate("a"), plan.residual_a)


def move_cheapest(board: Board) -> Optional[MovePlan]:
    """Move the cheapest value of ``b`` onto ``a`` and return the plan used."""
    choice = cheapest_move(board)
    if choice is None:
        return None
    _, plan = choice
    _execute(board, plan)
    board.push("b", "a")
    return plan