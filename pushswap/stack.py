"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

import sys
from collections import deque
from typing import Callable, Iterable, Iterator, Optional, Union

Emitter = Callable[[str], None]


def _write_stdout(op: str) -> None:
    sys.stdout.write(op + "\n")


class Stack:
    """A named stack of integers, iterated from top to bottom."""

    def __init__(self, name: str, values: Iterable[int] = ()) -> None:
        self.name = name
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    def values(self) -> list[int]:
        """Return the values from top to bottom as a new list."""
        return list(self._items)

    def position_of_min(self) -> int:
        """Return the zero-based position from the top of the smallest value."""
        if not self._items:
            raise ValueError(f"stack {self.name} is empty")
        return min(range(len(self._items)), key=self._items.__getitem__)

    def position_of_max(self) -> int:
        """Return the zero-based position from the top of the largest value."""
        if not self._items:
            raise ValueError(f"stack {self.name} is empty")
        return max(range(len(self._items)), key=self._items.__getitem__)

    def _pop(self) -> int:
        return self._items.popleft()

    def _push(self, value: int) -> None:
        self._items.appendleft(value)

    def _swap(self) -> None:
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def _rotate(self) -> None:
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def _reverse_rotate(self) -> None:
        if len(self._items) >= 2:
            self._items.rotate(1)


StackRef = Union[Stack, str]


class Board:
    """Stacks ``a`` and ``b`` plus the puzzle operations, each reported to ``emit``."""

    def __init__(self, values: Iterable[int], emit: Optional[Emitter] = None) -> None:
        self.a = Stack("a", values)
        self.b = Stack("b")
        self._emit = emit if emit is not None else _write_stdout

    def _resolve(self, stack: StackRef) -> Stack:
        if isinstance(stack, Stack):
            if stack is not self.a and stack is not self.b:
                raise ValueError("stack does not belong to this board")
            return stack
        if stack == "a":
            return self.a
        if stack == "b":
            return self.b
        raise ValueError(f"unknown stack {stack!r}")

    def push(self, src: StackRef, dst: StackRef) -> None:
        """Move the top of ``src`` onto ``dst``; nothing happens if ``src`` is empty."""
        source = self._resolve(src)
        target = self._resolve(dst)
        if not source:
            return
        target._push(source._pop())
        self._emit("p" + target.name)

    def swap(self, stack: StackRef) -> None:
        """Exchange the top two values of one stack."""
        target = self._resolve(stack)
        target._swap()
        self._emit("s" + target.name)

    def swap_both(self) -> None:
        """Swap the tops of both stacks at once."""
        self.a._swap()
        self.b._swap()
        self._emit("ss")

    def rotate(self, stack: StackRef) -> None:
        """Move the top value of one stack to its bottom."""
        target = self._resolve(stack)
        target._rotate()
        self._emit("r" + target.name)

    def rotate_both(self) -> None:
        """Rotate both stacks at once."""
        self.a._rotate()
        self.b._rotate()
        self._emit("rr")

    def reverse_rotate(self, stack: StackRef) -> None:
        """Move the bottom value of one stack to its top."""
        target = self._resolve(stack)
        target._reverse_rotate()
        self._emit("rr" + target.name)

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks at once."""
        self.a._reverse_rotate()
        self.b._reverse_rotate()
        self._emit("rrr")