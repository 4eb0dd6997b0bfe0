"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from typing import Optional, TextIO


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in non-decreasing order from first to last."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


class Stacks:
    """Stacks ``a`` and ``b``, each a deque with its top at index 0.

    Every operation writes its name and a newline to ``out`` (standard output
    by default) and records it in ``moves``, whether or not it changed anything.
    """

    def __init__(self, values: Iterable[int] = (), out: Optional[TextIO] = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.moves: list[str] = []
        self._out = out

    def _emit(self, name: str) -> None:
        self.moves.append(name)
        out = self._out if self._out is not None else sys.stdout
        out.write(name + "\n")

    @staticmethod
    def _swap(stack: deque[int]) -> None:
        if len(stack) >= 2:
            stack[0], stack[1] = stack[1], stack[0]

    @staticmethod
    def _push(dst: deque[int], src: deque[int]) -> None:
        if src:
            dst.appendleft(src.popleft())

    @staticmethod
    def _rotate(stack: deque[int]) -> None:
        stack.rotate(-1)

    @staticmethod
    def _reverse_rotate(stack: deque[int]) -> None:
        stack.rotate(1)

    def sa(self) -> None:
        """Swap the top two elements of ``a``."""
        self._swap(self.a)
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``."""
        self._swap(self.b)
        self._emit("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        self._swap(self.a)
        self._swap(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._push(self.a, self.b)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._push(self.b, self.a)
        self._emit("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._rotate(self.a)
        self._emit("ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._rotate(self.b)
        self._emit("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        self._rotate(self.a)
        self._rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._reverse_rotate(self.a)
        self._emit("rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._reverse_rotate(self.b)
        self._emit("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self._emit("rrr")