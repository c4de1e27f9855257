"""The two stacks of the puzzle and the eleven moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field

UNRANKED = -1


@dataclass
class Item:
    """A number on a stack, with its rank among all numbers once known."""

    value: int
    order: int = UNRANKED


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with the log of moves performed.

    A move that cannot act (too few items) is not logged, except for the
    combined moves ``ss``, ``rr`` and ``rrr``, which are always logged.
    """

    a: deque[Item] = field(init=False)
    b: deque[Item] = field(init=False)
    moves: list[str] = field(init=False)

    def __init__(self, values: Iterable[int]) -> None:
        self.a = deque(Item(value) for value in values)
        self.b = deque()
        self.moves = []

    @staticmethod
    def _swap(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Item], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def _log(self, done: bool, name: str) -> None:
        if done:
            self.moves.append(name)

    def sa(self) -> None:
        """Swap the two top items of ``a``."""
        self._log(self._swap(self.a), "sa")

    def sb(self) -> None:
        """Swap the two top items of ``b``."""
        self._log(self._swap(self.b), "sb")

    def ss(self) -> None:
        """Swap the tops of both stacks."""
        self._swap(self.a)
        self._swap(self.b)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b:
            self.a.appendleft(self.b.popleft())
            self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a:
            self.b.appendleft(self.a.popleft())
            self.moves.append("pb")

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._log(self._rotate(self.a, -1), "ra")

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._log(self._rotate(self.b, -1), "rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self._rotate(self.a, -1)
        self._rotate(self.b, -1)
        self.moves.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._log(self._rotate(self.a, 1), "rra")

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._log(self._rotate(self.b, 1), "rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self._rotate(self.a, 1)
        self._rotate(self.b, 1)
        self.moves.append("rrr")

    def values_a(self) -> list[int]:
        """Values of ``a``, top first."""
        return [item.value for item in self.a]

    def values_b(self) -> list[int]:
        """Values of ``b``, top first."""
        return [item.value for item in self.b]