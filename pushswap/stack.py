"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from itertools import pairwise
from typing import Callable, Dict, Iterable, Iterator, Union


class Operation(str, Enum):
    """The instructions that may be applied to stacks ``a`` and ``b``."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


class Stack:
    """A named stack of integers; index 0 is the top."""

    def __init__(self, name: str, values: Iterable[int] = ()) -> None:
        if len(name) != 1:
            raise ValueError(f"stack name must be a single character, got {name!r}")
        self.name = name
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Stack({self.name!r}, {list(self._items)!r})"

    @property
    def top(self) -> int:
        """The value on top of the stack."""
        if not self._items:
            raise IndexError(f"stack {self.name} is empty")
        return self._items[0]

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def swap(self) -> None:
        """Exchange the two top values; does nothing with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def push_from(self, other: "Stack") -> None:
        """Move the top value of ``other`` onto this stack, if there is one."""
        if other._items:
            self._items.appendleft(other._items.popleft())

    def rotate(self) -> None:
        """The top value becomes the bottom one."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """The bottom value becomes the top one."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def above_median(self, index: int) -> bool:
        """True when ``index`` lies in the upper half, the middle one included."""
        size = len(self._items)
        if not 0 <= index < size:
            raise IndexError(f"index {index} out of range for stack of {size}")
        return index < (size + 1) // 2

    def _require_values(self) -> None:
        if not self._items:
            raise ValueError(f"stack {self.name} is empty")

    def index_of_max(self) -> int:
        """Position of the first largest value."""
        self._require_values()
        return max(range(len(self._items)), key=self._items.__getitem__)

    def index_of_min(self) -> int:
        """Position of the first smallest value."""
        self._require_values()
        return min(range(len(self._items)), key=self._items.__getitem__)

    def is_sorted(self) -> bool:
        """True when values never decrease from top to bottom; empty counts."""
        return all(upper <= lower for upper, lower in pairwise(self._items))

    def is_circularly_sorted(self) -> bool:
        """True when some rotation of the stack is sorted ascending.

        The only descent allowed is from the maximum straight to the minimum.
        An empty stack counts as sorted.
        """
        if len(self._items) <= 1:
            return True
        i_max = self.index_of_max()
        i_min = self.index_of_min()
        for index, (upper, lower) in enumerate(pairwise(self._items), start=1):
            if lower < upper and (index - 1 != i_max or index != i_min):
                return False
        if self._items[0] < self._items[-1] and i_max != len(self._items) - 1:
            return False
        return True


def ss(a: Stack, b: Stack) -> None:
    """Swap the tops of both stacks."""
    a.swap()
    b.swap()


def rr(a: Stack, b: Stack) -> None:
    """Rotate both stacks."""
    a.rotate()
    b.rotate()


def rrr(a: Stack, b: Stack) -> None:
    """Reverse-rotate both stacks."""
    a.reverse_rotate()
    b.reverse_rotate()


_ACTIONS: Dict[Operation, Callable[[Stack, Stack], None]] = {
    Operation.SA: lambda a, b: a.swap(),
    Operation.SB: lambda a, b: b.swap(),
    Operation.SS: ss,
    Operation.PA: lambda a, b: a.push_from(b),
    Operation.PB: lambda a, b: b.push_from(a),
    Operation.RA: lambda a, b: a.rotate(),
    Operation.RB: lambda a, b: b.rotate(),
    Operation.RR: rr,
    Operation.RRA: lambda a, b: a.reverse_rotate(),
    Operation.RRB: lambda a, b: b.reverse_rotate(),
    Operation.RRR: rrr,
}


def apply_operation(operation: Union[Operation, str], a: Stack, b: Stack) -> None:
    """Apply one operation, given as an ``Operation`` or its name, to the stacks."""
    _ACTIONS[Operation(operation)](a, b)