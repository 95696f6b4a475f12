"""Choosing the operations that sort stack ``a`` with the help of stack ``b``.

Values are moved to ``b`` one at a time, each time choosing the value that is
cheapest to bring into place, until ``a`` holds three values or is already a
rotation of a sorted stack. ``a`` is then put in order and the values come
back from ``b``, each one landing just above its closest bigger neighbour.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from pushswap.stack import Operation, Stack, apply_operation


def _position(stack: Stack, value: int) -> int:
    for index, item in enumerate(stack):
        if item == value:
            return index
    raise ValueError(f"{value} is not in stack {stack.name}")


def smaller_target(value: int, stack: Stack) -> int:
    """Index of the closest value in ``stack`` below ``value``.

    When every value is larger, the index of the maximum is returned instead.
    """
    candidates = [(item, index) for index, item in enumerate(stack) if item < value]
    if not candidates:
        return stack.index_of_max()
    return max(candidates)[1]


def bigger_target(value: int, stack: Stack) -> int:
    """Index of the closest value in ``stack`` above ``value``.

    When every value is smaller, the index of the minimum is returned instead.
    """
    candidates = [(item, index) for index, item in enumerate(stack) if item > value]
    if not candidates:
        return stack.index_of_min()
    return min(candidates)[1]


def push_cost(index: int, target_index: int, source: Stack, dest: Stack) -> int:
    """Rotations needed to bring ``source[index]`` and ``dest[target_index]`` to the top.

    Shared rotations of both stacks are counted once.
    """
    node_up = source.above_median(index)
    target_up = dest.above_median(target_index)
    if node_up and target_up:
        return max(index, target_index)
    if node_up:
        return index + len(dest) - target_index
    if not target_up:
        return max(len(source) - index, len(dest) - target_index)
    return len(source) - index + target_index


class Sorter:
    """Sorts stack ``a`` ascending, recording every operation it applies."""

    def __init__(self, a: Stack, b: Optional[Stack] = None) -> None:
        self.a = a
        self.b = Stack("b") if b is None else b
        if self.a is self.b:
            raise ValueError("the two stacks must be distinct objects")
        values = list(self.a) + list(self.b)
        if len(set(values)) != len(values):
            raise ValueError("values must be distinct")
        self.operations: List[Operation] = []

    def _record(self, operation: Operation) -> None:
        apply_operation(operation, self.a, self.b)
        self.operations.append(operation)

    def _repeat(self, operation: Operation, times: int) -> None:
        for _ in range(times):
            self._record(operation)

    def _for(self, stack: Stack, on_a: Operation, on_b: Operation) -> Operation:
        return on_a if stack is self.a else on_b

    def _to_top(self, stack: Stack, index: int) -> None:
        if index == 0:
            return
        if stack.above_median(index):
            self._repeat(self._for(stack, Operation.RA, Operation.RB), index)
        else:
            self._repeat(
                self._for(stack, Operation.RRA, Operation.RRB), len(stack) - index
            )

    def _push_onto(self, dest: Stack) -> None:
        self._record(self._for(dest, Operation.PA, Operation.PB))

    def _sort_two(self, stack: Stack) -> None:
        if len(stack) >= 2 and stack[0] > stack[1]:
            self._record(self._for(stack, Operation.SA, Operation.SB))

    def _sort_three(self, stack: Stack) -> None:
        i_max = stack.index_of_max()
        if i_max == 0:
            self._record(self._for(stack, Operation.RA, Operation.RB))
        elif i_max == 1:
            self._record(self._for(stack, Operation.RRA, Operation.RRB))
        self._sort_two(stack)

    def _push_cheapest(
        self, index: int, target_index: int, source: Stack, dest: Stack
    ) -> None:
        node = source[index]
        target = dest[target_index]
        node_up = source.above_median(index)
        target_up = dest.above_median(target_index)
        if node_up and target_up:
            self._repeat(Operation.RR, min(index, target_index))
        elif not node_up and not target_up:
            shared = min(len(source) - index, len(dest) - target_index)
            self._repeat(Operation.RRR, shared)
        self._to_top(source, _position(source, node))
        self._to_top(dest, _position(dest, target))
        self._push_onto(dest)

    def _push_to_aux(self) -> None:
        a, b = self.a, self.b
        while len(a) > 3 and not a.is_circularly_sorted():
            targets = [smaller_target(value, b) for value in a]
            costs = [
                push_cost(index, target, a, b) for index, target in enumerate(targets)
            ]
            cheapest = costs.index(min(costs))
            self._push_cheapest(cheapest, targets[cheapest], a, b)

    def _return_sorted(self) -> None:
        a, b = self.a, self.b
        while len(b):
            self._push_cheapest(0, bigger_target(b[0], a), b, a)

    def _sort_large(self) -> None:
        a, b = self.a, self.b
        if a.is_circularly_sorted():
            self._to_top(a, a.index_of_min())
            return
        self._push_onto(b)
        if len(a) > 3:
            self._push_onto(b)
        self._push_to_aux()
        if len(a) == 3:
            self._sort_three(a)
        else:
            self._to_top(a, a.index_of_min())
        self._to_top(b, b.index_of_max())
        self._return_sorted()
        self._to_top(a, a.index_of_min())

    def sort(self) -> List[Operation]:
        """Sort ``a`` in place and return all operations applied so far."""
        a = self.a
        if len(a) <= 1 or a.is_sorted():
            return list(self.operations)
        if len(a) == 2:
            self._sort_two(a)
        elif len(a) == 3:
            self._sort_three(a)
        self._sort_large()
        return list(self.operations)


def sort_operations(values: Iterable[int]) -> List[Operation]:
    """The operations that sort ``values``, taken as stack ``a`` from the top."""
    return Sorter(Stack("a", values), Stack("b")).sort()