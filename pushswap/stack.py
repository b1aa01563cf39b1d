"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from enum import Enum
from typing import Iterable, Sequence


class Operation(str, Enum):
    """An instruction that rearranges the stacks."""

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


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease from first to last."""
    iterator = iter(values)
    previous = next(iterator, None)
    for value in iterator:
        if value < previous:
            return False
        previous = value
    return True


def _swap(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


def _push(source: deque, target: deque) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is its left end.

    Every operation that changes the stacks is appended to ``history``.
    Operations on both stacks at once (ss, rr, rrr) only act when each
    stack holds at least two numbers.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()
        self.history: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def apply(self, operation: Operation | str) -> bool:
        """Perform one operation; return True if it changed the stacks."""
        op = Operation(operation)
        a, b = self.a, self.b
        both = len(a) >= 2 and len(b) >= 2
        if op is Operation.SA:
            changed = _swap(a)
        elif op is Operation.SB:
            changed = _swap(b)
        elif op is Operation.SS:
            changed = both and _swap(a) and _swap(b)
        elif op is Operation.PA:
            changed = _push(b, a)
        elif op is Operation.PB:
            changed = _push(a, b)
        elif op is Operation.RA:
            changed = _rotate(a)
        elif op is Operation.RB:
            changed = _rotate(b)
        elif op is Operation.RR:
            changed = both and _rotate(a) and _rotate(b)
        elif op is Operation.RRA:
            changed = _reverse_rotate(a)
        elif op is Operation.RRB:
            changed = _reverse_rotate(b)
        else:
            changed = both and _reverse_rotate(a) and _reverse_rotate(b)
        if changed:
            self.history.append(op)
        return changed

    def run(self, operations: Iterable[Operation | str]) -> None:
        """Perform each operation in turn."""
        for operation in operations:
            self.apply(operation)

    def is_solved(self) -> bool:
        """Return True when ``b`` is empty and ``a`` is in ascending order."""
        return not self.b and is_sorted(self.a)

    @property
    def values(self) -> tuple[Sequence[int], Sequence[int]]:
        """Both stacks as tuples, top first."""
        return tuple(self.a), tuple(self.b)