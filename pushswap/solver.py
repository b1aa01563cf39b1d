"""Choosing and performing the operations that sort stack ``a``.

Numbers are moved to ``b`` one at a time, always picking the number that
is cheapest to bring into place, until three remain in ``a``. Those three
are sorted directly, then every number is moved back into its place in
``a``. Finally ``a`` is rotated so that its smallest number is on top.
"""

from __future__ import annotations

from functools import partial
from itertools import islice
from typing import Callable, Iterable, Sequence

from .parsing import InputError, has_duplicates
from .stack import Operation, Stacks, is_sorted

_Counter = Callable[[Sequence[int], Sequence[int], int], int]
_Mover = Callable[[Stacks, int], None]


def _index(stack: Sequence[int], value: int) -> int:
    return stack.index(value)


def _pairs(stack: Sequence[int]) -> Iterable[tuple[int, tuple[int, int]]]:
    return enumerate(zip(stack, islice(stack, 1, None)), start=1)


def find_place_b(b: Sequence[int], value: int) -> int:
    """Return how far ``b`` must rotate so that pushing ``value`` keeps it
    in descending order (up to rotation)."""
    if b[0] < value < b[-1]:
        return 0
    highest = max(b)
    if value > highest or value < min(b):
        return _index(b, highest)
    for place, (upper, lower) in _pairs(b):
        if upper >= value and lower <= value:
            return place
    raise ValueError(f"no place for {value} in stack b")


def find_place_a(a: Sequence[int], value: int) -> int:
    """Return how far ``a`` must rotate so that pushing ``value`` keeps it
    in ascending order (up to rotation)."""
    if a[-1] < value < a[0]:
        return 0
    lowest = min(a)
    if value > max(a) or value < lowest:
        return _index(a, lowest)
    for place, (upper, lower) in _pairs(a):
        if upper <= value and lower >= value:
            return place
    raise ValueError(f"no place for {value} in stack a")


def count_rarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``a`` to ``b`` rotating both up."""
    return max(find_place_b(b, value), _index(a, value))


def count_rrarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``a`` to ``b`` rotating both down."""
    place = find_place_b(b, value)
    count = len(b) - place if place else 0
    index = _index(a, value)
    if index and count < len(a) - index:
        count = len(a) - index
    return count


def count_rarrb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``a`` to ``b`` with ra and rrb."""
    place = find_place_b(b, value)
    down = len(b) - place if place else 0
    return _index(a, value) + down


def count_rrarb(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``a`` to ``b`` with rra and rb."""
    index = _index(a, value)
    down = len(a) - index if index else 0
    return find_place_b(b, value) + down


def count_rarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``b`` to ``a`` rotating both up."""
    return max(find_place_a(a, value), _index(b, value))


def count_rrarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``b`` to ``a`` rotating both down."""
    place = find_place_a(a, value)
    count = len(a) - place if place else 0
    index = _index(b, value)
    if index and count < len(b) - index:
        count = len(b) - index
    return count


def count_rarrb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``b`` to ``a`` with ra and rrb."""
    index = _index(b, value)
    down = len(b) - index if index else 0
    return find_place_a(a, value) + down


def count_rrarb_a(a: Sequence[int], b: Sequence[int], value: int) -> int:
    """Moves needed to push ``value`` from ``b`` to ``a`` with rra and rb."""
    place = find_place_a(a, value)
    down = len(a) - place if place else 0
    return _index(b, value) + down


_COUNTS_AB = (count_rarb, count_rrarrb, count_rarrb, count_rrarb)
_COUNTS_BA = (count_rarb_a, count_rrarrb_a, count_rarrb_a, count_rrarb_a)


def cheapest_ab(a: Sequence[int], b: Sequence[int]) -> int:
    """Fewest rotations needed to bring any number of ``a`` into place in ``b``."""
    return min(count(a, b, value) for value in a for count in _COUNTS_AB)


def cheapest_ba(a: Sequence[int], b: Sequence[int]) -> int:
    """Fewest rotations needed to bring any number of ``b`` into place in ``a``."""
    return min(count(a, b, value) for value in b for count in _COUNTS_BA)


def _apply_rarb(stacks: Stacks, value: int, to_b: bool) -> None:
    a, b = stacks.a, stacks.b
    if to_b:
        while a[0] != value and find_place_b(b, value) > 0:
            stacks.apply(Operation.RR)
        while a[0] != value:
            stacks.apply(Operation.RA)
        while find_place_b(b, value) > 0:
            stacks.apply(Operation.RB)
        stacks.apply(Operation.PB)
    else:
        while b[0] != value and find_place_a(a, value) > 0:
            stacks.apply(Operation.RR)
        while b[0] != value:
            stacks.apply(Operation.RB)
        while find_place_a(a, value) > 0:
            stacks.apply(Operation.RA)
        stacks.apply(Operation.PA)


def _apply_rrarrb(stacks: Stacks, value: int, to_b: bool) -> None:
    a, b = stacks.a, stacks.b
    if to_b:
        while a[0] != value and find_place_b(b, value) > 0:
            stacks.apply(Operation.RRR)
        while a[0] != value:
            stacks.apply(Operation.RRA)
        while find_place_b(b, value) > 0:
            stacks.apply(Operation.RRB)
        stacks.apply(Operation.PB)
    else:
        while b[0] != value and find_place_a(a, value) > 0:
            stacks.apply(Operation.RRR)
        while b[0] != value:
            stacks.apply(Operation.RRB)
        while find_place_a(a, value) > 0:
            stacks.apply(Operation.RRA)
        stacks.apply(Operation.PA)


def _apply_rrarb(stacks: Stacks, value: int, to_b: bool) -> None:
    a, b = stacks.a, stacks.b
    if to_b:
        while a[0] != value:
            stacks.apply(Operation.RRA)
        while find_place_b(b, value) > 0:
            stacks.apply(Operation.RB)
        stacks.apply(Operation.PB)
    else:
        while find_place_a(a, value) > 0:
            stacks.apply(Operation.RRA)
        while b[0] != value:
            stacks.apply(Operation.RB)
        stacks.apply(Operation.PA)


def _apply_rarrb(stacks: Stacks, value: int, to_b: bool) -> None:
    a, b = stacks.a, stacks.b
    if to_b:
        while a[0] != value:
            stacks.apply(Operation.RA)
        while find_place_b(b, value) > 0:
            stacks.apply(Operation.RRB)
        stacks.apply(Operation.PB)
    else:
        while find_place_a(a, value) > 0:
            stacks.apply(Operation.RA)
        while b[0] != value:
            stacks.apply(Operation.RRB)
        stacks.apply(Operation.PA)


_MOVES_TO_B: tuple[tuple[_Counter, _Mover], ...] = (
    (count_rarb, partial(_apply_rarb, to_b=True)),
    (count_rrarrb, partial(_apply_rrarrb, to_b=True)),
    (count_rarrb, partial(_apply_rarrb, to_b=True)),
    (count_rrarb, partial(_apply_rrarb, to_b=True)),
)

_MOVES_TO_A: tuple[tuple[_Counter, _Mover], ...] = (
    (count_rarb_a, partial(_apply_rarb, to_b=False)),
    (count_rarrb_a, partial(_apply_rarrb, to_b=False)),
    (count_rrarrb_a, partial(_apply_rrarrb, to_b=False)),
    (count_rrarb_a, partial(_apply_rrarb, to_b=False)),
)


def _push_cheapest(
    stacks: Stacks,
    source: Sequence[int],
    target_cost: int,
    moves: tuple[tuple[_Counter, _Mover], ...],
) -> None:
    for value in list(source):
        for count, move in moves:
            if count(stacks.a, stacks.b, value) == target_cost:
                move(stacks, value)
                return
    raise RuntimeError("no move reaches the cheapest cost")


def _fill_b(stacks: Stacks) -> None:
    while len(stacks.a) > 3 and not is_sorted(stacks.a):
        cost = cheapest_ab(stacks.a, stacks.b)
        _push_cheapest(stacks, stacks.a, cost, _MOVES_TO_B)


def _empty_b(stacks: Stacks) -> None:
    while stacks.b:
        cost = cheapest_ba(stacks.a, stacks.b)
        _push_cheapest(stacks, stacks.b, cost, _MOVES_TO_A)


def sort_three(stacks: Stacks) -> None:
    """Sort an unsorted stack ``a`` of three numbers."""
    a = stacks.a
    if a[0] == min(a):
        stacks.apply(Operation.RRA)
        stacks.apply(Operation.SA)
    elif a[0] == max(a):
        stacks.apply(Operation.RA)
        if not is_sorted(a):
            stacks.apply(Operation.SA)
    elif _index(a, max(a)) == 1:
        stacks.apply(Operation.RRA)
    else:
        stacks.apply(Operation.SA)


def _prepare(stacks: Stacks) -> None:
    for _ in range(2):
        if len(stacks.a) > 3 and not is_sorted(stacks.a):
            stacks.apply(Operation.PB)
    if len(stacks.a) > 3 and not is_sorted(stacks.a):
        _fill_b(stacks)
    if not is_sorted(stacks.a):
        sort_three(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` in place, recording every operation.

    Meant for an unsorted ``a`` of distinct numbers; a stack of exactly
    two numbers is always swapped.
    """
    a = stacks.a
    if not a:
        return
    if len(a) == 2:
        stacks.apply(Operation.SA)
        return
    _prepare(stacks)
    _empty_b(stacks)
    lowest = min(a)
    rotation = Operation.RA if _index(a, lowest) < len(a) - _index(a, lowest) else Operation.RRA
    while a[0] != lowest:
        stacks.apply(rotation)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``numbers``; none if already sorted."""
    stacks = Stacks(numbers)
    if has_duplicates(stacks.a):
        raise InputError("duplicate numbers")
    if not is_sorted(stacks.a):
        sort_stacks(stacks)
    return list(stacks.history)