"""Sorting a stack of ranks with two circular stacks.

The values to sort are ranks 1..n, as produced by rank compression. The
sort works on a stack ``a`` holding the ranks and an empty stack ``b`` and
emits the instructions it performs (see ``ftkit.ring``). The queries in this
module read a ring from its head; a *backward* walk goes from the head to
the bottom value and up.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from ftkit.numbers import INT_MAX
from ftkit.ring import Ring

_CHUNK_DIVISOR = 14
_SMALL_CHUNK = 5
_SPLIT_FLOOR = 3


def _rotations(values: list[int]) -> Iterator[list[int]]:
    if not values:
        yield values
        return
    for k in range(len(values)):
        yield values[k:] + values[:k]


def _ascending_from(values: list[int], start: int) -> bool:
    return values == list(range(start, start + len(values)))


def _descending_to_one(values: list[int]) -> bool:
    return values == list(range(len(values), 0, -1))


def find_min(ring: Ring) -> int:
    """Smallest positive value of *ring*, or INT_MAX when none is positive."""
    values = list(ring)
    if not values:
        raise ValueError("find_min of an empty ring")
    return min((v for v in values if v > 0), default=INT_MAX)


def find_max(ring: Ring) -> int:
    """Largest value of *ring*."""
    values = list(ring)
    if not values:
        raise ValueError("find_max of an empty ring")
    return max(values)


def is_sorted(ring: Ring) -> bool:
    """True when the values run upward by one from the head, from find_min."""
    values = list(ring)
    if not values:
        return True
    return _ascending_from(values, find_min(ring))


def is_reverse_sorted(ring: Ring) -> bool:
    """True when the values run from the ring's length down to 1."""
    return _descending_to_one(list(ring))


def any_rotation_sorted(ring: Ring) -> bool:
    """True when some rotation of *ring* satisfies is_sorted."""
    values = list(ring)
    if not values:
        return True
    start = find_min(ring)
    return any(_ascending_from(r, start) for r in _rotations(values))


def any_rotation_reverse_sorted(ring: Ring) -> bool:
    """True when some rotation of *ring* satisfies is_reverse_sorted."""
    return any(_descending_to_one(r) for r in _rotations(list(ring)))


def find_forward(ring: Ring, nbr: int) -> int | None:
    """Rotations needed to bring *nbr* to the head, or None if absent."""
    values = list(ring)
    try:
        return values.index(nbr)
    except ValueError:
        return None


def find_backward(ring: Ring, nbr: int) -> int | None:
    """Reverse rotations needed to bring *nbr* to the head, or None if absent."""
    values = list(ring)
    n = len(values)
    for distance in range(n):
        if values[-distance % n] == nbr:
            return distance
    return None


def shortest_path(ring: Ring, target: int) -> int:
    """Signed rotation count bringing *target* to the head.

    Positive means forward rotations, negative reverse ones; on a tie the
    reverse direction is chosen. An absent target gives 0.
    """
    forward = find_forward(ring, target) or 0
    backward = find_backward(ring, target) or 0
    return forward if forward < backward else -backward


def _seek(ring: Ring, matches: Callable[[int], bool]) -> int | None:
    values = list(ring)
    n = len(values)
    for step in range(n):
        if matches(values[step]):
            return step
        if matches(values[-step % n]):
            return -step
    return None


def seek_smaller(ring: Ring, limit: int) -> int | None:
    """Signed rotation count to the nearest value not above *limit*.

    Positions are checked alternately forward and backward from the head.
    Returns None when no value qualifies.
    """
    return _seek(ring, lambda v: v <= limit)


def seek_larger(ring: Ring, limit: int) -> int | None:
    """Signed rotation count to the nearest value above *limit*, or None."""
    return _seek(ring, lambda v: v > limit)


def _push_all(src: Ring, dest: Ring) -> None:
    for _ in range(len(src)):
        src.push_to(dest)


def _split_half(src: Ring, dest: Ring, limit: int, smaller: bool) -> None:
    """Move up to half of *src* (plus one) to *dest*.

    With *smaller*, values not above *limit* are moved and the split stops
    when none is left; otherwise values above *limit* are moved, and the
    top value when none is left.
    """
    for _ in range(len(src) // 2 + 1):
        if smaller:
            index = seek_smaller(src, limit)
            if index is None:
                break
        else:
            index = seek_larger(src, limit)
            if index is None:
                index = 0
        src.rotate_by(index)
        src.push_to(dest)


def _split_low_half(stack_a: Ring, stack_b: Ring) -> None:
    half = len(stack_a) // 2
    for _ in range(half):
        index = seek_smaller(stack_a, half)
        if index is None:
            break
        stack_a.rotate_by(index)
        stack_a.push_to(stack_b)


def _sort_two(ring: Ring, descending: bool) -> None:
    first, second = list(ring)[:2]
    if (second > first) if descending else (second < first):
        ring.swap()


def _sort_three(ring: Ring, target: int, descending: bool) -> None:
    in_order = any_rotation_reverse_sorted if descending else any_rotation_sorted
    if not in_order(ring):
        ring.swap()
    ring.rotate_by(shortest_path(ring, target))


def _sort_two_three(ring: Ring, length: int, descending: bool) -> None:
    if length == 2:
        _sort_two(ring, descending)
    elif length == 3:
        target = find_max(ring) if descending else find_min(ring)
        _sort_three(ring, target, descending)


def _sort_six(stack_a: Ring, stack_b: Ring) -> None:
    _split_low_half(stack_a, stack_b)
    _sort_two_three(stack_a, len(stack_a), descending=False)
    _sort_two_three(stack_b, len(stack_b), descending=True)
    _push_all(stack_b, stack_a)


def sort_short(stack_a: Ring, stack_b: Ring, length: int) -> bool:
    """Sort a stack of at most six ranks; False if *length* is larger.

    A stack that is already a rotation of its sorted order is only rotated.
    """
    if any_rotation_sorted(stack_a):
        stack_a.rotate_by(shortest_path(stack_a, 1))
        return True
    if length <= 3:
        _sort_two_three(stack_a, length, descending=False)
        return True
    if length <= 6:
        _sort_six(stack_a, stack_b)
        return True
    return False


def _split_chunk(src: Ring, dest: Ring, limit: int, chunk_size: int) -> None:
    for _ in range(chunk_size + 1):
        index = seek_smaller(src, limit)
        if index is None:
            break
        src.rotate_by(index)
        src.push_to(dest)


def _chunk_and_push(src: Ring, dest: Ring, length: int) -> None:
    chunk_size = length // _CHUNK_DIVISOR or _SMALL_CHUNK
    limit = chunk_size
    while src:
        _split_chunk(src, dest, limit, chunk_size)
        if limit >= length:
            break
        limit = min(limit + chunk_size, length)


def _sort_back(stack_a: Ring, stack_b: Ring) -> None:
    if not stack_b:
        return
    target = find_max(stack_b)
    for _ in range(len(stack_b)):
        stack_b.rotate_by(shortest_path(stack_b, target))
        stack_b.push_to(stack_a)
        target -= 1


def long_sort(stack_a: Ring, stack_b: Ring, length: int) -> None:
    """Sort the ranks 1..*length* of *stack_a*, using *stack_b* as scratch."""
    limit = len(stack_a) // 2
    _split_half(stack_a, stack_b, limit, smaller=True)
    while True:
        limit //= 2
        _split_half(stack_b, stack_a, limit, smaller=False)
        if limit <= _SPLIT_FLOOR:
            break
    _chunk_and_push(stack_a, stack_b, length)
    _sort_back(stack_a, stack_b)


def sort(values: Iterable[int]) -> list[str]:
    """Return the instructions that sort the ranks *values* on stack ``a``.

    *values* must be a permutation of 1..n, listed from the top of the
    stack. Raises ValueError otherwise.
    """
    values = list(values)
    length = len(values)
    if sorted(values) != list(range(1, length + 1)):
        raise ValueError("values must be a permutation of 1..n")
    ops: list[str] = []
    if not values:
        return ops
    stack_a = Ring("a", values, ops.append)
    stack_b = Ring("b", (), ops.append)
    if any_rotation_sorted(stack_a):
        stack_a.rotate_by(shortest_path(stack_a, 1))
    elif len(stack_a) <= 6:
        sort_short(stack_a, stack_b, length)
    else:
        long_sort(stack_a, stack_b, length)
    return ops