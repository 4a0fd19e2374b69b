import itertools
import random

import pytest

from ftkit.numbers import INT_MAX
from ftkit.ring import Ring
from ftkit.sorter import (
    any_rotation_reverse_sorted,
    any_rotation_sorted,
    find_backward,
    find_forward,
    find_max,
    find_min,
    is_reverse_sorted,
    is_sorted,
    long_sort,
    seek_larger,
    seek_smaller,
    shortest_path,
    sort,
    sort_short,
)


def _quiet(name, values=()):
    return Ring(name, values, log=lambda op: None)


def _replay(values, ops):
    a = _quiet("a", values)
    b = _quiet("b")
    rings = {"a": a, "b": b}
    for op in ops:
        if op == "pa":
            b.push_to(a)
        elif op == "pb":
            a.push_to(b)
        elif op.startswith("rr"):
            rings[op[2:]].reverse_rotate()
        elif op.startswith("r"):
            rings[op[1:]].rotate()
        elif op.startswith("s"):
            rings[op[1:]].swap()
        else:
            raise AssertionError(f"unexpected instruction {op!r}")
    return list(a), list(b)


def test_is_sorted_from_minimum():
    assert is_sorted(_quiet("a", [3, 4, 5]))
    assert not is_sorted(_quiet("a", [3, 5, 4]))
    assert not is_sorted(_quiet("a", [4, 5, 3]))


def test_is_reverse_sorted_counts_down_to_one():
    assert is_reverse_sorted(_quiet("b", [3, 2, 1]))
    assert not is_reverse_sorted(_quiet("b", [4, 3, 2]))


def test_any_rotation_sorted():
    assert any_rotation_sorted(_quiet("a", [2, 3, 1]))
    assert any_rotation_sorted(_quiet("a", [1, 2, 3]))
    assert not any_rotation_sorted(_quiet("a", [1, 3, 2]))


def test_any_rotation_reverse_sorted():
    assert any_rotation_reverse_sorted(_quiet("b", [1, 3, 2]))
    assert not any_rotation_reverse_sorted(_quiet("b", [1, 2, 3]))


def test_find_min_ignores_non_positive():
    assert find_min(_quiet("a", [0, -3, 5, 2])) == 2
    assert find_min(_quiet("a", [0, -1])) == INT_MAX


def test_find_max():
    assert find_max(_quiet("a", [4, 9, 1])) == 9


def test_find_min_max_empty_raise():
    with pytest.raises(ValueError):
        find_min(_quiet("a"))
    with pytest.raises(ValueError):
        find_max(_quiet("a"))


def test_find_forward_and_backward_agree():
    values = [4, 5, 6, 7, 8]
    ring = _quiet("a", values)
    for index, value in enumerate(values):
        assert find_forward(ring, value) == index
        assert find_backward(ring, value) == (len(values) - index) % len(values)
    assert find_forward(ring, 99) is None
    assert find_backward(ring, 99) is None


def test_shortest_path_brings_target_to_head():
    values = [5, 6, 7, 8, 9, 10]
    for target in values:
        ring = _quiet("a", values)
        steps = shortest_path(ring, target)
        assert abs(steps) <= len(values) // 2
        ring.rotate_by(steps)
        assert ring.head == target


def test_shortest_path_prefers_reverse_on_tie():
    assert shortest_path(_quiet("a", [5, 6, 7, 8]), 7) == -2


def test_shortest_path_absent_is_zero():
    assert shortest_path(_quiet("a", [1, 2]), 5) == 0


def test_seek_smaller_checks_forward_first():
    assert seek_smaller(_quiet("a", [5, 1, 9, 2]), 2) == 1


def test_seek_finds_qualifying_value():
    values = [9, 8, 1, 7, 6]
    ring = _quiet("a", values)
    index = seek_smaller(ring, 1)
    ring.rotate_by(index)
    assert ring.head == 1
    assert seek_larger(_quiet("a", values), 100) is None
    assert seek_smaller(_quiet("a", values), 0) is None
    assert seek_larger(_quiet("a"), 0) is None


def test_sort_already_sorted_emits_nothing():
    assert sort([1, 2, 3, 4, 5]) == []
    assert sort([]) == []


def test_sort_two_reversed():
    assert sort([2, 1]) == ["rra"]


@pytest.mark.parametrize("length", range(1, 7))
def test_sort_all_small_permutations(length):
    target = list(range(1, length + 1))
    for perm in itertools.permutations(target):
        ops = sort(perm)
        a, b = _replay(perm, ops)
        assert a == target
        assert b == []


def test_sort_three_needs_at_most_two_instructions():
    for perm in itertools.permutations([1, 2, 3]):
        assert len(sort(perm)) <= 2


def test_sort_five_needs_at_most_twelve_instructions():
    for perm in itertools.permutations([1, 2, 3, 4, 5]):
        assert len(sort(perm)) <= 12


@pytest.mark.parametrize("length", [7, 8, 10, 13, 14, 20, 31, 50, 100])
def test_sort_random_permutations(length):
    rng = random.Random(length)
    target = list(range(1, length + 1))
    for _ in range(5):
        perm = target[:]
        rng.shuffle(perm)
        a, b = _replay(perm, sort(perm))
        assert a == target
        assert b == []


def test_sort_rejects_non_ranks():
    with pytest.raises(ValueError):
        sort([1, 3])
    with pytest.raises(ValueError):
        sort([1, 1, 2])


def test_sort_short_refuses_long_stacks():
    values = [2, 1, 3, 4, 5, 6, 7]
    a = _quiet("a", values)
    b = _quiet("b")
    assert sort_short(a, b, len(values)) is False
    assert list(a) == values


def test_sort_short_rotates_rotated_stack():
    ops = []
    a = Ring("a", [3, 4, 1, 2], ops.append)
    b = Ring("b", (), ops.append)
    assert sort_short(a, b, 4) is True
    assert is_sorted(a)
    assert all(op in ("ra", "rra") for op in ops)


def test_long_sort_sorts_rings():
    rng = random.Random(7)
    target = list(range(1, 26))
    perm = target[:]
    rng.shuffle(perm)
    ops = []
    a = Ring("a", perm, ops.append)
    b = Ring("b", (), ops.append)
    long_sort(a, b, len(perm))
    assert list(a) == target
    assert list(b) == []
    assert _replay(perm, ops) == (target, [])