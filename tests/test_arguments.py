import pytest

from ftkit.arguments import ArgumentError, compress, find_min_index, validate_args
from ftkit.numbers import INT_MAX, INT_MIN


def test_valid_arguments_parsed_in_order():
    assert validate_args(["prog", "3", "-1", "0", "+7"]) == [3, -1, 0, 7]


def test_program_name_only_gives_empty_list():
    assert validate_args(["prog"]) == []


def test_limits_accepted():
    assert validate_args(["prog", "2147483647", "-2147483648"]) == [INT_MAX, INT_MIN]


def test_trailing_space_accepted():
    assert validate_args(["prog", "  12 "]) == [12]


@pytest.mark.parametrize(
    "args",
    [
        ["2147483648"],
        ["-2147483649"],
        ["abc"],
        ["12a"],
        [""],
        ["   "],
        ["5", "5"],
        ["0", "0"],
        ["-3", "4", "-3"],
    ],
)
def test_invalid_arguments_raise(args):
    with pytest.raises(ArgumentError):
        validate_args(["prog", *args])


def test_argument_error_is_value_error():
    with pytest.raises(ValueError):
        validate_args(["prog", "x"])


def test_compress_example():
    assert compress([30, -5, 10]) == [3, 1, 2]


@pytest.mark.parametrize(
    "values",
    [[5, 1, 4, 2, 3], [-100, 2000, 0, 7, -8, 99], [INT_MIN, INT_MAX, 0], [42]],
)
def test_compress_ranks_follow_sorted_order(values):
    ranks = compress(values)
    assert sorted(ranks) == list(range(1, len(values) + 1))
    by_rank = [value for _, value in sorted(zip(ranks, values))]
    assert by_rank == sorted(values)


def test_compress_gives_int_max_the_last_rank():
    values = [INT_MAX, 3, -2]
    assert compress(values)[0] == len(values)


def test_compress_leaves_input_untouched():
    values = [9, 2, 5]
    compress(values)
    assert values == [9, 2, 5]


def test_compress_empty():
    assert compress([]) == []


def test_find_min_index_points_at_minimum():
    values = [4, -7, 12, -7, 0]
    index = find_min_index(values)
    assert values[index] == min(values)
    assert index == values.index(min(values))


def test_find_min_index_ignores_int_max():
    assert find_min_index([INT_MAX, INT_MAX]) is None
    assert find_min_index([]) is None