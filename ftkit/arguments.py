"""Validation of integer command-line arguments and rank compression."""

from __future__ import annotations

from collections.abc import Sequence

from ftkit.numbers import INT_MAX, INT_MIN, InvalidNumberError, atoi_long


class ArgumentError(ValueError):
    """Raised when the arguments are not distinct 32-bit integers."""


def validate_args(argv: Sequence[str]) -> list[int]:
    """Parse ``argv[1:]`` as distinct 32-bit integers.

    ``argv[0]`` is the program name and is ignored. Raises ArgumentError for
    text that is not a number, a value outside the 32-bit range, or a value
    that appears more than once.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in argv[1:]:
        try:
            number = atoi_long(arg)
        except InvalidNumberError as exc:
            raise ArgumentError("Error") from exc
        if not INT_MIN <= number <= INT_MAX:
            raise ArgumentError("Error")
        if number in seen:
            raise ArgumentError("Error")
        seen.add(number)
        values.append(number)
    return values


def find_min_index(values: Sequence[int]) -> int | None:
    """Index of the first smallest value below INT_MAX, or None if there is none."""
    candidates = [(value, index) for index, value in enumerate(values) if value < INT_MAX]
    if not candidates:
        return None
    return min(candidates)[1]


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank, starting at 1 for the smallest.

    Equal values are ranked in order of position. Values of INT_MAX or more
    all receive the rank after the last one handed out.
    """
    order = sorted(
        (index for index, value in enumerate(values) if value < INT_MAX),
        key=lambda index: values[index],
    )
    ranks = [len(order) + 1] * len(values)
    for rank, index in enumerate(order, start=1):
        ranks[index] = rank
    return ranks