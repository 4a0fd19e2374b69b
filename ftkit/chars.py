"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
The predicates return booleans. The converters return a value of the same
kind they were given.
"""

from __future__ import annotations

import operator
from typing import TypeVar

_Char = TypeVar("_Char", str, int)

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    """Return the integer code of *c*, which is a single character or an int."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or decimal digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return ord(" ") <= _code(c) <= ord("~")


def _convert(c: _Char, low: str, high: str, delta: int) -> _Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: _Char) -> _Char:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    return _convert(c, "a", "z", -_CASE_OFFSET)


def to_lower(c: _Char) -> _Char:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    return _convert(c, "A", "Z", _CASE_OFFSET)