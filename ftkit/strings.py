"""String searching, comparison, copying and splitting helpers.

Positions are returned as indices, or None where nothing was found. As with
NUL-terminated strings, the searches treat ``"\\0"`` as matching the end of
the string.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return *c* as a one-character string; ints are truncated to 8 bits."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first *c* in *s*, ``len(s)`` for ``"\\0"``, else None."""
    c = _char(c)
    index = s.find(c)
    if index >= 0:
        return index
    return len(s) if c == _NUL else None


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last *c* in *s*, ``len(s)`` for ``"\\0"``, else None."""
    c = _char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the code difference at the first mismatch, or 0 when the
    compared parts are equal. A shorter string compares as if padded with
    ``"\\0"``.
    """
    n = _non_negative("n", n)
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of *needle* lying wholly within the first *length* characters.

    An empty needle is found at index 0; otherwise a zero length finds
    nothing.
    """
    length = _non_negative("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* characters including the terminator.

    Returns the copied text and the full length of *src*, so truncation
    happened when the length is at least *size*.
    """
    size = _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dst* in a buffer of *size* characters.

    Returns the resulting text and the length the result was meant to have:
    ``len(dst) + len(src)`` when *size* exceeds ``len(dst)``, otherwise
    ``len(src) + size``. When *size* does not exceed ``len(dst)``, *dst* is
    returned unchanged.
    """
    size = _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if size > len(dst):
        room = size - len(dst) - 1
        return dst + src[:room], len(dst) + len(src)
    return dst, len(src) + size


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* from *start*; empty past the end."""
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def split(s: str, sep: str | int) -> list[str]:
    """Split *s* on the single character *sep*, dropping empty pieces."""
    sep = _char(sep)
    if not s:
        return []
    if sep == _NUL:
        return [s]
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` applied to every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], f: Callable[[int, str], str | None]
) -> None:
    """Call ``f(index, char)`` for every item of *s* in place.

    When *f* returns a value other than None, it replaces the item.
    """
    for index, ch in enumerate(list(s)):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strldup(s: str, length: int) -> str:
    """Return a copy of at most *length* characters of *s*."""
    length = _non_negative("length", length)
    return s[:length]