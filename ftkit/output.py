"""Formatted and unformatted text output to streams.

``sprintf`` understands the conversions ``%c %s %p %d %i %u %x %X %%`` and
nothing else: no flags, widths or precisions. Integer conversions follow
32-bit C ``int`` and ``unsigned int`` semantics. The ``put_*`` helpers write
to a text stream, standard output by default, and return the number of
characters written.
"""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TextIO

from ftkit.numbers import itoa

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
NULL_STRING = "(null)"

_UINT_MASK = 0xFFFFFFFF
_ADDRESS_MASK = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a malformed format string or a missing argument."""


def _resolve(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def _to_int32(value: Any) -> int:
    value = operator.index(value)
    return ((value + 2**31) % 2**32) - 2**31


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _UINT_MASK


def number_in_base(n: int, base: str) -> str:
    """Write the non-negative integer *n* using the digits of *base*.

    The radix is the length of *base*, which must be at least 2.
    """
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if len(base) < 2:
        raise ValueError(f"a base needs at least two digits, got {base!r}")
    radix = len(base)
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if n == 0:
            break
    return "".join(reversed(digits))


def _render_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c needs a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _render_str(arg: Any) -> str:
    if arg is None:
        return NULL_STRING
    if not isinstance(arg, str):
        raise TypeError(f"%s needs a string or None, got {type(arg).__name__}")
    return arg


def _render_address(arg: Any) -> str:
    if arg is None:
        address = 0
    elif isinstance(arg, int):
        address = arg & _ADDRESS_MASK
    else:
        address = id(arg) & _ADDRESS_MASK
    return "0x" + number_in_base(address, LOWER_HEX)


def _render_signed(arg: Any) -> str:
    return str(_to_int32(arg))


def _render_unsigned(arg: Any) -> str:
    return str(_to_uint32(arg))


def _render_lower_hex(arg: Any) -> str:
    return number_in_base(_to_uint32(arg), LOWER_HEX)


def _render_upper_hex(arg: Any) -> str:
    return number_in_base(_to_uint32(arg), UPPER_HEX)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _render_char,
    "s": _render_str,
    "p": _render_address,
    "d": _render_signed,
    "i": _render_signed,
    "u": _render_unsigned,
    "x": _render_lower_hex,
    "X": _render_upper_hex,
}


def _pieces(fmt: str, args: Iterable[Any]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format string ends with a lone '%'")
        if spec == "%":
            yield "%"
            continue
        render = _CONVERSIONS.get(spec)
        if render is None:
            raise FormatError(f"unknown conversion '%{spec}'")
        try:
            arg = next(values)
        except StopIteration:
            raise FormatError(f"missing argument for '%{spec}'") from None
        yield render(arg)


def sprintf(fmt: str, *args: Any) -> str:
    """Return *fmt* with its conversions replaced by the rendered *args*."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to *stream*; return the characters written.

    Nothing is written when the format is invalid.
    """
    text = sprintf(fmt, *args)
    _resolve(stream).write(text)
    return len(text)


def put_char(c: str | int, stream: TextIO | None = None) -> int:
    """Write one character, given as a string or a byte value."""
    text = _render_char(c)
    _resolve(stream).write(text)
    return 1


def put_str(s: str | None, stream: TextIO | None = None) -> int:
    """Write *s*; None writes nothing."""
    if s is None:
        return 0
    _resolve(stream).write(s)
    return len(s)


def put_endl(s: str | None, stream: TextIO | None = None) -> int:
    """Write *s* followed by a newline; None writes only the newline."""
    out = _resolve(stream)
    written = put_str(s, out)
    out.write("\n")
    return written + 1


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write a 32-bit integer in decimal.

    Raises OverflowError when *n* does not fit in 32 bits.
    """
    return put_str(itoa(operator.index(n)), stream)