"""UTF-8 helpers: first-byte computation, code point assembly and range search."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")

CODE_POINT_MAX = 0x10FFFF
_CHAR_MAX = chr(CODE_POINT_MAX)

# Number of significant bits in a UTF-8 continuation byte.
_CONT_SIGBITS = 6


def to_char_sat(c: int) -> str:
    """Return the character for code point ``c``, or the largest character if
    ``c`` is not a valid scalar value (a surrogate or out of range)."""
    if 0 <= c <= CODE_POINT_MAX and not 0xD800 <= c <= 0xDFFF:
        return chr(c)
    return _CHAR_MAX


def _check_code_point(cp: int) -> None:
    if not 0 <= cp <= CODE_POINT_MAX:
        raise ValueError(f"code point out of range: {cp:#x}")


def utf8_first_byte(cp: int) -> int:
    """Return the first byte of the UTF-8 encoding of ``cp``.

    Surrogates are accepted and encoded as if they were ordinary code points.
    """
    _check_code_point(cp)
    if cp < 0x80:
        return cp
    if cp < 0x800:
        return ((cp >> 6) & 0x1F) | 0b1100_0000
    if cp < 0x10000:
        return ((cp >> 12) & 0x0F) | 0b1110_0000
    return ((cp >> 18) & 0x07) | 0b1111_0000


def utf8_first_bytes(first: int, last: int) -> set[int]:
    """Return every first byte of the UTF-8 encodings of the code points in the
    inclusive interval ``[first, last]``. An empty interval gives an empty set."""
    _check_code_point(first)
    _check_code_point(last)
    ranges = (
        (first, min(last, 0x7F)),
        (max(first, 0x80), min(last, 0x7FF)),
        (max(first, 0x800), min(last, 0xFFFF)),
        (max(first, 0x10000), last),
    )
    result: set[int] = set()
    for lo, hi in ranges:
        if lo <= hi:
            result.update(range(utf8_first_byte(lo), utf8_first_byte(hi) + 1))
    return result


def equal_range_by(seq: Sequence[T], compare: Callable[[T], int]) -> range:
    """Return the range of indexes of ``seq`` whose elements compare equal.

    ``seq`` must be sorted with respect to ``compare``, which returns a negative
    number, zero or a positive number for elements below, equal to or above the
    sought value.
    """

    def key(item: T) -> int:
        c = compare(item)
        return (c > 0) - (c < 0)

    left = bisect_left(seq, 0, key=key)
    right = bisect_right(seq, 0, lo=left, key=key)
    return range(left, right)


def is_utf8_continuation(b: int) -> bool:
    """Return whether ``b`` is a UTF-8 continuation byte."""
    return (b & 0b1100_0000) == 0b1000_0000


def _mask_shift(b: int, mask: int, shift: int) -> int:
    return (b & ((1 << mask) - 1)) << shift


def _require(condition: bool, what: str) -> None:
    if not condition:
        raise ValueError(f"malformed UTF-8 sequence: {what}")


def _check_continuations(*bytes_: int) -> None:
    for b in bytes_:
        _require(is_utf8_continuation(b), f"{b:#04x} is not a continuation byte")


def utf8_w2(b0: int, b1: int) -> int:
    """Assemble a code point from a two-byte UTF-8 sequence."""
    _require(b0 >> 5 == 0b110, f"{b0:#04x} does not start a two-byte sequence")
    _check_continuations(b1)
    return _mask_shift(b0, 5, _CONT_SIGBITS) | _mask_shift(b1, _CONT_SIGBITS, 0)


def utf8_w3(b0: int, b1: int, b2: int) -> int:
    """Assemble a code point from a three-byte UTF-8 sequence."""
    _require(b0 >> 4 == 0b1110, f"{b0:#04x} does not start a three-byte sequence")
    _check_continuations(b1, b2)
    return (
        _mask_shift(b0, 4, 2 * _CONT_SIGBITS)
        | _mask_shift(b1, _CONT_SIGBITS, _CONT_SIGBITS)
        | _mask_shift(b2, _CONT_SIGBITS, 0)
    )


def utf8_w4(b0: int, b1: int, b2: int, b3: int) -> int:
    """Assemble a code point from a four-byte UTF-8 sequence."""
    _require(b0 >> 3 == 0b11110, f"{b0:#04x} does not start a four-byte sequence")
    _check_continuations(b1, b2, b3)
    return (
        _mask_shift(b0, 3, 3 * _CONT_SIGBITS)
        | _mask_shift(b1, _CONT_SIGBITS, 2 * _CONT_SIGBITS)
        | _mask_shift(b2, _CONT_SIGBITS, _CONT_SIGBITS)
        | _mask_shift(b3, _CONT_SIGBITS, 0)
    )