# utf8kit

Small, dependency-free helpers for working with UTF-8 at the code point level.

## Installation

```
pip install utf8kit
```

## What it offers

All functions live in `utf8kit.util`.

- `utf8_first_byte(cp)`: the lead byte of the UTF-8 encoding of code point `cp`. Surrogates are accepted and treated like any other code point.
- `utf8_first_bytes(first, last)`: the set of lead bytes used by any code point in the inclusive range `first..last`. If `first > last` the set is empty.
- `is_utf8_continuation(b)`: whether byte `b` is a continuation byte (`10xxxxxx`).
- `utf8_w2(b0, b1)`, `utf8_w3(b0, b1, b2)`, `utf8_w4(b0, b1, b2, b3)`: decode a 2-, 3- or 4-byte sequence into a code point.
- `to_char_sat(c)`: turn an integer into a one-character string. Values that are not valid characters (surrogates, negatives, or above `U+10FFFF`) give the largest character, `U+10FFFF`.
- `equal_range_by(seq, compare)`: for a sequence sorted with respect to `compare`, the `range` of indexes whose elements compare equal. `compare(item)` returns a negative number, zero or a positive number for items below, equal to or above the sought value.

The module also exposes `CODE_POINT_MAX` (`0x10FFFF`).

## Errors

- `utf8_first_byte` and `utf8_first_bytes` raise `ValueError` for code points outside `0..0x10FFFF`.
- `utf8_w2`, `utf8_w3` and `utf8_w4` raise `ValueError` when the lead byte does not start a sequence of that length or when a following byte is not a continuation byte.

## Example

```python
from utf8kit.util import utf8_first_byte, utf8_w3, utf8_first_bytes, equal_range_by

encoded = "\u0abc".encode("utf-8")
assert utf8_first_byte(0xABC) == encoded[0]
assert utf8_w3(*encoded) == 0xABC

assert utf8_first_bytes(0x41, 0x43) == {0x41, 0x42, 0x43}

values = [0, 1, 2, 3, 4, 4, 4, 7, 8, 9, 9]
assert equal_range_by(values, lambda v: (v > 4) - (v < 4)) == range(4, 7)
```

## What it does not do

This package is a set of building blocks. It does not decode or validate whole byte strings, and it does not check for overlong encodings; for full encoding and decoding use Python's own `str.encode` and `bytes.decode`.

## Running the tests

```
pip install -e ".[test]"
pytest
```