"""Helpers for UTF-8 code point encoding, lead bytes and sorted-sequence ranges."""

__version__ = "0.1.0"
__all__ = ["util"]