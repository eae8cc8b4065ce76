"""ASCII character classification driven by a fixed 128-entry table."""

from __future__ import annotations

import enum

EOF = -1


class CharClass(enum.IntFlag):
    """Classification bits attached to each ASCII character."""

    UPPER = 0x01
    LOWER = 0x02
    DIGIT = 0x04
    SPACE = 0x08
    PUNCT = 0x10
    CONTROL = 0x20
    HEX = 0x40


_NONE = CharClass(0)


def _build_table() -> tuple[CharClass, ...]:
    ranges = [
        (0x00, 0x08, CharClass.CONTROL),
        (0x09, 0x0D, CharClass.SPACE),
        (0x0E, 0x1F, CharClass.CONTROL),
        (0x20, 0x20, CharClass.SPACE),
        (0x21, 0x2F, CharClass.PUNCT),
        (0x30, 0x39, CharClass.DIGIT),
        (0x3A, 0x40, CharClass.PUNCT),
        (0x41, 0x46, CharClass.UPPER | CharClass.HEX),
        (0x47, 0x5A, CharClass.UPPER),
        (0x5B, 0x60, CharClass.PUNCT),
        (0x61, 0x66, CharClass.LOWER | CharClass.HEX),
        (0x67, 0x7A, CharClass.LOWER),
        (0x7B, 0x7E, CharClass.PUNCT),
        (0x7F, 0x7F, CharClass.CONTROL),
    ]
    table = [_NONE] * 128
    for first, last, flags in ranges:
        for code in range(first, last + 1):
            table[code] = flags
    return tuple(table)


_TABLE = _build_table()


def _code(ch: str | int) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    if isinstance(ch, int):
        return ch
    raise TypeError(f"expected a character or an integer code, got {type(ch).__name__}")


def classify(ch: str | int) -> CharClass:
    """Return the classification flags of a character or character code.

    EOF and codes outside the ASCII range have no classification.
    """
    code = _code(ch)
    if 0 <= code < len(_TABLE):
        return _TABLE[code]
    return _NONE


def _has(ch: str | int, mask: CharClass) -> bool:
    return bool(classify(ch) & mask)


def isupper(ch: str | int) -> bool:
    """True for upper-case letters."""
    return _has(ch, CharClass.UPPER)


def islower(ch: str | int) -> bool:
    """True for lower-case letters."""
    return _has(ch, CharClass.LOWER)


def isdigit(ch: str | int) -> bool:
    """True for decimal digits."""
    return _has(ch, CharClass.DIGIT)


def isxdigit(ch: str | int) -> bool:
    """True for hexadecimal digits."""
    return _has(ch, CharClass.DIGIT | CharClass.HEX)


def isspace(ch: str | int) -> bool:
    """True for white space."""
    return _has(ch, CharClass.SPACE)


def ispunct(ch: str | int) -> bool:
    """True for punctuation."""
    return _has(ch, CharClass.PUNCT)


def iscntrl(ch: str | int) -> bool:
    """True for control characters."""
    return _has(ch, CharClass.CONTROL)


def isalpha(ch: str | int) -> bool:
    """True for letters of either case."""
    return _has(ch, CharClass.UPPER | CharClass.LOWER)


def isalnum(ch: str | int) -> bool:
    """True for letters and decimal digits."""
    return _has(ch, CharClass.UPPER | CharClass.LOWER | CharClass.DIGIT)