"""Formatted input in the style of the C library's scanf family.

Directives in the format are white space (skips ' ', '\\t' and '\\n' in the
input), literal characters (which must match the input), '%%' (matches a
'%'), and conversions: '%' followed by an optional '*' (match but do not
store), an optional width, an optional 'l' or 'h' size and a conversion
character. 'd' reads decimal, 'o' octal and 'x' hexadecimal numbers; 'c'
reads characters (one by default), 's' a word ending at white space, and
'[set]' or '[^set]' a run of characters in or out of the set. The set is
a plain list of characters, without ranges. An upper-case conversion
character is read as its lower-case form with the long size. Any other
conversion character reads a decimal number. Numbers are stored as 32-bit
values, or 16-bit with the 'h' size.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field
from typing import Protocol

from xinulibc.chartype import isdigit, isupper, isxdigit
from xinulibc.strings import strcpy

DEFAULT_WIDTH = 30000

_WHITE = frozenset(" \t\n")
_SPEC = re.compile(r"(?P<skip>\*)?(?P<width>[0-9]*)(?P<size>[lh])?")


class _Size(enum.Enum):
    SHORT = 16
    REGULAR = 32
    LONG = 32


class _Reader(Protocol):
    def getch(self) -> str | None: ...

    def ungetch(self) -> None: ...


class StringReader:
    """Character source over a string, ending at its first NUL."""

    def __init__(self, text: str) -> None:
        self._text = strcpy(text)
        self._pos = 0

    def getch(self) -> str | None:
        """Return the next character, or None at the end of the text."""
        if self._pos >= len(self._text):
            return None
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def ungetch(self) -> None:
        """Push back the character read last."""
        if self._pos == 0:
            raise ValueError("nothing to push back")
        self._pos -= 1


@dataclass(frozen=True)
class _Scanset:
    """Set of characters; a negated set stops at its members."""

    members: frozenset[str] = field(default_factory=frozenset)
    negated: bool = True

    def stops(self, ch: str) -> bool:
        return (ch in self.members) == self.negated


_NEVER_STOP = _Scanset()
_STOP_AT_WHITE = _Scanset(_WHITE, negated=True)


@dataclass(frozen=True)
class _Space:
    pass


@dataclass(frozen=True)
class _Literal:
    char: str


@dataclass(frozen=True)
class _Conversion:
    conv: str
    assign: bool
    width: int
    size: _Size
    scanset: _Scanset | None


_Directive = _Space | _Literal | _Conversion


def _parse_scanset(text: str, pos: int) -> tuple[_Scanset, int]:
    negated = text.startswith("^", pos)
    if negated:
        pos += 1
    end = text.find("]", pos)
    if end < 0:
        raise ValueError("unterminated scan set in format")
    return _Scanset(frozenset(text[pos:end]), negated), end + 1


def _directives(fmt: str):
    text = strcpy(fmt)
    pos = 0
    while pos < len(text):
        ch = text[pos]
        pos += 1
        if ch in _WHITE:
            yield _Space()
            continue
        if ch != "%":
            yield _Literal(ch)
            continue
        if text.startswith("%", pos):
            pos += 1
            yield _Literal("%")
            continue

        spec = _SPEC.match(text, pos)
        pos = spec.end()
        width = int(spec.group("width") or 0) or DEFAULT_WIDTH
        size_flag = spec.group("size")
        size = {"l": _Size.LONG, "h": _Size.SHORT}.get(size_flag, _Size.REGULAR)
        if pos >= len(text):
            raise ValueError("incomplete conversion at end of format")
        conv = text[pos]
        pos += 1

        scanset = None
        if conv == "[" and size_flag is None:
            scanset, pos = _parse_scanset(text, pos)
        if isupper(conv):
            conv = conv.lower()
            size = _Size.LONG
        yield _Conversion(conv, spec.group("skip") is None, width, size, scanset)


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    return value - (1 << bits) if value >> (bits - 1) else value


def _digit(ch: str | None, base: int) -> int | None:
    if ch is None:
        return None
    if isdigit(ch):
        return int(ch)
    if base == 16 and isxdigit(ch):
        return int(ch, 16)
    return None


def _scan_number(conv: str, width: int, size: _Size, reader: _Reader) -> tuple[int | None, bool]:
    base = {"o": 8, "x": 16}.get(conv, 10)
    ch = reader.getch()
    while ch in _WHITE:
        ch = reader.getch()

    consumed = False
    negative = False
    if ch == "-":
        negative = consumed = True
        ch = reader.getch()
        width -= 1
    elif ch == "+":
        ch = reader.getch()
        width -= 1

    value = 0
    for _ in range(max(width, 0)):
        digit = _digit(ch, base)
        if digit is None:
            break
        value = value * base + digit
        consumed = True
        ch = reader.getch()

    at_eof = ch is None
    if not at_eof:
        reader.ungetch()
    if not consumed:
        return None, at_eof
    return _wrap(-value if negative else value, size.value), at_eof


def _scan_text(conv: str, width: int, reader: _Reader, scanset: _Scanset) -> tuple[str | None, bool]:
    if conv == "c" and width == DEFAULT_WIDTH:
        width = 1
    ch = reader.getch()
    if conv == "s":
        while ch in _WHITE:
            ch = reader.getch()

    if conv == "c":
        stop_set = _NEVER_STOP
    elif conv == "[":
        stop_set = scanset
    else:
        stop_set = _STOP_AT_WHITE

    chars: list[str] = []
    remaining = width
    while ch is not None and not stop_set.stops(ch):
        chars.append(ch)
        remaining -= 1
        if remaining <= 0:
            break
        ch = reader.getch()

    at_eof = ch is None
    if not at_eof and remaining > 0:
        reader.ungetch()
    return ("".join(chars) or None), at_eof


def doscan(fmt: str, reader: _Reader) -> list[int | str | None]:
    """Read from reader according to fmt.

    Returns one entry for each storing conversion that was reached, in
    order; an entry is None when its conversion matched nothing. Scanning
    stops early when a literal does not match or a conversion reaches the
    end of input. Raises EOFError when the input ends before anything was
    matched, or while a literal is expected, and ValueError for a
    malformed format.
    """
    values: list[int | str | None] = []
    scanset = _Scanset()
    for directive in _directives(fmt):
        if isinstance(directive, _Space):
            ch = reader.getch()
            while ch in _WHITE:
                ch = reader.getch()
            if ch is not None:
                reader.ungetch()
        elif isinstance(directive, _Literal):
            ch = reader.getch()
            if ch != directive.char:
                if ch is None:
                    raise EOFError("input ended while matching the format")
                reader.ungetch()
                return values
        else:
            if directive.scanset is not None:
                scanset = directive.scanset
            if directive.conv in ("c", "s", "["):
                value, at_eof = _scan_text(directive.conv, directive.width, reader, scanset)
            else:
                value, at_eof = _scan_number(
                    directive.conv, directive.width, directive.size, reader
                )
            if directive.assign:
                values.append(value)
            if at_eof:
                if all(v is None for v in values):
                    raise EOFError("input ended before anything was matched")
                return values
    return values


def sscanf(text: str, fmt: str) -> list[int | str | None]:
    """Read values from text according to fmt; see doscan."""
    return doscan(fmt, StringReader(text))