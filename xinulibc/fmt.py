"""Formatted output in the style of the C library's printf family.

Supported conversions: %c %s %d %u %o %x %X %b, and %H / %h, which print
two values in hexadecimal. Flags are '-' (left justify) and '0' (zero
fill), followed by an optional width and an optional '.' precision;
either may be '*' to take the value from the argument list. Widths and
precisions outside 0..80 are ignored. Numbers are treated as 32-bit
values; every conversion except %d and %s ignores the precision, and %d
truncates its digits to it. Any other conversion character is printed
as it is.
"""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from typing import Any, TextIO

from xinulibc.strings import strcpy

MAXSTR = 80
_MASK32 = 0xFFFFFFFF

_SPEC = re.compile(
    r"%(?P<left>-)?(?P<zero>0)?(?P<width>\*|[0-9]*)"
    r"(?:\.(?P<prec>\*|[0-9]*))?(?P<conv>.)?",
    re.DOTALL,
)

_RADIX_FORMATS = {"o": "o", "x": "x", "X": "X", "b": "b"}


def _int(value: Any, conv: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conv} requires an integer, got {type(value).__name__}")
    return value


def _signed32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError(f"%c requires a single character, got {value!r}")
        code = ord(value)
    else:
        code = _int(value, "c") & 0xFF
    return chr(code) if code else ""


def _text(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s requires a string, got {type(value).__name__}")
    return strcpy(value)


def _wide_hex(first: int, second: int, spec: str) -> str:
    high = format(first & _MASK32, spec)
    # The second value only shows when the first fills all eight digits.
    if len(high) < 8:
        return high
    return high + format(second & _MASK32, spec)


def doprnt(fmt: str, args: Iterable[Any], putc: Callable[[str], Any]) -> None:
    """Format args according to fmt, handing each output character to putc."""
    arguments = iter(args)

    def take() -> Any:
        try:
            return next(arguments)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def field(spec: str | None) -> int:
        if not spec:
            return 0
        if spec == "*":
            return _int(take(), "*")
        return int(spec)

    def emit(text: str) -> None:
        for ch in text:
            putc(ch)

    text = strcpy(fmt)
    pos = 0
    while True:
        percent = text.find("%", pos)
        if percent < 0:
            emit(text[pos:])
            return
        emit(text[pos:percent])
        spec = _SPEC.match(text, percent)
        pos = spec.end()

        leftjust = spec.group("left") is not None
        fill = "0" if spec.group("zero") else " "
        fmin = field(spec.group("width"))
        fmax = field(spec.group("prec"))
        conv = spec.group("conv")
        if conv is None:
            putc("%")
            return

        sign = ""
        if conv == "c":
            body = _char(take())
            fmax = 0
            fill = " "
        elif conv == "s":
            body = _text(take())
            fill = " "
        elif conv == "d":
            number = _signed32(_int(take(), conv))
            if number < 0:
                sign = "-"
                number = -number
            body = str(number)
        elif conv == "u":
            body = str(_int(take(), conv) & _MASK32)
            fmax = 0
        elif conv in _RADIX_FORMATS:
            body = format(_int(take(), conv) & _MASK32, _RADIX_FORMATS[conv])
            fmax = 0
        elif conv in ("H", "h"):
            first = _int(take(), conv)
            second = _int(take(), conv)
            body = _wide_hex(first, second, "X" if conv == "H" else "x")
            fmax = 0
        else:
            putc(conv)
            body = ""

        if not 0 <= fmin <= MAXSTR:
            fmin = 0
        if not 0 <= fmax <= MAXSTR:
            fmax = 0

        leading = 0
        if fmax or fmin:
            if fmax and len(body) > fmax:
                body = body[:fmax]
            if fmin:
                leading = fmin - len(body)
            if sign:
                leading -= 1
        padding = fill * max(leading, 0)

        if sign and fill == "0":
            putc(sign)
        if not leftjust:
            emit(padding)
        if sign and fill == " ":
            putc(sign)
        emit(body)
        if leftjust:
            emit(padding)


def sprintf(fmt: str, *args: Any) -> str:
    """Return the formatted text."""
    parts: list[str] = []
    doprnt(fmt, args, parts.append)
    return "".join(parts)


def fprintf(stream: TextIO, fmt: str, *args: Any) -> None:
    """Write the formatted text to a text stream."""
    doprnt(fmt, args, stream.write)


def printf(fmt: str, *args: Any) -> None:
    """Write the formatted text to standard output."""
    fprintf(sys.stdout, fmt, *args)