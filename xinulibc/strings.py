"""String, memory and numeric helpers with C library semantics.

Text arguments are Python strings; an embedded NUL ends the string as it
would in C. Positions are returned as indices, with None where C would
return a null pointer. Memory functions work on bytes-like objects and
write into bytearrays in place.
"""

from __future__ import annotations

import re

_NUL = "\0"
INT_BITS = 32
LONG_BITS = 32

_DIGITS = re.compile(r"[0-9]*")


def _terminated(s: str) -> str:
    end = s.find(_NUL)
    return s if end < 0 else s[:end]


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strnlen(s: str, maxlen: int) -> int:
    """Length of the string, but at most maxlen."""
    if maxlen < 0:
        raise ValueError("maxlen must not be negative")
    return min(strlen(s), maxlen)


def strcmp(a: str, b: str) -> int:
    """Compare two strings: -1, 0 or 1."""
    a, b = _terminated(a), _terminated(b)
    if a == b:
        return 0
    return -1 if a < b else 1


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; returns the code difference at the first mismatch."""
    a = _terminated(a) + _NUL
    b = _terminated(b) + _NUL
    for ca, cb in zip(a[: max(n, 0)], b[: max(n, 0)]):
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            return 0
    return 0


def strchr(s: str, c: str) -> int | None:
    """Index of the first occurrence of c; searching for NUL finds the terminator."""
    c = _single(c)
    s = _terminated(s)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Index of the last occurrence of c; searching for NUL finds the terminator."""
    c = _single(c)
    s = _terminated(s)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of needle; an empty needle is never found."""
    haystack, needle = _terminated(haystack), _terminated(needle)
    if not needle:
        return None
    index = haystack.find(needle)
    return None if index < 0 else index


def strcpy(src: str) -> str:
    """Copy of the string up to its terminator."""
    return _terminated(src)


def strncpy(src: str, n: int) -> str:
    """Exactly n characters: src truncated, or padded with NULs."""
    if n <= 0:
        return ""
    text = _terminated(src)[:n]
    return text + _NUL * (n - len(text))


def strncat(dest: str, src: str, n: int) -> str:
    """dest followed by at most n characters of src."""
    return _terminated(dest) + _terminated(src)[: max(n, 0)]


def memchr(buf: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Index of the first byte equal to c.

    The scan stops at the first zero byte, so a zero byte is never found;
    n does not limit the scan.
    """
    data = bytes(buf)
    end = data.find(0)
    if end >= 0:
        data = data[:end]
    index = data.find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int) -> int:
    """Compare n bytes; returns the byte difference at the first mismatch."""
    if n <= 0:
        return 0
    left, right = bytes(a), bytes(b)
    if n > len(left) or n > len(right):
        raise ValueError("n exceeds the length of a buffer")
    for x, y in zip(left[:n], right[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: bytearray, src: bytes | bytearray | memoryview, n: int) -> bytearray:
    """Copy n bytes of src into the start of dst and return dst."""
    if n <= 0:
        return dst
    data = bytes(src)
    if n > len(data) or n > len(dst):
        raise ValueError("n exceeds the length of a buffer")
    dst[:n] = data[:n]
    return dst


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Set the first n bytes of buf to c and return buf."""
    if n <= 0:
        return buf
    if n > len(buf):
        raise ValueError("n exceeds the length of the buffer")
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf and return buf."""
    return memset(buf, 0, n)


def _wrap(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _parse(text: str, bits: int) -> int:
    rest = _terminated(text).lstrip(" \t")
    negative = rest.startswith("-")
    if rest[:1] in ("-", "+"):
        rest = rest[1:]
    digits = _DIGITS.match(rest).group()
    value = int(digits) if digits else 0
    return _wrap(-value if negative else value, bits)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit int."""
    return _parse(text, INT_BITS)


def atol(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a 32-bit long."""
    return _parse(text, LONG_BITS)


def iabs(value: int) -> int:
    """Absolute value of an integer."""
    return -value if value < 0 else value