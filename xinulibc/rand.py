"""Linear congruential pseudo-random numbers."""

from __future__ import annotations

RAND_MAX = 0x7FFF

_MULTIPLIER = 1103515245
_INCREMENT = 12345
_MASK32 = 0xFFFFFFFF


class Rand:
    """A generator with its own 32-bit state."""

    def __init__(self, seed: int = 1) -> None:
        self._state = seed & _MASK32

    def srand(self, seed: int) -> None:
        """Reset the state to seed."""
        self._state = seed & _MASK32

    def rand(self) -> int:
        """Advance the state and return a number in 0..RAND_MAX."""
        self._state = (self._state * _MULTIPLIER + _INCREMENT) & _MASK32
        return (self._state >> 16) & RAND_MAX


_default = Rand()


def srand(seed: int) -> None:
    """Seed the shared generator."""
    _default.srand(seed)


def rand() -> int:
    """Next number from the shared generator."""
    return _default.rand()