"""In-place quicksort driven by a three-way comparison function."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any, TypeVar

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _rotate(items: MutableSequence[Any], i: int, j: int, k: int) -> None:
    # i takes k's value, k takes j's, j takes i's.
    items[i], items[k], items[j] = items[k], items[j], items[i]


def _sort_range(items: MutableSequence[Any], cmp: Comparator, low: int, high: int) -> None:
    while high - low > 1:
        lp = hp = low + (high - low) // 2
        i, j = low, high - 1
        while True:
            if i < lp:
                c = cmp(items[i], items[lp])
                if c == 0:
                    lp -= 1
                    _swap(items, i, lp)
                    continue
                if c < 0:
                    i += 1
                    continue

            advanced = False
            while j > hp:
                c = cmp(items[hp], items[j])
                if c == 0:
                    hp += 1
                    _swap(items, hp, j)
                    continue
                if c > 0:
                    if i == lp:
                        hp += 1
                        _rotate(items, i, hp, j)
                        lp += 1
                        i = lp
                        continue
                    _swap(items, i, j)
                    j -= 1
                    i += 1
                    advanced = True
                    break
                j -= 1
            if advanced:
                continue

            if i == lp:
                # Recurse into the smaller part, loop over the larger one.
                if lp - low >= high - hp:
                    _sort_range(items, cmp, hp + 1, high)
                    high = lp
                else:
                    _sort_range(items, cmp, low, lp)
                    low = hp + 1
                break

            lp -= 1
            _rotate(items, j, lp, i)
            hp -= 1
            j = hp


def qsort(items: MutableSequence[T], cmp: Callable[[T, T], int]) -> None:
    """Sort items in place.

    cmp(a, b) returns a negative number, zero or a positive number when a
    sorts before, together with or after b. The sort is not stable.
    """
    _sort_range(items, cmp, 0, len(items))