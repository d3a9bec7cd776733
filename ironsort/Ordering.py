from collections.abc import Callable
from enum import IntEnum
from typing import Any, TypeVar

T = TypeVar("T")


class Ordering(IntEnum):
    "Result of a three-way comparison, compatible with `functools.cmp_to_key` style ints"

    LESS = -1
    EQUAL = 0
    GREATER = 1


Comparator = Callable[[T, T], int]


def natural_order(a: Any, b: Any) -> Ordering:
    if a < b:
        return Ordering.LESS
    if b < a:
        return Ordering.GREATER
    # also covers incomparable pairs such as NaN
    return Ordering.EQUAL


def reverse_order(cmp: Comparator = natural_order) -> Comparator:
    def reversed_cmp(a: Any, b: Any) -> int:
        return cmp(b, a)

    return reversed_cmp
