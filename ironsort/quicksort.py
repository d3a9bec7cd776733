"""
In-place quicksort over any mutable sequence.

The range being sorted is half-open, `[lo, hi)`. Each step moves the pivot
to `lo`, partitions the range around it, then recurses into the smaller side
and loops on the larger one, so the stack never grows beyond O(log n) even
when partitions are unbalanced. The number of comparisons still degrades to
O(n^2) on adversarial input (sorted input with the "first" pivot policy).

No stability: equal elements may end up in any relative order.
"""
from collections.abc import MutableSequence
from typing import TypeVar

from .Config import *
from .Ordering import Comparator, natural_order
from .partitions import PartitionScheme, get_partition_scheme
from .pivots import PivotPolicy, get_pivot_policy

S = TypeVar("S", bound=MutableSequence)


def sort_by(
    arr: S,
    cmp: Comparator,
    *,
    partition: str | PartitionScheme = DEFAULT_PARTITION,
    pivot: str | PivotPolicy = DEFAULT_PIVOT,
) -> S:
    """Sort `arr` in place by `cmp` and return it.

    `cmp(a, b)` must be negative, zero or positive when `a` sorts before, with
    or after `b`, and must be a strict weak ordering. A comparator that is not
    one leaves `arr` as a permutation of its input in unspecified order.
    """
    partition_func = get_partition_scheme(partition).func
    choose_pivot = get_pivot_policy(pivot)

    def impl(L: MutableSequence, lo: int, hi: int) -> None:
        while hi - lo > 1:
            k = choose_pivot(lo, hi)
            if k != lo:
                L[lo], L[k] = L[k], L[lo]
            p = partition_func(L, lo, hi, cmp)
            if p - lo < hi - p - 1:
                impl(L, lo, p)
                lo = p + 1
            else:
                impl(L, p + 1, hi)
                hi = p

    impl(arr, 0, len(arr))
    return arr


def sort(
    arr: S,
    *,
    partition: str | PartitionScheme = DEFAULT_PARTITION,
    pivot: str | PivotPolicy = DEFAULT_PIVOT,
) -> S:
    "Sort `arr` in place into non-decreasing natural order and return it."
    return sort_by(arr, natural_order, partition=partition, pivot=pivot)


quicksort = sort
