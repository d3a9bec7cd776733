"""
Checks for sorting and partitioning results.

None of these run inside `sort` / `sort_by`: a comparator is trusted to be a
strict weak ordering, and checking it would cost more than the sort itself.
They are used by the statistics harness and the tests.
"""
from collections import Counter
from collections.abc import Iterable, Sequence
from typing import Optional

from .Ordering import Comparator, natural_order


def first_unsorted_index(arr: Sequence, cmp: Comparator = natural_order) -> Optional[int]:
    "Index `i` of the first pair with `arr[i] > arr[i + 1]`, or None"
    for i in range(len(arr) - 1):
        if cmp(arr[i], arr[i + 1]) > 0:
            return i
    return None


def is_sorted(arr: Sequence, cmp: Comparator = natural_order) -> bool:
    return first_unsorted_index(arr, cmp) is None


def is_permutation(a: Iterable, b: Iterable) -> bool:
    return Counter(a) == Counter(b)


def is_partitioned(L: Sequence, lo: int, hi: int, p: int, cmp: Comparator = natural_order) -> bool:
    if not lo <= p < hi:
        return False
    pivot = L[p]
    return all(cmp(L[j], pivot) <= 0 for j in range(lo, p)) and all(cmp(L[j], pivot) >= 0 for j in range(p + 1, hi))
