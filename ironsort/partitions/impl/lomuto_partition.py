from collections.abc import MutableSequence

from ...Ordering import Comparator
from ..PartitionScheme import PartitionScheme


def lomuto_partition(L: MutableSequence, lo: int, hi: int, cmp: Comparator) -> int:
    pivot = L[lo]
    i = lo + 1
    for j in range(lo + 1, hi):
        if cmp(L[j], pivot) < 0:
            L[i], L[j] = L[j], L[i]
            i += 1
    L[lo], L[i - 1] = L[i - 1], L[lo]
    return i - 1


scheme = PartitionScheme("lomuto", lomuto_partition)
