from collections.abc import MutableSequence

from ...Ordering import Comparator
from ..PartitionScheme import PartitionScheme


def hoare_partition(L: MutableSequence, lo: int, hi: int, cmp: Comparator) -> int:
    pivot = L[lo]
    i = lo + 1
    j = hi - 1
    while True:
        while i <= j and cmp(L[i], pivot) <= 0:
            i += 1
        while i <= j and cmp(L[j], pivot) > 0:
            j -= 1
        if i >= j:
            break
        L[i], L[j] = L[j], L[i]
        i += 1
        j -= 1
    # cursors crossed: j is the last element not greater than the pivot
    L[lo], L[j] = L[j], L[lo]
    return j


scheme = PartitionScheme("hoare", hoare_partition)
