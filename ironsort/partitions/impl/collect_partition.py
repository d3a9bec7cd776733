from collections import deque
from collections.abc import MutableSequence

from ...Ordering import Comparator
from ..PartitionScheme import PartitionScheme


def collect_partition(L: MutableSequence, lo: int, hi: int, cmp: Comparator) -> int:
    "Collect-and-swap: each element below the pivot fills the oldest still-open index"
    opened: deque[int] = deque()
    last_closed = lo
    for i in range(lo + 1, hi):
        opened.append(i)
        if cmp(L[i], L[lo]) < 0:
            to = opened.popleft()
            L[i], L[to] = L[to], L[i]
            last_closed = to
    L[lo], L[last_closed] = L[last_closed], L[lo]
    return last_closed


scheme = PartitionScheme("collect", collect_partition, extra_space="O(n)")
