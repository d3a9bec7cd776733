from collections.abc import Callable, MutableSequence, Sequence
from typing import NamedTuple

from ..Ordering import Comparator
from ..validate import is_partitioned

# (L, lo, hi, cmp) -> p, with the pivot already at L[lo] and hi - lo >= 2
PartitionFunc = Callable[[MutableSequence, int, int, Comparator], int]


class PartitionScheme(NamedTuple):
    name: str
    func: PartitionFunc
    extra_space: str = "O(1)"
    validator: Callable[[Sequence, int, int, int, Comparator], bool] = is_partitioned
