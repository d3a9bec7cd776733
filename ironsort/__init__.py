"Quicksort is an efficient in-place sorting algorithm created by Tony Hoare."
from .Ordering import Comparator, Ordering, natural_order, reverse_order
from .partitions import PartitionScheme, get_partition_scheme, partition_schemes
from .pivots import first_pivot, get_pivot_policy, middle_pivot, pivot_policies
from .quicksort import quicksort, sort, sort_by
from .validate import first_unsorted_index, is_partitioned, is_permutation, is_sorted
