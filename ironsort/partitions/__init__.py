from .partition_schemes import get_partition_scheme, partition_schemes
from .PartitionScheme import PartitionFunc, PartitionScheme
