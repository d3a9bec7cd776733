from importlib import import_module
from pathlib import Path

from .PartitionScheme import PartitionScheme

partition_schemes: list[PartitionScheme] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    if file.stem.startswith("_"):
        continue
    module = import_module(f".{file.stem}", package="ironsort.partitions.impl")
    partition_schemes.append(module.scheme)


def get_partition_scheme(partition: str | PartitionScheme) -> PartitionScheme:
    if isinstance(partition, PartitionScheme):
        return partition
    for scheme in partition_schemes:
        if scheme.name == partition:
            return scheme
    raise ValueError(f"Unknown partition scheme: {partition!r}, expected one of {[scheme.name for scheme in partition_schemes]}")
