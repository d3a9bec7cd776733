import logging
from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import product
from math import factorial, log2, nan
from random import Random
from time import thread_time
from typing import Any, Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from .Config import *
from .Ordering import Comparator, natural_order
from .partitions import PartitionScheme, get_partition_scheme, partition_schemes
from .pivots import PivotPolicy, pivot_policies
from .quicksort import sort_by
from .validate import first_unsorted_index, is_permutation

log = logging.getLogger(__name__)

COLUMNS = ["name", "pivot", "kind", "N", "lower bound", "best", "worst", "avg", "ratio"]


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, msg: str) -> None:
        super().__init__("Invalid sorting algorithm: " + msg)


class InvalidPartitionError(Exception):
    def __init__(self, name: str, lo: int, hi: int, p: int) -> None:
        super().__init__(f"Invalid partition `{name}`: range [{lo}, {hi}) split at {p}")


def _random_sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    arr = list(range(N))
    while True:
        r.shuffle(arr)
        yield arr


def _sorted_sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    while True:
        yield list(range(N))


def _reversed_sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    while True:
        yield list(range(N - 1, -1, -1))


def _few_unique_sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    while True:
        yield [r.randrange(FEW_UNIQUE_VALUES) for _ in range(N)]


samplers: dict[str, Callable[[int, Random], Generator[list[int], None, None]]] = {
    "random": _random_sampler,
    "sorted": _sorted_sampler,
    "reversed": _reversed_sampler,
    "few_unique": _few_unique_sampler,
}

# deterministic inputs only need to be measured once
_DETERMINISTIC_KINDS = ("sorted", "reversed")


def checked_scheme(scheme: PartitionScheme, check_cmp: Comparator = natural_order) -> PartitionScheme:
    "Wrap `scheme` so every partition step is checked, by `check_cmp`, against its validator"

    def func(L: MutableSequence, lo: int, hi: int, cmp: Comparator) -> int:
        p = scheme.func(L, lo, hi, cmp)
        if not scheme.validator(L, lo, hi, p, check_cmp):
            raise InvalidPartitionError(scheme.name, lo, hi, p)
        return p

    return scheme._replace(func=func)


def count_comparisons(
    arr: Sequence,
    scheme: str | PartitionScheme = DEFAULT_PARTITION,
    pivot: str | PivotPolicy = DEFAULT_PIVOT,
    cmp: Comparator = natural_order,
) -> int:
    """Sort a copy of `arr` and return the number of comparisons it took.

    The result is checked to be ordered and a permutation of `arr`;
    `InvalidSortingAlgorithmError` is raised otherwise.
    """
    scheme = get_partition_scheme(scheme)
    operation_cnt = 0

    def counting_cmp(x: Any, y: Any) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return cmp(x, y)

    result = sort_by(list(arr), counting_cmp, partition=scheme, pivot=pivot)
    if (i := first_unsorted_index(result, cmp)) is not None:
        raise InvalidSortingAlgorithmError(f"`{scheme.name}` left {result[i]!r} before {result[i + 1]!r} at index {i}")
    if not is_permutation(result, arr):
        raise InvalidSortingAlgorithmError(f"`{scheme.name}` did not permute its input")
    return operation_cnt


def get_operation_cnts(
    scheme: str | PartitionScheme,
    pivot: str | PivotPolicy,
    N: int,
    kind: str = "random",
    samples: int = SAMPLES_PER_N,
    seed: int = SAMPLE_SEED,
) -> np.ndarray:
    if kind not in samplers:
        raise ValueError(f"Unknown input kind: {kind!r}, expected one of {sorted(samplers)}")
    if kind in _DETERMINISTIC_KINDS:
        samples = 1
    operation_cnts = []
    r = Random(seed)
    start_time = thread_time()
    for _, val_array in zip(range(samples), samplers[kind](N, r)):
        operation_cnts.append(count_comparisons(val_array, scheme, pivot))
        if int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
            log.debug("time budget exhausted after %d samples", len(operation_cnts))
            break
    return np.array(operation_cnts, dtype=np.int64)


def _pivot_name(pivot: str | PivotPolicy) -> str:
    return pivot if isinstance(pivot, str) else getattr(pivot, "__name__", repr(pivot))


def generate_statistics(
    Ns: Iterable[int],
    schemes: Optional[Iterable[str | PartitionScheme]] = None,
    pivots: Optional[Iterable[str | PivotPolicy]] = None,
    kinds: Iterable[str] = ("random",),
    samples: int = SAMPLES_PER_N,
    progress: bool = False,
) -> pd.DataFrame:
    schemes = [get_partition_scheme(s) for s in (partition_schemes if schemes is None else schemes)]
    pivots = list(pivot_policies if pivots is None else pivots)
    tasks = list(product(schemes, pivots, kinds, Ns))
    rows = []
    for scheme, pivot, kind, N in tqdm(tasks, disable=not progress):
        log.debug("init: `%s` / %s pivot / %s input with %d elements", scheme.name, _pivot_name(pivot), kind, N)
        data = get_operation_cnts(checked_scheme(scheme), pivot, N, kind, samples)
        lower_bound = log2(factorial(N)) if N > 1 else 0.0
        avg = float(data.mean())
        ratio = nan if lower_bound == 0 else avg / lower_bound
        rows.append((scheme.name, _pivot_name(pivot), kind, N, lower_bound, int(data.min()), int(data.max()), avg, ratio))
        log.debug("fin:  `%s` / %s pivot / %s input with %d elements", scheme.name, _pivot_name(pivot), kind, N)
    return pd.DataFrame(rows, columns=COLUMNS).sort_values(["name", "pivot", "kind", "N"], ignore_index=True)
