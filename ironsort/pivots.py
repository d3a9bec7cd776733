from collections.abc import Callable

PivotPolicy = Callable[[int, int], int]


def first_pivot(lo: int, hi: int) -> int:
    return lo


def middle_pivot(lo: int, hi: int) -> int:
    return (hi - lo) // 2 + lo


pivot_policies: dict[str, PivotPolicy] = {
    "first": first_pivot,
    "middle": middle_pivot,
}


def get_pivot_policy(pivot: str | PivotPolicy) -> PivotPolicy:
    if callable(pivot):
        return pivot
    try:
        return pivot_policies[pivot]
    except KeyError:
        raise ValueError(f"Unknown pivot policy: {pivot!r}, expected one of {sorted(pivot_policies)}") from None
