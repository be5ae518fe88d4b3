from collections.abc import MutableSequence
from typing import Optional

from .Config import *
from .PartitionState import PartitionState


class ShortSequenceError(Exception):
    def __init__(self, length: int) -> None:
        super().__init__(f"partition of short sequence (length {length})")


def _selection_sort(arr: MutableSequence, lo: int, hi: int) -> None:
    for i in range(lo, hi):
        k = i
        for j in range(i + 1, hi + 1):
            if arr[k] > arr[j]:
                k = j
        if k != i:
            arr[k], arr[i] = arr[i], arr[k]


def invariants_hold(arr: MutableSequence, state: PartitionState) -> bool:
    low_max, high_min = arr[state.low_max], arr[state.high_min]
    if not low_max <= high_min:
        return False
    return all(arr[i] <= low_max for i in range(state.lo, state.low + 1)) and all(arr[i] >= high_min for i in range(state.high, state.hi + 1))


def is_partitioned(arr: MutableSequence, p: int, lo: int = 0, hi: Optional[int] = None) -> bool:
    if hi is None:
        hi = len(arr) - 1
    if not lo <= p <= hi:
        return False
    pivot = arr[p]
    return all(arr[i] <= pivot for i in range(lo, p)) and all(arr[i] >= pivot for i in range(p + 1, hi + 1))


def partition(arr: MutableSequence, lo: int = 0, hi: Optional[int] = None) -> int:
    """Rearrange `arr[lo..hi]` (inclusive) around a pivot and return its index `p`.

    Afterwards every element in `lo..p` is `<= arr[p]` and every element in
    `p..hi` is `>= arr[p]`. Elements are moved by swaps only.

    While classifying the gap two elements at a time the sides are kept within
    one element of each other whenever the values allow it, so sorted and
    reverse-sorted ranges split near the middle.
    """
    if hi is None:
        hi = len(arr) - 1
    if hi - lo + 1 < 2:
        raise ShortSequenceError(max(0, hi - lo + 1))

    if arr[lo] > arr[hi]:
        arr[lo], arr[hi] = arr[hi], arr[lo]
    state = PartitionState(lo, hi)

    while state.gap > GAP_CUTOFF:
        if CHECK_INVARIANTS:
            assert invariants_hold(arr, state), state
        x, y = arr[state.low + 1], arr[state.high - 1]
        low_max, high_min = arr[state.low_max], arr[state.high_min]
        if x < low_max and y < low_max:
            state.place_low(arr)
        elif x > high_min and y > high_min:
            state.place_high(arr)
        elif state.nlow + 1 < state.nhigh and x <= high_min and y <= high_min:
            state.place_low(arr)
        elif state.nhigh + 1 < state.nlow and x >= low_max and y >= low_max:
            state.place_high(arr)
        else:
            state.split(arr)

    # What is left of the gap is small: sort it, then take its prefix that
    # still fits under high_min. The remainder is > high_min.
    _selection_sort(arr, state.low + 1, state.high - 1)
    while state.gap > 0 and arr[state.low + 1] <= arr[state.high_min]:
        state.extend_low(arr)
    state.high = state.low + 1
    if CHECK_INVARIANTS:
        assert invariants_hold(arr, state), state

    pivot = state.low
    arr[pivot], arr[state.low_max] = arr[state.low_max], arr[pivot]
    if CHECK_INVARIANTS:
        assert is_partitioned(arr, pivot, lo, hi), state
    return pivot
