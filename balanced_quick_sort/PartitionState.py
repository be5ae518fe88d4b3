from collections.abc import MutableSequence


class PartitionState:
    """Bookkeeping for one partition call over the inclusive range `lo..hi`.

    `lo..low` is the low side, `high..hi` the high side, everything strictly
    between them is the unclassified gap. `low_max` / `high_min` index the
    largest low value and the smallest high value seen so far.
    """

    def __init__(self, lo: int, hi: int) -> None:
        self.lo = lo
        self.hi = hi
        self.low = lo
        self.high = hi
        self.low_max = lo
        self.high_min = hi

    @property
    def nlow(self) -> int:
        return self.low - self.lo + 1

    @property
    def nhigh(self) -> int:
        return self.hi - self.high + 1

    @property
    def gap(self) -> int:
        return self.high - self.low - 1

    def extend_low(self, arr: MutableSequence) -> None:
        "Move the boundary of the low side over the next gap element."
        self.low += 1
        if arr[self.low] > arr[self.low_max]:
            self.low_max = self.low

    def extend_high(self, arr: MutableSequence) -> None:
        self.high -= 1
        if arr[self.high] < arr[self.high_min]:
            self.high_min = self.high

    def place_low(self, arr: MutableSequence) -> None:
        "Put both gap elements `low + 1` and `high - 1` on the low side."
        i, j = self.low + 2, self.high - 1
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
        self.extend_low(arr)
        self.extend_low(arr)

    def place_high(self, arr: MutableSequence) -> None:
        "Put both gap elements `low + 1` and `high - 1` on the high side."
        i, j = self.low + 1, self.high - 2
        if i < j:
            arr[i], arr[j] = arr[j], arr[i]
        self.extend_high(arr)
        self.extend_high(arr)

    def split(self, arr: MutableSequence) -> None:
        "The smaller gap element joins the low side, the larger the high side."
        i, j = self.low + 1, self.high - 1
        if arr[i] > arr[j]:
            arr[i], arr[j] = arr[j], arr[i]
        self.extend_low(arr)
        self.extend_high(arr)

    def __repr__(self) -> str:
        return f"PartitionState(lo={self.lo}, hi={self.hi}, low={self.low}, high={self.high}, low_max={self.low_max}, high_min={self.high_min})"

    __slots__ = ["lo", "hi", "low", "high", "low_max", "high_min"]
