from collections import Counter
from collections.abc import Sequence

from ..partitioning import is_partitioned, partition
from ..SortingAlgorithm import SortingAlgorithm


def validator(original: Sequence, arr: Sequence, ret: int) -> bool:
    return Counter(original) == Counter(arr) and is_partitioned(arr, ret)


def balance(arr: Sequence, ret: int) -> float:
    "Distance of the pivot from the middle, as a fraction of the length."
    return abs(ret - (len(arr) - 1) / 2) / len(arr)


algorithm = SortingAlgorithm(
    "balanced partition",
    partition,
    9,
    validator=validator,
    metric_name="pivot offset",
    metric=balance,
)
