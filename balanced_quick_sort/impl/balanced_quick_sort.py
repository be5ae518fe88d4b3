from collections.abc import Sequence

from ..SortingAlgorithm import SortingAlgorithm
from ..sorting import quick_sort_depth


def validator(original: Sequence, arr: Sequence, _) -> bool:
    return list(arr) == sorted(original)


algorithm = SortingAlgorithm(
    "balanced quick sort",
    quick_sort_depth,
    8,
    validator=validator,
    metric_name="depth",
    metric=lambda arr, depth: depth,
)
