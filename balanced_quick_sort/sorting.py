from collections.abc import MutableSequence

from .partitioning import partition


def quick_sort_depth(arr: MutableSequence) -> int:
    """Sort `arr` in place and return how many levels of partitioning it took.

    Pending ranges live on an explicit stack instead of the call stack. The
    larger half is pushed first so the stack stays logarithmic.
    """
    depth = 0
    stack = [(0, len(arr) - 1, 1)]
    while stack:
        lo, hi, level = stack.pop()
        if lo >= hi:
            continue
        depth = max(depth, level)
        p = partition(arr, lo, hi)
        front, back = (lo, p - 1, level + 1), (p + 1, hi, level + 1)
        if p - lo < hi - p:
            stack.append(back)
            stack.append(front)
        else:
            stack.append(front)
            stack.append(back)
    return depth


def quick_sort(arr: MutableSequence) -> None:
    quick_sort_depth(arr)


sort = quick_sort
