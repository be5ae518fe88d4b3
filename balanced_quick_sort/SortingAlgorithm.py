from collections.abc import Callable, Generator, Iterable, MutableSequence, Sequence
from itertools import permutations
from math import factorial, nan
from random import Random
from typing import Any, NamedTuple, Optional

from .Config import *


def _sampler(N: int, r: Optional[Random] = None) -> Generator[list[int], None, None]:
    r = Random() if r is None else r
    while True:
        yield [r.randrange(N * VALUE_RANGE_FACTOR) for _ in range(N)]


class SortingAlgorithm(NamedTuple):
    name: str
    func: Callable[[MutableSequence], Optional[Any]]
    max_N: int
    validator: Callable[[Sequence, Sequence, Optional[Any]], bool]
    metric_name: str
    metric: Callable[[Sequence, Optional[Any]], float] = lambda arr, ret: nan
    generator: Callable[[int], Iterable[Sequence[int]]] = lambda n: permutations(range(n))
    input_total: Callable[[int], int] = factorial
    sampler: Callable[[int, Optional[Random]], Generator[Sequence[int], None, None]] = _sampler
