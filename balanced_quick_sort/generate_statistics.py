from decimal import Decimal
from itertools import product
from multiprocessing import Pool
from pathlib import Path
from random import Random
from time import thread_time
from typing import Optional

import numpy as np
import pandas as pd
from tqdm import tqdm

from . import partitioning
from .Config import *
from .sorting_algorithms import sorting_algorithms
from .SortingAlgorithm import SortingAlgorithm

RESULT_PATH = Path("logs/statistics.csv")
DEFAULT_NS = list(range(3, 10)) + list(range(10, 100, 10)) + list(range(100, 1000, 100))
CSV_HEADER = "name,N,input,best,worst,avg,metric,metric avg"


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str, val_array: list) -> None:
        super().__init__(f"Invalid sorting algorithm: `{name}` gave a rejected result for input {val_array}")


# copy from functools.cmp_to_key
# since member "obj" is not present in the documentation, it is not guaranteed to exist in the future
# fmt: off
def cmp_to_key(mycmp):
    """Convert a cmp= function into a key= function"""
    class K(object):
        __slots__ = ['obj']
        def __init__(self, obj):
            self.obj = obj
        def __lt__(self, other):
            return mycmp(self.obj, other.obj) < 0
        def __gt__(self, other):
            return mycmp(self.obj, other.obj) > 0
        def __eq__(self, other):
            return mycmp(self.obj, other.obj) == 0
        def __le__(self, other):
            return mycmp(self.obj, other.obj) <= 0
        def __ge__(self, other):
            return mycmp(self.obj, other.obj) >= 0
        __hash__ = None
    return K
# fmt: on


def to_displayable_int(x: int) -> str:
    return str(x) if x < 1e9 else f"{Decimal(x):.2e}"


def get_operation_cnt(algorithm: SortingAlgorithm, N: int, check_invariants: bool = False) -> tuple[int, int, float, float]:
    """Comparison counts (best, worst, average) and the average of the algorithm's metric.

    Every permutation of `range(N)` is tried when `N <= algorithm.max_N`,
    otherwise random inputs are drawn until `MAX_SAMPLE_TIME_MS` of CPU time
    is spent. Invariant scans are switched off by default so they are not
    counted as comparisons.
    """

    def cmp(x: int, y: int) -> int:
        nonlocal operation_cnt
        operation_cnt += 1
        return (x > y) - (x < y)

    key = cmp_to_key(cmp)

    do_sample = N > algorithm.max_N
    operation_cnts: list[int] = []
    metrics: list[float] = []
    if do_sample:
        start_time = thread_time()
    r = Random(SAMPLE_SEED)
    saved_check_invariants = partitioning.CHECK_INVARIANTS
    partitioning.CHECK_INVARIANTS = check_invariants
    try:
        for val_array in algorithm.sampler(N, r) if do_sample else algorithm.generator(N):
            arr = [key(x) for x in val_array]
            operation_cnt = 0
            ret = algorithm.func(arr)
            operation_cnts.append(operation_cnt)
            result = [x.obj for x in arr]
            if not algorithm.validator(val_array, result, ret):
                raise InvalidSortingAlgorithmError(algorithm.name, list(val_array))
            metrics.append(algorithm.metric(result, ret))
            if do_sample and int((thread_time() - start_time) * 1000) > MAX_SAMPLE_TIME_MS:
                break
    finally:
        partitioning.CHECK_INVARIANTS = saved_check_invariants

    data = np.array(operation_cnts, dtype=np.int64)
    return int(data.min()), int(data.max()), float(data.mean()), float(np.mean(metrics))


def _work(args: tuple[int, int]) -> str:
    algorithm_idx, N = args
    algorithm = sorting_algorithms[algorithm_idx]
    best, worst, avg, metric_avg = get_operation_cnt(algorithm, N)
    input_total = algorithm.input_total(N)
    return ",".join(map(str, (algorithm.name, N, to_displayable_int(input_total), best, worst, avg, algorithm.metric_name, metric_avg)))


def generate_statistics(result_path: Path = RESULT_PATH, Ns: Optional[list[int]] = None, processes: Optional[int] = None) -> None:
    Ns = DEFAULT_NS if Ns is None else Ns
    tasks = list(product(range(len(sorting_algorithms)), Ns))
    result_path.parent.mkdir(parents=True, exist_ok=True)
    with Pool(processes) as pool, open(result_path, "w") as f:
        f.write(CSV_HEADER + "\n")
        for result in tqdm(pool.imap_unordered(_work, tasks), total=len(tasks)):
            f.write(result + "\n")
            f.flush()
    tqdm.write(f"fin:  {len(tasks)} rows written to {result_path}")


def sort_result(result_path: Path = RESULT_PATH) -> pd.DataFrame:
    df = pd.read_csv(result_path)
    df = df.sort_values(["name", "N"])
    df.to_csv(result_path, index=False)
    for name, group in df.groupby("name"):
        group.drop(columns=["name"]).to_csv(result_path.parent / f"{name}.csv", index=False)
    return df


if __name__ == "__main__":
    generate_statistics()
    sort_result()
