import multiprocessing
import runpy
from math import isnan

import pandas as pd
import pytest

from balanced_quick_sort import generate_statistics, partitioning
from balanced_quick_sort.generate_statistics import InvalidSortingAlgorithmError, get_operation_cnt, sort_result, to_displayable_int
from balanced_quick_sort.impl.balanced_quick_sort import validator as sorted_validator
from balanced_quick_sort.sorting_algorithms import sorting_algorithms
from balanced_quick_sort.SortingAlgorithm import SortingAlgorithm


def test_registry():
    assert [algorithm.name for algorithm in sorting_algorithms] == ["balanced partition", "balanced quick sort"]


@pytest.mark.parametrize("algorithm", sorting_algorithms, ids=lambda a: a.name)
def test_exhaustive_operation_cnt(algorithm):
    best, worst, avg, metric_avg = get_operation_cnt(algorithm, 5)
    assert 0 < best <= avg <= worst
    assert not isnan(metric_avg)


def test_partition_operation_cnt_is_linear():
    partition_algorithm = sorting_algorithms[0]
    _, worst, _, _ = get_operation_cnt(partition_algorithm, 8)
    assert worst < 8 * 8


@pytest.mark.parametrize("algorithm", sorting_algorithms, ids=lambda a: a.name)
def test_sampled_operation_cnt(algorithm, monkeypatch):
    monkeypatch.setattr(generate_statistics, "MAX_SAMPLE_TIME_MS", 50)
    best, worst, avg, metric_avg = get_operation_cnt(algorithm, 60)
    assert best <= avg <= worst
    assert metric_avg >= 0


def test_invariant_checks_are_restored():
    get_operation_cnt(sorting_algorithms[1], 4)
    assert partitioning.CHECK_INVARIANTS is True


@pytest.mark.parametrize("algorithm", sorting_algorithms, ids=lambda a: a.name)
def test_operation_cnt_with_invariant_checks(algorithm, monkeypatch):
    monkeypatch.setattr(partitioning, "CHECK_INVARIANTS", False)
    best, worst, avg, metric_avg = get_operation_cnt(algorithm, 6)
    checked = get_operation_cnt(algorithm, 6, check_invariants=True)
    assert checked[0] >= best
    assert checked[1] > worst
    assert checked[3] == metric_avg
    assert partitioning.CHECK_INVARIANTS is False


def test_invalid_algorithm():
    broken = SortingAlgorithm("broken", lambda arr: None, 4, validator=sorted_validator, metric_name="none")
    with pytest.raises(InvalidSortingAlgorithmError, match="broken"):
        get_operation_cnt(broken, 3)


def test_to_displayable_int():
    assert to_displayable_int(120) == "120"
    assert to_displayable_int(10**12) == "1.00e+12"


def test_generate_statistics(tmp_path, monkeypatch):
    monkeypatch.setattr(generate_statistics, "MAX_SAMPLE_TIME_MS", 50)
    result_path = tmp_path / "logs" / "statistics.csv"
    generate_statistics.generate_statistics(result_path, Ns=[3, 4, 12], processes=1)
    df = sort_result(result_path)
    assert len(df) == 6
    assert list(df.columns) == ["name", "N", "input", "best", "worst", "avg", "metric", "metric avg"]
    assert list(df["name"]) == ["balanced partition"] * 3 + ["balanced quick sort"] * 3
    assert (tmp_path / "logs" / "balanced quick sort.csv").exists()
    per_algorithm = pd.read_csv(tmp_path / "logs" / "balanced partition.csv")
    assert list(per_algorithm["N"]) == [3, 4, 12]


class _RowPool:
    def __init__(self, processes=None) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, *exc) -> None:
        return None

    def imap_unordered(self, func, tasks):
        for algorithm_idx, N in tasks:
            yield f"{sorting_algorithms[algorithm_idx].name},{N},1,1,1,1.0,metric,0.0"


@pytest.mark.filterwarnings("ignore::RuntimeWarning")
def test_run_as_module(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(multiprocessing, "Pool", _RowPool)
    runpy.run_module("balanced_quick_sort.generate_statistics", run_name="__main__")
    df = pd.read_csv(tmp_path / "logs" / "statistics.csv")
    assert len(df) == 2 * len(generate_statistics.DEFAULT_NS)
    assert list(df["N"]) == sorted(generate_statistics.DEFAULT_NS) * 2
    assert (tmp_path / "logs" / "balanced partition.csv").exists()
    assert (tmp_path / "logs" / "balanced quick sort.csv").exists()
