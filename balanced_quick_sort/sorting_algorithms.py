from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("*.py")):
    module = import_module(f".{file.stem}", package="balanced_quick_sort.impl")
    sorting_algorithms.append(module.algorithm)
