"""
sortlab: in-place bubble sort and insertion sort, with property verification
"""

from sortlab._version import __version__
from sortlab.benchmark import GrowthReport, measure_growth
from sortlab.config import BenchmarkConfig, Config, DemoConfig, VerifyConfig, load_config
from sortlab.registry import Sorter, available_sorters, get_sorter, register_sorter
from sortlab.sorters import (
    BubbleSorter,
    Comparable,
    InsertionSorter,
    SortStats,
    bubble_sort,
    insertion_sort,
)
from sortlab.verification import PropertyResult, RankedItem, SortVerifier

__all__ = [
    "__version__",
    # Sorters
    "BubbleSorter",
    "InsertionSorter",
    "SortStats",
    "Comparable",
    "bubble_sort",
    "insertion_sort",
    # Registry
    "Sorter",
    "register_sorter",
    "get_sorter",
    "available_sorters",
    # Verification and measurement
    "SortVerifier",
    "PropertyResult",
    "RankedItem",
    "measure_growth",
    "GrowthReport",
    # Configuration
    "Config",
    "DemoConfig",
    "VerifyConfig",
    "BenchmarkConfig",
    "load_config",
]
