"""
Before/after demonstration: sort a short list of random integers
"""

import logging
from dataclasses import dataclass, field

import numpy as np

from sortlab.config import DemoConfig
from sortlab.registry import Sorter, get_sorter
from sortlab.sorters import SortStats

logger = logging.getLogger(__name__)


@dataclass
class DemoResult:
    algorithm: str
    before: list[int]
    after: list[int]
    stats: SortStats = field(default_factory=SortStats)

    def format(self) -> str:
        return "\n".join(
            [
                "Before sorting: " + ", ".join(str(v) for v in self.before),
                "After sorting:  " + ", ".join(str(v) for v in self.after),
            ]
        )


def random_integers(size: int, low: int, high: int, random_seed: int | None = None) -> list[int]:
    """`size` integers drawn uniformly from [low, high]"""
    rng = np.random.default_rng(random_seed)
    return rng.integers(low, high, size=size, endpoint=True).tolist()


def run_demo(config: DemoConfig, sorter: Sorter | None = None) -> DemoResult:
    """Sort a copy of a random list so the original order can still be shown"""
    sorter = sorter or get_sorter(config.algorithm)
    before = random_integers(config.size, config.low, config.high, config.random_seed)

    stats = SortStats()
    after = list(sorter.sort(list(before), stats))

    algorithm = getattr(sorter, "name", sorter.__class__.__name__)
    logger.info(
        f"Sorted {len(before)} values with {algorithm}: "
        f"{stats.comparisons} comparisons, {stats.moves} moves"
    )
    return DemoResult(algorithm=algorithm, before=before, after=after, stats=stats)
