"""
Complexity benchmark for sorters

Counts comparisons on best-case (sorted) and worst-case (reversed) inputs at
several sizes, times random inputs, and fits the growth exponent of the
comparison counts on a log-log scale. For the quadratic sorts here the best
case should grow with exponent ~1 and the worst case with exponent ~2.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from sortlab.config import BenchmarkConfig
from sortlab.registry import Sorter
from sortlab.sorters import SortStats

logger = logging.getLogger(__name__)


@dataclass
class SizeMeasurement:
    """Measurements for a single input size"""

    size: int
    best_comparisons: int
    best_moves: int
    worst_comparisons: int
    worst_moves: int
    random_time_ms: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "best_comparisons": self.best_comparisons,
            "best_moves": self.best_moves,
            "worst_comparisons": self.worst_comparisons,
            "worst_moves": self.worst_moves,
            "random_time_ms": self.random_time_ms,
        }


@dataclass
class GrowthReport:
    """Per-size measurements and fitted growth exponents for one sorter"""

    algorithm: str
    measurements: list[SizeMeasurement] = field(default_factory=list)

    @property
    def sizes(self) -> list[int]:
        return [m.size for m in self.measurements]

    @property
    def best_case_exponent(self) -> float:
        return fit_exponent(self.sizes, [m.best_comparisons for m in self.measurements])

    @property
    def worst_case_exponent(self) -> float:
        return fit_exponent(self.sizes, [m.worst_comparisons for m in self.measurements])

    def to_dict(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "best_case_exponent": self.best_case_exponent,
            "worst_case_exponent": self.worst_case_exponent,
            "measurements": [m.to_dict() for m in self.measurements],
        }


def fit_exponent(sizes: list[int], counts: list[int]) -> float:
    """Slope of the least-squares line through (log size, log count)

    Returns NaN when fewer than two sizes have a positive count.
    """
    points = [(n, c) for n, c in zip(sizes, counts) if n > 0 and c > 0]
    if len(points) < 2:
        return float("nan")
    x = np.log(np.array([n for n, _ in points], dtype=float))
    y = np.log(np.array([c for _, c in points], dtype=float))
    slope, _intercept = np.polyfit(x, y, 1)
    return float(slope)


def _count(sorter: Sorter, data: list[int]) -> SortStats:
    stats = SortStats()
    sorter.sort(data, stats)
    return stats


def measure_growth(
    sorter: Sorter,
    sizes: list[int] | None = None,
    repeats: int = 3,
    random_seed: int | None = None,
) -> GrowthReport:
    """Measure how the work done by `sorter` grows with input size"""
    # Validated like a configured run; only a missing `sizes` falls back to the defaults
    if sizes is None:
        settings = BenchmarkConfig(repeats=repeats)
    else:
        settings = BenchmarkConfig(sizes=sizes, repeats=repeats)
    sizes = settings.sizes
    rng = np.random.default_rng(random_seed)
    algorithm = getattr(sorter, "name", sorter.__class__.__name__)
    report = GrowthReport(algorithm=algorithm)

    for size in sizes:
        best = _count(sorter, list(range(size)))
        worst = _count(sorter, list(range(size, 0, -1)))

        data = rng.integers(-10000, 10000, size=size).tolist()
        start = time.perf_counter()
        for _ in range(repeats):
            sorter.sort(list(data))
        elapsed = (time.perf_counter() - start) / repeats

        measurement = SizeMeasurement(
            size=size,
            best_comparisons=best.comparisons,
            best_moves=best.moves,
            worst_comparisons=worst.comparisons,
            worst_moves=worst.moves,
            random_time_ms=elapsed * 1000,
        )
        report.measurements.append(measurement)
        logger.debug(f"{algorithm} n={size}: {measurement.to_dict()}")

    logger.info(
        f"{algorithm}: best-case exponent {report.best_case_exponent:.2f}, "
        f"worst-case exponent {report.worst_case_exponent:.2f}"
    )
    return report


def run_benchmark(config: BenchmarkConfig, sorters: list[Sorter]) -> list[GrowthReport]:
    """Measure every sorter with the sizes and repeats from `config`"""
    return [
        measure_growth(
            sorter,
            sizes=config.sizes,
            repeats=config.repeats,
            random_seed=config.random_seed,
        )
        for sorter in sorters
    ]
