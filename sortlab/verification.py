"""
Property-based verification of sorters

Instead of checking a handful of expected outputs, the verifier actively tries
to break a sorter: boundary inputs, the known scenarios, random inputs with
awkward shapes, duplicate-ranked items for stability, and re-sorting sorted
output for idempotence. A sorter passes only if it survives every attempt.
"""

import logging
import time
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from sortlab.config import VerifyConfig
from sortlab.registry import Sorter
from sortlab.sorters import SortStats

logger = logging.getLogger(__name__)

# (name, input, expected) scenarios every sorter must reproduce
KNOWN_SCENARIOS: list[tuple[str, list[int], list[int]]] = [
    ("six_mixed", [5, 3, 6, 4, 7, 2], [2, 3, 4, 5, 6, 7]),
    ("five_mixed", [3, 6, 4, 7, 2], [2, 3, 4, 6, 7]),
    ("already_sorted", [1, 2, 3, 4, 5], [1, 2, 3, 4, 5]),
    ("reversed", [5, 4, 3, 2, 1], [1, 2, 3, 4, 5]),
]


@dataclass(frozen=True)
class RankedItem:
    """An element ordered by `rank` alone; `label` tells equal ranks apart

    Equality and hashing still use both fields, so multiset checks can tell
    two items of the same rank apart.
    """

    rank: int
    label: int

    def __lt__(self, other: "RankedItem") -> bool:
        return self.rank < other.rank

    def __le__(self, other: "RankedItem") -> bool:
        return self.rank <= other.rank

    def __gt__(self, other: "RankedItem") -> bool:
        return self.rank > other.rank

    def __ge__(self, other: "RankedItem") -> bool:
        return self.rank >= other.rank


@dataclass
class PropertyResult:
    """Result of checking one property against one input"""

    passed: bool
    property_name: str
    input_repr: str | None = None
    error_message: str | None = None
    execution_time: float = 0.0
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "property_name": self.property_name,
            "input_repr": self.input_repr,
            "error_message": self.error_message,
            "execution_time": self.execution_time,
            "metadata": self.metadata,
        }


def is_sorted(seq: Sequence[Any]) -> bool:
    """True if no adjacent pair is out of order"""
    return not any(seq[i] > seq[i + 1] for i in range(len(seq) - 1))


def is_permutation(before: Sequence[Any], after: Sequence[Any]) -> bool:
    """True if both sequences hold the same multiset of elements"""
    if len(before) != len(after):
        return False
    try:
        return Counter(before) == Counter(after)
    except TypeError:
        # Unhashable elements: match each one off by equality
        remaining = list(after)
        for item in before:
            for idx, candidate in enumerate(remaining):
                if candidate == item:
                    del remaining[idx]
                    break
            else:
                return False
        return True


def is_stable(before: Sequence[RankedItem], after: Sequence[RankedItem]) -> bool:
    """True if equal ranks appear in `after` in the same label order as in `before`"""
    order_before: dict[int, list[int]] = {}
    order_after: dict[int, list[int]] = {}
    for item in before:
        order_before.setdefault(item.rank, []).append(item.label)
    for item in after:
        order_after.setdefault(item.rank, []).append(item.label)
    return order_before == order_after


def _short_repr(value: Sequence[Any], limit: int = 200) -> str:
    text = repr(list(value))
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


class SortVerifier:
    """
    Tries to falsify a sorter against the sorting properties.

    Phases:
    1. Boundary: empty and single-element inputs stay unchanged, no comparisons
    2. Known scenarios: fixed inputs with known sorted output
    3. Random trials: permutation and sortedness on generated integer inputs
    4. Stability: duplicate-ranked items keep their relative order
    5. Idempotence: sorting sorted output changes nothing and moves nothing
    """

    def __init__(self, config: VerifyConfig | None = None):
        self.config = config or VerifyConfig()
        self.rng = np.random.default_rng(self.config.random_seed)

    def verify(self, sorter: Sorter) -> tuple[bool, list[PropertyResult]]:
        """
        Run every phase against `sorter`.

        Returns:
            Tuple of (passed_all_checks, list_of_results)
        """
        name = getattr(sorter, "name", sorter.__class__.__name__)
        logger.info(f"Verifying sorter '{name}'")

        results: list[PropertyResult] = []
        checks = [
            self._boundary_checks,
            self._scenario_checks,
            self._random_checks,
        ]
        if self.config.check_stability:
            checks.append(self._stability_checks)
        if self.config.check_idempotence:
            checks.append(self._idempotence_checks)

        for check in checks:
            for result in check(sorter):
                results.append(result)
                if not result.passed:
                    logger.info(
                        f"Sorter '{name}' FAILED {result.property_name}: {result.error_message}"
                    )
                    if self.config.stop_on_failure:
                        return False, results

        passed = all(result.passed for result in results)
        if passed:
            logger.info(f"Sorter '{name}' passed all {len(results)} checks")
        return passed, results

    def _run(
        self, sorter: Sorter, data: list[Any]
    ) -> tuple[list[Any] | None, SortStats, str | None, float]:
        """Sort a copy of `data`, capturing the outcome instead of raising"""
        work = list(data)
        stats = SortStats()
        start_time = time.perf_counter()
        try:
            returned = sorter.sort(work, stats)
        except Exception as e:
            return None, stats, f"{type(e).__name__}: {e}", time.perf_counter() - start_time
        elapsed = time.perf_counter() - start_time

        if returned is not work:
            return None, stats, "sort did not return the sequence it was given", elapsed
        return work, stats, None, elapsed

    def _check_sorted_permutation(
        self, sorter: Sorter, property_name: str, data: list[Any]
    ) -> PropertyResult:
        after, stats, error, elapsed = self._run(sorter, data)
        error = error or self._sorted_permutation_error(data, after)
        return PropertyResult(
            passed=error is None,
            property_name=property_name,
            input_repr=_short_repr(data),
            error_message=error,
            execution_time=elapsed,
            metadata={"size": len(data), "stats": stats.to_dict()},
        )

    def _sorted_permutation_error(self, before: list[Any], after: list[Any]) -> str | None:
        if len(after) != len(before):
            return f"length changed from {len(before)} to {len(after)}"
        if not is_permutation(before, after):
            return f"output is not a permutation of the input: {_short_repr(after)}"
        if not is_sorted(after):
            return f"output is not sorted: {_short_repr(after)}"
        return None

    def _boundary_checks(self, sorter: Sorter) -> list[PropertyResult]:
        results = []
        for data in ([], [42]):
            after, stats, error, elapsed = self._run(sorter, data)
            if error is None and after != data:
                error = f"expected {data} unchanged, got {after}"
            if error is None and stats.comparisons:
                error = f"expected no comparisons, counted {stats.comparisons}"
            results.append(
                PropertyResult(
                    passed=error is None,
                    property_name="boundary",
                    input_repr=repr(data),
                    error_message=error,
                    execution_time=elapsed,
                    metadata={"stats": stats.to_dict()},
                )
            )
        return results

    def _scenario_checks(self, sorter: Sorter) -> list[PropertyResult]:
        results = []
        for scenario, data, expected in KNOWN_SCENARIOS:
            after, stats, error, elapsed = self._run(sorter, data)
            if error is None and after != expected:
                error = f"expected {expected}, got {after}"
            results.append(
                PropertyResult(
                    passed=error is None,
                    property_name="scenario",
                    input_repr=repr(data),
                    error_message=error,
                    execution_time=elapsed,
                    metadata={"scenario": scenario, "stats": stats.to_dict()},
                )
            )
        return results

    def _edge_inputs(self) -> list[tuple[str, list[int]]]:
        """Deterministic awkward shapes"""
        size = max(2, min(self.config.max_size, 32))
        return [
            ("two_elements", [2, 1]),
            ("all_same", [7] * size),
            ("ascending", list(range(size))),
            ("descending", list(range(size, 0, -1))),
            ("negative", list(range(-1, -size - 1, -1))),
            ("alternating", [(-1) ** i * i for i in range(size)]),
        ]

    def _random_input(self) -> list[int]:
        size = int(self.rng.integers(0, self.config.max_size + 1))
        values = self.rng.integers(
            self.config.min_value, self.config.max_value, size=size, endpoint=True
        )
        return values.tolist()

    def _random_checks(self, sorter: Sorter) -> list[PropertyResult]:
        results = []
        for shape, data in self._edge_inputs():
            result = self._check_sorted_permutation(sorter, "permutation_sorted", data)
            result.metadata["shape"] = shape
            results.append(result)

        for trial in range(self.config.num_trials):
            result = self._check_sorted_permutation(
                sorter, "permutation_sorted", self._random_input()
            )
            result.metadata["trial"] = trial
            results.append(result)
        return results

    def _stability_checks(self, sorter: Sorter) -> list[PropertyResult]:
        results = []
        size = max(2, self.config.max_size)
        for trial in range(max(1, self.config.num_trials // 10)):
            ranks = self.rng.integers(0, self.config.duplicate_ranks, size=size)
            data = [RankedItem(int(rank), label) for label, rank in enumerate(ranks)]

            after, stats, error, elapsed = self._run(sorter, data)
            error = error or self._sorted_permutation_error(data, after)
            if error is None and not is_stable(data, after):
                error = "equal ranks changed relative order"
            results.append(
                PropertyResult(
                    passed=error is None,
                    property_name="stability",
                    input_repr=_short_repr([(item.rank, item.label) for item in data]),
                    error_message=error,
                    execution_time=elapsed,
                    metadata={"trial": trial, "stats": stats.to_dict()},
                )
            )
        return results

    def _idempotence_checks(self, sorter: Sorter) -> list[PropertyResult]:
        results = []
        inputs = [data for _, data, _ in KNOWN_SCENARIOS]
        # Equal neighbours must not be swapped when re-sorting
        inputs.append([2, 1, 2, 1, 2])
        inputs.append(self._random_input())

        for data in inputs:
            first, _, error, _ = self._run(sorter, data)
            stats = SortStats()
            elapsed = 0.0
            if error is None:
                second, stats, error, elapsed = self._run(sorter, first)
                if error is None and second != first:
                    error = f"re-sorting changed {first} into {second}"
                if error is None and stats.moves:
                    error = f"re-sorting sorted input moved elements {stats.moves} times"
                if error is None and len(first) > 1 and stats.passes > 1:
                    error = f"re-sorting sorted input took {stats.passes} passes"
            results.append(
                PropertyResult(
                    passed=error is None,
                    property_name="idempotence",
                    input_repr=_short_repr(data),
                    error_message=error,
                    execution_time=elapsed,
                    metadata={"stats": stats.to_dict()},
                )
            )
        return results


def verify_sorters(
    sorters: list[Sorter], config: VerifyConfig | None = None
) -> dict[str, tuple[bool, list[PropertyResult]]]:
    """Verify several sorters with one shared configuration"""
    verifier = SortVerifier(config)
    report = {}
    for sorter in sorters:
        name = getattr(sorter, "name", sorter.__class__.__name__)
        report[name] = verifier.verify(sorter)
    return report
