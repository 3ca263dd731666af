"""
In-place comparison sorts

Both sorters mutate the sequence they are given and return that same object,
so calls can be chained. An element only moves past a neighbour that is
strictly greater, which keeps equal elements in their original order.
"""

from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Protocol, TypeVar

from sortlab.registry import register_sorter


class Comparable(Protocol):
    """Anything with a total order"""

    def __lt__(self, other: Any) -> bool: ...

    def __gt__(self, other: Any) -> bool: ...


T = TypeVar("T", bound=Comparable)


@dataclass
class SortStats:
    """Work counters for a single sort call, owned by the caller"""

    comparisons: int = 0
    swaps: int = 0  # Bubble sort
    shifts: int = 0  # Insertion sort
    passes: int = 0  # Bubble sort

    @property
    def moves(self) -> int:
        return self.swaps + self.shifts

    def to_dict(self) -> dict[str, int]:
        return {
            "comparisons": self.comparisons,
            "swaps": self.swaps,
            "shifts": self.shifts,
            "passes": self.passes,
        }


@register_sorter("bubble")
class BubbleSorter:
    """Repeated adjacent compare-and-swap with early exit

    A pass that swaps nothing proves the sequence is sorted, so sorted input
    costs a single pass of n - 1 comparisons. Reverse-sorted input is the
    O(n^2) worst case.
    """

    name = "bubble"

    def sort(self, seq: MutableSequence[T], stats: SortStats | None = None) -> MutableSequence[T]:
        n = len(seq)
        if n < 2:
            return seq

        swapped = True
        while swapped:
            swapped = False
            if stats is not None:
                stats.passes += 1

            for i in range(n - 1):
                if stats is not None:
                    stats.comparisons += 1
                if seq[i] > seq[i + 1]:
                    seq[i], seq[i + 1] = seq[i + 1], seq[i]
                    swapped = True
                    if stats is not None:
                        stats.swaps += 1

        return seq


@register_sorter("insertion")
class InsertionSorter:
    """Grow a sorted prefix by shifting larger elements right

    Invariant: before iteration i, seq[0:i] is sorted. Sorted input needs one
    comparison per element; reverse-sorted input shifts the whole prefix on
    every iteration.
    """

    name = "insertion"

    def sort(self, seq: MutableSequence[T], stats: SortStats | None = None) -> MutableSequence[T]:
        for i in range(1, len(seq)):
            key = seq[i]
            j = i - 1

            while j >= 0:
                if stats is not None:
                    stats.comparisons += 1
                if not seq[j] > key:
                    break
                seq[j + 1] = seq[j]
                j -= 1
                if stats is not None:
                    stats.shifts += 1

            seq[j + 1] = key

        return seq


def bubble_sort(seq: MutableSequence[T]) -> MutableSequence[T]:
    """Sort `seq` in place with bubble sort and return it"""
    return BubbleSorter().sort(seq)


def insertion_sort(seq: MutableSequence[T]) -> MutableSequence[T]:
    """Sort `seq` in place with insertion sort and return it"""
    return InsertionSorter().sort(seq)
