"""
Bubble sort engine for small integer sequences.
Sorts in place using repeated linear passes until a pass makes no swaps.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


class SortState(Enum):
    """States of the sort loop"""
    SCANNING = "scanning"
    SORTED = "sorted"


@dataclass
class SortStats:
    """Counters collected during one sort call"""
    passes: int = 0
    comparisons: int = 0
    swaps: int = 0
    state: SortState = SortState.SCANNING


def is_sorted(sequence: Sequence[int]) -> bool:
    """Return True when every adjacent pair is in ascending order."""
    return all(sequence[i] <= sequence[i + 1] for i in range(len(sequence) - 1))


class BubbleSorter:
    def __init__(self, trace: bool = True):
        """
        Initialize Bubble Sorter.

        Args:
            trace: Whether to log every comparison at DEBUG level
        """
        self.trace = trace
        self.last_stats: Optional[SortStats] = None

    def sort(self, sequence: List[int]) -> List[int]:
        """
        Sort a list of integers ascending, in place.

        A cursor walks the list comparing each element with its successor and
        swapping when the left one is strictly greater. Reaching the end of the
        list closes a pass: a pass without swaps means the list is sorted,
        otherwise the cursor goes back to 0.

        Args:
            sequence: Mutable list of integers (may be empty)

        Returns:
            The same list object, now sorted
        """
        stats = SortStats()
        self.last_stats = stats

        cursor = 0
        swapped = False

        while stats.state is SortState.SCANNING:
            if cursor + 1 >= len(sequence):
                # End of pass
                stats.passes += 1
                if not swapped:
                    stats.state = SortState.SORTED
                cursor = 0
                swapped = False
                continue

            left, right = sequence[cursor], sequence[cursor + 1]
            stats.comparisons += 1

            if left > right:
                sequence[cursor], sequence[cursor + 1] = right, left
                stats.swaps += 1
                swapped = True

            if self.trace and logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"{left} {self._describe(left, right)} {right} -> {sequence}")

            cursor += 1

        logger.debug(f"Sorted {len(sequence)} values in {stats.passes} passes "
                     f"({stats.comparisons} comparisons, {stats.swaps} swaps)")

        return sequence

    @staticmethod
    def _describe(left: int, right: int) -> str:
        if left < right:
            return "less than"
        if left == right:
            return "equal"
        return "greater than"
