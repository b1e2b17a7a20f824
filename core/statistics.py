"""
Median and mode computation over integer sequences.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Sequence, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

EVEN_MEDIAN_POLICIES = ("none", "mean")


class EmptyInputError(ValueError):
    """Raised when a statistic needs at least one value and got none"""


@dataclass(frozen=True)
class ModeResult:
    value: int
    count: int


@dataclass(frozen=True)
class StatisticsResult:
    """Median (None when not computed), mode and frequency table of a sequence"""
    median: Optional[Number]
    mode: ModeResult
    frequency_table: Dict[int, int] = field(default_factory=dict, compare=False)


class StatisticsEngine:
    def __init__(self, even_median: str = "none"):
        """
        Initialize Statistics Engine.

        Args:
            even_median: What to report as the median of an even-length
                sequence: 'none' leaves it uncomputed, 'mean' averages the
                two middle values
        """
        if even_median not in EVEN_MEDIAN_POLICIES:
            raise ValueError(f"Unknown even_median policy '{even_median}', "
                             f"expected one of {EVEN_MEDIAN_POLICIES}")
        self.even_median = even_median

    def median(self, sorted_sequence: Sequence[int]) -> Optional[Number]:
        """
        Middle element of an already sorted sequence.

        Args:
            sorted_sequence: Values in ascending order

        Returns:
            The middle value for odd lengths. For even lengths None, or the
            mean of the two middle values under the 'mean' policy. None for
            an empty sequence.
        """
        length = len(sorted_sequence)
        middle = length // 2

        if length % 2 == 1:
            return sorted_sequence[middle]

        if length == 0 or self.even_median == "none":
            logger.debug(f"Median not computed for even length {length}")
            return None

        return (sorted_sequence[middle - 1] + sorted_sequence[middle]) / 2

    def frequency_table(self, sequence: Sequence[int]) -> Dict[int, int]:
        """Count occurrences of each value, keyed in first-occurrence order."""
        table: Dict[int, int] = {}
        for value in sequence:
            table[value] = table.get(value, 0) + 1
        return table

    def mode(self, sequence: Sequence[int]) -> ModeResult:
        """
        Most frequent value and its count.

        Ties go to the value that occurs first in the sequence, so for
        sorted input the smallest of the tied values wins.

        Raises:
            EmptyInputError: If the sequence is empty
        """
        return self.mode_of_table(self.frequency_table(sequence))

    def mode_of_table(self, table: Dict[int, int]) -> ModeResult:
        """
        Scan a frequency table once, keeping the first key whose count
        strictly exceeds the best so far.

        Raises:
            EmptyInputError: If the table is empty
        """
        if not table:
            raise EmptyInputError("Cannot compute the mode of an empty sequence")

        best_value = None
        best_count = 0
        for value, count in table.items():
            if count > best_count:
                best_value, best_count = value, count

        return ModeResult(value=best_value, count=best_count)

    def compute(self, sorted_sequence: Sequence[int]) -> StatisticsResult:
        """
        Median, mode and frequency table of a sorted sequence.

        The frequency table is built once and returned with the result.

        Raises:
            EmptyInputError: If the sequence is empty
        """
        table = self.frequency_table(sorted_sequence)
        mode = self.mode_of_table(table)
        return StatisticsResult(median=self.median(sorted_sequence), mode=mode,
                                frequency_table=table)
