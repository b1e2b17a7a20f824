"""
Sequence analysis engine that combines sorting and statistics.
Sorts the input in place, then computes median, mode and descriptive statistics.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

import numpy as np

from .sorting import BubbleSorter, SortStats
from .statistics import ModeResult, Number, StatisticsEngine

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """Complete analysis of one integer sequence"""
    original_values: List[int]
    sorted_values: List[int]
    length: int
    median: Optional[Number]
    frequency_table: Dict[int, int]
    mode: ModeResult
    sort_stats: SortStats
    statistics: Dict[str, float] = field(default_factory=dict)
    processing_time: float = 0.0


class SequenceAnalyzer:
    def __init__(self,
                 even_median: str = "none",
                 trace_sort: bool = True):
        """
        Initialize Sequence Analyzer.

        Args:
            even_median: Even-length median policy passed to StatisticsEngine
            trace_sort: Whether the sorter logs each comparison at DEBUG level
        """
        self.sorter = BubbleSorter(trace=trace_sort)
        self.engine = StatisticsEngine(even_median=even_median)

    def analyze(self, values: List[int],
                progress_callback: Optional[Callable[[str], None]] = None) -> AnalysisReport:
        """
        Sort a sequence in place and compute its statistics.

        Args:
            values: Integer list, sorted in place
            progress_callback: Optional callback for progress updates

        Returns:
            AnalysisReport with the results

        Raises:
            EmptyInputError: If values is empty
        """
        start_time = time.time()
        original = list(values)
        logger.info(f"Analyzing {len(values)} values")

        if progress_callback:
            progress_callback("Sorting values...")
        self.sorter.sort(values)
        sort_stats = self.sorter.last_stats

        if progress_callback:
            progress_callback("Computing statistics...")
        result = self.engine.compute(values)

        report = AnalysisReport(
            original_values=original,
            sorted_values=values,
            length=len(values),
            median=result.median,
            frequency_table=result.frequency_table,
            mode=result.mode,
            sort_stats=sort_stats,
            statistics=self.describe(values),
        )
        report.processing_time = time.time() - start_time

        logger.info(f"Analysis finished: median={report.median} "
                    f"mode={report.mode.value} (x{report.mode.count})")
        return report

    @staticmethod
    def describe(values: List[int]) -> Dict[str, float]:
        """Mean, standard deviation, min, max and range of a non-empty sequence."""
        if not values:
            return {}

        data = np.asarray(values, dtype=float)
        return {
            'mean': float(np.mean(data)),
            'std': float(np.std(data)),
            'min': float(np.min(data)),
            'max': float(np.max(data)),
            'range': float(np.ptp(data)),
        }
