"""
Report generation utilities for sequence analysis results.
Handles console and JSON output formatting.
"""

import json
from datetime import datetime
from typing import Any, Dict

from core.analyzer import AnalysisReport

MEDIAN_NOT_COMPUTED = "not computed (even length)"


class ReportGenerator:
    def format_median(self, report: AnalysisReport) -> str:
        if report.median is None:
            return MEDIAN_NOT_COMPUTED
        return str(report.median)

    def to_dict(self, report: AnalysisReport) -> Dict[str, Any]:
        """
        Convert a report to a JSON-serializable dict.

        Frequency table keys become strings, as JSON object keys must be.
        """
        return {
            'metadata': {
                'generated_at': datetime.now().isoformat(),
                'processing_time': float(report.processing_time),
            },
            'original_values': [int(v) for v in report.original_values],
            'sorted_values': [int(v) for v in report.sorted_values],
            'length': int(report.length),
            'median': report.median,
            'frequency_table': {str(k): int(v) for k, v in report.frequency_table.items()},
            'mode': {
                'value': int(report.mode.value),
                'count': int(report.mode.count),
            },
            'statistics': {k: float(v) for k, v in report.statistics.items()},
            'sort': {
                'passes': report.sort_stats.passes,
                'comparisons': report.sort_stats.comparisons,
                'swaps': report.sort_stats.swaps,
                'state': report.sort_stats.state.value,
            },
        }

    def generate_json_report(self, report: AnalysisReport) -> str:
        """
        Render the report as a JSON document.

        Args:
            report: Analysis report

        Returns:
            JSON text
        """
        return json.dumps(self.to_dict(report), indent=2, ensure_ascii=False)

    def print_console_report(self, report: AnalysisReport,
                             detailed: bool = False) -> None:
        """
        Print report to console.

        Args:
            report: Analysis report
            detailed: Whether to show descriptive statistics and sort counters
        """
        print("=" * 60)
        print("SEQUENCE STATISTICS REPORT")
        print("=" * 60)
        print(f"Sorted values: {report.sorted_values}")
        print(f"Length: {report.length}")
        print(f"Median: {self.format_median(report)}")
        print()

        print("FREQUENCY TABLE:")
        print("-" * 30)
        for value, count in report.frequency_table.items():
            print(f"{value:>8}: {count}")
        print()

        print(f"Mode is {report.mode.value} with it occurring {report.mode.count} times")

        if detailed:
            print()
            if report.statistics:
                print("DESCRIPTIVE STATISTICS:")
                print("-" * 30)
                stats = report.statistics
                print(f"Mean: {stats.get('mean', 0):.4f}")
                print(f"Standard deviation: {stats.get('std', 0):.4f}")
                print(f"Min: {stats.get('min', 0):.0f}")
                print(f"Max: {stats.get('max', 0):.0f}")
                print(f"Range: {stats.get('range', 0):.0f}")
                print()

            print("SORT:")
            print("-" * 30)
            print(f"Original values: {report.original_values}")
            print(f"Passes: {report.sort_stats.passes}")
            print(f"Comparisons: {report.sort_stats.comparisons}")
            print(f"Swaps: {report.sort_stats.swaps}")
            print(f"Processing time: {report.processing_time:.4f} seconds")

        print("=" * 60)
