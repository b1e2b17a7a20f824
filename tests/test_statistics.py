"""
Test suite for median and mode computation.
"""

import dataclasses
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.statistics import EmptyInputError, ModeResult, StatisticsEngine, StatisticsResult


class TestStatisticsEngine:

    def setup_method(self):
        """Setup test environment"""
        self.engine = StatisticsEngine()
        self.sample = [19, 19, 32, 37, 38, 50, 102]

    def test_median_odd_length(self):
        assert self.engine.median(self.sample) == 37

    def test_median_single_element(self):
        assert self.engine.median([5]) == 5

    def test_median_even_length_not_computed(self):
        assert self.engine.median([1, 2, 4, 7]) is None

    def test_median_empty(self):
        assert self.engine.median([]) is None

    def test_median_even_length_mean_policy(self):
        engine = StatisticsEngine(even_median="mean")

        assert engine.median([1, 2, 4, 7]) == 3.0
        assert engine.median([1, 3]) == 2.0
        assert engine.median([]) is None
        assert engine.median([1, 5, 9]) == 5

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            StatisticsEngine(even_median="average")

    def test_frequency_table(self):
        table = self.engine.frequency_table(self.sample)

        assert table == {19: 2, 32: 1, 37: 1, 38: 1, 50: 1, 102: 1}
        assert list(table) == [19, 32, 37, 38, 50, 102]

    def test_frequency_table_empty(self):
        assert self.engine.frequency_table([]) == {}

    def test_mode_sample(self):
        assert self.engine.mode(self.sample) == ModeResult(value=19, count=2)

    def test_mode_single_element(self):
        assert self.engine.mode([5]) == ModeResult(value=5, count=1)

    def test_mode_later_value_wins_with_higher_count(self):
        assert self.engine.mode([1, 2, 2, 3, 3, 3]) == ModeResult(value=3, count=3)

    def test_mode_tie_goes_to_first_occurrence(self):
        assert self.engine.mode([1, 1, 2, 2]) == ModeResult(value=1, count=2)
        assert self.engine.mode([7, 3, 3, 7]) == ModeResult(value=7, count=2)

    def test_mode_empty_raises(self):
        with pytest.raises(EmptyInputError):
            self.engine.mode([])

    def test_empty_input_error_is_value_error(self):
        assert issubclass(EmptyInputError, ValueError)

    def test_compute(self):
        result = self.engine.compute(self.sample)

        assert result == StatisticsResult(median=37, mode=ModeResult(19, 2))

    def test_compute_even_length(self):
        result = self.engine.compute([1, 2, 4, 7])

        assert result.median is None
        assert result.mode == ModeResult(1, 1)

    def test_compute_empty_raises(self):
        with pytest.raises(EmptyInputError):
            self.engine.compute([])

    def test_result_is_immutable(self):
        result = self.engine.compute(self.sample)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.median = 0

    def test_compute_returns_frequency_table(self):
        result = self.engine.compute(self.sample)

        assert result.frequency_table == {19: 2, 32: 1, 37: 1, 38: 1, 50: 1, 102: 1}

    def test_compute_builds_frequency_table_once(self, monkeypatch):
        calls = []
        original = self.engine.frequency_table

        def counting_table(sequence):
            calls.append(sequence)
            return original(sequence)

        monkeypatch.setattr(self.engine, "frequency_table", counting_table)
        self.engine.compute(self.sample)

        assert len(calls) == 1

    def test_mode_of_table_empty_raises(self):
        with pytest.raises(EmptyInputError):
            self.engine.mode_of_table({})
