"""Tests for stats tools."""

import math
import random

import pytest

from errors.exceptions import InvalidArgumentError, InvalidDomainError
from tools.stats_tools import (
    UNGROUPED,
    compute_summary,
    grouped_summary,
    normal_curve,
    normal_pdf,
)


class TestComputeSummary:
    """Tests for compute_summary function."""

    def test_empty_data(self):
        """Empty input is a zeroed summary, not an error."""
        result = compute_summary([])

        assert result.count == 0
        assert result.min == 0
        assert result.max == 0
        assert result.mean == 0
        assert result.median == 0
        assert result.standard_deviation == 0
        assert result.histogram == {}
        assert result.buckets == ()

    def test_single_value(self):
        """One value: width-1 buckets starting at the value."""
        result = compute_summary([50])

        assert result.min == 50
        assert result.max == 50
        assert result.mean == 50
        assert result.median == 50
        assert result.standard_deviation == 0
        assert len(result.histogram) == 10
        labels = list(result.histogram)
        assert labels[0] == "50.0-51.0"
        assert labels[-1] == "59.0-60.0"
        assert result.histogram["50.0-51.0"] == 1
        assert sum(result.histogram.values()) == 1

    def test_even_count(self):
        """Median averages the two middle values; stddev is population."""
        result = compute_summary([10, 20, 30, 40])

        assert result.mean == 25
        assert result.median == 25
        assert result.standard_deviation == pytest.approx(math.sqrt(125))
        assert result.standard_deviation == pytest.approx(11.18, abs=0.01)

    def test_odd_count_median(self):
        result = compute_summary([90, 10, 50])
        assert result.median == 50
        assert result.min == 10
        assert result.max == 90

    def test_population_not_sample_stddev(self):
        """Divisor is N, not N-1."""
        result = compute_summary([2, 4, 4, 4, 5, 5, 7, 9])
        assert result.standard_deviation == pytest.approx(2.0)

    def test_does_not_mutate_input(self):
        data = [80, 20, 60, 40]
        compute_summary(data)
        assert data == [80, 20, 60, 40]

    def test_accepts_generator(self):
        result = compute_summary(v for v in [1, 2, 3])
        assert result.count == 3
        assert result.mean == 2

    def test_histogram_labels_and_counts(self):
        """Ten equal buckets over [min, max]; the maximum lands in the last one."""
        data = [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
        result = compute_summary(data)

        assert list(result.histogram) == [
            "0.0-10.0", "10.0-20.0", "20.0-30.0", "30.0-40.0", "40.0-50.0",
            "50.0-60.0", "60.0-70.0", "70.0-80.0", "80.0-90.0", "90.0-100.0",
        ]
        # 0..80 each start their own bucket; 90 and 100 share the closed last bucket
        assert list(result.histogram.values()) == [1, 1, 1, 1, 1, 1, 1, 1, 1, 2]

    def test_bucket_boundaries_are_half_open(self):
        """A value on an inner boundary belongs to the upper bucket."""
        result = compute_summary([0, 50, 100])
        assert result.histogram["50.0-60.0"] == 1
        assert result.histogram["40.0-50.0"] == 0

    def test_buckets_match_histogram(self):
        result = compute_summary([55, 61.5, 72, 88, 93])
        assert [b.label for b in result.buckets] == list(result.histogram)
        assert [b.count for b in result.buckets] == list(result.histogram.values())
        assert result.buckets[0].start == 55
        assert result.buckets[-1].end == pytest.approx(93)

    def test_narrow_range_labels_merge(self):
        """Buckets that format to one label pool their counts."""
        data = [50.0, 50.01, 50.02, 50.04]
        result = compute_summary(data)
        assert sum(result.histogram.values()) == len(data)
        assert len(result.buckets) == 10

    def test_awkward_floats_counted_once(self):
        """Boundary rounding never drops or double counts a value."""
        data = [0.1, 0.2, 0.3, 0.7, 1.1, 1.3, 2.9, 3.3]
        result = compute_summary(data)
        assert sum(result.histogram.values()) == len(data)

    def test_custom_bin_count(self):
        result = compute_summary([0, 100], bin_count=4)
        assert list(result.histogram) == ["0.0-25.0", "25.0-50.0", "50.0-75.0", "75.0-100.0"]

    def test_invalid_bin_count(self):
        with pytest.raises(InvalidArgumentError):
            compute_summary([1, 2], bin_count=0)

    def test_deterministic(self):
        """Same input, same output."""
        data = [67.5, 88.1, 45.0, 91.3, 72.2, 72.2, 59.9]
        assert compute_summary(data) == compute_summary(data)

    def test_invariants_random(self):
        """min <= median <= max, stddev >= 0, counts sum to n."""
        rng = random.Random(1234)
        for _ in range(200):
            data = [round(rng.uniform(0, 100), rng.randint(0, 3)) for _ in range(rng.randint(1, 60))]
            result = compute_summary(data)
            assert result.min <= result.median <= result.max
            assert result.standard_deviation >= 0
            assert sum(result.histogram.values()) == len(data)
            assert result.count == len(data)

    def test_camel_case_dump(self):
        result = compute_summary([10, 20])
        dumped = result.model_dump(by_alias=True)
        assert "standardDeviation" in dumped


class TestGroupedSummary:
    """Tests for grouped_summary function."""

    def test_partitions_in_first_occurrence_order(self):
        result = grouped_summary([(10, "A"), (90, "B"), (20, "A")])

        assert list(result) == ["A", "B"]
        assert result["A"] == compute_summary([10, 20])
        assert result["B"] == compute_summary([90])

    def test_none_key_is_ungrouped(self):
        result = grouped_summary([(70, None), (80, "A"), (60, None)])

        assert list(result) == [UNGROUPED, "A"]
        assert result[UNGROUPED].count == 2
        assert result[UNGROUPED].mean == 65

    def test_empty(self):
        assert grouped_summary([]) == {}


class TestNormalCurve:
    """Tests for normal_curve / normal_pdf."""

    def test_point_count_and_window(self):
        """sample_count steps give sample_count + 1 points, clipped to [40, 100]."""
        curve = normal_curve(mean=70, standard_deviation=10, sample_count=100)

        assert len(curve) == 101
        assert curve[0].x == pytest.approx(40)
        assert curve[-1].x == pytest.approx(100)
        assert all(40 <= p.x <= 100 for p in curve)
        assert all(p.y >= 0 for p in curve)

    def test_symmetric_about_mean(self):
        curve = normal_curve(mean=70, standard_deviation=10, sample_count=100)
        # x = 40 + 0.6 * i, so i = 50 is the mean
        assert curve[50].x == pytest.approx(70)
        for k in range(1, 50):
            assert curve[50 - k].y == pytest.approx(curve[50 + k].y)

    def test_peak_value(self):
        curve = normal_curve(mean=50, standard_deviation=5, sample_count=10)
        peak = max(curve, key=lambda p: p.y)
        assert peak.x == pytest.approx(50)
        assert peak.y == pytest.approx(1 / (5 * math.sqrt(2 * math.pi)))

    def test_clipped_at_domain_min(self):
        curve = normal_curve(mean=10, standard_deviation=8, sample_count=20)
        assert curve[0].x == 0
        assert curve[-1].x == pytest.approx(34)

    def test_custom_domain(self):
        curve = normal_curve(mean=5, standard_deviation=2, sample_count=4, domain_min=0, domain_max=10)
        assert [p.x for p in curve] == pytest.approx([0, 2.5, 5, 7.5, 10])

    def test_matches_pdf(self):
        curve = normal_curve(mean=65, standard_deviation=12, sample_count=7)
        for point in curve:
            assert point.y == pytest.approx(normal_pdf(point.x, 65, 12))

    def test_deterministic(self):
        assert normal_curve(72.5, 9.1, 50) == normal_curve(72.5, 9.1, 50)

    def test_zero_stddev(self):
        with pytest.raises(InvalidDomainError):
            normal_curve(mean=70, standard_deviation=0, sample_count=100)

    def test_negative_stddev(self):
        with pytest.raises(InvalidDomainError):
            normal_curve(mean=70, standard_deviation=-1, sample_count=100)

    @pytest.mark.parametrize("count", [0, -5])
    def test_non_positive_sample_count(self, count):
        with pytest.raises(InvalidArgumentError):
            normal_curve(mean=70, standard_deviation=10, sample_count=count)

    def test_fractional_sample_count(self):
        with pytest.raises(InvalidArgumentError):
            normal_curve(mean=70, standard_deviation=10, sample_count=2.5)

    def test_inverted_domain(self):
        with pytest.raises(InvalidArgumentError):
            normal_curve(mean=70, standard_deviation=10, sample_count=10, domain_min=100, domain_max=0)

    def test_window_outside_domain(self):
        with pytest.raises(InvalidDomainError):
            normal_curve(mean=200, standard_deviation=10, sample_count=10)

    def test_pdf_rejects_zero_stddev(self):
        with pytest.raises(InvalidDomainError):
            normal_pdf(1, 1, 0)
