"""Statistical computation tools — deterministic, trustworthy results.

These produce the grade-distribution figures the charts are drawn from:
summary statistics, a fixed-width histogram, and a Gaussian curve fitted to
the same mean / standard deviation for overlay comparison.

Everything here is pure: no I/O, no logging, no shared state.  Errors are
raised to the caller and never swallowed.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from errors.exceptions import InvalidArgumentError, InvalidDomainError
from models.stats import HistogramBucket, NormalCurvePoint, StatSummary

HISTOGRAM_BIN_COUNT = 10
UNGROUPED = "No Group"
SIGMA_WINDOW = 3  # curve is sampled over mean ± 3σ


def compute_summary(
    values: Iterable[float | int],
    bin_count: int = HISTOGRAM_BIN_COUNT,
) -> StatSummary:
    """Calculate descriptive statistics and a histogram for a set of grades.

    Args:
        values: Numeric grades, any order.  Not range-checked here; the
            caller validates grades when they are recorded.
        bin_count: Number of equal-width histogram buckets.

    Returns:
        A :class:`StatSummary`.  An empty input yields an all-zero summary
        with an empty histogram.

    The standard deviation is the *population* figure (divisor ``N``).
    """
    if bin_count <= 0:
        raise InvalidArgumentError("bin_count", f"must be positive, got {bin_count}")

    # np.sort returns a new array; the caller's sequence is left untouched.
    arr = np.sort(np.asarray(list(values), dtype=float))
    n = int(arr.size)
    if n == 0:
        return StatSummary()

    lowest = float(arr[0])
    highest = float(arr[-1])
    mean = float(arr.sum() / n)

    mid = n // 2
    if n % 2 == 1:
        median = float(arr[mid])
    else:
        median = float((arr[mid - 1] + arr[mid]) / 2)

    standard_deviation = float(np.std(arr, ddof=0))

    buckets = _histogram(arr, lowest, highest, bin_count)
    histogram: dict[str, int] = {}
    for bucket in buckets:
        # Very narrow ranges can format two buckets to the same label.
        histogram[bucket.label] = histogram.get(bucket.label, 0) + bucket.count

    return StatSummary(
        count=n,
        min=lowest,
        max=highest,
        mean=mean,
        median=median,
        standard_deviation=standard_deviation,
        histogram=histogram,
        buckets=tuple(buckets),
    )


def _histogram(
    arr: np.ndarray,
    lowest: float,
    highest: float,
    bin_count: int,
) -> list[HistogramBucket]:
    """Split ``[lowest, highest]`` into ``bin_count`` buckets and count ``arr``.

    Bucket ``i`` is ``[lowest + i*w, lowest + (i+1)*w)``; the last bucket is
    closed so ``highest`` always lands in it.  When every value is equal the
    width is 1.

    Each value's bucket comes from one index computation,
    ``floor((v - lowest) / w)`` clamped to ``[0, bin_count - 1]``, so every
    value is counted exactly once whatever the floating-point rounding of
    the boundaries.
    """
    width = (highest - lowest) / bin_count or 1.0

    indices = np.floor((arr - lowest) / width).astype(np.int64)
    indices = np.clip(indices, 0, bin_count - 1)
    counts = np.bincount(indices, minlength=bin_count)

    buckets: list[HistogramBucket] = []
    for i in range(bin_count):
        start = lowest + i * width
        end = start + width
        buckets.append(HistogramBucket(
            label=f"{start:.1f}-{end:.1f}",
            start=start,
            end=end,
            count=int(counts[i]),
        ))
    return buckets


def grouped_summary(
    pairs: Iterable[tuple[float | int, str | None]],
    bin_count: int = HISTOGRAM_BIN_COUNT,
) -> dict[str, StatSummary]:
    """Compute one summary per group key.

    ``None`` keys collapse into the ``UNGROUPED`` sentinel.  Groups appear in
    the order their key first occurs in ``pairs``.
    """
    partitions: dict[str, list[float | int]] = {}
    for value, key in pairs:
        partitions.setdefault(UNGROUPED if key is None else key, []).append(value)
    return {key: compute_summary(values, bin_count) for key, values in partitions.items()}


def normal_pdf(x: float, mean: float, standard_deviation: float) -> float:
    """Gaussian probability density at ``x``."""
    if not standard_deviation > 0:
        raise InvalidDomainError(
            f"standard deviation must be positive, got {standard_deviation}"
        )
    exponent = -((x - mean) ** 2) / (2 * standard_deviation ** 2)
    return (1 / (standard_deviation * math.sqrt(2 * math.pi))) * math.exp(exponent)


def normal_curve(
    mean: float,
    standard_deviation: float,
    sample_count: int = 100,
    domain_min: float = 0.0,
    domain_max: float = 100.0,
) -> list[NormalCurvePoint]:
    """Sample a Gaussian PDF for overlay on a grade histogram.

    The x-range is ``mean ± 3σ`` clipped to ``[domain_min, domain_max]`` and
    split into ``sample_count`` equal steps, so ``sample_count + 1`` points
    are returned (both endpoints included).

    Raises:
        InvalidArgumentError: ``sample_count`` is not a positive integer, or
            ``domain_min > domain_max``.
        InvalidDomainError: ``standard_deviation`` is not positive, or the
            clipped window is empty.
    """
    if isinstance(sample_count, bool) or int(sample_count) != sample_count or sample_count <= 0:
        raise InvalidArgumentError(
            "sample_count", f"must be a positive integer, got {sample_count}"
        )
    if domain_min > domain_max:
        raise InvalidArgumentError(
            "domain_min", f"{domain_min} is greater than domain_max {domain_max}"
        )
    if not standard_deviation > 0:
        raise InvalidDomainError(
            f"cannot fit a normal curve with standard deviation {standard_deviation}"
        )

    lo = max(domain_min, mean - SIGMA_WINDOW * standard_deviation)
    hi = min(domain_max, mean + SIGMA_WINDOW * standard_deviation)
    if lo > hi:
        raise InvalidDomainError(
            f"mean {mean} ± {SIGMA_WINDOW}σ lies outside [{domain_min}, {domain_max}]"
        )

    steps = int(sample_count)
    step = (hi - lo) / steps
    xs = np.clip(lo + np.arange(steps + 1) * step, lo, hi)
    coefficient = 1 / (standard_deviation * math.sqrt(2 * math.pi))
    ys = coefficient * np.exp(-((xs - mean) ** 2) / (2 * standard_deviation ** 2))

    return [NormalCurvePoint(x=float(x), y=float(y)) for x, y in zip(xs, ys)]
