"""Descriptive statistics over a single sample.

Every function tolerates degenerate input: an empty sample yields 0 (or an
empty mode), and shape statistics fall back to 0 when fewer than three
observations or zero variance make them undefined.
"""

from __future__ import annotations

import numpy as np

from envstats.models import DescriptiveSummary, Sample, as_array


def mean(sample: Sample) -> float:
    values = as_array(sample)
    if values.size == 0:
        return 0.0
    return float(np.mean(values))


def median(sample: Sample) -> float:
    values = as_array(sample)
    if values.size == 0:
        return 0.0
    return float(np.median(values))


def mode(sample: Sample) -> tuple[float, ...]:
    """Return every value sharing the highest frequency, ascending."""

    values = as_array(sample)
    if values.size == 0:
        return ()
    unique, counts = np.unique(values, return_counts=True)
    return tuple(float(v) for v in unique[counts == counts.max()])


def _is_constant(values: np.ndarray) -> bool:
    return bool(values.size) and float(np.max(values)) == float(np.min(values))


def sample_std_dev(sample: Sample) -> float:
    """Standard deviation with the n - 1 denominator; 0 for n < 2 or equal values."""

    values = as_array(sample)
    if values.size < 2 or _is_constant(values):
        return 0.0
    return float(np.std(values, ddof=1))


def _central_moments(values: np.ndarray) -> tuple[float, float, float]:
    deviations = values - np.mean(values)
    m2 = float(np.mean(deviations**2))
    m3 = float(np.mean(deviations**3))
    m4 = float(np.mean(deviations**4))
    return m2, m3, m4


def skewness(sample: Sample) -> float:
    """Adjusted Fisher-Pearson sample skewness (G1)."""

    values = as_array(sample)
    n = values.size
    if n <= 2 or _is_constant(values):
        return 0.0
    m2, m3, _ = _central_moments(values)
    if m2 <= 0.0:
        return 0.0
    g1 = m3 / m2**1.5
    return float(g1 * np.sqrt(n * (n - 1)) / (n - 2))


def excess_kurtosis(sample: Sample) -> float:
    """Sample excess kurtosis.

    Uses the bias-corrected estimator (G2) for n > 3. With exactly three
    observations the correction is undefined, so the moment estimator
    ``m4 / m2**2 - 3`` is returned instead.
    """

    values = as_array(sample)
    n = values.size
    if n <= 2 or _is_constant(values):
        return 0.0
    m2, _, m4 = _central_moments(values)
    if m2 <= 0.0:
        return 0.0
    g2 = m4 / m2**2 - 3.0
    if n == 3:
        return float(g2)
    return float((n - 1) / ((n - 2) * (n - 3)) * ((n + 1) * g2 + 6.0))


def describe(sample: Sample) -> DescriptiveSummary:
    values = as_array(sample)
    if values.size == 0:
        return DescriptiveSummary(
            count=0,
            mean=0.0,
            median=0.0,
            mode=(),
            std_dev=0.0,
            skewness=0.0,
            excess_kurtosis=0.0,
            minimum=0.0,
            maximum=0.0,
        )
    return DescriptiveSummary(
        count=int(values.size),
        mean=mean(values),
        median=median(values),
        mode=mode(values),
        std_dev=sample_std_dev(values),
        skewness=skewness(values),
        excess_kurtosis=excess_kurtosis(values),
        minimum=float(np.min(values)),
        maximum=float(np.max(values)),
    )
