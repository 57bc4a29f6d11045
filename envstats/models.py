"""Core result records for the statistics engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Union

import numpy as np

Sample = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True)
class DescriptiveSummary:
    """Central tendency, spread and shape of a sample."""

    count: int
    mean: float
    median: float
    mode: tuple[float, ...]
    std_dev: float
    skewness: float
    excess_kurtosis: float
    minimum: float
    maximum: float


@dataclass(frozen=True)
class RegressionModel:
    """Straight-line fit ``value = slope * index + intercept``."""

    slope: float
    intercept: float

    def predict(self, index: float) -> float:
        return float(self.slope * index + self.intercept)


@dataclass(frozen=True)
class ForecastSeries:
    """Extrapolated values for indices ``start_index .. start_index + k - 1``."""

    start_index: int
    values: tuple[float, ...]


class NormalityStatus(str, Enum):
    """How a normality result was produced."""

    TESTED = "tested"
    DEGENERATE = "degenerate"
    INVALID_SAMPLE_SIZE = "invalid_sample_size"


@dataclass(frozen=True)
class NormalityResult:
    """Shapiro-Wilk W statistic and p-value."""

    statistic: float
    p_value: float
    status: NormalityStatus = NormalityStatus.TESTED

    @property
    def is_tested(self) -> bool:
        """True when the sample size allowed the test to run."""

        return self.status is not NormalityStatus.INVALID_SAMPLE_SIZE

    def is_normal(self, alpha: float = 0.05) -> bool:
        return self.is_tested and not math.isnan(self.p_value) and self.p_value > alpha


@dataclass(frozen=True)
class HistogramBinSet:
    """Equal-width bins; ``len(edges) == len(counts) + 1`` for non-empty samples."""

    edges: tuple[float, ...]
    counts: tuple[int, ...]

    @property
    def total(self) -> int:
        return int(sum(self.counts))


@dataclass(frozen=True)
class BoxPlotSummary:
    """Five-number summary using linearly interpolated quartiles."""

    minimum: float
    q1: float
    median: float
    q3: float
    maximum: float

    @property
    def iqr(self) -> float:
        return float(self.q3 - self.q1)


@dataclass(frozen=True)
class QQPoint:
    """Theoretical normal quantile paired with a sorted observation."""

    theoretical: float
    empirical: float


class ProbabilityBasis(str, Enum):
    """Which model produced a probability estimate."""

    PARAMETRIC = "parametric"
    EMPIRICAL = "empirical"


@dataclass(frozen=True)
class ProbabilityEstimate:
    """Estimated P(X > threshold) plus the normality result that chose the model."""

    value: float
    basis: ProbabilityBasis
    normality: NormalityResult


def as_array(sample: Sample) -> np.ndarray:
    """Return a private 1-D float copy of ``sample``."""

    return np.array(sample, dtype=float).reshape(-1)
