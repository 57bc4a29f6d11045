"""Exceedance probabilities conditioned on a normality test."""

from __future__ import annotations

import numpy as np

from envstats.descriptive import mean, sample_std_dev
from envstats.dist.normal import normal_cdf
from envstats.models import NormalityStatus, ProbabilityBasis, ProbabilityEstimate, Sample, as_array
from envstats.normality.shapiro_wilk import shapiro_wilk

DEFAULT_ALPHA = 0.05


def proportion_above(sample: Sample, threshold: float) -> float:
    """Share of observations strictly above ``threshold``; 0 for an empty sample."""

    values = as_array(sample)
    if values.size == 0:
        return 0.0
    return float(np.count_nonzero(values > threshold) / values.size)


def proportion_outside(sample: Sample, low: float, high: float) -> float:
    """Share of observations strictly below ``low`` or strictly above ``high``."""

    values = as_array(sample)
    if values.size == 0:
        return 0.0
    outside = (values < low) | (values > high)
    return float(np.count_nonzero(outside) / values.size)


def probability_above(sample: Sample, threshold: float, alpha: float = DEFAULT_ALPHA) -> ProbabilityEstimate:
    """Estimate P(X > threshold).

    Uses a normal model with the sample mean and standard deviation when the
    Shapiro-Wilk p-value exceeds ``alpha``; otherwise (including samples the
    test cannot handle) the empirical proportion is reported.
    """

    values = as_array(sample)
    normality = shapiro_wilk(values)
    if values.size > 2 and normality.p_value > alpha:
        scale = sample_std_dev(values)
        if normality.status is NormalityStatus.DEGENERATE or scale <= 0:
            # Step function at the common value; the mean may be off by an ulp.
            value = 1.0 if float(np.min(values)) > threshold else 0.0
        else:
            value = 1.0 - normal_cdf((threshold - mean(values)) / scale)
        return ProbabilityEstimate(value=float(value), basis=ProbabilityBasis.PARAMETRIC, normality=normality)
    return ProbabilityEstimate(
        value=proportion_above(values, threshold),
        basis=ProbabilityBasis.EMPIRICAL,
        normality=normality,
    )
