"""Shapiro-Wilk normality test (algorithm AS R94).

Valid for 3 <= n <= 5000. The coefficient tables below are the published
AS R94 constants and must not be rounded or reordered.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from envstats.dist.normal import normal_cdf, normal_quantile
from envstats.models import NormalityResult, NormalityStatus, Sample, as_array

_LOG = logging.getLogger(__name__)

MIN_SAMPLE_SIZE = 3
MAX_SAMPLE_SIZE = 5000
RANGE_EPSILON = 1e-19
# Reported in place of a p-value that underflows for n <= 11.
SMALL_P_VALUE = 1e-7

# Weight corrections, polynomials in 1/sqrt(n).
C1 = (0.0, 0.221157, -0.147981, -2.07119, 4.434685, -2.706056)
C2 = (0.0, 0.042981, -0.293762, -1.752461, 5.682633, -3.582633)
# Mean and log-std of -log(gamma - log(1 - W)) for n <= 11, polynomials in n.
C3 = (0.544, -0.39978, 0.025054, -6.714e-4)
C4 = (1.3822, -0.77857, 0.062767, -0.0020322)
# Mean and log-std of log(1 - W) for n > 11, polynomials in log(n).
C5 = (-1.5861, -0.31082, -0.083751, 0.0038915)
C6 = (-0.4803, -0.082676, 0.0030302)
GAMMA = (-2.273, 0.459)

N3_WEIGHT = 0.70710678
N3_SCALE = 1.90985931710274  # 6 / pi
N3_OFFSET = 1.04719755119660  # asin(sqrt(3 / 4))


def poly(cc: Sequence[float], x: float) -> float:
    """Evaluate ``cc[0] + cc[1]*x + ... + cc[-1]*x**(len(cc)-1)``."""

    nord = len(cc)
    ret_val = cc[0]
    if nord > 1:
        p = x * cc[nord - 1]
        for j in range(nord - 2, 0, -1):
            p = (p + cc[j]) * x
        ret_val += p
    return ret_val


def shapiro_wilk_coefficients(n: int) -> np.ndarray:
    """Return the antisymmetric weights a[0..n//2 - 1] for a sample of size n."""

    nn2 = n // 2
    if n == 3:
        return np.array([N3_WEIGHT], dtype=float)

    an25 = n + 0.25
    m = [normal_quantile((i - 0.375) / an25, 0.0, 1.0) for i in range(1, nn2 + 1)]
    summ2 = 0.0
    for value in m:
        summ2 += value * value
    summ2 *= 2.0
    ssumm2 = math.sqrt(summ2)
    rsn = 1.0 / math.sqrt(n)
    a1 = poly(C1, rsn) - m[0] / ssumm2

    a = list(m)
    if n > 5:
        a2 = -m[1] / ssumm2 + poly(C2, rsn)
        fac = math.sqrt(
            (summ2 - 2.0 * (m[0] * m[0]) - 2.0 * (m[1] * m[1])) / (1.0 - 2.0 * (a1 * a1) - 2.0 * (a2 * a2))
        )
        a[0] = a1
        a[1] = a2
        first_scaled = 2
    else:
        fac = math.sqrt((summ2 - 2.0 * (m[0] * m[0])) / (1.0 - 2.0 * (a1 * a1)))
        a[0] = a1
        first_scaled = 1
    for i in range(first_scaled, nn2):
        a[i] = a[i] / -fac
    return np.array(a, dtype=float)


def shapiro_wilk_statistic(sorted_values: np.ndarray, a: np.ndarray) -> float:
    """W = (sum a_i * (x_(n-i) - x_(i)))**2 / sum (x - mean)**2 for sorted x."""

    n = sorted_values.size
    ssassx = 0.0
    for i in range(a.size):
        ssassx += a[i] * (sorted_values[n - 1 - i] - sorted_values[i])
    center = float(np.mean(sorted_values))
    s2 = float(np.sum((sorted_values - center) ** 2))
    return min(ssassx * ssassx / s2, 1.0)


def shapiro_wilk_p_value(w: float, n: int) -> float:
    """Upper-tail p-value for W under normality (Royston's approximation)."""

    if n == 3:
        pw = N3_SCALE * (math.asin(math.sqrt(w)) - N3_OFFSET)
        return min(max(pw, 0.0), 1.0)
    if w >= 1.0:
        return 1.0

    y = math.log(1.0 - w)
    if n <= 11:
        gamma = poly(GAMMA, n)
        if y >= gamma:
            return SMALL_P_VALUE
        y = -math.log(gamma - y)
        m = poly(C3, n)
        s = math.exp(poly(C4, n))
    else:
        xx = math.log(n)
        m = poly(C5, xx)
        s = math.exp(poly(C6, xx))

    z = (y - m) / s
    return 1.0 - normal_cdf(z)


def shapiro_wilk(sample: Sample) -> NormalityResult:
    """Run the Shapiro-Wilk test on ``sample``.

    Sizes outside 3..5000 give ``(nan, 0)`` with status INVALID_SAMPLE_SIZE;
    a constant sample gives ``(1, 1)`` with status DEGENERATE.
    """

    values = np.sort(as_array(sample))
    n = values.size
    if n < MIN_SAMPLE_SIZE or n > MAX_SAMPLE_SIZE:
        _LOG.warning(
            "Sample size %d outside Shapiro-Wilk limits (%d-%d)", n, MIN_SAMPLE_SIZE, MAX_SAMPLE_SIZE
        )
        return NormalityResult(statistic=float("nan"), p_value=0.0, status=NormalityStatus.INVALID_SAMPLE_SIZE)

    a = shapiro_wilk_coefficients(n)
    if values[-1] - values[0] < RANGE_EPSILON:
        return NormalityResult(statistic=1.0, p_value=1.0, status=NormalityStatus.DEGENERATE)

    w = shapiro_wilk_statistic(values, a)
    return NormalityResult(statistic=float(w), p_value=float(shapiro_wilk_p_value(w, n)))
