"""Distribution-shape summaries: histogram, box plot and normal QQ points."""

from __future__ import annotations

import math

import numpy as np

from envstats.descriptive import sample_std_dev
from envstats.dist.normal import normal_quantile
from envstats.models import BoxPlotSummary, HistogramBinSet, QQPoint, Sample, as_array

DEFAULT_HISTOGRAM_BINS = 8


def histogram(sample: Sample, bins: int = DEFAULT_HISTOGRAM_BINS) -> HistogramBinSet:
    """Count values into ``bins`` equal-width bins spanning [min, max].

    A zero range uses a unit step so every value lands in the first bin.
    The maximum value is counted in the last bin.
    """

    values = as_array(sample)
    bins = max(int(bins), 1)
    if values.size == 0:
        return HistogramBinSet(edges=(), counts=())
    lo = float(np.min(values))
    hi = float(np.max(values))
    step = (hi - lo) / bins
    if step == 0:
        step = 1.0
    edges = tuple(lo + i * step for i in range(bins + 1))
    counts = [0] * bins
    for value in values:
        idx = int(math.floor((value - lo) / step))
        counts[min(max(idx, 0), bins - 1)] += 1
    return HistogramBinSet(edges=edges, counts=tuple(counts))


def interpolated_quantile(sorted_values: Sample, p: float) -> float:
    """Quantile ``p`` by linear interpolation at position p * (n - 1)."""

    values = as_array(sorted_values)
    n = values.size
    if n == 0:
        return 0.0
    position = min(max(float(p), 0.0), 1.0) * (n - 1)
    lower = int(math.floor(position))
    upper = int(math.ceil(position))
    fraction = position - lower
    return float(values[lower] + fraction * (values[upper] - values[lower]))


def boxplot_summary(sample: Sample) -> BoxPlotSummary:
    values = np.sort(as_array(sample))
    if values.size == 0:
        return BoxPlotSummary(minimum=0.0, q1=0.0, median=0.0, q3=0.0, maximum=0.0)
    return BoxPlotSummary(
        minimum=float(values[0]),
        q1=interpolated_quantile(values, 0.25),
        median=interpolated_quantile(values, 0.5),
        q3=interpolated_quantile(values, 0.75),
        maximum=float(values[-1]),
    )


def qq_points(sample: Sample) -> tuple[QQPoint, ...]:
    """Pair sorted observations with quantiles of a moment-matched normal.

    Plotting positions are (i + 0.5) / n for zero-based rank i.
    """

    values = np.sort(as_array(sample))
    n = values.size
    if n == 0:
        return ()
    center = float(np.mean(values))
    scale = sample_std_dev(values)
    return tuple(
        QQPoint(
            theoretical=center + scale * normal_quantile((i + 0.5) / n, 0.0, 1.0),
            empirical=float(value),
        )
        for i, value in enumerate(values)
    )
