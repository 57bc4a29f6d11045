"""Least-squares trend fitting and extrapolation over sample indices."""

from __future__ import annotations

import numpy as np

from envstats.models import ForecastSeries, RegressionModel, Sample, as_array

DEFAULT_FORECAST_HORIZON = 5


def fit_linear_trend(sample: Sample) -> RegressionModel:
    """Fit ``value = slope * i + intercept`` over i = 0..n-1.

    Fewer than two observations give the flat model (0, 0).
    """

    values = as_array(sample)
    n = values.size
    if n < 2:
        return RegressionModel(slope=0.0, intercept=0.0)
    index = np.arange(n, dtype=float)
    index_mean = float(np.mean(index))
    value_mean = float(np.mean(values))
    sxx = float(np.sum((index - index_mean) ** 2))
    sxy = float(np.sum((index - index_mean) * (values - value_mean)))
    slope = sxy / sxx
    intercept = value_mean - slope * index_mean
    return RegressionModel(slope=float(slope), intercept=float(intercept))


def forecast(model: RegressionModel, n: int, horizon: int = DEFAULT_FORECAST_HORIZON) -> ForecastSeries:
    """Extrapolate ``horizon`` values following an n-point series."""

    steps = max(int(horizon), 0)
    values = tuple(model.predict(n + i) for i in range(steps))
    return ForecastSeries(start_index=int(n), values=values)


def forecast_sample(sample: Sample, horizon: int = DEFAULT_FORECAST_HORIZON) -> tuple[RegressionModel, ForecastSeries]:
    values = as_array(sample)
    model = fit_linear_trend(values)
    return model, forecast(model, values.size, horizon)


def next_value(sample: Sample) -> float:
    """One-step-ahead prediction; 0 when no trend can be fitted."""

    values = as_array(sample)
    if values.size < 2:
        return 0.0
    return fit_linear_trend(values).predict(values.size)
