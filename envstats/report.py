"""Compose every engine output for one variable of one location."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Sequence

from envstats.config import AnalysisConfig
from envstats.descriptive import describe
from envstats.models import (
    BoxPlotSummary,
    DescriptiveSummary,
    ForecastSeries,
    HistogramBinSet,
    NormalityResult,
    ProbabilityEstimate,
    QQPoint,
    RegressionModel,
    Sample,
    as_array,
)
from envstats.probability import probability_above, proportion_above, proportion_outside
from envstats.readings import forecast_timestamps
from envstats.regression import fit_linear_trend, forecast
from envstats.shape import boxplot_summary, histogram, qq_points

SUMMARY_CSV_COLUMNS = [
    "location",
    "variable",
    "count",
    "mean",
    "median",
    "mode",
    "std_dev",
    "skewness",
    "excess_kurtosis",
    "minimum",
    "maximum",
    "shapiro_w",
    "shapiro_p",
    "normality_status",
    "threshold",
    "probability_above",
    "probability_basis",
    "proportion_above",
    "proportion_outside",
    "trend_slope",
    "trend_intercept",
    "next_value",
]


@dataclass(frozen=True)
class VariableReport:
    """All statistics for a single sensor variable."""

    location: str
    variable: str
    summary: DescriptiveSummary
    normality: NormalityResult
    threshold: float
    probability: ProbabilityEstimate
    proportion_above: float
    proportion_outside: float | None
    band: tuple[float, float] | None
    trend: RegressionModel
    forecast: ForecastSeries
    forecast_timestamps: tuple[int, ...]
    histogram: HistogramBinSet
    boxplot: BoxPlotSummary
    qq: tuple[QQPoint, ...]


def analyze_variable(
    location: str,
    variable: str,
    sample: Sample,
    config: AnalysisConfig,
    *,
    threshold: float,
    band: tuple[float, float] | None = None,
    timestamps: Sequence[float] = (),
) -> VariableReport:
    values = as_array(sample)
    probability = probability_above(values, threshold, config.alpha)
    trend = fit_linear_trend(values)
    return VariableReport(
        location=location,
        variable=variable,
        summary=describe(values),
        normality=probability.normality,
        threshold=float(threshold),
        probability=probability,
        proportion_above=proportion_above(values, threshold),
        proportion_outside=proportion_outside(values, band[0], band[1]) if band is not None else None,
        band=band,
        trend=trend,
        forecast=forecast(trend, values.size, config.forecast_horizon),
        forecast_timestamps=forecast_timestamps(timestamps, config.forecast_horizon),
        histogram=histogram(values, config.histogram_bins),
        boxplot=boxplot_summary(values),
        qq=qq_points(values),
    )


def report_to_dict(report: VariableReport) -> dict[str, Any]:
    """JSON-ready view of a report (NaN/Inf become None, enums their values)."""

    return sanitize_json(asdict(report))


def summary_row(report: VariableReport) -> dict[str, Any]:
    """Flatten the headline numbers of a report into one CSV row."""

    summary = report.summary
    next_value = report.forecast.values[0] if report.forecast.values else None
    row = {
        "location": report.location,
        "variable": report.variable,
        "count": summary.count,
        "mean": summary.mean,
        "median": summary.median,
        "mode": "|".join(f"{value:g}" for value in summary.mode),
        "std_dev": summary.std_dev,
        "skewness": summary.skewness,
        "excess_kurtosis": summary.excess_kurtosis,
        "minimum": summary.minimum,
        "maximum": summary.maximum,
        "shapiro_w": report.normality.statistic,
        "shapiro_p": report.normality.p_value,
        "normality_status": report.normality.status.value,
        "threshold": report.threshold,
        "probability_above": report.probability.value,
        "probability_basis": report.probability.basis.value,
        "proportion_above": report.proportion_above,
        "proportion_outside": report.proportion_outside,
        "trend_slope": report.trend.slope,
        "trend_intercept": report.trend.intercept,
        "next_value": next_value,
    }
    return sanitize_json(row)


def sanitize_json(obj: Any) -> Any:
    """Convert NaN/Inf to None so json.dumps(..., allow_nan=False) succeeds."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, float):
        return None if (math.isnan(obj) or math.isinf(obj)) else obj
    if isinstance(obj, dict):
        return {k: sanitize_json(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [sanitize_json(v) for v in obj]
    return obj

