"""Normality testing."""

from envstats.normality.shapiro_wilk import (
    shapiro_wilk,
    shapiro_wilk_coefficients,
    shapiro_wilk_p_value,
    shapiro_wilk_statistic,
)

__all__ = [
    "shapiro_wilk",
    "shapiro_wilk_coefficients",
    "shapiro_wilk_p_value",
    "shapiro_wilk_statistic",
]
