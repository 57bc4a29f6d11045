"""Statistics engine for environmental sensor readings."""

from envstats.config import AnalysisConfig

__all__ = [
    "AnalysisConfig",
    "descriptive",
    "dist",
    "normality",
    "probability",
    "readings",
    "regression",
    "report",
    "shape",
]
