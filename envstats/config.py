"""Configuration objects for sensor reading analysis."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class AnalysisConfig:
    """Analysis configuration defaults."""

    histogram_bins: int = 8
    forecast_horizon: int = 5
    alpha: float = 0.05
    temperature_threshold: float = 30.0
    humidity_band: tuple[float, float] = (40.0, 70.0)
    location: str | None = None

    def validate(self) -> None:
        """Raise ValueError when a parameter cannot drive an analysis run."""

        if int(self.histogram_bins) < 1:
            raise ValueError(f"histogram_bins must be >= 1, got {self.histogram_bins}")
        if int(self.forecast_horizon) < 0:
            raise ValueError(f"forecast_horizon must be >= 0, got {self.forecast_horizon}")
        if not 0.0 < float(self.alpha) < 1.0:
            raise ValueError(f"alpha must be in (0, 1), got {self.alpha}")
        low, high = self.humidity_band
        if float(low) > float(high):
            raise ValueError(f"humidity_band low bound exceeds high bound: {self.humidity_band}")


def load_analysis_config(path: str | Path) -> AnalysisConfig:
    """Build an AnalysisConfig from a JSON object file."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"Config {path} must contain a JSON object")
    return config_from_mapping(payload)


def config_from_mapping(values: dict[str, Any]) -> AnalysisConfig:
    fields_by_name = {field.name for field in fields(AnalysisConfig)}
    cfg_kwargs: dict[str, Any] = {}
    for key, value in values.items():
        if key not in fields_by_name:
            raise ValueError(f"Unknown AnalysisConfig key '{key}'")
        cfg_kwargs[key] = value
    if "humidity_band" in cfg_kwargs:
        band = cfg_kwargs["humidity_band"]
        if not isinstance(band, (list, tuple)) or len(band) != 2:
            raise ValueError(f"humidity_band must be a [low, high] pair, got {band!r}")
        cfg_kwargs["humidity_band"] = (float(band[0]), float(band[1]))
    return AnalysisConfig(**cfg_kwargs)
