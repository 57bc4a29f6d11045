"""Adapter from raw sensor records to per-location samples.

Raw records look like::

    {"location": "Bedroom", "temperature": "24.5", "humidity": "51", "timestamp": 1718000000}

Numeric fields arrive as strings; older feeds name the time field
``timestamp_TTL``. Values that do not parse are dropped from the sample.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

_LOG = logging.getLogger(__name__)

VARIABLES = ("temperature", "humidity")
READING_COLUMNS = ["location", "temperature", "humidity", "timestamp"]
_LEGACY_TIMESTAMP = "timestamp_TTL"


def readings_frame(records: Iterable[Mapping[str, Any]]) -> pd.DataFrame:
    """Normalise raw records into a typed DataFrame."""

    frame = pd.DataFrame.from_records(list(records))
    if frame.empty:
        return pd.DataFrame(columns=READING_COLUMNS)
    if "timestamp" not in frame.columns and _LEGACY_TIMESTAMP in frame.columns:
        frame = frame.rename(columns={_LEGACY_TIMESTAMP: "timestamp"})
    missing = set(READING_COLUMNS) - set(frame.columns)
    if missing:
        raise ValueError(f"Readings missing required keys: {sorted(missing)}")

    frame = frame[READING_COLUMNS].copy()
    frame["location"] = frame["location"].astype(str)
    for column in ("temperature", "humidity", "timestamp"):
        frame[column] = pd.to_numeric(frame[column], errors="coerce")
    return frame


def load_readings(path: str | Path) -> pd.DataFrame:
    """Read a JSON array of raw records from disk."""

    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, list):
        raise ValueError(f"Readings file {path} must contain a JSON array of records")
    return readings_frame(payload)


def locations(frame: pd.DataFrame) -> list[str]:
    return sorted(str(name) for name in frame["location"].dropna().unique())


def location_series(frame: pd.DataFrame, location: str, variable: str) -> tuple[np.ndarray, np.ndarray]:
    """Return (timestamps, values) for one location, ordered by timestamp."""

    if variable not in VARIABLES:
        raise ValueError(f"Unknown variable '{variable}', expected one of {VARIABLES}")
    rows = frame.loc[frame["location"] == location, ["timestamp", variable]]
    rows = rows.sort_values("timestamp", kind="mergesort", na_position="last")
    valid = rows[variable].notna() & np.isfinite(rows[variable].astype(float))
    dropped = int((~valid).sum())
    if dropped:
        _LOG.warning("Dropped %d unparseable %s reading(s) for %s", dropped, variable, location)
    rows = rows[valid]
    return rows["timestamp"].to_numpy(dtype=float), rows[variable].to_numpy(dtype=float)


def sampling_interval_s(timestamps: Iterable[float]) -> float:
    """Median spacing between consecutive finite timestamps; NaN if undefined."""

    ts = np.sort(np.array([t for t in timestamps if np.isfinite(t)], dtype=float))
    if ts.size < 2:
        return float("nan")
    return float(np.median(np.diff(ts)))


def forecast_timestamps(timestamps: Iterable[float], horizon: int) -> tuple[int, ...]:
    """Future timestamps for ``horizon`` steps at the observed sampling cadence."""

    ts = [float(t) for t in timestamps if np.isfinite(t)]
    step = sampling_interval_s(ts)
    if not ts or not np.isfinite(step):
        return ()
    last = max(ts)
    return tuple(int(round(last + step * (i + 1))) for i in range(max(int(horizon), 0)))
