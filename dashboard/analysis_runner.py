"""Batch analysis of sensor readings per location."""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

import pandas as pd

from envstats.config import AnalysisConfig
from envstats.readings import load_readings, location_series, locations
from envstats.report import SUMMARY_CSV_COLUMNS, VariableReport, analyze_variable, report_to_dict, sanitize_json, summary_row

_LOG = logging.getLogger(__name__)


def run_analysis(
    readings_path: Path,
    *,
    out_dir: Path = Path("out"),
    config: AnalysisConfig | None = None,
) -> list[dict[str, Any]]:
    """Analyse every configured location and write summary.json / summary.csv."""

    cfg = config or AnalysisConfig()
    cfg.validate()
    frame = load_readings(readings_path)
    names = [cfg.location] if cfg.location else locations(frame)

    analysed: list[tuple[str, list[VariableReport]]] = []
    for location in names:
        reports = analyze_location(frame, location, cfg)
        if all(report.summary.count == 0 for report in reports):
            if cfg.location:
                raise ValueError(f"No readings for location '{location}' in {readings_path}")
            _LOG.warning("Skipping location '%s': no numeric readings", location)
            continue
        analysed.append((location, reports))

    out_dir.mkdir(parents=True, exist_ok=True)
    rows: list[dict[str, Any]] = []
    for location, reports in analysed:
        location_dir = out_dir / _slugify(location)
        location_dir.mkdir(parents=True, exist_ok=True)
        payload = {
            "location": location,
            "config": asdict(cfg),
            "variables": {report.variable: report_to_dict(report) for report in reports},
        }
        summary_path = location_dir / "summary.json"
        summary_path.write_text(json.dumps(sanitize_json(payload), indent=2, allow_nan=False))
        _LOG.info("Wrote %s", summary_path)
        for report in reports:
            row = summary_row(report)
            _append_summary_csv(out_dir / "summary.csv", row)
            rows.append(row)
    return rows


def analyze_location(frame: pd.DataFrame, location: str, cfg: AnalysisConfig) -> list[VariableReport]:
    temp_ts, temp = location_series(frame, location, "temperature")
    hum_ts, hum = location_series(frame, location, "humidity")
    _LOG.debug("%s: %d temperature, %d humidity readings", location, temp.size, hum.size)
    band = (float(cfg.humidity_band[0]), float(cfg.humidity_band[1]))
    return [
        analyze_variable(
            location,
            "temperature",
            temp,
            cfg,
            threshold=cfg.temperature_threshold,
            timestamps=temp_ts,
        ),
        analyze_variable(
            location,
            "humidity",
            hum,
            cfg,
            threshold=band[1],
            band=band,
            timestamps=hum_ts,
        ),
    ]


def _append_summary_csv(path: Path, row: dict[str, Any]) -> None:
    write_header = not path.exists()
    with path.open("a", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=SUMMARY_CSV_COLUMNS)
        if write_header:
            writer.writeheader()
        writer.writerow({key: row.get(key) for key in SUMMARY_CSV_COLUMNS})


def _slugify(name: str) -> str:
    return "".join(char if char.isalnum() or char in "-_." else "_" for char in name.lower())
