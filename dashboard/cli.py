"""Unified CLI entrypoint.

Runs the statistics engine headlessly over a readings file and writes
per-location JSON plus a combined CSV summary.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from envstats.config import AnalysisConfig, load_analysis_config
from envstats.utils.logging import get_logger


def _cmd_analyze(args: argparse.Namespace) -> None:
    from dashboard.analysis_runner import run_analysis

    level = logging.DEBUG if args.verbose else logging.INFO
    get_logger("envstats", level)
    log = get_logger("dashboard", level)

    readings = Path(args.readings)
    if not readings.exists():
        raise SystemExit(f"Readings file not found: {readings}")

    try:
        cfg = load_analysis_config(args.config) if args.config else AnalysisConfig()
        overrides = {
            "location": args.location,
            "histogram_bins": args.bins,
            "forecast_horizon": args.horizon,
            "alpha": args.alpha,
        }
        cfg = replace(cfg, **{key: value for key, value in overrides.items() if value is not None})
        rows = run_analysis(readings, out_dir=Path(args.out_dir), config=cfg)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if not rows:
        raise SystemExit(f"No locations found in {readings}")
    log.info("Analysed %d location/variable series into %s", len(rows), args.out_dir)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envstats", description="Sensor readings statistics runner")
    sub = parser.add_subparsers(dest="cmd", required=True)

    analyze = sub.add_parser("analyze", help="Analyse a JSON readings file (headless)")
    analyze.add_argument("--readings", required=True, help="Path to a JSON array of sensor records")
    analyze.add_argument("--config", type=str, default=None, help="Optional AnalysisConfig JSON file")
    analyze.add_argument("--location", type=str, default=None, help="Only analyse this location")
    analyze.add_argument("--out-dir", type=str, default="out", help="Root folder for summaries")
    analyze.add_argument("--bins", type=int, default=None, help="Histogram bin count")
    analyze.add_argument("--horizon", type=int, default=None, help="Forecast steps")
    analyze.add_argument("--alpha", type=float, default=None, help="Normality significance level")
    analyze.add_argument("--verbose", action="store_true", help="Enable debug logging")
    analyze.set_defaults(func=_cmd_analyze)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
