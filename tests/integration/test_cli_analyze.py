from __future__ import annotations

import json
import subprocess
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[2]


def _run_cli(*args: str) -> subprocess.CompletedProcess:
    cmd = [sys.executable, "-m", "dashboard.cli", *args]
    return subprocess.run(cmd, cwd=REPO_ROOT, capture_output=True, text=True)


@pytest.mark.integration
def test_cli_analyze_writes_summaries(tmp_path: Path) -> None:
    readings = tmp_path / "readings.json"
    readings.write_text(
        json.dumps(
            [
                {"location": "Bedroom", "temperature": str(22 + i % 4), "humidity": str(45 + i), "timestamp": 600 * i}
                for i in range(10)
            ]
        )
    )
    out_dir = tmp_path / "out"

    result = _run_cli("analyze", "--readings", str(readings), "--out-dir", str(out_dir), "--bins", "4")

    assert result.returncode == 0, result.stderr
    summary = json.loads((out_dir / "bedroom" / "summary.json").read_text())
    assert summary["config"]["histogram_bins"] == 4
    assert len(summary["variables"]["humidity"]["histogram"]["counts"]) == 4
    assert (out_dir / "summary.csv").exists()


@pytest.mark.integration
def test_cli_reports_missing_readings_file(tmp_path: Path) -> None:
    result = _run_cli("analyze", "--readings", str(tmp_path / "missing.json"))

    assert result.returncode != 0
    assert "Readings file not found" in result.stderr


@pytest.mark.integration
def test_cli_rejects_location_without_readings(tmp_path: Path) -> None:
    readings = tmp_path / "readings.json"
    readings.write_text(
        json.dumps([{"location": "Bedroom", "temperature": "22", "humidity": "45", "timestamp": 600 * i} for i in range(5)])
    )
    out_dir = tmp_path / "out"

    result = _run_cli("analyze", "--readings", str(readings), "--out-dir", str(out_dir), "--location", "Kitchen")

    assert result.returncode != 0
    assert "No readings for location 'Kitchen'" in result.stderr
    assert not (out_dir / "kitchen" / "summary.json").exists()
