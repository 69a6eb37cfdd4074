"""Tests for the CLI commands."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from goaltrack import __version__
from goaltrack.cli.main import app

runner = CliRunner()


def _write_goal_file(
    path: Path,
    start_date: str = "2024-01-01",
    goal_type: str = "TARGET_BASED",
) -> Path:
    document = {
        "goal": {
            "name": "Emergency fund",
            "goal_type": goal_type,
            "start_date": start_date,
            "expected_monthly_amount": "500.00",
            "target_amount": "6000.00",
            "current_balance": "1000.00",
        },
        "contributions": [
            {"year": 2024, "month": 1, "projected_amount": "500.00", "actual_amount": "500.00"},
            {"year": 2024, "month": 2, "projected_amount": "500.00", "actual_amount": "500.00"},
            {"year": 2024, "month": 3, "projected_amount": "500.00", "actual_amount": "500.00"},
        ],
    }
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def goal_file(tmp_path: Path) -> Path:
    return _write_goal_file(tmp_path / "goal.json")


class TestAnalyzeCommand:
    """Tests for 'goaltrack analyze'."""

    def test_analyze(self, goal_file: Path) -> None:
        """Test metrics are printed for a valid window."""
        result = runner.invoke(
            app,
            ["analyze", str(goal_file), "--today", "2024-04-15", "--end-date", "2024-03-31"],
        )
        assert result.exit_code == 0, result.output
        assert "Emergency fund" in result.output
        assert "100.0%" in result.output
        assert "3/3" in result.output
        assert "Monthly Breakdown" in result.output

    def test_no_monthly_table(self, goal_file: Path) -> None:
        """Test --no-monthly hides the table."""
        result = runner.invoke(
            app,
            ["analyze", str(goal_file), "--today", "2024-04-15", "--no-monthly"],
        )
        assert result.exit_code == 0, result.output
        assert "Monthly Breakdown" not in result.output

    def test_goal_progress(self, goal_file: Path) -> None:
        """Test progress, target date and projected balance are shown."""
        result = runner.invoke(app, ["analyze", str(goal_file), "--today", "2024-04-15"])
        assert result.exit_code == 0, result.output
        # 1000 of 6000, then 5000 left at 500/month
        assert "16.7%" in result.output
        assert "2025-02-15" in result.output
        assert "$7,000.00" in result.output

    def test_continuous_goal_has_no_target(self, tmp_path: Path) -> None:
        """Test continuous goals show the projection but no target."""
        path = _write_goal_file(tmp_path / "goal.json", goal_type="CONTINUOUS")
        result = runner.invoke(app, ["analyze", str(path), "--today", "2024-04-15"])
        assert result.exit_code == 0, result.output
        assert "Continuous goal" in result.output
        assert "Target date" not in result.output
        assert "$7,000.00" in result.output

    def test_future_start_fails(self, tmp_path: Path) -> None:
        """Test an invalid date range exits with an error."""
        path = _write_goal_file(tmp_path / "goal.json", start_date="2024-05-01")
        result = runner.invoke(app, ["analyze", str(path), "--today", "2024-04-15"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a missing goal file exits with an error."""
        result = runner.invoke(app, ["analyze", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Cannot read goal file" in result.output

    def test_invalid_file(self, tmp_path: Path) -> None:
        """Test a goal file failing validation exits with an error."""
        path = tmp_path / "goal.json"
        path.write_text(json.dumps({"goal": {"name": "x"}}), encoding="utf-8")
        result = runner.invoke(app, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "Invalid goal file" in result.output


class TestSummaryCommand:
    """Tests for 'goaltrack summary'."""

    def test_summary(self, goal_file: Path) -> None:
        """Test summary for a running goal."""
        result = runner.invoke(app, ["summary", str(goal_file), "--today", "2024-04-15"])
        assert result.exit_code == 0, result.output
        assert "3 months" in result.output
        assert "75.0%" in result.output

    def test_summary_not_started(self, tmp_path: Path) -> None:
        """Test goals that have not started report no data."""
        path = _write_goal_file(tmp_path / "goal.json", start_date="2024-05-01")
        result = runner.invoke(app, ["summary", str(path), "--today", "2024-04-15"])
        assert result.exit_code == 0
        assert "No retroactive data" in result.output


class TestExportCommand:
    """Tests for 'goaltrack export'."""

    def test_export_analysis(self, goal_file: Path, tmp_path: Path) -> None:
        """Test analysis CSV is written to the given path."""
        output = tmp_path / "out" / "analysis.csv"
        result = runner.invoke(
            app,
            [
                "export", str(goal_file),
                "--today", "2024-04-15",
                "--end-date", "2024-03-31",
                "--output", str(output),
            ],
        )
        assert result.exit_code == 0, result.output
        lines = output.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("Goal Name,Year,Month")
        assert len(lines) == 4

    def test_export_summary_default_filename(self, goal_file: Path, tmp_path: Path, monkeypatch) -> None:
        """Test summary CSV uses the generated filename."""
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(
            app,
            ["export", str(goal_file), "--kind", "summary", "--today", "2024-04-15"],
        )
        assert result.exit_code == 0, result.output
        content = (tmp_path / "Emergency_fund_summary_2024-04-15.csv").read_text(encoding="utf-8")
        assert content.startswith("Metric,Value")


class TestVersion:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
