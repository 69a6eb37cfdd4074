"""Tests for CSV export."""

from datetime import date

from goaltrack.core.models import AnalysisConfig
from goaltrack.engine.analyzer import analyze_goal_performance
from goaltrack.export import export_goal_summary, export_retroactive_analysis, generate_filename
from tests.helpers import TODAY, make_contribution, make_goal

CONTRIBUTIONS = [
    make_contribution(2024, 1, "500.00"),
    make_contribution(2024, 3, "600.00"),
]


def _analysis(goal):
    return analyze_goal_performance(
        goal, CONTRIBUTIONS, AnalysisConfig(end_date=date(2024, 3, 31)), today=TODAY
    )


class TestExportRetroactiveAnalysis:
    """Tests for export_retroactive_analysis."""

    def test_rows(self) -> None:
        """Test header and one row per month with running totals."""
        goal = make_goal()
        lines = export_retroactive_analysis(goal, _analysis(goal)).split("\n")

        assert lines[0] == (
            "Goal Name,Year,Month,Month Name,Theoretical Amount,Actual Amount,"
            "Variance,Performance %,Status,Cumulative Theoretical,Cumulative Actual"
        )
        assert lines[1] == "Emergency fund,2024,1,January,500.00,500.00,0.00,100.0,On Track,500.00,500.00"
        assert lines[2] == "Emergency fund,2024,2,February,500.00,0.00,-500.00,0.0,No Contribution,1000.00,500.00"
        assert lines[3] == "Emergency fund,2024,3,March,500.00,600.00,100.00,120.0,Ahead,1500.00,1100.00"
        assert len(lines) == 4

    def test_quotes_names_with_commas(self) -> None:
        """Test goal names with commas are quoted."""
        goal = make_goal(name='House, "big" one')
        lines = export_retroactive_analysis(goal, _analysis(goal)).split("\n")
        assert lines[1].startswith('"House, ""big"" one",2024,1,')


class TestExportGoalSummary:
    """Tests for export_goal_summary."""

    def test_summary_rows(self) -> None:
        """Test goal facts, metrics and status breakdown."""
        goal = make_goal()
        lines = export_goal_summary(goal, _analysis(goal)).split("\n")

        assert lines[0] == "Metric,Value"
        assert "Goal Name,Emergency fund" in lines
        assert "Expected Monthly Amount,500.00" in lines
        assert "Analysis Period,2024-01-01 to 2024-03-31" in lines
        assert "Total Theoretical,1500.00" in lines
        assert "Total Actual,1100.00" in lines
        assert "Total Variance,-400.00" in lines
        assert "Performance Percentage,73.3%" in lines
        assert "Months On Track,2" in lines
        assert "Consistency Score,66.7%" in lines
        assert lines[-3:] == [
            "On Track Months,1",
            "No Contribution Months,1",
            "Ahead Months,1",
        ]


class TestGenerateFilename:
    """Tests for generate_filename."""

    def test_sanitizes_name(self) -> None:
        """Test non-alphanumeric characters become underscores."""
        assert generate_filename("My Goal!", "analysis", TODAY) == "My_Goal__analysis_2024-04-15.csv"
