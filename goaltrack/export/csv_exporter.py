"""CSV serialization of analysis results.

Two documents are produced:
1. Analysis - one row per analyzed month with running totals
2. Summary  - Metric/Value pairs: goal facts, metrics, status breakdown
"""

import calendar
import csv
import io
import re
from datetime import date
from decimal import Decimal

from goaltrack.core import money
from goaltrack.core.models import (
    PerformanceStatus,
    RetroactiveAnalysisResult,
    SavingsGoal,
)
from goaltrack.engine.comparator import (
    DEFAULT_STATUS_TOLERANCE,
    get_month_performance_status,
)
from goaltrack.engine.metrics import calculate_status_breakdown

ANALYSIS_HEADERS = [
    "Goal Name",
    "Year",
    "Month",
    "Month Name",
    "Theoretical Amount",
    "Actual Amount",
    "Variance",
    "Performance %",
    "Status",
    "Cumulative Theoretical",
    "Cumulative Actual",
]

STATUS_LABELS = {
    PerformanceStatus.AHEAD: "Ahead",
    PerformanceStatus.ON_TRACK: "On Track",
    PerformanceStatus.BEHIND: "Behind",
    PerformanceStatus.NO_CONTRIBUTION: "No Contribution",
}


def _to_csv(rows: list[list[str]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def export_retroactive_analysis(
    goal: SavingsGoal,
    analysis: RetroactiveAnalysisResult,
    tolerance: Decimal = DEFAULT_STATUS_TOLERANCE,
) -> str:
    """Export monthly comparisons as CSV, one row per month.

    Args:
        goal: The analyzed goal (for the name column).
        analysis: Result of analyze_goal_performance.
        tolerance: Band used to label months On Track.

    Returns:
        CSV text with a header row.
    """
    rows = [ANALYSIS_HEADERS]
    cumulative_actual = money.ZERO

    for comparison, theoretical in zip(
        analysis.monthly_comparisons, analysis.theoretical_contributions
    ):
        cumulative_actual = money.add(cumulative_actual, comparison.actual)
        status = get_month_performance_status(
            comparison.actual, comparison.theoretical, tolerance
        )
        rows.append([
            goal.name,
            str(comparison.year),
            str(comparison.month),
            calendar.month_name[comparison.month],
            money.to_fixed(comparison.theoretical),
            money.to_fixed(comparison.actual),
            money.to_fixed(comparison.variance),
            f"{comparison.performance_ratio * 100:.1f}",
            STATUS_LABELS[status],
            money.to_fixed(theoretical.cumulative_theoretical),
            money.to_fixed(cumulative_actual),
        ])

    return _to_csv(rows)


def export_goal_summary(
    goal: SavingsGoal,
    analysis: RetroactiveAnalysisResult,
    tolerance: Decimal = DEFAULT_STATUS_TOLERANCE,
) -> str:
    """Export goal facts and aggregate metrics as Metric/Value CSV."""
    metrics = analysis.metrics
    rows = [
        ["Metric", "Value"],
        ["Goal Name", goal.name],
        ["Description", goal.description or ""],
        ["Target Amount", money.to_fixed(goal.target_amount)],
        ["Current Balance", money.to_fixed(goal.current_balance)],
        ["Expected Monthly Amount", money.to_fixed(goal.expected_monthly_amount)],
        ["Start Date", goal.start_date.isoformat()],
        [
            "Analysis Period",
            f"{analysis.start_date.isoformat()} to {analysis.end_date.isoformat()}",
        ],
        ["", ""],
        ["=== PERFORMANCE METRICS ===", ""],
        ["Total Theoretical", money.to_fixed(metrics.total_theoretical)],
        ["Total Actual", money.to_fixed(metrics.total_actual)],
        ["Total Variance", money.to_fixed(metrics.total_variance)],
        ["Performance Percentage", f"{metrics.performance_percentage:.1f}%"],
        ["Months Analyzed", str(metrics.months_analyzed)],
        ["Months On Track", str(metrics.months_on_track)],
        ["Consistency Score", f"{metrics.consistency_score:.1f}%"],
        ["", ""],
        ["=== STATUS BREAKDOWN ===", ""],
    ]

    breakdown = calculate_status_breakdown(analysis.monthly_comparisons, tolerance)
    for status, count in breakdown.items():
        rows.append([f"{STATUS_LABELS[status]} Months", str(count)])

    return _to_csv(rows)


def generate_filename(goal_name: str, kind: str, today: date | None = None) -> str:
    """Build '<goal>_<kind>_<YYYY-MM-DD>.csv' with non-alphanumerics replaced by '_'."""
    today = today or date.today()
    sanitized = re.sub(r"[^a-zA-Z0-9]", "_", goal_name)
    return f"{sanitized}_{kind}_{today.isoformat()}.csv"
