"""Reduction of monthly comparisons into summary metrics."""

from collections.abc import Sequence
from decimal import Context, Decimal

from goaltrack.core import money
from goaltrack.core.models import (
    MonthlyPerformanceComparison,
    PerformanceStatus,
    RetroactivePerformanceMetrics,
    TheoreticalContribution,
)
from goaltrack.engine.comparator import (
    DEFAULT_STATUS_TOLERANCE,
    get_month_performance_status,
)


def calculate_performance_metrics(
    comparisons: Sequence[MonthlyPerformanceComparison],
    theoretical_contributions: Sequence[TheoreticalContribution],
    context: Context = money.DEFAULT_CONTEXT,
) -> RetroactivePerformanceMetrics:
    """Calculate overall metrics from monthly comparisons.

    performance_percentage is 0 when nothing was expected, whatever was
    actually saved. consistency_score is the percentage of months with a
    positive actual contribution.

    Args:
        comparisons: Output of compare_monthly_performance.
        theoretical_contributions: Output of the projector.
        context: Decimal context for totals.

    Returns:
        RetroactivePerformanceMetrics.
    """
    total_theoretical = money.total(
        (tc.theoretical_amount for tc in theoretical_contributions), context
    )
    total_actual = money.total((c.actual for c in comparisons), context)
    total_variance = money.subtract(total_actual, total_theoretical, context)

    performance_percentage = (
        float(money.percentage(total_actual, total_theoretical, context))
        if money.is_positive(total_theoretical)
        else 0.0
    )

    months_analyzed = len(comparisons)
    months_on_track = sum(1 for c in comparisons if c.is_on_track)
    months_with_contributions = sum(1 for c in comparisons if money.is_positive(c.actual))
    consistency_score = (
        months_with_contributions / months_analyzed * 100 if months_analyzed > 0 else 0.0
    )

    return RetroactivePerformanceMetrics(
        total_theoretical=total_theoretical,
        total_actual=total_actual,
        total_variance=total_variance,
        performance_percentage=performance_percentage,
        months_analyzed=months_analyzed,
        months_on_track=months_on_track,
        consistency_score=consistency_score,
    )


def calculate_status_breakdown(
    comparisons: Sequence[MonthlyPerformanceComparison],
    tolerance: Decimal = DEFAULT_STATUS_TOLERANCE,
    context: Context = money.DEFAULT_CONTEXT,
) -> dict[PerformanceStatus, int]:
    """Count months per status, in order of first appearance."""
    breakdown: dict[PerformanceStatus, int] = {}
    for comparison in comparisons:
        status = get_month_performance_status(
            comparison.actual, comparison.theoretical, tolerance, context
        )
        breakdown[status] = breakdown.get(status, 0) + 1
    return breakdown
