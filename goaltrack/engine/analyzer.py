"""Retroactive performance analysis.

Entry point for callers: resolves and validates the analysis window, then
runs projector -> comparator -> metrics and bundles the results.

Usage:
    result = analyze_goal_performance(goal, contributions)
    summary = get_quick_performance_summary(goal, contributions)
"""

import logging
from collections.abc import Iterable
from datetime import date

from goaltrack.core.exceptions import InvalidDateRangeError
from goaltrack.core.models import (
    AnalysisConfig,
    ContributionRecord,
    QuickPerformanceSummary,
    RetroactiveAnalysisResult,
    SavingsGoal,
)
from goaltrack.engine.comparator import compare_monthly_performance
from goaltrack.engine.metrics import calculate_performance_metrics
from goaltrack.engine.periods import complete_months_between
from goaltrack.engine.projector import generate_theoretical_contributions

logger = logging.getLogger(__name__)


def validate_date_range(start_date: date, end_date: date, today: date) -> None:
    """Check that an analysis window can be analyzed.

    Raises:
        InvalidDateRangeError: If start_date is after today or end_date
            is before start_date.
    """
    if start_date > today:
        raise InvalidDateRangeError(start_date, end_date, "start date is in the future")
    if end_date < start_date:
        raise InvalidDateRangeError(start_date, end_date, "end date is before start date")


def analyze_goal_performance(
    goal: SavingsGoal,
    contributions: Iterable[ContributionRecord],
    config: AnalysisConfig | None = None,
    today: date | None = None,
) -> RetroactiveAnalysisResult:
    """Compare a goal's actual contributions with its theoretical schedule.

    The window runs from the goal's start date to config.end_date, or to
    today when no end date is configured.

    Args:
        goal: Goal to analyze.
        contributions: Recorded contributions for the goal.
        config: Analysis options (end date, money context).
        today: Reference date for "now"; defaults to date.today().

    Returns:
        RetroactiveAnalysisResult with metrics, comparisons, the theoretical
        series and the resolved window.

    Raises:
        InvalidDateRangeError: If the window is invalid. Nothing is
            projected in that case.
    """
    config = config or AnalysisConfig()
    today = today or date.today()
    start_date = goal.start_date
    end_date = config.end_date or today

    validate_date_range(start_date, end_date, today)

    context = config.money.to_context()
    theoretical = generate_theoretical_contributions(
        start_date, goal.expected_monthly_amount, end_date, context
    )
    comparisons = compare_monthly_performance(contributions, theoretical, context)
    metrics = calculate_performance_metrics(comparisons, theoretical, context)

    logger.debug(
        "Analyzed goal %r from %s to %s: %d months",
        goal.name,
        start_date,
        end_date,
        metrics.months_analyzed,
    )

    return RetroactiveAnalysisResult(
        metrics=metrics,
        monthly_comparisons=comparisons,
        theoretical_contributions=theoretical,
        start_date=start_date,
        end_date=end_date,
    )


def get_quick_performance_summary(
    goal: SavingsGoal,
    contributions: Iterable[ContributionRecord],
    config: AnalysisConfig | None = None,
    today: date | None = None,
) -> QuickPerformanceSummary:
    """Small performance summary for previews. Never raises.

    Goals starting after today have no retroactive data and
    are answered without running the analysis. If the analysis fails the
    error is logged and an unavailable summary carrying the cause is
    returned instead.
    """
    today = today or date.today()

    if goal.start_date > today:
        return QuickPerformanceSummary(has_retroactive_data=False)

    try:
        analysis = analyze_goal_performance(goal, contributions, config, today)
    except Exception as e:
        logger.error("Error in quick performance summary for goal %r: %s", goal.name, e)
        return QuickPerformanceSummary(has_retroactive_data=False, unavailable_reason=str(e))

    return QuickPerformanceSummary(
        has_retroactive_data=True,
        period_description=get_period_description(goal.start_date, today),
        performance_percentage=analysis.metrics.performance_percentage,
        total_variance=analysis.metrics.total_variance,
    )


def get_period_description(start_date: date, end_date: date | None = None) -> str:
    """Human-readable elapsed time, e.g. "3 months" or "1 year and 2 months".

    Counts whole months only.
    """
    months = complete_months_between(start_date, end_date or date.today())

    if months <= 0:
        return "Less than 1 month"
    if months == 1:
        return "1 month"
    if months < 12:
        return f"{months} months"

    years, remaining = divmod(months, 12)
    year_label = "1 year" if years == 1 else f"{years} years"
    if remaining == 0:
        return year_label
    month_label = "1 month" if remaining == 1 else f"{remaining} months"
    return f"{year_label} and {month_label}"
