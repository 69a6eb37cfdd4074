"""Month-by-month comparison of actual vs theoretical contributions."""

import calendar
import math
from collections.abc import Iterable, Sequence
from decimal import Context, Decimal

from goaltrack.core import money
from goaltrack.core.models import (
    ContributionRecord,
    MonthlyPerformanceComparison,
    MonthlyPerformanceIndicator,
    PerformanceStatus,
    TheoreticalContribution,
)

DEFAULT_STATUS_TOLERANCE = Decimal("0.10")


def calculate_performance_ratio(
    actual: Decimal,
    theoretical: Decimal,
    context: Context = money.DEFAULT_CONTEXT,
) -> float:
    """actual / theoretical as a float.

    Falls back to 1.0 when theoretical is not positive but something was
    contributed, and 0.0 when neither was.
    """
    if money.is_positive(theoretical):
        return float(money.divide(actual, theoretical, context))
    if money.is_positive(actual):
        return 1.0
    return 0.0


def compare_monthly_performance(
    actual_contributions: Iterable[ContributionRecord],
    theoretical_contributions: Sequence[TheoreticalContribution],
    context: Context = money.DEFAULT_CONTEXT,
) -> tuple[MonthlyPerformanceComparison, ...]:
    """Merge actual contributions into the theoretical schedule.

    Records without an actual amount are left out of the lookup, so every
    month without a recorded amount defaults to zero in the same way.
    The result has exactly one entry per theoretical month, in the
    theoretical order.

    Args:
        actual_contributions: Contribution records in any order, unique
            per (year, month).
        theoretical_contributions: Output of the projector.
        context: Decimal context for variance and ratio.

    Returns:
        One MonthlyPerformanceComparison per theoretical month.
    """
    actual_by_month: dict[tuple[int, int], Decimal] = {
        (record.year, record.month): record.actual_amount
        for record in actual_contributions
        if record.actual_amount is not None
    }

    comparisons = []
    for theoretical in theoretical_contributions:
        actual = actual_by_month.get((theoretical.year, theoretical.month), money.ZERO)
        expected = theoretical.theoretical_amount
        variance = money.subtract(actual, expected, context)

        comparisons.append(
            MonthlyPerformanceComparison(
                year=theoretical.year,
                month=theoretical.month,
                theoretical=expected,
                actual=actual,
                variance=variance,
                is_on_track=money.is_non_negative(variance),
                performance_ratio=calculate_performance_ratio(actual, expected, context),
            )
        )
    return tuple(comparisons)


def get_month_performance_status(
    actual: Decimal,
    theoretical: Decimal,
    tolerance: Decimal = DEFAULT_STATUS_TOLERANCE,
    context: Context = money.DEFAULT_CONTEXT,
) -> PerformanceStatus:
    """Classify a month.

    Status rules:
        - nothing contributed           -> NO_CONTRIBUTION
        - ratio >= 1 + tolerance        -> AHEAD
        - ratio >= 1 - tolerance        -> ON_TRACK
        - otherwise                     -> BEHIND

    A positive contribution against a zero theoretical amount is AHEAD.
    """
    if money.is_zero(actual):
        return PerformanceStatus.NO_CONTRIBUTION
    if not money.is_positive(theoretical):
        return PerformanceStatus.AHEAD

    ratio = money.divide(actual, theoretical, context)
    if ratio >= 1 + tolerance:
        return PerformanceStatus.AHEAD
    if ratio >= 1 - tolerance:
        return PerformanceStatus.ON_TRACK
    return PerformanceStatus.BEHIND


def generate_performance_indicators(
    comparisons: Iterable[MonthlyPerformanceComparison],
    tolerance: Decimal = DEFAULT_STATUS_TOLERANCE,
    context: Context = money.DEFAULT_CONTEXT,
) -> tuple[MonthlyPerformanceIndicator, ...]:
    """Timeline markers for each compared month.

    The tooltip reads e.g. "Jan 2024: 80% of target (400.00 / 500.00)".
    """
    indicators = []
    for comparison in comparisons:
        percentage = math.floor(comparison.performance_ratio * 100 + 0.5)
        tooltip = (
            f"{calendar.month_abbr[comparison.month]} {comparison.year}: "
            f"{percentage}% of target "
            f"({money.to_fixed(comparison.actual)} / {money.to_fixed(comparison.theoretical)})"
        )
        indicators.append(
            MonthlyPerformanceIndicator(
                year=comparison.year,
                month=comparison.month,
                status=get_month_performance_status(
                    comparison.actual, comparison.theoretical, tolerance, context
                ),
                percentage=percentage,
                tooltip=tooltip,
            )
        )
    return tuple(indicators)
