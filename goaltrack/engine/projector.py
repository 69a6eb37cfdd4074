"""Theoretical savings trajectory.

Builds the month-by-month schedule a goal would have followed had the
expected monthly amount been saved exactly on time since the start date.
"""

from collections.abc import Iterator
from datetime import date
from decimal import Context, Decimal

from goaltrack.core import money
from goaltrack.core.models import TheoreticalContribution
from goaltrack.engine.periods import complete_months_between, iterate_months


def iter_theoretical_contributions(
    start_date: date,
    expected_monthly_amount: Decimal,
    end_date: date,
    context: Context = money.DEFAULT_CONTEXT,
) -> Iterator[TheoreticalContribution]:
    """Lazily yield one theoretical contribution per month.

    Both dates are truncated to the first day of their month and the range
    is inclusive on both ends. Yields nothing when start's month is after
    end's month; a single entry when both fall in the same month.

    Args:
        start_date: Goal start date.
        expected_monthly_amount: Flat amount expected every month.
        end_date: Last date of the analysis window.
        context: Decimal context for the running total.

    Yields:
        TheoreticalContribution with the running cumulative total.
    """
    cumulative = money.ZERO
    for month in iterate_months(start_date, end_date):
        cumulative = money.add(cumulative, expected_monthly_amount, context)
        yield TheoreticalContribution(
            year=month.year,
            month=month.month,
            theoretical_amount=expected_monthly_amount,
            cumulative_theoretical=cumulative,
        )


def generate_theoretical_contributions(
    start_date: date,
    expected_monthly_amount: Decimal,
    end_date: date,
    context: Context = money.DEFAULT_CONTEXT,
) -> tuple[TheoreticalContribution, ...]:
    """Materialized form of iter_theoretical_contributions."""
    return tuple(
        iter_theoretical_contributions(
            start_date, expected_monthly_amount, end_date, context
        )
    )


def calculate_theoretical_balance(
    start_date: date,
    expected_monthly_amount: Decimal,
    end_date: date,
    context: Context = money.DEFAULT_CONTEXT,
) -> Decimal:
    """Balance expected after the complete months elapsed since start.

    Only whole months count: a goal started 2.7 months ago is expected to
    hold 2 monthly amounts. Zero when no full month has elapsed.
    """
    months = complete_months_between(start_date, end_date)
    if months <= 0:
        return money.ZERO
    return money.multiply(expected_monthly_amount, Decimal(months), context)
