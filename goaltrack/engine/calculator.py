"""Goal-level calculations.

Projections towards a goal's target and the per-contribution
consistency score. Target handling branches on GoalType: continuous
goals have no completion point, so target dates and progress are None.
"""

import math
from collections.abc import Iterable
from datetime import date
from decimal import ROUND_HALF_UP, Context, Decimal

from goaltrack.core import money
from goaltrack.core.models import ContributionRecord, GoalType, SavingsGoal
from goaltrack.engine.periods import add_months


def calculate_variance(
    actual: Decimal,
    projected: Decimal,
    context: Context = money.DEFAULT_CONTEXT,
) -> Decimal:
    """Calculate variance between actual and projected.

    Positive = saved more than projected (ahead)
    Negative = saved less than projected (behind)
    """
    return money.subtract(actual, projected, context)


def calculate_contribution_consistency_score(
    contributions: Iterable[ContributionRecord],
    context: Context = money.DEFAULT_CONTEXT,
) -> int:
    """Consistency of recorded contributions against their projections.

    This is the variance-based score: 100 minus the mean absolute
    difference between actual and projected amounts, floored at 0 and
    rounded half up. It is unrelated to the month-coverage
    consistency_score in RetroactivePerformanceMetrics.

    Args:
        contributions: Contribution records; only those with an actual
            amount are scored.
        context: Decimal context for the averaging.

    Returns:
        Score between 0 and 100. 0 when no contribution has an actual amount.
    """
    variances = [
        abs(calculate_variance(record.actual_amount, record.projected_amount, context))
        for record in contributions
        if record.actual_amount is not None
    ]
    if not variances:
        return 0

    average = money.divide(money.total(variances, context), Decimal(len(variances)), context)
    score = money.max_amount(money.ZERO, money.subtract(money.HUNDRED, average, context))
    return int(score.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def calculate_monthly_projections(
    current_balance: Decimal,
    monthly_contribution: Decimal,
    months: int,
    context: Context = money.DEFAULT_CONTEXT,
) -> list[Decimal]:
    """Projected balance at the end of each of the next `months` months."""
    projections = []
    balance = current_balance
    for _ in range(months):
        balance = money.add(balance, monthly_contribution, context)
        projections.append(balance)
    return projections


def calculate_months_to_target(
    goal: SavingsGoal,
    context: Context = money.DEFAULT_CONTEXT,
) -> int | None:
    """Whole months of expected contributions needed to reach the target.

    Returns:
        None for continuous goals, 0 when the target is already reached.
    """
    if goal.goal_type == GoalType.CONTINUOUS:
        return None
    if not money.is_positive(goal.expected_monthly_amount):
        return None

    remaining = money.subtract(goal.target_amount, goal.current_balance, context)
    if not money.is_positive(remaining):
        return 0
    return math.ceil(money.divide(remaining, goal.expected_monthly_amount, context))


def calculate_target_date(
    goal: SavingsGoal,
    today: date,
    context: Context = money.DEFAULT_CONTEXT,
) -> date | None:
    """Date the target is reached if the expected amount is saved monthly.

    Returns:
        None for continuous goals, today when the target is already met.
    """
    months = calculate_months_to_target(goal, context)
    if months is None:
        return None
    return add_months(today, months)


def calculate_progress_percentage(
    goal: SavingsGoal,
    context: Context = money.DEFAULT_CONTEXT,
) -> float | None:
    """Current balance as a percentage of the target.

    None for continuous goals; 0 for a zero target.
    """
    if goal.goal_type == GoalType.CONTINUOUS:
        return None
    return float(money.percentage(goal.current_balance, goal.target_amount, context))
