"""Builders shared by GoalTrack tests."""

from datetime import date
from decimal import Decimal

from goaltrack.core.models import ContributionRecord, SavingsGoal

TODAY = date(2024, 4, 15)


def make_goal(**overrides: object) -> SavingsGoal:
    """Build a goal with sensible defaults."""
    fields: dict[str, object] = {
        "id": "goal-1",
        "name": "Emergency fund",
        "start_date": date(2024, 1, 1),
        "expected_monthly_amount": Decimal("500.00"),
        "target_amount": Decimal("6000.00"),
        "current_balance": Decimal("1000.00"),
    }
    fields.update(overrides)
    return SavingsGoal(**fields)


def make_contribution(
    year: int,
    month: int,
    actual: str | None,
    projected: str = "500.00",
) -> ContributionRecord:
    """Build a contribution record; actual=None means nothing recorded."""
    return ContributionRecord(
        year=year,
        month=month,
        projected_amount=Decimal(projected),
        actual_amount=Decimal(actual) if actual is not None else None,
    )
