"""Shared fixtures for GoalTrack tests."""

import pytest

from goaltrack.core.models import ContributionRecord, SavingsGoal
from tests.helpers import make_contribution, make_goal


@pytest.fixture
def goal() -> SavingsGoal:
    return make_goal()


@pytest.fixture
def full_contributions() -> list[ContributionRecord]:
    """500 saved in each of Jan-Mar 2024."""
    return [
        make_contribution(2024, 1, "500.00"),
        make_contribution(2024, 2, "500.00"),
        make_contribution(2024, 3, "500.00"),
    ]
