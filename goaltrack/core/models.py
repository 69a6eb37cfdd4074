"""Domain models for GoalTrack.

All data structures are defined here using Pydantic v2. Input models
(goal, contributions) coerce amounts leniently; derived models are frozen
and carry their sequences as tuples so an analysis result can be shared
but never mutated.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from goaltrack.core.money import (
    DEFAULT_MONEY,
    LenientAmount,
    MoneyContext,
    OptionalLenientAmount,
)


# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------


class GoalType(str, Enum):
    """How a goal measures completion.

    TARGET_BASED: Saving towards a fixed target amount.
    CONTINUOUS:   Open-ended saving with no completion point.
    """

    TARGET_BASED = "TARGET_BASED"
    CONTINUOUS = "CONTINUOUS"


class GoalStatus(str, Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    PAUSED = "PAUSED"
    CANCELLED = "CANCELLED"


class GoalCategory(str, Enum):
    DEBT_REPAYMENT = "DEBT_REPAYMENT"
    INVESTMENT = "INVESTMENT"
    PERSONAL = "PERSONAL"
    EMERGENCY_FUND = "EMERGENCY_FUND"
    OTHER = "OTHER"


class PerformanceStatus(str, Enum):
    """Classification of a single month against its theoretical amount."""

    AHEAD = "ahead"
    ON_TRACK = "on-track"
    BEHIND = "behind"
    NO_CONTRIBUTION = "no-contribution"


# -----------------------------------------------------------------------------
# Input Models
# -----------------------------------------------------------------------------


class SavingsGoal(BaseModel):
    """A savings objective.

    Attributes:
        id: Goal identifier from the persistence layer.
        name: Display name.
        goal_type: Target-based or continuous.
        start_date: First day the goal was active; analysis starts here.
        expected_monthly_amount: Amount that should be saved every month.
        target_amount: Amount to reach (ignored for continuous goals).
        current_balance: Running balance maintained by persistence.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str = Field(min_length=1)
    description: str | None = None
    goal_type: GoalType = GoalType.TARGET_BASED
    category: GoalCategory = GoalCategory.OTHER
    status: GoalStatus = GoalStatus.ACTIVE
    start_date: date
    target_date: date | None = None
    expected_monthly_amount: Annotated[LenientAmount, Field(gt=0)]
    target_amount: LenientAmount = Decimal(0)
    current_balance: LenientAmount = Decimal(0)


class ContributionRecord(BaseModel):
    """A recorded month for a goal.

    Unique per (year, month) for a goal; uniqueness is enforced by the
    persistence layer. actual_amount is None when nothing was recorded.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1)
    month: int = Field(ge=1, le=12)
    projected_amount: LenientAmount = Decimal(0)
    actual_amount: OptionalLenientAmount = None
    notes: str | None = None


class GoalFile(BaseModel):
    """A goal together with its contribution history (CLI input document)."""

    goal: SavingsGoal
    contributions: list[ContributionRecord] = Field(default_factory=list)


class AnalysisConfig(BaseModel):
    """Options for a retroactive analysis call.

    end_date overrides "today" as the end of the analysis window.
    status_tolerance is the band around 100% that counts as on-track
    when classifying months (0.10 = 90%..110%).
    """

    model_config = ConfigDict(frozen=True)

    end_date: date | None = None
    status_tolerance: Annotated[Decimal, Field(ge=0, lt=1)] = Decimal("0.10")
    money: MoneyContext = DEFAULT_MONEY


# -----------------------------------------------------------------------------
# Derived Models
# -----------------------------------------------------------------------------


class TheoreticalContribution(BaseModel):
    """What should have been saved in one month, and in total up to it."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    theoretical_amount: Decimal
    cumulative_theoretical: Decimal


class MonthlyPerformanceComparison(BaseModel):
    """Actual vs theoretical for one month.

    variance = actual - theoretical (positive = ahead of schedule).
    """

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    theoretical: Decimal
    actual: Decimal
    variance: Decimal
    is_on_track: bool
    performance_ratio: float


class MonthlyPerformanceIndicator(BaseModel):
    """Timeline marker for one month."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int
    status: PerformanceStatus
    percentage: int
    tooltip: str


class RetroactivePerformanceMetrics(BaseModel):
    """Summary statistics over all analyzed months.

    consistency_score is the share of months (in percent) with any
    actual contribution, not a variance-based score.
    """

    model_config = ConfigDict(frozen=True)

    total_theoretical: Decimal
    total_actual: Decimal
    total_variance: Decimal
    performance_percentage: float
    months_analyzed: int
    months_on_track: int
    consistency_score: float


class RetroactiveAnalysisResult(BaseModel):
    """Complete output of analyze_goal_performance."""

    model_config = ConfigDict(frozen=True)

    metrics: RetroactivePerformanceMetrics
    monthly_comparisons: tuple[MonthlyPerformanceComparison, ...]
    theoretical_contributions: tuple[TheoreticalContribution, ...]
    start_date: date
    end_date: date


class QuickPerformanceSummary(BaseModel):
    """Preview-sized summary of a goal's retroactive performance.

    When has_retroactive_data is False the other fields are None;
    unavailable_reason is set only when the analysis failed.
    """

    model_config = ConfigDict(frozen=True)

    has_retroactive_data: bool
    period_description: str | None = None
    performance_percentage: float | None = None
    total_variance: Decimal | None = None
    unavailable_reason: str | None = Field(default=None, exclude=True)

    @property
    def is_unavailable(self) -> bool:
        """True when the analysis was attempted and failed."""
        return self.unavailable_reason is not None
