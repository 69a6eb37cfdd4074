"""Shared helpers for CLI commands."""

from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from goaltrack.core import money
from goaltrack.core.exceptions import GoalFileError
from goaltrack.core.models import GoalFile


def format_currency(amount: Decimal, currency: str = "$") -> str:
    """Format an amount with thousands separators, e.g. -$1,234.50."""
    value = Decimal(money.to_fixed(amount))
    sign = "-" if value < 0 else ""
    return f"{sign}{currency}{abs(value):,.2f}"


def format_percentage(value: float, places: int = 1) -> str:
    """Format a percentage value, e.g. 33.3%."""
    return f"{value:.{places}f}%"


def load_goal_file(path: Path) -> GoalFile:
    """Read and validate a JSON goal file.

    Raises:
        GoalFileError: If the file is missing or does not validate.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GoalFileError(f"Cannot read goal file {path}: {e.strerror or e}") from e

    try:
        return GoalFile.model_validate_json(raw)
    except ValidationError as e:
        raise GoalFileError(f"Invalid goal file {path}:\n{e}") from e
