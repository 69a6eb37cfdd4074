"""Exact decimal arithmetic for money values.

All amounts are ``decimal.Decimal``. Arithmetic goes through an explicit
``decimal.Context`` built from ``MoneyContext`` instead of the thread-local
default context, so precision and rounding never depend on global state.

Defaults:
    precision:      28 significant digits
    rounding:       ROUND_HALF_UP

Display and storage use two decimal places (to_fixed).
"""

import logging
from collections.abc import Iterable
from decimal import (
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
)
from typing import Annotated, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from goaltrack.core.exceptions import DecimalParseError, DivisionByZeroError

logger = logging.getLogger(__name__)

ZERO = Decimal(0)
HUNDRED = Decimal(100)


class MoneyContext(BaseModel):
    """Precision and rounding settings for money arithmetic."""

    model_config = ConfigDict(frozen=True)

    precision: int = Field(default=28, ge=1)
    rounding: Literal[
        "ROUND_HALF_UP",
        "ROUND_HALF_EVEN",
        "ROUND_HALF_DOWN",
        "ROUND_UP",
        "ROUND_DOWN",
        "ROUND_CEILING",
        "ROUND_FLOOR",
        "ROUND_05UP",
    ] = ROUND_HALF_UP

    def to_context(self) -> Context:
        """Build a fresh decimal.Context for these settings."""
        return Context(prec=self.precision, rounding=self.rounding)


DEFAULT_MONEY = MoneyContext()
DEFAULT_CONTEXT = DEFAULT_MONEY.to_context()


# -----------------------------------------------------------------------------
# Parsing
# -----------------------------------------------------------------------------


def parse_decimal(
    value: object,
    context: Context = DEFAULT_CONTEXT,
) -> Decimal:
    """Parse a value into a finite Decimal.

    Args:
        value: Decimal, int, float or numeric string.
        context: Context used to round the parsed value to its precision.

    Returns:
        Parsed Decimal.

    Raises:
        DecimalParseError: For None, empty strings, booleans, malformed
            text, NaN and infinities.
    """
    if value is None or isinstance(value, bool):
        raise DecimalParseError(value)

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # str() gives the shortest repr, avoiding the binary expansion
        result = _from_string(str(value), value)
    elif isinstance(value, str):
        result = _from_string(value.strip(), value)
    else:
        raise DecimalParseError(value)

    if not result.is_finite():
        raise DecimalParseError(value)
    return context.plus(result)


def _from_string(text: str, original: object) -> Decimal:
    if not text:
        raise DecimalParseError(original)
    try:
        return Decimal(text)
    except InvalidOperation as e:
        raise DecimalParseError(original) from e


def to_decimal(
    value: object,
    context: Context = DEFAULT_CONTEXT,
) -> Decimal:
    """Parse a value, substituting zero for anything unparseable.

    Lenient counterpart of parse_decimal for inputs coming from storage,
    where a single bad amount must not abort a whole calculation.
    """
    try:
        return parse_decimal(value, context)
    except DecimalParseError:
        logger.warning("Invalid decimal value: %r, using 0 instead", value)
        return ZERO


def _lenient_optional(value: object) -> Decimal | None:
    if value is None:
        return None
    return to_decimal(value)


LenientAmount = Annotated[Decimal, BeforeValidator(to_decimal)]
OptionalLenientAmount = Annotated[Decimal | None, BeforeValidator(_lenient_optional)]


# -----------------------------------------------------------------------------
# Arithmetic
# -----------------------------------------------------------------------------


def add(a: Decimal, b: Decimal, context: Context = DEFAULT_CONTEXT) -> Decimal:
    return context.add(a, b)


def subtract(a: Decimal, b: Decimal, context: Context = DEFAULT_CONTEXT) -> Decimal:
    return context.subtract(a, b)


def multiply(a: Decimal, b: Decimal, context: Context = DEFAULT_CONTEXT) -> Decimal:
    return context.multiply(a, b)


def divide(a: Decimal, b: Decimal, context: Context = DEFAULT_CONTEXT) -> Decimal:
    """Divide a by b.

    Raises:
        DivisionByZeroError: If b is zero.
    """
    if b.is_zero():
        raise DivisionByZeroError("Division by zero")
    return context.divide(a, b)


def percentage(
    part: Decimal,
    total: Decimal,
    context: Context = DEFAULT_CONTEXT,
) -> Decimal:
    """part / total * 100, or 0 when total is zero."""
    if total.is_zero():
        return ZERO
    return multiply(divide(part, total, context), HUNDRED, context)


def total(values: Iterable[Decimal], context: Context = DEFAULT_CONTEXT) -> Decimal:
    """Sum an iterable of Decimals through the context."""
    result = ZERO
    for value in values:
        result = context.add(result, value)
    return result


# -----------------------------------------------------------------------------
# Predicates and selection
# -----------------------------------------------------------------------------


def is_zero(value: Decimal) -> bool:
    return value.is_zero()


def is_positive(value: Decimal) -> bool:
    return value > 0


def is_non_negative(value: Decimal) -> bool:
    return value >= 0


def min_amount(a: Decimal, b: Decimal) -> Decimal:
    return a if a < b else b


def max_amount(a: Decimal, b: Decimal) -> Decimal:
    return a if a > b else b


# -----------------------------------------------------------------------------
# Formatting
# -----------------------------------------------------------------------------


def to_fixed(value: Decimal, places: int = 2) -> str:
    """Fixed-point string with ROUND_HALF_UP, e.g. to_fixed(Decimal("1.005")) == "1.01"."""
    exponent = Decimal(1).scaleb(-places)
    return f"{value.quantize(exponent, rounding=ROUND_HALF_UP):f}"
