"""Shared service helpers: money rounding and console input validators."""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from carrental.exceptions import InvalidArgumentError, InvalidInputError
from carrental.utils.constants import CENTS


# -------- money helpers --------
def to_money(value) -> Decimal:
    """Convert to a Decimal rounded to cents; floats go through str() first."""
    if isinstance(value, float):
        value = str(value)
    try:
        d = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidArgumentError(f"Error: '{value}' is not a valid amount")
    if not d.is_finite():
        raise InvalidArgumentError(f"Error: '{value}' is not a valid amount")
    try:
        return d.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        # more digits than the decimal context holds
        raise InvalidArgumentError(f"Error: '{value}' is too large")


def to_decimal_safe(value) -> Optional[Decimal]:
    """Safely convert to Decimal; return None if invalid."""
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, TypeError, ValueError):
        return None
    return d if d.is_finite() else None


def require_positive(amount, what: str = "amount") -> Decimal:
    """Return the amount as money, or raise InvalidArgumentError if it is not > 0."""
    if isinstance(amount, bool):
        raise InvalidArgumentError(f"Error: {what} must be a number")
    money = to_money(amount)
    if money <= 0:
        raise InvalidArgumentError(f"Error: {what} must be positive")
    return money


def require_text(value: Optional[str], what: str) -> str:
    """Strip and return a non-empty string, or raise InvalidArgumentError."""
    s = (value or "").strip()
    if not s:
        raise InvalidArgumentError(f"Error: {what} is required")
    return s


# -------- input validators --------
def parse_bounded_int(token: str, lo: int, hi: int) -> int:
    """
    Parse a console token as an integer within [lo, hi].
    Raises InvalidInputError on unparsable or out-of-range input.
    """
    try:
        x = int((token or "").strip())
    except ValueError:
        raise InvalidInputError(f"Error: '{token}' is not a whole number")
    if x < lo or x > hi:
        raise InvalidInputError(f"Error: enter a number between {lo} and {hi}")
    return x


def parse_bounded_amount(token: str, lo, hi) -> Decimal:
    """
    Parse a console token as a money amount within [lo, hi], rounded to cents.
    Raises InvalidInputError on unparsable or out-of-range input.
    """
    d = to_decimal_safe(token)
    if d is None:
        raise InvalidInputError(f"Error: '{token}' is not a valid amount")
    try:
        d = d.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidInputError(f"Error: enter an amount between {lo} and {hi}")
    if d < Decimal(lo) or d > Decimal(hi):
        raise InvalidInputError(f"Error: enter an amount between {lo} and {hi}")
    return d
