"""Sales entry rules: validation, amount handling, and monthly rollups."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

from ..domain.sales import SalesDraft, SalesEntry

DEFAULT_COMMISSION_PERCENT = 1.0

# Checked in this order; every check runs regardless of earlier failures.
REQUIRED_FIELD_MESSAGES: tuple[tuple[str, str], ...] = (
    ("date", "Date is required"),
    ("customer_name", "Customer name is required"),
    ("sale_amount", "Sale amount is required"),
    ("order_code", "Order code is required"),
)

AMOUNT_FORMAT_MESSAGE = "Sale amount must be a whole number"


def default_draft(today: Optional[date] = None) -> SalesDraft:
    """Return an empty draft dated ``today``."""

    return SalesDraft(date=(today or date.today()).isoformat())


def validate_draft(draft: SalesDraft) -> dict[str, str]:
    """Return a field -> message mapping; empty when the draft can be submitted."""

    errors: dict[str, str] = {}
    for field_name, message in REQUIRED_FIELD_MESSAGES:
        if not draft.get(field_name):
            errors[field_name] = message
    return errors


def strip_non_digits(raw: Any) -> str:
    """Keep only the digits 0-9 of ``raw``; ``None`` becomes ``""``."""

    if raw is None:
        return ""
    return "".join(ch for ch in str(raw) if "0" <= ch <= "9")


def is_valid_amount(value: Any) -> bool:
    """True when ``value`` is a non-negative integer or a digit-only string."""

    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value >= 0
    if isinstance(value, str):
        return bool(value) and value == strip_non_digits(value)
    return False


def _to_decimal(value: Any) -> Optional[Decimal]:
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    return number


def format_amount(value: Any, separator: str = ".") -> str:
    """Render ``value`` as a whole number with thousands grouping.

    Falsy input (``""``, ``None``, ``0``) renders as ``""``. Fractions are
    rounded half-up. No currency symbol is added.

    >>> format_amount("1234567")
    '1.234.567'
    >>> format_amount(3.5, separator=",")
    '4'
    """
    if not value:
        return ""
    number = _to_decimal(value)
    if number is None:
        return ""
    # quantize needs room for every integer digit, which may exceed the default 28.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, number.adjusted() + 2)
        whole = int(number.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return f"{whole:,}".replace(",", separator)


def parse_amount(value: Any) -> float:
    """Parse an amount as float, treating missing or invalid input as 0."""

    if value is None or value == "":
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def parse_entry_date(value: Any) -> Optional[date]:
    """Return the calendar date of an ISO date/datetime string, or None."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def monthly_total(entries: Iterable[SalesEntry], reference: date) -> float:
    """Sum sale amounts of entries dated in the same year and month as ``reference``."""

    total = 0.0
    for entry in entries:
        entry_date = parse_entry_date(entry.date)
        if entry_date is None:
            continue
        if entry_date.year == reference.year and entry_date.month == reference.month:
            total += parse_amount(entry.sale_amount)
    return total


def commission(total: float, percent: float = DEFAULT_COMMISSION_PERCENT) -> float:
    """Commission owed on ``total`` at ``percent`` (1% unless configured)."""

    return total * percent / 100
