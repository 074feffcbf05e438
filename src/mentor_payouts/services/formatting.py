"""Display helpers for amounts, dates and durations."""

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

CURRENCY_SYMBOL = "₹"


def format_currency(amount: float) -> str:
    """Format an amount as whole rupees with Indian digit grouping."""
    rounded = int(Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{_group_indian(str(abs(rounded)))}"


def format_date(value: str) -> str:
    """Format an ISO-8601 date as ``15 Jan 2024``."""
    parsed = datetime.fromisoformat(value.strip())
    return f"{parsed.day} {parsed.strftime('%b')} {parsed.year}"


def calculate_duration(minutes: int) -> str:
    """Describe a duration in minutes as hours and minutes."""
    hours, mins = divmod(minutes, 60)
    if hours == 0:
        return f"{mins} mins"
    hours_label = f"{hours} hr{'s' if hours > 1 else ''}"
    if mins == 0:
        return hours_label
    return f"{hours_label} {mins} min{'s' if mins > 1 else ''}"


def _group_indian(digits: str) -> str:
    """Group digits as thousands, then lakhs and crores in pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join([*pairs, tail])
