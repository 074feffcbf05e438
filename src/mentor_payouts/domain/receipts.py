"""Domain models for payout receipts."""

from dataclasses import dataclass
from enum import Enum


class ReceiptStatus(str, Enum):
    """Settlement state of a receipt."""

    PENDING = "Pending"
    PAID = "Paid"
    UNDER_REVIEW = "Under Review"


@dataclass(frozen=True)
class Receipt:
    """Point-in-time settlement record for a mentor.

    ``total_amount`` is fixed when the receipt is generated and is not
    recomputed if the underlying sessions change later.
    """

    id: str
    mentor_id: str
    mentor_name: str
    generated_date: str
    total_amount: int
    status: ReceiptStatus
    sessions: tuple[str, ...]
