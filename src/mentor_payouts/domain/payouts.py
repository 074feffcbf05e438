"""Domain models for payout calculation and dashboard aggregates."""

from dataclasses import dataclass, field

from mentor_payouts.domain.sessions import Session

DEFAULT_PLATFORM_FEE_PERCENTAGE = 5
DEFAULT_GST_PERCENTAGE = 18


@dataclass(frozen=True)
class AdditionalCharge:
    """Named flat deduction applied after tax."""

    name: str
    amount: float


@dataclass(frozen=True)
class PayoutOptions:
    """Fee and tax configuration for a payout calculation.

    A percentage of ``None`` or 0 is not applied.
    """

    platform_fee_percentage: float | None = DEFAULT_PLATFORM_FEE_PERCENTAGE
    gst_percentage: float | None = DEFAULT_GST_PERCENTAGE
    additional_charges: tuple[AdditionalCharge, ...] = ()


@dataclass(frozen=True)
class PayoutBreakdown:
    """Intermediate values of a single payout calculation."""

    base: float
    platform_fee: float
    subtotal: float
    gst: float
    additional_charges: float
    payout: float
    total: int


@dataclass
class MentorSessions:
    """Sessions grouped under one mentor with their un-adjusted base amount."""

    mentor_id: str
    mentor_name: str
    sessions: list[Session] = field(default_factory=list)
    base_amount: float = 0.0


@dataclass(frozen=True)
class DashboardSummary:
    """Headline metrics for the admin dashboard."""

    total_sessions: int
    total_payout: int
    active_mentors: int
    pending_receipts: int
    session_types: dict[str, int]


@dataclass(frozen=True)
class MentorEarnings:
    """Earnings overview for the mentor dashboard."""

    total_earnings: int
    pending_amount: int
    paid_amount: int
    pending_receipts: int
    paid_receipts: int
    total_minutes: int
