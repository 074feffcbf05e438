"""Payout calculation: base amount, platform fee, GST and flat deductions."""

import math
from collections.abc import Iterable

from mentor_payouts.domain.payouts import PayoutBreakdown, PayoutOptions
from mentor_payouts.domain.sessions import Session
from mentor_payouts.services.aggregation import session_amount

DEFAULT_OPTIONS = PayoutOptions()


def calculate_breakdown(
    sessions: Iterable[Session], options: PayoutOptions | None = None
) -> PayoutBreakdown:
    """Run the payout pipeline and return every intermediate value.

    The fee is taken from the base amount, GST from the post-fee subtotal,
    and additional charges are subtracted last. Only the final value is
    rounded, and negative results are kept as-is.
    """
    resolved = options or DEFAULT_OPTIONS
    base = sum((session_amount(session) for session in sessions), 0.0)
    platform_fee = (
        base * resolved.platform_fee_percentage / 100
        if resolved.platform_fee_percentage
        else 0.0
    )
    subtotal = base - platform_fee
    gst = subtotal * resolved.gst_percentage / 100 if resolved.gst_percentage else 0.0
    extras = sum((charge.amount for charge in resolved.additional_charges), 0.0)
    payout = subtotal - gst - extras
    return PayoutBreakdown(
        base=base,
        platform_fee=platform_fee,
        subtotal=subtotal,
        gst=gst,
        additional_charges=extras,
        payout=payout,
        total=round_half_up(payout),
    )


def calculate_payout(
    sessions: Iterable[Session], options: PayoutOptions | None = None
) -> int:
    """Return the rounded payout for a set of sessions."""
    return calculate_breakdown(sessions, options).total


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going towards +infinity."""
    return math.floor(value + 0.5)
