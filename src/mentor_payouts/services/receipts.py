"""Receipt generation for mentor payouts."""

from collections.abc import Sequence

from mentor_payouts.domain.receipts import Receipt, ReceiptStatus
from mentor_payouts.domain.sessions import Mentor, Session
from mentor_payouts.services.identity import (
    Clock,
    IdGenerator,
    SystemClock,
    UuidGenerator,
    isoformat_utc,
)
from mentor_payouts.services.payouts import calculate_payout


def generate_receipt(
    mentor: Mentor,
    sessions: Sequence[Session],
    payout_amount: int | None = None,
    *,
    clock: Clock | None = None,
    ids: IdGenerator | None = None,
) -> Receipt:
    """Build a pending receipt covering ``sessions``.

    A supplied ``payout_amount`` is used verbatim; otherwise the payout is
    calculated with the default fee and GST options. The receipt keeps its
    own copy of the session ids, in input order. Callers must supply a
    mentor with an id; it is not checked here.
    """
    resolved_clock = clock or SystemClock()
    resolved_ids = ids or UuidGenerator()
    amount = payout_amount if payout_amount is not None else calculate_payout(sessions)
    return Receipt(
        id=resolved_ids.new_id(),
        mentor_id=mentor.id,
        mentor_name=mentor.name,
        generated_date=isoformat_utc(resolved_clock.now()),
        total_amount=amount,
        status=ReceiptStatus.PENDING,
        sessions=tuple(session.id for session in sessions),
    )
