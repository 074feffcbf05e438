"""Admin and mentor dashboard operations over caller-owned collections."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from mentor_payouts.domain.payouts import DashboardSummary, MentorEarnings
from mentor_payouts.domain.receipts import Receipt, ReceiptStatus
from mentor_payouts.domain.sessions import Mentor, Session
from mentor_payouts.services.aggregation import (
    count_session_types,
    filter_sessions_by_range,
    group_sessions_by_mentor,
)
from mentor_payouts.services.csv_import import export_sessions_csv, parse_csv
from mentor_payouts.services.identity import (
    Clock,
    IdGenerator,
    SystemClock,
    UuidGenerator,
)
from mentor_payouts.services.payouts import calculate_payout
from mentor_payouts.services.receipts import generate_receipt

_logger = logging.getLogger(__name__)

DEFAULT_DATE_RANGE = "last30"


class DashboardError(Exception):
    """Base class for dashboard guard failures."""


class NoMentorSelectedError(DashboardError):
    """Raised when a receipt is requested without a mentor."""


class NoSessionsFoundError(DashboardError):
    """Raised when a mentor has no sessions to settle."""


class MentorNotFoundError(DashboardError):
    """Raised when a mentor id is not in the registry."""


class SessionNotFoundError(DashboardError):
    """Raised when a session id is not in the collection."""


class DashboardRepository(Protocol):
    """Storage interface for dashboard state."""

    def list_mentors(self) -> list[Mentor]:
        """Return all mentors in registration order."""

    def add_mentor(self, mentor: Mentor) -> None:
        """Append a mentor."""

    def list_sessions(self) -> list[Session]:
        """Return all sessions in insertion order."""

    def add_sessions(self, sessions: list[Session]) -> None:
        """Append sessions."""

    def delete_session(self, session_id: str) -> bool:
        """Remove a session, returning whether it existed."""

    def list_receipts(self) -> list[Receipt]:
        """Return all receipts, newest first."""

    def add_receipt(self, receipt: Receipt) -> None:
        """Store a receipt as the newest."""


@dataclass
class DashboardService:
    """Application service behind the admin and mentor dashboards."""

    repository: DashboardRepository
    clock: Clock = field(default_factory=SystemClock)
    ids: IdGenerator = field(default_factory=UuidGenerator)

    def list_mentors(self) -> list[Mentor]:
        """Return registered mentors."""
        return self.repository.list_mentors()

    def get_mentor(self, mentor_id: str) -> Mentor:
        """Return a mentor by id."""
        for mentor in self.repository.list_mentors():
            if mentor.id == mentor_id:
                return mentor
        raise MentorNotFoundError(mentor_id)

    def add_mentor(self) -> Mentor:
        """Register a placeholder mentor numbered after the existing ones."""
        number = len(self.repository.list_mentors()) + 1
        mentor = Mentor(
            id=f"mentor-{number}",
            name=f"New Mentor {number}",
            email=f"mentor{number}@example.com",
        )
        self.repository.add_mentor(mentor)
        _logger.info("Mentor added: id=%s", mentor.id)
        return mentor

    def list_sessions(self, date_range: str | None = None) -> list[Session]:
        """Return sessions, optionally limited to a trailing date range."""
        sessions = self.repository.list_sessions()
        if date_range is None:
            return sessions
        return filter_sessions_by_range(sessions, date_range, self.clock.now())

    def add_session(  # noqa: PLR0913
        self,
        mentor_id: str,
        date: str,
        session_type: str,
        duration: int,
        rate_per_hour: int,
    ) -> Session:
        """Record a session for a registered mentor."""
        mentor = self.get_mentor(mentor_id)
        session = Session(
            id=self.ids.new_id(),
            mentor_id=mentor.id,
            mentor_name=mentor.name,
            date=date,
            type=session_type,
            duration=duration,
            rate_per_hour=rate_per_hour,
        )
        self.repository.add_sessions([session])
        return session

    def delete_session(self, session_id: str) -> None:
        """Remove a session from the collection."""
        if not self.repository.delete_session(session_id):
            raise SessionNotFoundError(session_id)
        _logger.info("Session deleted: id=%s", session_id)

    def import_sessions(self, content: str) -> list[Session]:
        """Parse CSV text and append every resulting session."""
        sessions = parse_csv(content, clock=self.clock, ids=self.ids)
        self.repository.add_sessions(sessions)
        _logger.info("Imported sessions from CSV: count=%s", len(sessions))
        return sessions

    def export_sessions(self, date_range: str = DEFAULT_DATE_RANGE) -> str:
        """Return the sessions in range as CSV text."""
        return export_sessions_csv(self.list_sessions(date_range))

    def generate_receipt(self, mentor_id: str | None) -> Receipt:
        """Create a pending receipt for all of a mentor's sessions."""
        if not mentor_id:
            raise NoMentorSelectedError("Please select a mentor first")
        sessions = [
            session
            for session in self.repository.list_sessions()
            if session.mentor_id == mentor_id
        ]
        if not sessions:
            raise NoSessionsFoundError("No sessions found for this mentor")
        mentor = self.get_mentor(mentor_id)
        receipt = generate_receipt(mentor, sessions, clock=self.clock, ids=self.ids)
        self.repository.add_receipt(receipt)
        _logger.info(
            "Receipt generated: id=%s mentor_id=%s amount=%s",
            receipt.id,
            mentor_id,
            receipt.total_amount,
        )
        return receipt

    def list_receipts(self, mentor_id: str | None = None) -> list[Receipt]:
        """Return receipts, optionally for one mentor."""
        receipts = self.repository.list_receipts()
        if mentor_id is None:
            return receipts
        return [receipt for receipt in receipts if receipt.mentor_id == mentor_id]

    def summary(self, date_range: str = DEFAULT_DATE_RANGE) -> DashboardSummary:
        """Return headline metrics for sessions in range."""
        sessions = self.list_sessions(date_range)
        groups = group_sessions_by_mentor(sessions)
        total_payout = sum(
            calculate_payout(group.sessions) for group in groups.values()
        )
        pending = [
            receipt
            for receipt in self.repository.list_receipts()
            if receipt.status is ReceiptStatus.PENDING
        ]
        return DashboardSummary(
            total_sessions=len(sessions),
            total_payout=total_payout,
            active_mentors=len(groups),
            pending_receipts=len(pending),
            session_types=count_session_types(sessions),
        )

    def mentor_earnings(self, mentor_id: str) -> MentorEarnings:
        """Return earnings and receipt totals for one mentor."""
        mentor = self.get_mentor(mentor_id)
        sessions = [
            session
            for session in self.repository.list_sessions()
            if session.mentor_id == mentor.id
        ]
        receipts = self.list_receipts(mentor.id)
        pending = [r for r in receipts if r.status is ReceiptStatus.PENDING]
        paid = [r for r in receipts if r.status is ReceiptStatus.PAID]
        return MentorEarnings(
            total_earnings=calculate_payout(sessions),
            pending_amount=sum(r.total_amount for r in pending),
            paid_amount=sum(r.total_amount for r in paid),
            pending_receipts=len(pending),
            paid_receipts=len(paid),
            total_minutes=sum(session.duration for session in sessions),
        )
