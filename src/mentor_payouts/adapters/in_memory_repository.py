"""Process-local storage for dashboard state."""

from dataclasses import dataclass, field

from mentor_payouts.domain.receipts import Receipt
from mentor_payouts.domain.sessions import Mentor, Session
from mentor_payouts.services.dashboard import DashboardRepository


def default_mentors() -> list[Mentor]:
    """Mentors every fresh dashboard starts with."""
    return [
        Mentor(id="mentor-1", name="Jane Smith", email="jane.smith@example.com"),
        Mentor(id="mentor-2", name="John Davis", email="john.davis@example.com"),
        Mentor(id="mentor-3", name="Sarah Wilson", email="sarah.wilson@example.com"),
    ]


@dataclass
class InMemoryDashboardRepository(DashboardRepository):
    """Dashboard repository backed by lists; reset on restart."""

    mentors: list[Mentor] = field(default_factory=default_mentors)
    sessions: list[Session] = field(default_factory=list)
    receipts: list[Receipt] = field(default_factory=list)

    def list_mentors(self) -> list[Mentor]:
        return list(self.mentors)

    def add_mentor(self, mentor: Mentor) -> None:
        self.mentors.append(mentor)

    def list_sessions(self) -> list[Session]:
        return list(self.sessions)

    def add_sessions(self, sessions: list[Session]) -> None:
        self.sessions.extend(sessions)

    def delete_session(self, session_id: str) -> bool:
        remaining = [s for s in self.sessions if s.id != session_id]
        removed = len(remaining) != len(self.sessions)
        self.sessions = remaining
        return removed

    def list_receipts(self) -> list[Receipt]:
        return list(self.receipts)

    def add_receipt(self, receipt: Receipt) -> None:
        self.receipts.insert(0, receipt)
