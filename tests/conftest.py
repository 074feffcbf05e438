"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from mentor_payouts.adapters.in_memory_repository import InMemoryDashboardRepository
from mentor_payouts.config import Settings
from mentor_payouts.containers import AppContainer, build_container
from mentor_payouts.domain.sessions import Mentor, Session
from mentor_payouts.services.dashboard import DashboardService
from mentor_payouts.services.identity import Clock, IdGenerator

FIXED_NOW = datetime(2024, 3, 15, 10, 30, tzinfo=UTC)


@dataclass
class FixedClock(Clock):
    """Clock that always returns the same instant."""

    moment: datetime = FIXED_NOW

    def now(self) -> datetime:
        return self.moment


@dataclass
class SequentialIds(IdGenerator):
    """Predictable identifiers: ``prefix-1``, ``prefix-2``, ..."""

    prefix: str = "id"
    issued: list[str] = field(default_factory=list)

    def new_id(self) -> str:
        value = f"{self.prefix}-{len(self.issued) + 1}"
        self.issued.append(value)
        return value


def make_session(  # noqa: PLR0913
    session_id: str = "s-1",
    mentor_id: str = "mentor-1",
    mentor_name: str = "Jane Smith",
    date: str = "2024-03-10T09:00:00Z",
    session_type: str = "Live Session",
    duration: int = 60,
    rate_per_hour: int = 4000,
) -> Session:
    return Session(
        id=session_id,
        mentor_id=mentor_id,
        mentor_name=mentor_name,
        date=date,
        type=session_type,
        duration=duration,
        rate_per_hour=rate_per_hour,
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def mentor() -> Mentor:
    return Mentor(id="mentor-1", name="Jane Smith", email="jane.smith@example.com")


@pytest.fixture
def settings() -> Settings:
    return Settings(admin_token="admin-token")


@pytest.fixture
def dashboard_service(clock: FixedClock, ids: SequentialIds) -> DashboardService:
    return DashboardService(
        repository=InMemoryDashboardRepository(), clock=clock, ids=ids
    )


@pytest.fixture
def container(
    settings: Settings, dashboard_service: DashboardService
) -> AppContainer:
    built = build_container(settings)
    built.dashboard_service = dashboard_service
    return built


ADMIN_HEADERS = {"X-Admin-Token": "admin-token"}
