"""Clock and identifier sources."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current timezone-aware time."""


class IdGenerator(Protocol):
    """Source of unique opaque identifiers."""

    def new_id(self) -> str:
        """Return a fresh identifier."""


@dataclass
class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(tz=UTC)


@dataclass
class UuidGenerator(IdGenerator):
    """Random UUID4 identifiers."""

    def new_id(self) -> str:
        return str(uuid4())


def isoformat_utc(moment: datetime) -> str:
    """Format a datetime as UTC ISO-8601 with milliseconds and a Z suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    utc = moment.astimezone(UTC).replace(tzinfo=None)
    return f"{utc.isoformat(timespec='milliseconds')}Z"
