"""Domain models for mentors and their billable sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Mentor:
    """A payee on the platform."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class Session:
    """A billable unit of mentor work.

    ``mentor_name`` is a denormalized copy and is never checked against a
    mentor registry. ``duration`` (minutes) and ``rate_per_hour`` are expected
    to be positive, but only the session form enforces it.
    """

    id: str
    mentor_id: str
    mentor_name: str
    date: str
    type: str
    duration: int
    rate_per_hour: int
