"""Grouping and filtering of session collections."""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from mentor_payouts.domain.payouts import MentorSessions
from mentor_payouts.domain.sessions import Session

DATE_RANGE_DAYS = {"last7": 7, "last15": 15, "last30": 30}
DEFAULT_RANGE_DAYS = 30


def session_amount(session: Session) -> float:
    """Return the un-adjusted amount billed for one session."""
    return session.rate_per_hour * (session.duration / 60)


def group_sessions_by_mentor(
    sessions: Iterable[Session],
) -> dict[str, MentorSessions]:
    """Group sessions by mentor id, keeping input order within each group.

    The group's mentor name is taken from the first session seen for that
    mentor id. Duplicate session ids are not collapsed.
    """
    groups: dict[str, MentorSessions] = {}
    for session in sessions:
        group = groups.get(session.mentor_id)
        if group is None:
            group = MentorSessions(
                mentor_id=session.mentor_id, mentor_name=session.mentor_name
            )
            groups[session.mentor_id] = group
        group.sessions.append(session)
        group.base_amount += session_amount(session)
    return groups


def count_session_types(sessions: Iterable[Session]) -> dict[str, int]:
    """Count sessions per session type."""
    counts: dict[str, int] = {}
    for session in sessions:
        counts[session.type] = counts.get(session.type, 0) + 1
    return counts


def filter_sessions_by_range(
    sessions: Iterable[Session], date_range: str, now: datetime
) -> list[Session]:
    """Keep sessions dated within the named trailing range.

    Unknown range names fall back to 30 days. Sessions whose date cannot be
    parsed are left out.
    """
    days = DATE_RANGE_DAYS.get(date_range, DEFAULT_RANGE_DAYS)
    cutoff = now - timedelta(days=days)
    kept = []
    for session in sessions:
        session_date = parse_session_date(session.date, now)
        if session_date is not None and session_date >= cutoff:
            kept.append(session)
    return kept


def parse_session_date(value: str, reference: datetime) -> datetime | None:
    """Parse an ISO-8601 session date, borrowing the reference tz if naive."""
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=reference.tzinfo)
    if reference.tzinfo is None:
        return parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed
