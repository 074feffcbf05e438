"""Lenient comma-delimited session import and export.

The format is a header line followed by one line per session. Values are
split on every comma with no quoting or escaping, so a value containing a
comma shifts the columns after it. Rows are never rejected: missing or
unparsable fields fall back to defaults.
"""

import re
from collections.abc import Iterable

from mentor_payouts.domain.sessions import Session
from mentor_payouts.services.aggregation import session_amount
from mentor_payouts.services.identity import (
    Clock,
    IdGenerator,
    SystemClock,
    UuidGenerator,
    isoformat_utc,
)

CSV_IMPORT_HEADERS = (
    "mentorId",
    "mentorName",
    "date",
    "type",
    "duration",
    "ratePerHour",
)
CSV_EXPORT_HEADER = "Date,Mentor,Type,Duration,Rate,Amount"
DEFAULT_SESSION_TYPE = "Live Session"
DEFAULT_DURATION_MINUTES = 60
DEFAULT_RATE_PER_HOUR = 4000

_INTEGER_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def parse_csv(
    content: str,
    *,
    clock: Clock | None = None,
    ids: IdGenerator | None = None,
) -> list[Session]:
    """Parse CSV text into sessions, one per data line."""
    resolved_clock = clock or SystemClock()
    resolved_ids = ids or UuidGenerator()
    lines = content.lstrip("\ufeff").strip().split("\n")
    headers = [header.strip() for header in lines[0].split(",")]

    sessions = []
    for line in lines[1:]:
        values = [value.strip() for value in line.split(",")]
        row: dict[str, str | None] = {}
        for index, header in enumerate(headers):
            row[header] = values[index] if index < len(values) else None
        sessions.append(
            Session(
                id=resolved_ids.new_id(),
                mentor_id=row.get("mentorId") or "",
                mentor_name=row.get("mentorName") or "",
                date=row.get("date") or isoformat_utc(resolved_clock.now()),
                type=row.get("type") or DEFAULT_SESSION_TYPE,
                duration=_parse_int(row.get("duration")) or DEFAULT_DURATION_MINUTES,
                rate_per_hour=_parse_int(row.get("ratePerHour"))
                or DEFAULT_RATE_PER_HOUR,
            )
        )
    return sessions


def export_sessions_csv(sessions: Iterable[Session]) -> str:
    """Render sessions as CSV with their un-adjusted amounts."""
    lines = [CSV_EXPORT_HEADER]
    for session in sessions:
        amount = _format_number(session_amount(session))
        lines.append(
            f"{session.date},{session.mentor_name},{session.type},"
            f"{session.duration},{session.rate_per_hour},{amount}"
        )
    return "\n".join(lines) + "\n"


def _parse_int(raw: str | None) -> int | None:
    """Parse the leading integer of a value, ignoring any trailing text."""
    if raw is None:
        return None
    match = _INTEGER_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)
