"""Tests for session grouping and filtering."""

from datetime import timedelta

from mentor_payouts.services.aggregation import (
    count_session_types,
    filter_sessions_by_range,
    group_sessions_by_mentor,
    session_amount,
)
from tests.conftest import FIXED_NOW, make_session


def test_session_amount_prorates_hourly_rate() -> None:
    assert session_amount(make_session(duration=90, rate_per_hour=4000)) == 6000
    assert session_amount(make_session(duration=20, rate_per_hour=3000)) == 1000


def test_group_sessions_by_mentor() -> None:
    sessions = [
        make_session("s-1", mentor_id="m-1", mentor_name="Jane", duration=60),
        make_session("s-2", mentor_id="m-2", mentor_name="John", duration=30),
        make_session("s-3", mentor_id="m-1", mentor_name="Jane S.", duration=30),
    ]

    groups = group_sessions_by_mentor(sessions)

    assert list(groups) == ["m-1", "m-2"]
    assert [s.id for s in groups["m-1"].sessions] == ["s-1", "s-3"]
    assert groups["m-1"].base_amount == 6000
    assert groups["m-2"].base_amount == 2000


def test_group_uses_first_seen_mentor_name() -> None:
    sessions = [
        make_session("s-1", mentor_id="m-1", mentor_name="Jane"),
        make_session("s-2", mentor_id="m-1", mentor_name="Jane Smith"),
    ]

    assert group_sessions_by_mentor(sessions)["m-1"].mentor_name == "Jane"


def test_group_keeps_duplicate_ids() -> None:
    session = make_session("s-1")

    groups = group_sessions_by_mentor([session, session])

    assert len(groups["mentor-1"].sessions) == 2
    assert groups["mentor-1"].base_amount == 8000


def test_group_empty_input() -> None:
    assert group_sessions_by_mentor([]) == {}


def test_count_session_types() -> None:
    sessions = [
        make_session("s-1", session_type="Live Session"),
        make_session("s-2", session_type="Evaluation"),
        make_session("s-3", session_type="Live Session"),
    ]

    assert count_session_types(sessions) == {"Live Session": 2, "Evaluation": 1}


def test_filter_sessions_by_range() -> None:
    recent = make_session("recent", date=(FIXED_NOW - timedelta(days=3)).isoformat())
    older = make_session("older", date=(FIXED_NOW - timedelta(days=10)).isoformat())
    oldest = make_session("oldest", date=(FIXED_NOW - timedelta(days=40)).isoformat())
    sessions = [recent, older, oldest]

    assert filter_sessions_by_range(sessions, "last7", FIXED_NOW) == [recent]
    assert filter_sessions_by_range(sessions, "last15", FIXED_NOW) == [recent, older]
    assert filter_sessions_by_range(sessions, "last30", FIXED_NOW) == [recent, older]


def test_filter_unknown_range_defaults_to_thirty_days() -> None:
    older = make_session("older", date=(FIXED_NOW - timedelta(days=20)).isoformat())

    assert filter_sessions_by_range([older], "forever", FIXED_NOW) == [older]


def test_filter_drops_unparseable_dates() -> None:
    broken = make_session("broken", date="not-a-date")
    naive = make_session("naive", date="2024-03-14T08:00")

    assert filter_sessions_by_range([broken, naive], "last7", FIXED_NOW) == [naive]
