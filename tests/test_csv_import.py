"""Tests for CSV session import and export."""

from mentor_payouts.services.csv_import import export_sessions_csv, parse_csv
from tests.conftest import make_session


def test_parse_csv_reads_all_columns(clock, ids) -> None:
    content = (
        "mentorId,mentorName,date,type,duration,ratePerHour\n"
        "mentor-1,Jane Smith,2024-03-01T10:00,Evaluation,45,3500\n"
        "mentor-2,John Davis,2024-03-02T11:00,Recording Review,90,4200\n"
    )

    sessions = parse_csv(content, clock=clock, ids=ids)

    assert len(sessions) == 2
    first = sessions[0]
    assert first.id == "id-1"
    assert first.mentor_id == "mentor-1"
    assert first.mentor_name == "Jane Smith"
    assert first.date == "2024-03-01T10:00"
    assert first.type == "Evaluation"
    assert first.duration == 45
    assert first.rate_per_hour == 3500
    assert sessions[1].id == "id-2"


def test_parse_csv_matches_headers_by_name(clock, ids) -> None:
    content = "ratePerHour , duration,mentorName\n5000, 30 ,Sarah Wilson"

    (session,) = parse_csv(content, clock=clock, ids=ids)

    assert session.rate_per_hour == 5000
    assert session.duration == 30
    assert session.mentor_name == "Sarah Wilson"


def test_parse_csv_fills_defaults(clock, ids) -> None:
    (session,) = parse_csv("mentorName\nTest", clock=clock, ids=ids)

    assert session.mentor_name == "Test"
    assert session.mentor_id == ""
    assert session.date == "2024-03-15T10:30:00.000Z"
    assert session.type == "Live Session"
    assert session.duration == 60
    assert session.rate_per_hour == 4000
    assert session.id


def test_parse_csv_defaults_unparsable_and_zero_numbers(clock, ids) -> None:
    content = "duration,ratePerHour\nabc,\n0,0\n90min,4500.75\n-15,3000"

    sessions = parse_csv(content, clock=clock, ids=ids)

    assert [(s.duration, s.rate_per_hour) for s in sessions] == [
        (60, 4000),
        (60, 4000),
        (90, 4500),
        (-15, 3000),
    ]


def test_parse_csv_never_rejects_rows(clock, ids) -> None:
    content = "mentorId,mentorName\nmentor-1\n\n,,,,\nmentor-2,Bob,extra"

    sessions = parse_csv(content, clock=clock, ids=ids)

    assert [s.mentor_id for s in sessions] == ["mentor-1", "", "", "mentor-2"]
    assert sessions[3].mentor_name == "Bob"


def test_parse_csv_splits_quoted_commas_naively(clock, ids) -> None:
    content = 'mentorName,type,duration\n"Smith, Jane",Evaluation,45'

    (session,) = parse_csv(content, clock=clock, ids=ids)

    assert session.mentor_name == '"Smith'
    assert session.type == 'Jane"'
    assert session.duration == 60


def test_parse_csv_header_only_yields_nothing(clock, ids) -> None:
    assert parse_csv("mentorId,mentorName\n", clock=clock, ids=ids) == []
    assert parse_csv("", clock=clock, ids=ids) == []


def test_parse_csv_handles_crlf(clock, ids) -> None:
    content = "mentorId,duration\r\nmentor-3,75\r\n"

    (session,) = parse_csv(content, clock=clock, ids=ids)

    assert session.mentor_id == "mentor-3"
    assert session.duration == 75


def test_export_sessions_csv() -> None:
    sessions = [
        make_session(date="2024-03-10", duration=90, rate_per_hour=4000),
        make_session(
            date="2024-03-11",
            mentor_name="John Davis",
            session_type="Evaluation",
            duration=25,
            rate_per_hour=3000,
        ),
    ]

    assert export_sessions_csv(sessions) == (
        "Date,Mentor,Type,Duration,Rate,Amount\n"
        "2024-03-10,Jane Smith,Live Session,90,4000,6000\n"
        "2024-03-11,John Davis,Evaluation,25,3000,1250\n"
    )


def test_export_fractional_amount() -> None:
    exported = export_sessions_csv([make_session(duration=90, rate_per_hour=4001)])

    assert exported.splitlines()[1].endswith(",6001.5")


def test_parse_csv_ignores_byte_order_mark(clock, ids) -> None:
    content = "\ufeffmentorId,duration\nmentor-1,45"

    (session,) = parse_csv(content, clock=clock, ids=ids)

    assert session.mentor_id == "mentor-1"
    assert session.duration == 45


def test_parse_csv_only_reads_ascii_digits(clock, ids) -> None:
    content = "duration,ratePerHour\n\u0663\u0660,\u0664\u0660\u0660\u0660"

    (session,) = parse_csv(content, clock=clock, ids=ids)

    assert session.duration == 60
    assert session.rate_per_hour == 4000
