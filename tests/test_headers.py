"""Tests for header row detection and column role hints."""

from camp_schedule.models import Role
from camp_schedule.parser.headers import build_header_hints, is_header_row


def test_date_column_marks_header() -> None:
    assert is_header_row(["Date", "Time", "Event"])


def test_day_substring_marks_header() -> None:
    assert is_header_row(["Session", "Weekday"])


def test_data_row_is_not_header() -> None:
    assert not is_header_row(["Mon", "9:00", "Yoga", "Stretch"])


def test_empty_row_is_not_header() -> None:
    assert not is_header_row([""])


def test_hints_follow_keyword_table() -> None:
    hints = build_header_hints(
        ["Day", "Time", "Activity", "Details", "Room", "Coach", "Notes", "Level"]
    )

    assert hints == {
        0: (Role.DAY,),
        1: (Role.TIME,),
        2: (Role.ACTIVITY,),
        3: (Role.DESCRIPTION,),
        4: (Role.LOCATION,),
        5: (Role.INSTRUCTOR,),
        # "notes" contains "note", so it names description first
        6: (Role.DESCRIPTION, Role.NOTES),
    }


def test_hints_are_case_insensitive() -> None:
    hints = build_header_hints(["DATE", "Start Hour", "Venue"])

    assert hints == {0: (Role.DAY,), 1: (Role.TIME,), 2: (Role.LOCATION,)}
