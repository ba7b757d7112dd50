"""Tests for table, JSON, and stats rendering."""

import json

from camp_schedule.models import ActivityRecord, ScheduleStats
from camp_schedule.render import activity_details, format_stats, format_table, to_json
from camp_schedule.sample import sample_schedule


def test_empty_schedule_table() -> None:
    assert format_table({}) == "(no activities scheduled)"


def test_table_has_a_block_per_day() -> None:
    table = format_table(sample_schedule())

    assert "== Monday - August 12 ==" in table
    assert "== Tuesday - August 13 ==" in table
    assert "Registration & Welcome" in table
    assert "Location: Main Entrance; Instructor: Team LOZ" in table


def test_untitled_activity_gets_position_title() -> None:
    table = format_table({"Schedule": [ActivityRecord(description="Free time")]})

    assert "Activity 1" in table


def test_details_include_extras_in_order() -> None:
    record = ActivityRecord(
        description="Warm up",
        notes="Bring water",
        extras={"Level": "Beginner", "Column_6": "Helmet"},
    )

    assert activity_details(record) == [
        "Warm up",
        "Notes: Bring water",
        "Level: Beginner",
        "Column_6: Helmet",
    ]


def test_json_omits_unset_fields_and_keeps_day_order() -> None:
    schedule = {
        "Tuesday": [ActivityRecord(time="9:00", activity="Hike")],
        "Monday": [ActivityRecord(activity="Yoga", location="Beach")],
    }

    data = json.loads(to_json(schedule))

    assert list(data) == ["Tuesday", "Monday"]
    assert data["Tuesday"] == [{"time": "9:00", "activity": "Hike", "description": ""}]
    assert data["Monday"][0]["location"] == "Beach"
    assert "extras" not in data["Monday"][0]


def test_stats_summary() -> None:
    stats = ScheduleStats(total_lines=4, header="Day,Time", data_rows=3, days=2, activities=3)

    summary = format_stats(stats)

    assert "Total lines: 4" in summary
    assert "Header: Day,Time" in summary
    assert "Days found: 2" in summary
    assert "Total activities: 3" in summary
