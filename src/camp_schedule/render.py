"""Text and JSON renderings of a parsed schedule."""

import json

from camp_schedule.models import ActivityRecord, Schedule, ScheduleStats


def activity_details(record: ActivityRecord) -> list[str]:
    """Description followed by every optional field and extra, in display order."""
    parts: list[str] = []
    if record.description:
        parts.append(record.description)
    if record.location:
        parts.append(f"Location: {record.location}")
    if record.instructor:
        parts.append(f"Instructor: {record.instructor}")
    if record.notes:
        parts.append(f"Notes: {record.notes}")
    for key, value in (record.extras or {}).items():
        parts.append(f"{key}: {value}")
    return parts


def format_table(schedule: Schedule) -> str:
    """Format a schedule as one human-readable table per day.

    Columns: Time | Activity | Details
    """
    if not schedule:
        return "(no activities scheduled)"

    headers = ["Time", "Activity", "Details"]
    blocks: list[str] = []

    for day, records in schedule.items():
        rows = []
        for position, record in enumerate(records, start=1):
            title = record.activity
            if not record.activity and not record.time:
                title = f"Activity {position}"
            rows.append(
                [
                    record.time or "-",
                    title or "-",
                    "; ".join(activity_details(record)) or "-",
                ]
            )

        # Calculate column widths
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))

        header_line = " | ".join(h.ljust(widths[i]) for i, h in enumerate(headers))
        separator = "-+-".join("-" * w for w in widths)
        row_lines = [
            " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(row)).rstrip()
            for row in rows
        ]
        blocks.append("\n".join([f"== {day} ==", header_line.rstrip(), separator, *row_lines]))

    return "\n\n".join(blocks)


def schedule_to_dict(schedule: Schedule) -> dict[str, list[dict]]:
    return {day: [record.to_dict() for record in records] for day, records in schedule.items()}


def to_json(schedule: Schedule) -> str:
    """Serialize a schedule to JSON text, keeping day order."""
    return json.dumps(schedule_to_dict(schedule), indent=2, ensure_ascii=False)


def format_stats(stats: ScheduleStats) -> str:
    """Inspector summary of a parse."""
    return "\n".join(
        [
            "Raw CSV:",
            f"  Total lines: {stats.total_lines}",
            f"  Header: {stats.header}",
            f"  Data rows: {stats.data_rows}",
            "Parsed:",
            f"  Days found: {stats.days}",
            f"  Total activities: {stats.activities}",
            f"  Valid rows: {stats.valid_rows}",
            f"  Skipped rows: {stats.skipped_rows}",
        ]
    )
