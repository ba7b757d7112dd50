"""Schedule builder: runs the whole parse and groups records by day-label.

Pipeline: payload -> lines -> header decision on line 0 -> classify each data
line -> append to its day. Malformed rows are skipped; nothing here raises
on bad input, the worst outcome is an empty schedule.
"""

from camp_schedule.logging import get_logger
from camp_schedule.models import ActivityRecord, Schedule, ScheduleStats
from camp_schedule.parser.headers import build_header_hints, is_header_row
from camp_schedule.parser.rows import classify_row
from camp_schedule.parser.tokenizer import tokenize_line

log = get_logger(__name__)


def add_activity(schedule: Schedule, day: str, record: ActivityRecord) -> None:
    """Append a record under its day, creating the day on first sight."""
    if day not in schedule:
        schedule[day] = []
        log.debug("day_created", day=day)
    schedule[day].append(record)


def parse_schedule_with_stats(text: str) -> tuple[Schedule, ScheduleStats]:
    """Parse a CSV payload into a schedule plus a summary of the parse.

    Args:
        text: Full CSV payload as published by the sheet.

    Returns:
        (schedule, stats). The schedule is empty for an empty or
        whitespace-only payload, or when every row was skipped.
    """
    schedule: Schedule = {}
    payload = text.strip()
    if not payload:
        log.info("schedule_parse_empty")
        return schedule, ScheduleStats()

    lines = payload.split("\n")
    header_fields = tokenize_line(lines[0])

    if is_header_row(header_fields):
        labels = header_fields
        hints = build_header_hints(header_fields)
        start = 1
    else:
        labels = []
        hints = {}
        start = 0
    log.debug("schedule_header", has_header=start == 1, labels=labels, hints=hints)

    valid_rows = 0
    skipped_rows = 0
    for index in range(start, len(lines)):
        line = lines[index].strip()
        if not line:
            continue

        classified = classify_row(tokenize_line(line), index, hints, labels)
        if classified is None:
            log.debug("schedule_row_skipped", line=index, reason="no_day")
            skipped_rows += 1
            continue

        day, record = classified
        add_activity(schedule, day, record)
        valid_rows += 1

    stats = ScheduleStats(
        total_lines=len(lines),
        header=lines[0],
        data_rows=max(len(lines) - 1, 0),
        days=len(schedule),
        activities=sum(len(records) for records in schedule.values()),
        valid_rows=valid_rows,
        skipped_rows=skipped_rows,
    )
    log.info(
        "schedule_parsed",
        days=stats.days,
        valid_rows=valid_rows,
        skipped_rows=skipped_rows,
    )
    return schedule, stats


def parse_schedule(text: str) -> Schedule:
    """Parse a CSV payload into day-label -> activity records."""
    schedule, _ = parse_schedule_with_stats(text)
    return schedule
