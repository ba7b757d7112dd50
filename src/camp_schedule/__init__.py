"""Camp schedule loader for a published spreadsheet CSV export.

Fetches the sheet, parses its loosely structured rows into day-grouped
activities, and falls back to an embedded sample when the sheet is unavailable.
"""

from camp_schedule.fetch import SheetFetcher
from camp_schedule.loader import ScheduleLoader
from camp_schedule.models import ActivityRecord, LoadResult, Schedule, ScheduleStats
from camp_schedule.parser import parse_schedule, parse_schedule_with_stats

__all__ = [
    "ActivityRecord",
    "LoadResult",
    "Schedule",
    "ScheduleStats",
    "ScheduleLoader",
    "SheetFetcher",
    "parse_schedule",
    "parse_schedule_with_stats",
]
