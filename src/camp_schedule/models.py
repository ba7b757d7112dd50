"""Pydantic models for parsed schedule data.

All data structures use Pydantic v2 for validation, serialization, and type safety.
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel


class Role(str, Enum):
    """Semantic role a sheet column can play in an activity row."""

    DAY = "day"
    TIME = "time"
    ACTIVITY = "activity"
    DESCRIPTION = "description"
    LOCATION = "location"
    INSTRUCTOR = "instructor"
    NOTES = "notes"


class ActivityRecord(BaseModel):
    """A single scheduled item from the published sheet.

    The first three fields are always present (possibly empty); the rest are
    only set when the source row carried data for them.
    """

    time: str = ""  # "9:00 AM", "14:30"
    activity: str = ""  # "Hill Practice - Beginner"
    description: str = ""
    location: str | None = None
    instructor: str | None = None
    notes: str | None = None
    extras: dict[str, str] | None = None  # unmapped column label -> value

    def to_dict(self) -> dict[str, Any]:
        """JSON-shaped dict that omits unset optional fields."""
        return self.model_dump(exclude_none=True)


# Day-label -> activities, in first-seen / row order
Schedule = dict[str, list[ActivityRecord]]

# Column index -> roles named by its header label, in rule order
HeaderHints = dict[int, tuple[Role, ...]]


class ScheduleStats(BaseModel):
    """Summary of one parse, as shown by the data inspector."""

    total_lines: int = 0
    header: str = ""  # raw first line
    data_rows: int = 0
    days: int = 0
    activities: int = 0
    valid_rows: int = 0
    skipped_rows: int = 0


class LoadResult(BaseModel):
    """Outcome of one fetch-then-parse cycle."""

    schedule: Schedule
    source: Literal["sheet", "sample", "file"]
    error: str | None = None
    stats: ScheduleStats | None = None
