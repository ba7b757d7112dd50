"""Row classifier: assigns each column of a data row to a semantic role.

Columns are visited left to right and each role is filled at most once. A
column goes to the first rule it satisfies:

  1. day          header says day/date, or the value looks like a day
  2. time         header says time/hour, or the value looks like a time
  3-7. activity, description, location, instructor, notes by header only
  8. positional   columns 0-3 fall back to day, time, activity, description

A role counts as filled only once it holds a non-empty value, so a matching
column with an empty cell is consumed without filling its role.
"""

import re

from camp_schedule.models import ActivityRecord, HeaderHints, Role

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_DATE_RE = re.compile(r"\d{1,2}/\d{1,2}")
_TIME_RE = re.compile(r"\d{1,2}:\d{2}")

# Roles resolved from the header label alone (rules 3-7)
_HEADER_ONLY_ROLES: tuple[Role, ...] = (
    Role.ACTIVITY,
    Role.DESCRIPTION,
    Role.LOCATION,
    Role.INSTRUCTOR,
    Role.NOTES,
)

# Column index -> role for the positional fallback (rule 8)
POSITIONAL_ROLES: dict[int, Role] = {
    0: Role.DAY,
    1: Role.TIME,
    2: Role.ACTIVITY,
    3: Role.DESCRIPTION,
}

# Day-labels synthesized for rows with a time but no day are bucketed per this many lines
SYNTHETIC_DAY_SPAN = 10
GENERIC_DAY_LABEL = "Schedule"


def looks_like_day(value: str) -> bool:
    """Weekday name, "August", a d/m style date, or anything with a hyphen."""
    lowered = value.lower()
    return (
        any(weekday in lowered for weekday in WEEKDAYS)
        or "August" in value
        or bool(_DATE_RE.search(value))
        or "-" in value
    )


def looks_like_time(value: str) -> bool:
    """Clock time such as 9:00, or anything containing am/pm."""
    lowered = value.lower()
    return bool(_TIME_RE.search(value)) or "am" in lowered or "pm" in lowered


def column_label(labels: list[str], index: int) -> str:
    """Header label for a column, or Column_N (1-based) when it has none."""
    if index < len(labels) and labels[index]:
        return labels[index]
    return f"Column_{index + 1}"


def _match_role(
    index: int,
    value: str,
    header_roles: tuple[Role, ...],
    slots: dict[Role, str],
) -> Role | None:
    """First rule the column satisfies, given the roles filled so far."""
    if not slots[Role.DAY] and (Role.DAY in header_roles or looks_like_day(value)):
        return Role.DAY
    if not slots[Role.TIME] and (Role.TIME in header_roles or looks_like_time(value)):
        return Role.TIME
    for role in _HEADER_ONLY_ROLES:
        if not slots[role] and role in header_roles:
            return role

    role = POSITIONAL_ROLES.get(index)
    if value and role is not None and not slots[role]:
        return role
    return None


def classify_row(
    fields: list[str],
    row_index: int,
    hints: HeaderHints,
    labels: list[str],
) -> tuple[str, ActivityRecord] | None:
    """Classify one data row into a day-label and an activity record.

    Args:
        fields: Tokenized values of the row.
        row_index: 0-based line index of the row in the payload, header included.
        hints: Role hints from the header row (empty when there is none).
        labels: Header labels (empty when there is no header row).

    Returns:
        (day_label, record), or None when no day-label can be inferred and the
        row has neither a time nor an activity.
    """
    slots: dict[Role, str] = {role: "" for role in Role}
    unmatched: list[int] = []

    for index, value in enumerate(fields):
        role = _match_role(index, value, hints.get(index, ()), slots)
        if role is None:
            unmatched.append(index)
        else:
            slots[role] = value

    day = slots[Role.DAY]
    if not day and slots[Role.TIME]:
        day = f"Day {row_index // SYNTHETIC_DAY_SPAN + 1}"
    elif not day and slots[Role.ACTIVITY]:
        day = GENERIC_DAY_LABEL
    if not day:
        return None

    # Leftover values are kept unless they repeat one already placed
    taken = {day, *slots.values()}
    extras: dict[str, str] = {}
    for index in unmatched:
        value = fields[index]
        if value and value not in taken:
            extras[column_label(labels, index)] = value

    record = ActivityRecord(
        time=slots[Role.TIME],
        activity=slots[Role.ACTIVITY],
        description=slots[Role.DESCRIPTION],
        location=slots[Role.LOCATION] or None,
        instructor=slots[Role.INSTRUCTOR] or None,
        notes=slots[Role.NOTES] or None,
        extras=extras or None,
    )
    return day, record
