"""Header row detection and column role hints."""

from camp_schedule.models import HeaderHints, Role

# Header keyword table (case-insensitive substring match), checked in this order
HEADER_KEYWORDS: dict[Role, tuple[str, ...]] = {
    Role.DAY: ("day", "date"),
    Role.TIME: ("time", "hour"),
    Role.ACTIVITY: ("activity", "event", "session", "title"),
    Role.DESCRIPTION: ("description", "detail", "note", "info"),
    Role.LOCATION: ("location", "venue", "place", "room"),
    Role.INSTRUCTOR: ("instructor", "teacher", "coach", "leader"),
    Role.NOTES: ("notes", "remarks", "comments"),
}


def header_matches(label: str, role: Role) -> bool:
    """True if a lower-cased header label names the given role."""
    return any(keyword in label for keyword in HEADER_KEYWORDS[role])


def is_header_row(fields: list[str]) -> bool:
    """A first line is a header when any field mentions a day or a date."""
    return any(header_matches(field.lower(), Role.DAY) for field in fields)


def build_header_hints(fields: list[str]) -> HeaderHints:
    """Map each header column to every role its label names.

    Roles are listed in rule order. Columns whose label names no role are
    left out.
    """
    hints: HeaderHints = {}
    for index, field in enumerate(fields):
        label = field.lower()
        roles = tuple(role for role in HEADER_KEYWORDS if header_matches(label, role))
        if roles:
            hints[index] = roles
    return hints
