"""Line tokenizer for loosely formatted CSV exports.

Any double quote toggles quoted mode and is dropped; a comma only splits
fields outside quoted mode. Doubled quotes ("") are not treated as an escaped
quote, and unbalanced quotes never raise: the rest of the line is simply read
in whatever mode the last toggle left it in.
"""

import re

DELIMITER = ","
QUOTE = '"'

_EDGE_QUOTES_RE = re.compile(r'^"|"$')


def tokenize_line(line: str) -> list[str]:
    """Split one raw line into trimmed field values.

    Args:
        line: One line of the CSV payload, without its line terminator.

    Returns:
        Field values in column order. Always at least one element; an empty
        line yields [""].
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return [_EDGE_QUOTES_RE.sub("", field).strip() for field in fields]
