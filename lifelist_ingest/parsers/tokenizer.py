"""
Quote-aware field splitter for life-list export lines.

A two-state scan over the characters of one line:

- outside quotes, ``,`` ends the current field;
- inside quotes, ``,`` is literal text;
- every ``"`` toggles the state and is itself dropped.

This is looser than RFC 4180: doubled quotes (``""``) are not an escape,
they toggle twice and vanish. Not interchangeable with ``csv.reader``.
"""

from __future__ import annotations

QUOTE = '"'
DELIMITER = ","


def split_fields(line: str) -> list[str]:
    """Split *line* into whitespace-trimmed fields.

    Examples::

        >>> split_fields('a, "Forest, Lake" ,b')
        ['a', 'Forest, Lake', 'b']
        >>> split_fields('')
        ['']
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields
