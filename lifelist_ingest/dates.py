"""
Date normalization for life-list exports.

The export writes dates as ``"14 Dec 2025"``: day, three-letter English
month abbreviation, four-digit year. This is a purely syntactic
rearrangement into ``YYYY-MM-DD``; no calendar validation, timezone or
locale handling is involved.
"""

from __future__ import annotations

from types import MappingProxyType

MONTHS = MappingProxyType({
    "Jan": "01", "Feb": "02", "Mar": "03", "Apr": "04",
    "May": "05", "Jun": "06", "Jul": "07", "Aug": "08",
    "Sep": "09", "Oct": "10", "Nov": "11", "Dec": "12",
})


def normalize_date(text: str) -> str | None:
    """Convert ``"D Mon YYYY"`` to ``"YYYY-MM-DD"``.

    Tokens are split on single spaces after trimming, so ``"4 Jul 2021"``
    becomes ``"2021-07-04"``. The month lookup is case-sensitive.
    The day is only left-padded, never validated: ``"123 Jan 2024"``
    yields the 11-character ``"2024-01-123"``.

    Returns:
        The ISO date string, or ``None`` when the text does not split into
        exactly three tokens or the month abbreviation is unknown.
    """
    parts = text.strip().split(" ")
    if len(parts) != 3:
        return None

    day, month_abbr, year = parts
    month = MONTHS.get(month_abbr)
    if month is None:
        return None
    return f"{year}-{month}-{day.rjust(2, '0')}"
