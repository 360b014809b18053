"""
Row parser for life-list CSV exports.

Column layout of a life-list export (0-based)::

    0 Row #   1 Taxon Order   2 Category   3 Common Name
    4 Scientific Name   5 Count   6 Location   7 S/P   8 Date   ...

Only columns 3, 4, 6, 7 and 8 are kept. Trailing columns (LocID, SubID,
...) may or may not be present and are ignored.
"""

from __future__ import annotations

import logging

from lifelist_ingest.dates import normalize_date
from lifelist_ingest.models import Observation
from lifelist_ingest.parsers.tokenizer import QUOTE, split_fields

logger = logging.getLogger(__name__)

COMMON_NAME = 3
SCIENTIFIC_NAME = 4
LOCATION = 6
REGION = 7
DATE = 8

MIN_FIELDS = DATE + 1


def parse_row(raw_line: str) -> Observation | None:
    """Parse one export line into an ``Observation``.

    The line is trimmed before tokenizing. Returns ``None`` when the line
    is blank, has fewer than 9 fields, or its date column does not
    normalize.
    """
    line = raw_line.strip()
    if not line:
        return None

    fields = split_fields(line)
    if len(fields) < MIN_FIELDS:
        logger.debug("Dropping short row (%d fields): %r", len(fields), line)
        return None

    date = normalize_date(fields[DATE])
    if date is None:
        logger.debug("Dropping row with unparseable date %r", fields[DATE])
        return None

    return Observation(
        date=date,
        sci_name=fields[SCIENTIFIC_NAME],
        common=fields[COMMON_NAME],
        location=fields[LOCATION].replace(QUOTE, ""),
        region=fields[REGION],
    )
