"""
Conversion pipeline for lifelist-ingest.

``run()`` turns the raw text of a life-list export into an
``OutputEnvelope``:

1. Split the text into lines; line 0 is the header and is always skipped.
2. Parse every non-blank line with ``parse_row()``, keeping the hits.
3. Stable-sort the observations ascending by ISO date.
4. Wrap them in an envelope stamped with the current UTC time.

The pipeline does no I/O and never raises on malformed rows; a bad row is
simply missing from the result.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone

from lifelist_ingest.models import Observation, OutputEnvelope, Profile
from lifelist_ingest.parsers import parse_row

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def data_rows(raw_text: str) -> list[str]:
    """Return the trimmed, non-blank lines after the header."""
    lines = raw_text.split("\n")[1:]
    return [line.strip() for line in lines if line.strip()]


def sort_observations(observations: Iterable[Observation]) -> list[Observation]:
    """Sort ascending by date; rows sharing a date keep their input order."""
    return sorted(observations, key=lambda obs: obs.date)


def run(raw_text: str) -> OutputEnvelope:
    """Convert raw export text into a sorted, timestamped envelope.

    Args:
        raw_text: Full contents of the export, header row included.

    Returns:
        An ``OutputEnvelope``; ``observations`` is empty when no row parses.
    """
    rows = data_rows(raw_text)
    parsed = (parse_row(row) for row in rows)
    observations = sort_observations(obs for obs in parsed if obs is not None)

    logger.info(
        "Parsed %d observations from %d data rows (%d dropped)",
        len(observations),
        len(rows),
        len(rows) - len(observations),
    )

    # Two separate captures: lastSync and exportedAt are not guaranteed equal.
    return OutputEnvelope(
        profile=Profile(last_sync=utc_timestamp()),
        observations=tuple(observations),
        exported_at=utc_timestamp(),
    )
