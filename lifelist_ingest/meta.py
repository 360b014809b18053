"""
Meta table builder for lifelist-ingest.

Builds the one-row ``_meta`` table written next to the observations table
when a tabular output format is configured. It is DESCRIPTIVE: it records
what a run did (source file, hash, row counts, date span, timestamps),
complementing lifelist.yaml which is PRESCRIPTIVE.

``rows_total`` is counted by the caller from the raw text; the parsing
core itself keeps no drop counter.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path

import pandas as pd

from lifelist_ingest.config import IngestConfig
from lifelist_ingest.models import OutputEnvelope

logger = logging.getLogger(__name__)

META_COLUMNS = [
    "source_file", "source_hash", "rows_total", "observations_total",
    "rows_dropped", "date_first", "date_last", "last_sync", "exported_at",
]


def _compute_file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file for reproducibility tracking."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def build_meta_table(
    config: IngestConfig,
    envelope: OutputEnvelope,
    rows_total: int,
) -> pd.DataFrame:
    """Build the single-row ``_meta`` DataFrame.

    Args:
        config: The IngestConfig used for this run.
        envelope: The envelope produced by ``run()``.
        rows_total: Number of non-blank data rows in the source text.

    Returns:
        DataFrame with the columns in ``META_COLUMNS``.
    """
    source_path = Path(config.source.input_path)

    try:
        source_hash = _compute_file_hash(source_path)
    except FileNotFoundError:
        logger.warning(
            "Source file not found for hashing: %s (using empty hash)",
            source_path,
        )
        source_hash = ""

    observations = envelope.observations
    kept = len(observations)

    row = {
        "source_file": source_path.name,
        "source_hash": source_hash,
        "rows_total": rows_total,
        "observations_total": kept,
        "rows_dropped": rows_total - kept,
        "date_first": observations[0].date if observations else None,
        "date_last": observations[-1].date if observations else None,
        "last_sync": envelope.profile.last_sync,
        "exported_at": envelope.exported_at,
    }
    logger.info("Built _meta table for %s", source_path.name)
    return pd.DataFrame([row], columns=META_COLUMNS)
