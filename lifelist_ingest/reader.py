"""
Read-side helpers for lifelist-ingest outputs.

This module is the counterpart to ``export.py``. It works purely with
paths so ``Dataset`` and external tools (e.g. notebooks feeding the
visualization) can share it.

Since ``date`` is stored as ISO ``YYYY-MM-DD`` strings, lexicographic
comparison is semantically correct for range filtering.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from lifelist_ingest.export import OBSERVATION_COLUMNS
from lifelist_ingest.models import OutputEnvelope

logger = logging.getLogger(__name__)


def _require(path: str | Path) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Output file not found: {path}. Has the conversion been run?"
        )
    return path


def read_envelope(path: str | Path) -> OutputEnvelope:
    """Load and validate a JSON envelope written by ``export_outputs()``.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the document does not match the schema.
    """
    path = _require(path)
    envelope = OutputEnvelope.model_validate_json(path.read_text(encoding="utf-8"))
    logger.debug("Read %d observations from %s", len(envelope.observations), path)
    return envelope


def read_observations(
    path: str | Path,
    *,
    date_from: str | None = None,
    date_to: str | None = None,
    regions: list[str] | None = None,
) -> pd.DataFrame:
    """Read the observations of a JSON envelope as a DataFrame.

    Args:
        path: Path to the JSON envelope.
        date_from: Optional inclusive lower bound (ISO format).
        date_to: Optional inclusive upper bound (ISO format).
        regions: Optional list of region codes to keep (e.g. ``["US-NY"]``).

    Returns:
        DataFrame with columns ``date, sciName, common, location, region``
        in envelope (ascending date) order.
    """
    envelope = read_envelope(path)
    df = pd.DataFrame(
        envelope.to_dict()["observations"], columns=OBSERVATION_COLUMNS
    )

    if date_from is not None:
        df = df[df["date"] >= date_from]
    if date_to is not None:
        df = df[df["date"] <= date_to]
    if regions is not None:
        df = df[df["region"].isin(regions)]

    return df.reset_index(drop=True)


def read_meta(output_dir: str | Path, output_format: str) -> pd.DataFrame:
    """Read the ``_meta`` lineage table.

    Raises:
        FileNotFoundError: If the ``_meta`` file does not exist.
    """
    path = _require(Path(output_dir) / f"_meta.{output_format}")
    if output_format == "parquet":
        return pd.read_parquet(path)
    return pd.read_csv(path, encoding="utf-8-sig")
