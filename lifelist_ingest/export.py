"""
Exporter for lifelist-ingest.

Writes the JSON envelope (always) and, when a tabular format is
configured, the observations and ``_meta`` tables.

Output file naming convention:
  {json_filename}           -- e.g. "data.json", the visualization input.
  "observations.{format}"   -- one row per observation, envelope order.
  "_meta.{format}"          -- run lineage, see meta.py.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from lifelist_ingest.exceptions import ExportError
from lifelist_ingest.models import OutputEnvelope

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}

OBSERVATION_COLUMNS = ["date", "sciName", "common", "location", "region"]


def observations_frame(envelope: OutputEnvelope) -> pd.DataFrame:
    """Flatten the envelope's observations into a DataFrame.

    Columns use the JSON key names, in envelope order. An empty envelope
    still yields the full column set.
    """
    records = envelope.to_dict()["observations"]
    return pd.DataFrame(records, columns=OBSERVATION_COLUMNS)


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def _write_json(envelope: OutputEnvelope, path: Path, indent: int) -> None:
    try:
        path.write_text(envelope.to_json(indent=indent), encoding="utf-8")
    except OSError as exc:
        raise ExportError(f"Failed to write {path.name}: {exc}") from exc


def export_outputs(
    envelope: OutputEnvelope,
    output_dir: str | Path,
    json_filename: str = "data.json",
    indent: int = 2,
    tabular_format: str | None = None,
    meta_df: pd.DataFrame | None = None,
) -> list[str]:
    """Write the envelope and optional tables to disk.

    The output directory is created recursively if it does not exist.
    CSV tables are written with ``utf-8-sig`` encoding so species and
    place names with accents survive a round trip through Excel.

    Args:
        envelope: The envelope produced by ``run()``.
        output_dir: Directory to write files into (created if needed).
        json_filename: File name of the JSON document.
        indent: JSON indentation width.
        tabular_format: ``None``, ``"csv"`` or ``"parquet"``.
        meta_df: The ``_meta`` DataFrame; required when *tabular_format*
            is set.

    Returns:
        Paths written, JSON first, then observations and ``_meta``.

    Raises:
        ExportError: If *tabular_format* is unsupported, *meta_df* is
            missing, or any write fails.
    """
    if tabular_format is not None:
        if tabular_format not in _SUPPORTED_FORMATS:
            raise ExportError(
                f"Unsupported output format: '{tabular_format}'. "
                f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
            )
        if meta_df is None:
            raise ExportError(
                f"meta_df is required when tabular_format='{tabular_format}'"
            )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []

    json_path = out / json_filename
    _write_json(envelope, json_path, indent)
    written.append(str(json_path))
    logger.info(
        "Exported %d observations -> %s",
        len(envelope.observations),
        json_path.name,
    )

    if tabular_format is None:
        return written

    obs_path = out / f"observations.{tabular_format}"
    obs_df = observations_frame(envelope)
    _write_dataframe(obs_df, obs_path, tabular_format)
    written.append(str(obs_path))
    logger.info("Exported observations -> %s (%d rows)", obs_path.name, len(obs_df))

    meta_path = out / f"_meta.{tabular_format}"
    _write_dataframe(meta_df, meta_path, tabular_format)
    written.append(str(meta_path))
    logger.info("Exported _meta -> %s", meta_path.name)

    return written
