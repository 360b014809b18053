"""
Internal orchestration for lifelist-ingest.

Shared by the module-level ``init()``/``ingest()`` functions and
``Dataset.ingest()``: read source -> ``run()`` -> build ``_meta`` ->
export. This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lifelist_ingest.config import IngestConfig
from lifelist_ingest.export import export_outputs
from lifelist_ingest.meta import build_meta_table
from lifelist_ingest.pipeline import data_rows, run

logger = logging.getLogger(__name__)


def read_source(path: str | Path) -> str:
    """Read a life-list export as text, dropping any UTF-8 BOM."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Life-list export not found: {path}")
    return path.read_text(encoding="utf-8-sig")


def run_and_export(config: IngestConfig) -> list[str]:
    """Convert the configured source file and write all outputs.

    Returns:
        List of output file paths that were written.

    Raises:
        FileNotFoundError: If the source file does not exist.
        ExportError: If any output cannot be written.
    """
    raw_text = read_source(config.source.input_path)
    envelope = run(raw_text)

    meta_df = None
    if config.output.tabular_format is not None:
        meta_df = build_meta_table(config, envelope, rows_total=len(data_rows(raw_text)))

    written = export_outputs(
        envelope,
        output_dir=config.output.output_dir,
        json_filename=config.output.json_filename,
        indent=config.output.indent,
        tabular_format=config.output.tabular_format,
        meta_df=meta_df,
    )

    logger.info("Species: %d", len(envelope.observations))
    if envelope.observations:
        latest = envelope.observations[-1]
        logger.info("Latest: %s (%s)", latest.common, latest.date)
    logger.info("Conversion complete: wrote %d files", len(written))
    return written
