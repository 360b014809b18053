"""
Dataset handle for lifelist-ingest.

The ``Dataset`` class is a **handle object** that encapsulates a parsed
configuration and its output location. Once created (via
``lifelist_ingest.open()``), it remembers all paths so callers never need
to pass them again.

It unifies the write side (``ingest()``) and the read side (``load()``,
``load_envelope()``, ``load_meta()``, ``describe()``).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from lifelist_ingest.config import IngestConfig, save_config
from lifelist_ingest.models import OutputEnvelope
from lifelist_ingest.reader import read_envelope, read_meta, read_observations

logger = logging.getLogger(__name__)


@dataclass
class DatasetInfo:
    """Summary of a converted life list, returned by ``Dataset.describe()``.

    Attributes:
        config_path: Path to the ``lifelist.yaml``.
        json_path: Path to the JSON envelope.
        species: Number of observations (one per species on a life list).
        date_range: ``(first_date, last_date)``, or ``None`` when empty.
        regions: Sorted unique region codes.
        latest: ``(common_name, date)`` of the most recent addition.
        last_sync: ``profile.lastSync`` of the envelope.
    """

    config_path: str
    json_path: str
    species: int = 0
    date_range: tuple[str, str] | None = None
    regions: list[str] = field(default_factory=list)
    latest: tuple[str, str] | None = None
    last_sync: str = ""


class Dataset:
    """Handle object for a converted life list.

    Attributes:
        config: The parsed ``IngestConfig``.
        config_path: Path to the ``lifelist.yaml`` on disk.
    """

    def __init__(self, config: IngestConfig, config_path: str | Path) -> None:
        self.config = config
        self.config_path = Path(config_path)

    @property
    def output_dir(self) -> Path:
        return Path(self.config.output.output_dir)

    @property
    def json_path(self) -> Path:
        return self.config.json_path

    def __repr__(self) -> str:
        return (
            f"Dataset(source={self.config.source.input_path!r}, "
            f"json_path={str(self.json_path)!r}, "
            f"config_path={str(self.config_path)!r})"
        )

    # -- Write side ---------------------------------------------------------

    def ingest(self) -> list[str]:
        """Re-read the source export and rebuild all outputs.

        Returns:
            List of output file paths that were written.
        """
        from lifelist_ingest._pipeline import run_and_export

        logger.info("Dataset.ingest() -- config_path=%s", self.config_path)
        return run_and_export(self.config)

    def save_config(self) -> None:
        """Write the current ``self.config`` to ``self.config_path``."""
        save_config(self.config, self.config_path)

    # -- Read side ----------------------------------------------------------

    def load(
        self,
        date_from: str | None = None,
        date_to: str | None = None,
        regions: list[str] | None = None,
    ) -> pd.DataFrame:
        """Load observations as a DataFrame, optionally filtered."""
        return read_observations(
            self.json_path,
            date_from=date_from,
            date_to=date_to,
            regions=regions,
        )

    def load_envelope(self) -> OutputEnvelope:
        return read_envelope(self.json_path)

    def load_meta(self) -> pd.DataFrame:
        """Load the ``_meta`` table.

        Raises:
            ValueError: If no tabular format is configured.
        """
        fmt = self.config.output.tabular_format
        if fmt is None:
            raise ValueError(
                "No _meta table: output.tabular_format is not set in "
                f"{self.config_path}"
            )
        return read_meta(self.output_dir, fmt)

    def describe(self) -> DatasetInfo:
        """Summarize the converted life list without building a DataFrame."""
        envelope = self.load_envelope()
        observations = envelope.observations

        info = DatasetInfo(
            config_path=str(self.config_path),
            json_path=str(self.json_path),
            species=len(observations),
            regions=sorted({obs.region for obs in observations}),
            last_sync=envelope.profile.last_sync,
        )
        if observations:
            info.date_range = (observations[0].date, observations[-1].date)
            info.latest = (observations[-1].common, observations[-1].date)
        return info
