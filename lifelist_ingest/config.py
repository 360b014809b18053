"""
Configuration models and YAML I/O for lifelist-ingest.

This module defines the Pydantic models that map 1:1 to lifelist.yaml,
plus helper functions for loading, saving, and auto-generating the config.

Key models:
- IngestConfig: Top-level config (source + output).
- SourceConfig: Path of the downloaded life-list CSV.
- OutputConfig: Output directory, JSON document settings, optional tables.

Key functions:
- load_config(path) -> IngestConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> IngestConfig: Build the first-run config.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from lifelist_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Source file information."""

    input_path: str = Field(..., description="Path to the life-list CSV export")


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    json_filename: str = Field(
        "data.json", description="File name of the JSON envelope"
    )
    indent: int = Field(2, ge=0, description="JSON indentation width")
    tabular_format: Literal["csv", "parquet"] | None = Field(
        None,
        description=(
            "If set, also write observations and _meta tables in this format"
        ),
    )

    @field_validator("json_filename")
    @classmethod
    def _check_json_filename(cls, value: str) -> str:
        if not value or Path(value).name != value:
            raise ValueError(
                f"json_filename must be a bare file name, got '{value}'"
            )
        return value


class IngestConfig(BaseModel):
    """Top-level configuration for lifelist-ingest.

    Maps 1:1 to lifelist.yaml and is the single source of truth for
    subsequent runs.
    """

    source: SourceConfig
    output: OutputConfig = Field(default_factory=OutputConfig)

    @property
    def json_path(self) -> Path:
        return Path(self.output.output_dir) / self.output.json_filename


def load_config(path: str | Path) -> IngestConfig:
    """Load and validate lifelist.yaml into an IngestConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return IngestConfig.model_validate(raw)


def save_config(config: IngestConfig, path: str | Path) -> None:
    """Serialize an IngestConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# lifelist-ingest configuration\n")
        f.write("# Edit this file to change output location or add tables.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_path: str,
    output_dir: str = "outputs/",
) -> IngestConfig:
    """Build an IngestConfig for a first run with default output settings."""
    return IngestConfig(
        source=SourceConfig(input_path=input_path),
        output=OutputConfig(output_dir=output_dir),
    )
