"""
lifelist-ingest: convert bird life-list CSV exports into a sorted JSON
document for visualization.

Public API surface:

- ``run(raw_text)`` -- the pure conversion core. Text in, ``OutputEnvelope``
  out; no I/O, never raises on malformed rows.

- ``open(path, ...)`` -- **recommended entry point**. Polymorphic: accepts
  either a downloaded life-list CSV or an existing ``lifelist.yaml`` and
  returns a ``Dataset`` handle.

- ``init(...)`` -- First-run workflow. Generates ``lifelist.yaml`` and
  optionally converts immediately. Returns a ``Dataset``.

- ``ingest(...)`` -- Subsequent-run workflow. Loads ``lifelist.yaml`` and
  rebuilds the outputs. Returns a ``Dataset``.

Downloading the export from the birding site is not handled here; point
these functions at a CSV that is already on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

from lifelist_ingest._pipeline import run_and_export
from lifelist_ingest.config import (
    IngestConfig,
    generate_default_config,
    load_config,
    save_config,
)
from lifelist_ingest.dataset import Dataset
from lifelist_ingest.dates import normalize_date
from lifelist_ingest.models import Observation, OutputEnvelope
from lifelist_ingest.parsers import parse_row
from lifelist_ingest.pipeline import run

__all__ = [
    "open",
    "init",
    "ingest",
    "run",
    "parse_row",
    "normalize_date",
    "Dataset",
    "Observation",
    "OutputEnvelope",
]

logger = logging.getLogger(__name__)


def _outputs_exist(config: IngestConfig) -> bool:
    """Check whether every output file for *config* is already on disk."""
    if not config.json_path.exists():
        return False

    fmt = config.output.tabular_format
    if fmt is not None:
        out = Path(config.output.output_dir)
        for name in ("observations", "_meta"):
            if not (out / f"{name}.{fmt}").exists():
                return False

    return True


def _source_newer(config: IngestConfig) -> bool:
    """True when the source export was modified after the JSON was written."""
    source = Path(config.source.input_path)
    if not source.exists():
        return False
    return source.stat().st_mtime > config.json_path.stat().st_mtime


def _default_config_path(output_dir: str) -> Path:
    """Sibling ``{output_dir}.yaml``, or ``lifelist.yaml`` inside a bare ``.``."""
    out = Path(output_dir)
    if out.name in ("", ".."):
        return out / "lifelist.yaml"
    return out.with_name(out.name + ".yaml")


def open(
    path: str,
    output_dir: str | None = None,
    config_path: str | None = None,
    run_immediately: bool = True,
    force: bool = False,
) -> Dataset:
    """Single entry point: open a life-list CSV or an existing config.

    - **YAML file** (``.yaml`` / ``.yml``): loads the config and returns a
      ``Dataset`` handle. Nothing is converted.

    - **CSV export**: idempotent first run. If the config and outputs
      already exist and the export has not been modified since, returns a
      handle to them without converting again.
      Otherwise generates the config and (when *run_immediately* is True)
      converts. Pass ``force=True`` to always rebuild.

    Args:
        path: Life-list CSV or ``lifelist.yaml``.
        output_dir: Where outputs are written; defaults to ``"outputs/"``.
            Ignored when opening a YAML config.
        config_path: Where to write the generated config. Defaults to
            ``{output_dir}.yaml`` (sibling of output_dir), or
            ``lifelist.yaml`` inside it when output_dir is ``"."``.
        run_immediately: Convert right after generating the config.
        force: Re-convert even when outputs already exist.

    Examples::

        ds = lifelist_ingest.open("downloads/ebird_world_life_list.csv",
                                  output_dir="site/data")
        ds.describe().species
        ds.load(date_from="2024-01-01", regions=["US-NY"])
    """
    p = Path(path)

    if p.suffix.lower() in (".yaml", ".yml"):
        logger.info("open() -- loading config from %s", path)
        config = load_config(path)
        return Dataset(config, p)

    if output_dir is None:
        output_dir = "outputs/"
    if config_path is None:
        config_path = str(_default_config_path(output_dir))

    if not force and Path(config_path).exists():
        config = load_config(config_path)
        if (
            config.source.input_path == path
            and _outputs_exist(config)
            and not _source_newer(config)
        ):
            logger.info(
                "open() -- outputs already exist, skipping conversion "
                "(config=%s, output_dir=%s)",
                config_path, config.output.output_dir,
            )
            return Dataset(config, config_path)
        logger.info("open() -- outputs missing or stale, converting")

    return init(
        input_path=path,
        output_dir=output_dir,
        config_path=config_path,
        run_immediately=run_immediately,
    )


def init(
    input_path: str,
    output_dir: str = "outputs/",
    config_path: str = "lifelist.yaml",
    run_immediately: bool = True,
) -> Dataset:
    """First-run entry point: generate config, optionally convert.

    Raises:
        FileNotFoundError: If *input_path* does not exist.
        ExportError: If outputs cannot be written.
    """
    logger.info("init() -- input_path=%s, output_dir=%s", input_path, output_dir)

    if not Path(input_path).exists():
        raise FileNotFoundError(f"Life-list export not found: {input_path}")

    config = generate_default_config(input_path=input_path, output_dir=output_dir)
    save_config(config, config_path)

    if run_immediately:
        logger.info("run_immediately=True -- converting")
        run_and_export(config)

    return Dataset(config, config_path)


def ingest(config_path: str = "lifelist.yaml") -> Dataset:
    """Subsequent-run entry point: load config and rebuild outputs.

    Raises:
        FileNotFoundError: If the config or the source export is missing.
        ConfigValidationError: If the config file is empty.
        pydantic.ValidationError: If the config fails schema validation.
        ExportError: If outputs cannot be written.
    """
    logger.info("ingest() -- config_path=%s", config_path)
    config = load_config(config_path)
    run_and_export(config)
    return Dataset(config, config_path)
