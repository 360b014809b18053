"""
Demo script: convert downloaded life-list exports via the public API.

Usage:
    uv run python scripts/convert_lifelist.py                      # default input
    uv run python scripts/convert_lifelist.py exports/a.csv b.csv  # explicit inputs
    uv run python scripts/convert_lifelist.py --force              # always rebuild

Each input file gets its own output subdirectory and lifelist.yaml under
outputs/. On first run, open() generates the config and converts. On
subsequent runs, open() detects existing outputs and skips the rebuild.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_INPUT_FILES = [
    "inputs/ebird_world_life_list.csv",
]

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("convert_lifelist")


def main() -> None:
    import lifelist_ingest

    args = sys.argv[1:]
    force = "--force" in args
    input_files = [a for a in args if a != "--force"] or DEFAULT_INPUT_FILES

    for input_path in input_files:
        if not Path(input_path).exists():
            log.warning("SKIP  %s  (file not found)", input_path)
            continue

        name = Path(input_path).stem
        output_dir = str(OUTPUT_ROOT / name)
        config_path = str(OUTPUT_ROOT / f"{name}.yaml")

        log.info("=" * 70)
        log.info("Processing: %s", input_path)
        log.info("  output_dir  : %s", output_dir)
        log.info("  config_path : %s", config_path)
        log.info("=" * 70)

        ds = lifelist_ingest.open(
            input_path,
            output_dir=output_dir,
            config_path=config_path,
            force=force,
        )

        info = ds.describe()
        log.info("  Species: %d", info.species)
        if info.date_range is not None:
            log.info("  Dates  : %s .. %s", *info.date_range)
        if info.latest is not None:
            log.info("  Latest : %s (%s)", *info.latest)
        log.info("Done: %s\n", name)

    log.info("All files processed.")


if __name__ == "__main__":
    main()
