"""
Shared test fixtures and sample data for lifelist-ingest tests.

``SAMPLE_EXPORT`` mimics a world life-list CSV export: a header row,
four valid rows (two sharing a date), one row with an unknown month,
one short row and a blank line.
"""

from pathlib import Path

import pytest

HEADER = (
    "Row #,Taxon Order,Category,Common Name,Scientific Name,Count,"
    "Location,S/P,Date,LocID,SubID,Exotic,Countable"
)

SAMPLE_EXPORT = "\n".join([
    HEADER,
    '1,27,species,Mallard,Anas platyrhynchos,2,"Central Park, New York",US-NY,14 Dec 2025,L191106,S1001,,1',
    '2,3456,species,American Robin,Turdus migratorius,1,"Forest, Lake",US-NY,"01 Jan 2024",L1,S1002,,1',
    "3,100,species,Blue Jay,Cyanocitta cristata,X,Backyard,US-MA,5 Jul 2023,L2,S1003,,1",
    "4,200,species,Fake Bird,Avis falsa,1,Nowhere,US-CA,05 Xyz 2020,L3,S1004,,1",
    "5,300,species,Short Row",
    "",
    '6,400,species,Northern Cardinal,Cardinalis cardinalis,1,"Backyard",US-MA,5 Jul 2023,L2,S1003,,1',
    "",
])

# Common names of SAMPLE_EXPORT's valid rows, in expected output order.
SAMPLE_ORDER = ["Blue Jay", "Northern Cardinal", "American Robin", "Mallard"]
SAMPLE_DATA_ROWS = 6

ISO_TIMESTAMP = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$"


@pytest.fixture()
def sample_export_path(tmp_path) -> Path:
    """SAMPLE_EXPORT written to a temp CSV (with a BOM, like the real export)."""
    path = tmp_path / "ebird_world_life_list.csv"
    path.write_text(SAMPLE_EXPORT, encoding="utf-8-sig")
    return path


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (full conversion through the public API)",
    )
