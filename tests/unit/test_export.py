"""
Unit tests for the exporter (lifelist_ingest.export).
"""

from __future__ import annotations

import json
from pathlib import Path

import pandas as pd
import pytest

from lifelist_ingest.exceptions import ExportError
from lifelist_ingest.export import OBSERVATION_COLUMNS, export_outputs, observations_frame
from lifelist_ingest.pipeline import run
from tests.conftest import HEADER, SAMPLE_EXPORT, SAMPLE_ORDER


@pytest.fixture()
def envelope():
    return run(SAMPLE_EXPORT)


@pytest.fixture()
def meta_df() -> pd.DataFrame:
    return pd.DataFrame([{"source_file": "life.csv", "observations_total": 4}])


class TestObservationsFrame:
    """Tests for observations_frame()."""

    def test_columns_and_order(self, envelope):
        df = observations_frame(envelope)
        assert list(df.columns) == OBSERVATION_COLUMNS
        assert list(df["common"]) == SAMPLE_ORDER

    def test_empty_envelope_keeps_columns(self):
        df = observations_frame(run(HEADER))
        assert df.empty
        assert list(df.columns) == OBSERVATION_COLUMNS


class TestExportOutputs:
    """Tests for export_outputs()."""

    def test_json_only(self, tmp_path, envelope):
        written = export_outputs(envelope, tmp_path / "out")
        assert written == [str(tmp_path / "out" / "data.json")]
        doc = json.loads((tmp_path / "out" / "data.json").read_text(encoding="utf-8"))
        assert list(doc) == ["profile", "observations", "exportedAt"]
        assert [o["common"] for o in doc["observations"]] == SAMPLE_ORDER

    def test_custom_name_and_indent(self, tmp_path, envelope):
        export_outputs(envelope, tmp_path, json_filename="birds.json", indent=4)
        text = (tmp_path / "birds.json").read_text(encoding="utf-8")
        assert text.startswith('{\n    "profile"')

    def test_non_ascii_preserved(self, tmp_path):
        text = HEADER + "\n1,2,species,Águila Real,Aquila chrysaetos,1,Sierra de Guadarrama,ES-MD,7 Apr 2022"
        export_outputs(run(text), tmp_path)
        assert "Águila Real" in (tmp_path / "data.json").read_text(encoding="utf-8")

    def test_csv_tables(self, tmp_path, envelope, meta_df):
        written = export_outputs(envelope, tmp_path, tabular_format="csv", meta_df=meta_df)
        assert [Path(p).name for p in written] == [
            "data.json", "observations.csv", "_meta.csv",
        ]
        df = pd.read_csv(tmp_path / "observations.csv", encoding="utf-8-sig")
        assert list(df.columns) == OBSERVATION_COLUMNS
        assert list(df["common"]) == SAMPLE_ORDER

    def test_parquet_tables(self, tmp_path, envelope, meta_df):
        export_outputs(envelope, tmp_path, tabular_format="parquet", meta_df=meta_df)
        df = pd.read_parquet(tmp_path / "observations.parquet")
        assert list(df["date"]) == sorted(df["date"])
        assert pd.read_parquet(tmp_path / "_meta.parquet")["observations_total"].iloc[0] == 4

    def test_unsupported_format(self, tmp_path, envelope, meta_df):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_outputs(envelope, tmp_path, tabular_format="xlsx", meta_df=meta_df)

    def test_tabular_requires_meta(self, tmp_path, envelope):
        with pytest.raises(ExportError, match="meta_df is required"):
            export_outputs(envelope, tmp_path, tabular_format="csv")

    def test_write_failure_wrapped(self, tmp_path, envelope):
        (tmp_path / "data.json").mkdir()
        with pytest.raises(ExportError, match="Failed to write data.json"):
            export_outputs(envelope, tmp_path)
