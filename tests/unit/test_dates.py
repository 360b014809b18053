"""
Unit tests for date normalization (lifelist_ingest.dates).
"""

from __future__ import annotations

import re

import pytest

from lifelist_ingest.dates import MONTHS, normalize_date


class TestNormalizeDate:
    """Tests for normalize_date()."""

    def test_export_format(self):
        """The export's 'D Mon YYYY' form becomes YYYY-MM-DD."""
        assert normalize_date("14 Dec 2025") == "2025-12-14"

    def test_single_digit_day_padded(self):
        assert normalize_date("4 Jul 2021") == "2021-07-04"

    def test_two_digit_day_unchanged(self):
        assert normalize_date("01 Jan 2024") == "2024-01-01"

    def test_surrounding_whitespace_trimmed(self):
        assert normalize_date("  9 Mar 2019 ") == "2019-03-09"

    @pytest.mark.parametrize("abbr,month", list(MONTHS.items()))
    def test_every_month(self, abbr, month):
        """All twelve abbreviations map to their two-digit month."""
        result = normalize_date(f"15 {abbr} 2020")
        assert result == f"2020-{month}-15"
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", result)

    # -----------------------------------------------------------------
    # Rejections
    # -----------------------------------------------------------------

    def test_unknown_month(self):
        assert normalize_date("05 Xyz 2020") is None

    def test_month_is_case_sensitive(self):
        """'dec' and 'DEC' are not in the table."""
        assert normalize_date("14 dec 2025") is None
        assert normalize_date("14 DEC 2025") is None

    def test_full_month_name_rejected(self):
        assert normalize_date("14 December 2025") is None

    @pytest.mark.parametrize("text", [
        "",
        "2025",
        "Dec 2025",
        "14 Dec 2025 extra",
        "2025-12-14",
        "14  Dec 2025",
    ])
    def test_wrong_token_count(self, text):
        """Anything that does not split into exactly three tokens is rejected."""
        assert normalize_date(text) is None

    def test_months_table_is_read_only(self):
        with pytest.raises(TypeError):
            MONTHS["Foo"] = "13"  # type: ignore[index]

    def test_long_day_passed_through(self):
        """Days are padded, not validated; a 3-digit day gives an 11-char string."""
        result = normalize_date("123 Jan 2024")
        assert result == "2024-01-123"
        assert len(result) == 11
