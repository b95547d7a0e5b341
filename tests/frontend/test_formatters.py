"""
Tests for frontend/utils/formatters.py - Formatting utilities.

Tests currency, percentage, date and label formatting functions.
"""
import pytest


# Import directly since formatters don't depend on streamlit
from frontend.utils.formatters import (
    format_code_label,
    format_currency,
    format_date,
    format_percent,
)


class TestFormatCurrency:
    """Tests for format_currency function."""

    def test_format_positive_currency(self):
        assert format_currency(28.75) == "$28.75"
        assert format_currency(1234.5) == "$1,234.50"

    def test_format_negative_currency(self):
        """Negative values keep the sign before the symbol."""
        assert format_currency(-15) == "-$15.00"

    def test_format_custom_decimals(self):
        assert format_currency(10, decimals=0) == "$10"

    @pytest.mark.parametrize("value", [None, "abc"])
    def test_invalid_values_show_dash(self, value):
        assert format_currency(value) == "-"


class TestFormatPercent:

    def test_percent_units(self):
        assert format_percent(15) == "15%"
        assert format_percent(12.5, decimals=1) == "12.5%"

    def test_none(self):
        assert format_percent(None) == "-"


class TestFormatDate:

    def test_iso_with_offset(self):
        assert format_date("2026-10-16T19:30:00+00:00") == "Oct 16, 2026"

    def test_iso_with_z_suffix(self):
        assert format_date("2025-01-01T00:00:00Z") == "Jan 01, 2025"

    def test_custom_format(self):
        assert format_date("2026-10-16T19:30:00+00:00", fmt="%Y-%m-%d") == "2026-10-16"

    @pytest.mark.parametrize("value", [None, "", "yesterday"])
    def test_invalid_dates_show_dash(self, value):
        assert format_date(value) == "-"


class TestFormatCodeLabel:

    def test_with_code(self):
        assert format_code_label("Foreman", "FRM") == "Foreman (FRM)"

    def test_without_code(self):
        assert format_code_label("Foreman", "") == "Foreman"
