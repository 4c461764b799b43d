"""Tests for scripts/utils.py helper functions."""

from __future__ import annotations

import math
import sys
from pathlib import Path


# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent / "scripts")
sys.path.insert(0, SCRIPTS_DIR)

from utils import format_count, safe_float, safe_int, safe_label, safe_str


class TestSafeFloat:
    """Tests for safe_float function."""

    def test_valid_float(self):
        assert safe_float(0.007) == 0.007
        assert safe_float("2.5") == 2.5
        assert safe_float(42) == 42.0

    def test_none_returns_default(self):
        assert safe_float(None) is None
        assert safe_float(None, default=0.0) == 0.0

    def test_invalid_string_returns_default(self):
        assert safe_float("not a number") is None
        assert safe_float("", default=-1.0) == -1.0

    def test_nan_and_infinity_return_default(self):
        assert safe_float(math.nan) is None
        assert safe_float(float("inf")) is None
        assert safe_float("-inf", default=0.0) == 0.0

    def test_boolean_rejected(self):
        assert safe_float(True) is None


class TestSafeInt:
    """Tests for safe_int function."""

    def test_valid_int(self):
        assert safe_int(42) == 42
        assert safe_int("1730") == 1730

    def test_integral_float_accepted(self):
        assert safe_int(1730.0) == 1730
        assert safe_int("20000.0") == 20000

    def test_fractional_value_rejected(self):
        assert safe_int(3.14) is None
        assert safe_int("9.99", default=-1) == -1

    def test_none_and_bool_return_default(self):
        assert safe_int(None) is None
        assert safe_int(False, default=0) == 0


class TestSafeStr:
    """Tests for safe_str function."""

    def test_strips_whitespace(self):
        assert safe_str("  0.1.0 ") == "0.1.0"

    def test_number_to_string(self):
        assert safe_str(2.0) == "2.0"

    def test_blank_returns_default(self):
        assert safe_str("   ") is None
        assert safe_str(None, default="N/A") == "N/A"


class TestSafeLabel:
    """Tests for safe_label function."""

    def test_label_kept_verbatim(self):
        assert safe_label("GeneralFilterFailed") == "GeneralFilterFailed"
        assert safe_label(" PR") == " PR"

    def test_blank_or_non_string_is_none(self):
        assert safe_label("") is None
        assert safe_label("  ") is None
        assert safe_label(12) is None


class TestFormatCount:
    def test_thousands_separator(self):
        assert format_count(20000) == "20,000"

    def test_missing(self):
        assert format_count(None) == "N/A"
