"""Tests for the chart DataTable."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from charts import DataTable  # noqa: E402


class TestFromRows:
    def test_basic_table(self):
        table = DataTable.from_rows(["Library", "Raw Sequences"], [["LIB1", 20000], ["Other", 2000]])
        assert table.num_rows == 2
        assert len(table) == 2
        assert table.header() == ["Library", "Raw Sequences"]
        assert table.labels() == ["LIB1", "Other"]
        assert table.value_columns() == ["Raw Sequences"]

    def test_get_value(self):
        table = DataTable.from_rows(["Categories", "Reason"], [["GeneralFilterFailed", 2256]])
        assert table.get_value(0, 0) == "GeneralFilterFailed"
        assert table.get_value(0, 1) == 2256

    def test_none_values_survive(self):
        table = DataTable.from_rows(
            ["Region", "TCS", "Combined TCS", "TCS After QC"],
            [["VIF", 1730, None, 1711]],
        )
        assert table.column("Combined TCS") == [None]
        assert table.column("TCS") == [1730]

    def test_empty_rows(self):
        table = DataTable.from_rows(["Region", "Ratio"], [])
        assert table.num_rows == 0
        assert table.labels() == []

    def test_empty_header_raises(self):
        with pytest.raises(ValueError, match="at least one column"):
            DataTable.from_rows([], [])

    def test_ragged_row_raises(self):
        with pytest.raises(ValueError, match="Row 1 has 1 cells"):
            DataTable.from_rows(["Region", "Ratio"], [["IN", 0.1], ["PR"]])


class TestRoleColumns:
    def test_style_column(self):
        table = DataTable.from_rows(
            ["Region", "Distinct to Raw", {"role": "style"}],
            [["IN", 0.007, "#7CAE00"], ["PR", 0.003, "#F8766D"]],
        )
        assert table.style_column() == ["#7CAE00", "#F8766D"]
        assert table.value_columns() == ["Distinct to Raw"]
        assert table.header() == ["Region", "Distinct to Raw"]

    def test_no_style_column(self):
        table = DataTable.from_rows(["Region", "Ratio"], [["IN", 0.1]])
        assert table.style_column() is None

    def test_role_without_name_raises(self):
        with pytest.raises(ValueError, match="without a role"):
            DataTable.from_rows(["Region", {"type": "string"}], [["IN", "x"]])
