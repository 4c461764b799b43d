"""Tests for the drilldown pie state machine."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

PROJECT_ROOT = str(Path(__file__).resolve().parent.parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from charts import SELECT_EVENT, ChartEngineFailure, DataTable  # noqa: E402
from coloring import gradient_shades  # noqa: E402
from models import Drilldown, SequenceAnalysis  # noqa: E402
from viewer import DrilldownHandler, Element  # noqa: E402
from viewer.drilldown import FALLBACK_BASE_COLOR  # noqa: E402

PARENT_COLORS = {"GeneralFilterFailed": "#F8766D", "NoMatch": "#7CAE00"}


@pytest.fixture
def analysis():
    return SequenceAnalysis(
        rows=(("GeneralFilterFailed", 2256), ("NoMatch", 270), ("Unmapped", 12)),
        drilldowns=(
            Drilldown("NoMatch", (("IN", 100), ("PR", 100), ("V1V3", 70))),
            Drilldown("GeneralFilterFailed", (("IN", 143), ("PR", 88))),
        ),
    )


@pytest.fixture
def handler(analysis, recording_backend):
    parent = recording_backend.create("pie", Element("parent"))
    table = DataTable.from_rows(["Categories", "Reason"], [list(r) for r in analysis.rows])
    parent.draw(table, {})
    handler = DrilldownHandler(
        analysis,
        parent_chart=parent,
        parent_table=table,
        chart=recording_backend.create("pie", Element("drilldown")),
        label_element=Element("label", tag="h4"),
        parent_colors=PARENT_COLORS,
        pie_options={"pieHole": 0.4},
    )
    handler.attach()
    return handler


def _last_draw(chart):
    table, options = chart.draws[-1]
    return table, options


class TestAttach:
    def test_initial_drilldown_is_first_entry(self, handler):
        assert handler.current.label == "NoMatch"
        table, options = _last_draw(handler.chart)
        assert table.labels() == ["IN", "PR", "V1V3"]
        assert options["title"] == "NoMatch"
        assert handler.label_element.text == "Raw Sequence Analysis > NoMatch"

    def test_listens_to_parent_selection(self, handler):
        assert handler.parent_chart.listener_count(SELECT_EVENT) == 1

    def test_no_drilldowns_rejected(self, recording_backend):
        with pytest.raises(ValueError, match="at least one drilldown"):
            DrilldownHandler(
                SequenceAnalysis(rows=(("NoMatch", 1),)),
                parent_chart=recording_backend.create("pie", None),
                parent_table=DataTable.from_rows(["Categories", "Reason"], [["NoMatch", 1]]),
                chart=recording_backend.create("pie", None),
                label_element=Element(),
                parent_colors={},
                pie_options={},
            )


class TestSelection:
    def test_selecting_parent_slice_shows_children(self, handler):
        handler.parent_chart.select(0)

        table, options = _last_draw(handler.chart)
        assert handler.current.label == "GeneralFilterFailed"
        assert table.labels() == ["IN", "PR"]
        assert table.column("Reason") == [143, 88]
        assert handler.label_element.text == "Raw Sequence Analysis > GeneralFilterFailed"
        assert options["colors"] == gradient_shades("#F8766D", 2)
        assert options["pieHole"] == 0.4

    def test_unmatched_slice_leaves_drilldown_unchanged(self, handler):
        draws_before = len(handler.chart.draws)
        handler.parent_chart.select(2)  # "Unmapped" has no drilldown

        assert len(handler.chart.draws) == draws_before
        assert handler.current.label == "NoMatch"
        assert handler.chart.is_drawn
        assert handler.label_element.text == "Raw Sequence Analysis > NoMatch"

    def test_empty_selection_ignored(self, handler):
        draws_before = len(handler.chart.draws)
        handler.parent_chart.select(None)
        assert len(handler.chart.draws) == draws_before

    def test_select_label(self, handler):
        assert handler.select_label("GeneralFilterFailed") is True
        assert handler.select_label("generalfilterfailed") is False
        assert handler.current.label == "GeneralFilterFailed"

    def test_failed_redraw_keeps_label_and_state(self, handler):
        handler.chart.fail_draw = True

        with pytest.raises(ChartEngineFailure):
            handler.parent_chart.select(0)

        assert handler.current.label == "NoMatch"
        assert handler.label_element.text == "Raw Sequence Analysis > NoMatch"


class TestShades:
    def test_shade_per_child(self, handler, analysis):
        shades = handler.shades_for(analysis.drilldowns[0])
        assert shades == gradient_shades("#7CAE00", 3)

    def test_empty_children_use_two_shades(self, handler):
        assert len(handler.shades_for(Drilldown("NoMatch"))) == 2

    def test_unknown_parent_uses_fallback_color(self, handler):
        shades = handler.shades_for(Drilldown("Unmapped", (("IN", 1),)))
        assert shades == gradient_shades(FALLBACK_BASE_COLOR, 1)
