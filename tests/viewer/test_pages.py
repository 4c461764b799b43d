"""Tests for the overview and library page builders."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from coloring import GGPLOT_PALETTE, REGION_COLORS, gradient_shades  # noqa: E402
from constants import ElementId  # noqa: E402
from ingestion.load_report import build_report_data  # noqa: E402
from validators import MalformedDataset  # noqa: E402
from viewer import EngineContext  # noqa: E402
from viewer.pages import build_library_page, build_overview_page  # noqa: E402


@pytest.fixture
def context(recording_backend):
    return EngineContext(backend=recording_backend)


def _page(context):
    return context.document.page_content.children[0]


class TestOverviewPage:
    def test_fields(self, context, demo_data):
        build_overview_page(context, demo_data)
        page = _page(context)
        assert page.query(ElementId.BATCH_NAME).text == "test_batch"
        assert page.query(ElementId.TCS_VERSION).text == "0.1.0"
        assert page.query(ElementId.VIRAL_SEQ_VERSION).text == "2.0.0"
        assert page.query(ElementId.NUMBER_OF_LIBRARIES).text == "2"
        assert page.query(ElementId.TOTAL_READS).text == "20,000"
        assert page.query(ElementId.PROCESSED_TIME).text.startswith("2025-07-10T15:18:45.69")

    def test_single_column_chart(self, context, demo_data):
        build_overview_page(context, demo_data)
        assert len(context.registry) == 1
        assert context.registry.charts[0].kind == "column"

    def test_raw_sequences_per_library(self, context, payload):
        payload["main_data"]["raw_sequence_data"] = [["LIB1", 20000], ["Other", 2000]]
        build_overview_page(context, build_report_data(payload))

        chart = _page(context).query(ElementId.RAW_SEQUENCE_CHART).chart
        table, _ = chart.draws[-1]
        assert table.labels() == ["LIB1", "Other"]
        assert table.column("Raw Sequences") == [20000, 2000]
        assert sum(table.column("Raw Sequences")) == 22000


class TestLibraryPage:
    def test_chart_count_and_kinds(self, context, demo_data):
        handler = build_library_page(context, demo_data, "TEST_DATA")
        kinds = [chart.kind for chart in context.registry]
        assert kinds == ["pie", "pie", "pie", "bar", "column", "column", "combo", "combo"]
        assert handler is not None

    def test_empty_detection_sensitivity_removed(self, context, demo_data):
        build_library_page(context, demo_data, "TEST_DATA")
        assert _page(context).find(ElementId.DETECTION_SENSITIVITY) is None

    def test_detection_sensitivity_drawn_when_present(self, context, payload):
        payload["lib_data"]["TEST_DATA"]["detection_sensitivity"] = {"data": [["IN", 0.01]]}
        build_library_page(context, build_report_data(payload), "TEST_DATA")
        container = _page(context).query(ElementId.DETECTION_SENSITIVITY)
        assert container.chart is not None
        assert len(context.registry) == 9

    def test_region_colors_are_fixed(self, context, demo_data):
        build_library_page(context, demo_data, "TEST_DATA")
        chart = _page(context).query(ElementId.RAW_DISTRIBUTION).chart
        _, options = chart.draws[-1]
        assert options["colors"] == [REGION_COLORS["PR"], REGION_COLORS["V1V3"], "#999999"]
        assert options["pieHole"] == 0.4

    def test_number_at_regions_colors(self, context, demo_data):
        build_library_page(context, demo_data, "TEST_DATA")
        _, options = _page(context).query(ElementId.NUMBER_AT_REGIONS).chart.draws[-1]
        assert options["colors"] == list(GGPLOT_PALETTE[:3])

    def test_ratio_chart_style_column(self, context, demo_data):
        build_library_page(context, demo_data, "TEST_DATA")
        table, options = _page(context).query(ElementId.DISTINCT_TO_RAW).chart.draws[-1]
        assert table.style_column() == [REGION_COLORS["IN"], REGION_COLORS["PR"]]
        assert options["legend"] == {"position": "none"}

    def test_size_distribution_chart_per_region(self, context, demo_data):
        build_library_page(context, demo_data, "TEST_DATA")
        container = _page(context).query(ElementId.SIZE_DISTRIBUTION)
        assert len(container.children) == 2

        titles = []
        for region_container in container.children:
            _, options = region_container.chart.draws[-1]
            titles.append(options["title"])
            base = REGION_COLORS[options["title"]]
            assert options["series"][0]["color"] == base
            assert options["series"][1]["color"] == gradient_shades(base, 2)[1]
            assert options["vAxis"]["logScale"] is True
        assert titles == ["PR", "IN"]

    def test_drilldown_follows_parent_selection(self, context, demo_data):
        handler = build_library_page(context, demo_data, "TEST_DATA")
        page = _page(context)
        parent = page.query(ElementId.RAW_SEQUENCE_ANALYSIS).chart

        parent.select(1)
        assert page.query(ElementId.DRILLDOWN_LABEL).text == "Raw Sequence Analysis > NoMatch"

        parent.select(0)
        table, options = page.query(ElementId.DRILLDOWN_CHART).chart.draws[-1]
        assert table.labels() == ["IN", "PR"]
        assert table.column("Reason") == [143, 88]
        assert options["title"] == "GeneralFilterFailed"
        assert page.query(ElementId.DRILLDOWN_LABEL).text == (
            "Raw Sequence Analysis > GeneralFilterFailed"
        )
        assert handler.current.label == "GeneralFilterFailed"

    def test_drilldown_colors_follow_parent_slice(self, context, demo_data):
        build_library_page(context, demo_data, "TEST_DATA")
        page = _page(context)
        _, parent_options = page.query(ElementId.RAW_SEQUENCE_ANALYSIS).chart.draws[-1]
        _, options = page.query(ElementId.DRILLDOWN_CHART).chart.draws[-1]
        assert options["colors"] == gradient_shades(parent_options["colors"][0], 2)

    def test_no_drilldowns_removes_region(self, context, two_library_payload):
        data = build_report_data(two_library_payload)
        handler = build_library_page(context, data, "LIB2")
        page = _page(context)
        assert handler is None
        assert page.find(ElementId.DRILLDOWN_CONTAINER) is None
        assert page.find(ElementId.DRILLDOWN_CHART) is None
        assert page.query(ElementId.SIZE_DISTRIBUTION).children == []

    def test_malformed_library_raises(self, context, payload):
        del payload["lib_data"]["TEST_DATA"]["raw_distribution"]
        data = build_report_data(payload)
        with pytest.raises(MalformedDataset, match="raw_distribution"):
            build_library_page(context, data, "TEST_DATA")
