"""Page template fragments for the overview and library pages."""

from __future__ import annotations

from constants import ElementId, PageTemplate
from viewer.document import Element


def _field(label: str, element_id: str) -> Element:
    return Element(
        tag="p",
        css_class="field",
        children=[
            Element(tag="span", css_class="field_label", text=label),
            Element(element_id, tag="span", css_class="field_value"),
        ],
    )


def _chart_section(title: str, element_id: str) -> Element:
    return Element(
        tag="section",
        css_class="chart_section",
        children=[
            Element(tag="h3", text=title),
            Element(element_id, css_class="chart"),
        ],
    )


def main_page() -> Element:
    return Element(
        css_class=PageTemplate.MAIN,
        children=[
            Element(tag="h2", text="Basic Statistics"),
            _field("Batch", ElementId.BATCH_NAME),
            _field("Processed", ElementId.PROCESSED_TIME),
            _field("TCS version", ElementId.TCS_VERSION),
            _field("viral_seq version", ElementId.VIRAL_SEQ_VERSION),
            _field("Libraries", ElementId.NUMBER_OF_LIBRARIES),
            _field("Total reads", ElementId.TOTAL_READS),
            _chart_section("Raw Sequences per Library", ElementId.RAW_SEQUENCE_CHART),
        ],
    )


def library_page() -> Element:
    drilldown = Element(
        ElementId.DRILLDOWN_CONTAINER,
        tag="section",
        css_class="chart_section",
        children=[
            Element(ElementId.DRILLDOWN_LABEL, tag="h4"),
            Element(ElementId.DRILLDOWN_CHART, css_class="chart"),
        ],
    )
    return Element(
        css_class=PageTemplate.LIBRARY,
        children=[
            _chart_section("Raw Distribution", ElementId.RAW_DISTRIBUTION),
            _chart_section("Raw Sequence Analysis", ElementId.RAW_SEQUENCE_ANALYSIS),
            drilldown,
            _chart_section("Number of TCS at Regions", ElementId.NUMBER_AT_REGIONS),
            _chart_section("Detection Sensitivity", ElementId.DETECTION_SENSITIVITY),
            _chart_section("Distinct to Raw", ElementId.DISTINCT_TO_RAW),
            _chart_section("Resampling Index", ElementId.RESAMPLING_INDEX),
            _chart_section("PID Size Distribution", ElementId.SIZE_DISTRIBUTION),
        ],
    )


DEFAULT_TEMPLATES = {
    PageTemplate.MAIN: main_page,
    PageTemplate.LIBRARY: library_page,
}
