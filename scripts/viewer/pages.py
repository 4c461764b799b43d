"""Page builders for the overview and library detail pages."""

from __future__ import annotations

import logging

from charts import DataTable
from coloring import GGPLOT_PALETTE, gradient_shades
from constants import ChartKind, ElementId, PageTemplate
from models import LibraryReport, RatioTable, ReportData
from utils import format_count
from validators import validate_library_report
from viewer.context import EngineContext
from viewer.document import Element
from viewer.drilldown import DrilldownHandler

log = logging.getLogger(__name__)

SIZE_DISTRIBUTION_X_TITLE = "Raw sequencing reads per unique PID"
SIZE_DISTRIBUTION_Y_TITLE = "# of PIDs"


def build_overview_page(context: EngineContext, data: ReportData) -> None:
    """Batch facts plus one column chart of raw sequences per library."""
    page = context.document.show_page(context.document.clone_template(PageTemplate.MAIN))
    batch = data.batch

    fields = {
        ElementId.BATCH_NAME: batch.batch_name,
        ElementId.PROCESSED_TIME: batch.process_end_time or "N/A",
        ElementId.TCS_VERSION: batch.current_version or "N/A",
        ElementId.VIRAL_SEQ_VERSION: batch.viral_seq_version or "N/A",
        ElementId.NUMBER_OF_LIBRARIES: str(batch.number_of_libraries),
        ElementId.TOTAL_READS: format_count(batch.total_reads),
    }
    for element_id, text in fields.items():
        page.query(element_id).text = text

    context.draw_chart(
        ChartKind.COLUMN,
        page.query(ElementId.RAW_SEQUENCE_CHART),
        DataTable.from_rows(["Library", "Raw Sequences"], batch.raw_sequence_data.to_list()),
        {"annotations": {"alwaysOutside": True}, "legend": "none"},
    )


def build_library_page(
    context: EngineContext, data: ReportData, label: str
) -> DrilldownHandler | None:
    """Detail page for one library.

    Returns:
        The page's drilldown handler, or None when the library has no
        drilldowns (the drilldown section is then removed)

    Raises:
        MalformedDataset: If the library's datasets are invalid
        KeyError: If ``label`` is not in the data
    """
    report = data.libraries[label]
    validate_library_report(report, label)

    page = context.document.show_page(context.document.clone_template(PageTemplate.LIBRARY))
    colors = context.colors

    rows = report.raw_distribution.to_list()
    context.draw_chart(
        ChartKind.PIE,
        page.query(ElementId.RAW_DISTRIBUTION),
        DataTable.from_rows(["Region", "Paired Raw"], rows),
        context.pie_options(colors=colors.colors_for(report.raw_distribution.labels())),
    )

    analysis = report.raw_sequence_analysis
    parent_colors = {category: colors.color_for(category) for category in analysis.labels()}
    analysis_table = DataTable.from_rows(
        ["Categories", "Reason"], [list(r) for r in analysis.rows]
    )
    analysis_chart = context.draw_chart(
        ChartKind.PIE,
        page.query(ElementId.RAW_SEQUENCE_ANALYSIS),
        analysis_table,
        context.pie_options(colors=[parent_colors[c] for c in analysis.labels()]),
    )

    handler = None
    if analysis.drilldowns:
        drilldown_container = page.query(ElementId.DRILLDOWN_CHART)
        drilldown_chart = context.backend.create(ChartKind.PIE, drilldown_container)
        drilldown_container.chart = drilldown_chart
        context.registry.register(drilldown_chart)
        handler = DrilldownHandler(
            analysis,
            parent_chart=analysis_chart,
            parent_table=analysis_table,
            chart=drilldown_chart,
            label_element=page.query(ElementId.DRILLDOWN_LABEL),
            parent_colors=parent_colors,
            pie_options=context.pie_options(),
        )
        handler.attach()
    else:
        page.query(ElementId.DRILLDOWN_CONTAINER).remove()

    context.draw_chart(
        ChartKind.BAR,
        page.query(ElementId.NUMBER_AT_REGIONS),
        DataTable.from_rows(
            ["Region", "TCS", "Combined TCS", "TCS After QC"],
            [list(r) for r in report.number_at_regions.rows],
        ),
        {"colors": list(GGPLOT_PALETTE[:3])},
    )

    ratio_charts = [
        (ElementId.DETECTION_SENSITIVITY, "Detection Sensitivity", report.detection_sensitivity),
        (ElementId.DISTINCT_TO_RAW, "Distinct to Raw", report.distinct_to_raw),
        (ElementId.RESAMPLING_INDEX, "Resampling Index", report.resampling_index),
    ]
    for element_id, title, table in ratio_charts:
        container = page.query(element_id)
        if element_id == ElementId.DETECTION_SENSITIVITY and not len(table):
            container.parent.remove()
            continue
        _draw_ratio_chart(context, container, title, table)

    _draw_size_distribution(context, page.query(ElementId.SIZE_DISTRIBUTION), report)

    log.info("Built library page %s with %d chart(s)", label, len(context.registry))
    return handler


def _draw_ratio_chart(
    context: EngineContext, container: Element, title: str, table: RatioTable
) -> None:
    rows = [[region, ratio, context.colors.color_for(region)] for region, ratio in table.rows]
    context.draw_chart(
        ChartKind.COLUMN,
        container,
        DataTable.from_rows(["Region", title, {"role": "style"}], rows),
        {"legend": {"position": "none"}},
    )


def _draw_size_distribution(
    context: EngineContext, container: Element, report: LibraryReport
) -> None:
    """One scatter-plus-cutoff-line chart per region, in payload order."""
    for region, rows in report.size_distribution.items():
        region_container = container.append(Element(css_class="chart size_distribution_region"))
        base = context.colors.color_for(region)
        shade = gradient_shades(base, 2)[1]
        context.draw_chart(
            ChartKind.COMBO,
            region_container,
            DataTable.from_rows(["Index", "Distribution", "Cutoff"], [list(r) for r in rows]),
            {
                "pointSize": 5,
                "title": region,
                "hAxis": {"title": SIZE_DISTRIBUTION_X_TITLE},
                "vAxis": {"title": SIZE_DISTRIBUTION_Y_TITLE, "logScale": True},
                "legend": "none",
                "seriesType": "scatter",
                "series": {
                    0: {"color": base},
                    1: {"type": "line", "pointsVisible": False, "color": shade},
                },
            },
        )
