"""Drilldown pie for the raw sequence analysis chart.

Clicking a category slice in the parent pie redraws the drilldown pie with
that category's children, shaded from the category's own color. A click on
a category without children, or an empty selection, leaves the current
drilldown as it is. One handler lives exactly as long as its page.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from charts import SELECT_EVENT, Chart, DataTable
from coloring import gradient_shades
from constants import DRILLDOWN_LABEL_PREFIX
from models import Drilldown, SequenceAnalysis
from viewer.document import Element

log = logging.getLogger(__name__)

FALLBACK_BASE_COLOR = "#8888ee"
DRILLDOWN_HEADER = ["Categories", "Reason"]


class DrilldownHandler:
    """State machine for one page's drilldown chart.

    Args:
        analysis: The page's raw sequence analysis dataset (with drilldowns)
        parent_chart: The category pie whose selection drives the drilldown
        parent_table: Data drawn in ``parent_chart`` (row -> category label)
        chart: The drilldown pie
        label_element: Element showing "Raw Sequence Analysis > <category>"
        parent_colors: Category label -> color used in the parent pie
        pie_options: Base options for the drilldown pie
    """

    def __init__(
        self,
        analysis: SequenceAnalysis,
        parent_chart: Chart,
        parent_table: DataTable,
        chart: Chart,
        label_element: Element,
        parent_colors: Mapping[str, str],
        pie_options: dict,
    ):
        if not analysis.drilldowns:
            raise ValueError("DrilldownHandler needs at least one drilldown")
        self.analysis = analysis
        self.parent_chart = parent_chart
        self.parent_table = parent_table
        self.chart = chart
        self.label_element = label_element
        self.parent_colors = dict(parent_colors)
        self.pie_options = dict(pie_options)
        self.current: Drilldown = analysis.drilldowns[0]

    def attach(self) -> None:
        """Draw the initial drilldown and start listening to parent selections."""
        self.show(self.current)
        self.parent_chart.add_listener(SELECT_EVENT, self.on_select)

    def on_select(self) -> None:
        selection = self.parent_chart.get_selection()
        if not selection or selection[0].get("row") is None:
            return
        label = self.parent_table.get_value(selection[0]["row"], 0)
        self.select_label(label)

    def select_label(self, label: str) -> bool:
        """Show the drilldown for ``label``. Returns False when it has none."""
        drilldown = self.analysis.find_drilldown(label)
        if drilldown is None:
            log.debug("No drilldown configured for category %r", label)
            return False
        self.show(drilldown)
        return True

    def show(self, drilldown: Drilldown) -> None:
        self.chart.draw(
            DataTable.from_rows(DRILLDOWN_HEADER, [list(r) for r in drilldown.rows]),
            {"title": drilldown.label, **self.pie_options, "colors": self.shades_for(drilldown)},
        )
        self.current = drilldown
        self.label_element.text = DRILLDOWN_LABEL_PREFIX + drilldown.label

    def shades_for(self, drilldown: Drilldown) -> list[str]:
        base = self.parent_colors.get(drilldown.label, FALLBACK_BASE_COLOR)
        return gradient_shades(base, len(drilldown.rows) or 2)
