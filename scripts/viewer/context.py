"""Engine context: the state one report session shares across navigations."""

from __future__ import annotations

import logging

from charts import Chart, ChartBackend, ChartRegistry, DataTable, PlotlyBackend
from coloring import ColorTable
from viewer.config import ViewerConfig
from viewer.document import Document, Element
from viewer.templates import DEFAULT_TEMPLATES

log = logging.getLogger(__name__)


class EngineContext:
    """Owns the color table, chart registry, document and charting backend.

    The color table lives as long as the context, so a label keeps its color
    across every page of the session. The registry is emptied on every
    navigation by the page controller.
    """

    def __init__(
        self,
        config: ViewerConfig | None = None,
        backend: ChartBackend | None = None,
        document: Document | None = None,
        colors: ColorTable | None = None,
    ):
        self.config = config if config is not None else ViewerConfig()
        self.backend = backend if backend is not None else PlotlyBackend()
        self.document = document if document is not None else Document(DEFAULT_TEMPLATES)
        self.colors = colors if colors is not None else ColorTable()
        self.registry = ChartRegistry()

    def draw_chart(
        self, kind: str, container: Element, table: DataTable, options: dict
    ) -> Chart:
        """Create a chart in ``container``, draw it and start tracking it."""
        chart = self.backend.create(kind, container)
        container.chart = chart
        self.registry.register(chart)
        chart.draw(table, options)
        return chart

    def pie_options(self, **overrides) -> dict:
        options = self.config.pie.chart_options()
        options.update(overrides)
        return options
