"""Lifecycle tracking for live chart instances.

After every navigation the registry holds exactly the charts visible on
the current page. Teardown disposes each chart independently, so one chart
that fails to clear never strands the others.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from charts.backend import Chart

log = logging.getLogger(__name__)


class ChartRegistry:
    """Ordered collection of chart instances owned by the current page."""

    def __init__(self):
        self._charts: list[Chart] = []

    def register(self, chart: Chart) -> Chart:
        """Track ``chart`` until the next teardown. Returns it for chaining."""
        self._charts.append(chart)
        return chart

    def teardown_all(self) -> int:
        """Clear every chart, detach its listeners, and empty the registry.

        Failures are logged per chart and never interrupt the loop. Calling
        this on an empty registry does nothing.

        Returns:
            Number of charts that failed to tear down cleanly
        """
        if not self._charts:
            return 0

        failures = 0
        for chart in self._charts:
            failed = False
            try:
                chart.clear()
            except Exception:
                failed = True
                log.warning("Failed to clear %s chart", chart.kind, exc_info=True)
            try:
                chart.remove_all_listeners()
            except Exception:
                failed = True
                log.warning("Failed to detach listeners from %s chart", chart.kind, exc_info=True)
            failures += failed

        log.info("Tore down %d chart(s), %d failure(s)", len(self._charts), failures)
        self._charts = []
        return failures

    @property
    def charts(self) -> tuple[Chart, ...]:
        return tuple(self._charts)

    def __iter__(self) -> Iterator[Chart]:
        return iter(list(self._charts))

    def __len__(self) -> int:
        return len(self._charts)
