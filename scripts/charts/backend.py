"""Charting capability used by the page builders.

The engine only needs four things from a charting library: build a chart
of a given kind bound to a container, draw a DataTable with an options
dict, clear a chart, and report slice/bar selection through ``select``
listeners. ``PlotlyBackend`` provides them on top of plotly figures; the
options dict keeps the vocabulary of the report templates (``pieHole``,
``sliceVisibilityThreshold``, ``vAxis.logScale``, ``series`` overrides).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

import plotly.graph_objects as go

from charts.table import DataTable
from constants import ChartKind

log = logging.getLogger(__name__)

SELECT_EVENT = "select"
RESIDUE_SLICE_COLOR = "#cccccc"

_EASING = {"linear": "linear", "in": "cubic-in", "out": "cubic-out", "inAndOut": "cubic-in-out"}


class ChartEngineFailure(Exception):
    """The charting library raised while drawing or clearing a chart."""

    pass


class Chart(ABC):
    """A chart instance bound to one container.

    Must be disposed with ``clear()`` and ``remove_all_listeners()`` before
    its container is discarded.
    """

    kind: str = ""

    def __init__(self, container: Any):
        self.container = container
        self.table: DataTable | None = None
        self.options: dict = {}
        self._listeners: dict[str, list[Callable[[], None]]] = {}
        self._selection: list[dict] = []

    def draw(self, table: DataTable, options: dict | None = None) -> None:
        """Render ``table`` with ``options``, replacing any previous drawing.

        Raises:
            ChartEngineFailure: If the underlying library fails to render
        """
        options = dict(options or {})
        try:
            self._render(table, options)
        except ChartEngineFailure:
            raise
        except Exception as e:
            raise ChartEngineFailure(f"Failed to draw {self.kind} chart: {e}") from e
        self.table = table
        self.options = options
        self._selection = []

    def clear(self) -> None:
        """Drop the rendered content.

        Raises:
            ChartEngineFailure: If the underlying library fails to clear
        """
        try:
            self._clear()
        except Exception as e:
            raise ChartEngineFailure(f"Failed to clear {self.kind} chart: {e}") from e
        self.table = None
        self._selection = []

    def get_selection(self) -> list[dict]:
        """Current selection as ``[{"row": index}]`` (empty when nothing is selected)."""
        return list(self._selection)

    def select(self, row: int | None) -> None:
        """Select ``row`` (None clears) and notify ``select`` listeners."""
        self._selection = [] if row is None else [{"row": row}]
        for listener in list(self._listeners.get(SELECT_EVENT, [])):
            listener()

    def add_listener(self, event: str, listener: Callable[[], None]) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def remove_all_listeners(self) -> None:
        self._listeners.clear()

    def listener_count(self, event: str = SELECT_EVENT) -> int:
        return len(self._listeners.get(event, []))

    @property
    def is_drawn(self) -> bool:
        return self.table is not None

    @abstractmethod
    def _render(self, table: DataTable, options: dict) -> None:
        """Library-specific drawing."""

    @abstractmethod
    def _clear(self) -> None:
        """Library-specific teardown of rendered content."""


class ChartBackend(ABC):
    """Factory for chart instances of the supported kinds."""

    @abstractmethod
    def create(self, kind: str, container: Any) -> Chart:
        """Create a chart of ``kind`` bound to ``container``."""


class PlotlyChart(Chart):
    """Chart instance that renders into a ``plotly.graph_objects.Figure``."""

    def __init__(self, kind: str, container: Any, template: str = "plotly_white"):
        super().__init__(container)
        self.kind = kind
        self.template = template
        self.figure: go.Figure | None = None

    def _render(self, table: DataTable, options: dict) -> None:
        builders = {
            ChartKind.PIE: _pie_traces,
            ChartKind.COLUMN: _column_traces,
            ChartKind.BAR: _bar_traces,
            ChartKind.COMBO: _combo_traces,
        }
        traces = builders[self.kind](table, options)
        fig = go.Figure(data=traces)
        fig.update_layout(**_layout(self.kind, options, self.template))
        self.figure = fig

    def _clear(self) -> None:
        self.figure = None

    def to_json(self) -> str | None:
        """Figure as plotly JSON, or None when nothing is drawn."""
        return self.figure.to_json() if self.figure is not None else None


class PlotlyBackend(ChartBackend):
    """Builds ``PlotlyChart`` instances."""

    def __init__(self, template: str = "plotly_white"):
        self.template = template

    def create(self, kind: str, container: Any) -> PlotlyChart:
        if kind not in ChartKind.ALL:
            raise ChartEngineFailure(
                f"Unsupported chart kind '{kind}'. Valid kinds are: {sorted(ChartKind.ALL)}"
            )
        return PlotlyChart(kind, container, template=self.template)


# ---------------------------------------------------------------------------
# Trace builders
# ---------------------------------------------------------------------------


def _pie_traces(table: DataTable, options: dict) -> list:
    labels = table.labels()
    values = table.column(table.value_columns()[0])
    colors = list(options.get("colors") or [])
    threshold = options.get("sliceVisibilityThreshold", 0)
    residue_label = options.get("pieResidueSliceLabel", "Other")

    labels, values, colors = merge_small_slices(labels, values, colors, threshold, residue_label)

    marker = {"colors": colors} if colors else {}
    return [
        go.Pie(
            labels=labels,
            values=values,
            hole=options.get("pieHole", 0),
            marker=marker,
            sort=False,
            direction="clockwise",
            name=table.value_columns()[0],
        )
    ]


def merge_small_slices(
    labels: list,
    values: list,
    colors: list[str],
    threshold: float,
    residue_label: str,
) -> tuple[list, list, list[str]]:
    """Fold slices below ``threshold`` of the total into one residue slice.

    Colors stay aligned with the surviving slices; the residue slice is gray.
    A slice already named like the residue slice absorbs the residue instead.
    """
    total = sum(v or 0 for v in values)
    if not threshold or total <= 0:
        return labels, values, colors

    kept_labels, kept_values, kept_colors = [], [], []
    residue = 0
    for i, (label, value) in enumerate(zip(labels, values)):
        if (value or 0) / total < threshold:
            residue += value or 0
            continue
        kept_labels.append(label)
        kept_values.append(value)
        if i < len(colors):
            kept_colors.append(colors[i])

    if residue:
        if residue_label in kept_labels:
            idx = kept_labels.index(residue_label)
            kept_values[idx] += residue
        else:
            kept_labels.append(residue_label)
            kept_values.append(residue)
            if kept_colors:
                kept_colors.append(RESIDUE_SLICE_COLOR)
    return kept_labels, kept_values, kept_colors


def _column_traces(table: DataTable, options: dict) -> list:
    labels = table.labels()
    series_colors = list(options.get("colors") or [])
    style = table.style_column()
    outside = options.get("annotations", {}).get("alwaysOutside", False)

    traces = []
    for i, name in enumerate(table.value_columns()):
        values = table.column(name)
        marker = {}
        if i == 0 and style is not None:
            marker["color"] = style
        elif i < len(series_colors):
            marker["color"] = series_colors[i]
        traces.append(
            go.Bar(
                name=name,
                x=labels,
                y=values,
                marker=marker,
                text=values if outside else None,
                textposition="outside" if outside else None,
            )
        )
    return traces


def _bar_traces(table: DataTable, options: dict) -> list:
    labels = table.labels()
    series_colors = list(options.get("colors") or [])
    return [
        go.Bar(
            name=name,
            x=labels,
            y=table.column(name),
            marker={"color": series_colors[i]} if i < len(series_colors) else {},
        )
        for i, name in enumerate(table.value_columns())
    ]


def _combo_traces(table: DataTable, options: dict) -> list:
    x_values = table.labels()
    default_type = options.get("seriesType", "scatter")
    overrides = options.get("series", {})
    point_size = options.get("pointSize", 5)

    traces = []
    for i, name in enumerate(table.value_columns()):
        override = overrides.get(i, overrides.get(str(i), {}))
        # Each row feeds only the series that has a value for it
        points = [(x, y) for x, y in zip(x_values, table.column(name)) if y is not None]
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        is_line = override.get("type", default_type) == "line"
        if is_line:
            mode = "lines+markers" if override.get("pointsVisible", True) else "lines"
        else:
            mode = "markers"
        traces.append(
            go.Scatter(
                name=name,
                x=xs,
                y=ys,
                mode=mode,
                marker={"size": point_size, "color": override.get("color")},
                line={"color": override.get("color")} if is_line else None,
            )
        )
    return traces


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


def _layout(kind: str, options: dict, template: str) -> dict:
    layout: dict = {"template": template}

    if options.get("title"):
        layout["title"] = {"text": options["title"]}

    layout.update(_legend_layout(options.get("legend")))

    h_axis = options.get("hAxis", {})
    v_axis = options.get("vAxis", {})
    if h_axis.get("title"):
        layout["xaxis"] = {"title": {"text": h_axis["title"]}}
    y_axis: dict = {}
    if v_axis.get("title"):
        y_axis["title"] = {"text": v_axis["title"]}
    if v_axis.get("logScale"):
        y_axis["type"] = "log"
    if y_axis:
        layout["yaxis"] = y_axis

    if kind in (ChartKind.COLUMN, ChartKind.BAR):
        layout["barmode"] = "group"

    animation = options.get("animation")
    if animation:
        layout["transition"] = {
            "duration": animation.get("duration", 0),
            "easing": _EASING.get(animation.get("easing", "linear"), "linear"),
        }
    return layout


def _legend_layout(legend: Any) -> dict:
    """Map a legend option (``"none"`` or ``{"position": ...}``) to plotly layout keys."""
    position = legend.get("position") if isinstance(legend, dict) else legend
    if position is None:
        return {}
    if position == "none":
        return {"showlegend": False}
    placements = {
        "left": {"x": -0.1, "xanchor": "right", "y": 0.5, "yanchor": "middle"},
        "right": {"x": 1.02, "xanchor": "left", "y": 0.5, "yanchor": "middle"},
        "top": {"orientation": "h", "x": 0.5, "xanchor": "center", "y": 1.1},
        "bottom": {"orientation": "h", "x": 0.5, "xanchor": "center", "y": -0.15},
    }
    if position not in placements:
        log.debug("Unknown legend position %r, using plotly default", position)
        return {}
    return {"showlegend": True, "legend": placements[position]}
