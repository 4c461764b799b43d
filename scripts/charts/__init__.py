"""Charting capability, chart data tables and chart lifecycle tracking."""

from .backend import (
    SELECT_EVENT,
    Chart,
    ChartBackend,
    ChartEngineFailure,
    PlotlyBackend,
    PlotlyChart,
)
from .registry import ChartRegistry
from .table import DataTable

__all__ = [
    "Chart",
    "ChartBackend",
    "ChartEngineFailure",
    "ChartRegistry",
    "DataTable",
    "PlotlyBackend",
    "PlotlyChart",
    "SELECT_EVENT",
]
