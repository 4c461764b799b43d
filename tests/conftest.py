"""Shared test fixtures for report engine tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add scripts directory to path so all tests can import from it
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

# Add project root to path for the models package
PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from charts import Chart, ChartBackend  # noqa: E402
from ingestion.demo_data import demo_payload  # noqa: E402
from ingestion.load_report import build_report_data  # noqa: E402


class RecordingChart(Chart):
    """Chart that records draws instead of rendering anything."""

    def __init__(self, kind: str, container, fail_draw: bool = False, fail_clear: bool = False):
        super().__init__(container)
        self.kind = kind
        self.fail_draw = fail_draw
        self.fail_clear = fail_clear
        self.draws: list[tuple] = []
        self.clear_calls = 0

    def _render(self, table, options):
        if self.fail_draw:
            raise RuntimeError("engine exploded while drawing")
        self.draws.append((table, options))

    def _clear(self):
        self.clear_calls += 1
        if self.fail_clear:
            raise RuntimeError("engine exploded while clearing")


class RecordingBackend(ChartBackend):
    """Backend handing out RecordingCharts and remembering every one created.

    Args:
        fail_draw_kinds: Chart kinds whose draw raises
        fail_clear_kinds: Chart kinds whose clear raises
    """

    def __init__(self, fail_draw_kinds=(), fail_clear_kinds=()):
        self.fail_draw_kinds = set(fail_draw_kinds)
        self.fail_clear_kinds = set(fail_clear_kinds)
        self.created: list[RecordingChart] = []

    def create(self, kind, container):
        chart = RecordingChart(
            kind,
            container,
            fail_draw=kind in self.fail_draw_kinds,
            fail_clear=kind in self.fail_clear_kinds,
        )
        self.created.append(chart)
        return chart


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def failing_backend():
    """Factory for a RecordingBackend that fails for the given chart kinds."""

    def _create(fail_draw_kinds=(), fail_clear_kinds=()) -> RecordingBackend:
        return RecordingBackend(fail_draw_kinds, fail_clear_kinds)

    return _create


@pytest.fixture
def payload() -> dict:
    """Fresh copy of the demonstration payload."""
    return demo_payload()


@pytest.fixture
def demo_data(payload):
    """ReportData for the demonstration payload."""
    return build_report_data(payload)


@pytest.fixture
def two_library_payload(payload) -> dict:
    """Demo payload with a second, drilldown-free library "LIB2"."""
    lib = dict(payload["lib_data"]["TEST_DATA"])
    lib["raw_sequence_analysis"] = {"data": [["NoMatch", 12]]}
    lib["size_distribution"] = {"data": {}}
    payload["lib_data"]["LIB2"] = lib
    return payload
