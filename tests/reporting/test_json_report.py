"""Tests for JSON payload generation."""

from __future__ import annotations

import sys
from pathlib import Path

# Add scripts directory to path
SCRIPTS_DIR = str(Path(__file__).resolve().parent.parent.parent / "scripts")
if SCRIPTS_DIR not in sys.path:
    sys.path.insert(0, SCRIPTS_DIR)

from ingestion.load_report import build_report_data  # noqa: E402
from reporting.json_report import (  # noqa: E402
    REPORT_VERSION,
    compute_report_checksum,
    generate_json_report,
    serialize_report,
)


class TestGenerateJsonReport:
    def test_envelope(self, demo_data):
        report = generate_json_report(demo_data)
        assert report["report_version"] == REPORT_VERSION == "1.0"
        assert "generated_at" in report
        assert report["main_data"]["batch_name"] == "test_batch"
        assert list(report["lib_data"]) == ["TEST_DATA"]
        assert report["invalid_libraries"] == []

    def test_normalized_library_reloads(self, demo_data):
        report = generate_json_report(demo_data)
        reloaded = build_report_data(
            {"main_data": report["main_data"], "lib_data": report["lib_data"]}
        )
        assert reloaded.libraries["TEST_DATA"].to_dict() == report["lib_data"]["TEST_DATA"]
        assert reloaded.batch == demo_data.batch

    def test_detection_sensitivity_always_present(self, demo_data):
        lib = generate_json_report(demo_data)["lib_data"]["TEST_DATA"]
        assert lib["detection_sensitivity"] == {"data": []}

    def test_malformed_library_kept_raw(self, payload):
        broken = {"raw_distribution": {"data": [["PR", -1]]}}
        payload["lib_data"]["BROKEN"] = broken
        report = generate_json_report(build_report_data(payload))
        assert report["invalid_libraries"] == ["BROKEN"]
        assert report["lib_data"]["BROKEN"] == broken


class TestSerialization:
    def test_serialize_is_indented(self):
        assert serialize_report({"a": 1}) == "{\n  \"a\": 1\n}"

    def test_checksum_is_stable(self):
        text = serialize_report({"a": 1})
        assert compute_report_checksum(text) == compute_report_checksum(text)
        assert len(compute_report_checksum(text)) == 64
        assert compute_report_checksum(text) != compute_report_checksum(text + " ")
