"""JSON payload generation.

Produces the normalized ``main_data``/``lib_data`` payload that the HTML
report embeds, stamped with a payload version and generation time.
"""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import UTC, datetime

from models import ReportData
from validators import ValidationError

log = logging.getLogger(__name__)

REPORT_VERSION = "1.0"


def generate_json_report(data: ReportData) -> dict:
    """Build the normalized payload for a report data set.

    Libraries that fail to parse are carried over unchanged so the payload
    still describes every library in the batch.

    Args:
        data: Loaded report data

    Returns:
        Payload dict with report_version, generated_at, main_data, lib_data
    """
    lib_data = {}
    invalid = []
    for label in data.labels():
        try:
            lib_data[label] = data.libraries[label].to_dict()
        except ValidationError as e:
            log.warning("Library %s kept unnormalized: %s", label, e)
            lib_data[label] = data.libraries.raw(label)
            invalid.append(label)

    report = {
        "report_version": REPORT_VERSION,
        "generated_at": datetime.now(UTC).isoformat(),
        "main_data": data.batch.to_dict(),
        "lib_data": lib_data,
        "invalid_libraries": invalid,
    }

    log.info(
        "Generated JSON payload for batch %s (version=%s, libraries=%d)",
        data.batch.batch_name,
        REPORT_VERSION,
        len(lib_data),
    )
    return report


def serialize_report(report: dict) -> str:
    """Serialize a payload dict to a pretty-printed JSON string."""
    return json.dumps(report, indent=2, default=str)


def compute_report_checksum(report_json: str) -> str:
    """SHA-256 hex digest of a serialized payload."""
    return hashlib.sha256(report_json.encode()).hexdigest()
