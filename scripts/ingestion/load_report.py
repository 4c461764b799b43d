"""Load the report payload written by the log pipeline.

The payload is one JSON object with two keys: ``main_data`` (the batch
summary) and ``lib_data`` (library label -> chart datasets). The batch
summary is parsed eagerly; each library is parsed the first time its page
is shown, so a malformed library only breaks its own page.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from constants import DatasetName
from ingestion.demo_data import demo_payload
from models import (
    BatchSummary,
    CountTable,
    Drilldown,
    LibraryIndex,
    LibraryReport,
    RatioTable,
    RegionCounts,
    ReportData,
    SequenceAnalysis,
    SizeDistribution,
)
from utils import safe_float, safe_int, safe_label, safe_str
from validators import (
    MalformedDataset,
    ValidationError,
    validate_batch_summary,
    validate_library_report,
    validate_required_keys,
)

log = logging.getLogger(__name__)

PAYLOAD_REQUIRED = ["main_data", "lib_data"]


def _rows(dataset: Any, context: str) -> list:
    """The ``data`` list of a dataset object."""
    validate_required_keys(dataset, ["data"], context)
    rows = dataset["data"]
    if not isinstance(rows, list):
        raise MalformedDataset(f"{context} data must be a list, got: {type(rows).__name__}")
    return rows


def _row(row: Any, width: int, context: str) -> list:
    if not isinstance(row, (list, tuple)) or len(row) != width:
        raise MalformedDataset(f"{context} rows must have {width} cells, got: {row!r}")
    return list(row)


def _label(value: Any, context: str) -> str:
    label = safe_label(value)
    if label is None:
        raise MalformedDataset(f"{context} has an empty or non-string label: {value!r}")
    return label


def _count(value: Any, context: str) -> int:
    count = safe_int(value)
    if count is None:
        raise MalformedDataset(f"{context} has a non-integer count: {value!r}")
    return count


def _optional_count(value: Any, context: str) -> int | None:
    return None if value is None else _count(value, context)


def _ratio(value: Any, context: str) -> float:
    ratio = safe_float(value)
    if ratio is None:
        raise MalformedDataset(f"{context} has a non-numeric ratio: {value!r}")
    return ratio


def parse_count_rows(rows: list, context: str) -> tuple[tuple[str, int], ...]:
    if not isinstance(rows, list):
        raise MalformedDataset(f"{context} rows must be a list, got: {type(rows).__name__}")
    parsed = []
    for row in rows:
        label, count = _row(row, 2, context)
        parsed.append((_label(label, context), _count(count, f"{context} [{label}]")))
    return tuple(parsed)


def parse_ratio_table(dataset: Any, context: str) -> RatioTable:
    parsed = []
    for row in _rows(dataset, context):
        region, ratio = _row(row, 2, context)
        parsed.append((_label(region, context), _ratio(ratio, f"{context} [{region}]")))
    return RatioTable(tuple(parsed))


def parse_sequence_analysis(dataset: Any, context: str) -> SequenceAnalysis:
    rows = parse_count_rows(_rows(dataset, context), context)
    drilldowns_raw = dataset.get("drilldowns") or []
    if not isinstance(drilldowns_raw, list):
        raise MalformedDataset(f"{context} drilldowns must be a list")

    drilldowns = []
    for entry in drilldowns_raw:
        validate_required_keys(entry, ["label", "data"], f"{context} drilldown")
        parent = _label(entry["label"], f"{context} drilldown")
        children = parse_count_rows(entry["data"] or [], f"{context} drilldown '{parent}'")
        drilldowns.append(Drilldown(parent, children))
    return SequenceAnalysis(rows, tuple(drilldowns))


def parse_region_counts(dataset: Any, context: str) -> RegionCounts:
    parsed = []
    for row in _rows(dataset, context):
        region, tcs, combined, after_qc = _row(row, 4, context)
        region = _label(region, context)
        parsed.append((
            region,
            *(_optional_count(v, f"{context} [{region}]") for v in (tcs, combined, after_qc)),
        ))
    return RegionCounts(tuple(parsed))


def parse_size_distribution(dataset: Any, context: str) -> SizeDistribution:
    validate_required_keys(dataset, ["data"], context)
    regions = dataset["data"]
    if not isinstance(regions, dict):
        raise MalformedDataset(f"{context} data must be an object of region -> rows")

    series = {}
    for region, rows in regions.items():
        region = _label(region, context)
        region_context = f"{context} [{region}]"
        if not isinstance(rows, list):
            raise MalformedDataset(f"{region_context} rows must be a list")
        parsed = []
        for row in rows:
            index, distribution, cutoff = _row(row, 3, region_context)
            parsed.append((
                _count(index, region_context),
                None if distribution is None else _ratio(distribution, region_context),
                _optional_count(cutoff, region_context),
            ))
        series[region] = tuple(parsed)
    return SizeDistribution(series)


def parse_library_report(label: str, payload: Any) -> LibraryReport:
    """Parse and validate one library's datasets.

    Raises:
        MalformedDataset: If a dataset is missing or invalid
    """
    validate_required_keys(payload, DatasetName.REQUIRED, f"Library '{label}'")

    def where(name: str) -> str:
        return f"{label}: {name}"

    raw_distribution = DatasetName.RAW_DISTRIBUTION
    detection = payload.get(DatasetName.DETECTION_SENSITIVITY)
    report = LibraryReport(
        raw_distribution=CountTable(
            parse_count_rows(
                _rows(payload[raw_distribution], where(raw_distribution)),
                where(raw_distribution),
            )
        ),
        raw_sequence_analysis=parse_sequence_analysis(
            payload[DatasetName.RAW_SEQUENCE_ANALYSIS], where(DatasetName.RAW_SEQUENCE_ANALYSIS)
        ),
        number_at_regions=parse_region_counts(
            payload[DatasetName.NUMBER_AT_REGIONS], where(DatasetName.NUMBER_AT_REGIONS)
        ),
        distinct_to_raw=parse_ratio_table(
            payload[DatasetName.DISTINCT_TO_RAW], where(DatasetName.DISTINCT_TO_RAW)
        ),
        resampling_index=parse_ratio_table(
            payload[DatasetName.RESAMPLING_INDEX], where(DatasetName.RESAMPLING_INDEX)
        ),
        size_distribution=parse_size_distribution(
            payload[DatasetName.SIZE_DISTRIBUTION], where(DatasetName.SIZE_DISTRIBUTION)
        ),
        detection_sensitivity=(
            RatioTable()
            if detection is None
            else parse_ratio_table(detection, where(DatasetName.DETECTION_SENSITIVITY))
        ),
    )
    validate_library_report(report, label)
    return report


def parse_batch_summary(main_data: Any) -> BatchSummary:
    """Parse and validate the ``main_data`` object.

    Raises:
        MalformedDataset: If a field is missing or invalid
    """
    validate_required_keys(main_data, ["batch_name"], "main_data")
    raw_sequence_data = main_data.get("raw_sequence_data") or []
    if not isinstance(raw_sequence_data, list):
        raise MalformedDataset("main_data raw_sequence_data must be a list")

    batch = BatchSummary(
        batch_name=safe_str(main_data["batch_name"], default=""),
        process_start_time=safe_str(main_data.get("process_start_time")),
        process_end_time=safe_str(main_data.get("process_end_time")),
        current_version=safe_str(main_data.get("current_version")),
        viral_seq_version=safe_str(main_data.get("viral_seq_version")),
        number_of_libraries=_count(main_data.get("number_of_libraries", 0), "number_of_libraries"),
        total_reads=_count(main_data.get("total_reads", 0), "total_reads"),
        raw_sequence_data=CountTable(parse_count_rows(raw_sequence_data, "raw_sequence_data")),
    )
    validate_batch_summary(batch)
    return batch


def build_report_data(payload: Any) -> ReportData:
    """Turn a decoded payload into ReportData.

    A payload whose ``main_data`` has no batch name is replaced by the demo
    payload.

    Raises:
        ValidationError: If the payload structure or batch summary is invalid
    """
    if not isinstance(payload, dict):
        raise ValidationError(f"Report payload must be an object, got: {type(payload).__name__}")
    main_data = payload.get("main_data") or {}
    if not safe_str(main_data.get("batch_name") if isinstance(main_data, dict) else None):
        log.warning("Report payload has no batch name, using the demo data set")
        payload = demo_payload()

    validate_required_keys(payload, PAYLOAD_REQUIRED, "Report payload")
    lib_data = payload["lib_data"]
    if not isinstance(lib_data, dict):
        raise MalformedDataset("lib_data must be an object of library label -> datasets")

    batch = parse_batch_summary(payload["main_data"])
    try:
        libraries = LibraryIndex(lib_data, parse=parse_library_report)
    except ValueError as e:
        raise MalformedDataset(str(e)) from e

    log.info(
        "Loaded batch %s with %d librar%s",
        batch.batch_name,
        len(libraries),
        "y" if len(libraries) == 1 else "ies",
    )
    return ReportData(batch=batch, libraries=libraries)


def load_report_data(path: str | Path) -> ReportData:
    """Read and parse a report payload JSON file.

    Raises:
        ValidationError: If the file is missing, is not JSON or is invalid
    """
    path = Path(path)
    if not path.is_file():
        raise ValidationError(f"Report payload not found: {path}")
    try:
        payload = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValidationError(f"Failed to read {path.name}: {e}") from e
    return build_report_data(payload)
