"""Invariant checks for the report data model.

Run on every parsed BatchSummary and LibraryReport: labels are non-empty
and unique within a dataset, counts and ratios are non-negative, and every
drilldown hangs off exactly one top-level category.
"""

from __future__ import annotations

from models import BatchSummary, LibraryReport

from .base import (
    MalformedDataset,
    validate_label,
    validate_non_negative,
    validate_unique_labels,
)


def validate_count_rows(rows, context: str) -> None:
    """Validate (label, count) rows.

    Raises:
        MalformedDataset: On empty labels, duplicates or negative counts
    """
    for label, count in rows:
        validate_label(label, context)
        validate_non_negative(count, f"{context} [{label}]")
    validate_unique_labels([label for label, _ in rows], context)


def validate_batch_summary(batch: BatchSummary) -> None:
    """Validate batch-level invariants.

    Raises:
        MalformedDataset: If any invariant is violated
    """
    if not batch.batch_name:
        raise MalformedDataset("Batch summary has no batch name")
    validate_non_negative(batch.number_of_libraries, "number_of_libraries")
    validate_non_negative(batch.total_reads, "total_reads")
    validate_count_rows(batch.raw_sequence_data.rows, "raw_sequence_data")


def validate_library_report(report: LibraryReport, label: str) -> None:
    """Validate one library's datasets.

    Args:
        report: Parsed library report
        label: Library label (for error messages)

    Raises:
        MalformedDataset: If any invariant is violated
    """
    validate_count_rows(report.raw_distribution.rows, f"{label}: raw_distribution")

    analysis = report.raw_sequence_analysis
    validate_count_rows(analysis.rows, f"{label}: raw_sequence_analysis")

    parents = analysis.labels()
    for drilldown in analysis.drilldowns:
        context = f"{label}: raw_sequence_analysis drilldown '{drilldown.label}'"
        if parents.count(drilldown.label) != 1:
            raise MalformedDataset(
                f"{context} does not match exactly one category. "
                f"Categories are: {parents}"
            )
        validate_count_rows(drilldown.rows, context)
    validate_unique_labels(
        [d.label for d in analysis.drilldowns], f"{label}: raw_sequence_analysis drilldowns"
    )

    for row in report.number_at_regions.rows:
        region = validate_label(row[0], f"{label}: number_at_regions")
        for count in row[1:]:
            validate_non_negative(count, f"{label}: number_at_regions [{region}]")

    for name in ("detection_sensitivity", "distinct_to_raw", "resampling_index"):
        for region, ratio in getattr(report, name).rows:
            validate_label(region, f"{label}: {name}")
            validate_non_negative(ratio, f"{label}: {name} [{region}]")

    for region, rows in report.size_distribution.items():
        validate_label(region, f"{label}: size_distribution")
        for index, distribution, cutoff in rows:
            if distribution is not None and cutoff is not None:
                raise MalformedDataset(
                    f"{label}: size_distribution [{region}] row {index} has both a "
                    f"distribution and a cutoff value; a row belongs to one series"
                )
            validate_non_negative(index, f"{label}: size_distribution [{region}]")
            validate_non_negative(distribution, f"{label}: size_distribution [{region}]")
            validate_non_negative(cutoff, f"{label}: size_distribution [{region}]")
