"""Data validation utilities for the TCS log viewer.

This package provides the validation error types and the checks run on the
report payload and the viewer configuration before anything is rendered.

Modules:
    base: Exceptions and building-block checks (keys, labels, counts)
    config: viewer.yaml structure validation
    report_data: Batch summary and library report invariants

Example:
    >>> from validators import MalformedDataset, validate_library_report
    >>> try:
    ...     validate_library_report(report, "RV95")
    ... except MalformedDataset as e:
    ...     print(f"Library RV95 is malformed: {e}")
"""

from .base import (
    MalformedDataset,
    ValidationError,
    validate_label,
    validate_non_negative,
    validate_required_keys,
    validate_unique_labels,
)

from .config import (
    validate_include_plotlyjs,
    validate_pie_config,
    validate_viewer_config,
)

from .report_data import (
    validate_batch_summary,
    validate_count_rows,
    validate_library_report,
)

__all__ = [
    # Exceptions
    "ValidationError",
    "MalformedDataset",
    # Base validators
    "validate_required_keys",
    "validate_label",
    "validate_unique_labels",
    "validate_non_negative",
    # Config validators
    "validate_include_plotlyjs",
    "validate_pie_config",
    "validate_viewer_config",
    # Report data validators
    "validate_batch_summary",
    "validate_count_rows",
    "validate_library_report",
]
