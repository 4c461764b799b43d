"""Base validation utilities for the log viewer.

This module provides the exception types and the small building-block
checks that the payload loader and the page builders share.
"""

from collections.abc import Iterable, Mapping


class ValidationError(Exception):
    """Custom exception for input validation failures."""

    pass


class MalformedDataset(ValidationError):
    """A library report or batch summary has missing or invalid fields."""

    pass


def validate_required_keys(
    data: Mapping, required: Iterable[str], context: str
) -> None:
    """Validate that a mapping has all required keys.

    Args:
        data: Mapping to validate
        required: Required key names
        context: Description of the mapping (for error messages)

    Raises:
        MalformedDataset: If the value is not a mapping or keys are missing
    """
    if not isinstance(data, Mapping):
        raise MalformedDataset(
            f"{context} must be an object, got: {type(data).__name__}"
        )
    missing = set(required) - set(data)
    if missing:
        raise MalformedDataset(f"{context} missing required keys: {sorted(missing)}")


def validate_label(label: object, context: str) -> str:
    """Validate that a label is a non-empty string.

    Returns:
        The label unchanged

    Raises:
        MalformedDataset: If the label is not a string or is blank
    """
    if not isinstance(label, str) or not label.strip():
        raise MalformedDataset(f"{context} has an empty or non-string label: {label!r}")
    return label


def validate_unique_labels(labels: Iterable[str], context: str) -> None:
    """Validate that labels are unique.

    Raises:
        MalformedDataset: If any label appears more than once
    """
    seen: set[str] = set()
    duplicates: set[str] = set()
    for label in labels:
        if label in seen:
            duplicates.add(label)
        seen.add(label)
    if duplicates:
        raise MalformedDataset(f"{context} contains duplicate labels: {sorted(duplicates)}")


def validate_non_negative(value: float | None, context: str) -> None:
    """Validate that a count or ratio is non-negative. None means "not measured".

    Raises:
        MalformedDataset: If the value is negative
    """
    if value is not None and value < 0:
        raise MalformedDataset(f"{context} contains a negative value: {value}")
