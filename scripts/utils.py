"""Shared helper functions for the log viewer scripts.

Tolerant scalar coercion used when reading the report payload, plus the
small formatting helpers the page builders share.
"""

import math
from typing import Any


def safe_float(val: Any, default: float | None = None) -> float | None:
    """Convert value to float, returning default for missing or invalid values.

    Booleans are rejected so a stray ``true`` in the payload is not read as 1.0.

    Examples:
        >>> safe_float("0.007")
        0.007
        >>> safe_float(None)
        None
        >>> safe_float("nan", default=0.0)
        0.0
    """
    if val is None or isinstance(val, bool):
        return default
    try:
        result = float(val)
    except (ValueError, TypeError):
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result


def safe_int(val: Any, default: int | None = None) -> int | None:
    """Convert value to int, returning default for missing or invalid values.

    Integral floats ("1730.0", 1730.0) are accepted; fractional ones are not,
    since every count in a report is a whole number of reads.

    Examples:
        >>> safe_int("1730")
        1730
        >>> safe_int(1730.0)
        1730
        >>> safe_int(2.5)
        None
    """
    if val is None or isinstance(val, bool):
        return default
    if isinstance(val, int):
        return val
    number = safe_float(val)
    if number is None or not number.is_integer():
        return default
    return int(number)


def safe_str(val: Any, default: str | None = None) -> str | None:
    """Convert a metadata value to a stripped string.

    Numbers are stringified (versions are sometimes written as 2.0); None and
    whitespace-only values give the default.
    """
    if val is None:
        return default
    if isinstance(val, float) and math.isnan(val):
        return default
    result = str(val).strip()
    return result or default


def safe_label(val: Any) -> str | None:
    """Return the label unchanged if it is a non-blank string, else None.

    Labels are matched by exact equality downstream, so they are never
    stripped or re-cased here.

    Examples:
        >>> safe_label("PR")
        'PR'
        >>> safe_label("   ")
        None
    """
    if not isinstance(val, str) or not val.strip():
        return None
    return val


def format_count(value: int | None) -> str:
    """Format a read count with thousands separators ("N/A" when missing)."""
    if value is None:
        return "N/A"
    return f"{value:,}"
