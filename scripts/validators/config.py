"""Configuration validation for the viewer's viewer.yaml.

Every key is optional; the validators only check the keys that are present
so a partial file can override a few defaults.
"""

from .base import ValidationError

VALID_TOP_LEVEL_KEYS = {
    "title",
    "homepage",
    "overview_label",
    "default_library",
    "error_contact",
    "include_plotlyjs",
    "pie",
}
VALID_PIE_KEYS = {
    "slice_visibility_threshold",
    "pie_hole",
    "legend_position",
    "animation_duration",
}
VALID_PLOTLYJS_MODES = {"cdn", "embed"}
VALID_LEGEND_POSITIONS = {"left", "right", "top", "bottom", "none"}


def validate_include_plotlyjs(mode: str) -> None:
    """Validate how plotly.js is shipped with the report.

    Raises:
        ValidationError: If mode is not 'cdn' or 'embed'
    """
    if mode not in VALID_PLOTLYJS_MODES:
        raise ValidationError(
            f"Invalid include_plotlyjs '{mode}'. "
            f"Valid options are: {sorted(VALID_PLOTLYJS_MODES)}"
        )


def validate_pie_config(pie: dict) -> None:
    """Validate the pie chart defaults block.

    Args:
        pie: Pie configuration dictionary

    Raises:
        ValidationError: If the pie config is invalid
    """
    if not isinstance(pie, dict):
        raise ValidationError(
            f"Config field 'pie' must be a dictionary, got: {type(pie).__name__}"
        )

    unknown = set(pie) - VALID_PIE_KEYS
    if unknown:
        raise ValidationError(
            f"Unknown pie config keys: {sorted(unknown)}. "
            f"Valid keys are: {sorted(VALID_PIE_KEYS)}"
        )

    for key in ("slice_visibility_threshold", "pie_hole"):
        if key in pie:
            value = pie[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not 0 <= value < 1:
                raise ValidationError(
                    f"Pie '{key}' must be a number in [0, 1), got: {value}"
                )

    if "legend_position" in pie and pie["legend_position"] not in VALID_LEGEND_POSITIONS:
        raise ValidationError(
            f"Invalid pie legend_position '{pie['legend_position']}'. "
            f"Valid options are: {sorted(VALID_LEGEND_POSITIONS)}"
        )

    if "animation_duration" in pie:
        duration = pie["animation_duration"]
        if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
            raise ValidationError(
                f"Pie 'animation_duration' must be a non-negative integer (ms), got: {duration}"
            )


def validate_viewer_config(config: dict) -> None:
    """Comprehensive viewer configuration validation.

    Validates:
    - Only known keys are present
    - Text fields are non-empty strings
    - default_library is a string or null (existence is checked against the
      loaded data when the engine starts)
    - include_plotlyjs and pie blocks hold valid values

    Args:
        config: Configuration dictionary from viewer.yaml

    Raises:
        ValidationError: If configuration is invalid

    Example:
        >>> validate_viewer_config({
        ...     "title": "TCS Log",
        ...     "default_library": "RV95",
        ...     "pie": {"pie_hole": 0.4},
        ... })
    """
    if not isinstance(config, dict):
        raise ValidationError(
            f"Viewer config must be a mapping, got: {type(config).__name__}"
        )

    unknown = set(config) - VALID_TOP_LEVEL_KEYS
    if unknown:
        raise ValidationError(
            f"Unknown config keys: {sorted(unknown)}. "
            f"Valid keys are: {sorted(VALID_TOP_LEVEL_KEYS)}"
        )

    for key in ("title", "homepage", "overview_label", "error_contact"):
        if key in config and (not isinstance(config[key], str) or not config[key].strip()):
            raise ValidationError(
                f"Config field '{key}' must be a non-empty string, got: {config[key]!r}"
            )

    default_library = config.get("default_library")
    if default_library is not None and (
        not isinstance(default_library, str) or not default_library.strip()
    ):
        raise ValidationError(
            f"Config field 'default_library' must be a library label or null, "
            f"got: {default_library!r}"
        )

    if "include_plotlyjs" in config:
        validate_include_plotlyjs(config["include_plotlyjs"])

    # An empty "pie:" block in YAML loads as None and keeps the defaults
    if config.get("pie") is not None:
        validate_pie_config(config["pie"])
