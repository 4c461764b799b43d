"""Viewer configuration loaded from viewer.yaml."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from constants import DEFAULT_ERROR_CONTACT, ERROR_MESSAGE_TEMPLATE
from validators import ValidationError, validate_viewer_config

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PieConfig:
    """Defaults shared by every pie chart."""

    slice_visibility_threshold: float = 0.005
    pie_hole: float = 0.4
    legend_position: str = "left"
    animation_duration: int = 300

    def chart_options(self) -> dict:
        """Options dict understood by the charting backend."""
        return {
            "legend": {"position": self.legend_position, "alignment": "center"},
            "sliceVisibilityThreshold": self.slice_visibility_threshold,
            "pieResidueSliceLabel": "Other",
            "animation": {"duration": self.animation_duration, "easing": "out"},
            "pieHole": self.pie_hole,
        }


@dataclass(frozen=True)
class ViewerConfig:
    title: str = "TCS Log"
    homepage: str = "https://primer-id.org"
    overview_label: str = "Overview"
    default_library: str | None = None
    error_contact: str = DEFAULT_ERROR_CONTACT
    include_plotlyjs: str = "cdn"
    pie: PieConfig = field(default_factory=PieConfig)

    @property
    def error_message(self) -> str:
        return ERROR_MESSAGE_TEMPLATE.format(contact=self.error_contact)

    @classmethod
    def from_dict(cls, config: dict | None) -> ViewerConfig:
        """Build a config from a (possibly partial) dict.

        Raises:
            ValidationError: If the dict fails validate_viewer_config
        """
        config = {} if config is None else config
        validate_viewer_config(config)
        config = dict(config)
        pie = PieConfig(**config.pop("pie", {}) or {})
        return cls(pie=pie, **config)


def load_viewer_config(path: str | Path | None) -> ViewerConfig:
    """Load viewer.yaml; a missing path gives the defaults.

    Raises:
        ValidationError: If the file content is not a valid viewer config
    """
    if path is None:
        return ViewerConfig()

    with open(path) as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValidationError(f"Failed to parse viewer config {path}: {e}") from e
    log.info("Loaded viewer config from %s", path)
    return ViewerConfig.from_dict(raw)
