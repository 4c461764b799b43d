"""Stable per-label colors for every chart in a report session.

Known HIV genomic regions get fixed colors so a region looks the same on
every chart and every page. Any other label takes the next entry of a
ggplot-style palette, in order of first appearance, and keeps it for the
rest of the session.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType

log = logging.getLogger(__name__)

OTHER_LABEL = "Other"

REGION_COLORS: Mapping[str, str] = MappingProxyType({
    "PR": "#F8766D",  # red
    "IN": "#7CAE00",  # green
    "V1V3": "#00BFC4",  # cyan
    "VIF": "#C77CFF",  # purple
    "GAG": "#E68613",  # orange
    "NEF": "#00A9FF",  # light blue
    "POL": "#52B415",  # lime
    "ENV": "#FF61CC",  # pink
    OTHER_LABEL: "#999999",
})

GGPLOT_PALETTE: tuple[str, ...] = (
    "#F8766D",
    "#7CAE00",
    "#00BFC4",
    "#C77CFF",
    "#E68613",
    "#00A9FF",
    "#52B415",
    "#FF61CC",
)


class ColorTable:
    """Label -> color assignments for one report session.

    The known-region table is never modified. Assignments for unknown labels
    only grow: once a label has a color it keeps it until the session ends.

    Args:
        known: Fixed label -> color table (``REGION_COLORS`` by default)
        palette: Colors cycled through for unknown labels
    """

    def __init__(
        self,
        known: Mapping[str, str] | None = None,
        palette: Sequence[str] | None = None,
    ):
        self.known = MappingProxyType(dict(REGION_COLORS if known is None else known))
        self.palette = tuple(GGPLOT_PALETTE if palette is None else palette)
        if not self.palette:
            raise ValueError("Color palette must contain at least one color")
        self._assigned: dict[str, str] = {}

    def color_for(self, label: str) -> str:
        """Return the color for ``label``, assigning a palette color on first use."""
        if label in self.known:
            return self.known[label]
        if label in self._assigned:
            return self._assigned[label]

        color = self.palette[len(self._assigned) % len(self.palette)]
        self._assigned[label] = color
        log.debug("Assigned palette color %s to label %r", color, label)
        return color

    def colors_for(self, labels: Sequence[str]) -> list[str]:
        return [self.color_for(label) for label in labels]

    @property
    def assigned(self) -> Mapping[str, str]:
        """Read-only view of the colors handed out to unknown labels so far."""
        return MappingProxyType(self._assigned)

    def __contains__(self, label: object) -> bool:
        return label in self.known or label in self._assigned

    def __len__(self) -> int:
        return len(self.known) + len(self._assigned)
