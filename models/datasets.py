"""Chart datasets carried by a library report.

Every dataset is an immutable sequence of rows keyed by a region or
category label. Labels are non-empty strings and are compared by exact
equality everywhere (color lookup, drilldown resolution).
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

CountRow = tuple[str, int]
RatioRow = tuple[str, float]
RegionCountRow = tuple[str, int | None, int | None, int | None]
SizeRow = tuple[int, float | None, int | None]


@dataclass(frozen=True)
class CountTable:
    """Ordered (label, count) rows, e.g. reads per region."""

    rows: tuple[CountRow, ...] = ()

    def labels(self) -> list[str]:
        return [label for label, _ in self.rows]

    def total(self) -> int:
        return sum(count for _, count in self.rows)

    def to_list(self) -> list[list]:
        return [[label, count] for label, count in self.rows]

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class Drilldown:
    """Children of one parent slice of the raw sequence analysis pie."""

    label: str
    rows: tuple[CountRow, ...] = ()

    def to_dict(self) -> dict:
        return {"label": self.label, "data": [[k, v] for k, v in self.rows]}


@dataclass(frozen=True)
class SequenceAnalysis:
    """Raw sequence analysis: top-level categories plus optional drilldowns.

    Each drilldown's label matches exactly one top-level category label.
    """

    rows: tuple[CountRow, ...] = ()
    drilldowns: tuple[Drilldown, ...] = ()

    def labels(self) -> list[str]:
        return [label for label, _ in self.rows]

    def find_drilldown(self, label: str) -> Drilldown | None:
        """Return the drilldown whose parent label equals ``label``, if any."""
        for drilldown in self.drilldowns:
            if drilldown.label == label:
                return drilldown
        return None

    def to_dict(self) -> dict:
        return {
            "data": [[k, v] for k, v in self.rows],
            "drilldowns": [d.to_dict() for d in self.drilldowns],
        }


@dataclass(frozen=True)
class RegionCounts:
    """Per-region TCS, combined TCS and TCS-after-QC counts.

    A None count means the value was not measured for that region.
    """

    rows: tuple[RegionCountRow, ...] = ()

    def labels(self) -> list[str]:
        return [row[0] for row in self.rows]

    def to_dict(self) -> dict:
        return {"data": [list(row) for row in self.rows]}


@dataclass(frozen=True)
class RatioTable:
    """Ordered (region, ratio) rows with ratios in [0, 1]."""

    rows: tuple[RatioRow, ...] = ()

    def labels(self) -> list[str]:
        return [label for label, _ in self.rows]

    def to_dict(self) -> dict:
        return {"data": [[k, v] for k, v in self.rows]}

    def __len__(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class SizeDistribution(Mapping):
    """Region -> (index, distribution, cutoff) rows for the PID size overlays.

    Each row feeds at most one of the two series: the distribution scatter
    when ``distribution`` is set, the cutoff line when ``cutoff`` is set.
    Region order is the insertion order of the source mapping.
    """

    series: Mapping[str, tuple[SizeRow, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self):
        object.__setattr__(self, "series", MappingProxyType(dict(self.series)))

    def __getitem__(self, region: str) -> tuple[SizeRow, ...]:
        return self.series[region]

    def __iter__(self) -> Iterator[str]:
        return iter(self.series)

    def __len__(self) -> int:
        return len(self.series)

    def to_dict(self) -> dict:
        return {"data": {region: [list(r) for r in rows] for region, rows in self.series.items()}}
