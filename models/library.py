from __future__ import annotations

from dataclasses import dataclass, field

from models.datasets import (
    CountTable,
    RatioTable,
    RegionCounts,
    SequenceAnalysis,
    SizeDistribution,
)


@dataclass(frozen=True)
class LibraryReport:
    """All chart datasets for one sequenced library.

    ``detection_sensitivity`` is optional in the payload and defaults to an
    empty table; the detail page skips its chart when it is empty.
    """

    raw_distribution: CountTable
    raw_sequence_analysis: SequenceAnalysis
    number_at_regions: RegionCounts
    distinct_to_raw: RatioTable
    resampling_index: RatioTable
    size_distribution: SizeDistribution
    detection_sensitivity: RatioTable = field(default_factory=RatioTable)

    def to_dict(self) -> dict:
        return {
            "raw_distribution": {"data": self.raw_distribution.to_list()},
            "raw_sequence_analysis": self.raw_sequence_analysis.to_dict(),
            "number_at_regions": self.number_at_regions.to_dict(),
            "detection_sensitivity": self.detection_sensitivity.to_dict(),
            "distinct_to_raw": self.distinct_to_raw.to_dict(),
            "resampling_index": self.resampling_index.to_dict(),
            "size_distribution": self.size_distribution.to_dict(),
        }
