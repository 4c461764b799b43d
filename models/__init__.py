"""Data model for the TCS log viewer."""

from models.batch import BatchSummary
from models.datasets import (
    CountTable,
    Drilldown,
    RatioTable,
    RegionCounts,
    SequenceAnalysis,
    SizeDistribution,
)
from models.library import LibraryReport
from models.report import LibraryIndex, ReportData

__all__ = [
    "BatchSummary",
    "CountTable",
    "Drilldown",
    "LibraryIndex",
    "LibraryReport",
    "RatioTable",
    "RegionCounts",
    "ReportData",
    "SequenceAnalysis",
    "SizeDistribution",
]
