from __future__ import annotations

from dataclasses import dataclass, field

from models.datasets import CountTable


@dataclass(frozen=True)
class BatchSummary:
    """Batch-level facts shown on the overview page.

    Timestamps are kept as the ISO-8601 strings written by the log pipeline;
    the viewer only displays them.
    """

    batch_name: str
    process_start_time: str | None = None
    process_end_time: str | None = None
    current_version: str | None = None
    viral_seq_version: str | None = None
    number_of_libraries: int = 0
    total_reads: int = 0
    raw_sequence_data: CountTable = field(default_factory=CountTable)

    def to_dict(self) -> dict:
        return {
            "batch_name": self.batch_name,
            "process_start_time": self.process_start_time,
            "process_end_time": self.process_end_time,
            "current_version": self.current_version,
            "viral_seq_version": self.viral_seq_version,
            "number_of_libraries": self.number_of_libraries,
            "total_reads": self.total_reads,
            "raw_sequence_data": self.raw_sequence_data.to_list(),
        }

    def __repr__(self) -> str:
        return f"<BatchSummary(batch={self.batch_name}, libraries={self.number_of_libraries})>"
