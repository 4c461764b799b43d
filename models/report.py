"""Read-only view over one batch's report payload."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from models.batch import BatchSummary
from models.library import LibraryReport

LibraryParser = Callable[[str, Any], LibraryReport]


class LibraryIndex(Mapping):
    """Library label -> LibraryReport, in payload order.

    Keys are unique, non-empty library labels (checked on construction).
    Entries are parsed on first access through ``parse``, so one malformed
    library only fails when its own page is built. Parsed reports are cached
    for the rest of the session.

    Args:
        entries: Label -> raw payload (or ready LibraryReport when ``parse``
            is None)
        parse: Callable turning (label, payload) into a LibraryReport
    """

    def __init__(self, entries: Mapping[str, Any], parse: LibraryParser | None = None):
        for label in entries:
            if not isinstance(label, str) or not label.strip():
                raise ValueError(f"Library labels must be non-empty strings, got: {label!r}")
        self._entries = dict(entries)
        self._parse = parse
        self._parsed: dict[str, LibraryReport] = {}

    def __getitem__(self, label: str) -> LibraryReport:
        if label in self._parsed:
            return self._parsed[label]
        payload = self._entries[label]
        report = payload if self._parse is None else self._parse(label, payload)
        self._parsed[label] = report
        return report

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, label: object) -> bool:
        return label in self._entries

    def raw(self, label: str) -> Any:
        """Return the unparsed payload for ``label``."""
        return self._entries[label]


@dataclass(frozen=True)
class ReportData:
    """The whole data set a report session displays. Never mutated."""

    batch: BatchSummary
    libraries: LibraryIndex

    def labels(self) -> list[str]:
        return list(self.libraries)

    def has_library(self, label: str) -> bool:
        return label in self.libraries

    def __repr__(self) -> str:
        return f"<ReportData(batch={self.batch.batch_name}, libraries={len(self.libraries)})>"
