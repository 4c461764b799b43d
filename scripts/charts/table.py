"""Tabular chart input: a header row plus data rows.

A header cell is either a column label or a role annotation such as
``{"role": "style"}``, which marks a column holding a per-row color instead
of a value series.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import pandas as pd

STYLE_ROLE = "style"


class DataTable:
    """Chart data backed by a pandas DataFrame of python objects.

    Column 0 holds the row labels (or x values); the remaining non-role
    columns are value series. Missing values stay None.
    """

    def __init__(self, frame: pd.DataFrame, roles: dict[str, str] | None = None):
        self.frame = frame
        self.roles = dict(roles or {})

    @classmethod
    def from_rows(cls, header: Sequence[Any], rows: Sequence[Sequence[Any]]) -> DataTable:
        """Build a table from a header row and data rows.

        Raises:
            ValueError: If the header is empty or a row width differs from it
        """
        if not header:
            raise ValueError("Data table header must have at least one column")

        columns: list[str] = []
        roles: dict[str, str] = {}
        for i, cell in enumerate(header):
            if isinstance(cell, dict):
                role = cell.get("role")
                if not role:
                    raise ValueError(f"Header cell {i} is a dict without a role: {cell!r}")
                name = f"__{role}_{i}"
                roles[name] = role
            else:
                name = str(cell)
            columns.append(name)

        for n, row in enumerate(rows):
            if len(row) != len(columns):
                raise ValueError(
                    f"Row {n} has {len(row)} cells, header has {len(columns)}: {list(row)!r}"
                )

        frame = pd.DataFrame([list(r) for r in rows], columns=columns, dtype=object)
        return cls(frame, roles)

    @property
    def num_rows(self) -> int:
        return len(self.frame)

    @property
    def label_column(self) -> str:
        return self.frame.columns[0]

    def header(self) -> list[str]:
        return [c for c in self.frame.columns if c not in self.roles]

    def get_value(self, row: int, column: int) -> Any:
        """Value at (row, column index), counting role columns too."""
        return _none_if_missing(self.frame.iat[row, column])

    def labels(self) -> list[Any]:
        return self.column(self.label_column)

    def column(self, name: str) -> list[Any]:
        return [_none_if_missing(v) for v in self.frame[name].tolist()]

    def value_columns(self) -> list[str]:
        return [c for c in self.frame.columns[1:] if c not in self.roles]

    def style_column(self) -> list[str] | None:
        """Per-row colors from the first style-role column, if any."""
        for name, role in self.roles.items():
            if role == STYLE_ROLE:
                return self.column(name)
        return None

    def __len__(self) -> int:
        return self.num_rows

    def __repr__(self) -> str:
        return f"<DataTable(columns={self.header()}, rows={self.num_rows})>"


def _none_if_missing(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    return value
