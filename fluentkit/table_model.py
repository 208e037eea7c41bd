"""A flat table model: a list of row mappings and a list of column descriptions."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Dict, List, Mapping

from .observable import Observable, Property


class TableRole(IntEnum):
    """Roles under which a cell exposes its row or its column description."""

    ROW_MODEL = 0x0101
    COLUMN_MODEL = 0x0102


ROLE_NAMES: Dict[int, str] = {
    TableRole.ROW_MODEL: "rowModel",
    TableRole.COLUMN_MODEL: "columnModel",
}


def _checked_index(index: int, size: int) -> int:
    if not 0 <= index < size:
        raise IndexError(f"row index {index} out of range for {size} rows")
    return index


class TableModel(Observable):
    """Rows are dictionaries; every change is announced through a signal.

    Signals: ``model_reset()``, ``rows_inserted(first, last)``,
    ``rows_removed(first, last)`` and ``data_changed(top, left, bottom, right)``.
    """

    column_source = Property([])
    rows = Property([])

    def row_count(self) -> int:
        return len(self.rows)

    def column_count(self) -> int:
        return len(self.column_source)

    def data(self, row: int, column: int, role: int) -> Any:
        """The whole row or the column description, depending on ``role``."""
        if role == TableRole.ROW_MODEL:
            return self.rows[_checked_index(row, self.row_count())]
        if role == TableRole.COLUMN_MODEL:
            return self.column_source[_checked_index(column, self.column_count())]
        return None

    def role_names(self) -> Dict[int, str]:
        return dict(ROLE_NAMES)

    def clear(self) -> None:
        self.rows.clear()
        self.signal("model_reset").emit()

    def get_row(self, row_index: int) -> Dict[str, Any]:
        return self.rows[_checked_index(row_index, self.row_count())]

    def set_row(self, row_index: int, row: Mapping[str, Any]) -> None:
        """Replace a row and announce the change across all its columns."""
        rows: List[Dict[str, Any]] = self.rows
        rows[_checked_index(row_index, len(rows))] = dict(row)
        self.signal("data_changed").emit(row_index, 0, row_index, self.column_count() - 1)

    def insert_row(self, row_index: int, row: Mapping[str, Any]) -> None:
        """Insert a row before ``row_index``; ``row_count()`` appends."""
        rows: List[Dict[str, Any]] = self.rows
        if not 0 <= row_index <= len(rows):
            raise IndexError(f"cannot insert at {row_index} into {len(rows)} rows")
        rows.insert(row_index, dict(row))
        self.signal("rows_inserted").emit(row_index, row_index)

    def remove_row(self, row_index: int, rows: int = 1) -> None:
        """Remove ``rows`` rows starting at ``row_index``."""
        if row_index < 0 or rows < 0:
            raise IndexError(f"invalid removal of {rows} rows at {row_index}")
        del self.rows[row_index : row_index + rows]
        self.signal("rows_removed").emit(row_index, row_index + rows - 1)

    def append_row(self, row: Mapping[str, Any]) -> None:
        self.insert_row(self.row_count(), row)