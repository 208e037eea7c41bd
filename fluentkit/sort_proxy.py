"""A filtering and sorting view over a TableModel."""

from __future__ import annotations

import functools
from enum import IntEnum
from typing import Any, Callable, List, Mapping, Optional

from .observable import Observable, Property
from .table_model import TableModel

RowFilter = Callable[[int], Any]
RowComparator = Callable[[int, int], Any]


class SortOrder(IntEnum):
    ASCENDING = 0
    DESCENDING = 1


class TableSortProxyModel(Observable):
    """Presents the source rows that pass the filter, in comparator order.

    The filter receives a source row index; the comparator receives two.
    Each call to ``set_comparator`` flips the sort order, starting from
    descending. Row operations take proxy indices and act on the source.
    """

    model = Property(None)

    def __init__(self, model: Optional[TableModel] = None) -> None:
        self._filter: Optional[RowFilter] = None
        self._comparator: Optional[RowComparator] = None
        self._sort_column = -1
        self._sort_order = SortOrder.ASCENDING
        self.signal("model_changed").connect(lambda: self.signal("model_reset").emit())
        self.model = model

    @property
    def sort_order(self) -> SortOrder:
        return self._sort_order

    @property
    def sort_column(self) -> int:
        return self._sort_column

    def _source(self) -> TableModel:
        if self.model is None:
            raise RuntimeError("no source model is set")
        return self.model

    def _accepts(self, source_row: int) -> bool:
        if self._filter is None:
            return True
        return bool(self._filter(source_row))

    def _less_than(self, left: int, right: int) -> bool:
        if self._comparator is None:
            return True
        flag = bool(self._comparator(left, right))
        return not flag if self._sort_order == SortOrder.ASCENDING else flag

    def _mapping(self) -> List[int]:
        if self.model is None:
            return []
        rows = [r for r in range(self.model.row_count()) if self._accepts(r)]
        if self._sort_column < 0 or self._comparator is None:
            return rows

        if self._sort_order == SortOrder.ASCENDING:
            def before(a: int, b: int) -> bool:
                return self._less_than(a, b)
        else:
            def before(a: int, b: int) -> bool:
                return self._less_than(b, a)

        def compare(a: int, b: int) -> int:
            if before(a, b):
                return -1
            if before(b, a):
                return 1
            return 0

        return sorted(rows, key=functools.cmp_to_key(compare))

    def row_count(self) -> int:
        return len(self._mapping())

    def map_to_source(self, row_index: int) -> int:
        """The source row shown at proxy row ``row_index``."""
        mapping = self._mapping()
        if not 0 <= row_index < len(mapping):
            raise IndexError(f"proxy row {row_index} out of range for {len(mapping)} rows")
        return mapping[row_index]

    def set_comparator(self, comparator: Optional[RowComparator]) -> None:
        """Install a comparator (None disables sorting) and flip the sort order."""
        self._comparator = comparator
        self._sort_column = -1 if comparator is None else 0
        self._sort_order = (
            SortOrder.DESCENDING
            if self._sort_order == SortOrder.ASCENDING
            else SortOrder.ASCENDING
        )
        self.signal("layout_changed").emit()

    def set_filter(self, filter: Optional[RowFilter]) -> None:
        """Install a row filter; None accepts every row."""
        self._filter = filter
        self.signal("layout_changed").emit()

    def get_row(self, row_index: int) -> Mapping[str, Any]:
        return self._source().get_row(self.map_to_source(row_index))

    def set_row(self, row_index: int, val: Mapping[str, Any]) -> None:
        self._source().set_row(self.map_to_source(row_index), val)

    def insert_row(self, row_index: int, val: Mapping[str, Any]) -> None:
        self._source().insert_row(self.map_to_source(row_index), val)

    def remove_row(self, row_index: int, rows: int) -> None:
        self._source().remove_row(self.map_to_source(row_index), rows)