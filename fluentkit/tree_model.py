"""A tree flattened into visible rows, with expand, collapse and check state."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence

from .observable import Observable, Property
from .table_model import ROLE_NAMES, TableRole


class TreeNode:
    """One node of the tree; ``checked`` of a branch means all its leaves are checked."""

    def __init__(
        self,
        data: Optional[Dict[str, Any]] = None,
        depth: int = 0,
        parent: Optional["TreeNode"] = None,
        title: str = "",
    ) -> None:
        self.title = title
        self.depth = depth
        self.leaf_checked = False
        self.is_expanded = True
        self.data: Dict[str, Any] = data if data is not None else {}
        self.children: List[TreeNode] = []
        self.parent = parent

    def __repr__(self) -> str:
        return f"TreeNode(depth={self.depth}, data={self.data!r})"

    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def checked(self) -> bool:
        if not self.children:
            return self.leaf_checked
        return all(child.checked for child in self.children)

    def has_next_node_by_index(self, index: int) -> bool:
        """Whether the ancestor at depth ``index`` has a following sibling."""
        node = self
        for _ in range(self.depth - index):
            if node.parent is None:
                raise ValueError(f"node has no ancestor at depth {index}")
            node = node.parent
        if node.parent is None:
            raise ValueError("node has no parent")
        siblings = node.parent.children
        return siblings.index(node) != len(siblings) - 1

    def hide_line_footer(self) -> bool:
        """True for a last child or one whose next sibling is a branch."""
        if self.parent is None:
            return False
        siblings = self.parent.children
        position = siblings.index(self)
        if position == len(siblings) - 1:
            return True
        return siblings[position + 1].has_children()

    def is_shown(self) -> bool:
        """Whether every ancestor is expanded."""
        node = self.parent
        while node is not None:
            if not node.is_expanded:
                return False
            node = node.parent
        return True


def _preorder(nodes: Iterable[TreeNode]) -> Iterator[TreeNode]:
    stack = list(reversed(list(nodes)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


class TreeModel(Observable):
    """Visible rows of a tree; signals match those of TableModel."""

    data_source_size = Property(0)
    column_source = Property([])

    def __init__(self) -> None:
        self._rows: List[TreeNode] = []
        self._data_source: List[TreeNode] = []
        self._root = TreeNode()

    def _at(self, row: int) -> TreeNode:
        if not 0 <= row < len(self._rows):
            raise IndexError(f"row {row} out of range for {len(self._rows)} rows")
        return self._rows[row]

    def _changed(self, top: int, bottom: int, right: int = 0) -> None:
        self.signal("data_changed").emit(top, 0, bottom, right)

    def row_count(self) -> int:
        return len(self._rows)

    def column_count(self) -> int:
        return len(self.column_source)

    def data(self, row: int, column: int, role: int) -> Any:
        if role == TableRole.ROW_MODEL:
            return self._at(row)
        if role == TableRole.COLUMN_MODEL:
            columns = self.column_source
            if not 0 <= column < len(columns):
                raise IndexError(f"column {column} out of range")
            return columns[column]
        return None

    def role_names(self) -> Dict[int, str]:
        return dict(ROLE_NAMES)

    def remove_rows(self, row: int, count: int) -> None:
        """Remove ``count`` visible rows at ``row``; invalid ranges are ignored."""
        if row < 0 or row + count > len(self._rows) or count == 0:
            return
        del self._rows[row : row + count]
        self.signal("rows_removed").emit(row, row + count - 1)

    def insert_rows(self, row: int, data: Sequence[TreeNode]) -> None:
        """Insert nodes as visible rows at ``row``; invalid requests are ignored."""
        if row < 0 or row > len(self._rows) or not data:
            return
        self._rows[row:row] = list(data)
        self.signal("rows_inserted").emit(row, row + len(data) - 1)

    def get_row(self, row: int) -> TreeNode:
        return self._at(row)

    def get_node(self, row: int) -> TreeNode:
        return self._at(row)

    def set_row(self, row: int, data: Mapping[str, Any]) -> None:
        self._at(row).data = dict(data)
        self._changed(row, row, self.column_count() - 1)

    def set_data(self, data: Sequence[TreeNode]) -> None:
        """Replace the visible rows."""
        self._rows = list(data)
        self.signal("model_reset").emit()

    def set_data_source(self, data: Sequence[Mapping[str, Any]]) -> None:
        """Build the tree from nested mappings with optional ``children`` lists."""
        self._data_source = []
        self._root = TreeNode()
        stack: List[Dict[str, Any]] = [dict(item) for item in reversed(data)]
        while stack:
            item = stack.pop()
            depth = int(item.get("__depth") or 0)
            parent = item.get("__parent") or self._root
            node = TreeNode(data=item, depth=depth, parent=parent)
            parent.children.append(node)
            node.leaf_checked = bool(item.get("checked", False))
            self._data_source.append(node)
            for child in reversed(item.get("children") or []):
                entry = dict(child)
                entry["__depth"] = depth + 1
                entry["__parent"] = node
                stack.append(entry)
        self._rows = list(self._data_source)
        self.signal("model_reset").emit()
        self.data_source_size = len(self._data_source)

    def collapse(self, row: int) -> None:
        node = self._at(row)
        if not node.is_expanded:
            return
        node.is_expanded = False
        self._changed(row, row)
        remove_count = 0
        for other in self._rows[row + 1 :]:
            if other.depth <= node.depth:
                break
            remove_count += 1
        self.remove_rows(row + 1, remove_count)

    def expand(self, row: int) -> None:
        node = self._at(row)
        if node.is_expanded:
            return
        node.is_expanded = True
        self._changed(row, row)
        shown = [item for item in _preorder(node.children) if item.is_shown()]
        self.insert_rows(row + 1, shown)

    def hit_has_children_expanded(self, row: int) -> bool:
        node = self._at(row)
        return node.has_children() and node.is_expanded

    def refresh_node(self, row: int) -> None:
        self._changed(row, row)

    def check_row(self, row: int, checked: bool) -> None:
        """Check or uncheck a leaf, or every leaf below a branch."""
        node = self._at(row)
        if node.has_children():
            for item in _preorder(node.children):
                if not item.has_children():
                    item.leaf_checked = checked
        else:
            if node.leaf_checked == checked:
                return
            node.leaf_checked = checked
        self._changed(0, self.row_count() - 1)

    def all_expand(self) -> None:
        rows = []
        for item in _preorder(self._root.children):
            if item.has_children():
                item.is_expanded = True
            rows.append(item)
        self._rows = rows
        self.signal("model_reset").emit()

    def all_collapse(self) -> None:
        for item in _preorder(self._root.children):
            if item.has_children():
                item.is_expanded = False
        self._rows = list(self._root.children)
        self.signal("model_reset").emit()

    def selection_model(self) -> List[TreeNode]:
        """Every node of the data source that counts as checked."""
        return [node for node in self._data_source if node.checked]