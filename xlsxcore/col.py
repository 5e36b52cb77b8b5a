"""Column definitions and a store that keeps their ranges from overlapping."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional

from xlsxcore.cell import GENERAL_NUM_FMT, CellType

COL_WIDTH = 9.5
EXCEL_2006_MAX_ROW_COUNT = 1048576
EXCEL_2006_MAX_ROW_INDEX = EXCEL_2006_MAX_ROW_COUNT - 1

_STRING_NUM_FMT = "@"
_INT_NUM_FMT = "0"

_NUM_FMT_FOR_TYPE = {
    CellType.STRING: _STRING_NUM_FMT,
    CellType.NUMERIC: _INT_NUM_FMT,
    CellType.BOOL: GENERAL_NUM_FMT,
    CellType.INLINE: _STRING_NUM_FMT,
    CellType.ERROR: GENERAL_NUM_FMT,
    # Date-typed cells are not really supported; dates belong in
    # numeric cells with a date format.
    CellType.DATE: GENERAL_NUM_FMT,
    CellType.STRING_FORMULA: _STRING_NUM_FMT,
}


@dataclass(eq=False)
class Col:
    """Settings shared by the columns from ``min`` to ``max`` inclusive."""

    min: int = 0
    max: int = 0
    hidden: bool = False
    width: float = 0.0
    collapsed: bool = False
    outline_level: int = 0
    best_fit: bool = False
    custom_width: bool = False
    phonetic: bool = False
    num_fmt: str = ""
    parsed_num_fmt: Any = None
    style: Any = None
    out_xf_id: int = 0

    def set_width(self, width: float) -> None:
        """Set a custom width, in characters of the default font's widest digit."""
        self.width = width
        self.custom_width = True

    def set_type(self, cell_type: CellType) -> None:
        """Choose the column's number format from a cell type."""
        num_fmt = _NUM_FMT_FOR_TYPE.get(cell_type)
        if num_fmt is not None:
            self.num_fmt = num_fmt

    def copy_to_range(self, low: int, high: int) -> Col:
        """Return a copy of this column's settings covering another range."""
        return dataclasses.replace(self, min=low, max=high, out_xf_id=0)


def new_col_for_range(low: int, high: int) -> Col:
    """Create a Col for the inclusive range, swapping the bounds if reversed."""
    if high < low:
        return Col(min=high, max=low)
    return Col(min=low, max=high)


@dataclass(eq=False)
class ColStoreNode:
    """A link in the ordered chain of columns held by a ColStore."""

    col: Col
    prev: Optional[ColStoreNode] = field(default=None, repr=False)
    next: Optional[ColStoreNode] = field(default=None, repr=False)

    def find_node_for_col_num(self, num: int) -> Optional[ColStoreNode]:
        """Walk the chain from this node to the node covering column ``num``."""
        node: Optional[ColStoreNode] = self
        while node is not None:
            col = node.col
            if col.min <= num <= col.max:
                return node
            if num < col.min:
                prev = node.prev
                if prev is None or prev.col.max < num:
                    return None
                node = prev
            else:
                nxt = node.next
                if nxt is None or nxt.col.min > num:
                    return None
                node = nxt
        return None


class ColStore:
    """An ordered set of Col definitions whose ranges never overlap."""

    def __init__(self) -> None:
        self.root: Optional[ColStoreNode] = None
        self.length = 0

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Col]:
        node = self._head()
        while node is not None:
            yield node.col
            node = node.next

    def _head(self) -> Optional[ColStoreNode]:
        node = self.root
        if node is None:
            return None
        while node.prev is not None:
            node = node.prev
        return node

    def add(self, col: Col) -> ColStoreNode:
        """Insert a Col, trimming or splitting existing ones it overlaps."""
        new_node = ColStoreNode(col)
        if self.root is None:
            self.root = new_node
            self.length = 1
            return new_node
        self._make_way(self.root, new_node)
        return new_node

    def find_col_by_index(self, index: int) -> Optional[Col]:
        """Return the Col covering column ``index``, or None."""
        node = self.find_node_for_col_num(index)
        return node.col if node is not None else None

    def find_node_for_col_num(self, num: int) -> Optional[ColStoreNode]:
        """Return the node covering column ``num``, or None."""
        if self.root is None:
            return None
        return self.root.find_node_for_col_num(num)

    def remove_node(self, node: ColStoreNode) -> None:
        """Unlink a node from the chain."""
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        if self.root is node:
            self.root = node.prev or node.next
        node.next = None
        node.prev = None
        self.length -= 1

    def _add_node(
        self,
        prev: Optional[ColStoreNode],
        node: ColStoreNode,
        nxt: Optional[ColStoreNode],
    ) -> None:
        if prev is not None:
            prev.next = node
        node.prev = prev
        node.next = nxt
        if nxt is not None:
            nxt.prev = node
        self.length += 1

    def _make_way(self, node1: ColStoreNode, node2: ColStoreNode) -> None:
        """Adjust node1 and its neighbours so that node2 fits into the chain."""
        c1, c2 = node1.col, node2.col

        if c1.max < c2.min:
            # node2 lies wholly after node1.
            nxt = node1.next
            if nxt is not None:
                if nxt.col.min <= c2.max:
                    self._make_way(nxt, node2)
                    return
                self._add_node(node1, node2, nxt)
                return
            self._add_node(node1, node2, None)
            return

        if c1.min > c2.max:
            # node2 lies wholly before node1.
            prev = node1.prev
            if prev is not None:
                if prev.col.max >= c2.min:
                    self._make_way(prev, node2)
                    return
                self._add_node(prev, node2, node1)
                return
            self._add_node(None, node2, node1)
            return

        if c1.min == c2.min and c1.max == c2.max:
            # Exact match: node2 replaces node1.
            prev, nxt = node1.prev, node1.next
            self.remove_node(node1)
            self._add_node(prev, node2, nxt)
            if self.root is None:
                self.root = node2
            return

        if c1.min > c2.min and c1.max < c2.max:
            # node2 envelopes node1.
            prev, nxt = node1.prev, node1.next
            self.remove_node(node1)
            if prev is node2:
                node2.next = nxt
            elif nxt is node2:
                node2.prev = prev
            else:
                self._add_node(prev, node2, nxt)
            if node2.prev is not None and node2.prev.col.max >= c2.min:
                self._make_way(prev, node2)
            if node2.next is not None and node2.next.col.min <= c2.max:
                self._make_way(nxt, node2)
            if self.root is None:
                self.root = node2
            return

        if c1.min < c2.min and c1.max > c2.max:
            # node2 bisects node1.
            tail = ColStoreNode(c1.copy_to_range(c2.max + 1, c1.max))
            self._add_node(node1, tail, node1.next)
            c1.max = c2.min - 1
            self._add_node(node1, node2, tail)
            return

        if c1.max >= c2.min and c1.min < c2.min:
            # node2 overlaps the top of node1.
            nxt = node1.next
            c1.max = c2.min - 1
            if nxt is node2:
                return
            self._add_node(node1, node2, nxt)
            if nxt is not None and nxt.col.min <= c2.max:
                self._make_way(nxt, node2)
            return

        if c1.min <= c2.max and c1.min > c2.min:
            # node2 overlaps the bottom of node1.
            prev = node1.prev
            c1.min = c2.max + 1
            if prev is node2:
                return
            self._add_node(prev, node2, node1)
            if prev is not None and prev.col.max >= c2.min:
                self._make_way(node1.prev, node2)
            return

    def get_or_make_cols_for_range(
        self, start: Optional[ColStoreNode], low: int, high: int
    ) -> list[Col]:
        """Return Cols covering ``low``..``high``, creating Cols for any gaps."""
        cols: list[Col] = []
        node = start
        while True:
            if node is None:
                node = self.add(new_col_for_range(low, high))
            elif node.col.min <= low <= node.col.max:
                pass
            elif node.col.max < low:
                if node.next is not None:
                    node = node.next
                    continue
                node = self.add(new_col_for_range(low, high))
            else:
                if node.col.min > high:
                    new_col = new_col_for_range(low, high)
                else:
                    new_col = new_col_for_range(low, node.col.min - 1)
                node = self.add(new_col)
            cols.append(node.col)
            if node.col.max >= high:
                return cols
            low = node.col.max + 1
            node = node.next

    def for_each(self, fn: Callable[[int, Col], None]) -> None:
        """Call ``fn(index, col)`` for every Col in column order."""
        for index, col in enumerate(self):
            fn(index, col)