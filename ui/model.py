'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import List, Optional, Set

from core.tree import iter_nodes
from core.types import Node
from ui.types import Row

def flatten_tree(root: Node) -> List[Row]:
    """
    Flatten the tree into display rows, root first, children in order.

    Indentation on screen follows Row.level (the node's own level field),
    not Row.depth; the two are allowed to drift apart.
    """
    return [
        Row(entry_id=node.id, title=node.title, level=node.level, depth=depth)
        for node, depth in iter_nodes(root)
    ]

def find_row_index(rows: List[Row], entry_id: str) -> Optional[int]:
    for i, row in enumerate(rows):
        if row.entry_id == entry_id:
            return i
    return None

class EditTracker:
    """
    Which row shows an inline title editor. Only the selected row can be in
    edit mode, since its Save button is drawn with the other selection actions.
    """

    def __init__(self):
        self._ids: Set[str] = set()

    def is_editing(self, entry_id: str) -> bool:
        return entry_id in self._ids

    def toggle(self, entry_id: str) -> bool:
        """Flip edit mode for entry_id. Returns True if it is now editing."""
        if entry_id in self._ids:
            self._ids.discard(entry_id)
            return False
        self._ids.add(entry_id)
        return True

    def sync(self, rows: List[Row], selected_id: Optional[str]) -> None:
        """Drop editors for deleted rows and for rows that lost the selection."""
        live_ids = {row.entry_id for row in rows}
        self._ids = {eid for eid in self._ids if eid in live_ids and eid == selected_id}
