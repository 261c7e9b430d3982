# core/selection.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from typing import Optional

from core.log import Log
from core.tree import find_node
from core.types import Node

__all__ = ["SelectionController"]

class SelectionController:
    """
    Holds at most one selected node id.

    Two states: empty (selected_id is None) and selected. The controller only
    references node ids; the tree snapshot is owned by the session.
    """

    def __init__(self):
        self._selected_id: Optional[str] = None

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    @property
    def is_empty(self) -> bool:
        return self._selected_id is None

    def is_selected(self, node_id: str) -> bool:
        return self._selected_id is not None and self._selected_id == node_id

    def select(self, node_id: str) -> None:
        """Select node_id, replacing any previous selection."""
        self._selected_id = node_id
        Log.debug(f"Select {node_id=}.", 2)

    def deselect(self) -> None:
        self._selected_id = None

    def toggle(self, node_id: str) -> bool:
        """Row check-box behaviour. Returns True if node_id ends up selected."""
        if self.is_selected(node_id):
            self.deselect()
            return False
        self.select(node_id)
        return True

    def node_deleted(self, node_id: str) -> None:
        """A deleted node can never stay selected."""
        if self.is_selected(node_id):
            self.deselect()

    def prune(self, root: Node) -> bool:
        """Clear a selection that is missing from root. Returns True if cleared."""
        if self._selected_id is None or find_node(root, self._selected_id) is not None:
            return False
        Log.debug(f"Dropping stale selection {self._selected_id}.", 1)
        self._selected_id = None
        return True
