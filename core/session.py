# core/session.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.export import serialize
from core.log import Log
from core.selection import SelectionController
from core.tree import (
    add_child,
    change_level,
    delete_node,
    find_node,
    make_root,
    move_sibling,
    new_node_id,
    rename_node,
)
from core.types import Node

__all__ = ["Command", "Session", "OP_ADD", "OP_DELETE", "OP_LEVEL", "OP_MOVE", "OP_RENAME"]

OP_ADD = "add"
OP_DELETE = "delete"
OP_LEVEL = "level"
OP_MOVE = "move"
OP_RENAME = "rename"


@dataclass(slots=True, frozen=True)
class Command:
    """
    A single user edit, produced by the GUI and applied by the session.

    • op         – one of the OP_* names
    • target_id  – node the edit applies to
    • payload    – title (add/rename), delta (level), direction (move), unused (delete)
    """
    op: str
    target_id: str
    payload: Any = None


class Session:
    """
    Application state for one open mind map: the current tree snapshot and
    the selection. Every edit goes through apply().
    """

    def __init__(self, root: Optional[Node] = None, new_id: Callable[[], str] = new_node_id):
        self._new_id = new_id
        self.root: Node = root if root is not None else make_root(new_id=new_id)
        self.selection = SelectionController()
        self._handlers = {
            OP_ADD: self._apply_add,
            OP_DELETE: self._apply_delete,
            OP_LEVEL: self._apply_level,
            OP_MOVE: self._apply_move,
            OP_RENAME: self._apply_rename,
        }

    # ------------------------------------------------------------------ #
    # Command dispatch
    # ------------------------------------------------------------------ #

    def apply(self, command: Command) -> Node:
        """Apply command and return the resulting snapshot (same object on no-op)."""
        handler = self._handlers.get(command.op)
        if handler is None:
            raise ValueError(f"Unknown command op {command.op!r}")

        before = self.root
        self.root = handler(command)
        if self.root is before:
            Log.debug(f"No-op {command.op} on {command.target_id}.", 2)
        else:
            Log.debug(f"Applied {command.op} on {command.target_id}.", 1)
        return self.root

    def _apply_add(self, command: Command) -> Node:
        return add_child(self.root, command.target_id, command.payload or "", new_id=self._new_id)

    def _apply_delete(self, command: Command) -> Node:
        self.selection.node_deleted(command.target_id)
        result = delete_node(self.root, command.target_id)
        if result is None:
            Log.debug("Refusing to delete the root node.", 0)
            return self.root
        # The selection may sit inside the removed subtree
        self.selection.prune(result)
        return result

    def _apply_level(self, command: Command) -> Node:
        return change_level(self.root, command.target_id, int(command.payload))

    def _apply_move(self, command: Command) -> Node:
        return move_sibling(self.root, command.target_id, int(command.payload))

    def _apply_rename(self, command: Command) -> Node:
        return rename_node(self.root, command.target_id, command.payload or "")

    # ------------------------------------------------------------------ #
    # Selection-targeted edits
    # ------------------------------------------------------------------ #

    def _on_selected(self, op: str, payload: Any = None) -> Node:
        target_id = self.selection.selected_id
        if target_id is None:
            return self.root
        return self.apply(Command(op, target_id, payload))

    def add_to_selected(self, title: str) -> Node:
        return self._on_selected(OP_ADD, title)

    def delete_selected(self) -> Node:
        return self._on_selected(OP_DELETE)

    def change_selected_level(self, delta: int) -> Node:
        return self._on_selected(OP_LEVEL, delta)

    def move_selected(self, direction: int) -> Node:
        return self._on_selected(OP_MOVE, direction)

    def rename_selected(self, title: str) -> Node:
        return self._on_selected(OP_RENAME, title)

    def rename(self, node_id: str, title: str) -> Node:
        return self.apply(Command(OP_RENAME, node_id, title))

    # ------------------------------------------------------------------ #
    # Whole-tree operations
    # ------------------------------------------------------------------ #

    def selected_node(self) -> Optional[Node]:
        if self.selection.selected_id is None:
            return None
        return find_node(self.root, self.selection.selected_id)

    def load(self, root: Node) -> None:
        """Replace the current map, e.g. after opening an exported file."""
        self.root = root
        self.selection.prune(root)
        Log.debug(f"Loaded tree with root {root.id}.", 1)

    def export_json(self) -> str:
        return serialize(self.root)
