from __future__ import annotations

import uuid
from typing import Callable, Iterator, List, Optional, Tuple

from core.types import Node

__all__ = [
    "new_node_id",
    "make_root",
    "find_node",
    "find_parent",
    "iter_nodes",
    "collect_ids",
    "add_child",
    "delete_node",
    "change_level",
    "move_sibling",
    "rename_node",
]

DEFAULT_ROOT_TITLE = "Root"

def new_node_id() -> str:
    return uuid.uuid4().hex

def make_root(title: str = DEFAULT_ROOT_TITLE, new_id: Callable[[], str] = new_node_id) -> Node:
    return Node(id=new_id(), title=title, level=0)

# ---------- Queries ----------

def find_node(root: Node, node_id: str) -> Optional[Node]:
    """Depth-first search from root; first match wins."""
    if root.id == node_id:
        return root
    for child in root.children:
        found = find_node(child, node_id)
        if found is not None:
            return found
    return None

def find_parent(root: Node, node_id: str) -> Optional[Node]:
    """Return the node whose children contain node_id, or None (root or unknown id)."""
    for child in root.children:
        if child.id == node_id:
            return root
        found = find_parent(child, node_id)
        if found is not None:
            return found
    return None

def iter_nodes(root: Node, depth: int = 0) -> Iterator[Tuple[Node, int]]:
    """Pre-order walk yielding (node, structural depth)."""
    yield root, depth
    for child in root.children:
        yield from iter_nodes(child, depth + 1)

def collect_ids(root: Node) -> List[str]:
    return [node.id for node, _depth in iter_nodes(root)]

# ---------- Path rebuild ----------

def _update(root: Node, node_id: str, fn: Callable[[Node], Node]) -> Node:
    """
    Apply fn to the node with node_id and rebuild its ancestors.
    Returns root itself when nothing changed, so callers can test identity.
    """
    if root.id == node_id:
        return fn(root)

    for idx, child in enumerate(root.children):
        updated = _update(child, node_id, fn)
        if updated is not child:
            children = list(root.children)
            children[idx] = updated
            return root.with_children(children)
    return root

# ---------- Mutations ----------

def add_child(root: Node, target_id: str, title: str,
              new_id: Callable[[], str] = new_node_id) -> Node:
    """
    Append a new node as the last child of target_id.
    The child's level is always target.level + 1.
    """
    def _append(target: Node) -> Node:
        child = Node(id=new_id(), title=title, level=target.level + 1)
        return target.with_children(target.children + (child,))

    return _update(root, target_id, _append)

def delete_node(root: Node, target_id: str) -> Optional[Node]:
    """
    Remove target_id and its whole subtree.
    Returns None when the root itself matches; the caller decides what that means.
    """
    if root.id == target_id:
        return None
    return _prune(root, target_id)

def _prune(node: Node, target_id: str) -> Node:
    kept = []
    changed = False
    for child in node.children:
        if child.id == target_id:
            changed = True
            continue
        pruned = _prune(child, target_id)
        if pruned is not child:
            changed = True
        kept.append(pruned)

    if not changed:
        return node
    return node.with_children(kept)

def change_level(root: Node, target_id: str, delta: int) -> Node:
    """Shift the cosmetic indent level; clamps at 0 and never re-parents."""
    def _shift(target: Node) -> Node:
        level = max(0, target.level + delta)
        if level == target.level:
            return target
        return target.with_level(level)

    return _update(root, target_id, _shift)

def rename_node(root: Node, target_id: str, title: str) -> Node:
    def _rename(target: Node) -> Node:
        if target.title == title:
            return target
        return target.with_title(title)

    return _update(root, target_id, _rename)

def move_sibling(root: Node, target_id: str, direction: int) -> Node:
    """
    Swap target_id with its neighbour among its parent's children.
    direction is -1 (up) or +1 (down). No-op for the root or at either end.
    """
    if direction not in (-1, 1):
        raise ValueError(f"direction must be -1 or +1, got {direction!r}")

    parent = find_parent(root, target_id)
    if parent is None:
        return root

    def _swap(target_parent: Node) -> Node:
        children = list(target_parent.children)
        idx = next(i for i, child in enumerate(children) if child.id == target_id)
        new_idx = idx + direction
        if not (0 <= new_idx < len(children)):
            return target_parent
        children[idx], children[new_idx] = children[new_idx], children[idx]
        return target_parent.with_children(children)

    return _update(root, parent.id, _swap)
