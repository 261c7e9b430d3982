# core/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(slots=True, frozen=True)
class Node:
    """
    One mind-map entry. Snapshots are immutable; edits build new nodes.

    • id        – opaque identifier, unique within a tree
    • title     – text label shown in the tree panel
    • level     – cosmetic indent level, never negative, independent of depth
    • children  – ordered child nodes
    """
    id: str
    title: str
    level: int = 0
    children: Tuple[Node, ...] = field(default_factory=tuple)

    def with_children(self, children) -> Node:
        return replace(self, children=tuple(children))

    def with_level(self, level: int) -> Node:
        return replace(self, level=level)

    def with_title(self, title: str) -> Node:
        return replace(self, title=title)
