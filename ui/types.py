# ui/types.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Row:
    """
    A single flattened row in the tree panel.

    • entry_id  – id of the node this row represents
    • title     – node title at the time the rows were built
    • level     – cosmetic indent level stored on the node
    • depth     – structural nesting depth (root = 0)
    """
    entry_id: str
    title: str
    level: int
    depth: int
