from __future__ import annotations

import json
import traceback
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Set, Union

from core.log import Log
from core.tree import collect_ids
from core.types import Node
from utils.fs_atomic import atomic_write_text

__all__ = [
    "DEFAULT_EXPORT_NAME",
    "node_to_dict",
    "node_from_dict",
    "serialize",
    "deserialize",
    "export_to_file",
    "load_from_file",
    "ExportJob",
    "ExportResult",
    "run_export",
]

DEFAULT_EXPORT_NAME = "mind-map.json"

# ---------- dict form ----------

def node_to_dict(node: Node) -> Dict[str, Any]:
    return {
        "id": node.id,
        "title": node.title,
        "level": node.level,
        "children": [node_to_dict(child) for child in node.children],
    }

def node_from_dict(data: Any, _seen: Set[str] | None = None) -> Node:
    """
    Rebuild a Node tree from its dict form.
    Raises ValueError on missing or mistyped fields and on duplicate ids.
    """
    seen = set() if _seen is None else _seen

    if not isinstance(data, dict):
        raise ValueError(f"Node must be an object, got {type(data).__name__}")

    node_id = data.get("id")
    title = data.get("title")
    level = data.get("level")
    children = data.get("children", [])

    if not isinstance(node_id, str) or not node_id:
        raise ValueError(f"Node id must be a non-empty string, got {node_id!r}")
    if node_id in seen:
        raise ValueError(f"Duplicate node id {node_id!r}")
    seen.add(node_id)

    if not isinstance(title, str):
        raise ValueError(f"Node {node_id!r}: title must be a string")
    # bool is an int subclass; reject it explicitly
    if isinstance(level, bool) or not isinstance(level, int) or level < 0:
        raise ValueError(f"Node {node_id!r}: level must be a non-negative integer, got {level!r}")
    if not isinstance(children, list):
        raise ValueError(f"Node {node_id!r}: children must be a list")

    return Node(
        id=node_id,
        title=title,
        level=level,
        children=tuple(node_from_dict(child, seen) for child in children),
    )

# ---------- text form ----------

def serialize(root: Node) -> str:
    """Pretty-printed JSON of the whole tree. Encoder errors propagate."""
    return json.dumps(node_to_dict(root), indent=2, ensure_ascii=False)

def deserialize(text: str) -> Node:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed mind-map JSON: {e}") from e
    return node_from_dict(data)

# ---------- files ----------

def export_to_file(root: Node, path: Union[str, Path]) -> str:
    """Atomically write the serialized tree to path. Returns the resolved path."""
    p = Path(path).expanduser().resolve()
    atomic_write_text(p, serialize(root) + "\n")
    Log.debug(f"Exported mind map to {p}.", 1)
    return str(p)

def load_from_file(path: Union[str, Path]) -> Node:
    p = Path(path).expanduser()
    try:
        text = p.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ValueError(f"Mind-map file not found: {p}") from e
    try:
        root = deserialize(text)
    except ValueError as e:
        raise ValueError(f"{p}: {e}") from e
    Log.debug(f"Loaded mind map from {p}.", 1)
    return root

# ---------- background export ----------

@dataclass(slots=True, frozen=True)
class ExportJob:
    """A snapshot to write. Snapshots are immutable, so later edits never leak in."""
    snapshot: Node
    path: str

@dataclass(slots=True, frozen=True)
class ExportResult:
    job: ExportJob
    written_path: Optional[str] = None
    node_count: int = 0
    error: Optional[str] = None
    details: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

def run_export(job: ExportJob) -> ExportResult:
    """Write job.snapshot and report the outcome instead of raising."""
    try:
        written = export_to_file(job.snapshot, job.path)
    except (OSError, TypeError, ValueError) as e:
        Log.debug(f"Export to {job.path} failed: {e}", 0)
        return ExportResult(job=job, error=str(e), details=traceback.format_exc())
    return ExportResult(job=job, written_path=written, node_count=len(collect_ids(job.snapshot)))
