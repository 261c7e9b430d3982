from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import wx

from core.export import DEFAULT_EXPORT_NAME

Pathish = Union[str, Path]

__all__ = ["choose_export_path", "choose_import_path"]

JSON_WILDCARD = "Mind map JSON (*.json)|*.json|All files (*.*)|*.*"


def choose_export_path(
    parent: wx.Window | None,
    *,
    default_dir: Pathish | None = None,
    default_name: str = DEFAULT_EXPORT_NAME,
) -> Optional[str]:
    """
    Ask where to save the exported mind map.
    Returns an absolute path on OK, or None on cancel.
    """
    with wx.FileDialog(
        parent,
        message="Export mind map…",
        wildcard=JSON_WILDCARD,
        style=wx.FD_SAVE | wx.FD_OVERWRITE_PROMPT,
        defaultDir=str(default_dir) if default_dir else "",
        defaultFile=default_name,
    ) as dlg:
        if dlg.ShowModal() != wx.ID_OK:
            return None
        path = Path(dlg.GetPath())
    if not path.suffix:
        path = path.with_suffix(".json")
    return str(path.resolve())


def choose_import_path(
    parent: wx.Window | None,
    *,
    default_dir: Pathish | None = None,
) -> Optional[str]:
    """Pick a previously exported mind map. Returns None on cancel."""
    with wx.FileDialog(
        parent,
        message="Open mind map…",
        wildcard=JSON_WILDCARD,
        style=wx.FD_OPEN | wx.FD_FILE_MUST_EXIST,
        defaultDir=str(default_dir) if default_dir else "",
    ) as dlg:
        if dlg.ShowModal() != wx.ID_OK:
            return None
        return str(Path(dlg.GetPath()).resolve())
