# ui/tree_panel.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''

from __future__ import annotations
from typing import List

import wx

from core.log import Log
from core.types import Node
from ui.constants import EDIT_FIELD_W, INDENT_W, PADDING, ROW_GAP, SELECTED_BG_COLOR
from ui.model import EditTracker, find_row_index, flatten_tree
from ui.types import Row


__all__ = ["TreePanel"]

class TreePanel(wx.ScrolledWindow):
    """
    Renders a tree snapshot as one row per node. The panel never edits the
    tree itself: every button forwards to an on_action_* method of the main
    frame, which applies a command to the session and calls show() again.
    """

    def __init__(self, parent: wx.Window, main_frame):
        super().__init__(parent, style=wx.VSCROLL | wx.BORDER_NONE)
        self.main_frame = main_frame
        self._rows: List[Row] = []
        self._edits = EditTracker()

        self.SetScrollRate(0, 10)
        self._sizer = wx.BoxSizer(wx.VERTICAL)
        self.SetSizer(self._sizer)

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def show(self, root: Node) -> None:
        """Rebuild all row widgets from root."""
        selected_id = self.main_frame.session.selection.selected_id
        self._rows = flatten_tree(root)
        self._edits.sync(self._rows, selected_id)

        self.Freeze()
        try:
            self._sizer.Clear(delete_windows=True)
            for row in self._rows:
                self._sizer.Add(self._build_row(row), 0, wx.EXPAND | wx.BOTTOM, ROW_GAP)
            self.FitInside()
            self.Layout()
        finally:
            self.Thaw()

        if selected_id is not None:
            self._ensure_row_visible(selected_id)
        Log.debug(f"Rendered {len(self._rows)} rows.", 3)

    def _ensure_row_visible(self, entry_id: str) -> None:
        idx = find_row_index(self._rows, entry_id)
        if idx is None:
            return
        row_win = self._sizer.GetItem(idx).GetWindow()
        _x, top = self.CalcUnscrolledPosition(row_win.GetPosition())
        bottom = top + row_win.GetSize().height
        _ux, unit_y = self.GetScrollPixelsPerUnit()
        view_top = self.GetViewStart()[1] * unit_y
        view_bottom = view_top + self.GetClientSize().height
        if top < view_top:
            self.Scroll(-1, top // unit_y)
        elif bottom > view_bottom:
            self.Scroll(-1, (bottom - self.GetClientSize().height + unit_y - 1) // unit_y)

    def _build_row(self, row: Row) -> wx.Panel:
        selection = self.main_frame.session.selection
        is_selected = selection.is_selected(row.entry_id)
        is_editing = self._edits.is_editing(row.entry_id)

        panel = wx.Panel(self)
        if is_selected:
            panel.SetBackgroundColour(SELECTED_BG_COLOR)
        sizer = wx.BoxSizer(wx.HORIZONTAL)

        check = wx.Button(panel, label="✅" if is_selected else "🔲", style=wx.BU_EXACTFIT)
        check.Bind(wx.EVT_BUTTON, lambda _evt, eid=row.entry_id: self.main_frame.on_action_toggle_select(eid))
        sizer.Add(check, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, 1)

        if is_editing:
            field = wx.TextCtrl(panel, value=row.title, size=(EDIT_FIELD_W, -1))
            field.Bind(wx.EVT_TEXT, lambda evt, eid=row.entry_id: self.main_frame.on_action_rename(eid, evt.GetString()))
            sizer.Add(field, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, 1)
        else:
            label = wx.StaticText(panel, label=row.title)
            sizer.Add(label, 0, wx.ALIGN_CENTER_VERTICAL | wx.LEFT, PADDING + row.level * INDENT_W)

        if is_selected:
            self._add_action_buttons(panel, sizer, row, is_editing)

        panel.SetSizer(sizer)
        return panel

    def _add_action_buttons(self, panel: wx.Panel, sizer: wx.BoxSizer, row: Row, is_editing: bool):
        # (label, tooltip, handler) - handlers live on the main frame
        actions = [
            ("⬇️", "Increase level", lambda: self.main_frame.on_action_level(+1)),
            ("⬆️", "Decrease level", lambda: self.main_frame.on_action_level(-1)),
            ("Save" if is_editing else "Edit", "Edit title", lambda: self.toggle_edit(row.entry_id)),
            ("Move Up", "Move before previous sibling", lambda: self.main_frame.on_action_move(-1)),
            ("Move Down", "Move after next sibling", lambda: self.main_frame.on_action_move(+1)),
            ("Delete", "Delete node and its children", lambda: self.main_frame.on_action_delete()),
        ]
        for label, tooltip, handler in actions:
            btn = wx.Button(panel, label=label, style=wx.BU_EXACTFIT)
            btn.SetToolTip(wx.ToolTip(tooltip))
            btn.Bind(wx.EVT_BUTTON, lambda _evt, fn=handler: fn())
            sizer.Add(btn, 0, wx.ALIGN_CENTER_VERTICAL | wx.LEFT, PADDING)

    # ------------------------------------------------------------------ #
    # Inline editing
    # ------------------------------------------------------------------ #

    def toggle_edit(self, entry_id: str) -> None:
        self._edits.toggle(entry_id)
        # Deferred: the clicked button is destroyed by the rebuild
        wx.CallAfter(self.show, self.main_frame.session.root)
