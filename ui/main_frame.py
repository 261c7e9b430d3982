'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

from pathlib import Path

import wx

from core.export import ExportJob, ExportResult, load_from_file
from core.io_worker import ExportWorker
from core.log import Log
from core.session import Session
from ui.constants import MIN_WINDOW_SIZE, PADDING, TITLE_FIELD_W, WINDOW_SIZE
from ui.decorators import requires_selection
from ui.file_dialogs import choose_export_path, choose_import_path
from ui.statusbar import StatusBar
from ui.tree_panel import TreePanel


class MainFrame(wx.Frame):
    """Main application frame: title field, Add Node / Submit buttons and the tree panel."""
    def __init__(self, verbosity: int = 0, open_path: str | None = None):
        super().__init__(None, title="Mind Map Builder", size=WINDOW_SIZE)
        self.SetMinSize(MIN_WINDOW_SIZE)

        Log.set_verbosity(verbosity)
        self.exporter = ExportWorker()
        self.session = Session()
        self.current_path: str | None = None

        self._build_menu()
        self.SetStatusBar(StatusBar(self))
        self._build_body()
        self.SetStatusText("Ready.")

        if open_path:
            self._open_path(open_path)
        else:
            self._refresh()

    # ---------------- UI scaffolding ----------------

    def _build_menu(self):
        mb = wx.MenuBar()

        m_file = wx.Menu()
        m_open = m_file.Append(wx.ID_OPEN, "&Open Mind Map...\tCtrl-O")
        m_export = m_file.Append(wx.ID_SAVEAS, "&Export JSON...\tCtrl-S")
        m_file.AppendSeparator()
        m_quit = m_file.Append(wx.ID_EXIT, "E&xit")
        self.Bind(wx.EVT_MENU, self.on_action_open, m_open)
        self.Bind(wx.EVT_MENU, self.on_action_export, m_export)
        self.Bind(wx.EVT_MENU, self.on_quit, m_quit)
        mb.Append(m_file, "&File")

        self.SetMenuBar(mb)

    def _build_body(self):
        root = wx.Panel(self)
        main_sizer = wx.BoxSizer(wx.VERTICAL)

        heading = wx.StaticText(root, label="Mind Map Builder")
        heading.SetFont(heading.GetFont().Scaled(2.0).Bold())
        main_sizer.Add(heading, 0, wx.ALL, 3 * PADDING)

        # Title field + Add Node + Submit
        input_row = wx.BoxSizer(wx.HORIZONTAL)
        self.title_ctrl = wx.TextCtrl(root, size=(TITLE_FIELD_W, -1), style=wx.TE_PROCESS_ENTER)
        self.title_ctrl.SetHint("Node title")
        self.title_ctrl.Bind(wx.EVT_TEXT_ENTER, self.on_action_add_node)
        input_row.Add(self.title_ctrl, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, PADDING)

        btn_add = wx.Button(root, label="Add Node")
        btn_add.Bind(wx.EVT_BUTTON, self.on_action_add_node)
        input_row.Add(btn_add, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, PADDING)

        btn_submit = wx.Button(root, label="Submit")
        btn_submit.Bind(wx.EVT_BUTTON, self.on_action_submit)
        input_row.Add(btn_submit, 0, wx.ALIGN_CENTER_VERTICAL | wx.ALL, PADDING)
        main_sizer.Add(input_row, 0, wx.LEFT | wx.RIGHT, 2 * PADDING)

        self.tree_panel = TreePanel(root, self)
        main_sizer.Add(self.tree_panel, 1, wx.EXPAND | wx.ALL, 2 * PADDING)

        root.SetSizer(main_sizer)

    def _refresh(self):
        # Deferred so a button is never destroyed inside its own handler
        wx.CallAfter(self.tree_panel.show, self.session.root)

    # ---------------- Selection ----------------

    def on_action_toggle_select(self, entry_id: str):
        selected = self.session.selection.toggle(entry_id)
        self.SetStatusText("Node selected" if selected else "Selection cleared")
        self._refresh()

    # ---------------- Tree edits ----------------

    @requires_selection
    def on_action_add_node(self, evt=None):
        title = self.title_ctrl.GetValue()
        before = self.session.root
        if self.session.add_to_selected(title) is not before:
            self.SetStatusText(f"Added node '{title}'")
        self._refresh()

    @requires_selection
    def on_action_level(self, delta: int):
        self.session.change_selected_level(delta)
        self._refresh()

    @requires_selection
    def on_action_move(self, direction: int):
        before = self.session.root
        if self.session.move_selected(direction) is before:
            self.SetStatusText("Cannot move further")
        self._refresh()

    @requires_selection
    def on_action_delete(self, evt=None):
        before = self.session.root
        if self.session.delete_selected() is before:
            self.SetStatusText("The root node cannot be deleted")
        else:
            self.SetStatusText("Node deleted")
        self._refresh()

    def on_action_rename(self, entry_id: str, title: str):
        # The edit field stays alive while typing; the panel re-renders on Save
        self.session.rename(entry_id, title)

    # ---------------- Export / open ----------------

    def on_action_submit(self, evt=None):
        """Log the JSON export and offer to save it."""
        try:
            json_text = self.session.export_json()
        except (TypeError, ValueError) as e:
            self._show_error("Export Failed", f"Error encoding mind map to JSON: {e}")
            return
        Log.debug(f"JSON string: {json_text}", 0)
        self.on_action_export()

    def on_action_export(self, evt=None):
        default_dir = Path(self.current_path).parent if self.current_path else None
        path = choose_export_path(self, default_dir=default_dir)
        if not path:
            self.SetStatusText("Export cancelled")
            return

        self.SetStatusText(f"Exporting to {path}...")
        self.exporter.submit(ExportJob(snapshot=self.session.root, path=path),
                             callback=self._on_export_done)

    def _on_export_done(self, result: ExportResult):
        if not result.ok:
            Log.debug(f"Export failed:\n{result.details}", 0)
            self._show_error("Export Failed", result.error)
            return
        self.current_path = result.written_path
        self.SetStatusText(f"Mind map saved to {result.written_path} ({result.node_count} nodes)")

    def on_action_open(self, evt=None):
        path = choose_import_path(self)
        if path:
            self._open_path(path)

    def _open_path(self, path: str):
        try:
            root = load_from_file(path)
        except ValueError as e:
            self._show_error("Open Failed", str(e))
            self._refresh()
            return
        self.session.load(root)
        self.current_path = str(Path(path).resolve())
        self.SetTitle(f"Mind Map Builder — {Path(path).name}")
        self.SetStatusText(f"Opened {path}")
        self._refresh()

    def _show_error(self, caption: str, message: str):
        self.SetStatusText(message)
        wx.MessageBox(message, caption, wx.OK | wx.ICON_ERROR)

    # --------------- Close ---------------

    def on_quit(self, event):
        self.Close()
