# core/io_worker.py
'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from __future__ import annotations

import queue
import threading
from typing import Callable, Optional

import wx

from core.export import ExportJob, ExportResult, run_export
from core.log import Log

ExportCallback = Callable[[ExportResult], None]

class ExportWorker:
    """
    Writes exported mind maps on one background thread so the window never
    blocks on disk. Jobs run in submission order; each result is handed back
    on the wx main thread.
    """

    def __init__(self):
        self._jobs: queue.Queue = queue.Queue()
        self._pending = 0
        self._thread = threading.Thread(target=self._run, name="ExportWorker", daemon=True)
        self._thread.start()

    @property
    def busy(self) -> bool:
        return self._pending > 0

    def submit(self, job: ExportJob, callback: Optional[ExportCallback] = None) -> None:
        self._pending += 1
        Log.debug(f"Queued export to {job.path}.", 2)
        self._jobs.put((job, callback))

    def _run(self):
        while True:
            job, callback = self._jobs.get()
            result = run_export(job)
            wx.CallAfter(self._deliver, result, callback)
            self._jobs.task_done()

    def _deliver(self, result: ExportResult, callback: Optional[ExportCallback]):
        # Main thread only
        self._pending -= 1
        if callback is not None:
            callback(result)
