################################################################################################

'''

Copyright 2025 Aaron Vose (avose@aaronvose.net)

Licensed under the LGPL v2.1; see the file 'LICENSE' for details.

This file holds the in-memory log shared by the session and the GUI.

'''

################################################################################################

import inspect
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import List

################################################################################################

TIME_FMT = "%m/%d/%Y %H:%M:%S"
MAX_ENTRIES = 5000

@dataclass(slots=True, frozen=True)
class LogEntry:
    timestamp: str
    text: str

    def format(self) -> str:
        return f"[{self.timestamp}] {self.text}"

class LogManager:
    """
    Bounded, process-wide list of log lines. Session commands, exports and
    unhandled GUI exceptions are recorded here; the status bar shows it.
    """
    _entries: deque = deque(maxlen=MAX_ENTRIES)

    def __init__(self, verbosity: int = 0):
        self.verbosity = verbosity

    def add(self, text: str):
        self._entries.append(LogEntry(datetime.now().strftime(TIME_FMT), text))

    def debug(self, text: str, level: int = 0):
        """Record text if level is within the verbosity, tagged with the caller's file."""
        if self.verbosity < level:
            return
        caller = inspect.stack()[1]
        self.add(f"[{Path(caller.filename).name}] {text}")

    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def last(self) -> LogEntry:
        return self._entries[-1]

    def count(self) -> int:
        return len(self._entries)

    def set_verbosity(self, verbosity: int = 0):
        self.verbosity = verbosity

    def clear(self):
        self._entries.clear()
        self.add("Log cleared")

    def format(self) -> str:
        return "\n".join(entry.format() for entry in self._entries)

    def write_to_file(self, filepath: str) -> bool:
        """Dump all entries to a text file. Returns False (and logs why) on failure."""
        try:
            Path(filepath).write_text(self.format() + "\n", encoding="utf-8")
        except OSError as e:
            self.add(f"Failed to write log to file '{filepath}': {e}")
            return False
        self.add(f"Log written to file: {filepath}")
        return True

################################################################################################

Log = LogManager()
Log.add("Begin MindMap Log")

################################################################################################
