'''
Copyright 2025 Aaron Vose (avose@aaronvose.net)
Licensed under the LGPL v2.1; see the file 'LICENSE' for details.
'''
from functools import wraps

def requires_selection(method):
    """Decorator to silently skip a frame action when no node is selected."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        if self.session.selection.is_empty:
            self.SetStatusText("Select a node first")
            return None
        return method(self, *args, **kwargs)
    return wrapper
