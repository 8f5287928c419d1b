"""
Locked writer

Loggers do no locking of their own. Wrap a sink shared between threads
in a LockedWriter so each line is written whole.
"""

import threading


class LockedWriter:
    """Serialize writes to a wrapped sink."""

    def __init__(self, writer):
        """
        Initialize locked writer.

        Args:
            writer: Sink with write(str) and optionally flush()
        """
        self.writer = writer
        self._lock = threading.Lock()

    def write(self, line: str):
        with self._lock:
            self.writer.write(line)

    def flush(self):
        if hasattr(self.writer, "flush"):
            with self._lock:
                self.writer.flush()
