"""Console writer"""

import sys


class ConsoleWriter:
    """Write lines to a console stream."""

    def __init__(self, stream=None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, looked up on
                    every write so redirection is honored)
        """
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def write(self, line: str):
        """Write a formatted line to the console."""
        self.stream.write(line)
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()
