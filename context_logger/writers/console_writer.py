"""Console writer"""

import sys
from typing import Optional

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.json_formatter import JSONFormatter


class ConsoleWriter:
    """Write one formatted event per line to a stream."""

    def __init__(self, stream=None, formatter: Optional[BaseFormatter] = None):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stdout, resolved per write
                    so that redirection after construction is honoured)
            formatter: Log formatter (default: JSONFormatter)
        """
        self._stream = stream
        self.formatter = formatter or JSONFormatter()

    @property
    def stream(self):
        return self._stream or sys.stdout

    def write(self, entry: LogEntry):
        """Write log entry to the stream."""
        self.stream.write(self.formatter.format(entry) + "\n")
        self.stream.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleWriter(formatter={self.formatter!r})"
