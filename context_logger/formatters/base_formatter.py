"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from context_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for formatters.

    A formatter turns the record produced by ``LogEntry.to_dict`` into the
    text a writer emits. Entries reaching a formatter are already
    JSON-safe.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Render an entry.

        Args:
            entry: The serialized entry

        Returns:
            Text for one event, without a trailing newline
        """

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be used as plain callables."""
        return self.format(entry)
