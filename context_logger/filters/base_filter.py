"""
Base filter interface
"""

from abc import ABC, abstractmethod
from context_logger.core.log_entry import LogEntry


class BaseFilter(ABC):
    """
    Abstract base class for entry filters.

    A Logger consults its level and namespace filters before building an
    entry; filters added with ``Logger.add_filter`` see the finished entry
    and can still drop it.
    """

    @abstractmethod
    def should_log(self, entry: LogEntry) -> bool:
        """
        Decide whether a built entry is written.

        Args:
            entry: The serialized entry

        Returns:
            True to write the entry, False to drop it
        """

    def __call__(self, entry: LogEntry) -> bool:
        """Allow filters to be used as plain predicates."""
        return self.should_log(entry)
