"""
Level-based filter

Filters log entries against a minimum severity threshold
"""

from typing import Union
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log entries based on log level.

    An event passes when its rank is at or above the threshold rank.
    """

    def __init__(self, threshold: Union[LogLevel, str, None] = None):
        """
        Initialize level filter.

        Args:
            threshold: Minimum log level (inclusive). Defaults to the
                       least verbose level, so verbose output is off
                       unless asked for.

        Example:
            # Only log WARN and above
            filter = LevelFilter(LogLevel.WARN)

            # Names work too
            filter = LevelFilter("debug")
        """
        if threshold is None:
            threshold = LogLevel.least_verbose()
        self.threshold = LogLevel.coerce(threshold)

    def allows(self, level: LogLevel) -> bool:
        """
        Check a severity against the threshold.

        Args:
            level: Severity of the event

        Returns:
            True if the event should be emitted
        """
        return level >= self.threshold

    def should_log(self, entry: LogEntry) -> bool:
        """Check the entry's level."""
        return self.allows(entry.level)

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(threshold={self.threshold})"
