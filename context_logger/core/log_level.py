"""
Log level enumeration

Ordered severities used for threshold filtering.
"""

from enum import IntEnum
from typing import Dict, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    The integer value of each member is its rank: a higher value is
    more severe. ``info`` and ``log`` are distinct ranks so that a
    ``log`` threshold still lets informational output through.
    """

    DEBUG = 10      # Verbose payloads, size bounded
    LOG = 20        # Plain log lines
    INFO = 30       # Informational messages
    WARN = 40       # Warning messages
    ERROR = 50      # Error messages

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(str(level_str).strip().lower())
        if level is None:
            raise ValueError(f"Invalid log level: {level_str}")
        return level

    @classmethod
    def coerce(cls, value: Union["LogLevel", str]) -> "LogLevel":
        """Accept either a LogLevel or its name."""
        if isinstance(value, LogLevel):
            return value
        return cls.from_string(value)

    @classmethod
    def most_verbose(cls) -> "LogLevel":
        return min(cls)

    @classmethod
    def least_verbose(cls) -> "LogLevel":
        return max(cls)


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "debug",
    LogLevel.LOG: "log",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
}

# Reverse mapping, plus the stdlib spelling of warn
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}
LEVEL_FROM_NAME["warning"] = LogLevel.WARN
