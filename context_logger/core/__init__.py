"""
Core module for context logger

This module contains the fundamental classes:
- Logger: Main logger class
- LogEntry: Event data structure
- LogLevel: Log level enumeration
- LoggerConfig: Configuration management
- Serializer: Safe, size-bounded event construction
- ambient: Current-logger resolution across async call chains
"""

from context_logger.core.logger import Logger
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig
from context_logger.core.serializer import Serializer
from context_logger.core import ambient

__all__ = ["Logger", "LogEntry", "LogLevel", "LoggerConfig", "Serializer", "ambient"]
