"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Context Logger - Structured, namespaced logging with an ambient
current logger that follows asynchronous call chains
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from context_logger.core.logger import Logger
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig
from context_logger.core.serializer import Serializer
from context_logger.core.ambient import current, scope, wrap

# Import submodules (not all classes by default)
from context_logger import filters
from context_logger import formatters
from context_logger import writers

__all__ = [
    "Logger",
    "LogEntry",
    "LogLevel",
    "LoggerConfig",
    "Serializer",
    "current",
    "scope",
    "wrap",
    "filters",
    "formatters",
    "writers",
]
