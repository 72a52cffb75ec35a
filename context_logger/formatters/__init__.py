"""
Log formatters module

JSON output for machines, pretty output for development.
"""

from context_logger.formatters.base_formatter import BaseFormatter
from context_logger.formatters.json_formatter import JSONFormatter
from context_logger.formatters.pretty_formatter import PrettyFormatter

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "PrettyFormatter",
]
