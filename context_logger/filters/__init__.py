"""
Log filters module

Level and namespace filters deciding whether an event is emitted.
"""

from context_logger.filters.base_filter import BaseFilter
from context_logger.filters.level_filter import LevelFilter
from context_logger.filters.namespace_filter import (
    NamespaceFilter,
    NamespaceTerm,
    compile_patterns,
)

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "NamespaceFilter",
    "NamespaceTerm",
    "compile_patterns",
]
