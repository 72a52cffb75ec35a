"""
Main Logger class

Leveled, namespaced emission with an ambient "current logger".
"""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Dict, List, Optional
import sys
import warnings

from context_logger.core import ambient
from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import LoggerConfig
from context_logger.core.serializer import Serializer
from context_logger.filters.base_filter import BaseFilter
from context_logger.filters.level_filter import LevelFilter
from context_logger.filters.namespace_filter import NamespaceFilter
from context_logger.formatters.json_formatter import JSONFormatter
from context_logger.formatters.pretty_formatter import PrettyFormatter
from context_logger.writers.console_writer import ConsoleWriter


def merge_context(context: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
    """Merge ``fields`` into a copy of ``context``."""
    if context is None:
        merged = {}
    elif isinstance(context, Mapping):
        merged = dict(context)
    else:
        merged = {"context": context}
    merged.update(fields)
    return merged


class Logger:
    """
    Structured logger bound to a namespace and a context.

    Example:
        api_logger = Logger.from_options(
            context={"api": "myAwesomeAPI"},
            log_level="warn",
            log_patterns="api*",
            namespace="api",
        )

        api_logger.warn("Before doing any requests check your connection")
        api_logger.error("Bad request", {"status": 400})
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        writers: Optional[List[Any]] = None
    ):
        """
        Initialize logger.

        Args:
            config: Resolved configuration (default: from the environment)
            writers: Output writers (default: one ConsoleWriter)
        """
        self._config = config or LoggerConfig.from_env()
        self._level_filter = LevelFilter(self._config.log_level)
        self._namespace_filter = NamespaceFilter(self._config.log_patterns)
        self._serializer = self._build_serializer()
        self._metrics = {"logged": 0, "suppressed": 0}

        if writers is None:
            formatter = PrettyFormatter() if self._config.pretty_print else JSONFormatter()
            writers = [ConsoleWriter(formatter=formatter)]
        self._writers: List[Any] = list(writers)
        self._filters: List[BaseFilter] = []

    def _build_serializer(self) -> Serializer:
        return Serializer(
            context=self._config.context,
            name=self._config.app_name,
            namespace=self._config.namespace,
            limit=self._config.log_limit,
        )

    @classmethod
    def from_options(cls, writers: Optional[List[Any]] = None, **options) -> "Logger":
        """
        Create a logger from keyword options.

        Recognized options: context, namespace, log_level, log_limit,
        log_patterns, app_name, pretty_print (camelCase spellings
        logLevel, logLimit and logPatterns are accepted). Unset options
        fall back to the environment, then to the built-in defaults.

        Raises:
            ValueError: On unknown options or invalid values
        """
        return cls(LoggerConfig.from_env(**options), writers=writers)

    @classmethod
    def from_positional(
        cls,
        context: Any,
        namespace: Optional[str] = None,
        log_patterns: Optional[str] = None,
        log_limit: Optional[int] = None,
        log_level: Optional[str] = None,
    ) -> "Logger":
        """
        Create a logger from the legacy positional argument order.

        Deprecated: use ``from_options``. Arguments left as None take the
        same defaults ``from_options`` would use.
        """
        warnings.warn(
            "Logger.from_positional is deprecated, use Logger.from_options",
            DeprecationWarning,
            stacklevel=2,
        )
        return cls.from_options(
            context=context,
            namespace=namespace,
            log_patterns=log_patterns,
            log_limit=log_limit,
            log_level=log_level,
        )

    @staticmethod
    def current() -> "Logger":
        """
        Return the logger bound to the active context, or a logger
        without contextual information when there is none.
        """
        return ambient.current()

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def namespace(self) -> str:
        return self._config.namespace

    @property
    def context(self) -> Any:
        return self._config.context

    def create_child_logger(self, namespace: str) -> "Logger":
        """
        Return a logger with the same context and a child namespace.

        ``Logger.from_options(namespace="docs").create_child_logger("child")``
        has the namespace ``docs:child``. Patterns are inherited; level and limit
        are resolved afresh.

        Args:
            namespace: Suffix appended to this logger's namespace

        Returns:
            New Logger
        """
        prefix = f"{self.namespace}:" if self.namespace else ""
        return Logger.from_options(
            writers=self._writers,
            context=self.context,
            log_patterns=self._config.log_patterns,
            namespace=f"{prefix}{namespace}",
        )

    def with_context(self, **fields) -> "Logger":
        """
        Return a logger whose context also carries ``fields``.

        Everything else about the configuration is kept.
        """
        config = self._config.derive(context=merge_context(self.context, fields))
        return Logger(config, writers=self._writers)

    def set_session_id(self, session_id: Any) -> None:
        """
        Merge ``sessionId`` into this logger's context in place.

        Deprecated: pass the session id in the context at construction,
        or use ``with_context(sessionId=...)``.
        """
        warnings.warn(
            "Logger.set_session_id is deprecated, use with_context(sessionId=...)",
            DeprecationWarning,
            stacklevel=2,
        )
        self._config = self._config.derive(
            context=merge_context(self.context, {"sessionId": session_id})
        )
        self._serializer = self._build_serializer()

    def add_writer(self, writer: Any) -> None:
        """Add a log writer (any object with a ``write(entry)`` method)."""
        self._writers.append(writer)

    def add_filter(self, log_filter: BaseFilter) -> None:
        """
        Add an entry filter.

        Entry filters run after serialization, so they can inspect the
        context and extra fields; an entry they reject counts as
        suppressed.
        """
        self._filters.append(log_filter)

    def should_suppress(self, level: LogLevel) -> bool:
        """Check whether an event at ``level`` would be dropped."""
        return not (
            self._level_filter.allows(level)
            and self._namespace_filter.is_enabled(self.namespace)
        )

    def emit(
        self,
        level: LogLevel,
        message: Any,
        extra: Optional[Dict[str, Any]] = None
    ) -> Optional[LogEntry]:
        """
        Log a message at ``level``.

        Returns:
            The written entry, or None when suppressed
        """
        if self.should_suppress(level):
            self._metrics["suppressed"] += 1
            return None

        entry = self._serializer.serialize(message, extra, level)
        if not all(f.should_log(entry) for f in self._filters):
            self._metrics["suppressed"] += 1
            return None

        self._write(entry)
        self._metrics["logged"] += 1
        return entry

    def _write(self, entry: LogEntry) -> None:
        for writer in self._writers:
            try:
                writer.write(entry)
            except Exception as e:
                print(f"Writer error: {e}", file=sys.stderr)

    def debug(self, message: Any, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log debug message; context and extra are size bounded."""
        self.emit(LogLevel.DEBUG, message, extra)

    def log(self, message: Any, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log plain message."""
        self.emit(LogLevel.LOG, message, extra)

    def info(self, message: Any, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log info message."""
        self.emit(LogLevel.INFO, message, extra)

    def warn(self, message: Any, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log warning message."""
        self.emit(LogLevel.WARN, message, extra)

    def error(self, message: Any, extra: Optional[Dict[str, Any]] = None) -> None:
        """Log error message."""
        self.emit(LogLevel.ERROR, message, extra)

    def flush(self):
        """Flush all writers."""
        for writer in self._writers:
            if hasattr(writer, 'flush'):
                writer.flush()

    def get_metrics(self) -> dict:
        """Get logging metrics."""
        return self._metrics.copy()

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"Logger(namespace='{self.namespace}', "
            f"level={self._config.log_level}, "
            f"patterns={self._config.log_patterns!r})"
        )
