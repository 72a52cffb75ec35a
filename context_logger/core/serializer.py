"""
Event serializer

Turns a message plus context into a LogEntry whose payloads are
JSON-safe and, for debug output, bounded in encoded size.
"""

from __future__ import annotations
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, Optional
import json
import math

from context_logger.core.log_entry import LogEntry
from context_logger.core.log_level import LogLevel
from context_logger.core.logger_config import DEFAULT_LOG_LIMIT

CIRCULAR_MARKER = "[Circular {path}]"
TRUNCATION_MARKER = "...[truncated]"
UNSERIALIZABLE_MARKER = "<{type_name}>"


def make_json_safe(value: Any) -> Any:
    """
    Return a copy of ``value`` built only from JSON types.

    A container that contains itself is replaced by a marker naming the
    path of the ancestor it refers to, e.g. ``"[Circular ~.user]"``.
    Shared but acyclic references are copied in full.
    """
    try:
        return _sanitize(value, "~", {})
    except RecursionError:
        return UNSERIALIZABLE_MARKER.format(type_name=type(value).__name__)


def _sanitize(value: Any, path: str, ancestors: Dict[int, str]) -> Any:
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Enum):
        return _sanitize(value.value, path, ancestors)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, BaseException):
        return {"type": type(value).__name__, "message": str(value)}

    if isinstance(value, (dict, list, tuple, set, frozenset)):
        marker = id(value)
        if marker in ancestors:
            return CIRCULAR_MARKER.format(path=ancestors[marker])
        ancestors[marker] = path
        try:
            if isinstance(value, dict):
                return {
                    str(key): _sanitize(item, f"{path}.{key}", ancestors)
                    for key, item in value.items()
                }
            return [
                _sanitize(item, f"{path}.{index}", ancestors)
                for index, item in enumerate(value)
            ]
        finally:
            del ancestors[marker]

    try:
        to_dict = getattr(value, "to_dict", None)
        if callable(to_dict):
            return _sanitize(to_dict(), path, ancestors)
        return str(value)
    except RecursionError:
        raise
    except Exception:
        return UNSERIALIZABLE_MARKER.format(type_name=type(value).__name__)


def encoded_size(value: Any) -> int:
    """Byte length of the UTF-8 JSON encoding of a JSON-safe value."""
    return len(_encode(value))


def _encode(value: Any) -> bytes:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def truncate_payload(value: Any, limit: int) -> Any:
    """
    Bound a JSON-safe value to ``limit`` encoded bytes.

    Values within the limit are returned unchanged. Larger ones become a
    prefix of their encoded text followed by TRUNCATION_MARKER, sized so
    that the string, once JSON-encoded again (quotes and escapes
    included), is at most ``limit`` bytes plus the marker. The cut never
    falls inside a multi-byte character. Limits below 2 cannot hold the
    quotes and yield the bare marker.
    """
    encoded = _encode(value)
    if len(encoded) <= limit:
        return value

    budget = limit + len(TRUNCATION_MARKER.encode("utf-8"))
    cut = limit - 2
    while cut > 0:
        candidate = encoded[:cut].decode("utf-8", errors="ignore") + TRUNCATION_MARKER
        excess = len(_encode(candidate)) - budget
        if excess <= 0:
            return candidate
        cut -= excess
    return TRUNCATION_MARKER


class Serializer:
    """Build size-bounded, JSON-safe events for one logger."""

    def __init__(
        self,
        context: Any = None,
        name: Optional[str] = None,
        namespace: str = "",
        limit: int = DEFAULT_LOG_LIMIT
    ):
        """
        Initialize serializer.

        Args:
            context: Metadata attached to every event
            name: Application name attached to every event
            namespace: Namespace of the owning logger
            limit: Maximum encoded bytes of debug payloads
        """
        self.context = context
        self.name = name
        self.namespace = namespace
        self.limit = limit

    def serialize(
        self,
        message: Any,
        extra: Optional[Dict[str, Any]] = None,
        level: LogLevel = LogLevel.LOG
    ) -> LogEntry:
        """
        Build the event for one emission.

        The message is kept as given (sanitized, never truncated). Context
        and extra fields are truncated only for debug events.

        Args:
            message: The message to log
            extra: Additional fields merged into the record
            level: Severity of the event

        Returns:
            New LogEntry
        """
        context = make_json_safe(self.context)
        fields = make_json_safe(extra if extra is not None else {})

        if level == LogLevel.DEBUG:
            context = truncate_payload(context, self.limit)
            fields = truncate_payload(fields, self.limit)

        return LogEntry(
            level=level,
            message=make_json_safe(message),
            context=context,
            extra=fields,
            name=self.name,
            namespace=self.namespace,
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"Serializer(namespace='{self.namespace}', limit={self.limit})"
