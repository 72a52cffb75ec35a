"""
Log entry data structure

One event produced per emission call.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from context_logger.core.log_level import LogLevel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    ``context`` and ``extra`` hold already-sanitized payloads produced
    by the Serializer, so ``to_dict`` output is always JSON-safe.
    """

    level: LogLevel
    message: Any
    timestamp: datetime = field(default_factory=_utcnow)
    context: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)
    name: Optional[str] = None
    namespace: str = ""

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")

    @property
    def iso_timestamp(self) -> str:
        return self.timestamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to the emitted record shape.

        Extra fields are merged at the top level; they never replace the
        reserved keys.

        Returns:
            Dictionary representation
        """
        record = {}
        if isinstance(self.extra, dict):
            record.update(self.extra)
        else:
            record["extra"] = self.extra

        record.update({
            "timestamp": self.iso_timestamp,
            "level": str(self.level),
            "message": self.message,
            "name": self.name,
            "namespace": self.namespace,
            "context": self.context,
        })
        return record