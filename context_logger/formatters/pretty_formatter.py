"""
Pretty formatter for development output

Renders the message as a header line followed by the remaining fields
as an indented tree.
"""

from typing import Any, List

from context_logger.core.log_entry import LogEntry
from context_logger.formatters.base_formatter import BaseFormatter


class PrettyFormatter(BaseFormatter):
    """
    Format log entries for humans.

    Output looks like::

        [2024-01-01T00:00:00.000Z]: [user created]
            level: info
            context:
                requestId: abc
            tags: a, b
    """

    HEADER_TEMPLATE = "[{timestamp}]: [{message}]"

    def __init__(self, indentation: int = 4, inline_arrays: bool = True):
        """
        Initialize pretty formatter.

        Args:
            indentation: Spaces per nesting level
            inline_arrays: Render lists of scalars on one line
        """
        self.indentation = indentation
        self.inline_arrays = inline_arrays

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a header plus an indented body.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        record = entry.to_dict()
        header = self.HEADER_TEMPLATE.format(
            timestamp=record.pop("timestamp"),
            message=record.pop("message"),
        )
        body = "\n\t".join(self.render(record))
        return f"\n{header}\n\t{body}\n"

    def render(self, value: Any, depth: int = 0) -> List[str]:
        """Render a JSON-safe value as indented lines."""
        pad = " " * (self.indentation * depth)
        lines = []

        if isinstance(value, dict):
            for key, item in value.items():
                if self._is_scalar(item) or self._inlines(item):
                    lines.append(f"{pad}{key}: {self._scalar(item)}")
                elif not item:
                    lines.append(f"{pad}{key}: {'[]' if isinstance(item, list) else '{}'}")
                else:
                    lines.append(f"{pad}{key}:")
                    lines.extend(self.render(item, depth + 1))
        elif isinstance(value, list):
            for item in value:
                if self._is_scalar(item) or self._inlines(item):
                    lines.append(f"{pad}- {self._scalar(item)}")
                else:
                    lines.append(f"{pad}-")
                    lines.extend(self.render(item, depth + 1))
        else:
            lines.append(f"{pad}{self._scalar(value)}")

        return lines

    def _inlines(self, value: Any) -> bool:
        return (
            self.inline_arrays
            and isinstance(value, list)
            and bool(value)
            and all(self._is_scalar(item) for item in value)
        )

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return not isinstance(value, (dict, list))

    def _scalar(self, value: Any) -> str:
        if isinstance(value, list):
            return ", ".join(self._scalar(item) for item in value)
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def __repr__(self) -> str:
        """String representation."""
        return f"PrettyFormatter(indentation={self.indentation})"
