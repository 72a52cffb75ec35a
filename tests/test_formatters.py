"""Tests for formatters and the console writer"""

import io
import json
from datetime import datetime, timezone

from context_logger import LogLevel
from context_logger.core.log_entry import LogEntry
from context_logger.formatters import JSONFormatter, PrettyFormatter
from context_logger.writers import ConsoleWriter


def make_entry(**overrides) -> LogEntry:
    fields = dict(
        level=LogLevel.INFO,
        message="user created",
        timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
        context={"requestId": "abc"},
        extra={"tags": ["a", "b"]},
        name="app",
        namespace="api",
    )
    fields.update(overrides)
    return LogEntry(**fields)


class TestJSONFormatter:
    """Test JSON output."""

    def test_single_line(self):
        output = JSONFormatter().format(make_entry())
        assert "\n" not in output

        record = json.loads(output)
        assert record["message"] == "user created"
        assert record["level"] == "info"
        assert record["tags"] == ["a", "b"]
        assert record["context"] == {"requestId": "abc"}

    def test_without_context(self):
        record = json.loads(JSONFormatter(include_context=False).format(make_entry()))
        assert "context" not in record

    def test_indent(self):
        assert "\n" in JSONFormatter(indent=2).format(make_entry())

    def test_non_ascii_kept(self):
        assert "ção" in JSONFormatter().format(make_entry(message="ação"))

    def test_hand_built_entry_with_odd_values(self):
        output = JSONFormatter().format(make_entry(extra={"obj": object()}))
        assert "object" in json.loads(output)["obj"]


class TestPrettyFormatter:
    """Test development output."""

    def test_header_and_body(self):
        output = PrettyFormatter().format(make_entry())
        lines = output.split("\n")

        assert lines[1] == "[2024-01-01T00:00:00.000Z]: [user created]"
        assert "\ttags: a, b" in lines
        assert "\tlevel: info" in lines
        assert "\tcontext:" in lines
        assert "\t    requestId: abc" in lines

    def test_render_nested_lists(self):
        lines = PrettyFormatter().render({"rows": [{"id": 1}, [1, 2]]})
        assert lines == ["rows:", "    -", "        id: 1", "    - 1, 2"]

    def test_render_scalars(self):
        lines = PrettyFormatter().render({"a": None, "b": True, "c": [], "d": {}})
        assert lines == ["a: null", "b: true", "c: []", "d: {}"]

    def test_block_arrays(self):
        lines = PrettyFormatter(inline_arrays=False).render({"tags": ["a", "b"]})
        assert lines == ["tags:", "    - a", "    - b"]

    def test_custom_indentation(self):
        lines = PrettyFormatter(indentation=2).render({"a": {"b": 1}})
        assert lines == ["a:", "  b: 1"]


class TestConsoleWriter:
    """Test console output."""

    def test_writes_one_line_per_entry(self):
        stream = io.StringIO()
        writer = ConsoleWriter(stream=stream)
        writer.write(make_entry(message="one"))
        writer.write(make_entry(message="two"))

        lines = stream.getvalue().splitlines()
        assert [json.loads(line)["message"] for line in lines] == ["one", "two"]

    def test_defaults_to_stdout(self, capsys):
        ConsoleWriter().write(make_entry())
        assert "user created" in capsys.readouterr().out

    def test_custom_formatter(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream, formatter=PrettyFormatter()).write(make_entry())
        assert "[user created]" in stream.getvalue()
