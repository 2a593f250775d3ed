"""
Single-line text rendering of a structured log record.

Output shape (colors on):

    [15:04:05]\\x1b[36m [INFO] [id:42] [user:alice] \\x1b[0mstarting up (main.py:10 main)\\n

The renderer is a pure function of (record, config): no I/O, no shared mutable
state, so one LineRenderer may be used from any number of threads.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence

from line_formatter.config import FormatterConfig
from line_formatter.levels import Color, color_for_level, level_label, sgr
from line_formatter.record import Caller, LogRecord

_DEFAULT_CONFIG = FormatterConfig()

OUTPUT_ENCODING = "utf-8"


def ordered_field_names(fields: Mapping[str, Any], field_order: Optional[Sequence[str]]) -> List[str]:
    """
    Rendering order for `fields`.

    - field_order None: every name, sorted by code point
    - otherwise: configured names present in `fields` (configured order),
      then the rest sorted
    """
    if field_order is None:
        return sorted(fields)

    found: List[str] = []
    seen = set()
    for name in field_order:
        if name in fields and name not in seen:
            found.append(name)
            seen.add(name)

    rest = sorted(name for name in fields if name not in seen)
    return found + rest


def format_field(name: str, value: Any, *, hide_keys: bool) -> str:
    if hide_keys:
        return f"[{value}] "
    return f"[{name}:{value}] "


def format_caller(caller: Caller) -> str:
    return f" ({caller.file}:{caller.line} {caller.function})"


class LineRenderer:
    """Renders LogRecords with a fixed, immutable FormatterConfig."""

    def __init__(self, config: Optional[FormatterConfig] = None) -> None:
        self._config = config or _DEFAULT_CONFIG

    @property
    def config(self) -> FormatterConfig:
        return self._config

    def render(self, record: LogRecord) -> bytes:
        return self.render_text(record).encode(OUTPUT_ENCODING, errors="backslashreplace")

    def render_text(self, record: LogRecord) -> str:
        """Same line as `render`, as text. Still ends with a single newline."""
        config = self._config
        colors = not config.no_colors
        parts: List[str] = []

        parts.append("[")
        parts.append(record.timestamp.strftime(config.resolved_timestamp_format()))
        parts.append("]")

        if colors:
            parts.append(sgr(color_for_level(record.level)))

        parts.append(" [")
        parts.append(level_label(_level_name(record.level)))
        parts.append("] ")

        parts.extend(self._render_fields(record.fields))

        if colors:
            parts.append(sgr(Color.NONE))

        if config.disable_trim_messages:
            parts.append(record.message)
        else:
            parts.append(record.message.strip())

        if record.caller is not None:
            parts.append(format_caller(record.caller))

        parts.append("\n")
        return "".join(parts)

    def _render_fields(self, fields: Mapping[str, Any]) -> Iterable[str]:
        hide_keys = self._config.hide_keys
        for name in ordered_field_names(fields, self._config.field_order):
            yield format_field(name, fields[name], hide_keys=hide_keys)


def _level_name(level: Any) -> str:
    name = getattr(level, "level_name", None)
    if isinstance(name, str):
        return name
    return str(level)


def render(record: LogRecord, config: Optional[FormatterConfig] = None) -> bytes:
    return LineRenderer(config).render(record)


__all__ = [
    "OUTPUT_ENCODING",
    "LineRenderer",
    "render",
    "ordered_field_names",
    "format_field",
    "format_caller",
]
