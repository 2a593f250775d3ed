"""
Input value objects for the line renderer.

The logging pipeline owns these; the renderer only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Optional

from line_formatter.levels import Level


@dataclass(frozen=True)
class Caller:
    """Call-site metadata captured upstream.

    Attributes:
        file: Source file path as reported by the pipeline
        line: Line number within `file`
        function: Function (or qualified function) name
    """

    file: str
    line: int
    function: str


@dataclass(frozen=True)
class LogRecord:
    """One structured log event.

    Attributes:
        timestamp: When the event happened
        level: Severity
        message: Free-form message text
        fields: Named context values; names are unique by construction
        caller: Present only when caller capture was enabled upstream
    """

    timestamp: datetime
    level: Level
    message: str
    fields: Mapping[str, Any] = field(default_factory=dict)
    caller: Optional[Caller] = None

    def __post_init__(self) -> None:
        # Private read-only copy of the caller's mapping.
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @property
    def has_caller(self) -> bool:
        return self.caller is not None


__all__ = ["Caller", "LogRecord"]
