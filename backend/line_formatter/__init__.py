"""
line_formatter - bracketed single-line rendering of structured log records.

    [10:30:00] [INFO] [id:42] [user:alice] starting up

The pure renderer lives in `line_formatter.renderer`; `LineFormatter` plugs it
into stdlib `logging`.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Tuple

__version__ = "0.1.0"

_LAZY_IMPORTS: Dict[str, Tuple[str, str]] = {
    # ============ core ============
    "Level": ("line_formatter.levels", "Level"),
    "Color": ("line_formatter.levels", "Color"),
    "Caller": ("line_formatter.record", "Caller"),
    "LogRecord": ("line_formatter.record", "LogRecord"),
    "FormatterConfig": ("line_formatter.config", "FormatterConfig"),
    "FormatterConfigError": ("line_formatter.config", "FormatterConfigError"),
    "DEFAULT_TIMESTAMP_FORMAT": ("line_formatter.config", "DEFAULT_TIMESTAMP_FORMAT"),
    "load_config": ("line_formatter.config", "load_config"),
    "LineRenderer": ("line_formatter.renderer", "LineRenderer"),
    "render": ("line_formatter.renderer", "render"),
    # ============ stdlib logging bridge ============
    "LineFormatter": ("line_formatter.formatter", "LineFormatter"),
    "EventLogger": ("line_formatter.event_logger", "EventLogger"),
    "configure_logging": ("line_formatter.logging_setup", "configure_logging"),
    "configure_from_yaml": ("line_formatter.logging_setup", "configure_from_yaml"),
    "register_levels": ("line_formatter.logging_setup", "register_levels"),
}


def __getattr__(name: str) -> Any:
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    module_path, attr_name = _LAZY_IMPORTS[name]
    module = import_module(module_path)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


def __dir__() -> Any:
    return sorted(set(list(globals().keys()) + list(_LAZY_IMPORTS.keys())))


__all__ = ["__version__", *_LAZY_IMPORTS.keys()]
