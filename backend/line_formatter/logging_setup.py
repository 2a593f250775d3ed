from __future__ import annotations

import logging
import logging.config
import sys
from pathlib import Path
from typing import IO, Any, Optional, Union

from line_formatter.config import FormatterConfig, FormatterConfigError, read_yaml
from line_formatter.formatter import LineFormatter
from line_formatter.levels import Level

logger = logging.getLogger(__name__)

# Marks handlers installed by configure_logging so a second call replaces them.
_OWNED_HANDLER_ATTR = "_line_formatter_owned"


def register_levels() -> None:
    """Give TRACE and PANIC names in stdlib logging. Safe to call repeatedly."""
    logging.addLevelName(int(Level.TRACE), "TRACE")
    logging.addLevelName(int(Level.PANIC), "PANIC")


def configure_logging(
    config: Optional[FormatterConfig] = None,
    *,
    level: Union[int, str] = "INFO",
    stream: Optional[IO[str]] = None,
    report_caller: bool = False,
    logger_name: Optional[str] = None,
) -> logging.Handler:
    register_levels()
    target = logging.getLogger(logger_name)

    for existing in list(target.handlers):
        if getattr(existing, _OWNED_HANDLER_ATTR, False):
            target.removeHandler(existing)
            existing.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(LineFormatter(config, report_caller=report_caller))
    setattr(handler, _OWNED_HANDLER_ATTR, True)
    target.addHandler(handler)
    target.setLevel(level.upper() if isinstance(level, str) else level)

    logger.debug(
        "line formatter installed on %s (level=%s, report_caller=%s)",
        logger_name or "root",
        level,
        report_caller,
    )
    return handler


def configure_from_yaml(path: Union[Path, str]) -> dict[str, Any]:
    """
    Apply a `logging.config.dictConfig` document stored as YAML.

    `version: 1` is assumed when the document omits it. Returns the applied dict.
    """
    resolved = Path(path).expanduser()
    data = read_yaml(resolved)
    if not isinstance(data, dict):
        raise FormatterConfigError(f"logging config {resolved} must be a mapping")
    data.setdefault("version", 1)

    register_levels()
    try:
        logging.config.dictConfig(data)
    except (ValueError, TypeError, AttributeError, ImportError) as exc:
        raise FormatterConfigError(f"cannot apply logging config {resolved}: {exc}") from exc

    logger.debug("logging configured from %s", resolved)
    return data


__all__ = ["register_levels", "configure_logging", "configure_from_yaml"]
