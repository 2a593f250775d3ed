from __future__ import annotations

from enum import IntEnum
from typing import Dict

LEVEL_LABEL_WIDTH = 4


class Level(IntEnum):
    """
    Severity levels, least to most severe.

    Numbers line up with stdlib `logging` (CRITICAL == FATAL) so records coming
    from a `logging.Logger` map onto them without a lookup table.
    """

    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    PANIC = 60

    @property
    def level_name(self) -> str:
        return _LEVEL_NAMES[self]

    @classmethod
    def from_logging(cls, levelno: int) -> "Level":
        """Highest level not above `levelno`; anything below TRACE is TRACE."""
        for level in sorted(cls, reverse=True):
            if levelno >= level:
                return level
        return cls.TRACE


_LEVEL_NAMES: Dict[Level, str] = {
    Level.TRACE: "trace",
    Level.DEBUG: "debug",
    Level.INFO: "info",
    Level.WARN: "warning",
    Level.ERROR: "error",
    Level.FATAL: "fatal",
    Level.PANIC: "panic",
}


class Color(IntEnum):
    """ANSI SGR foreground codes."""

    NONE = 0
    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    GRAY = 37


_LEVEL_COLORS: Dict[Level, Color] = {
    Level.TRACE: Color.GRAY,
    Level.DEBUG: Color.GRAY,
    Level.WARN: Color.YELLOW,
    Level.ERROR: Color.RED,
    Level.FATAL: Color.RED,
    Level.PANIC: Color.RED,
}


def color_for_level(level: object) -> Color:
    # INFO and unknown levels fall through to cyan.
    return _LEVEL_COLORS.get(level, Color.CYAN)  # type: ignore[call-overload]


def sgr(color: int) -> str:
    return f"\x1b[{int(color)}m"


def level_label(name: str) -> str:
    """
    Uppercase `name` cut to exactly 4 characters.

    - "warning" -> "WARN", "error" -> "ERRO"
    - names shorter than 4 are right-padded with spaces ("ok" -> "OK  ")
    """
    return name.upper()[:LEVEL_LABEL_WIDTH].ljust(LEVEL_LABEL_WIDTH)


__all__ = [
    "LEVEL_LABEL_WIDTH",
    "Level",
    "Color",
    "color_for_level",
    "sgr",
    "level_label",
]
