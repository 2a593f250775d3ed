import logging
import time
from typing import Any, Dict, Optional

from line_formatter.formatter import FIELDS_ATTR
from line_formatter.levels import Level


class EventLogger:
    """
    Small helper to emit events with shared context fields.

    Fields travel on the stdlib record as `extra={"fields": {...}}`, so a
    LineFormatter renders them as `[name:value]` brackets. It keeps a sequence
    counter and elapsed time to make flow logs easy to follow.
    """

    def __init__(
        self,
        logger: logging.Logger,
        *,
        base_fields: Optional[Dict[str, Any]] = None,
        include_seq: bool = False,
        include_elapsed: bool = False,
        started_at: Optional[float] = None,
        stacklevel: int = 3,
    ) -> None:
        self._logger = logger
        self._base_fields: Dict[str, Any] = {
            k: v for k, v in (base_fields or {}).items() if v is not None
        }
        self._include_seq = include_seq
        self._include_elapsed = include_elapsed
        self._started_at = started_at if started_at is not None else time.time()
        self._seq = 0
        self._stacklevel = stacklevel

    @property
    def base_fields(self) -> Dict[str, Any]:
        return dict(self._base_fields)

    def set(self, **fields: Any) -> None:
        self._base_fields.update({k: v for k, v in fields.items() if v is not None})

    def bind(self, **fields: Any) -> "EventLogger":
        """Child logger sharing the start time, with extra base fields."""
        merged = dict(self._base_fields)
        merged.update({k: v for k, v in fields.items() if v is not None})
        return EventLogger(
            self._logger,
            base_fields=merged,
            include_seq=self._include_seq,
            include_elapsed=self._include_elapsed,
            started_at=self._started_at,
            stacklevel=self._stacklevel,
        )

    def trace(self, event: str, **fields: Any) -> None:
        self._log(int(Level.TRACE), event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        self._log(logging.DEBUG, event, **fields)

    def info(self, event: str, **fields: Any) -> None:
        self._log(logging.INFO, event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        self._log(logging.WARNING, event, **fields)

    def error(self, event: str, **fields: Any) -> None:
        self._log(logging.ERROR, event, **fields)

    def exception(self, event: str, **fields: Any) -> None:
        """
        Log an ERROR level message and include the current exception traceback.
        """
        self._log(logging.ERROR, event, exc_info=True, **fields)

    def _log(self, level: int, event: str, exc_info: bool = False, **fields: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        self._seq += 1
        payload: Dict[str, Any] = {}
        if self._include_seq:
            payload["seq"] = self._seq
        if self._include_elapsed:
            payload["total_elapsed_seconds"] = round(time.time() - self._started_at, 4)
        payload.update(self._base_fields)
        payload.update({k: v for k, v in fields.items() if v is not None})

        self._logger.log(
            level,
            event,
            exc_info=exc_info,
            extra={FIELDS_ATTR: payload},
            stacklevel=self._stacklevel,
        )


__all__ = ["EventLogger"]
