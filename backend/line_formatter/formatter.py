from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from line_formatter.config import FormatterConfig, config_from_mapping
from line_formatter.levels import Level
from line_formatter.record import Caller, LogRecord
from line_formatter.renderer import LineRenderer

# Attribute names every stdlib LogRecord carries; anything else came in through `extra=`.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

FIELDS_ATTR = "fields"


class LineFormatter(logging.Formatter):
    """
    `logging.Formatter` that renders records as one bracketed line.

    Usable directly or from `logging.config.dictConfig`:

        formatters:
          line:
            '()': line_formatter.LineFormatter
            fieldOrder: [request_id, user]
            report_caller: true

    Context fields come from `extra=` attributes and from an optional
    `fields` mapping attribute (see EventLogger).
    """

    def __init__(
        self,
        config: Optional[FormatterConfig] = None,
        *,
        report_caller: bool = False,
        **options: Any,
    ) -> None:
        super().__init__()
        if config is not None and options:
            raise TypeError("pass either a FormatterConfig or keyword options, not both")
        if config is None:
            config = config_from_mapping(options) if options else FormatterConfig()
        self.config = config
        self.report_caller = report_caller
        self._renderer = LineRenderer(config)

    def to_log_record(self, record: logging.LogRecord) -> LogRecord:
        caller = None
        if self.report_caller:
            caller = Caller(file=record.pathname, line=record.lineno, function=record.funcName)
        return LogRecord(
            timestamp=datetime.fromtimestamp(record.created),
            level=Level.from_logging(record.levelno),
            message=record.getMessage(),
            fields=extract_fields(record),
            caller=caller,
        )

    def format(self, record: logging.LogRecord) -> str:
        # Handlers add their own terminator.
        text = self._renderer.render_text(self.to_log_record(record))[:-1]

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            text = f"{text}\n{record.exc_text}"
        if record.stack_info:
            text = f"{text}\n{self.formatStack(record.stack_info)}"
        return text


def extract_fields(record: logging.LogRecord) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_RECORD_ATTRS and key != FIELDS_ATTR and not key.startswith("_")
    }
    bound = record.__dict__.get(FIELDS_ATTR)
    if isinstance(bound, dict):
        fields.update(bound)
    return fields


__all__ = ["LineFormatter", "extract_fields", "FIELDS_ATTR"]
