from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# 24-hour, zero padded.
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"

CONFIG_SECTION_KEY = "line_formatter"


class FormatterConfigError(ValueError):
    """Raised when a formatter config file can't be read or validated."""


class FormatterConfig(BaseModel):
    """
    Immutable rendering options.

    - field_order: names rendered first, in this order; None sorts every field alphabetically
    - timestamp_format: strftime pattern; None/"" means DEFAULT_TIMESTAMP_FORMAT
    - hide_keys: render `[value]` instead of `[name:value]`
    - no_colors: suppress ANSI escapes
    - disable_trim_messages: keep leading/trailing whitespace of the message
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    field_order: Optional[Tuple[str, ...]] = Field(default=None, alias="fieldOrder")
    timestamp_format: Optional[str] = Field(default=None, alias="timestampFormat")
    hide_keys: bool = Field(default=False, alias="hideKeys")
    no_colors: bool = Field(default=False, alias="noColors")
    disable_trim_messages: bool = Field(default=False, alias="disableTrimMessages")

    @field_validator("field_order")
    @classmethod
    def _dedupe_field_order(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        if value is None:
            return None
        # Keep first occurrence so a repeated name can't render twice.
        return tuple(dict.fromkeys(value))

    def resolved_timestamp_format(self) -> str:
        return self.timestamp_format or DEFAULT_TIMESTAMP_FORMAT


def read_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return yaml.safe_load(handle)
    except OSError as exc:
        raise FormatterConfigError(f"cannot read formatter config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise FormatterConfigError(f"malformed YAML in formatter config {path}: {exc}") from exc


def config_from_mapping(data: Dict[str, Any]) -> FormatterConfig:
    """
    Validate a plain mapping (snake_case or camelCase keys) into a FormatterConfig.

    A mapping holding a single `line_formatter` section is unwrapped first.
    """
    if CONFIG_SECTION_KEY in data:
        data = data[CONFIG_SECTION_KEY] or {}
        if not isinstance(data, dict):
            raise FormatterConfigError(f"`{CONFIG_SECTION_KEY}` section must be a mapping")
    try:
        return FormatterConfig.model_validate(data)
    except ValidationError as exc:
        raise FormatterConfigError(f"invalid formatter config: {exc}") from exc


def load_config(path: Path | str) -> FormatterConfig:
    resolved = Path(path).expanduser()
    data = read_yaml(resolved)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FormatterConfigError(
            f"formatter config {resolved} must be a mapping, got {type(data).__name__}"
        )
    config = config_from_mapping(data)
    logger.debug("loaded formatter config from %s: %s", resolved, config)
    return config


__all__ = [
    "DEFAULT_TIMESTAMP_FORMAT",
    "CONFIG_SECTION_KEY",
    "FormatterConfigError",
    "FormatterConfig",
    "config_from_mapping",
    "load_config",
    "read_yaml",
]
