"""Runtime settings for the ``string-scans`` command line tool."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STRING_SCANS_CONFIG"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
OutputFormat = Literal["table", "json"]


class ConfigError(ValueError):
    """Raised when a settings payload cannot be loaded or validated."""


class ScanSettings(BaseModel):
    """Validated settings controlling input limits and report output."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_length: Optional[int] = Field(default=None, ge=0)
    log_level: LogLevel = "WARNING"
    output_format: OutputFormat = "table"


def resolve_config_path(path: str | Path | None) -> Optional[Path]:
    """Return *path*, falling back to ``$STRING_SCANS_CONFIG`` when unset."""

    if path is not None:
        return Path(path)
    env_value = os.environ.get(CONFIG_ENV_VAR, "").strip()
    return Path(env_value) if env_value else None


def load_settings(path: str | Path | None = None, **overrides: Any) -> ScanSettings:
    """Load settings from a JSON file and apply explicit *overrides*.

    Overrides whose value is ``None`` are ignored so unset CLI flags do not
    mask values from the file.

    Raises
    ------
    FileNotFoundError
        If *path* (or the environment fallback) does not exist.
    ConfigError
        If the file cannot be read or decoded, is not a JSON object, or a
        value fails validation.
    """

    payload: dict[str, Any] = {}
    config_path = resolve_config_path(path)
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")
        try:
            raw = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Unable to read settings file {config_path}: {exc}") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in settings file {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError("Settings file must contain a JSON object")
        payload.update(data)
        logger.debug("Loaded settings from %s", config_path)

    payload.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return ScanSettings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "ScanSettings",
    "load_settings",
    "resolve_config_path",
]
