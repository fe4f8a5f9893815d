"""Typed settings for the extractor.

Settings only provide defaults for the command line and
:meth:`DateExtractor.from_settings`; :func:`date_extractor.extract` never
reads them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from date_extractor.errors import ConfigurationError, InvalidFallbackError


DEFAULT_CONFIG_PATH = Path.home() / ".date_extractor" / "config.json"


class ExtractionSettings(BaseModel):
    """Defaults applied to every extraction."""

    fallback_month: Optional[int] = Field(
        default=None, description="Month for anchors without one; None means current month"
    )
    fallback_year: Optional[int] = Field(
        default=None, description="Year for anchors without one; None means current year"
    )
    keep_invalid: bool = Field(False, description="Keep matches that are not valid dates")

    @field_validator("fallback_month")
    def _validate_month(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 1 <= value <= 12:
            raise InvalidFallbackError(f"fallback_month must be between 1 and 12, got {value}")
        return value

    @field_validator("fallback_year")
    def _validate_year(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not 1 <= value <= 9999:
            raise InvalidFallbackError(f"fallback_year must be between 1 and 9999, got {value}")
        return value


class Settings(BaseModel):
    """Root configuration state."""

    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)


def load_settings(path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from disk or raise if missing or invalid."""

    if not path.exists():
        raise ConfigurationError(f"Settings file not found at {path}", details={"path": str(path)})
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Settings file {path} is not valid JSON: {exc}") from exc
    try:
        return Settings.model_validate(payload)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}", details={"path": str(path)}) from exc


def save_settings(settings: Settings, path: Path = DEFAULT_CONFIG_PATH) -> None:
    payload = settings.model_dump(mode="json")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def bootstrap_settings(
    *,
    path: Path = DEFAULT_CONFIG_PATH,
    overrides: Optional[Dict[str, Any]] = None,
) -> Settings:
    """Load settings if present, else use defaults, then apply overrides.

    Overrides with a None value are ignored. Nothing is written to disk.
    """

    settings = load_settings(path) if path.exists() else Settings()
    merged = settings.model_dump(mode="python")
    extraction = merged.setdefault("extraction", {})
    for key, value in (overrides or {}).items():
        if value is not None:
            extraction[key] = value
    try:
        return Settings.model_validate(merged)
    except ValidationError as exc:
        raise InvalidFallbackError(str(exc), details={"overrides": overrides or {}}) from exc
