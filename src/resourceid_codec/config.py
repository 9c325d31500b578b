"""Configuration models for the resource identifier codec."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class CodecSettings(BaseModel):
    """Top-level configuration container for the codec."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    strict_storage_id: bool = Field(
        default=False,
        description="If true, wrapping rejects storage ids that contain the reserved delimiter.",
    )

    config_path: Path | None = Field(
        default=None,
        description="Resolved path used to load configuration (for diagnostics).",
        exclude=True,
    )


def load_settings(config_path: Path | None = None, overrides: dict[str, Any] | None = None) -> CodecSettings:
    """Load configuration from YAML/JSON on disk combined with explicit overrides."""

    base_data: dict[str, Any] = {}
    resolved_path: Path | None = None
    if config_path:
        resolved_path = Path(config_path).expanduser().resolve()
        if not resolved_path.exists():
            raise ConfigurationError(f"Configuration file not found: {resolved_path}")
        try:
            with resolved_path.open("r", encoding="utf-8") as handle:
                base_data = yaml.safe_load(handle.read()) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Unable to parse configuration file {resolved_path}: {exc}") from exc
        if not isinstance(base_data, dict):
            raise ConfigurationError(f"Configuration file {resolved_path} must contain a mapping")
        logger.debug("Loaded codec configuration from %s", resolved_path)

    # Accept a nested ``codec:`` section so the codec can share a file with its host.
    nested = base_data.pop("codec", None)
    if nested is not None:
        if not isinstance(nested, dict):
            raise ConfigurationError(f"'codec' section in {resolved_path} must contain a mapping")
        base_data.update(nested)
    if overrides:
        base_data.update(overrides)
    base_data["config_path"] = resolved_path

    try:
        return CodecSettings.model_validate(base_data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid codec configuration: {exc}") from exc
