"""Encoder settings and their JSON persistence."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from sound_index.errors import ConfigurationError, ErrorContext, ResourceError
from sound_index.logging import get_logger

logger = get_logger(__name__)


class EncoderType(str, Enum):
    """Supported phonetic algorithms."""

    SOUNDEX = "soundex"


class EncoderSettings(BaseModel):
    """Settings for a phonetic encoder.

    ``length`` counts the leading letter, so the default 4 yields one
    letter plus three digits. It is ignored when ``full`` is set.
    """

    model_config = ConfigDict(extra="forbid")

    algorithm: EncoderType = EncoderType.SOUNDEX
    length: int = Field(default=4, ge=2)
    full: bool = False


def load_settings(path: Path | str) -> EncoderSettings:
    """Load encoder settings from a JSON file.

    Args:
        path: Path to the settings file

    Returns:
        EncoderSettings parsed from the file

    Raises:
        ResourceError: If the file doesn't exist
        ConfigurationError: If the file is not valid JSON or holds invalid values
    """
    path = Path(path)
    if not path.exists():
        raise ResourceError(f"Settings file not found: {path}", context={"path": str(path)})

    with ErrorContext("load_settings", context={"path": str(path)}):
        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(
                    f"Settings file is not valid JSON: {e.msg}",
                    context={"path": str(path), "line": e.lineno},
                ) from e

        try:
            settings = EncoderSettings(**data)
        except (pydantic.ValidationError, TypeError) as e:
            raise ConfigurationError(
                f"Invalid encoder settings: {e}",
                context={"path": str(path)},
            ) from e

    logger.info(
        "Loaded encoder settings",
        extra={"path": str(path), "algorithm": settings.algorithm.value},
    )
    return settings


def save_settings(path: Path | str, settings: EncoderSettings) -> Path:
    """Save encoder settings to a JSON file with atomic write.

    Args:
        path: Destination path
        settings: Settings to save

    Returns:
        Path to the saved settings file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")

    # Atomic write: write to temp file, then rename
    with open(temp_path, "w", encoding="utf-8") as f:
        json.dump(settings.model_dump(mode="json"), f, indent=2)

    temp_path.replace(path)
    logger.debug("Saved encoder settings", extra={"path": str(path)})
    return path
