"""User configuration for Sound Tracker.

Settings live in ``config.json`` inside the Sound Tracker home directory,
which is ``$SOUND_TRACKER_HOME`` when set and ``~/.sound-tracker`` otherwise.
A missing file means defaults; a malformed one is reported and ignored.
"""

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .core.errors import ConfigError
from .storage import DEFAULT_KEY


logger = logging.getLogger(__name__)

HOME_ENV_VAR = "SOUND_TRACKER_HOME"
CONFIG_FILENAME = "config.json"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def config_home() -> Path:
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".sound-tracker"


def config_path() -> Path:
    return config_home() / CONFIG_FILENAME


class StorageConfig(BaseModel):
    data_dir: str = Field(default_factory=lambda: str(config_home()))
    key: str = DEFAULT_KEY


class ExportConfig(BaseModel):
    directory: str = "."
    indent: int = 2


class LoggingConfig(BaseModel):
    level: str = "WARNING"


class SoundTrackerConfig(BaseModel):
    """All user settings, grouped by section."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def data_dir(self) -> Path:
        return Path(self.storage.data_dir).expanduser()

    @property
    def export_dir(self) -> Path:
        return Path(self.export.directory).expanduser()


def get_config(path: Path | None = None) -> SoundTrackerConfig:
    path = path or config_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return SoundTrackerConfig()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"[Config] Could not read {path}: {e}")
        return SoundTrackerConfig()

    try:
        return SoundTrackerConfig.model_validate_json(raw)
    except ValidationError as e:
        logger.warning(f"[Config] Ignoring malformed config {path} ({e.error_count()} errors)")
        return SoundTrackerConfig()


def save_config(config: SoundTrackerConfig, path: Path | None = None) -> Path:
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(config.model_dump(mode="json"), f, indent=2)
    return path


def set_config_value(config: SoundTrackerConfig, dotted_key: str, raw: str) -> SoundTrackerConfig:
    """Return a copy of ``config`` with one ``section.field`` value replaced.

    Raises:
        ConfigError: If the key is unknown or the value has the wrong type.
    """
    section_name, _, field_name = dotted_key.partition(".")
    section = getattr(config, section_name, None)
    if not isinstance(section, BaseModel) or field_name not in type(section).model_fields:
        raise ConfigError(f"Unknown key: {dotted_key}", key=dotted_key)

    current = getattr(section, field_name)
    if isinstance(current, int):
        try:
            value = int(raw)
        except ValueError as e:
            raise ConfigError(f"Invalid integer for {dotted_key}: {raw}", key=dotted_key) from e
    elif dotted_key == "logging.level":
        value = raw.upper()
        if value not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log level: {raw} (expected one of {', '.join(LOG_LEVELS)})",
                key=dotted_key,
            )
    else:
        value = raw

    updated_section = section.model_copy(update={field_name: value})
    return config.model_copy(update={section_name: updated_section})
