"""Application settings for setrepo, stored as JSON."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

from constants import APP_NAME, DEFAULT_BRANCH, DEFAULT_LOG_LEVEL, DEFAULT_REMOTE_NAME

log = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SettingsValidationError(Exception):
    """Raised when the settings file cannot be used."""


def _xdg_dir(env_var: str, fallback: Path) -> Path:
    return Path(os.environ.get(env_var, str(fallback)))


def get_config_path() -> Path:
    """Default settings file location (XDG_CONFIG_HOME)."""
    return _xdg_dir("XDG_CONFIG_HOME", Path.home() / ".config") / APP_NAME / "settings.json"


def get_default_repository_dir() -> Path:
    """Default location of the local settings repository (XDG_DATA_HOME)."""
    return _xdg_dir("XDG_DATA_HOME", Path.home() / ".local" / "share") / APP_NAME / "repository"


@dataclass
class AppSettings:
    """User-editable configuration."""

    repository_dir: Path = field(default_factory=get_default_repository_dir)
    remote_name: str = DEFAULT_REMOTE_NAME
    branch: str = DEFAULT_BRANCH
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> dict:
        data = asdict(self)
        data["repository_dir"] = str(self.repository_dir)
        return data


def _from_dict(data: dict) -> tuple[AppSettings, list[str]]:
    known = {f.name for f in fields(AppSettings)}
    warnings = [f"Unknown setting '{key}' ignored" for key in sorted(data) if key not in known]

    values = {}
    for name in known & data.keys():
        value = data[name]
        if not isinstance(value, str) or not value.strip():
            raise SettingsValidationError(f"Setting '{name}' must be a non-empty string")
        values[name] = value

    if "repository_dir" in values:
        values["repository_dir"] = Path(values["repository_dir"]).expanduser()
    if "log_level" in values:
        level = values["log_level"].upper()
        if level not in VALID_LOG_LEVELS:
            raise SettingsValidationError(
                f"Invalid log_level '{values['log_level']}' "
                f"(must be one of {', '.join(sorted(VALID_LOG_LEVELS))})"
            )
        values["log_level"] = level

    return AppSettings(**values), warnings


def load_settings(path: Path | None = None) -> tuple[AppSettings, list[str]]:
    """Load settings from disk.

    A missing file yields the defaults.

    Returns:
        Tuple of (settings, warnings) where warnings lists non-critical issues.

    Raises:
        SettingsValidationError: The file is not valid JSON or has bad values
    """
    path = path or get_config_path()
    if not path.exists():
        log.debug(f"No settings file at {path}, using defaults")
        return AppSettings(), []

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise SettingsValidationError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(data, dict):
        raise SettingsValidationError(f"{path}: expected a JSON object")

    settings, warnings = _from_dict(data)
    log.info(f"Loaded settings from {path}")
    return settings, warnings


def save_settings(settings: AppSettings, path: Path | None = None) -> None:
    """Write settings to disk, creating parent directories."""
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(settings.to_dict(), indent=2))
    log.info(f"Saved settings to {path}")
