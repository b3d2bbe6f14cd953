"""Preference file management."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pomoterm.models import AppConfig

log = logging.getLogger(__name__)


def _config_home() -> Path:
    """Return the XDG config directory, defaulting to ~/.config."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


_CONFIG_DIR = _config_home() / "pomoterm"
_CONFIG_FILE = _CONFIG_DIR / "config.json"


def get_config_path(path: Optional[Path] = None) -> Path:
    """Resolve the config file location (explicit path wins)."""
    return Path(path).expanduser() if path is not None else _CONFIG_FILE


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load config from disk, returning defaults if missing or unreadable."""
    config_file = get_config_path(path)
    if not config_file.exists():
        return AppConfig()
    try:
        text = config_file.read_text(encoding="utf-8")
        data = json.loads(text)
        # A partial record is as bad as a corrupt one: no per-field defaults.
        if not isinstance(data, dict) or not set(AppConfig.model_fields) <= data.keys():
            log.warning("Ignoring incomplete config file %s", config_file)
            return AppConfig()
        return AppConfig.model_validate_json(text, strict=True)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
        log.warning("Ignoring invalid config file %s: %s", config_file, exc)
        return AppConfig()


def save_config(config: AppConfig, path: Optional[Path] = None) -> Path:
    """Write config to disk. Returns the config file path."""
    config_file = get_config_path(path)
    config_file.parent.mkdir(parents=True, exist_ok=True)
    config_file.write_text(config.model_dump_json(indent=2), encoding="utf-8")
    log.info("Saved config to %s", config_file)
    return config_file


def ensure_config(path: Optional[Path] = None) -> AppConfig:
    """Load the config, writing a default file first if none exists."""
    config_file = get_config_path(path)
    if not config_file.exists():
        config = AppConfig()
        save_config(config, config_file)
        return config
    return load_config(config_file)


def reset_config(path: Optional[Path] = None) -> AppConfig:
    """Overwrite the config file with defaults."""
    config = AppConfig()
    save_config(config, path)
    return config
