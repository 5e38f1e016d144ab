"""
Data provider settings.

Settings are read from a YAML file. Lookup order:
1. Explicit path passed to load_settings()
2. $KV_DATA_SETTINGS
3. ~/.kv_data_provider.yaml

A missing file yields defaults. Example:

    log_level: DEBUG
    encoding: utf-8
"""

import codecs
import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

SETTINGS_ENV_VAR = 'KV_DATA_SETTINGS'
DEFAULT_SETTINGS_FILE = Path.home() / '.kv_data_provider.yaml'


class ConfigError(ValueError):
    """Raised when the settings file cannot be used."""
    pass


@dataclass
class Settings:
    """Runtime settings for data providers."""
    log_level: str = 'INFO'
    encoding: str = 'utf-8'

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"Unknown log level: {self.log_level}")
        self.encoding = str(self.encoding)
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigError(f"Unknown encoding: {self.encoding}") from e

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def get_settings_path(path: Optional[Path] = None) -> Path:
    """Resolve which settings file to read."""
    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_SETTINGS_FILE


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Load settings from YAML.

    Args:
        path: Settings file path (see module docstring for defaults)

    Returns:
        Settings instance; defaults if the file does not exist

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping
    """
    settings_path = get_settings_path(path)
    if not settings_path.exists():
        return Settings()

    try:
        with open(settings_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read settings file {settings_path}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {settings_path} must contain a mapping")

    known = {f.name for f in fields(Settings)}
    return Settings(**{key: value for key, value in data.items() if key in known})
