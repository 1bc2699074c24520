"""Configuration layer: YAML settings validated with pydantic."""

from .errors import ConfigError
from .loader import CONFIG_FILENAME, find_config, load_config, read_settings
from .models import (
    DEFAULT_EXCLUDE,
    DEFAULT_FILE_PATTERN,
    DEFAULT_KEYWORD,
    NormalizerConfig,
)

__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_EXCLUDE",
    "DEFAULT_FILE_PATTERN",
    "DEFAULT_KEYWORD",
    "NormalizerConfig",
    "find_config",
    "load_config",
    "read_settings",
]
