"""Locate and load testnorm settings."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .errors import ConfigError
from .models import NormalizerConfig

CONFIG_FILENAME = ".testnorm.yaml"


def find_config(root: str | Path) -> Path | None:
    """Return the project config file at the top of root, if there is one."""
    candidate = Path(root) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def read_settings(path: str | Path) -> dict:
    """Read the settings mapping from a YAML config file.

    A missing or empty file has no settings and yields ``{}``.

    Raises:
        ConfigError: If the file is unreadable, is not valid YAML, or does
            not hold a mapping.
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", str(path)) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read {path}: {e}", str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"{path} must hold a mapping of settings, not a {type(data).__name__}",
            str(path),
        )
    return data


def load_config(
    path: str | Path | None = None, **overrides: str | None
) -> NormalizerConfig:
    """Build the settings from an optional config file plus overrides.

    Overrides that are not None (e.g. values from CLI flags) win over the
    file; anything left unset falls back to the model defaults.

    Raises:
        ConfigError: If the file cannot be read or a setting is invalid.
    """
    settings = read_settings(path) if path is not None else {}
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return NormalizerConfig.model_validate(settings)
    except ValidationError as e:
        source = f" in {path}" if path is not None else ""
        raise ConfigError(
            f"{e.error_count()} invalid setting(s){source}",
            str(path) if path is not None else None,
            [
                {
                    "loc": ".".join(str(x) for x in err["loc"]),
                    "msg": err["msg"],
                    "type": err["type"],
                }
                for err in e.errors()
            ],
        ) from e
