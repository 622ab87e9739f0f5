"""Style configuration file loading and saving."""

import os
import sys

from pathlib import Path
from typing import Optional

import yaml

from pydantic import ValidationError

from ..button.options import Option
from ..utils.debug import debug_log
from .defaults import get_default_config
from .schema import StylesConfig

CONFIG_ENV_VAR = "TERMBUTTON_CONFIG"

# Module-level cache for config
_cached_config: Optional[StylesConfig] = None
_cached_path: Optional[Path] = None
_cached_mtime: float = 0.0


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.getenv("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "termbutton"


def get_config_path() -> Path:
    """Get the full configuration file path.

    TERMBUTTON_CONFIG overrides the default location.
    """
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_config_dir() / "styles.yaml"


def clear_cache() -> None:
    """Forget the cached configuration."""
    global _cached_config, _cached_path, _cached_mtime
    _cached_config = None
    _cached_path = None
    _cached_mtime = 0.0


def load_config() -> StylesConfig:
    """
    Load style configuration from YAML file with mtime-based caching.

    If config file doesn't exist, the defaults are used.
    If config is invalid, falls back to defaults and logs error.
    """
    global _cached_config, _cached_path, _cached_mtime

    config_path = get_config_path()

    if _cached_config is not None and _cached_path == config_path:
        try:
            if config_path.stat().st_mtime == _cached_mtime:
                return _cached_config
        except OSError:
            pass

    if not config_path.exists():
        return get_default_config()

    try:
        with open(config_path, encoding="utf-8") as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            raise ValueError("top level of the style file must be a mapping")

        config = StylesConfig.model_validate(config_data)

        _cached_config = config
        _cached_path = config_path
        try:
            _cached_mtime = config_path.stat().st_mtime
        except OSError:
            _cached_mtime = 0.0

        return config

    except (yaml.YAMLError, ValidationError, ValueError, OSError) as e:
        print(
            f"Warning: Failed to load styles from {config_path}: {e}",
            file=sys.stderr,
        )
        print("Using default styles.", file=sys.stderr)
        debug_log(f"failed to load {config_path}: {e}", component="config")
        return get_default_config()


def save_config(config: StylesConfig) -> None:
    """Save style configuration to YAML file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    config_dict = config.model_dump(mode="python", exclude_none=True)

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)


def style_options(name: str) -> list[Option]:
    """Get the button options of a named style.

    Raises:
        KeyError: If no style with that name is configured
    """
    config = load_config()
    if name not in config.styles:
        raise KeyError(f"unknown button style {name!r}")
    return config.styles[name].to_options()
