"""Style profiles for buttons."""

from .defaults import get_default_config
from .loader import load_config, save_config, style_options
from .schema import ButtonStyleModel, StylesConfig

__all__ = [
    "ButtonStyleModel",
    "StylesConfig",
    "get_default_config",
    "load_config",
    "save_config",
    "style_options",
]
