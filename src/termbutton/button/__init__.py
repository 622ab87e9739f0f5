"""Button widget and its options."""

from .button import Button, TextChunk
from .options import (
    DEFAULT_FILL_COLOR,
    DEFAULT_HEIGHT,
    DEFAULT_KEY,
    DEFAULT_SHADOW_COLOR,
    DEFAULT_TEXT_COLOR,
    ButtonOptions,
    FillColor,
    Height,
    Key,
    Option,
    ShadowColor,
    TextColor,
    Width,
    default_options,
    new_options,
)
from .write_options import WriteCellOpts, WriteOption, WriteOptions, new_write_options

__all__ = [
    "Button",
    "TextChunk",
    "ButtonOptions",
    "Option",
    "FillColor",
    "TextColor",
    "ShadowColor",
    "Height",
    "Width",
    "Key",
    "DEFAULT_FILL_COLOR",
    "DEFAULT_TEXT_COLOR",
    "DEFAULT_SHADOW_COLOR",
    "DEFAULT_HEIGHT",
    "DEFAULT_KEY",
    "default_options",
    "new_options",
    "WriteOption",
    "WriteOptions",
    "WriteCellOpts",
    "new_write_options",
]
