"""Style profile schema using Pydantic for validation."""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from ..button.options import (
    FillColor,
    Height,
    Key,
    Option,
    ShadowColor,
    TextColor,
    Width,
)
from ..keyboard import parse_key
from ..utils.colors import parse_color


class ButtonStyleModel(BaseModel):
    """Button options stored under a style name.

    Colors are names (e.g., "cyan") or numbers, keys are names (e.g.,
    "enter"), single characters or code points; the digits 0-9 mean the
    digit keys, not code points. Dimensions are checked when the button is
    built, not here.
    """

    fill_color: Optional[Union[int, str]] = None
    text_color: Optional[Union[int, str]] = None
    shadow_color: Optional[Union[int, str]] = None
    height: Optional[int] = None
    width: Optional[int] = None
    key: Optional[Union[int, str]] = None

    model_config = {"extra": "forbid"}

    @field_validator("fill_color", "text_color", "shadow_color")
    @classmethod
    def _check_color(cls, v: Optional[Union[int, str]]) -> Optional[Union[int, str]]:
        if v is not None:
            parse_color(v)
        return v

    @field_validator("key", mode="before")
    @classmethod
    def _digit_key(cls, v: object) -> object:
        # YAML reads an unquoted digit key (key: 5) as an int.
        if isinstance(v, int) and not isinstance(v, bool) and 0 <= v <= 9:
            return str(v)
        return v

    @field_validator("key")
    @classmethod
    def _check_key(cls, v: Optional[Union[int, str]]) -> Optional[Union[int, str]]:
        if v is not None:
            parse_key(v)
        return v

    def to_options(self) -> list[Option]:
        """Convert the set fields into button options."""
        opts: list[Option] = []
        if self.fill_color is not None:
            opts.append(FillColor(parse_color(self.fill_color)))
        if self.text_color is not None:
            opts.append(TextColor(parse_color(self.text_color)))
        if self.shadow_color is not None:
            opts.append(ShadowColor(parse_color(self.shadow_color)))
        if self.height is not None:
            opts.append(Height(self.height))
        if self.width is not None:
            opts.append(Width(self.width))
        if self.key is not None:
            opts.append(Key(parse_key(self.key)))
        return opts


class StylesConfig(BaseModel):
    """Complete style profile configuration."""

    version: int = 1
    styles: dict[str, ButtonStyleModel] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}
