"""Configurable options for Button."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..errors import InvalidDimension
from ..keyboard import Key as KeyboardKey
from ..keyboard import KeyLike
from ..utils.colors import COLORS, Color
from ..utils.debug import debug_log

DEFAULT_FILL_COLOR = COLORS["cyan"]
DEFAULT_TEXT_COLOR = COLORS["black"]
DEFAULT_SHADOW_COLOR = Color(250)
DEFAULT_HEIGHT = 2
DEFAULT_KEY = KeyboardKey.ENTER

MIN_HEIGHT = 1
MIN_WIDTH = 1


@dataclass
class ButtonOptions:
    """Options of a single button."""

    fill_color: Color
    text_color: Color
    shadow_color: Color
    height: int
    width: int
    key: KeyLike

    def validate(self) -> None:
        """Check the dimensions of the button.

        Raises:
            InvalidDimension: If height or width is below 1
        """
        if self.height < MIN_HEIGHT:
            raise InvalidDimension("height", self.height, MIN_HEIGHT)
        if self.width < MIN_WIDTH:
            raise InvalidDimension("width", self.width, MIN_WIDTH)


def default_options(text_width: int) -> ButtonOptions:
    """Get options with the default values set.

    Args:
        text_width: Display width of the text label in cells

    Returns:
        Options sized to fit the label with one empty cell on each side
    """
    return ButtonOptions(
        fill_color=DEFAULT_FILL_COLOR,
        text_color=DEFAULT_TEXT_COLOR,
        shadow_color=DEFAULT_SHADOW_COLOR,
        height=DEFAULT_HEIGHT,
        width=text_width + 2,
        key=DEFAULT_KEY,
    )


class Option(ABC):
    """An option provided to Button."""

    @abstractmethod
    def set(self, opts: ButtonOptions) -> None:
        """Apply this option to the button options."""
        pass


@dataclass(frozen=True)
class FillColor(Option):
    """Fill color of the button. Defaults to DEFAULT_FILL_COLOR."""

    color: Color

    def set(self, opts: ButtonOptions) -> None:
        opts.fill_color = self.color


@dataclass(frozen=True)
class TextColor(Option):
    """Color of the text label. Defaults to DEFAULT_TEXT_COLOR."""

    color: Color

    def set(self, opts: ButtonOptions) -> None:
        opts.text_color = self.color


@dataclass(frozen=True)
class ShadowColor(Option):
    """Color of the shadow under the button. Defaults to DEFAULT_SHADOW_COLOR."""

    color: Color

    def set(self, opts: ButtonOptions) -> None:
        opts.shadow_color = self.color


@dataclass(frozen=True)
class Height(Option):
    """Height of the button in cells.

    Must be a positive non-zero integer. Defaults to DEFAULT_HEIGHT.
    """

    cells: int

    def set(self, opts: ButtonOptions) -> None:
        opts.height = self.cells


@dataclass(frozen=True)
class Width(Option):
    """Width of the button in cells.

    Must be a positive non-zero integer. Defaults to the width of the text
    label plus padding.
    """

    cells: int

    def set(self, opts: ButtonOptions) -> None:
        opts.width = self.cells


@dataclass(frozen=True)
class Key(Option):
    """Keyboard key that presses the button. Defaults to DEFAULT_KEY."""

    key: KeyLike

    def set(self, opts: ButtonOptions) -> None:
        opts.key = self.key


def new_options(text_width: int, *opts: Option) -> ButtonOptions:
    """Build validated button options.

    Options are applied in order on top of the defaults, so a later option
    overrides an earlier one setting the same field. Validation runs once,
    after all options were applied.

    Args:
        text_width: Display width of the text label in cells
        *opts: Options provided by the caller

    Returns:
        Validated button options

    Raises:
        InvalidDimension: If the resulting height or width is below 1
    """
    button_opts = default_options(text_width)
    for opt in opts:
        opt.set(button_opts)

    try:
        button_opts.validate()
    except InvalidDimension as e:
        debug_log(str(e), component="button")
        raise
    return button_opts
