"""Terminal color values and lookup utilities."""

from typing import Union


class Color(int):
    """A terminal color.

    0 is the terminal's default color, 1-16 are the ANSI system colors and
    values above that address the xterm 256 color palette (see color_number).
    """

    def __repr__(self) -> str:
        return f"Color({int(self)})"


COLOR_DEFAULT = Color(0)

# Basic ANSI 16 colors
COLORS: dict[str, Color] = {
    "default": COLOR_DEFAULT,
    "black": Color(1),
    "red": Color(2),
    "green": Color(3),
    "yellow": Color(4),
    "blue": Color(5),
    "magenta": Color(6),
    "cyan": Color(7),
    "white": Color(8),
    "bright_black": Color(9),
    "bright_red": Color(10),
    "bright_green": Color(11),
    "bright_yellow": Color(12),
    "bright_blue": Color(13),
    "bright_magenta": Color(14),
    "bright_cyan": Color(15),
    "bright_white": Color(16),
}

# Color aliases
COLORS["gray"] = COLORS["bright_black"]
COLORS["grey"] = COLORS["bright_black"]

MAX_COLOR = 256


def color_number(n: int) -> Color:
    """Get the color for an xterm 256 palette index.

    Args:
        n: Palette index (0-255)

    Returns:
        Color addressing that palette entry

    Raises:
        ValueError: If n is outside the palette
    """
    if not 0 <= n < MAX_COLOR:
        raise ValueError(f"invalid palette index {n}, must be 0 <= n < {MAX_COLOR}")
    return Color(n + 1)


def parse_color(value: Union[Color, int, str]) -> Color:
    """Resolve a color from a Color, an int or a color name.

    Args:
        value: Color value, raw int (0-256) or name (e.g., "cyan", "Grey")

    Returns:
        Resolved Color

    Raises:
        ValueError: If the name is unknown or the int is out of range
    """
    if isinstance(value, str):
        key = value.strip().lower().replace("-", "_")
        if key not in COLORS:
            raise ValueError(f"unknown color name {value!r}")
        return COLORS[key]

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid color {value!r}")
    if not 0 <= value <= MAX_COLOR:
        raise ValueError(f"invalid color {value}, must be 0 <= color <= {MAX_COLOR}")
    return Color(value)


def color_name(color: Color) -> Union[str, int]:
    """Get the canonical name of a color.

    Returns:
        Color name, or the numeric value for palette colors without one
    """
    for name, value in COLORS.items():
        if value == color:
            return name
    return int(color)
