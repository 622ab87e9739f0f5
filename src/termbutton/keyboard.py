"""Keyboard key identifiers."""

from enum import IntEnum
from typing import Union


class Key(IntEnum):
    """Special (non printable) keys.

    Negative values keep these apart from printable characters, which are
    identified by their code point.
    """

    ENTER = -1
    SPACE = -2
    TAB = -3
    ESC = -4
    BACKSPACE = -5
    ARROW_UP = -6
    ARROW_DOWN = -7
    ARROW_LEFT = -8
    ARROW_RIGHT = -9
    HOME = -10
    END = -11
    PAGE_UP = -12
    PAGE_DOWN = -13
    INSERT = -14
    DELETE = -15
    F1 = -16
    F2 = -17
    F3 = -18
    F4 = -19
    F5 = -20
    F6 = -21
    F7 = -22
    F8 = -23
    F9 = -24
    F10 = -25
    F11 = -26
    F12 = -27


KeyLike = Union[Key, int]


def key_from_char(ch: str) -> int:
    """Get the key identifier for a single printable character."""
    if len(ch) != 1 or not ch.isprintable():
        raise ValueError(f"invalid key character {ch!r}")
    return ord(ch)


def parse_key(value: Union[Key, int, str]) -> KeyLike:
    """Resolve a key from a Key, an int, a key name or a single character.

    Args:
        value: Key value (e.g., Key.ENTER, "enter", "page-down", "q")

    Returns:
        Key for special keys, code point for printable characters

    Raises:
        ValueError: If the value doesn't identify a key
    """
    if isinstance(value, Key):
        return value

    if isinstance(value, str):
        stripped = value.strip() or value
        if len(stripped) == 1:
            return key_from_char(stripped)
        name = stripped.upper().replace("-", "_")
        try:
            return Key[name]
        except KeyError:
            raise ValueError(f"unknown key name {value!r}") from None

    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid key {value!r}")
    if value < 0:
        try:
            return Key(value)
        except ValueError:
            raise ValueError(f"unknown special key {value}") from None
    try:
        return key_from_char(chr(value))
    except (ValueError, OverflowError):
        raise ValueError(f"invalid key code point {value}") from None
