"""Text measuring utilities."""

import unicodedata


def char_width(ch: str) -> int:
    """Get the number of terminal cells a character occupies.

    Args:
        ch: Single character

    Returns:
        0 for combining and zero width characters, 2 for East Asian wide
        and full-width characters, 1 otherwise
    """
    if unicodedata.combining(ch) or unicodedata.category(ch) in ("Mn", "Me", "Cf"):
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def text_width(text: str) -> int:
    """Get the number of terminal cells a string occupies.

    Returns:
        Display width (e.g., 4 for "test", 4 for "你好")
    """
    return sum(char_width(ch) for ch in text)
