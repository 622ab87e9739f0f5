"""Per-cell styling directives."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

from .utils.colors import COLOR_DEFAULT, Color


@dataclass
class CellOptions:
    """Resolved styling attributes of a terminal cell."""

    fg_color: Color = COLOR_DEFAULT
    bg_color: Color = COLOR_DEFAULT
    bold: bool = False
    italic: bool = False
    underline: bool = False
    inverse: bool = False
    blink: bool = False
    strikethrough: bool = False


class CellOption(ABC):
    """A single styling directive applied to cells.

    Directives are applied in sequence, later ones win when they set the
    same attribute.
    """

    @abstractmethod
    def set(self, opts: CellOptions) -> None:
        """Apply this directive to the cell options."""
        pass


@dataclass(frozen=True)
class FgColor(CellOption):
    """Sets the foreground (text) color."""

    color: Color

    def set(self, opts: CellOptions) -> None:
        opts.fg_color = self.color


@dataclass(frozen=True)
class BgColor(CellOption):
    """Sets the background color."""

    color: Color

    def set(self, opts: CellOptions) -> None:
        opts.bg_color = self.color


@dataclass(frozen=True)
class Bold(CellOption):
    def set(self, opts: CellOptions) -> None:
        opts.bold = True


@dataclass(frozen=True)
class Italic(CellOption):
    def set(self, opts: CellOptions) -> None:
        opts.italic = True


@dataclass(frozen=True)
class Underline(CellOption):
    def set(self, opts: CellOptions) -> None:
        opts.underline = True


@dataclass(frozen=True)
class Inverse(CellOption):
    def set(self, opts: CellOptions) -> None:
        opts.inverse = True


@dataclass(frozen=True)
class Blink(CellOption):
    def set(self, opts: CellOptions) -> None:
        opts.blink = True


@dataclass(frozen=True)
class Strikethrough(CellOption):
    def set(self, opts: CellOptions) -> None:
        opts.strikethrough = True


def new_cell_options(*opts: CellOption) -> CellOptions:
    """Resolve a sequence of directives into cell options."""
    cell_opts = CellOptions()
    for opt in opts:
        opt.set(cell_opts)
    return cell_opts


def has_fg_color(opts: Iterable[CellOption]) -> bool:
    """Check whether any directive sets the foreground color."""
    return any(isinstance(opt, FgColor) for opt in opts)
