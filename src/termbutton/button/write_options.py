"""Options used when writing text content to Button."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..cell import CellOption, FgColor, has_fg_color
from ..utils.colors import Color


@dataclass
class WriteOptions:
    """Options of a single text chunk."""

    cell_opts: list[CellOption] = field(default_factory=list)

    def set_default_fg_color(self, color: Color) -> None:
        """Use color for the text unless the cell options already set one.

        The default is prepended so any foreground color set later in the
        cell options still takes precedence.
        """
        if has_fg_color(self.cell_opts):
            return
        self.cell_opts.insert(0, FgColor(color))


class WriteOption(ABC):
    """An option provided when writing text to Button."""

    @abstractmethod
    def set(self, opts: WriteOptions) -> None:
        """Apply this option to the write options."""
        pass


class WriteCellOpts(WriteOption):
    """Options on the cells that contain the text.

    Replaces any cell options set by an earlier WriteCellOpts.
    """

    def __init__(self, *cell_opts: CellOption):
        self.cell_opts = tuple(cell_opts)

    def set(self, opts: WriteOptions) -> None:
        opts.cell_opts = list(self.cell_opts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WriteCellOpts):
            return NotImplemented
        return self.cell_opts == other.cell_opts

    def __hash__(self) -> int:
        return hash(self.cell_opts)

    def __repr__(self) -> str:
        return f"WriteCellOpts{self.cell_opts!r}"


def new_write_options(*w_opts: WriteOption) -> WriteOptions:
    """Build write options from the provided options, applied in order."""
    write_opts = WriteOptions()
    for opt in w_opts:
        opt.set(write_opts)
    return write_opts
