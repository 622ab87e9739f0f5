"""Button widget construction.

Drawing and keyboard dispatch happen in the hosting terminal framework; this
module builds and holds the configuration they consume.
"""

import dataclasses

from typing import Callable, Iterable

from ..keyboard import KeyLike
from ..utils.debug import debug_log
from ..utils.formatting import text_width
from .options import ButtonOptions, Option, new_options
from .write_options import WriteOption, WriteOptions, new_write_options

CallbackFn = Callable[[], None]


class TextChunk:
    """A part of the button label with its own write options."""

    def __init__(self, text: str, *w_opts: WriteOption):
        self.text = text
        self.w_opts = w_opts

    def write_options(self) -> WriteOptions:
        """Resolve a fresh set of write options for this chunk."""
        return new_write_options(*self.w_opts)

    def __repr__(self) -> str:
        return f"TextChunk({self.text!r}, {self.w_opts!r})"


class Button:
    """A clickable button with a text label.

    Raises:
        InvalidDimension: If the options result in a height or width below 1
        ValueError: If callback isn't callable or the label is empty
    """

    def __init__(self, text: str, callback: CallbackFn, *opts: Option):
        self._init([TextChunk(text)], callback, opts)

    @classmethod
    def from_chunks(
        cls, chunks: Iterable[TextChunk], callback: CallbackFn, *opts: Option
    ) -> "Button":
        """Create a button whose label is made of styled text chunks."""
        button = cls.__new__(cls)
        button._init(list(chunks), callback, opts)
        return button

    def _init(
        self, chunks: list[TextChunk], callback: CallbackFn, opts: tuple[Option, ...]
    ) -> None:
        if not callable(callback):
            raise ValueError("callback must be callable")
        if not chunks:
            raise ValueError("at least one text chunk must be specified")
        if not any(chunk.text for chunk in chunks):
            raise ValueError("the text label cannot be empty")

        width = sum(text_width(chunk.text) for chunk in chunks)
        self._opts = new_options(width, *opts)

        self._write_opts: list[WriteOptions] = []
        for chunk in chunks:
            write_opts = chunk.write_options()
            write_opts.set_default_fg_color(self._opts.text_color)
            self._write_opts.append(write_opts)

        self._chunks = chunks
        self._callback = callback
        debug_log(
            f"created button {self.text!r} with {self._opts}", component="button"
        )

    @property
    def text(self) -> str:
        """The full text label."""
        return "".join(chunk.text for chunk in self._chunks)

    @property
    def chunks(self) -> list[TextChunk]:
        return list(self._chunks)

    def chunk_write_options(self) -> list[WriteOptions]:
        """Get the finalized write options of each chunk, in label order."""
        return [
            WriteOptions(cell_opts=list(write_opts.cell_opts))
            for write_opts in self._write_opts
        ]

    def options(self) -> ButtonOptions:
        """Get a copy of the validated button options."""
        return dataclasses.replace(self._opts)

    def matches_key(self, key: KeyLike) -> bool:
        """Check whether key is the one configured to press the button."""
        return key == self._opts.key

    def press(self) -> None:
        """Run the callback as if the button was pressed."""
        self._callback()
