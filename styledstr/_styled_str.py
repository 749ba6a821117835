"""Terminal-styling container."""

from __future__ import annotations

import functools
from typing import Any, Iterator, TextIO

from . import _settings, _strings, _textwrap
from ._styles import Style
from ._width import display_width


class OutputError(OSError):
    """Styled text couldn't be written, eg because the stream is closed."""


@functools.total_ordering
class StyledStr:
    """Text with embedded ANSI escape sequences.

    Styling is stored inline, so the buffer is always a valid string to print to
    a terminal. Transformations (`trim()`, `indent()`, `wrap()`) only look at
    the visible text and never split an escape sequence. `str()` gives the plain
    text, `ansi()` the styled text.

    >>> out = StyledStr()
    >>> out.push_styled_text(Style("yellow", ("bold",)), "Usage:")
    >>> out.push_text(" mybin [OPTIONS]")
    """

    __hash__ = None  # type: ignore

    def __init__(self, text: str = "") -> None:
        self._content = text

    def push_text(self, text: str) -> None:
        self._content += text

    def push_buffer(self, other: StyledStr) -> None:
        self._content += other._content

    def push_styled_text(self, style: Style, text: str) -> None:
        self._content += style.paint(text)

    def write(self, text: str) -> int:
        """File-like interface, so a buffer can be passed to `print(..., file=)`."""
        self.push_text(text)
        return len(text)

    def trim(self) -> None:
        self._content = _strings.strip_visible(self._content)

    def replace_newline_var(self) -> None:
        self._content = self._content.replace("{n}", "\n")

    def indent(self, initial: str, trailing: str) -> None:
        self._content = initial + self._content.replace("\n", "\n" + trailing)

    def wrap(self, hard_width: int) -> None:
        """Wrap visible text to `hard_width` columns, splitting only at spaces.

        Words longer than `hard_width` are put on a line of their own rather than
        broken. No-op when wrapping support is turned off."""
        if not _settings.options["wrap_help"]:
            return
        self._content = _textwrap.wrap(self._content, hard_width)

    def display_width(self) -> int:
        return sum(display_width(text) for text in self.iter_text())

    def is_empty(self) -> bool:
        return len(self._content) == 0

    def iter_spans(self) -> Iterator[_strings.TextSpan]:
        return _strings.iter_spans(self._content)

    def iter_text(self) -> Iterator[str]:
        """Visible text, with escape sequences skipped."""
        return (span.text for span in self.iter_spans())

    def ansi(self) -> str:
        """Text including ANSI escape sequences."""
        return self._content

    def write_to(self, sink: TextIO, styled: bool = True) -> None:
        """Write to a text stream. With `styled=False`, escape sequences are
        left out.

        Errors from the stream are raised as `OSError`."""
        try:
            sink.write(self._content if styled else str(self))
        except ValueError as e:
            # Closed files and encoding failures surface as ValueError.
            raise OutputError(str(e)) from e

    def __str__(self) -> str:
        """Color-unaware rendering. Never includes styling."""
        return "".join(self.iter_text())

    def __repr__(self) -> str:
        return f"StyledStr({self._content!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StyledStr):
            return NotImplemented
        return self._content == other._content

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, StyledStr):
            return NotImplemented
        return self._content < other._content
