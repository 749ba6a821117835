"""Utilities for separating visible text from ANSI escape sequences."""

from __future__ import annotations

import functools
import re
from typing import Callable, Iterable, Iterator, List, NamedTuple, Tuple


@functools.lru_cache(maxsize=None)
def _get_ansi_pattern() -> re.Pattern:
    """Escape sequences treated as invisible: OSC strings (eg hyperlinks) ended
    by BEL or ST, CSI sequences (eg SGR colors), and two-character escapes."""
    # https://stackoverflow.com/a/14693789, plus OSC.
    return re.compile(
        r"\x1B\][^\x07\x1B]*(?:\x07|\x1B\\)"
        r"|\x1B(?:[@-Z\\-_]|\[[0-?]*[ -/]*[@-~])"
    )


class TextSpan(NamedTuple):
    """A run of visible text, and where it starts in the styled string."""

    start: int
    text: str

    @property
    def end(self) -> int:
        return self.start + len(self.text)


def iter_spans(x: str) -> Iterator[TextSpan]:
    """Yield the visible runs of `x`, skipping escape sequences.

    Empty runs (eg between two adjacent escape sequences) are not yielded."""
    last = 0
    for match in _get_ansi_pattern().finditer(x):
        if match.start() > last:
            yield TextSpan(last, x[last : match.start()])
        last = match.end()
    if last < len(x):
        yield TextSpan(last, x[last:])


def iter_sequences(x: str) -> Iterator[Tuple[str, bool]]:
    """Split `x` into `(segment, is_sequence)` pairs, in order.

    Joining the segments gives back `x` exactly."""
    last = 0
    for span in iter_spans(x):
        if span.start > last:
            yield x[last : span.start], True
        yield span.text, False
        last = span.end
    if last < len(x):
        yield x[last:], True


def strip_ansi_sequences(x: str) -> str:
    return _get_ansi_pattern().sub("", x)


def is_reset(sequence: str) -> bool:
    """Check for the "reset all attributes" sequence, `ESC[0m` or `ESC[m`."""
    return re.fullmatch(r"\x1B\[0*m", sequence) is not None


def strip_pieces(
    pieces: List[Tuple[str, bool]],
    indices: Iterable[int],
    strip: Callable[[str], str],
) -> None:
    """Apply `strip` to the visible pieces at `indices`, in order, until one of
    them is left non-empty. Escape sequences are skipped over and kept."""
    for i in indices:
        text, is_sequence = pieces[i]
        if is_sequence:
            continue
        text = strip(text)
        pieces[i] = (text, False)
        if len(text) > 0:
            return


def strip_visible(x: str, leading: bool = True, trailing: bool = True) -> str:
    """Like `str.strip()`, but looks through escape sequences.

    Whitespace is removed from the visible text only; sequences before the first
    or after the last visible character are kept where they are."""
    pieces = list(iter_sequences(x))
    if leading:
        strip_pieces(pieces, range(len(pieces)), str.lstrip)
    if trailing:
        strip_pieces(pieces, reversed(range(len(pieces))), str.rstrip)
    return "".join(text for text, _ in pieces)
