"""Terminal column widths for visible text."""

from __future__ import annotations

from wcwidth import wcwidth


def display_width(text: str) -> int:
    """Number of terminal columns occupied by `text`.

    Most characters count 1, East Asian wide and fullwidth characters count 2,
    and combining marks count 0. Control characters (which `wcwidth` reports as
    -1) don't occupy a column. `text` should not contain escape sequences; use
    `StyledStr.display_width()` for styled text.
    """
    return sum(max(wcwidth(c), 0) for c in text)
