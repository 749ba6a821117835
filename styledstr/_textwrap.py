"""Greedy word wrapping for text with embedded escape sequences.

Wrapping is done on the visible text only. Each escape sequence is remembered
by its offset in the visible text and spliced back in afterwards, so styles stay
attached to the characters they surround.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Tuple

from . import _strings
from ._width import display_width


def find_words_ascii_space(line: str) -> Iterator[str]:
    """Split a line into words at ASCII spaces.

    Trailing spaces stay attached to the word before them, and a leading run of
    spaces is returned as its own word:

    "  foo bar" => "  ", "foo ", "bar"
    """
    start = 0
    in_whitespace = False
    for idx, ch in enumerate(line):
        if in_whitespace and ch != " ":
            yield line[start:idx]
            start = idx
        in_whitespace = ch == " "
    if start < len(line):
        yield line[start:]


def _split_inclusive(text: str) -> Iterator[str]:
    """Split after each line break, keeping the break."""
    start = 0
    while start < len(text):
        end = text.find("\n", start)
        if end == -1:
            yield text[start:]
            return
        yield text[start : end + 1]
        start = end + 1


class Word(NamedTuple):
    start: int
    """Offset in the visible text, or -1 for a line break added by wrapping."""
    text: str


class LineWrapper:
    """Greedy line wrapper.

    A word moves to a new line when it would overflow the current one, unless
    it's the first word there: words are never split. When a line starts with
    spaces, the same spaces are repeated after each break inserted into it.
    """

    def __init__(self, hard_width: int) -> None:
        self.hard_width = hard_width
        self.words: List[Word] = []

    def push_line(self, start: int, line: str) -> None:
        """Wrap one line of visible text, starting at offset `start`."""
        first = len(self.words)
        indent = ""
        line_width = 0
        offset = start
        for i, word in enumerate(find_words_ascii_space(line)):
            if i == 0 and word.strip(" ") == "":
                indent = word
            word_width = display_width(word.rstrip())
            if (
                word_width > 0
                and line_width > display_width(indent)
                and self.hard_width < line_width + word_width
            ):
                self._break_line(indent)
                line_width = display_width(indent)
            self.words.append(Word(offset, word))
            line_width += display_width(word)
            offset += len(word)

        # Drop spaces left before the line break.
        if line.endswith("\n") and len(self.words) - first >= 2:
            last = self.words[-2]
            self.words[-2] = Word(last.start, last.text.rstrip(" "))

    def _break_line(self, indent: str) -> None:
        last = self.words[-1]
        self.words[-1] = Word(last.start, last.text.rstrip(" "))
        self.words.append(Word(-1, "\n" + indent))


def _splice(words: List[Word], sequences: List[Tuple[int, str]]) -> str:
    out: List[str] = []
    pending: Deque[Tuple[int, str]] = deque(sequences)
    for i, word in enumerate(words):
        if word.start == -1:
            # Sequences between the two lines: anything up to the last reset
            # closes the previous line, the rest opens the next one.
            gap: List[str] = []
            while len(pending) > 0 and pending[0][0] <= words[i + 1].start:
                gap.append(pending.popleft()[1])
            split = 0
            for j, sequence in enumerate(gap):
                if _strings.is_reset(sequence):
                    split = j + 1
            out.extend(gap[:split])
            out.append(word.text)
            out.extend(gap[split:])
            continue

        pos = word.start
        end = word.start + len(word.text)
        while len(pending) > 0 and pending[0][0] < end:
            offset, sequence = pending.popleft()
            if offset > pos:
                out.append(word.text[pos - word.start : offset - word.start])
                pos = offset
            out.append(sequence)
        out.append(word.text[pos - word.start :])

    out.extend(sequence for _, sequence in pending)
    return "".join(out)


def wrap(text: str, hard_width: int) -> str:
    """Wrap styled text to `hard_width` columns. Trailing whitespace is removed."""
    visible_parts: List[str] = []
    sequences: List[Tuple[int, str]] = []
    offset = 0
    for segment, is_sequence in _strings.iter_sequences(text):
        if is_sequence:
            sequences.append((offset, segment))
        else:
            visible_parts.append(segment)
            offset += len(segment)

    wrapper = LineWrapper(hard_width)
    offset = 0
    for line in _split_inclusive("".join(visible_parts)):
        wrapper.push_line(offset, line)
        offset += len(line)

    return _strings.strip_visible(
        _splice(wrapper.words, sequences), leading=False
    )
