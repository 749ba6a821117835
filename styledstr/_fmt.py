"""Writing styled text to stdout or stderr."""

from __future__ import annotations

import dataclasses
import enum
import os
import sys
import threading
from typing import Dict, Optional, TextIO

from . import _settings
from ._styled_str import OutputError, StyledStr


class Stream(enum.Enum):
    STDOUT = "stdout"
    STDERR = "stderr"

    def get(self) -> Optional[TextIO]:
        # Looked up on each call, so `contextlib.redirect_stdout()` is respected.
        # `None` when the process has no such stream, eg under pythonw.
        return sys.stdout if self is Stream.STDOUT else sys.stderr


class ColorChoice(enum.Enum):
    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def enabled_for(self, stream: TextIO) -> bool:
        """Decide whether to emit escape sequences when writing to `stream`."""
        if not _settings.options["color"] or self is ColorChoice.NEVER:
            return False
        if self is ColorChoice.ALWAYS:
            return True
        isatty = getattr(stream, "isatty", None)
        return (
            isatty is not None
            and isatty()
            and os.environ.get("TERM") not in (None, "dumb")
        )


_stream_locks: Dict[Stream, threading.Lock] = {
    Stream.STDOUT: threading.Lock(),
    Stream.STDERR: threading.Lock(),
}


@dataclasses.dataclass
class Colorizer:
    """Styled text bound to the stream it should be printed to."""

    stream: Stream
    color_when: ColorChoice
    content: StyledStr = dataclasses.field(default_factory=StyledStr)

    def with_content(self, content: StyledStr) -> Colorizer:
        return dataclasses.replace(self, content=content)

    def print(self) -> None:
        """Write the content to the target stream.

        The stream is locked for the duration of this one write. Write failures
        (eg a closed stream or a broken pipe) are raised as `OSError`; the
        process is never exited from here."""
        with _stream_locks[self.stream]:
            target = self.stream.get()
            if target is None:
                raise OutputError(f"sys.{self.stream.value} is not available.")
            try:
                # `isatty()` and `flush()` raise ValueError on closed streams.
                styled = self.color_when.enabled_for(target)
                self.content.write_to(target, styled=styled)
                target.flush()
            except ValueError as e:
                raise OutputError(str(e)) from e

    def __str__(self) -> str:
        """Color-unaware rendering. Never uses styling."""
        return str(self.content)
