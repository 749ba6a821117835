"""Capability flags for styledstr.

These replace build-time feature toggles: turning a flag off swaps the feature
for its plain fallback instead of removing it. Flags are read when they're
needed, so the `options` dictionary can be changed at runtime.
"""

from __future__ import annotations

import os
import warnings

from typing_extensions import TypedDict

from ._warnings import StyledStrWarning


class OptionsDict(TypedDict):
    """Capability flags.

    Attributes:
        color: Support ANSI styling. When off, `Styles.styled()` is the same as
            `Styles.plain()` and `Colorizer` never emits escape sequences.
        wrap_help: Support line wrapping. When off, `StyledStr.wrap()` is a no-op.
    """

    color: bool
    wrap_help: bool


_truthy = ("1", "true", "yes", "on")
_falsy = ("0", "false", "no", "off")


def read_option(str_name: str, default: bool) -> bool:
    if str_name not in os.environ:
        return default

    value = os.environ[str_name].strip().lower()
    if value in _truthy:
        return True
    if value in _falsy:
        return False

    warnings.warn(
        f"Ignoring {str_name}={os.environ[str_name]!r}; expected one of"
        f" {_truthy + _falsy}. Using default value {default}.",
        category=StyledStrWarning,
        stacklevel=2,
    )
    return default


# Global options dictionary.
options: OptionsDict = {
    "color": read_option("PYTHON_STYLEDSTR_COLOR", True),
    "wrap_help": read_option("PYTHON_STYLEDSTR_WRAP_HELP", True),
}
