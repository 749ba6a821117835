"""Terminal styles, and the named roles they're assigned to in help text."""

from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Tuple

import termcolor

from . import _settings


@dataclasses.dataclass(frozen=True)
class Style:
    """A foreground color and text attributes, or nothing at all.

    Color and attribute names are the ones understood by `termcolor`, for example
    `Style("red")` or `Style("yellow", ("bold", "underline"))`."""

    color: Optional[str] = None
    attrs: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.color is not None and self.color not in termcolor.COLORS:
            raise ValueError(
                f"Unknown color {self.color!r}, expected one of"
                f" {tuple(termcolor.COLORS)}."
            )
        for attr in self.attrs:
            if attr not in termcolor.ATTRIBUTES:
                raise ValueError(
                    f"Unknown attribute {attr!r}, expected one of"
                    f" {tuple(termcolor.ATTRIBUTES)}."
                )
        # Accept lists, which is what YAML gives us.
        object.__setattr__(self, "attrs", tuple(self.attrs))

    def is_plain(self) -> bool:
        return self.color is None and len(self.attrs) == 0

    def render(self) -> str:
        """Escape sequence that turns this style on."""
        codes = [termcolor.COLORS[self.color]] if self.color is not None else []
        codes.extend(termcolor.ATTRIBUTES[attr] for attr in self.attrs)
        if len(codes) == 0:
            return ""
        return "\033[" + ";".join(map(str, codes)) + "m"

    def render_reset(self) -> str:
        """Escape sequence that turns this style off."""
        return "" if self.is_plain() else termcolor.RESET

    def paint(self, text: str) -> str:
        return self.render() + text + self.render_reset()


class StyleRole(enum.Enum):
    HEADER = "header"
    ERROR = "error"
    USAGE = "usage"
    LITERAL = "literal"
    PLACEHOLDER = "placeholder"
    VALID = "valid"
    INVALID = "invalid"


@dataclasses.dataclass(frozen=True)
class Styles:
    """Styles used for each part of help and error messages.

    Roles that aren't given a style are plain. Builder methods return a new
    instance with one role replaced, so they can be chained:

    >>> styles = Styles.plain().with_header(Style("yellow", ("bold",)))
    """

    header: Style = Style()
    """General headings, eg section titles in help text."""
    error: Style = Style()
    """Error headings."""
    usage: Style = Style()
    """Usage headings."""
    literal: Style = Style()
    """Literal command-line syntax, eg `--help`."""
    placeholder: Style = Style()
    """Descriptions within command-line syntax, eg value names."""
    valid: Style = Style()
    """Suggested usage."""
    invalid: Style = Style()
    """Invalid usage."""

    @staticmethod
    def plain() -> Styles:
        """No terminal styling."""
        return Styles()

    @staticmethod
    def styled() -> Styles:
        """Default terminal styling. Plain when color support is turned off."""
        if not _settings.options["color"]:
            return Styles.plain()
        return Styles(
            header=Style("yellow"),
            error=Style("red"),
            usage=Style("yellow"),
            literal=Style("green"),
            placeholder=Style(),
            valid=Style("green"),
            invalid=Style("yellow"),
        )

    def get(self, role: StyleRole) -> Style:
        return getattr(self, role.value)

    def with_style(self, role: StyleRole, style: Style) -> Styles:
        return dataclasses.replace(self, **{role.value: style})

    def with_header(self, style: Style) -> Styles:
        return self.with_style(StyleRole.HEADER, style)

    def with_error(self, style: Style) -> Styles:
        return self.with_style(StyleRole.ERROR, style)

    def with_usage(self, style: Style) -> Styles:
        return self.with_style(StyleRole.USAGE, style)

    def with_literal(self, style: Style) -> Styles:
        return self.with_style(StyleRole.LITERAL, style)

    def with_placeholder(self, style: Style) -> Styles:
        return self.with_style(StyleRole.PLACEHOLDER, style)

    def with_valid(self, style: Style) -> Styles:
        return self.with_style(StyleRole.VALID, style)

    def with_invalid(self, style: Style) -> Styles:
        return self.with_style(StyleRole.INVALID, style)


PLAIN_STYLES = Styles.plain()
DEFAULT_STYLES = Styles.styled()
