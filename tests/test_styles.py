import dataclasses

import pytest

from styledstr import (
    DEFAULT_STYLES,
    PLAIN_STYLES,
    Style,
    StyledStr,
    StyleRole,
    Styles,
)


def test_style_render() -> None:
    assert Style("red").render() == "\x1b[31m"
    assert Style("yellow", ("bold",)).render() == "\x1b[33;1m"
    assert Style(attrs=("underline",)).render() == "\x1b[4m"
    assert Style("red").render_reset() == "\x1b[0m"
    assert Style("green").paint("ok") == "\x1b[32mok\x1b[0m"


def test_plain_style() -> None:
    style = Style()
    assert style.is_plain()
    assert style.render() == ""
    assert style.render_reset() == ""
    assert style.paint("text") == "text"


def test_style_validation() -> None:
    with pytest.raises(ValueError):
        Style("not-a-color")
    with pytest.raises(ValueError):
        Style("red", ("not-an-attribute",))
    assert Style("red", ["bold"]).attrs == ("bold",)  # type: ignore


def test_plain_preset() -> None:
    styles = Styles.plain()
    assert all(styles.get(role).is_plain() for role in StyleRole)
    assert styles == Styles() == PLAIN_STYLES


def test_styled_preset() -> None:
    styles = Styles.styled()
    assert styles.header == Style("yellow")
    assert styles.error == Style("red")
    assert styles.usage == Style("yellow")
    assert styles.literal == Style("green")
    assert styles.placeholder == Style()
    assert styles.valid == Style("green")
    assert styles.invalid == Style("yellow")
    assert styles == DEFAULT_STYLES


def test_styled_preset_without_color(options) -> None:
    options["color"] = False
    assert Styles.styled() == Styles.plain()


def test_builder() -> None:
    base = Styles.plain()
    styles = (
        base.with_header(Style("blue"))
        .with_error(Style("red", ("bold",)))
        .with_usage(Style("cyan"))
        .with_literal(Style("green"))
        .with_placeholder(Style(attrs=("underline",)))
        .with_valid(Style("green"))
        .with_invalid(Style("magenta"))
    )
    assert styles.header == Style("blue")
    assert styles.error == Style("red", ("bold",))
    assert styles.usage == Style("cyan")
    assert styles.literal == Style("green")
    assert styles.placeholder == Style(attrs=("underline",))
    assert styles.valid == Style("green")
    assert styles.invalid == Style("magenta")

    # The original is untouched.
    assert base == Styles.plain()


def test_builder_replaces() -> None:
    styles = Styles.plain().with_error(Style("red", ("bold",))).with_error(Style("blue"))
    assert styles.error == Style("blue")


@pytest.mark.parametrize("role", list(StyleRole))
def test_with_style(role: StyleRole) -> None:
    styles = Styles.styled().with_style(role, Style("magenta"))
    assert styles.get(role) == Style("magenta")
    for other in StyleRole:
        if other is not role:
            assert styles.get(other) == Styles.styled().get(other)


def test_styles_are_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Styles.plain().header = Style("red")  # type: ignore


def _render_error(styles: Styles) -> StyledStr:
    out = StyledStr()
    out.push_styled_text(styles.error, "error:")
    out.push_text(" unexpected argument '")
    out.push_styled_text(styles.invalid, "--foo")
    out.push_text("' found\n\n  tip: to pass '")
    out.push_styled_text(styles.valid, "--foo")
    out.push_text("' as a value, use '")
    out.push_styled_text(styles.valid, "-- --foo")
    out.push_text("'\n\n")
    out.push_styled_text(styles.usage, "Usage:")
    out.push_text(" ")
    out.push_styled_text(styles.literal, "mybin")
    out.push_text(" ")
    out.push_styled_text(styles.placeholder, "[OPTIONS]")
    return out


def test_plain_rendering_is_style_independent() -> None:
    plain = _render_error(Styles.plain())
    styled = _render_error(Styles.styled())
    assert plain.ansi() != styled.ansi()
    assert str(plain) == str(styled) == plain.ansi()

    plain.wrap(20)
    styled.wrap(20)
    assert str(plain) == str(styled)
