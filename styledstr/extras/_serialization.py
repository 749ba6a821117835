"""Human-readable YAML serialization for style themes."""

from __future__ import annotations

from typing import IO, Any, Dict, Optional, Union

import yaml

from .._styles import Style, StyleRole, Styles


def _style_to_dict(style: Style) -> Optional[Dict[str, Any]]:
    if style.is_plain():
        return None
    out: Dict[str, Any] = {}
    if style.color is not None:
        out["color"] = style.color
    if len(style.attrs) > 0:
        out["attrs"] = list(style.attrs)
    return out


def _style_from_dict(role: str, raw: Any) -> Style:
    if raw is None:
        return Style()
    if not isinstance(raw, dict) or not set(raw.keys()) <= {"color", "attrs"}:
        raise ValueError(
            f"Style for {role!r} should be null or a mapping with `color` and"
            f" `attrs` keys, but got {raw!r}."
        )
    return Style(color=raw.get("color"), attrs=tuple(raw.get("attrs", ())))


def to_yaml(styles: Styles) -> str:
    """Serialize a `Styles` configuration to a YAML string.

    Plain roles are written as `null`."""
    return yaml.safe_dump(
        {role.value: _style_to_dict(styles.get(role)) for role in StyleRole},
        sort_keys=False,
    )


def from_yaml(stream: Union[str, IO[str], bytes, IO[bytes]]) -> Styles:
    """Load a `Styles` configuration written by `to_yaml()`.

    Roles that are left out are plain; unknown roles raise a `ValueError`."""
    raw = yaml.safe_load(stream)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(
            f"Expected a mapping from role names to styles, got {raw!r}."
        )

    known_roles = {role.value: role for role in StyleRole}
    out = Styles.plain()
    for name, style in raw.items():
        if name not in known_roles:
            raise ValueError(
                f"Unknown style role {name!r}, expected one of {tuple(known_roles)}."
            )
        out = out.with_style(known_roles[name], _style_from_dict(name, style))
    return out
