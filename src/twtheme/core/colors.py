"""
Color variable derivation.

Colors arrive in up to four groups (default theme/text, dark theme/text).
Each group is flattened into ``--color-{prefix}{name}`` custom properties,
where dark groups carry the ``darkmode-`` prefix so the two layers never
share a name.

Groups are folded in a fixed order: theme_color before text_color, default
before dark. Within a layer a later group silently replaces an earlier
entry with the same key.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from ..constants import DARK_COLOR_PREFIX, DEFAULT_COLOR_PREFIX
from ..ir.theme import ColorsSpec, ColorValue
from .type_scale import format_css_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorGroup:
    """One named color group and the namespace prefix it is emitted under."""

    colors: Mapping[str, ColorValue] = field(default_factory=dict)
    prefix: str = DEFAULT_COLOR_PREFIX


def css_key(name: str) -> str:
    """snake_case color name -> hyphenated CSS name."""
    return name.replace("_", "-")


def css_value(value: ColorValue) -> str:
    """Render a color value as text; non-string JSON scalars follow JS notation."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return format_css_number(value)


def default_color_groups(colors: ColorsSpec) -> list[ColorGroup]:
    """Default-mode groups; absent ones still take part as empty groups."""
    default = colors.default
    return [
        ColorGroup(colors=(default.theme_color if default else None) or {}),
        ColorGroup(colors=(default.text_color if default else None) or {}),
    ]


def dark_color_groups(colors: ColorsSpec) -> list[ColorGroup]:
    """Dark-mode groups; only the ones present in the description."""
    darkmode = colors.darkmode
    if darkmode is None:
        return []

    groups: list[ColorGroup] = []
    if darkmode.theme_color is not None:
        groups.append(ColorGroup(colors=darkmode.theme_color, prefix=DARK_COLOR_PREFIX))
    if darkmode.text_color is not None:
        groups.append(ColorGroup(colors=darkmode.text_color, prefix=DARK_COLOR_PREFIX))
    return groups


def derive_color_variables(groups: Iterable[ColorGroup]) -> dict[str, str]:
    """Flatten color groups into a custom property mapping.

    Args:
        groups: Groups in evaluation order.

    Returns:
        Dict of ``--color-{prefix}{css_key}`` to the color value as text.
    """
    variables: dict[str, str] = {}
    for group in groups:
        for name, value in group.colors.items():
            var_name = f"--color-{group.prefix}{css_key(name)}"
            if var_name in variables:
                logger.debug(f"{var_name} redefined: {variables[var_name]!r} -> {value!r}")
            variables[var_name] = css_value(value)
    return variables


def build_color_roles(groups: Iterable[ColorGroup]) -> dict[str, str]:
    """Map each role name to a ``var(...)`` reference of its backing variable.

    References rather than literals keep every utility built on a role in
    step with later overrides of the variable (e.g. the dark layer).

    Args:
        groups: Default groups followed by dark groups.

    Returns:
        Dict of ``{prefix}{css_key}`` to ``var(--color-{prefix}{css_key})``.
    """
    roles: dict[str, str] = {}
    for group in groups:
        for name in group.colors:
            role = f"{group.prefix}{css_key(name)}"
            roles[role] = f"var(--color-{role})"
    return roles
