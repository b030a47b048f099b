"""
Utility mapping builder.

Combines the derived fonts, sizes and colors into the shapes a
class-generation host consumes: variable namespaces, literal font
utilities, and parameterized color utility families.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from ..constants import COLOR_VALUE_TYPE

Declarations = dict[str, str]


@dataclass(frozen=True)
class UtilityFamily:
    """
    A parameterized utility family.

    The host generates one rule per entry of ``values``: class
    ``.{prefix}-{key}`` with the declarations ``build(values[key])``.
    """

    prefix: str
    build: Callable[[str], Declarations]
    values: Mapping[str, str] = field(default_factory=dict)
    type: str = COLOR_VALUE_TYPE

    def class_name(self, key: str) -> str:
        return f".{self.prefix}-{key}"

    def rules(self) -> dict[str, Declarations]:
        """Expand the family into class selector -> declarations."""
        return {self.class_name(key): self.build(value) for key, value in self.values.items()}


# =============================================================================
# Variable namespaces
# =============================================================================


def build_base_variables(
    font_sizes: Mapping[str, str],
    font_families: Mapping[str, str],
    color_variables: Mapping[str, str],
) -> dict[str, str]:
    """Root-scope namespace: sizes, then families, then default colors."""
    variables: dict[str, str] = {}
    for key, value in font_sizes.items():
        variables[f"--text-{key}"] = value
    for key, value in font_families.items():
        variables[f"--font-{key}"] = value
    variables.update(color_variables)
    return variables


# =============================================================================
# Font utilities
# =============================================================================


def build_font_utilities(
    font_families: Mapping[str, str],
    font_sizes: Mapping[str, str],
) -> dict[str, Declarations]:
    """Literal ``.font-*`` and ``.text-*`` classes referencing the font variables.

    Args:
        font_families: Family key -> font-family value.
        font_sizes: Size key -> length (including ``-sm`` and base variants).

    Returns:
        Dict of class selector to declarations.
    """
    utilities: dict[str, Declarations] = {}
    for key in font_families:
        utilities[f".font-{key}"] = {"font-family": f"var(--font-{key})"}
    for key in font_sizes:
        utilities[f".text-{key}"] = {"font-size": f"var(--text-{key})"}
    return utilities


# =============================================================================
# Color utilities
# =============================================================================

# Family prefix -> CSS property it sets
COLOR_PROPERTIES: dict[str, str] = {
    "bg": "background-color",
    "text": "color",
    "border": "border-color",
    "fill": "fill",
    "stroke": "stroke",
}


def _property_setter(css_property: str) -> Callable[[str], Declarations]:
    def build(value: str) -> Declarations:
        return {css_property: value}

    return build


def color_utility_families(color_roles: Mapping[str, str]) -> list[UtilityFamily]:
    """One family per entry of ``COLOR_PROPERTIES``, all sharing the role table.

    A host expanding these produces ``len(COLOR_PROPERTIES) * len(color_roles)``
    rules.
    """
    values = dict(color_roles)
    return [
        UtilityFamily(prefix=prefix, build=_property_setter(css_property), values=values)
        for prefix, css_property in COLOR_PROPERTIES.items()
    ]
