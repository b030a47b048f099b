"""
Derived token bundle.

The bundle is the complete output of one derivation run and the only
thing handed to a host. It is immutable all the way down: every mapping
is stored as a read-only view, and re-deriving produces a new bundle.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

if TYPE_CHECKING:
    from ..core.utilities import UtilityFamily

_FLAT_FIELDS = ("font_families", "font_sizes", "base_variables", "dark_variables", "color_roles")


class TokenBundle(BaseModel):
    """
    Tokens derived from a single theme description.

    Example:
        TokenBundle(
            font_families={"primary": "Inter, sans-serif"},
            font_sizes={"h6": "1.25rem", ..., "base": "16px", "base-sm": "12.8px"},
            base_variables={"--text-h6": "1.25rem", "--font-primary": "Inter, sans-serif"},
            dark_variables={"--color-darkmode-primary": "#fff"},
            font_utilities={".font-primary": {"font-family": "var(--font-primary)"}},
            color_roles={"darkmode-primary": "var(--color-darkmode-primary)"},
        )
    """

    model_config = ConfigDict(frozen=True, validate_default=True)

    font_families: Mapping[str, str] = Field(
        default_factory=dict, description="Family key -> CSS font-family value"
    )
    font_sizes: Mapping[str, str] = Field(
        default_factory=dict, description="Size key (h1..h6, -sm variants, base) -> CSS length"
    )
    base_variables: Mapping[str, str] = Field(
        default_factory=dict, description="Root-scope custom properties (fonts, sizes, colors)"
    )
    dark_variables: Mapping[str, str] = Field(
        default_factory=dict, description="Dark-mode custom property overrides"
    )
    font_utilities: Mapping[str, Mapping[str, str]] = Field(
        default_factory=dict, description="Class selector -> declarations"
    )
    color_roles: Mapping[str, str] = Field(
        default_factory=dict, description="Role name -> var(...) reference"
    )

    @field_validator(*_FLAT_FIELDS)
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @field_validator("font_utilities")
    @classmethod
    def _read_only_utilities(
        cls, value: Mapping[str, Mapping[str, str]]
    ) -> Mapping[str, Mapping[str, str]]:
        return MappingProxyType(
            {selector: MappingProxyType(dict(decls)) for selector, decls in value.items()}
        )

    @field_serializer(*_FLAT_FIELDS)
    def _dump_flat(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    @field_serializer("font_utilities")
    def _dump_utilities(self, value: Mapping[str, Mapping[str, str]]) -> dict[str, Any]:
        return {selector: dict(decls) for selector, decls in value.items()}

    def color_utility_families(self) -> list[UtilityFamily]:
        """bg/text/border/fill/stroke families over the color role table."""
        from ..core.utilities import color_utility_families

        return color_utility_families(self.color_roles)

    def gradient_utility_families(self) -> list[UtilityFamily]:
        """from/via/to gradient stop families over the color role table."""
        from ..core.gradients import gradient_utility_families

        return gradient_utility_families(self.color_roles)
