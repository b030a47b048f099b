"""
Theme description IR types.

A theme description is the declarative input of the derivation engine:
font families, the font size scale parameters, and the default and
dark-mode color palettes. Every section is optional; an empty mapping is
a valid description.

Example (JSON):
    {
        "fonts": {
            "font_family": {"primary": "Inter:wght@400;600", "primary_type": "sans-serif"},
            "font_size": {"base": 16, "scale": 1.25}
        },
        "colors": {
            "default": {"theme_color": {"primary": "#121212"}, "text_color": {"text": "#444"}},
            "darkmode": {"theme_color": {"primary": "#fff"}}
        }
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_BASE_SIZE_PX, DEFAULT_SCALE_RATIO

# =============================================================================
# Fonts
# =============================================================================


class FontSizeSpec(BaseModel):
    """Parameters of the geometric heading scale."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    base: float = Field(
        default=DEFAULT_BASE_SIZE_PX,
        description="Body font size in pixels",
    )
    scale: float = Field(
        default=DEFAULT_SCALE_RATIO,
        description="Ratio between consecutive heading levels",
    )

    @field_validator("base", mode="before")
    @classmethod
    def _default_base(cls, value: Any) -> Any:
        return DEFAULT_BASE_SIZE_PX if value is None else value

    @field_validator("scale", mode="before")
    @classmethod
    def _default_scale(cls, value: Any) -> Any:
        return DEFAULT_SCALE_RATIO if value is None else value


class FontsSpec(BaseModel):
    """Font families and size scale parameters."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    font_family: dict[str, str] = Field(
        default_factory=dict,
        description="Family key -> raw font string; '<key>_type' entries name the fallback",
    )
    font_size: FontSizeSpec = Field(
        default_factory=FontSizeSpec,
        description="Base size and scale ratio",
    )

    @field_validator("font_family", mode="before")
    @classmethod
    def _empty_font_family(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("font_size", mode="before")
    @classmethod
    def _empty_font_size(cls, value: Any) -> Any:
        return {} if value is None else value


# =============================================================================
# Colors
# =============================================================================


# Any JSON scalar; values are emitted verbatim, numbers in JS notation
ColorValue = str | bool | int | float | None


class ColorGroupsSpec(BaseModel):
    """Theme and text color groups for one mode."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    theme_color: dict[str, ColorValue] | None = Field(
        default=None, description="Surface/brand colors (snake_case name -> CSS color)"
    )
    text_color: dict[str, ColorValue] | None = Field(
        default=None, description="Text colors (snake_case name -> CSS color)"
    )


class ColorsSpec(BaseModel):
    """Default palette plus optional dark-mode palette."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    default: ColorGroupsSpec | None = Field(default=None, description="Light/default palette")
    darkmode: ColorGroupsSpec | None = Field(default=None, description="Dark-mode palette")


# =============================================================================
# Theme description
# =============================================================================


class ThemeDescription(BaseModel):
    """Root of a theme description document."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    fonts: FontsSpec = Field(default_factory=FontsSpec, description="Font configuration")
    colors: ColorsSpec = Field(default_factory=ColorsSpec, description="Color palettes")

    @field_validator("fonts", "colors", mode="before")
    @classmethod
    def _empty_section(cls, value: Any) -> Any:
        return {} if value is None else value
