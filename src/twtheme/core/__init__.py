"""
twtheme derivation core.

Pure functions from a theme description to design tokens.
"""

from .colors import (
    ColorGroup,
    build_color_roles,
    css_key,
    css_value,
    dark_color_groups,
    default_color_groups,
    derive_color_variables,
)
from .derive import derive_tokens, parse_theme_description
from .fonts import normalize_font_name, resolve_font_families
from .gradients import (
    gradient_from,
    gradient_to,
    gradient_utility_families,
    gradient_via,
)
from .type_scale import calculate_font_sizes, format_css_number
from .utilities import (
    COLOR_PROPERTIES,
    UtilityFamily,
    build_base_variables,
    build_font_utilities,
    color_utility_families,
)

__all__ = [
    "COLOR_PROPERTIES",
    "ColorGroup",
    "UtilityFamily",
    "build_base_variables",
    "build_color_roles",
    "build_font_utilities",
    "calculate_font_sizes",
    "color_utility_families",
    "css_key",
    "css_value",
    "dark_color_groups",
    "default_color_groups",
    "derive_color_variables",
    "derive_tokens",
    "format_css_number",
    "gradient_from",
    "gradient_to",
    "gradient_utility_families",
    "gradient_via",
    "normalize_font_name",
    "parse_theme_description",
    "resolve_font_families",
]
