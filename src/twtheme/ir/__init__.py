"""
twtheme IR types.

Input (theme description) and output (token bundle) models.
"""

from .bundle import TokenBundle
from .theme import (
    ColorGroupsSpec,
    ColorsSpec,
    FontsSpec,
    FontSizeSpec,
    ThemeDescription,
)

__all__ = [
    "ColorGroupsSpec",
    "ColorsSpec",
    "FontSizeSpec",
    "FontsSpec",
    "ThemeDescription",
    "TokenBundle",
]
