"""
twtheme - design tokens from a declarative theme description.

Derives CSS custom properties, font utilities and color/gradient utility
families (with a dark-mode override layer) for a utility-class host.
"""

from __future__ import annotations

from ._version import __version__
from .core import derive_tokens, parse_theme_description
from .errors import HostRegistrationError, ThemeDescriptionError, TwThemeError
from .host import StylesheetHost, UtilityHost, register_with_host
from .ir import ThemeDescription, TokenBundle

__all__ = [
    "__version__",
    "HostRegistrationError",
    "StylesheetHost",
    "ThemeDescription",
    "ThemeDescriptionError",
    "TokenBundle",
    "TwThemeError",
    "UtilityHost",
    "derive_tokens",
    "parse_theme_description",
    "register_with_host",
]
