"""Shared pytest fixtures for twtheme tests."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def theme_data() -> dict[str, Any]:
    """Return a theme description with every section populated."""
    return {
        "fonts": {
            "font_family": {
                "primary": "Open+Sans:wght@400;700",
                "primary_type": "sans-serif",
                "secondary": "Playfair+Display:ital,wght@0,400;1,700",
                "secondary_type": "serif",
                "mono": "JetBrains+Mono",
            },
            "font_size": {"base": 16, "scale": 1.25},
        },
        "colors": {
            "default": {
                "theme_color": {
                    "primary": "#121212",
                    "body": "#ffffff",
                    "border": "#eaeaea",
                    "light": "#f6f6f6",
                },
                "text_color": {
                    "text": "#444444",
                    "text_dark": "#040404",
                    "text_light": "#717171",
                },
            },
            "darkmode": {
                "theme_color": {
                    "primary": "#ffffff",
                    "body": "#1c1c1c",
                    "accent_dark": "#0b0b0b",
                },
                "text_color": {
                    "text": "#b4afb6",
                    "text_dark": "#ffffff",
                },
            },
        },
    }


@pytest.fixture
def minimal_theme_data() -> dict[str, Any]:
    """Return a theme description with one color per layer and no fonts."""
    return {
        "colors": {
            "default": {"theme_color": {"primary": "#0066cc"}},
            "darkmode": {"theme_color": {"primary": "#99ccff"}},
        },
    }
