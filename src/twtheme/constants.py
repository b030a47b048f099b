"""Shared constants for token derivation and host registration."""

from __future__ import annotations

# Font families
FONT_TYPE_SUFFIX = "_type"
DEFAULT_FONT_FALLBACK = "sans-serif"

# Font sizes
DEFAULT_BASE_SIZE_PX = 16
DEFAULT_SCALE_RATIO = 1.25
HEADING_LEVELS: tuple[int, ...] = (6, 5, 4, 3, 2, 1)
HEADING_SMALL_FACTOR = 0.9
BASE_SMALL_FACTOR = 0.8

# Colors
DEFAULT_COLOR_PREFIX = ""
DARK_COLOR_PREFIX = "darkmode-"

# Host scopes
ROOT_SELECTOR = ":root"
DARK_SELECTOR = ".dark"

# Value type tag handed to hosts alongside the color role table
COLOR_VALUE_TYPE = "color"
