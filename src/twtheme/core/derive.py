"""
Token derivation entry point.

``derive_tokens`` is the whole pipeline: theme description in, immutable
``TokenBundle`` out. It is pure and idempotent; registering the bundle with
a host is a separate step (see ``twtheme.host``).
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import ThemeDescriptionError
from ..ir.bundle import TokenBundle
from ..ir.theme import ThemeDescription
from .colors import (
    build_color_roles,
    dark_color_groups,
    default_color_groups,
    derive_color_variables,
)
from .fonts import resolve_font_families
from .type_scale import calculate_font_sizes
from .utilities import build_base_variables, build_font_utilities

logger = logging.getLogger(__name__)


def parse_theme_description(data: ThemeDescription | Mapping[str, Any] | None) -> ThemeDescription:
    """Validate a raw theme description.

    Args:
        data: A ``ThemeDescription``, a JSON-shaped mapping, or None (empty theme).

    Returns:
        ThemeDescription instance.

    Raises:
        ThemeDescriptionError: If the mapping does not fit the schema.
    """
    if isinstance(data, ThemeDescription):
        return data
    try:
        return ThemeDescription.model_validate({} if data is None else data)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or None
        raise ThemeDescriptionError(f"Invalid theme description: {e}", location) from e


def derive_tokens(theme: ThemeDescription | Mapping[str, Any] | None) -> TokenBundle:
    """Derive the full token bundle from a theme description.

    Args:
        theme: Theme description (model or raw mapping).

    Returns:
        TokenBundle with variable namespaces, font utilities and the color role table.
    """
    description = parse_theme_description(theme)

    font_families = resolve_font_families(description.fonts.font_family)
    font_size = description.fonts.font_size
    font_sizes = calculate_font_sizes(font_size.base, font_size.scale)

    default_groups = default_color_groups(description.colors)
    dark_groups = dark_color_groups(description.colors)
    default_vars = derive_color_variables(default_groups)
    dark_vars = derive_color_variables(dark_groups)

    bundle = TokenBundle(
        font_families=font_families,
        font_sizes=font_sizes,
        base_variables=build_base_variables(font_sizes, font_families, default_vars),
        dark_variables=dark_vars,
        font_utilities=build_font_utilities(font_families, font_sizes),
        color_roles=build_color_roles([*default_groups, *dark_groups]),
    )

    logger.debug(
        f"Derived {len(bundle.base_variables)} base variables, "
        f"{len(bundle.dark_variables)} dark overrides, "
        f"{len(bundle.color_roles)} color roles"
    )
    return bundle
