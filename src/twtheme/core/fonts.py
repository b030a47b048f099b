"""
Font family derivation.

Raw font identifiers use the web-font URL convention: words joined with
``+`` and optional ``:axis@values`` modifiers, e.g. ``Open+Sans:wght@400;700``.
"""

from __future__ import annotations

import re
from collections.abc import Mapping

from ..constants import DEFAULT_FONT_FALLBACK, FONT_TYPE_SUFFIX

_MODIFIER_RE = re.compile(r":[^:]+")


def normalize_font_name(raw: str) -> str:
    """Turn a raw font identifier into a family name.

    ``+`` becomes a space and every ``:``-led segment is dropped, up to the
    next ``:`` or the end of the string. Anything else passes through as is.

    Args:
        raw: Raw font identifier.

    Returns:
        Human-readable family name.
    """
    return _MODIFIER_RE.sub("", raw.replace("+", " "))


def resolve_font_families(raw_families: Mapping[str, str]) -> dict[str, str]:
    """Build the family key -> CSS font-family value mapping.

    Keys ending in ``_type`` are metadata naming the fallback category of
    their base key and are never families themselves. Output order follows
    the input's insertion order.

    Args:
        raw_families: The ``fonts.font_family`` section.

    Returns:
        Dict of family key to ``"<name>, <fallback>"``.
    """
    families: dict[str, str] = {}
    for key, font in raw_families.items():
        if key.endswith(FONT_TYPE_SUFFIX):
            continue
        fallback = raw_families.get(f"{key}{FONT_TYPE_SUFFIX}") or DEFAULT_FONT_FALLBACK
        families[key] = f"{normalize_font_name(font)}, {fallback}"
    return families
