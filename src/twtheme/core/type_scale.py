"""
Typography scale generation.

Headings follow a geometric scale in rem: h6 is ``scale``, each level up
multiplies by ``scale`` again, so h1 is ``scale ** 6``. Body text keeps the
literal pixel base. Every size has a ``-sm`` variant for small viewports.
"""

from __future__ import annotations

import math
from decimal import Decimal

from ..constants import (
    BASE_SMALL_FACTOR,
    DEFAULT_BASE_SIZE_PX,
    DEFAULT_SCALE_RATIO,
    HEADING_LEVELS,
    HEADING_SMALL_FACTOR,
)


def format_css_number(value: float) -> str:
    """Render a number the way a JavaScript template literal does.

    Integral values drop the fractional part (``16`` rather than ``16.0``),
    other values use the shortest round-trip digits, and exponent notation
    only kicks in below 1e-6 or from 1e21 upwards.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = k + exponent  # position of the decimal point relative to the digits

    if k <= n <= 21:
        return f"{sign}{digits}{'0' * (n - k)}"
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    e = n - 1
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"


def calculate_font_sizes(
    base: float = DEFAULT_BASE_SIZE_PX,
    scale: float = DEFAULT_SCALE_RATIO,
) -> dict[str, str]:
    """Generate the heading and body font size scale.

    No validation is applied: a zero or negative ``base``/``scale`` yields
    whatever the arithmetic yields.

    Args:
        base: Body font size in pixels.
        scale: Ratio between consecutive heading levels.

    Returns:
        Ordered dict ``h6, h6-sm, ..., h1, h1-sm, base, base-sm`` of CSS lengths.
    """
    sizes: dict[str, str] = {}

    current = scale
    for level in HEADING_LEVELS:
        sizes[f"h{level}"] = f"{format_css_number(current)}rem"
        sizes[f"h{level}-sm"] = f"{format_css_number(current * HEADING_SMALL_FACTOR)}rem"
        current *= scale

    sizes["base"] = f"{format_css_number(base)}px"
    sizes["base-sm"] = f"{format_css_number(base * BASE_SMALL_FACTOR)}px"

    return sizes
