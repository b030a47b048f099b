"""
Gradient color-stop composition.

``from-*``, ``via-*`` and ``to-*`` utilities each set one stop variable and
rebuild the stop chain consumed by the gradient rendering rule.

``from``/``to`` always reset both ``--tw-gradient-via-stops`` and
``--tw-gradient-stops`` to the two-stop fallback chain, so a gradient with
no ``via`` still renders. ``via`` only overwrites ``--tw-gradient-via-stops``
with the three-stop chain; ``--tw-gradient-stops`` keeps whatever
``from``/``to`` last set and picks up the via chain through its
``var(--tw-gradient-via-stops, ...)`` fallback.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from .utilities import Declarations, UtilityFamily

GRADIENT_FROM = "--tw-gradient-from"
GRADIENT_VIA = "--tw-gradient-via"
GRADIENT_TO = "--tw-gradient-to"
GRADIENT_VIA_STOPS = "--tw-gradient-via-stops"
GRADIENT_STOPS = "--tw-gradient-stops"

_POSITION = "var(--tw-gradient-position)"
_FROM_STOP = "var(--tw-gradient-from) var(--tw-gradient-from-position)"
_VIA_STOP = "var(--tw-gradient-via) var(--tw-gradient-via-position)"
_TO_STOP = "var(--tw-gradient-to) var(--tw-gradient-to-position)"

TWO_STOP_CHAIN = f"var({GRADIENT_VIA_STOPS}, {_POSITION}, {_FROM_STOP}, {_TO_STOP})"
THREE_STOP_CHAIN = f"{_POSITION}, {_FROM_STOP}, {_VIA_STOP}, {_TO_STOP}"


def gradient_from(value: str) -> Declarations:
    return {
        GRADIENT_FROM: value,
        GRADIENT_VIA_STOPS: TWO_STOP_CHAIN,
        GRADIENT_STOPS: TWO_STOP_CHAIN,
    }


def gradient_to(value: str) -> Declarations:
    return {
        GRADIENT_TO: value,
        GRADIENT_VIA_STOPS: TWO_STOP_CHAIN,
        GRADIENT_STOPS: TWO_STOP_CHAIN,
    }


def gradient_via(value: str) -> Declarations:
    # Leaves GRADIENT_STOPS alone.
    return {
        GRADIENT_VIA: value,
        GRADIENT_VIA_STOPS: THREE_STOP_CHAIN,
    }


GRADIENT_BUILDERS: dict[str, Callable[[str], Declarations]] = {
    "from": gradient_from,
    "to": gradient_to,
    "via": gradient_via,
}


def gradient_utility_families(color_roles: Mapping[str, str]) -> list[UtilityFamily]:
    """``from``/``to``/``via`` families over the color role table."""
    values = dict(color_roles)
    return [
        UtilityFamily(prefix=prefix, build=build, values=values)
        for prefix, build in GRADIENT_BUILDERS.items()
    ]
