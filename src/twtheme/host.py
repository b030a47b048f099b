"""
Host registration for derived tokens.

A host is the class-generation layer that turns the bundle into style
rules. ``register_with_host`` is the only place a bundle meets a host, so
derivation stays free of side effects and testable without one.

``StylesheetHost`` is an in-process host that records registrations and
renders them as plain stylesheet text.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Protocol, runtime_checkable

from .constants import COLOR_VALUE_TYPE, DARK_SELECTOR, ROOT_SELECTOR
from .core.utilities import Declarations, UtilityFamily
from .errors import HostRegistrationError
from .ir.bundle import TokenBundle

logger = logging.getLogger(__name__)


# =============================================================================
# Protocol
# =============================================================================


@runtime_checkable
class UtilityHost(Protocol):
    """Capabilities a class-generation host exposes to the registration step."""

    def add_base(self, scopes: Mapping[str, Mapping[str, str]]) -> None:
        """Apply custom properties under each selector."""
        ...

    def add_utilities(self, utilities: Mapping[str, Mapping[str, str]]) -> None:
        """Add literal class selector -> declarations rules."""
        ...

    def match_utilities(self, families: Iterable[UtilityFamily]) -> None:
        """Add parameterized families, one rule per (family, value key)."""
        ...


def register_with_host(
    bundle: TokenBundle,
    host: UtilityHost,
    *,
    root_selector: str = ROOT_SELECTOR,
    dark_selector: str = DARK_SELECTOR,
) -> None:
    """Hand a derived bundle to a host.

    Light variables go on ``root_selector``, dark overrides on
    ``dark_selector``; then font utilities, the color families
    (bg/text/border/fill/stroke) and the gradient families (from/via/to).

    Args:
        bundle: Output of ``derive_tokens``.
        host: Class-generation host.
        root_selector: Scope for the base namespace.
        dark_selector: Scope for the dark-mode override namespace.
    """
    host.add_base(
        {
            root_selector: dict(bundle.base_variables),
            dark_selector: dict(bundle.dark_variables),
        }
    )
    host.add_utilities({name: dict(decls) for name, decls in bundle.font_utilities.items()})
    host.match_utilities(bundle.color_utility_families())
    host.match_utilities(bundle.gradient_utility_families())
    logger.debug(f"Registered bundle with {type(host).__name__}")


# =============================================================================
# Stylesheet host
# =============================================================================


class StylesheetHost:
    """Records registrations and renders them as stylesheet text."""

    def __init__(self, supported_types: Iterable[str] = (COLOR_VALUE_TYPE,)) -> None:
        self._supported_types = frozenset(supported_types)
        self._base: dict[str, dict[str, str]] = {}
        self._utilities: dict[str, Declarations] = {}
        self._families: list[UtilityFamily] = []

    def add_base(self, scopes: Mapping[str, Mapping[str, str]]) -> None:
        for selector, variables in scopes.items():
            self._base.setdefault(selector, {}).update(variables)

    def add_utilities(self, utilities: Mapping[str, Mapping[str, str]]) -> None:
        for selector, decls in utilities.items():
            self._utilities[selector] = dict(decls)

    def match_utilities(self, families: Iterable[UtilityFamily]) -> None:
        for family in families:
            if family.type not in self._supported_types:
                raise HostRegistrationError(
                    f"unsupported value type {family.type!r}", location=family.prefix
                )
            self._families.append(family)

    def rules(self) -> dict[str, Declarations]:
        """All rules in registration order: base scopes, utilities, families.

        Declarations of a selector registered more than once are merged, the
        later value winning per property.
        """
        rules: dict[str, Declarations] = {}
        for selector, variables in self._base.items():
            rules[selector] = dict(variables)
        for selector, decls in self._utilities.items():
            rules.setdefault(selector, {}).update(decls)
        for family in self._families:
            for selector, decls in family.rules().items():
                rules.setdefault(selector, {}).update(decls)
        return rules

    def render(self, indent: int = 2) -> str:
        """Render recorded rules; empty blocks are omitted."""
        prefix = " " * indent
        lines: list[str] = []
        for selector, decls in self.rules().items():
            if not decls:
                continue
            lines.append(f"{selector} {{")
            for name, value in decls.items():
                lines.append(f"{prefix}{name}: {value};")
            lines.append("}")
            lines.append("")
        return "\n".join(lines)
