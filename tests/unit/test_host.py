"""Tests for host registration and the stylesheet host."""

from __future__ import annotations

import pytest

from twtheme import (
    HostRegistrationError,
    StylesheetHost,
    UtilityHost,
    derive_tokens,
    register_with_host,
)
from twtheme.core.gradients import THREE_STOP_CHAIN, TWO_STOP_CHAIN
from twtheme.core.utilities import COLOR_PROPERTIES, UtilityFamily


class RecordingHost:
    """Host double that records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, object]] = []

    def add_base(self, scopes):
        self.calls.append(("add_base", scopes))

    def add_utilities(self, utilities):
        self.calls.append(("add_utilities", utilities))

    def match_utilities(self, families):
        self.calls.append(("match_utilities", list(families)))


class TestRegisterWithHost:
    """Tests for register_with_host."""

    def test_call_sequence(self, minimal_theme_data):
        bundle = derive_tokens(minimal_theme_data)
        host = RecordingHost()
        assert isinstance(host, UtilityHost)

        register_with_host(bundle, host)

        assert [name for name, _ in host.calls] == [
            "add_base",
            "add_utilities",
            "match_utilities",
            "match_utilities",
        ]
        scopes = host.calls[0][1]
        assert scopes[":root"]["--color-primary"] == "#0066cc"
        assert scopes[".dark"] == {"--color-darkmode-primary": "#99ccff"}
        assert [f.prefix for f in host.calls[2][1]] == list(COLOR_PROPERTIES)
        assert [f.prefix for f in host.calls[3][1]] == ["from", "to", "via"]

    def test_custom_selectors(self, minimal_theme_data):
        bundle = derive_tokens(minimal_theme_data)
        host = RecordingHost()
        register_with_host(
            bundle, host, root_selector="html", dark_selector='[data-theme="dark"]'
        )
        assert set(host.calls[0][1]) == {"html", '[data-theme="dark"]'}

    def test_host_cannot_mutate_bundle(self, minimal_theme_data):
        bundle = derive_tokens(minimal_theme_data)
        host = RecordingHost()
        register_with_host(bundle, host)
        host.calls[0][1][":root"]["--color-primary"] = "#000000"
        assert bundle.base_variables["--color-primary"] == "#0066cc"


class TestStylesheetHost:
    """Tests for StylesheetHost."""

    def test_rules(self, theme_data):
        bundle = derive_tokens(theme_data)
        host = StylesheetHost()
        register_with_host(bundle, host)
        rules = host.rules()

        assert rules[":root"] == bundle.base_variables
        assert rules[".dark"] == bundle.dark_variables
        assert rules[".font-primary"] == {"font-family": "var(--font-primary)"}
        assert rules[".bg-darkmode-body"] == {"background-color": "var(--color-darkmode-body)"}
        assert rules[".border-border"] == {"border-color": "var(--color-border)"}
        assert rules[".via-text"] == {
            "--tw-gradient-via": "var(--color-text)",
            "--tw-gradient-via-stops": THREE_STOP_CHAIN,
        }
        assert rules[".to-primary"]["--tw-gradient-stops"] == TWO_STOP_CHAIN

    def test_color_rule_count(self, theme_data):
        bundle = derive_tokens(theme_data)
        host = StylesheetHost()
        register_with_host(bundle, host)
        rules = host.rules()

        prefixes = tuple(f".{prefix}-" for prefix in ("bg", "border", "fill", "stroke"))
        counted = [selector for selector in rules if selector.startswith(prefixes)]
        assert len(counted) == 4 * len(bundle.color_roles)

    def test_render(self, minimal_theme_data):
        host = StylesheetHost()
        register_with_host(derive_tokens(minimal_theme_data), host)
        css = host.render()

        assert ":root {\n  --text-h6: 1.25rem;" in css
        assert ".dark {\n  --color-darkmode-primary: #99ccff;\n}" in css
        assert ".bg-primary {\n  background-color: var(--color-primary);\n}" in css
        assert ".text-darkmode-primary {\n  color: var(--color-darkmode-primary);\n}" in css

    def test_render_skips_empty_blocks(self):
        host = StylesheetHost()
        register_with_host(derive_tokens({}), host)
        css = host.render()
        assert ".dark" not in css
        assert ".bg-" not in css

    def test_unsupported_type_rejected(self):
        host = StylesheetHost()
        family = UtilityFamily(prefix="w", build=lambda v: {"width": v}, values={}, type="length")
        with pytest.raises(HostRegistrationError) as exc_info:
            host.match_utilities([family])
        assert exc_info.value.location == "w"
        assert "unsupported value type 'length'" in str(exc_info.value)
        assert host.rules() == {}

    def test_supported_types_configurable(self):
        host = StylesheetHost(supported_types=("color", "length"))
        family = UtilityFamily(
            prefix="w", build=lambda v: {"width": v}, values={"full": "100%"}, type="length"
        )
        host.match_utilities([family])
        assert host.rules() == {".w-full": {"width": "100%"}}
