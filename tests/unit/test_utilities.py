"""Tests for variable namespaces, font utilities and color utility families."""

from __future__ import annotations

from twtheme.core.utilities import (
    COLOR_PROPERTIES,
    UtilityFamily,
    build_base_variables,
    build_font_utilities,
    color_utility_families,
)


class TestBuildBaseVariables:
    """Tests for build_base_variables."""

    def test_order_and_names(self):
        variables = build_base_variables(
            {"h1": "2rem", "base": "16px"},
            {"primary": "Inter, sans-serif"},
            {"--color-primary": "#111"},
        )
        assert list(variables.items()) == [
            ("--text-h1", "2rem"),
            ("--text-base", "16px"),
            ("--font-primary", "Inter, sans-serif"),
            ("--color-primary", "#111"),
        ]

    def test_inputs_not_aliased(self):
        colors = {"--color-primary": "#111"}
        variables = build_base_variables({}, {}, colors)
        variables["--color-primary"] = "#000"
        assert colors["--color-primary"] == "#111"


class TestBuildFontUtilities:
    """Tests for build_font_utilities."""

    def test_families_then_sizes(self):
        utilities = build_font_utilities(
            {"primary": "Inter, sans-serif"},
            {"h1": "2rem", "h1-sm": "1.8rem", "base": "16px"},
        )
        assert utilities == {
            ".font-primary": {"font-family": "var(--font-primary)"},
            ".text-h1": {"font-size": "var(--text-h1)"},
            ".text-h1-sm": {"font-size": "var(--text-h1-sm)"},
            ".text-base": {"font-size": "var(--text-base)"},
        }
        assert list(utilities)[0] == ".font-primary"


class TestColorUtilityFamilies:
    """Tests for the bg/text/border/fill/stroke families."""

    def test_one_family_per_property(self):
        families = color_utility_families({"primary": "var(--color-primary)"})
        assert [family.prefix for family in families] == ["bg", "text", "border", "fill", "stroke"]
        assert all(family.type == "color" for family in families)

    def test_declarations(self):
        families = {family.prefix: family for family in color_utility_families({})}
        value = "var(--color-primary)"
        assert families["bg"].build(value) == {"background-color": value}
        assert families["text"].build(value) == {"color": value}
        assert families["border"].build(value) == {"border-color": value}
        assert families["fill"].build(value) == {"fill": value}
        assert families["stroke"].build(value) == {"stroke": value}

    def test_rule_count_is_properties_times_roles(self):
        roles = {
            "primary": "var(--color-primary)",
            "text": "var(--color-text)",
            "darkmode-primary": "var(--color-darkmode-primary)",
        }
        families = color_utility_families(roles)
        rules = {}
        for family in families:
            rules.update(family.rules())
        assert len(rules) == len(COLOR_PROPERTIES) * len(roles)
        assert rules[".bg-darkmode-primary"] == {
            "background-color": "var(--color-darkmode-primary)"
        }


class TestUtilityFamily:
    """Tests for UtilityFamily expansion."""

    def test_rules(self):
        family = UtilityFamily(
            prefix="outline",
            build=lambda value: {"outline-color": value},
            values={"brand": "var(--color-brand)"},
        )
        assert family.class_name("brand") == ".outline-brand"
        assert family.rules() == {".outline-brand": {"outline-color": "var(--color-brand)"}}
