"""Tests for Figma variable name normalization."""

from __future__ import annotations

import pytest

from figwind.figma import naming


class TestHelpers:
    def test_last_segment(self) -> None:
        assert naming.last_segment("Colors/Text/text-primary") == "text-primary"
        assert naming.last_segment("plain") == "plain"

    def test_strip_parenthetical_removes_first_group_only(self) -> None:
        assert naming.strip_parenthetical("xl (16px)") == "xl"
        assert naming.strip_parenthetical("a (b) c (d)") == "a c (d)"

    def test_sanitize(self) -> None:
        assert naming.sanitize("  Text Primary!! ") == "text-primary"
        assert naming.sanitize("--a__b--") == "a-b"

    def test_parenthesized(self) -> None:
        assert naming.parenthesized("button-radius (lg)") == "lg"
        assert naming.parenthesized("no-parens") == ""

    @pytest.mark.parametrize(
        "mode_name,expected",
        [
            ("Dark Mode", "dark-mode"),
            ("Light mode", "light-mode"),
            ("Default (compact)", "default-compact"),
            ("Brand #2", "brand-2"),
        ],
    )
    def test_mode_class_name(self, mode_name: str, expected: str) -> None:
        assert naming.mode_class_name(mode_name) == expected


class TestColorNames:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Colors/Gray blue/50", "gray-blue-50"),
            ("Colors/Gray (light mode)/900", "gray-light-mode-900"),
            ("Colors/Base/white", "base-white"),
            ("Colors/Brand/600", "brand-600"),
        ],
    )
    def test_primitive_color_key(self, name: str, expected: str) -> None:
        assert naming.primitive_color_key(name) == expected

    def test_primitive_color_config_path_keeps_shade(self) -> None:
        assert naming.primitive_color_config_path("Colors/Gray (light mode)/900") == [
            "theme",
            "colors",
            "gray-light-mode",
            "900",
        ]

    def test_color_mode_key_appends_numeric_suffix(self) -> None:
        assert naming.color_mode_key("Colors/Text/text-primary (900)") == "text-primary-900"

    def test_color_mode_key_ignores_non_numeric_suffix(self) -> None:
        assert naming.color_mode_key("Colors/Text/text-white (base)") == "text-white"

    def test_color_mode_key_without_suffix(self) -> None:
        assert naming.color_mode_key("Colors/Background/bg-primary") == "bg-primary"

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Colors/Gray (light mode)/900", "color-gray-light-mode-900"),
            ("_Primitives/Colors/Gray (dark mode)/50", "color-gray-dark-mode-50"),
            (
                "Colors/Component/Colors/Utility/Gray/utility-gray-400",
                "color-utility-gray-400",
            ),
            ("Colors/Base/white", "color-base-white"),
            ("Colors/Brand/brand-600", "color-brand-600"),
            ("Colors/Gray/500", "color-gray-500"),
        ],
    )
    def test_referenced_color_property(self, name: str, expected: str) -> None:
        assert naming.referenced_color_property(name) == expected


class TestDimensionNames:
    def test_spacing_key(self) -> None:
        assert naming.spacing_key("spacing-xl (16px)") == "xl"
        assert naming.spacing_key("spacing-none") == "none"

    def test_radius_key_strips_both_prefixes(self) -> None:
        assert naming.radius_key("radius-md") == "md"
        assert naming.radius_key("rounded-full") == "full"

    def test_width_key(self) -> None:
        assert naming.width_key("width-xl (1280px)") == "xl"

    def test_border_width_names(self) -> None:
        name = "Border width/border-width-sm"
        assert naming.border_width_key(name) == "sm"
        assert naming.border_width_property(name) == "spacing-border-width-sm"

    def test_container_key(self) -> None:
        assert naming.container_key("container-padding-desktop") == "padding-desktop"
        assert naming.container_key("container-max-width-desktop") == "max-width-desktop"

    def test_container_width_key(self) -> None:
        assert naming.container_width_key("Container/lg (1024px)") == "lg"


class TestTypographyNames:
    def test_font_size_key(self) -> None:
        assert naming.font_size_key("Font size/text-xl") == "xl"

    def test_font_weight_key(self) -> None:
        assert naming.font_weight_key("Font weight/semibold") == "semibold"

    def test_font_family_key(self) -> None:
        assert naming.font_family_key("Font family/font-family-body") == "body"

    def test_line_height_key_default_group(self) -> None:
        assert naming.line_height_key("Line height/Default/text-xl") == "xl"

    def test_line_height_key_leading_group(self) -> None:
        assert naming.line_height_key("Line height/Leading tight/text-xl") == "tight-xl"


class TestModeNames:
    def test_radius_mode_key(self) -> None:
        assert naming.radius_mode_key("Radius/button-radius (lg)") == "button-radius-lg"

    def test_referenced_radius_property(self) -> None:
        assert naming.referenced_radius_property("_Primitives/Radius/radius-md") == "radius-md"
        assert naming.referenced_radius_property("Radius/lg") == "radius-lg"

    def test_border_width_mode_key(self) -> None:
        assert naming.border_width_mode_key("Button/button-border-width") == "button"

    def test_referenced_border_width_property(self) -> None:
        assert (
            naming.referenced_border_width_property("Border width/xs")
            == "spacing-border-width-xs"
        )

    def test_font_family_mode_names(self) -> None:
        name = "Font family/font-family-display (brand)"
        assert naming.font_family_mode_key(name) == "display-brand"
        assert naming.font_family_mode_property(name) == "font-family-display-brand"

    def test_font_size_mode_names(self) -> None:
        assert naming.font_size_mode_key("Font size/font-size-xs") == "xs"
        assert naming.font_size_mode_key("Font size/text-xs") == "text-xs"
        assert naming.font_size_mode_property("Font size/text-xs") == "font-size-text-xs"
        assert (
            naming.referenced_font_size_property("_Primitives/Typography/Font size/xs")
            == "font-size-xs"
        )

    def test_font_weight_mode_names(self) -> None:
        assert naming.font_weight_mode_key("Font weight/Display/bold") == "display-bold"
        assert naming.referenced_font_weight_property("Font weight/Bold") == "font-weight-bold"

    def test_line_height_mode_names(self) -> None:
        assert (
            naming.line_height_mode_key("Line height/Display/Leading tight")
            == "display-leading-tight"
        )
        assert (
            naming.referenced_line_height_property("Line height/Leading Tight")
            == "line-height-leading-tight"
        )
