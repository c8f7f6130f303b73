"""
Variable name normalization.

Figma variable names are slash-separated paths such as
``"Colors/Text/text-primary (900)"``. Every token category has its own rule
for turning that path into a Tailwind token key and a CSS custom property
name. All functions here are pure and deterministic; they are not injective,
so callers handle duplicate keys (first one wins).
"""

from __future__ import annotations

import re

_FIRST_PARENS = re.compile(r"\s*\([^)]*\)")
_PARENS_CONTENT = re.compile(r"\((.*?)\)")
_NUMERIC_PARENS = re.compile(r"\((\d+)\)")
_NON_KEY_CHARS = re.compile(r"[^a-z0-9-]+")
_WHITESPACE = re.compile(r"\s+")
_HYPHEN_RUNS = re.compile(r"-+")


# =============================================================================
# Shared helpers
# =============================================================================


def last_segment(name: str) -> str:
    """Last path segment ("Colors/Text/text-primary" -> "text-primary")."""
    return name.split("/")[-1]


def strip_parenthetical(text: str) -> str:
    """Remove the first parenthesized group and the whitespace before it."""
    return _FIRST_PARENS.sub("", text, count=1)


def sanitize(text: str) -> str:
    """Lowercase, replace runs of illegal characters with "-", trim hyphens."""
    return _NON_KEY_CHARS.sub("-", text.lower()).strip("-")


def collapse_hyphens(text: str) -> str:
    return _HYPHEN_RUNS.sub("-", text)


def parenthesized(text: str) -> str:
    """Content of the first parenthesized group, or "" if there is none."""
    match = _PARENS_CONTENT.search(text)
    return match.group(1) if match else ""


def mode_class_name(mode_name: str) -> str:
    """
    CSS class name for a mode.

    Examples:
        mode_class_name("Dark Mode")  # -> "dark-mode"
    """
    return re.sub(r"[^a-z0-9]+", "-", mode_name.lower()).strip("-")


def _strip_prefix(text: str, *prefixes: str) -> str:
    for prefix in prefixes:
        text = re.sub(f"^{re.escape(prefix)}", "", text)
    return text


def _simple_key(name: str, *prefixes: str) -> str:
    return strip_parenthetical(_strip_prefix(name, *prefixes)).lower()


def _with_suffix(base: str, suffix: str) -> str:
    return f"{base}-{suffix}" if suffix else base


def _filtered_reference(parts: list[str]) -> str:
    """
    Join path parts, dropping any part already contained in the last one.

    "Brand/brand-600" -> "brand-600", "Base/white" -> "base-white"
    """
    last = parts[-1]
    kept = [
        part
        for index, part in enumerate(parts)
        if index == len(parts) - 1 or part.lower() not in last.lower()
    ]
    joined = sanitize(strip_parenthetical("-".join(kept)))
    return collapse_hyphens(joined)


# =============================================================================
# Colors
# =============================================================================


def _primitive_segment(segment: str) -> str:
    text = re.sub(
        r"\s*\((.*?)\)",
        lambda m: "-" + _WHITESPACE.sub("-", m.group(1)),
        segment.lower(),
        count=1,
    )
    text = _WHITESPACE.sub("-", text)
    return re.sub(r"[^a-z0-9-]+", "", text).strip("-")


def primitive_color_key(name: str) -> str:
    """
    Token key for a primitive color.

    Examples:
        primitive_color_key("Colors/Gray blue/50")          # -> "gray-blue-50"
        primitive_color_key("Colors/Gray (light mode)/900") # -> "gray-light-mode-900"
        primitive_color_key("Colors/Base/white")            # -> "base-white"
    """
    parts = re.sub(r"^Colors/", "", name).split("/")
    return "-".join(_primitive_segment(part) for part in parts)


def primitive_color_config_path(name: str) -> list[str]:
    """
    Nested config path for a primitive color.

    All segments but the last are normalized; the last (the shade) is kept as is.

    Examples:
        primitive_color_config_path("Colors/Gray (light mode)/900")
        # -> ["theme", "colors", "gray-light-mode", "900"]
    """
    parts = re.sub(r"^Colors/", "", name).split("/")
    return ["theme", "colors", *(_primitive_segment(part) for part in parts[:-1]), parts[-1]]


def color_mode_key(name: str) -> str:
    """
    Token key for a semantic (mode-dependent) color.

    Examples:
        color_mode_key("Colors/Text/text-primary (900)")  # -> "text-primary-900"
    """
    last = last_segment(name)
    match = _NUMERIC_PARENS.search(last)
    return _with_suffix(sanitize(strip_parenthetical(last)), match.group(1) if match else "")


def referenced_color_property(name: str) -> str:
    """
    Custom property of the primitive color a semantic color points at.

    Examples:
        referenced_color_property("Colors/Gray (light mode)/900")
        # -> "color-gray-light-mode-900"
        referenced_color_property("Colors/Component/Colors/Utility/Gray/utility-gray-400")
        # -> "color-utility-gray-400"
        referenced_color_property("Colors/Base/white")
        # -> "color-base-white"
    """
    path = re.sub(r"^_Primitives/Colors/", "", name).replace("Colors/", "")
    parts = path.split("/")

    mode = parenthesized(parts[0])
    if parts[0].startswith("Gray") and mode and len(parts) > 1:
        return f"color-gray-{_WHITESPACE.sub('-', mode.lower())}-{parts[1]}"

    last = parts[-1]
    if "utility-" in last:
        utility_type = parts[-2].lower() if len(parts) > 1 else ""
        return f"color-utility-{utility_type}-{last.split('-')[-1]}"

    return f"color-{_filtered_reference(parts)}"


# =============================================================================
# Dimensions
# =============================================================================


def spacing_key(name: str) -> str:
    """"spacing-xl (16px)" -> "xl"."""
    return _simple_key(name, "spacing-")


def radius_key(name: str) -> str:
    """"radius-md" / "rounded-md" -> "md"."""
    return _simple_key(name, "radius-", "rounded-")


def width_key(name: str) -> str:
    """"width-xl (1280px)" -> "xl"."""
    return _simple_key(name, "width-")


def border_width_key(name: str) -> str:
    """"Border width/border-width-sm" -> "sm"."""
    return sanitize(_strip_prefix(last_segment(name), "border-width-"))


def border_width_property(name: str) -> str:
    """"Border width/border-width-sm" -> "spacing-border-width-sm"."""
    return f"spacing-{sanitize(last_segment(name))}"


def container_key(name: str) -> str:
    """"container-padding-desktop" -> "padding-desktop"."""
    return sanitize(_simple_key(name, "container-"))


def container_width_key(name: str) -> str:
    """"Container/lg (1024px)" -> "lg"."""
    return _simple_key(name, "Container/")


# =============================================================================
# Typography
# =============================================================================


def font_size_key(name: str) -> str:
    """"Font size/text-xl" -> "xl"."""
    return _simple_key(name, "Font size/", "text-")


def font_weight_key(name: str) -> str:
    """"Font weight/semibold" -> "semibold"."""
    return _simple_key(name, "Font weight/")


def font_family_key(name: str) -> str:
    """"Font family/font-family-body" -> "body"."""
    return _simple_key(name, "Font family/font-family-")


def line_height_key(name: str) -> str:
    """
    Token key for a line height.

    Examples:
        line_height_key("Line height/Default/text-xl")   # -> "xl"
        line_height_key("Line height/Leading tight/text-xl")  # -> "tight-xl"
    """
    parts = name.split("/")[1:]
    group = parts[0] if parts else ""
    size = parts[1] if len(parts) > 1 else ""
    if group == "Default":
        return _simple_key(size, "text-")
    category = group.replace("Leading ", "", 1).lower()
    return f"{category}-{_strip_prefix(size, 'text-').lower()}"


# =============================================================================
# Mode-dependent tokens
# =============================================================================


def radius_mode_key(name: str) -> str:
    """"Radius/button-radius (lg)" -> "button-radius-lg"."""
    last = last_segment(name)
    return _with_suffix(sanitize(strip_parenthetical(last)), parenthesized(last))


def referenced_radius_property(name: str) -> str:
    """
    Custom property of the primitive radius a radius mode points at.

    The "radius-"/"rounded-" prefix is dropped the same way ``radius_key`` does.

    Examples:
        referenced_radius_property("_Primitives/Radius/radius-md")  # -> "radius-md"
    """
    path = re.sub(r"^_Primitives/Radius/", "", name).replace("Radius/", "")
    return f"radius-{_strip_prefix(_filtered_reference(path.split('/')), 'radius-', 'rounded-')}"


def border_width_mode_key(name: str) -> str:
    """"Button/button-border-width" -> "button"."""
    last = re.sub(r"-border-width$", "", _strip_prefix(last_segment(name), "border-width-"))
    return sanitize(last)


def referenced_border_width_property(name: str) -> str:
    """"Border width/xs" -> "spacing-border-width-xs"."""
    return f"spacing-border-width-{collapse_hyphens(sanitize(last_segment(name)))}"


def font_family_mode_key(name: str) -> str:
    """"Font family/font-family-display (brand)" -> "display-brand"."""
    last = last_segment(name)
    return _with_suffix(
        sanitize(strip_parenthetical(_strip_prefix(last, "font-family-"))), parenthesized(last)
    )


def font_family_mode_property(name: str) -> str:
    """"Font family/font-family-display (brand)" -> "font-family-display-brand"."""
    last = last_segment(name)
    return _with_suffix(sanitize(strip_parenthetical(last)), parenthesized(last))


def font_size_mode_key(name: str) -> str:
    """"Font size/font-size-xs" -> "xs", "Font size/text-xs" -> "text-xs"."""
    return sanitize(_strip_prefix(last_segment(name), "font-size-"))


def font_size_mode_property(name: str) -> str:
    """"Font size/text-xs" -> "font-size-text-xs"."""
    return f"font-size-{sanitize(last_segment(name))}"


def referenced_font_size_property(name: str) -> str:
    return f"font-size-{collapse_hyphens(sanitize(last_segment(name)))}"


def font_weight_mode_key(name: str) -> str:
    """"Font weight/Display/bold" -> "display-bold"."""
    return "-".join(name.split("/")[1:]).lower()


def referenced_font_weight_property(name: str) -> str:
    return f"font-weight-{sanitize(last_segment(name))}"


def line_height_mode_key(name: str) -> str:
    """"Line height/Display/Leading tight" -> "display-leading-tight"."""
    return _WHITESPACE.sub("-", "-".join(name.split("/")[1:]).lower())


def referenced_line_height_property(name: str) -> str:
    """"Line height/Leading Tight" -> "line-height-leading-tight"."""
    text = _WHITESPACE.sub("-", last_segment(name).lower())
    text = re.sub(r"[^a-z0-9-]", "", text).strip("-")
    return f"line-height-{collapse_hyphens(text)}"
