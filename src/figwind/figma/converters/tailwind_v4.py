"""
Tailwind CSS v4 output: a single ``tailwind4.css`` with an ``@theme`` block.

Tailwind v4 has no JS config; the config tree collected by the processors is
flattened into theme variables instead, one commented group per category.
"""

from __future__ import annotations

from typing import Any

from figwind.figma.converters.base import FormatHolder, OutputFormat, VariableConverter
from figwind.figma.converters.processors import (
    TOKEN_PROCESSORS,
    ColorModesProcessor,
    VariableProcessor,
)

CSS_FILENAME = "tailwind4.css"

DEFAULT_PROCESSORS: tuple[type[VariableProcessor], ...] = (
    *TOKEN_PROCESSORS,
    ColorModesProcessor,
)

# (comment title, config path, theme variable prefix, reset namespace)
THEME_GROUPS: tuple[tuple[str, tuple[str, ...], str, str | None], ...] = (
    ("Spacing", ("theme", "extend", "spacing"), "spacing", None),
    ("Widths", ("theme", "extend", "width"), "spacing-width", None),
    ("Border Radius", ("theme", "borderRadius"), "radius", "radius"),
    ("Font Sizes", ("theme", "fontSize"), "text", "text"),
    ("Font Weights", ("theme", "fontWeight"), "font-weight", "font-weight"),
    ("Font Families", ("theme", "fontFamily"), "font", "font"),
    ("Line Heights", ("theme", "lineHeight"), "leading", "leading"),
    ("Screen Breakpoints", ("theme", "screens"), "breakpoint", "breakpoint"),
)


def _lookup(config: dict[str, Any], path: tuple[str, ...]) -> dict[str, Any]:
    node: Any = config
    for key in path:
        if not isinstance(node, dict):
            return {}
        node = node.get(key)
    return node if isinstance(node, dict) else {}


def _flatten_colors(colors: dict[str, Any], prefix: str = "") -> list[str]:
    """Flatten nested color groups ("gray-light-mode" -> {"900": ...}) into theme lines."""
    lines: list[str] = []
    for key, value in colors.items():
        name = "-".join(key.lower().split())
        if isinstance(value, dict):
            lines.extend(_flatten_colors(value, f"{prefix}{name}-"))
        else:
            lines.append(f"--color-{prefix}{name}: {value};")
    return lines


def render_theme(config: dict[str, Any]) -> list[str]:
    """Theme block lines (unindented; blank lines separate groups)."""
    lines: list[str] = []

    colors = _lookup(config, ("theme", "colors"))
    extended_colors = _lookup(config, ("theme", "extend", "colors"))
    if colors or extended_colors:
        lines.append("/* Colors */")
        lines.append("--color-*: initial;")
        lines.extend(_flatten_colors(colors))
        lines.extend(f"--color-{key}: {value};" for key, value in extended_colors.items())
        lines.append("")

    for title, path, prefix, reset in THEME_GROUPS:
        values = _lookup(config, path)
        if not values:
            continue
        lines.append(f"/* {title} */")
        if reset:
            lines.append(f"--{reset}-*: initial;")
        lines.extend(f"--{prefix}-{key}: {value};" for key, value in values.items())
        lines.append("")

    while lines and not lines[-1]:
        lines.pop()
    return lines


class TailwindV4FormatHolder(FormatHolder):
    """Renders ``:root``, per-mode blocks and an ``@theme`` block into one CSS file."""

    def get_output_files(self) -> dict[str, str]:
        theme = "\n".join(f"  {line}" if line else "" for line in render_theme(self.config))

        blocks = ['@import "tailwindcss";', f":root {{\n{self.render_root()}\n}}"]
        scoped = self.render_scoped().rstrip("\n")
        if scoped:
            blocks.append(scoped)
        blocks.append(f"@theme {{\n{theme}\n}}")

        return {CSS_FILENAME: "\n\n".join(blocks) + "\n"}


class TailwindV4Converter(VariableConverter):
    output_format = OutputFormat.TAILWIND4
    default_processors = DEFAULT_PROCESSORS

    def initialize(self) -> TailwindV4FormatHolder:
        return TailwindV4FormatHolder()
