"""
Tailwind CSS v3 output: ``tailwind3.css`` plus ``tailwind3.config.js``.
"""

from __future__ import annotations

import re
from typing import Any

from figwind.figma.converters.base import FormatHolder, OutputFormat, VariableConverter
from figwind.figma.converters.processors import (
    TOKEN_PROCESSORS,
    BorderWidthModesProcessor,
    ColorModesProcessor,
    FontFamilyModesProcessor,
    FontSizeModesProcessor,
    FontWeightModesProcessor,
    LineHeightModesProcessor,
    RadiusModesProcessor,
    VariableProcessor,
)
from figwind.figma.units import format_number

CSS_FILENAME = "tailwind3.css"
CONFIG_FILENAME = "tailwind3.config.js"

CSS_PREAMBLE = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"

_NUMERIC_KEY = re.compile(r"^\d+$")

DEFAULT_PROCESSORS: tuple[type[VariableProcessor], ...] = (
    *TOKEN_PROCESSORS,
    ColorModesProcessor,
    RadiusModesProcessor,
    BorderWidthModesProcessor,
    FontFamilyModesProcessor,
    FontSizeModesProcessor,
    FontWeightModesProcessor,
    LineHeightModesProcessor,
)


def _format_key(key: str) -> str:
    return key if _NUMERIC_KEY.match(key) else f'"{key}"'


def _format_leaf(value: Any) -> str:
    if isinstance(value, int | float) and not isinstance(value, bool):
        value = format_number(value)
    return f'"{value}"'


def render_config(config: dict[str, Any]) -> str:
    """
    Render the config tree as a CommonJS Tailwind config.

    Numeric keys are left bare, other keys and all leaf values are
    double-quoted; the last entry of each level has no trailing comma.
    """
    lines = ["module.exports = {"]

    def build(node: dict[str, Any], level: int) -> None:
        indent = "  " * level
        entries = list(node.items())
        for index, (key, value) in enumerate(entries):
            comma = "" if index == len(entries) - 1 else ","
            if isinstance(value, dict):
                lines.append(f"{indent}{_format_key(key)}: {{")
                build(value, level + 1)
                lines.append(f"{indent}}}{comma}")
            else:
                lines.append(f"{indent}{_format_key(key)}: {_format_leaf(value)}{comma}")

    build(config, 1)
    lines.append("};")
    return "\n".join(lines)


class TailwindV3FormatHolder(FormatHolder):
    """Renders a CSS file with ``@tailwind`` directives and a JS config file."""

    def get_output_files(self) -> dict[str, str]:
        css = f"{CSS_PREAMBLE}\n:root {{\n{self.render_root()}\n}}\n\n{self.render_scoped()}"
        return {
            CSS_FILENAME: css,
            CONFIG_FILENAME: render_config(self.config),
        }


class TailwindV3Converter(VariableConverter):
    output_format = OutputFormat.TAILWIND3
    default_processors = DEFAULT_PROCESSORS

    def initialize(self) -> TailwindV3FormatHolder:
        return TailwindV3FormatHolder()
