"""
Typography processors for the ``6. Typography`` collection.
"""

from __future__ import annotations

import logging
from typing import Any

from figwind.figma import naming
from figwind.figma.converters.processors.base import TokenProcessor
from figwind.figma.converters.processors.dimensions import RemProcessor
from figwind.figma.models import ResolvedType, TokenDataset, Variable
from figwind.figma.units import format_number, resolve_alias

logger = logging.getLogger(__name__)


def _literal_text(value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
    resolved = resolve_alias(value, dataset)
    if isinstance(resolved, str):
        return resolved
    if isinstance(resolved, int | float) and not isinstance(resolved, bool):
        return format_number(resolved)
    logger.warning("Unexpected value for %r: %r", variable.name, resolved)
    return None


class FontSizeProcessor(RemProcessor):
    """``Font size/text-xl`` = 20 -> ``--font-size-xl: 1.250rem;``"""

    collection_names = ("6. Typography",)
    name_prefix = "Font size/"
    property_prefix = "font-size"
    config_prefix = ("theme", "fontSize")
    context = "font size"

    def token_key(self, name: str) -> str:
        return naming.font_size_key(name)


class FontWeightProcessor(TokenProcessor):
    """Font weights are emitted as quoted strings."""

    collection_names = ("6. Typography",)
    resolved_type = ResolvedType.STRING
    name_prefix = "Font weight/"
    property_prefix = "font-weight"
    config_prefix = ("theme", "fontWeight")

    def token_key(self, name: str) -> str:
        return naming.font_weight_key(name)

    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        text = _literal_text(value, dataset, variable)
        return f'"{text}"' if text is not None else None


class FontFamilyProcessor(TokenProcessor):
    collection_names = ("6. Typography", "Typography")
    resolved_type = ResolvedType.STRING
    name_prefix = "Font family/"
    property_prefix = "font-family"
    config_prefix = ("theme", "fontFamily")

    def token_key(self, name: str) -> str:
        return naming.font_family_key(name)

    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        return _literal_text(value, dataset, variable)


class LineHeightProcessor(RemProcessor):
    """
    Line heights, grouped by leading.

    ``Line height/Default/text-xl`` -> ``--line-height-xl``,
    ``Line height/Leading tight/text-xl`` -> ``--line-height-tight-xl``.
    """

    collection_names = ("6. Typography",)
    name_prefix = "Line height/"
    property_prefix = "line-height"
    config_prefix = ("theme", "lineHeight")
    context = "line height"

    def token_key(self, name: str) -> str:
        return naming.line_height_key(name)
