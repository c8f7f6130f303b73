"""
Color processors: primitive palette and semantic (mode-dependent) colors.
"""

from __future__ import annotations

import logging
from typing import Any

from figwind.figma import naming
from figwind.figma.color import color_to_rgba, css_color_to_rgba
from figwind.figma.converters.processors.base import ModeProcessor, TokenProcessor
from figwind.figma.models import (
    Color,
    Mode,
    Reference,
    ResolvedType,
    TokenDataset,
    Variable,
)
from figwind.figma.units import resolve_alias

logger = logging.getLogger(__name__)


class PrimitivesProcessor(TokenProcessor):
    """
    Primitive palette (``_primitives`` / ``colors`` collections).

    "Colors/Gray (light mode)/900" becomes ``--color-gray-light-mode-900`` and
    ``theme.colors.gray-light-mode.900`` in the config.
    """

    collection_names = ("_primitives", "colors")
    case_sensitive = False
    resolved_type = ResolvedType.COLOR
    property_prefix = "color"
    skip_none = True

    def token_key(self, name: str) -> str:
        return naming.primitive_color_key(name)

    def config_path(self, name: str, key: str) -> list[str] | None:
        return naming.primitive_color_config_path(name)

    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        resolved = resolve_alias(value, dataset)
        try:
            if isinstance(resolved, Color):
                return color_to_rgba(resolved)
            if isinstance(resolved, str):
                return css_color_to_rgba(resolved)
            raise ValueError(f"not a color: {resolved!r}")
        except ValueError as e:
            logger.warning("Failed to convert color value for variable %r: %s", variable.name, e)
            return None


class ColorModesProcessor(ModeProcessor):
    """
    Semantic colors with one value per mode (``Color modes`` collection).

    Each value points at a primitive: ``--color-text-primary-900:
    var(--color-gray-light-mode-900)`` in ``:root`` and the dark-mode pointer
    in ``.dark``.
    """

    collection_names = ("Color modes", "1. Color modes")
    resolved_type = ResolvedType.COLOR
    property_prefix = "color"
    config_prefix = ("theme", "extend", "colors")

    def token_key(self, name: str) -> str:
        return naming.color_mode_key(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        return f"var(--{naming.referenced_color_property(target.name)})"

    def literal_value(self, value: Any) -> str | None:
        if isinstance(value, Color):
            return color_to_rgba(value)
        return None
