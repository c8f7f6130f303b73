"""
Mode-dependent processors for radius, border width and typography.

Colors live in ``colors.py``; every processor here follows the same scheme:
default mode in ``:root`` plus ``theme.extend.<category>``, other modes in a
``.<mode>`` block.
"""

from __future__ import annotations

from typing import Any

from figwind.figma import naming
from figwind.figma.converters.processors.base import ModeProcessor
from figwind.figma.models import Mode, Reference, ResolvedType, TokenDataset, Variable
from figwind.figma.units import format_number, px_to_rem, resolve_alias


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


class RadiusModesProcessor(ModeProcessor):
    """``Radius/button-radius (lg)`` -> ``--radius-button-radius-lg: var(--radius-lg);``"""

    collection_names = ("Radius modes",)
    resolved_type = ResolvedType.FLOAT
    property_prefix = "radius"
    config_prefix = ("theme", "extend", "borderRadius")

    def token_key(self, name: str) -> str:
        return naming.radius_mode_key(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        return f"var(--{naming.referenced_radius_property(target.name)})"

    def literal_value(self, value: Any) -> str | None:
        if _is_number(value):
            return px_to_rem(value)
        return None


class BorderWidthModesProcessor(ModeProcessor):
    collection_names = ("Border width modes",)
    property_prefix = "spacing-border-width"
    config_prefix = ("theme", "extend", "borderWidth")

    def token_key(self, name: str) -> str:
        return naming.border_width_mode_key(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        return f"var(--{naming.referenced_border_width_property(target.name)})"


class FontFamilyModesProcessor(ModeProcessor):
    """
    Font families per brand/mode.

    References resolve to the referenced family name (for the same mode when
    the target defines it) rather than a ``var()`` pointer.
    """

    collection_names = ("Typography",)
    resolved_type = ResolvedType.STRING
    name_contains = "Font family/"
    config_prefix = ("theme", "extend", "fontFamily")

    def token_key(self, name: str) -> str:
        return naming.font_family_mode_key(name)

    def property_name(self, name: str, key: str) -> str:
        return naming.font_family_mode_property(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        resolved = resolve_alias(reference, dataset, mode.mode_id)
        return resolved if isinstance(resolved, str) else None

    def literal_value(self, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class FontSizeModesProcessor(ModeProcessor):
    """Numbers become ``<n>px``; references point at the primitive font size."""

    collection_names = ("Typography",)
    name_contains = "Font size/"
    config_prefix = ("theme", "extend", "fontSize")

    def token_key(self, name: str) -> str:
        return naming.font_size_mode_key(name)

    def property_name(self, name: str, key: str) -> str:
        return naming.font_size_mode_property(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        return f"var(--{naming.referenced_font_size_property(target.name)})"

    def literal_value(self, value: Any) -> str | None:
        return f"{format_number(value)}px" if _is_number(value) else None


class FontWeightModesProcessor(ModeProcessor):
    collection_names = ("Typography",)
    name_contains = "Font weight/"
    property_prefix = "font-weight"
    config_prefix = ("theme", "extend", "fontWeight")

    def token_key(self, name: str) -> str:
        return naming.font_weight_mode_key(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        return f"var(--{naming.referenced_font_weight_property(target.name)})"

    def literal_value(self, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class LineHeightModesProcessor(ModeProcessor):
    collection_names = ("Typography",)
    name_contains = "Line height/"
    property_prefix = "line-height"
    config_prefix = ("theme", "extend", "lineHeight")

    def token_key(self, name: str) -> str:
        return naming.line_height_mode_key(name)

    def reference_value(
        self, reference: Reference, target: Variable, mode: Mode, dataset: TokenDataset
    ) -> str | None:
        return f"var(--{naming.referenced_line_height_property(target.name)})"

    def literal_value(self, value: Any) -> str | None:
        if isinstance(value, str):
            return value
        return format_number(value) if _is_number(value) else None
