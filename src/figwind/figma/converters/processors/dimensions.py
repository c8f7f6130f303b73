"""
Dimension processors: spacing, radius, widths, border widths and containers.

Pixel values are emitted as rem (16px base) except border widths, which keep
the raw Figma value, and container widths, which become screen breakpoints
in px.
"""

from __future__ import annotations

import logging
from typing import Any

from figwind.figma import naming
from figwind.figma.converters.processors.base import TokenProcessor
from figwind.figma.models import ResolvedType, TokenDataset, Variable
from figwind.figma.units import extract_pixel_value, format_number, px_to_rem, resolve_alias

logger = logging.getLogger(__name__)


class RemProcessor(TokenProcessor):
    """Numeric tokens converted from px to rem."""

    resolved_type = ResolvedType.FLOAT
    context = "value"

    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        return px_to_rem(extract_pixel_value(value, dataset, self.context))


class SpacingProcessor(RemProcessor):
    """``"spacing-xl" = 32`` -> ``--spacing-xl: 2.000rem;``"""

    collection_names = ("3. Spacing", "Spacing")
    property_prefix = "spacing"
    config_prefix = ("theme", "extend", "spacing")
    context = "spacing"
    skip_none = True

    def token_key(self, name: str) -> str:
        return naming.spacing_key(name)


class RadiusProcessor(RemProcessor):
    collection_names = ("2. Radius", "Radius", "Border radius")
    property_prefix = "radius"
    config_prefix = ("theme", "borderRadius")
    context = "radius"
    skip_none = True

    def token_key(self, name: str) -> str:
        return naming.radius_key(name)


class WidthsProcessor(RemProcessor):
    collection_names = ("4. Widths", "Max-width")
    property_prefix = "spacing-width"
    config_prefix = ("theme", "extend", "width")
    context = "width"
    skip_none = True

    def token_key(self, name: str) -> str:
        return naming.width_key(name)


class BorderWidthProcessor(TokenProcessor):
    """
    Border widths, kept as raw Figma values.

    References are resolved through the collection's default mode; only
    string or numeric results are emitted.
    """

    collection_names = ("Border width",)
    resolved_type = ResolvedType.FLOAT
    config_prefix = ("theme", "borderWidth")
    skip_none = True

    def token_key(self, name: str) -> str:
        return naming.border_width_key(name)

    def property_name(self, name: str, key: str) -> str:
        return naming.border_width_property(name)

    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        resolved = resolve_alias(value, dataset)
        if isinstance(resolved, bool) or not isinstance(resolved, str | int | float):
            logger.warning("Unexpected border width value for %r: %r", variable.name, resolved)
            return None
        css = resolved if isinstance(resolved, str) else format_number(resolved)
        return css or None

    def config_value(self, property_name: str, value: Any, css: str) -> Any:
        return css


class ContainersProcessor(RemProcessor):
    """
    Container padding and max width (``5. Containers``).

    ``container-padding-desktop`` goes to ``theme.container.padding.desktop``,
    ``container-max-width-*`` to ``theme.container.maxWidth``; other tokens
    only get a CSS variable.
    """

    collection_names = ("5. Containers",)
    property_prefix = "container"
    context = "container"

    def token_key(self, name: str) -> str:
        return naming.container_key(name)

    def config_path(self, name: str, key: str) -> list[str] | None:
        if key.startswith("padding-"):
            return ["theme", "container", "padding", key.replace("padding-", "", 1)]
        if key.startswith("max-width-"):
            return ["theme", "container", "maxWidth"]
        return None


class ContainerWidthsProcessor(TokenProcessor):
    """Container widths become screen breakpoints in px."""

    collection_names = ("Container",)
    resolved_type = ResolvedType.FLOAT
    property_prefix = "container"
    config_prefix = ("theme", "screens")

    def token_key(self, name: str) -> str:
        return naming.container_width_key(name)

    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        return f"{format_number(extract_pixel_value(value, dataset, 'container width'))}px"
