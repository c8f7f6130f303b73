"""
Unit conversion and alias resolution.

Figma numbers are unitless pixels; Tailwind output wants rem. Variable values
can alias other variables (possibly across collections), so conversions
resolve references down to a literal first.
"""

from __future__ import annotations

import logging
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from figwind.figma.models import Reference, TokenDataset

logger = logging.getLogger(__name__)

_PX_RE = re.compile(r"\((\d+)px\)")
_THOUSANDTH = Decimal("0.001")


def format_number(value: float | int) -> str:
    """
    Render a number the way JavaScript template strings do.

    Examples:
        format_number(32.0)  # -> "32"
        format_number(1.5)   # -> "1.5"
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_fixed(value: float) -> str:
    """
    Format a number with three decimals, rounding ties away from zero.

    Matches JavaScript's ``toFixed(3)``; f-string formatting rounds ties to even.

    Examples:
        to_fixed(0.0625)  # -> "0.063"
    """
    return str(Decimal(value).quantize(_THOUSANDTH, rounding=ROUND_HALF_UP))


def px_to_rem(pixels: float) -> str:
    """
    Convert a pixel value to rem (16px base).

    Returns "0" for zero, otherwise a three-decimal rem value.

    Examples:
        px_to_rem(16)  # -> "1.000rem"
        px_to_rem(24)  # -> "1.500rem"
    """
    if pixels == 0:
        return "0"
    return f"{to_fixed(pixels / 16)}rem"


def resolve_alias(
    value: Any,
    dataset: TokenDataset,
    mode_id: str | None = None,
    _visited: frozenset[str] = frozenset(),
) -> Any:
    """
    Follow a reference chain down to a literal value.

    Literals are returned unchanged. A reference takes the target's value for
    ``mode_id`` when the target defines it, otherwise the target's first mode.
    Missing targets and cycles log a warning and resolve to 0.

    Args:
        value: Mode value (literal or Reference)
        dataset: Dataset used to look up targets
        mode_id: Preferred mode on the referenced variable

    Returns:
        The resolved literal value
    """
    if not isinstance(value, Reference):
        return value

    if value.target_id in _visited:
        logger.warning("Circular variable reference detected at: %s", value.target_id)
        return 0

    target = dataset.variable(value.target_id)
    if target is None:
        logger.warning("Could not find referenced variable: %s", value.target_id)
        return 0

    if mode_id is not None and mode_id in target.values_by_mode:
        resolved = target.values_by_mode[mode_id]
    else:
        resolved = target.first_value()

    return resolve_alias(resolved, dataset, mode_id, _visited | {value.target_id})


def extract_pixel_value(value: Any, dataset: TokenDataset, context: str = "value") -> float:
    """
    Extract a pixel number from a mode value.

    Numbers pass through, strings like ``"md (12px)"`` yield 12, references
    are resolved first. Anything else logs a warning and yields 0.
    """
    if isinstance(value, bool):
        logger.warning("Unexpected value type for %s: %r", context, value)
        return 0
    if isinstance(value, int | float):
        return value
    if isinstance(value, str):
        match = _PX_RE.search(value)
        return int(match.group(1)) if match else 0
    if isinstance(value, Reference):
        return extract_pixel_value(resolve_alias(value, dataset), dataset, context)

    logger.warning("Unexpected value type for %s: %r", context, value)
    return 0
