"""
Token category processors.

- colors.py: primitive palette and semantic color modes
- dimensions.py: spacing, radius, widths, border widths, containers
- typography.py: font sizes, weights, families, line heights
- modes.py: mode-dependent radius, border width and typography
"""

from .base import ModeProcessor, TokenProcessor, VariableProcessor
from .colors import ColorModesProcessor, PrimitivesProcessor
from .dimensions import (
    BorderWidthProcessor,
    ContainersProcessor,
    ContainerWidthsProcessor,
    RadiusProcessor,
    SpacingProcessor,
    WidthsProcessor,
)
from .modes import (
    BorderWidthModesProcessor,
    FontFamilyModesProcessor,
    FontSizeModesProcessor,
    FontWeightModesProcessor,
    LineHeightModesProcessor,
    RadiusModesProcessor,
)
from .typography import (
    FontFamilyProcessor,
    FontSizeProcessor,
    FontWeightProcessor,
    LineHeightProcessor,
)

# Single-value categories, in run order
TOKEN_PROCESSORS: tuple[type[VariableProcessor], ...] = (
    PrimitivesProcessor,
    RadiusProcessor,
    SpacingProcessor,
    WidthsProcessor,
    BorderWidthProcessor,
    ContainersProcessor,
    ContainerWidthsProcessor,
    FontSizeProcessor,
    FontWeightProcessor,
    FontFamilyProcessor,
    LineHeightProcessor,
)

__all__ = [
    # Base classes
    "VariableProcessor",
    "TokenProcessor",
    "ModeProcessor",
    # Colors
    "PrimitivesProcessor",
    "ColorModesProcessor",
    # Dimensions
    "SpacingProcessor",
    "RadiusProcessor",
    "WidthsProcessor",
    "BorderWidthProcessor",
    "ContainersProcessor",
    "ContainerWidthsProcessor",
    # Typography
    "FontSizeProcessor",
    "FontWeightProcessor",
    "FontFamilyProcessor",
    "LineHeightProcessor",
    # Modes
    "RadiusModesProcessor",
    "BorderWidthModesProcessor",
    "FontFamilyModesProcessor",
    "FontSizeModesProcessor",
    "FontWeightModesProcessor",
    "LineHeightModesProcessor",
    # Run order
    "TOKEN_PROCESSORS",
]
