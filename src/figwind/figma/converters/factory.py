"""
Converter lookup by output format.
"""

from __future__ import annotations

from figwind.errors import ConverterError
from figwind.figma.converters.base import OutputFormat, VariableConverter
from figwind.figma.converters.tailwind_v3 import TailwindV3Converter
from figwind.figma.converters.tailwind_v4 import TailwindV4Converter

CONVERTERS: dict[OutputFormat, type[VariableConverter]] = {
    OutputFormat.TAILWIND3: TailwindV3Converter,
    OutputFormat.TAILWIND4: TailwindV4Converter,
}


def create_converter(output_format: OutputFormat | str) -> VariableConverter:
    """
    Create a converter for an output format.

    Args:
        output_format: OutputFormat member or its value ("Tailwind3", "Tailwind4")

    Raises:
        ConverterError: If the format is not supported
    """
    try:
        converter_cls = CONVERTERS[OutputFormat(output_format)]
    except (KeyError, ValueError) as e:
        supported = ", ".join(fmt.value for fmt in OutputFormat)
        raise ConverterError(
            f"Unsupported output format: {output_format}", f"expected one of {supported}"
        ) from e
    return converter_cls()
