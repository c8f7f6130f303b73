"""
Figma variables to Tailwind CSS converters.

- base.py: Declaration, FormatHolder and VariableConverter base classes
- tailwind_v3.py: CSS + tailwind3.config.js output
- tailwind_v4.py: single CSS file with an @theme block
- factory.py: converter lookup by OutputFormat
- processors/: one processor per token category
"""

from .base import ROOT_SCOPE, Declaration, FormatHolder, OutputFormat, VariableConverter
from .factory import create_converter
from .tailwind_v3 import TailwindV3Converter, TailwindV3FormatHolder
from .tailwind_v4 import TailwindV4Converter, TailwindV4FormatHolder

__all__ = [
    "ROOT_SCOPE",
    "Declaration",
    "FormatHolder",
    "OutputFormat",
    "VariableConverter",
    "create_converter",
    "TailwindV3Converter",
    "TailwindV3FormatHolder",
    "TailwindV4Converter",
    "TailwindV4FormatHolder",
]
