"""
figwind - project scaffolding and Figma design token sync.

Two tools in one CLI:

- ``figwind create``: scaffold a project from a starter template
- ``figwind figma-sync``: turn Figma variables into Tailwind CSS v3/v4 output
"""

from figwind._version import get_version

__version__ = get_version()

__all__ = ["__version__"]
