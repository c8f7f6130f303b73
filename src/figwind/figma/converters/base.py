"""
Converter building blocks.

A converter owns an ordered list of processors. Each ``convert()`` call
creates a fresh format holder, lets every processor record declarations and
config values into it, then renders the holder's output files.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from figwind.figma.config import SyncConfig
    from figwind.figma.converters.processors.base import VariableProcessor
    from figwind.figma.models import TokenDataset

logger = logging.getLogger(__name__)

ROOT_SCOPE = ":root"


class OutputFormat(StrEnum):
    """Supported sync output formats."""

    TAILWIND3 = "Tailwind3"
    TAILWIND4 = "Tailwind4"


@dataclass(frozen=True)
class Declaration:
    """
    One CSS custom property declaration.

    Attributes:
        scope: ``ROOT_SCOPE`` or a mode class name (rendered as ``.<scope>``)
        name: Property name without the leading ``--``
        value: CSS value
    """

    scope: str
    name: str
    value: str

    def render(self, indent: int = 2) -> str:
        return f"{' ' * indent}--{self.name}: {self.value};"


class FormatHolder(ABC):
    """
    Accumulates declarations and a nested config tree for one conversion.

    Declarations are grouped into sections (one per processed collection).
    Rendering merges all root declarations into a single ``:root`` block and
    emits one ``.<mode>`` block per section and mode, in emission order.
    """

    def __init__(self) -> None:
        self._sections: list[list[Declaration]] = []
        self._current: list[Declaration] = []
        self.config: dict[str, Any] = {}

    def add_declaration(self, name: str, value: str, scope: str = ROOT_SCOPE) -> None:
        self._current.append(Declaration(scope=scope, name=name, value=value))

    def end_section(self) -> None:
        """Close the current group of declarations."""
        if self._current:
            self._sections.append(self._current)
        self._current = []

    def add_config_value(self, path: list[str], value: Any) -> None:
        """
        Set a leaf in the nested config tree, creating intermediate levels.

        Examples:
            holder.add_config_value(["theme", "extend", "spacing", "xl"], "var(--spacing-xl)")
        """
        node = self.config
        for key in path[:-1]:
            child = node.get(key)
            if not isinstance(child, dict):
                child = {}
                node[key] = child
            node = child
        node[path[-1]] = value

    def sections(self) -> list[list[Declaration]]:
        """All sections, including one still open."""
        if self._current:
            return [*self._sections, self._current]
        return list(self._sections)

    def root_declarations(self) -> list[Declaration]:
        return [
            declaration
            for section in self.sections()
            for declaration in section
            if declaration.scope == ROOT_SCOPE
        ]

    def scoped_blocks(self) -> list[tuple[str, list[Declaration]]]:
        """Per section, one ``(scope, declarations)`` pair per non-root scope."""
        blocks: list[tuple[str, list[Declaration]]] = []
        for section in self.sections():
            grouped: dict[str, list[Declaration]] = {}
            for declaration in section:
                if declaration.scope != ROOT_SCOPE:
                    grouped.setdefault(declaration.scope, []).append(declaration)
            blocks.extend(grouped.items())
        return blocks

    def render_root(self) -> str:
        return "\n".join(declaration.render() for declaration in self.root_declarations())

    def render_scoped(self) -> str:
        lines: list[str] = []
        for scope, declarations in self.scoped_blocks():
            lines.append(f".{scope} {{")
            lines.extend(declaration.render() for declaration in declarations)
            lines.append("}")
            lines.append("")
        return "\n".join(lines)

    @abstractmethod
    def get_output_files(self) -> dict[str, str]:
        """Render output files as ``{filename: content}``. Must not mutate state."""


class VariableConverter(ABC):
    """
    Base converter: an ordered processor list run against a fresh holder.

    Subclasses set ``default_processors``; registering any processor replaces
    the defaults with the registered list.
    """

    output_format: OutputFormat
    default_processors: tuple[type[VariableProcessor], ...] = ()

    def __init__(self) -> None:
        self._processors: list[VariableProcessor] = []

    @abstractmethod
    def initialize(self) -> FormatHolder:
        """Create a fresh holder for one conversion."""

    def register_processor(self, processor: VariableProcessor) -> None:
        self._processors.append(processor)

    @property
    def processors(self) -> list[VariableProcessor]:
        if self._processors:
            return list(self._processors)
        return [processor_cls() for processor_cls in self.default_processors]

    def convert(self, dataset: TokenDataset, config: SyncConfig | None = None) -> dict[str, str]:
        """
        Convert a dataset into output files.

        Args:
            dataset: Parsed Figma variables
            config: Sync configuration (unused by the built-in converters)

        Returns:
            Mapping of output filename to file content
        """
        holder = self.initialize()
        for processor in self.processors:
            logger.debug("Running %s", type(processor).__name__)
            processor.process(dataset, holder)
        return holder.get_output_files()
