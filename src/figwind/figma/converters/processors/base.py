"""
Processor base classes.

A processor handles one token category: it picks its collections by name,
normalizes each variable's name, resolves its value and records CSS
declarations plus Tailwind config entries into a format holder.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any

from figwind.figma.converters.base import FormatHolder
from figwind.figma.models import (
    Mode,
    Reference,
    ResolvedType,
    TokenDataset,
    Variable,
    VariableCollection,
)

logger = logging.getLogger(__name__)


class VariableProcessor(ABC):
    """
    Base processor.

    Only local collections whose name is in ``collection_names`` are
    processed. A variable is accepted when it matches ``resolved_type`` and
    the optional name filters. Keys are deduplicated across one ``process()``
    call; the first variable with a given key wins.
    """

    collection_names: tuple[str, ...] = ()
    case_sensitive: bool = True
    resolved_type: ResolvedType | None = None
    name_prefix: str | None = None
    name_contains: str | None = None
    property_prefix: str = ""
    config_prefix: tuple[str, ...] = ()

    def collections(self, dataset: TokenDataset) -> Iterator[VariableCollection]:
        return dataset.collections_named(
            *self.collection_names, case_sensitive=self.case_sensitive
        )

    def accepts(self, variable: Variable) -> bool:
        if self.resolved_type is not None and variable.resolved_type != self.resolved_type:
            return False
        if self.name_prefix is not None and not variable.name.startswith(self.name_prefix):
            return False
        if self.name_contains is not None and self.name_contains not in variable.name:
            return False
        return True

    @abstractmethod
    def token_key(self, name: str) -> str:
        """Normalized token key for a variable name."""

    def property_name(self, name: str, key: str) -> str:
        """CSS custom property name (without ``--``)."""
        return f"{self.property_prefix}-{key}"

    def config_path(self, name: str, key: str) -> list[str] | None:
        return [*self.config_prefix, key]

    def process(self, dataset: TokenDataset, holder: FormatHolder) -> None:
        seen: set[str] = set()
        for collection in self.collections(dataset):
            logger.debug("%s: processing collection %r", type(self).__name__, collection.name)
            self.process_collection(collection, dataset, holder, seen)
            holder.end_section()

    def iter_variables(
        self, collection: VariableCollection, dataset: TokenDataset, seen: set[str]
    ) -> Iterator[tuple[Variable, str]]:
        """Yield ``(variable, key)`` for accepted variables with a key not seen yet."""
        for variable in dataset.variables_in(collection):
            if not self.accepts(variable):
                continue
            key = self.token_key(variable.name)
            if key in seen:
                logger.debug("Skipping duplicate token %r (%s)", key, variable.name)
                continue
            seen.add(key)
            yield variable, key

    @abstractmethod
    def process_collection(
        self,
        collection: VariableCollection,
        dataset: TokenDataset,
        holder: FormatHolder,
        seen: set[str],
    ) -> None:
        """Record declarations for one matched collection."""


class TokenProcessor(VariableProcessor):
    """
    Single-value processor: one root declaration and one config entry per token.

    The value of the collection's default mode is used; other modes are ignored.
    """

    skip_none: bool = False

    @abstractmethod
    def css_value(self, value: Any, dataset: TokenDataset, variable: Variable) -> str | None:
        """CSS value for a mode value, or None to skip the token."""

    def config_value(self, property_name: str, value: Any, css: str) -> Any:
        return f"var(--{property_name})"

    def process_collection(
        self,
        collection: VariableCollection,
        dataset: TokenDataset,
        holder: FormatHolder,
        seen: set[str],
    ) -> None:
        for variable, key in self.iter_variables(collection, dataset, seen):
            if self.skip_none and key == "none":
                continue

            value = variable.values_by_mode.get(collection.default_mode_id)
            if value is None:
                logger.warning(
                    "Variable %r has no value for the default mode of %r",
                    variable.name,
                    collection.name,
                )
                continue

            css = self.css_value(value, dataset, variable)
            if css is None:
                continue

            name = self.property_name(variable.name, key)
            holder.add_declaration(name, css)

            path = self.config_path(variable.name, key)
            if path:
                holder.add_config_value(path, self.config_value(name, value, css))


class ModeProcessor(VariableProcessor):
    """
    Mode-aware processor.

    The default mode's value goes to the root scope and the config tree; every
    other mode's value goes to a block scoped by the mode's class name.
    References become ``var(--...)`` pointers (or resolved values, per
    category). Literals are only kept in the default mode, where
    ``literal_value`` allows them.
    """

    @abstractmethod
    def reference_value(
        self,
        reference: Reference,
        target: Variable,
        mode: Mode,
        dataset: TokenDataset,
    ) -> str | None:
        """CSS value for a reference to ``target``."""

    def literal_value(self, value: Any) -> str | None:
        """CSS value for a default-mode literal; None drops it."""
        return None

    def mode_value(
        self, value: Any, mode: Mode, is_default: bool, dataset: TokenDataset
    ) -> str | None:
        if isinstance(value, Reference):
            target = dataset.variable(value.target_id)
            if target is None:
                logger.warning("Could not find referenced variable: %s", value.target_id)
                return None
            return self.reference_value(value, target, mode, dataset)
        if not is_default:
            # Mode overrides are authored as references; literals are dropped
            return None
        return self.literal_value(value)

    def process_collection(
        self,
        collection: VariableCollection,
        dataset: TokenDataset,
        holder: FormatHolder,
        seen: set[str],
    ) -> None:
        default_mode = collection.default_mode()
        if default_mode is None:
            logger.warning("No default mode found in collection %r", collection.name)
            return

        other_modes = [mode for mode in collection.modes if mode.mode_id != default_mode.mode_id]

        for variable, key in self.iter_variables(collection, dataset, seen):
            name = self.property_name(variable.name, key)

            value = variable.values_by_mode.get(default_mode.mode_id)
            if value is not None:
                css = self.mode_value(value, default_mode, True, dataset)
                if css is not None:
                    holder.add_declaration(name, css)
                    path = self.config_path(variable.name, key)
                    if path:
                        holder.add_config_value(path, f"var(--{name})")

            for mode in other_modes:
                value = variable.values_by_mode.get(mode.mode_id)
                if value is None:
                    continue
                css = self.mode_value(value, mode, False, dataset)
                if css is not None:
                    holder.add_declaration(name, css, scope=mode.class_name)
