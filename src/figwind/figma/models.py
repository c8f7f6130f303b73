"""
Figma variables data model.

Parses the ``GET /v1/files/:key/variables/local`` response once at ingestion.
Mode values are decided into a tagged form right away: a ``Reference`` to
another variable, a ``Color`` quadruple, or a primitive literal.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import StrEnum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from figwind.figma.naming import mode_class_name


class ResolvedType(StrEnum):
    """Figma variable value types."""

    COLOR = "COLOR"
    FLOAT = "FLOAT"
    STRING = "STRING"
    BOOLEAN = "BOOLEAN"


class Reference(BaseModel):
    """A mode value that aliases another variable."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["VARIABLE_ALIAS"] = "VARIABLE_ALIAS"
    target_id: str = Field(alias="id")


class Color(BaseModel):
    """Figma RGBA color with channels in the 0..1 range."""

    model_config = ConfigDict(frozen=True)

    r: float
    g: float
    b: float
    a: float = 1.0


TokenValue = Reference | Color | bool | int | float | str


def is_reference(value: Any) -> bool:
    """Check whether a mode value aliases another variable."""
    return isinstance(value, Reference)


def _to_token_value(raw: Any) -> Any:
    if isinstance(raw, dict):
        if raw.get("type") == "VARIABLE_ALIAS":
            return Reference.model_validate(raw)
        if {"r", "g", "b"} <= raw.keys():
            return Color.model_validate(raw)
    return raw


class Mode(BaseModel):
    """A named mode (e.g. Light/Dark) of a variable collection."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mode_id: str = Field(alias="modeId")
    name: str

    @property
    def class_name(self) -> str:
        """CSS class selector name for this mode ("Dark Mode" -> "dark-mode")."""
        return mode_class_name(self.name)


class Variable(BaseModel):
    """A single Figma variable with one value per mode."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    resolved_type: ResolvedType = Field(alias="resolvedType")
    values_by_mode: dict[str, TokenValue] = Field(default_factory=dict, alias="valuesByMode")
    variable_collection_id: str = Field(default="", alias="variableCollectionId")
    remote: bool = False

    @field_validator("values_by_mode", mode="before")
    @classmethod
    def _decide_values(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {mode_id: _to_token_value(raw) for mode_id, raw in value.items()}
        return value

    def first_value(self) -> TokenValue | None:
        """Value of the first mode in declaration order."""
        return next(iter(self.values_by_mode.values()), None)


class VariableCollection(BaseModel):
    """A Figma variable collection (e.g. "Color modes", "3. Spacing")."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str
    name: str
    key: str = ""
    modes: list[Mode] = Field(default_factory=list)
    default_mode_id: str = Field(default="", alias="defaultModeId")
    remote: bool = False
    hidden_from_publishing: bool = Field(default=False, alias="hiddenFromPublishing")
    variable_ids: list[str] = Field(default_factory=list, alias="variableIds")

    def default_mode(self) -> Mode | None:
        """Return the mode whose id matches ``default_mode_id``."""
        for mode in self.modes:
            if mode.mode_id == self.default_mode_id:
                return mode
        return None


class TokenDataset(BaseModel):
    """All variable collections and variables of one Figma file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    variable_collections: dict[str, VariableCollection] = Field(
        default_factory=dict, alias="variableCollections"
    )
    variables: dict[str, Variable] = Field(default_factory=dict)

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> TokenDataset:
        """
        Build a dataset from a Figma API response.

        Accepts the full response (``{"status", "error", "meta": {...}}``)
        as well as the bare ``meta`` mapping.
        """
        meta = payload.get("meta", payload)
        return cls.model_validate(meta)

    def to_response(self) -> dict[str, Any]:
        """Serialize back into the API response shape (used for snapshots)."""
        return {
            "status": 200,
            "error": False,
            "meta": self.model_dump(mode="json", by_alias=True),
        }

    def variable(self, variable_id: str) -> Variable | None:
        return self.variables.get(variable_id)

    def collections(self) -> Iterator[VariableCollection]:
        yield from self.variable_collections.values()

    def collections_named(
        self,
        *names: str,
        include_remote: bool = False,
        case_sensitive: bool = True,
    ) -> Iterator[VariableCollection]:
        """Yield collections whose name is one of ``names``, in dataset order."""
        wanted = set(names) if case_sensitive else {name.lower() for name in names}
        for collection in self.collections():
            if collection.remote and not include_remote:
                continue
            name = collection.name if case_sensitive else collection.name.lower()
            if name in wanted:
                yield collection

    def variables_in(self, collection: VariableCollection) -> Iterator[Variable]:
        """Yield the collection's variables in ``variable_ids`` order, skipping unknown ids."""
        for variable_id in collection.variable_ids:
            variable = self.variables.get(variable_id)
            if variable is not None:
                yield variable
