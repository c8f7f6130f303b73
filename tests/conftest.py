"""Shared pytest fixtures for figwind tests."""

from __future__ import annotations

from typing import Any

import pytest

from figwind.figma.models import TokenDataset


def ref(variable_id: str) -> dict[str, str]:
    """Raw VARIABLE_ALIAS value pointing at ``variable_id``."""
    return {"type": "VARIABLE_ALIAS", "id": variable_id}


def rgba(r: float, g: float, b: float, a: float = 1.0) -> dict[str, float]:
    """Raw Figma color value (channels 0..1)."""
    return {"r": r, "g": g, "b": b, "a": a}


class DatasetBuilder:
    """
    Builds raw ``variables/local`` responses.

    Collections get sequential ids; the first mode of each collection is its
    default mode. Variable values are given positionally, one per mode.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, Any]] = {}
        self.variables: dict[str, dict[str, Any]] = {}

    def collection(
        self,
        name: str,
        modes: tuple[str, ...] = ("Default",),
        remote: bool = False,
    ) -> str:
        collection_id = f"VariableCollectionId:{len(self.collections) + 1}"
        mode_list = [
            {"modeId": f"{collection_id}:{index}", "name": mode_name}
            for index, mode_name in enumerate(modes)
        ]
        self.collections[collection_id] = {
            "id": collection_id,
            "name": name,
            "key": f"key-{len(self.collections) + 1}",
            "modes": mode_list,
            "defaultModeId": mode_list[0]["modeId"] if mode_list else "",
            "remote": remote,
            "hiddenFromPublishing": False,
            "variableIds": [],
        }
        return collection_id

    def mode_id(self, collection_id: str, index: int = 0) -> str:
        return self.collections[collection_id]["modes"][index]["modeId"]

    def variable(
        self,
        collection_id: str,
        name: str,
        resolved_type: str,
        *values: Any,
        variable_id: str | None = None,
    ) -> str:
        variable_id = variable_id or f"VariableID:{len(self.variables) + 1}"
        collection = self.collections[collection_id]
        values_by_mode = {
            mode["modeId"]: value
            for mode, value in zip(collection["modes"], values, strict=False)
        }
        self.variables[variable_id] = {
            "id": variable_id,
            "name": name,
            "key": f"var-key-{len(self.variables) + 1}",
            "variableCollectionId": collection_id,
            "resolvedType": resolved_type,
            "valuesByMode": values_by_mode,
            "remote": False,
        }
        collection["variableIds"].append(variable_id)
        return variable_id

    def payload(self) -> dict[str, Any]:
        return {
            "status": 200,
            "error": False,
            "meta": {
                "variableCollections": self.collections,
                "variables": self.variables,
            },
        }

    def build(self) -> TokenDataset:
        return TokenDataset.from_response(self.payload())


@pytest.fixture
def builder() -> DatasetBuilder:
    """Return an empty dataset builder."""
    return DatasetBuilder()


@pytest.fixture
def design_system() -> DatasetBuilder:
    """
    A small but complete design system.

    Primitive colors, light/dark color modes, spacing, radius, widths,
    containers and typography.
    """
    b = DatasetBuilder()

    primitives = b.collection("_Primitives")
    white = b.variable(primitives, "Colors/Base/white", "COLOR", rgba(1, 1, 1))
    gray_900 = b.variable(
        primitives, "Colors/Gray (light mode)/900", "COLOR", rgba(0.0627, 0.0941, 0.1569)
    )
    brand_600 = b.variable(primitives, "Colors/Brand/600", "COLOR", rgba(0.4, 0.2, 0.8, 0.5))

    color_modes = b.collection("1. Color modes", modes=("Light mode", "Dark mode"))
    b.variable(
        color_modes, "Colors/Text/text-primary (900)", "COLOR", ref(gray_900), ref(white)
    )
    b.variable(color_modes, "Colors/Background/bg-brand", "COLOR", ref(brand_600), ref(white))

    spacing = b.collection("3. Spacing")
    b.variable(spacing, "spacing-none", "FLOAT", 0)
    b.variable(spacing, "spacing-xl (16px)", "FLOAT", 16)
    b.variable(spacing, "spacing-2xl", "FLOAT", 24)

    radius = b.collection("2. Radius")
    b.variable(radius, "radius-md", "FLOAT", 8)

    widths = b.collection("4. Widths")
    b.variable(widths, "width-xl (1280px)", "FLOAT", 1280)

    containers = b.collection("5. Containers")
    b.variable(containers, "container-padding-desktop", "FLOAT", 32)
    b.variable(containers, "container-max-width-desktop", "FLOAT", 1280)

    typography = b.collection("6. Typography")
    b.variable(typography, "Font size/text-xl", "FLOAT", 20)
    b.variable(typography, "Font weight/semibold", "STRING", "600")
    b.variable(typography, "Font family/font-family-body", "STRING", "Inter")
    b.variable(typography, "Line height/Default/text-xl", "FLOAT", 30)

    return b
