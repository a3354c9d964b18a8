"""Cutting list model and the JSON schema the model must answer with."""

import json
from dataclasses import dataclass, field

from google.genai import types

MAX_MATERIALS = 5


class CuttingListParseError(Exception):
    """Cutting list JSON was missing, malformed or the wrong shape."""
    pass


CUTTING_LIST_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "houseName": types.Schema(
            type=types.Type.STRING,
            description="A fun and creative name for the miniature house.",
        ),
        "description": types.Schema(
            type=types.Type.STRING,
            description="A short, one-sentence description of the house design.",
        ),
        "materials": types.Schema(
            type=types.Type.ARRAY,
            description="A list of simple craft materials needed to build the house.",
            min_items=1,
            max_items=MAX_MATERIALS,
            items=types.Schema(
                type=types.Type.OBJECT,
                properties={
                    "name": types.Schema(
                        type=types.Type.STRING,
                        description="The name of the material (e.g., Cardboard, Craft Stick, Bottle Cap).",
                    ),
                    "quantity": types.Schema(
                        type=types.Type.INTEGER,
                        description="The number of pieces of this material needed.",
                    ),
                    "dimensions": types.Schema(
                        type=types.Type.STRING,
                        description="The size of each piece (e.g., '10cm x 15cm', '5cm long', 'Standard size').",
                    ),
                },
                required=["name", "quantity", "dimensions"],
            ),
        ),
    },
    required=["houseName", "description", "materials"],
)


def _require_str(data: dict, key: str, where: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise CuttingListParseError(f"{where}: '{key}' must be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class Material:
    """One line of the cutting list."""
    name: str
    quantity: int
    dimensions: str

    @classmethod
    def from_dict(cls, data: dict, index: int = 0) -> "Material":
        where = f"materials[{index}]"
        if not isinstance(data, dict):
            raise CuttingListParseError(f"{where}: expected an object, got {type(data).__name__}")

        quantity = data.get("quantity")
        # bool is an int subclass; JSON true/false is not a count
        if isinstance(quantity, bool) or not isinstance(quantity, int):
            raise CuttingListParseError(f"{where}: 'quantity' must be an integer, got {quantity!r}")
        if quantity < 0:
            raise CuttingListParseError(f"{where}: 'quantity' must be >= 0, got {quantity}")

        return cls(
            name=_require_str(data, "name", where),
            quantity=quantity,
            dimensions=_require_str(data, "dimensions", where),
        )

    def to_dict(self) -> dict:
        return {"name": self.name, "quantity": self.quantity, "dimensions": self.dimensions}


@dataclass(frozen=True)
class CuttingList:
    """Named house design with the craft materials to build it."""
    house_name: str
    description: str
    materials: list[Material] = field(default_factory=list)

    @classmethod
    def from_json(cls, text: str) -> "CuttingList":
        """Parse and validate the structured response text."""
        text = (text or "").strip()
        if not text:
            raise CuttingListParseError("Empty cutting list response")

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CuttingListParseError(f"Invalid JSON: {e}") from e

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> "CuttingList":
        if not isinstance(data, dict):
            raise CuttingListParseError(f"Expected a JSON object, got {type(data).__name__}")

        raw_materials = data.get("materials")
        if not isinstance(raw_materials, list):
            raise CuttingListParseError(f"'materials' must be a list, got {raw_materials!r}")
        if not 1 <= len(raw_materials) <= MAX_MATERIALS:
            raise CuttingListParseError(
                f"Expected 1-{MAX_MATERIALS} materials, got {len(raw_materials)}"
            )

        return cls(
            house_name=_require_str(data, "houseName", "cutting list"),
            description=_require_str(data, "description", "cutting list"),
            materials=[Material.from_dict(m, i) for i, m in enumerate(raw_materials)],
        )

    def to_dict(self) -> dict:
        return {
            "houseName": self.house_name,
            "description": self.description,
            "materials": [m.to_dict() for m in self.materials],
        }
