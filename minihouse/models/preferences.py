"""Edit preferences collected from the edit form."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditPreferences:
    """Optional free-text changes. Blank fields mean "leave as is"."""

    primary_color: str = ""
    secondary_color: str = ""
    roof_material: str = ""
    feature_highlights: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "EditPreferences":
        """Build from a request body; accepts camelCase or snake_case keys."""

        def pick(camel: str, snake: str) -> str:
            value = data.get(camel, data.get(snake))
            return str(value) if value is not None else ""

        return cls(
            primary_color=pick("primaryColor", "primary_color"),
            secondary_color=pick("secondaryColor", "secondary_color"),
            roof_material=pick("roofMaterial", "roof_material"),
            feature_highlights=pick("featureHighlights", "feature_highlights"),
        )
