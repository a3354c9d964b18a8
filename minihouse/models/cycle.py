"""Result of one generate or edit cycle."""

from dataclasses import dataclass

from .cutting_list import CuttingList
from .views import ImageView


@dataclass(frozen=True)
class CycleResult:
    """Everything produced from one detailed description.

    Any asset can be missing; a new cycle replaces the whole result.
    """
    image_views: list[ImageView] | None
    sketch_url: str | None
    cutting_list: CuttingList | None
    detailed_description: str | None

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys the UI reads."""
        return {
            "imageViews": [v.to_dict() for v in self.image_views] if self.image_views else None,
            "sketchUrl": self.sketch_url,
            "cuttingList": self.cutting_list.to_dict() if self.cutting_list else None,
            "detailedDescription": self.detailed_description,
        }
