"""Data models."""

from .cutting_list import CUTTING_LIST_SCHEMA, CuttingList, CuttingListParseError, Material
from .cycle import CycleResult
from .preferences import EditPreferences
from .views import VIEWS, ImageResult, ImageView, SketchImageResult, ViewImageResult

__all__ = [
    "CUTTING_LIST_SCHEMA",
    "CuttingList",
    "CuttingListParseError",
    "CycleResult",
    "EditPreferences",
    "ImageResult",
    "ImageView",
    "Material",
    "SketchImageResult",
    "VIEWS",
    "ViewImageResult",
]
