"""Business logic services."""

from .assets import AssetService
from .description import DescriptionService, EmptyDescriptionError, build_edit_prompt
from .design import DesignService

__all__ = [
    "AssetService",
    "DescriptionService",
    "DesignService",
    "EmptyDescriptionError",
    "build_edit_prompt",
]
