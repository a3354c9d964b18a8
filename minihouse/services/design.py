"""Design service - orchestrates a full generate or edit cycle."""

from ..clients.gemini import GeminiClient
from ..config import IMAGE_BATCH_SIZE, RETRY_INITIAL_DELAY, RETRY_MAX_ATTEMPTS
from ..models import CycleResult, EditPreferences

from .assets import AssetService
from .description import DescriptionService


class DesignService:
    """Orchestrate description generation and asset generation."""

    def __init__(
        self,
        gemini: GeminiClient,
        batch_size: int = IMAGE_BATCH_SIZE,
        max_attempts: int = RETRY_MAX_ATTEMPTS,
        initial_delay: float = RETRY_INITIAL_DELAY,
    ):
        self.description_service = DescriptionService(gemini, max_attempts, initial_delay)
        self.asset_service = AssetService(gemini, batch_size, max_attempts, initial_delay)

    def generate_house_design(self, prompt: str) -> CycleResult:
        """
        Turn a short idea into a full design.

        1. Expand the idea into a detailed description (single source of truth)
        2. Render views, sketch and cutting list from that description

        Raises:
            EmptyDescriptionError: The model returned a blank description.
        """
        description = self.description_service.describe(prompt)
        return self.asset_service.generate_assets(description)

    def edit_house_design(
        self,
        original_description: str,
        edits: EditPreferences,
    ) -> CycleResult:
        """
        Regenerate the design with edits applied.

        Always writes a new description, even when no edit field is filled,
        and rebuilds every asset from it.
        """
        description = self.description_service.revise(original_description, edits)
        return self.asset_service.generate_assets(description)
