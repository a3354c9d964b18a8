"""Gemini client for description text, cutting-list JSON and Imagen renders."""

from google import genai
from google.genai import types

from ..config import (
    GEMINI_IMAGE_MODEL,
    GEMINI_TEXT_MODEL,
    IMAGE_ASPECT_RATIO,
    IMAGE_MIME_TYPE,
)


class GeminiClient:
    """Thin wrapper over google-genai. Callers own retries."""

    def __init__(
        self,
        api_key: str,
        text_model: str = GEMINI_TEXT_MODEL,
        image_model: str = GEMINI_IMAGE_MODEL,
    ):
        self.client = genai.Client(api_key=api_key)
        self.text_model = text_model
        self.image_model = image_model

    def generate_text(
        self,
        prompt: str,
        system_instruction: str | None = None,
        response_schema: types.Schema | None = None,
    ) -> str:
        """
        Generate text, optionally constrained to JSON matching a schema.

        Args:
            prompt: User content.
            system_instruction: Optional system prompt.
            response_schema: If given, the response is JSON for this schema.

        Returns:
            Response text, stripped ("" if the model returned nothing).
        """
        config = types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json" if response_schema is not None else None,
            response_schema=response_schema,
        )

        response = self.client.models.generate_content(
            model=self.text_model,
            contents=prompt,
            config=config,
        )
        return (response.text or "").strip()

    def generate_image(self, prompt: str) -> bytes | None:
        """
        Generate a single square image.

        Returns:
            Image bytes, or None if the service produced no image.
        """
        response = self.client.models.generate_images(
            model=self.image_model,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=1,
                output_mime_type=IMAGE_MIME_TYPE,
                aspect_ratio=IMAGE_ASPECT_RATIO,
            ),
        )

        # Safety filtering can drop the image without raising
        if response.generated_images:
            image = response.generated_images[0].image
            if image and image.image_bytes:
                return image.image_bytes
        return None
