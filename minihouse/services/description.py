"""Description service - expands an idea (or an edit) into a detailed description."""

from ..clients.gemini import GeminiClient
from ..clients.retry import call_with_retry
from ..models import EditPreferences
from ..prompts import load_prompt
from ..utils import is_present


class EmptyDescriptionError(Exception):
    """The text model returned a blank description."""
    pass


EDIT_PREAMBLE = (
    "Based on this original house description, please generate a new, complete "
    "architectural description that incorporates the following changes. Do not just "
    "list the changes, provide the full, updated description."
)


def build_description_prompt(idea: str) -> str:
    """Build the user message that turns a short idea into a full description."""
    return (
        "Based on the user's idea, create a detailed and consistent architectural "
        "description for a miniature house. This description will be used to generate "
        "multiple 3D views, so it must be very specific about colors, shapes, materials, "
        f'windows, doors, and unique features. User\'s idea: "{idea}"'
    )


def build_edit_prompt(original_description: str, edits: EditPreferences) -> str:
    """Restate the original description, then one directive per filled-in edit.

    Order is fixed: primary color, secondary color, roof, feature highlights.
    """
    lines = [
        EDIT_PREAMBLE,
        "",
        f'Original Description: "{original_description}"',
        "",
        "Requested Changes:",
    ]
    if is_present(edits.primary_color):
        lines.append(f"- Change the primary color to {edits.primary_color.strip()}.")
    if is_present(edits.secondary_color):
        lines.append(f"- Change the secondary color to {edits.secondary_color.strip()}.")
    if is_present(edits.roof_material):
        lines.append(f"- Change the roof to be made of or look like {edits.roof_material.strip()}.")
    if is_present(edits.feature_highlights):
        lines.append(f"- Also, incorporate this request: {edits.feature_highlights.strip()}.")
    return "\n".join(lines) + "\n"


class DescriptionService:
    """Generate the detailed description every asset in a cycle is built from."""

    def __init__(
        self,
        gemini: GeminiClient,
        max_attempts: int = 3,
        initial_delay: float = 1.0,
    ):
        self.gemini = gemini
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay

    def describe(self, idea: str) -> str:
        """Expand a short idea into a detailed description."""
        print("=== STEP: DESCRIPTION ===", flush=True)
        return self._generate(
            build_description_prompt(idea),
            load_prompt("description"),
            "Could not generate a detailed description for the house.",
        )

    def revise(self, original_description: str, edits: EditPreferences) -> str:
        """Produce a complete new description with the edits folded in."""
        print("=== STEP: EDIT DESCRIPTION ===", flush=True)
        return self._generate(
            build_edit_prompt(original_description, edits),
            load_prompt("edit"),
            "Could not generate an updated description for the house.",
        )

    def _generate(self, prompt: str, system_instruction: str, empty_message: str) -> str:
        text = call_with_retry(
            lambda: self.gemini.generate_text(prompt, system_instruction=system_instruction),
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
        )
        description = (text or "").strip()
        if not description:
            raise EmptyDescriptionError(empty_message)

        print(f"  Description: {len(description)} chars", flush=True)
        return description
