"""Asset service - renders views, sketch and cutting list from one description."""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable

from ..clients.gemini import GeminiClient
from ..clients.retry import call_with_retry
from ..config import IMAGE_MIME_TYPE
from ..engine.batching import run_batched
from ..models import (
    CUTTING_LIST_SCHEMA,
    VIEWS,
    CuttingList,
    CuttingListParseError,
    CycleResult,
    ImageResult,
    ImageView,
    SketchImageResult,
    ViewImageResult,
)
from ..prompts import load_prompt
from ..utils import to_data_uri


def build_view_prompt(description: str, view: str) -> str:
    return (
        "A photorealistic 3D architectural render of a miniature dollhouse for kids. "
        f'The design is based on this detailed description: "{description}". '
        f"Show the {view} of the house. The style is cute, playful, and looks like a "
        "real, buildable model. White background."
    )


def build_sketch_prompt(description: str) -> str:
    return (
        "A simple black and white blueprint-style line drawing of the miniature house "
        f'based on this detailed description: "{description}". The sketch must include '
        "clear, simple measurement labels for key parts like walls, roof, door, and "
        "windows. The style should be a clean, technical drawing on a white background."
    )


def build_cutting_list_prompt(description: str) -> str:
    return (
        "Based on the following detailed description, create a simple cutting list for "
        "a miniature house that a child could build with adult help. "
        f'Description: "{description}"'
    )


class AssetService:
    """Generate every asset for a cycle from a single detailed description."""

    def __init__(
        self,
        gemini: GeminiClient,
        batch_size: int = 3,
        max_attempts: int = 3,
        initial_delay: float = 1.0,
    ):
        self.gemini = gemini
        self.batch_size = batch_size
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay

    def generate_assets(self, description: str) -> CycleResult:
        """
        Render 5 views + 1 sketch and build the cutting list.

        Images run through the batched runner while the cutting list request
        runs alongside on its own thread. Missing images and an unparseable
        cutting list become None; any raised API error aborts the cycle.

        Args:
            description: The detailed description for this cycle.

        Returns:
            CycleResult echoing `description`.
        """
        print("=== STEP: ASSETS ===", flush=True)
        image_calls = self._build_image_calls(description)

        with ThreadPoolExecutor(max_workers=1) as executor:
            cutting_list_future = executor.submit(self._request_cutting_list, description)
            print(f"Generating {len(image_calls)} images in batches of {self.batch_size}...", flush=True)
            image_results = run_batched(image_calls, self.batch_size)
            cutting_list_text = cutting_list_future.result()

        image_views = [
            ImageView(label=r.label, url=to_data_uri(r.image_bytes, IMAGE_MIME_TYPE))
            for r in image_results
            if isinstance(r, ViewImageResult) and r.image_bytes
        ]
        sketch = next((r for r in image_results if isinstance(r, SketchImageResult)), None)
        sketch_url = (
            to_data_uri(sketch.image_bytes, IMAGE_MIME_TYPE)
            if sketch and sketch.image_bytes
            else None
        )
        print(
            f"  Got {len(image_views)}/{len(VIEWS)} views, sketch={'yes' if sketch_url else 'no'}",
            flush=True,
        )

        return CycleResult(
            image_views=image_views or None,
            sketch_url=sketch_url,
            cutting_list=self._parse_cutting_list(cutting_list_text),
            detailed_description=description,
        )

    def _build_image_calls(self, description: str) -> list[Callable[[], ImageResult]]:
        """Deferred calls: one per view in VIEWS order, then the sketch."""
        calls: list[Callable[[], ImageResult]] = [
            self._view_call(description, view) for view in VIEWS
        ]
        calls.append(self._sketch_call(description))
        return calls

    def _view_call(self, description: str, view: str) -> Callable[[], ViewImageResult]:
        prompt = build_view_prompt(description, view)

        def run() -> ViewImageResult:
            image_bytes = self._retry(lambda: self.gemini.generate_image(prompt))
            return ViewImageResult(label=view, image_bytes=image_bytes)

        return run

    def _sketch_call(self, description: str) -> Callable[[], SketchImageResult]:
        prompt = build_sketch_prompt(description)

        def run() -> SketchImageResult:
            image_bytes = self._retry(lambda: self.gemini.generate_image(prompt))
            return SketchImageResult(image_bytes=image_bytes)

        return run

    def _request_cutting_list(self, description: str) -> str:
        system_instruction = load_prompt("cutting_list")
        return self._retry(
            lambda: self.gemini.generate_text(
                build_cutting_list_prompt(description),
                system_instruction=system_instruction,
                response_schema=CUTTING_LIST_SCHEMA,
            )
        )

    def _parse_cutting_list(self, text: str) -> CuttingList | None:
        try:
            return CuttingList.from_json(text)
        except CuttingListParseError as e:
            print(f"  Failed to parse cutting list JSON: {e}", flush=True)
            return None

    def _retry(self, operation):
        return call_with_retry(
            operation,
            max_attempts=self.max_attempts,
            initial_delay=self.initial_delay,
        )
