"""Fixed camera viewpoints and per-image generation results."""

from dataclasses import dataclass

# Order here is the order views are shown in
VIEWS: tuple[str, ...] = (
    "Front view",
    "Back view",
    "Left side view",
    "Right side view",
    "Top-down view",
)


@dataclass(frozen=True)
class ViewImageResult:
    """Outcome of one view render. image_bytes is None if nothing came back."""
    label: str
    image_bytes: bytes | None


@dataclass(frozen=True)
class SketchImageResult:
    """Outcome of the assembly sketch render."""
    image_bytes: bytes | None


ImageResult = ViewImageResult | SketchImageResult


@dataclass(frozen=True)
class ImageView:
    """A labelled, displayable render."""
    label: str
    url: str  # data URI

    def to_dict(self) -> dict:
        return {"label": self.label, "url": self.url}
