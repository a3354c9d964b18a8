import base64
from io import BytesIO

from PIL import Image, UnidentifiedImageError


def is_present(value: str | None) -> bool:
    """True when a free-text field has content after stripping whitespace."""
    return bool(value and value.strip())


def detect_mime_type(image_bytes: bytes, default: str = "image/jpeg") -> str:
    """Sniff the MIME type of raw image bytes, falling back to `default`."""
    try:
        with Image.open(BytesIO(image_bytes)) as img:
            mime = Image.MIME.get(img.format or "")
    except (UnidentifiedImageError, OSError):
        return default
    return mime or default


def to_data_uri(image_bytes: bytes, default_mime: str = "image/jpeg") -> str:
    """Encode image bytes as a self-contained data URI.

    Example: b"\\xff\\xd8..." -> "data:image/jpeg;base64,/9j/..."
    """
    mime = detect_mime_type(image_bytes, default_mime)
    payload = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime};base64,{payload}"
