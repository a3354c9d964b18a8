import json
from io import BytesIO

from PIL import Image


def make_image_bytes(fmt: str = "JPEG", color: str = "red") -> bytes:
    img = Image.new("RGB", (4, 4), color)
    output = BytesIO()
    img.save(output, format=fmt)
    return output.getvalue()


MUSHROOM_DESCRIPTION = "A round red-capped mushroom cottage with a wooden door."

MUSHROOM_CUTTING_LIST = json.dumps({
    "houseName": "Mushroom Cottage",
    "description": "A cozy fungal home.",
    "materials": [{"name": "Cardboard", "quantity": 4, "dimensions": "10cm x 10cm"}],
})
