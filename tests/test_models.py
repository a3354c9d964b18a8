import base64
import json

import pytest
from google.genai import types

from minihouse.models import (
    VIEWS,
    CuttingList,
    CuttingListParseError,
    CycleResult,
    EditPreferences,
    ImageView,
    Material,
)
from minihouse.models.cutting_list import CUTTING_LIST_SCHEMA
from minihouse.utils import detect_mime_type, is_present, to_data_uri

from .helpers import MUSHROOM_CUTTING_LIST, make_image_bytes


def _cutting_list_json(**overrides) -> str:
    data = json.loads(MUSHROOM_CUTTING_LIST)
    data.update(overrides)
    return json.dumps(data)


def test_views_are_fixed_and_ordered():
    assert VIEWS == (
        "Front view",
        "Back view",
        "Left side view",
        "Right side view",
        "Top-down view",
    )


def test_cutting_list_parses_valid_json():
    cutting_list = CuttingList.from_json(MUSHROOM_CUTTING_LIST)

    assert cutting_list.house_name == "Mushroom Cottage"
    assert cutting_list.description == "A cozy fungal home."
    assert cutting_list.materials == [Material("Cardboard", 4, "10cm x 10cm")]


def test_cutting_list_round_trips_to_camel_case():
    cutting_list = CuttingList.from_json(MUSHROOM_CUTTING_LIST)
    assert cutting_list.to_dict() == json.loads(MUSHROOM_CUTTING_LIST)


def test_cutting_list_accepts_zero_quantity():
    text = _cutting_list_json(materials=[{"name": "Glue", "quantity": 0, "dimensions": "n/a"}])
    assert CuttingList.from_json(text).materials[0].quantity == 0


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "not json",
        '{"houseName": "A"',
        "[]",
        _cutting_list_json(houseName=None),
        _cutting_list_json(description=5),
        _cutting_list_json(materials="cardboard"),
        _cutting_list_json(materials=[]),
        _cutting_list_json(materials=[{"name": "Stick", "quantity": 1, "dimensions": "5cm"}] * 6),
        _cutting_list_json(materials=["Cardboard"]),
        _cutting_list_json(materials=[{"name": "Stick", "quantity": "4", "dimensions": "5cm"}]),
        _cutting_list_json(materials=[{"name": "Stick", "quantity": True, "dimensions": "5cm"}]),
        _cutting_list_json(materials=[{"name": "Stick", "quantity": -1, "dimensions": "5cm"}]),
        _cutting_list_json(materials=[{"name": "Stick", "quantity": 2}]),
    ],
)
def test_cutting_list_rejects_malformed_payloads(text):
    with pytest.raises(CuttingListParseError):
        CuttingList.from_json(text)


def test_cutting_list_schema_matches_wire_shape():
    assert CUTTING_LIST_SCHEMA.required == ["houseName", "description", "materials"]
    materials = CUTTING_LIST_SCHEMA.properties["materials"]
    assert materials.min_items == 1
    assert materials.max_items == 5
    assert materials.items.required == ["name", "quantity", "dimensions"]
    assert materials.items.properties["quantity"].type == types.Type.INTEGER


def test_edit_preferences_from_camel_case():
    prefs = EditPreferences.from_dict({
        "primaryColor": "red",
        "secondaryColor": "white",
        "roofMaterial": "straw",
        "featureHighlights": "a chimney",
    })
    assert prefs == EditPreferences("red", "white", "straw", "a chimney")


def test_edit_preferences_from_snake_case_and_missing_keys():
    prefs = EditPreferences.from_dict({"roof_material": "tiles", "primaryColor": None})
    assert prefs == EditPreferences(roof_material="tiles")


def test_cycle_result_to_dict_with_missing_assets():
    result = CycleResult(None, None, None, None)
    assert result.to_dict() == {
        "imageViews": None,
        "sketchUrl": None,
        "cuttingList": None,
        "detailedDescription": None,
    }


def test_cycle_result_to_dict_with_assets():
    result = CycleResult(
        image_views=[ImageView("Front view", "data:image/jpeg;base64,AAA")],
        sketch_url="data:image/jpeg;base64,BBB",
        cutting_list=CuttingList.from_json(MUSHROOM_CUTTING_LIST),
        detailed_description="desc",
    )
    data = result.to_dict()
    assert data["imageViews"] == [{"label": "Front view", "url": "data:image/jpeg;base64,AAA"}]
    assert data["cuttingList"]["houseName"] == "Mushroom Cottage"
    assert data["detailedDescription"] == "desc"


@pytest.mark.parametrize("value, expected", [("red", True), ("  ", False), ("", False), (None, False)])
def test_is_present(value, expected):
    assert is_present(value) is expected


def test_data_uri_uses_sniffed_mime_type():
    png = make_image_bytes("PNG")
    uri = to_data_uri(png)

    assert uri.startswith("data:image/png;base64,")
    assert base64.b64decode(uri.split(",", 1)[1]) == png


def test_data_uri_falls_back_for_unknown_bytes():
    assert detect_mime_type(b"not an image") == "image/jpeg"
    assert to_data_uri(b"abc").startswith("data:image/jpeg;base64,")


def test_detect_mime_type_jpeg(jpeg_bytes):
    assert detect_mime_type(jpeg_bytes, default="image/png") == "image/jpeg"
