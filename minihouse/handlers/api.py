"""AWS Lambda handler for house design generation."""

import json

from ..clients import GeminiClient
from ..config import GEMINI_API_KEY
from ..models import EditPreferences
from ..services import DesignService

from .messages import API_KEY_MESSAGE, friendly_error_message


def _response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def _parse_body(event: dict) -> dict:
    # Handle SQS event format
    if "Records" in event:
        return json.loads(event["Records"][0]["body"])
    return json.loads(event.get("body") or "{}")


def handler(event, context, service: DesignService | None = None):
    """
    AWS Lambda handler - triggered by SQS or HTTP.

    Input payload (new design):
    {
        "prompt": "a cozy mushroom cottage with a round door"
    }

    Input payload (edit):
    {
        "description": "<detailedDescription from the previous result>",
        "edits": {"primaryColor": "red", "roofMaterial": "straw"}
    }

    Output: {"imageViews", "sketchUrl", "cuttingList", "detailedDescription"}.
    """
    try:
        body = _parse_body(event)
    except (json.JSONDecodeError, TypeError) as e:
        return _response(400, {"error": f"Invalid JSON body: {e}"})
    if not isinstance(body, dict):
        return _response(400, {"error": "Request body must be a JSON object"})

    prompt = body.get("prompt")
    description = body.get("description")
    is_edit = "edits" in body

    # Validate required fields
    if is_edit and not (isinstance(description, str) and description.strip()):
        return _response(400, {"error": "Missing 'description' field for edit"})
    if not is_edit and not (isinstance(prompt, str) and prompt.strip()):
        return _response(400, {"error": "Missing 'prompt' field"})
    if is_edit and not isinstance(body["edits"] or {}, dict):
        return _response(400, {"error": "'edits' must be a JSON object"})

    if service is None:
        if not GEMINI_API_KEY:
            print("ERROR: GEMINI_API_KEY must be set in .env", flush=True)
            return _response(500, {"error": API_KEY_MESSAGE, "detail": "GEMINI_API_KEY is not set"})
        service = DesignService(GeminiClient(api_key=GEMINI_API_KEY))

    try:
        if is_edit:
            edits = EditPreferences.from_dict(body.get("edits") or {})
            print("Processing edit request", flush=True)
            result = service.edit_house_design(description, edits)
        else:
            print(f"Processing idea: {prompt}", flush=True)
            result = service.generate_house_design(prompt)

        return _response(200, result.to_dict())

    except Exception as e:
        print(f"ERROR: {e}", flush=True)
        return _response(500, {"error": friendly_error_message(e), "detail": str(e)})


# Local testing
if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m minihouse.handlers.api <idea> [edits_json]")
        print()
        print("Arguments:")
        print("  idea       - Short description of the dream house")
        print("  edits_json - Optional JSON object of edits applied after the first design:")
        print('               {"primaryColor": ..., "secondaryColor": ..., "roofMaterial": ..., "featureHighlights": ...}')
        print()
        print("Example:")
        print('  python -m minihouse.handlers.api "a mushroom cottage" \'{"roofMaterial": "straw"}\'')
        sys.exit(1)

    def _summary(result: dict) -> dict:
        body = json.loads(result["body"])
        # data URIs are too long to print
        if body.get("imageViews"):
            body["imageViews"] = [v["label"] for v in body["imageViews"]]
        if body.get("sketchUrl"):
            body["sketchUrl"] = f"<{len(body['sketchUrl'])} chars>"
        return body

    result = handler({"body": json.dumps({"prompt": sys.argv[1]})}, None)
    print("\nResult:")
    print(json.dumps(_summary(result), indent=2))

    if len(sys.argv) > 2 and result["statusCode"] == 200:
        edit_input = {
            "description": json.loads(result["body"])["detailedDescription"],
            "edits": json.loads(sys.argv[2]),
        }
        result = handler({"body": json.dumps(edit_input)}, None)
        print("\nEdited result:")
        print(json.dumps(_summary(result), indent=2))
