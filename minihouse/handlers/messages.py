"""Kid-friendly wording for errors shown in the UI."""

API_KEY_MARKERS = ("api key not valid", "api_key_invalid", "permission denied")
QUOTA_MARKERS = ("quota",)
SAFETY_MARKERS = ("safety", "blocked")

API_KEY_MESSAGE = (
    "There's a problem with the connection to the creative engine. "
    "Please ask an adult to check the API Key configuration."
)
QUOTA_MESSAGE = (
    "The Dream Builder is very popular right now and has run out of creative "
    "energy for the moment. Please try again later!"
)
SAFETY_MESSAGE = (
    "Your idea is super creative, but the Dream Builder couldn't process it. "
    "Could you try describing your house in a different way?"
)
FALLBACK_MESSAGE = "Oh no! The blueprint machine got stuck. Please try a different idea."


def friendly_error_message(error: BaseException | None) -> str:
    """Map an upstream error to a message a kid can read. Checked in order."""
    if error is None:
        return FALLBACK_MESSAGE

    message = str(error)
    lower = message.lower()
    if any(marker in lower for marker in API_KEY_MARKERS):
        return API_KEY_MESSAGE
    if any(marker in lower for marker in QUOTA_MARKERS):
        return QUOTA_MESSAGE
    if any(marker in lower for marker in SAFETY_MARKERS):
        return SAFETY_MESSAGE
    if not message:
        return FALLBACK_MESSAGE
    return f"The blueprint machine had a little hiccup: {message}. Please try again."
