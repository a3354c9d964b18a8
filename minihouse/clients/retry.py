"""Retry wrapper for Gemini API calls that hit rate limits."""

import random
import time
from typing import Callable, TypeVar

T = TypeVar("T")

RATE_LIMIT_MARKERS = ("quota", "rate limit", "429", "resource_exhausted")


def is_rate_limit_error(error: BaseException) -> bool:
    """Check whether an error is a rate-limit or quota error.

    google-genai raises APIError with the HTTP status on `.code`; other
    transports only mention it in the message.
    """
    for attr in ("code", "status_code"):
        if getattr(error, attr, None) == 429:
            return True
    message = str(error).lower()
    return any(marker in message for marker in RATE_LIMIT_MARKERS)


def call_with_retry(
    operation: Callable[[], T],
    max_attempts: int = 3,
    initial_delay: float = 1.0,
) -> T:
    """
    Call `operation`, retrying rate-limit errors with exponential backoff.

    Args:
        operation: Zero-argument callable making one API call.
        max_attempts: Total attempts, including the first.
        initial_delay: Delay in seconds before the first retry. Doubles on
            each retry, plus up to 1s of random jitter.

    Returns:
        Whatever `operation` returns, untouched.

    Raises:
        The last error raised by `operation`, unchanged, once it is not a
        rate-limit error or attempts are exhausted.
    """
    attempt = 0
    while True:
        try:
            return operation()
        except Exception as e:
            attempt += 1
            if attempt >= max_attempts or not is_rate_limit_error(e):
                raise

            delay = initial_delay * 2 ** (attempt - 1) + random.random()
            print(
                f"API rate limit hit. Retrying in {round(delay * 1000)}ms... "
                f"(Attempt {attempt}/{max_attempts})",
                flush=True,
            )
            time.sleep(delay)
