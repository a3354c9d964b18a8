"""API clients for external services."""

from .gemini import GeminiClient
from .retry import call_with_retry, is_rate_limit_error

__all__ = ["GeminiClient", "call_with_retry", "is_rate_limit_error"]
