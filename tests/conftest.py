from unittest.mock import MagicMock, patch

import pytest

from minihouse.clients.gemini import GeminiClient

from .helpers import make_image_bytes


@pytest.fixture
def jpeg_bytes():
    return make_image_bytes("JPEG")


@pytest.fixture
def mock_gemini():
    return MagicMock(spec=GeminiClient)


@pytest.fixture
def no_sleep():
    with patch("minihouse.clients.retry.time.sleep") as mock:
        yield mock
