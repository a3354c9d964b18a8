import os
from dotenv import load_dotenv

load_dotenv()

# API Keys and Config - loaded from .env
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
GEMINI_TEXT_MODEL = os.getenv("GEMINI_TEXT_MODEL", "gemini-2.5-flash")
GEMINI_IMAGE_MODEL = os.getenv("GEMINI_IMAGE_MODEL", "imagen-4.0-generate-001")

# Request pacing - batch size of 3 stays under most free-tier image limits
IMAGE_BATCH_SIZE = int(os.getenv("IMAGE_BATCH_SIZE", "3"))
RETRY_MAX_ATTEMPTS = int(os.getenv("RETRY_MAX_ATTEMPTS", "3"))
RETRY_INITIAL_DELAY = float(os.getenv("RETRY_INITIAL_DELAY", "1.0"))  # seconds

# Image generation parameters
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_ASPECT_RATIO = "1:1"
