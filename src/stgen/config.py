"""Settings read from the environment (and a local ``.env`` file)."""

import os

from dotenv import load_dotenv


load_dotenv()


SMARTTHINGS_TOKEN = os.getenv("SMARTTHINGS_TOKEN")

API_URL = os.getenv("STGEN_API_URL", "https://api.smartthings.com/v1")
HTTP_TIMEOUT = float(os.getenv("STGEN_HTTP_TIMEOUT", "30"))

# Acquisition policies
MAX_CONCURRENCY = int(os.getenv("STGEN_MAX_CONCURRENCY", "50"))
MAX_ATTEMPTS = int(os.getenv("STGEN_MAX_ATTEMPTS", "5"))
RETRY_BASE_DELAY = float(os.getenv("STGEN_RETRY_BASE_DELAY", "1.0"))

LOG_LEVEL = os.getenv("STGEN_LOG_LEVEL", "INFO")

OUTPUT_DIR = "stgen_generated"
