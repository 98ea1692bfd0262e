"""Runtime configuration, read from the environment (and a local .env)."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DATA_DIR = Path(os.getenv("BAKERY_DATA_DIR", Path(__file__).resolve().parents[3] / "data"))

API_PREFIX = os.getenv("BAKERY_API_PREFIX", "/api")
LOG_LEVEL = os.getenv("BAKERY_LOG_LEVEL", "INFO")
LOG_JSON = _flag("BAKERY_LOG_JSON")

# Email transport; without an API key confirmations are skipped.
RESEND_API_KEY = os.getenv("RESEND_API_KEY") or None
RESEND_API_URL = os.getenv("RESEND_API_URL", "https://api.resend.com/emails")
EMAIL_TIMEOUT_SECONDS = float(os.getenv("EMAIL_TIMEOUT_SECONDS", "10"))

BUSINESS_NAME = os.getenv("BUSINESS_NAME", "Simply Macarons")
BUSINESS_EMAIL = os.getenv("BUSINESS_EMAIL", "simplymacaronsyyj@gmail.com")
BUSINESS_LOCATION = os.getenv("BUSINESS_LOCATION", "Victoria, BC")
BUSINESS_TIMEZONE = os.getenv("BUSINESS_TIMEZONE", "America/Vancouver")
FROM_EMAIL = os.getenv("FROM_EMAIL", "onboarding@resend.dev")

CUSTOM_BOX_UNIT_PRICE_CENTS = int(os.getenv("CUSTOM_BOX_UNIT_PRICE_CENTS", "200"))
