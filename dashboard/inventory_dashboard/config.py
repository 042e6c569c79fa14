from dotenv import load_dotenv
from typing import Optional
import os

# Load environment variables
load_dotenv()

DEFAULT_API_URL = "http://localhost:5001"


def api_url() -> str:
    return os.environ.get("INVENTORY_API_URL", DEFAULT_API_URL).rstrip("/")


def request_timeout() -> Optional[float]:
    """Seconds to wait for the API, or None to keep the transport default."""
    value = os.environ.get("INVENTORY_API_TIMEOUT")
    if not value:
        return None
    return float(value)
