from __future__ import annotations

import os

DEFAULT_BACKEND_URL = "http://localhost:3000"
ALERT_TTL_SECONDS = 5.0
# banners are re-checked this often, so none outlives the TTL by more than a tick
ALERT_REFRESH_SECONDS = 1.0
REQUEST_TIMEOUT = 30


def backend_url() -> str:
    """BACKEND_URL from the environment (.env is loaded by the app), without trailing slash."""
    return (os.getenv("BACKEND_URL") or DEFAULT_BACKEND_URL).strip().rstrip("/")
