"""twilio_lite.common.config

Configuration is read from environment variables only. A `.env` file in the
working tree (if present) is loaded first, so local development does not need
exported variables. Nothing here performs network calls at import time.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv, find_dotenv

load_dotenv(find_dotenv())

DEFAULT_BASE_URL = "https://api.twilio.com/2010-04-01"


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float_or_none(name: str) -> float | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass
class Settings:
    """
    Settings for the REST client and its default HTTP session.

    Fields are grouped: account credentials, endpoint, connection pool.
    """

    # Twilio account
    twilio_account_sid: str = os.getenv("TWILIO_ACCOUNT_SID", "")
    twilio_auth_token: str = os.getenv("TWILIO_AUTH_TOKEN", "")
    twilio_base_url: str = os.getenv("TWILIO_BASE_URL", DEFAULT_BASE_URL)

    # default requests.Session
    http_pool_conn: int = _env_int("HTTP_POOL_CONN", 32)
    http_pool_max: int = _env_int("HTTP_POOL_MAX", 32)
    # None -> no timeout on the default session
    http_timeout_s: float | None = _env_float_or_none("HTTP_TIMEOUT_S")

    @classmethod
    def from_env(cls) -> "Settings":
        """Re-read the environment (class defaults are bound at import)."""
        return cls(
            twilio_account_sid=os.getenv("TWILIO_ACCOUNT_SID", ""),
            twilio_auth_token=os.getenv("TWILIO_AUTH_TOKEN", ""),
            twilio_base_url=os.getenv("TWILIO_BASE_URL", DEFAULT_BASE_URL),
            http_pool_conn=_env_int("HTTP_POOL_CONN", 32),
            http_pool_max=_env_int("HTTP_POOL_MAX", 32),
            http_timeout_s=_env_float_or_none("HTTP_TIMEOUT_S"),
        )


settings = Settings()
