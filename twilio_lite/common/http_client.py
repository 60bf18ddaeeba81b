# twilio_lite/common/http_client.py
from __future__ import annotations

from typing import Any, Protocol

import requests
from requests.adapters import HTTPAdapter

from .config import Settings

_SESSION: requests.Session | None = None


class HttpHandle(Protocol):
    """The part of `requests.Session` the transport relies on."""

    def post(self, url: str, **kwargs: Any) -> requests.Response: ...

    def get(self, url: str, **kwargs: Any) -> requests.Response: ...


class TimeoutHTTPAdapter(HTTPAdapter):
    """HTTPAdapter applying a default timeout when the caller passes none."""

    def __init__(self, *args: Any, timeout: float | None = None, **kwargs: Any) -> None:
        self.timeout = timeout
        super().__init__(*args, **kwargs)

    def send(self, request, **kwargs):
        if kwargs.get("timeout") is None and self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return super().send(request, **kwargs)


def get_session() -> requests.Session:
    global _SESSION
    if _SESSION is not None:
        return _SESSION

    cfg = Settings.from_env()
    s = requests.Session()

    adapter = TimeoutHTTPAdapter(
        pool_connections=cfg.http_pool_conn,
        pool_maxsize=cfg.http_pool_max,
        max_retries=0,
        timeout=cfg.http_timeout_s,
    )
    s.mount("https://", adapter)
    s.mount("http://", adapter)

    _SESSION = s
    return s
