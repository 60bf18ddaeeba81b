from __future__ import annotations

from typing import Optional

import requests

from ..common.http_client import HttpHandle, get_session
from ..common.logging_utils import logger
from ..domain.errors import TransportError
from ..domain.models import Credentials
from .form_builder import FormValues

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Transport:
    """One Basic-Auth request per call over an injectable HTTP handle.

    No retries and no timeout of its own: a timeout, if wanted, belongs to the
    handle (see ``HTTP_TIMEOUT_S`` for the default session).
    """

    def __init__(self, credentials: Credentials, http: Optional[HttpHandle] = None) -> None:
        self._credentials = credentials
        self._http = http

    @property
    def http(self) -> HttpHandle:
        return self._http if self._http is not None else get_session()

    def _auth(self) -> tuple[str, str]:
        return (self._credentials.account_sid, self._credentials.auth_token)

    def post(self, form_values: FormValues, url: str) -> requests.Response:
        logger.debug({"transport": "post", "url": url, "keys": [k for k, _ in form_values]})
        try:
            return self.http.post(
                url,
                data=form_values,
                headers={"Content-Type": FORM_CONTENT_TYPE},
                auth=self._auth(),
            )
        except requests.RequestException as e:
            raise TransportError(f"POST {url} failed: {e}", url=url) from e

    def get(self, url: str) -> requests.Response:
        logger.debug({"transport": "get", "url": url})
        try:
            return self.http.get(url, auth=self._auth())
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}", url=url) from e
