"""Turn a completed HTTP response into exactly one result variant.

The expected status (201 for creation, 200 for fetches) selects the resource
decoder; any other status is read as a structured API error. A body that is
not a JSON object of the right shape is a transport failure on either branch.
"""

from __future__ import annotations

from typing import Any, Callable, Dict

import requests

from ..domain.errors import TransportError
from ..domain.models import (
    ApiError,
    ApiException,
    Created,
    Resource,
    Result,
    TransportFailure,
)

HTTP_CREATED = 201
HTTP_OK = 200


def _decode_body(response: requests.Response, decoder: Callable[[Dict[str, Any]], Any], what: str):
    try:
        payload = response.json()
        return decoder(payload)
    # int(1e400) overflows: valid JSON, undecodable value
    except (ValueError, TypeError, OverflowError) as e:
        raise TransportError(
            f"Could not decode {what} from HTTP {response.status_code} response: {e}",
            url=getattr(response, "url", None),
        ) from e


def decode_response(
    response: requests.Response,
    resource_decoder: Callable[[Dict[str, Any]], Resource],
    *,
    expected_status: int = HTTP_CREATED,
) -> Result:
    try:
        if response.status_code == expected_status:
            return Created(_decode_body(response, resource_decoder, "resource"))
        return ApiError(_decode_body(response, ApiException.from_json, "API error"))
    except TransportError as e:
        return TransportFailure(e)
