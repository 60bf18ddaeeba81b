"""Value objects exchanged with the REST API.

Resources are snapshots decoded once from the JSON body of a response. Field
names follow the JSON keys, except ``from`` which is exposed as ``from_``.
Unknown keys are ignored and missing keys decode as ``None``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional, Union

from ..common.config import DEFAULT_BASE_URL
from .errors import TransportError

# RFC 1123 with numeric zone, e.g. "Wed, 18 Aug 2010 20:01:40 +0000"
RFC1123Z = "%a, %d %b %Y %H:%M:%S %z"


def parse_rfc1123z(value: Optional[str]) -> datetime:
    if not value:
        raise ValueError("empty date string")
    return datetime.strptime(value, RFC1123Z)


def _opt_float(v: Any) -> Optional[float]:
    # the API sends price as a string ("-0.00750") or null
    if v is None or v == "":
        return None
    f = float(v)
    if not math.isfinite(f):
        raise ValueError(f"not a finite number: {v!r}")
    return f


def _opt_int(v: Any) -> Optional[int]:
    if v is None or v == "":
        return None
    if isinstance(v, float) and not v.is_integer():
        raise ValueError(f"not an integer: {v!r}")
    return int(v)


def _from_json(cls, payload: Dict[str, Any], converters: Dict[str, Any]):
    if not isinstance(payload, dict):
        raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
    kwargs = {}
    for f in fields(cls):
        key = "from" if f.name == "from_" else f.name
        value = payload.get(key)
        conv = converters.get(f.name)
        kwargs[f.name] = conv(value) if conv else value
    return cls(**kwargs)


@dataclass(frozen=True)
class Credentials:
    account_sid: str
    auth_token: str
    base_url: str = DEFAULT_BASE_URL

    def account_url(self, resource: str) -> str:
        return f"{self.base_url.rstrip('/')}/Accounts/{self.account_sid}/{resource}"


@dataclass
class CallbackParameters:
    """Parameters for a call driven by TwiML fetched from ``url``.

    Unset (``None``) and empty optional values are left out of the request.
    ``record`` is always sent.
    """

    url: str
    method: Optional[str] = None
    fallback_url: Optional[str] = None
    fallback_method: Optional[str] = None
    status_callback: Optional[str] = None
    status_callback_method: Optional[str] = None
    send_digits: Optional[str] = None
    if_machine: Optional[str] = None  # "Continue" or "Hangup"
    timeout: Optional[int] = None
    record: bool = False

    @classmethod
    def with_default_timeout(cls, url: str) -> "CallbackParameters":
        return cls(url=url, timeout=60)


@dataclass(frozen=True)
class ApiException:
    status: Optional[int]
    message: Optional[str]
    code: Optional[int]
    more_info: Optional[str]

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "ApiException":
        return _from_json(
            cls,
            payload,
            {"status": _opt_int, "code": _opt_int},
        )


@dataclass(frozen=True)
class MessageResource:
    sid: Optional[str] = None
    date_created: Optional[str] = None
    date_updated: Optional[str] = None
    date_sent: Optional[str] = None
    account_sid: Optional[str] = None
    to: Optional[str] = None
    from_: Optional[str] = None
    media_url: Optional[str] = None
    body: Optional[str] = None
    status: Optional[str] = None
    direction: Optional[str] = None
    api_version: Optional[str] = None
    price: Optional[float] = None
    uri: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "MessageResource":
        return _from_json(cls, payload, {"price": _opt_float})

    def date_created_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.date_created)

    def date_updated_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.date_updated)

    def date_sent_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.date_sent)


@dataclass(frozen=True)
class CallResource:
    sid: Optional[str] = None
    date_created: Optional[str] = None
    date_updated: Optional[str] = None
    parent_call_sid: Optional[str] = None
    account_sid: Optional[str] = None
    to: Optional[str] = None
    to_formatted: Optional[str] = None
    from_: Optional[str] = None
    from_formatted: Optional[str] = None
    phone_number_sid: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration: Optional[int] = None
    price: Optional[float] = None
    direction: Optional[str] = None
    answered_by: Optional[str] = None
    api_version: Optional[str] = None
    annotation: Optional[str] = None
    forwarded_from: Optional[str] = None
    group_sid: Optional[str] = None
    caller_name: Optional[str] = None
    uri: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "CallResource":
        return _from_json(cls, payload, {"price": _opt_float, "duration": _opt_int})

    def date_created_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.date_created)

    def date_updated_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.date_updated)

    def start_time_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.start_time)

    def end_time_as_datetime(self) -> datetime:
        return parse_rfc1123z(self.end_time)


Resource = Union[MessageResource, CallResource]


@dataclass(frozen=True)
class Created:
    resource: Resource

    ok = True
    exception = None
    error = None


@dataclass(frozen=True)
class ApiError:
    exception: ApiException

    ok = False
    resource = None
    error = None


@dataclass(frozen=True)
class TransportFailure:
    error: TransportError

    ok = False
    resource = None
    exception = None


Result = Union[Created, ApiError, TransportFailure]
