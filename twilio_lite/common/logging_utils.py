"""Library logging: the ``twilio-lite`` logger and outcome records.

The library only emits DEBUG records and installs a ``NullHandler``, so an
application that configures no logging sees nothing. Records never carry the
message body; numbers and SIDs are masked.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger("twilio-lite")
logger.addHandler(logging.NullHandler())


def mask_phone(phone: str | None) -> str | None:
    if not phone:
        return phone
    # last digits + hash
    suffix = phone[-4:]
    digest = hashlib.sha256(phone.encode("utf-8")).hexdigest()[:8]
    return f"...{suffix}#{digest}"


def mask_twilio_sid(sid: str | None) -> str | None:
    if not sid or len(sid) <= 6:
        return sid
    return f"{sid[:2]}...{sid[-4:]}"


def outcome_record(op: str, result: Any, *, to: Optional[str] = None) -> Dict[str, Any]:
    """Structured record for one operation result (Created / ApiError / TransportFailure)."""
    record: Dict[str, Any] = {"twilio": op}
    if to is not None:
        record["to"] = mask_phone(to)

    if result.ok:
        record["outcome"] = "created"
        record["sid"] = mask_twilio_sid(result.resource.sid)
        record["status"] = result.resource.status
    elif result.exception is not None:
        record["outcome"] = "api_error"
        record["api_status"] = result.exception.status
        record["api_code"] = result.exception.code
    else:
        record["outcome"] = "transport_failure"
        record["error"] = type(result.error.__cause__ or result.error).__name__
    return record


def log_outcome(op: str, result: Any, *, to: Optional[str] = None) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(outcome_record(op, result, to=to))
