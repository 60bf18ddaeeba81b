"""Form bodies for the Messages and Calls resources.

Forms are ordered lists of ``(key, value)`` string pairs, which ``requests``
url-encodes as-is. Required keys are always present. Optional keys are left
out when unset or empty, except ``Record`` which is always sent as
``"true"``/``"false"``: the API treats a missing ``Record`` differently from
an explicit ``false``.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..domain.models import CallbackParameters

FormValues = List[Tuple[str, str]]


def _set_optional(form: FormValues, key: str, value: Optional[str]) -> None:
    if value is None or value == "":
        return
    form.append((key, value))


def message_form(
    to: str,
    body: str,
    *,
    media_url: Optional[str] = None,
    status_callback: Optional[str] = None,
    application_sid: Optional[str] = None,
) -> FormValues:
    form: FormValues = [("To", to), ("Body", body)]
    _set_optional(form, "MediaURL", media_url)
    _set_optional(form, "StatusCallback", status_callback)
    _set_optional(form, "ApplicationSid", application_sid)
    return form


def url_call_form(from_: str, to: str, params: CallbackParameters) -> FormValues:
    form: FormValues = [("From", from_), ("To", to), ("Url", params.url)]

    _set_optional(form, "Method", params.method)
    _set_optional(form, "FallbackURL", params.fallback_url)
    _set_optional(form, "FallbackMethod", params.fallback_method)
    _set_optional(form, "StatusCallback", params.status_callback)
    _set_optional(form, "StatusCallbackMethod", params.status_callback_method)
    _set_optional(form, "SendDigits", params.send_digits)
    _set_optional(form, "IfMachine", params.if_machine)
    # zero means "not set"; negative values go through unchecked
    if params.timeout:
        form.append(("Timeout", str(params.timeout)))
    form.append(("Record", "true" if params.record else "false"))

    return form


def application_call_form(from_: str, to: str, application_sid: str) -> FormValues:
    return [("From", from_), ("To", to), ("ApplicationSid", application_sid)]
