"""A small Twilio REST API client over plain HTTPS.

The layout follows the SDK-like contract: ``TwilioClient(...).messages`` and
``TwilioClient(...).calls``, with the most common operations also available
directly on the client.

Every operation performs exactly one request and returns one result object:

- ``Created``          - the resource was created (or fetched),
- ``ApiError``         - the API answered with a structured error body,
- ``TransportFailure`` - the exchange failed or the body was not decodable.

Nothing is raised for API or transport problems and nothing is retried.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from requests.utils import quote

from ..common.config import DEFAULT_BASE_URL, Settings
from ..common.http_client import HttpHandle
from ..common.logging_utils import log_outcome
from ..domain.errors import TransportError
from ..domain.models import (
    CallbackParameters,
    CallResource,
    Credentials,
    MessageResource,
    Resource,
    Result,
    TransportFailure,
)
from .form_builder import (
    FormValues,
    application_call_form,
    message_form,
    url_call_form,
)
from .response_decoder import HTTP_CREATED, HTTP_OK, decode_response
from .transport import Transport


class _Resource:
    def __init__(self, *, credentials: Credentials, transport: Transport) -> None:
        self._credentials = credentials
        self._transport = transport

    def _post(
        self,
        path: str,
        form: FormValues,
        decoder: Callable[[Dict[str, Any]], Resource],
    ) -> Result:
        url = self._credentials.account_url(path)
        try:
            response = self._transport.post(form, url)
        except TransportError as e:
            return TransportFailure(e)
        return decode_response(response, decoder, expected_status=HTTP_CREATED)

    def _get(self, path: str, decoder: Callable[[Dict[str, Any]], Resource]) -> Result:
        url = self._credentials.account_url(path)
        try:
            response = self._transport.get(url)
        except TransportError as e:
            return TransportFailure(e)
        return decode_response(response, decoder, expected_status=HTTP_OK)


class _MessagesResource(_Resource):
    PATH = "Messages.json"

    def _send(self, form: FormValues, to: str) -> Result:
        result = self._post(self.PATH, form, MessageResource.from_json)
        log_outcome("message_create", result, to=to)
        return result

    def send_sms(
        self,
        from_: str,
        to: str,
        body: str,
        status_callback: Optional[str] = None,
        application_sid: Optional[str] = None,
    ) -> Result:
        """Send a text message from a phone number."""
        form = message_form(
            to, body, status_callback=status_callback, application_sid=application_sid
        )
        form.append(("From", from_))
        return self._send(form, to)

    def send_sms_with_messaging_service(
        self,
        messaging_service_sid: str,
        to: str,
        body: str,
        status_callback: Optional[str] = None,
        application_sid: Optional[str] = None,
    ) -> Result:
        """Send a text message through a Messaging Service (sender picked by the service)."""
        form = message_form(
            to, body, status_callback=status_callback, application_sid=application_sid
        )
        form.append(("MessagingServiceSid", messaging_service_sid))
        return self._send(form, to)

    def send_mms(
        self,
        from_: str,
        to: str,
        body: str,
        media_url: str,
        status_callback: Optional[str] = None,
        application_sid: Optional[str] = None,
    ) -> Result:
        """Send a multimedia message; ``media_url`` must be publicly reachable."""
        form = message_form(
            to,
            body,
            media_url=media_url,
            status_callback=status_callback,
            application_sid=application_sid,
        )
        form.append(("From", from_))
        return self._send(form, to)

    def fetch(self, message_sid: str) -> Result:
        path = f"Messages/{quote(message_sid, safe='')}.json"
        result = self._get(path, MessageResource.from_json)
        log_outcome("message_fetch", result)
        return result


class _CallsResource(_Resource):
    PATH = "Calls.json"

    def _place(self, form: FormValues, to: str) -> Result:
        result = self._post(self.PATH, form, CallResource.from_json)
        log_outcome("call_create", result, to=to)
        return result

    def call_with_url_callbacks(
        self, from_: str, to: str, params: CallbackParameters
    ) -> Result:
        """Place a call whose TwiML is fetched from ``params.url``."""
        return self._place(url_call_form(from_, to, params), to)

    def call_with_application(self, from_: str, to: str, application_sid: str) -> Result:
        """Place a call handled by the TwiML application ``application_sid``."""
        return self._place(application_call_form(from_, to, application_sid), to)

    def fetch(self, call_sid: str) -> Result:
        path = f"Calls/{quote(call_sid, safe='')}.json"
        result = self._get(path, CallResource.from_json)
        log_outcome("call_fetch", result)
        return result


class TwilioClient:
    """SDK-like entrypoint: TwilioClient(account_sid, auth_token).

    ``http`` is any object with ``requests.Session``-style ``post``/``get``;
    by default the shared pooled session is used. The client keeps no
    per-call state, so one instance can be shared between threads as long as
    the handle can.
    """

    def __init__(
        self,
        account_sid: str,
        auth_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        http: Optional[HttpHandle] = None,
    ) -> None:
        self.credentials = Credentials(
            account_sid=account_sid, auth_token=auth_token, base_url=base_url
        )
        transport = Transport(self.credentials, http)
        self.messages = _MessagesResource(credentials=self.credentials, transport=transport)
        self.calls = _CallsResource(credentials=self.credentials, transport=transport)

    @classmethod
    def from_settings(
        cls, cfg: Optional[Settings] = None, *, http: Optional[HttpHandle] = None
    ) -> "TwilioClient":
        cfg = cfg or Settings.from_env()
        account_sid = (cfg.twilio_account_sid or "").strip()
        auth_token = (cfg.twilio_auth_token or "").strip()
        if not account_sid or not auth_token:
            raise ValueError("Missing TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN")
        return cls(
            account_sid,
            auth_token,
            base_url=(cfg.twilio_base_url or DEFAULT_BASE_URL).strip(),
            http=http,
        )

    # Shortcuts, same signatures as the resource methods.

    def send_sms(self, from_, to, body, status_callback=None, application_sid=None) -> Result:
        return self.messages.send_sms(from_, to, body, status_callback, application_sid)

    def send_sms_with_messaging_service(
        self, messaging_service_sid, to, body, status_callback=None, application_sid=None
    ) -> Result:
        return self.messages.send_sms_with_messaging_service(
            messaging_service_sid, to, body, status_callback, application_sid
        )

    def send_mms(
        self, from_, to, body, media_url, status_callback=None, application_sid=None
    ) -> Result:
        return self.messages.send_mms(
            from_, to, body, media_url, status_callback, application_sid
        )

    def call_with_url_callbacks(self, from_, to, params: CallbackParameters) -> Result:
        return self.calls.call_with_url_callbacks(from_, to, params)

    def call_with_application(self, from_, to, application_sid) -> Result:
        return self.calls.call_with_application(from_, to, application_sid)

    def fetch_message(self, message_sid: str) -> Result:
        return self.messages.fetch(message_sid)

    def fetch_call(self, call_sid: str) -> Result:
        return self.calls.fetch(call_sid)
