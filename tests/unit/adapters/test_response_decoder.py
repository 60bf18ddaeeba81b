from twilio_lite.adapters.response_decoder import HTTP_OK, decode_response
from twilio_lite.domain.errors import TransportError
from twilio_lite.domain.models import (
    ApiError,
    CallResource,
    Created,
    MessageResource,
    TransportFailure,
)
from tests.helpers.http_fakes import CALL_JSON, ERROR_JSON, MESSAGE_JSON, DummyResp


def test_created_decodes_resource():
    result = decode_response(DummyResp(status_code=201, json_payload=MESSAGE_JSON), MessageResource.from_json)

    assert isinstance(result, Created)
    assert result.ok is True
    assert result.resource.sid == "SM1234567890abcdef"
    assert result.resource.from_ == "+14158675309"
    assert result.exception is None
    assert result.error is None


def test_error_status_decodes_api_exception():
    result = decode_response(DummyResp(status_code=400, json_payload=ERROR_JSON), MessageResource.from_json)

    assert isinstance(result, ApiError)
    assert result.ok is False
    assert result.resource is None
    assert result.error is None
    assert result.exception.status == 400
    assert result.exception.code == 21211
    assert result.exception.message == "invalid number"
    assert result.exception.more_info.startswith("https://")


def test_200_is_an_api_error_when_201_expected():
    result = decode_response(DummyResp(status_code=200, json_payload=ERROR_JSON), CallResource.from_json)
    assert isinstance(result, ApiError)


def test_expected_status_can_be_200_for_fetches():
    result = decode_response(
        DummyResp(status_code=200, json_payload=CALL_JSON),
        CallResource.from_json,
        expected_status=HTTP_OK,
    )
    assert isinstance(result, Created)
    assert result.resource.duration == 15


def test_malformed_success_body_is_transport_failure():
    result = decode_response(DummyResp(status_code=201, text="{not json"), MessageResource.from_json)

    assert isinstance(result, TransportFailure)
    assert result.resource is None
    assert result.exception is None
    assert isinstance(result.error, TransportError)
    assert "201" in str(result.error)


def test_malformed_error_body_is_transport_failure():
    result = decode_response(DummyResp(status_code=500, text="<html>oops</html>"), CallResource.from_json)

    assert isinstance(result, TransportFailure)
    assert result.exception is None
    assert "500" in str(result.error)


def test_non_object_body_is_transport_failure():
    result = decode_response(DummyResp(status_code=201, text="[1, 2]"), MessageResource.from_json)
    assert isinstance(result, TransportFailure)


def test_overflowing_error_status_is_transport_failure():
    text = '{"status": 1e400, "message": "invalid number", "code": 21211, "more_info": "https://x"}'
    result = decode_response(DummyResp(status_code=400, text=text), MessageResource.from_json)

    assert isinstance(result, TransportFailure)
    assert result.exception is None


def test_overflowing_duration_is_transport_failure():
    text = '{"sid": "CA1", "duration": 1e400}'
    result = decode_response(DummyResp(status_code=201, text=text), CallResource.from_json)

    assert isinstance(result, TransportFailure)
    assert result.resource is None


def test_fractional_error_code_is_transport_failure():
    text = '{"status": 400, "message": "x", "code": 21211.5, "more_info": "https://x"}'
    result = decode_response(DummyResp(status_code=400, text=text), CallResource.from_json)
    assert isinstance(result, TransportFailure)


def test_non_finite_price_is_transport_failure():
    result = decode_response(
        DummyResp(status_code=201, text='{"sid": "SM1", "price": -1e400}'),
        MessageResource.from_json,
    )
    assert isinstance(result, TransportFailure)


def test_whole_float_code_is_accepted():
    text = '{"status": 400.0, "message": "x", "code": 21211.0, "more_info": "https://x"}'
    result = decode_response(DummyResp(status_code=400, text=text), CallResource.from_json)

    assert isinstance(result, ApiError)
    assert result.exception.code == 21211
