import pathlib

import pytest

import twilio_lite.common.http_client as http_client


# ----------------------------
#  Auto-mark tests by folder
# ----------------------------

def pytest_collection_modifyitems(config, items):
    for item in items:
        p = pathlib.Path(str(item.fspath)).as_posix()
        if "/tests/unit/" in p:
            item.add_marker(pytest.mark.unit)
        elif "/tests/integration/" in p:
            item.add_marker(pytest.mark.integration)


@pytest.fixture(autouse=True)
def reset_http_session_singleton():
    http_client._SESSION = None


@pytest.fixture(autouse=True)
def no_twilio_env(monkeypatch):
    """Keep a developer's real credentials out of unit tests."""
    for var in (
        "TWILIO_ACCOUNT_SID",
        "TWILIO_AUTH_TOKEN",
        "TWILIO_BASE_URL",
        "HTTP_TIMEOUT_S",
    ):
        monkeypatch.delenv(var, raising=False)
