from twilio_lite.common.config import DEFAULT_BASE_URL, Settings


def test_from_env_defaults(monkeypatch):
    monkeypatch.delenv("HTTP_POOL_CONN", raising=False)
    monkeypatch.delenv("HTTP_POOL_MAX", raising=False)

    cfg = Settings.from_env()

    assert cfg.twilio_account_sid == ""
    assert cfg.twilio_base_url == DEFAULT_BASE_URL
    assert cfg.http_pool_conn == 32
    assert cfg.http_timeout_s is None


def test_from_env_reads_values(monkeypatch):
    monkeypatch.setenv("TWILIO_ACCOUNT_SID", "AC1")
    monkeypatch.setenv("TWILIO_AUTH_TOKEN", "tok")
    monkeypatch.setenv("TWILIO_BASE_URL", "http://localhost:9000/2010-04-01")
    monkeypatch.setenv("HTTP_POOL_MAX", "4")
    monkeypatch.setenv("HTTP_TIMEOUT_S", "3")

    cfg = Settings.from_env()

    assert cfg.twilio_account_sid == "AC1"
    assert cfg.twilio_auth_token == "tok"
    assert cfg.twilio_base_url == "http://localhost:9000/2010-04-01"
    assert cfg.http_pool_max == 4
    assert cfg.http_timeout_s == 3.0


def test_bad_pool_size_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("HTTP_POOL_CONN", "lots")
    assert Settings.from_env().http_pool_conn == 32


def test_bad_timeout_falls_back_to_none(monkeypatch):
    monkeypatch.setenv("HTTP_TIMEOUT_S", "abc")
    assert Settings.from_env().http_timeout_s is None


def test_bad_timeout_does_not_break_default_session(monkeypatch):
    import twilio_lite.common.http_client as http_client

    monkeypatch.setenv("HTTP_TIMEOUT_S", "abc")

    s = http_client.get_session()

    assert s.adapters.get("https://").timeout is None
