import pytest

from inflation_dash import config
from inflation_dash.config import load_settings

ENV_VARS = (
    "GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL", "REFRESH_INTERVAL_MINUTES", "FORECAST_HORIZON",
    "PORT", "SEED_PATH", "REFRESH_ON_START", "HTTP_TIMEOUT_SECONDS", "LOG_LEVEL", "TIMEZONE",
    "INITIAL_DELAY_SECONDS", "HOST",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # keep a developer's .env out of the picture
    monkeypatch.setattr(config, "load_dotenv", lambda: None)


def test_defaults():
    s = load_settings()
    assert s.gemini_api_key is None
    assert s.gemini_model == "gemini-3-flash-preview"
    assert s.refresh_interval_minutes == 60
    assert s.initial_delay_seconds == 2.0
    assert s.forecast_horizon == 6
    assert s.timezone == "Africa/Lagos"
    assert s.seed_path is None
    assert s.port == 8080
    assert s.refresh_on_start is True
    assert s.log_level == "INFO"


def test_api_key_fallback(monkeypatch):
    monkeypatch.setenv("API_KEY", " abc ")
    assert load_settings().gemini_api_key == "abc"
    monkeypatch.setenv("GEMINI_API_KEY", "primary")
    assert load_settings().gemini_api_key == "primary"


def test_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("REFRESH_INTERVAL_MINUTES", "15")
    monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "7.5")
    monkeypatch.setenv("REFRESH_ON_START", "no")
    monkeypatch.setenv("SEED_PATH", str(tmp_path / "seed.yaml"))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = load_settings()
    assert s.refresh_interval_minutes == 15
    assert s.http_timeout_seconds == 7.5
    assert s.refresh_on_start is False
    assert s.seed_path == (tmp_path / "seed.yaml").resolve()
    assert s.log_level == "DEBUG"


@pytest.mark.parametrize("name,value", [
    ("PORT", "eighty"),
    ("FORECAST_HORIZON", "0"),
    ("REFRESH_INTERVAL_MINUTES", "0"),
    ("HTTP_TIMEOUT_SECONDS", "fast"),
])
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError, match=name):
        load_settings()
