import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

def _get_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")

def _get_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return int(v)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {v!r}") from None

def _get_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    try:
        return float(v)
    except ValueError:
        raise RuntimeError(f"{name} must be a number, got {v!r}") from None

@dataclass(frozen=True)
class Settings:
    gemini_api_key: str | None
    gemini_model: str
    gemini_base_url: str

    http_timeout_seconds: float
    fetch_timeout_seconds: float

    refresh_interval_minutes: int
    initial_delay_seconds: float
    refresh_on_start: bool

    forecast_horizon: int

    timezone: str
    seed_path: Path | None

    host: str
    port: int

    log_level: str

def load_settings() -> Settings:
    load_dotenv()

    api_key = (os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or "").strip() or None
    seed = os.getenv("SEED_PATH", "").strip()

    horizon = _get_int("FORECAST_HORIZON", 6)
    if horizon < 1:
        raise RuntimeError("FORECAST_HORIZON must be >= 1")
    interval = _get_int("REFRESH_INTERVAL_MINUTES", 60)
    if interval < 1:
        raise RuntimeError("REFRESH_INTERVAL_MINUTES must be >= 1")

    return Settings(
        gemini_api_key=api_key,
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-3-flash-preview"),
        gemini_base_url=os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"),
        http_timeout_seconds=_get_float("HTTP_TIMEOUT_SECONDS", 20.0),
        fetch_timeout_seconds=_get_float("FETCH_TIMEOUT_SECONDS", 60.0),
        refresh_interval_minutes=interval,
        initial_delay_seconds=_get_float("INITIAL_DELAY_SECONDS", 2.0),
        refresh_on_start=_get_bool("REFRESH_ON_START", True),
        forecast_horizon=horizon,
        timezone=os.getenv("TIMEZONE", "Africa/Lagos"),
        seed_path=Path(seed).resolve() if seed else None,
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int("PORT", 8080),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
