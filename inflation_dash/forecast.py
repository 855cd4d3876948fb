"""
Forecast projection for the dashboard chart.

The projection is a linear drift from the last observed value plus a bounded,
symmetric perturbation, with a confidence band that widens linearly with the
step distance. The model labels offered to the user are presentation only and
all run the same projection.
"""
import logging
import random
from enum import Enum
from typing import Callable, Sequence

from inflation_dash.errors import InvalidInputError
from inflation_dash.models import TimeSeriesPoint, format_period

log = logging.getLogger("forecast")

DEFAULT_HORIZON = 6
TREND_RATE = 0.3  # pts per month, slight upward drift
VOLATILITY = 1.2
UNCERTAINTY_RATE = 0.8  # band half-width per month

NoiseSource = Callable[[int], float]

class ForecastModel(str, Enum):
    ARIMA = "ARIMA"
    SARIMA = "SARIMA"
    HOLT_WINTERS = "Holt-Winters"

    @classmethod
    def parse(cls, label: str) -> "ForecastModel":
        wanted = (label or "").strip().lower()
        for m in cls:
            if m.value.lower() == wanted or m.name.lower() == wanted:
                return m
        raise InvalidInputError(f"unknown forecast model {label!r}")

def uniform_noise(volatility: float = VOLATILITY, *, seed: int | None = None) -> NoiseSource:
    """Uniform draw in [-volatility/2, volatility/2], independent per step."""
    if volatility < 0:
        raise InvalidInputError("volatility must be >= 0")
    rng = random.Random(seed)
    half = volatility / 2

    def _draw(_step: int) -> float:
        return rng.uniform(-half, half)

    return _draw

def zero_noise(_step: int) -> float:
    return 0.0

def _check_sorted(history: Sequence[TimeSeriesPoint]) -> None:
    prev = None
    for p in history:
        ym = p.year_month
        if prev is not None and ym < prev:
            raise InvalidInputError(f"history is not sorted by period (at {p.period})")
        prev = ym

def _add_months(year: int, month: int, n: int) -> tuple[int, int]:
    idx = year * 12 + (month - 1) + n
    return idx // 12, idx % 12 + 1

def generate_forecast(
    history: Sequence[TimeSeriesPoint],
    horizon: int = DEFAULT_HORIZON,
    *,
    noise: NoiseSource | None = None,
    trend_rate: float = TREND_RATE,
    uncertainty_rate: float = UNCERTAINTY_RATE,
    volatility: float = VOLATILITY,
) -> list[TimeSeriesPoint]:
    if not history:
        raise InvalidInputError("history must not be empty")
    if isinstance(horizon, bool) or not isinstance(horizon, int) or horizon < 1:
        raise InvalidInputError(f"horizon must be a positive integer, got {horizon!r}")
    if uncertainty_rate < 0:
        raise InvalidInputError("uncertainty_rate must be >= 0")
    _check_sorted(history)

    draw = noise or uniform_noise(volatility)

    last = history[-1]
    v0 = last.value
    y0, m0 = last.year_month

    out: list[TimeSeriesPoint] = []
    for i in range(1, horizon + 1):
        year, month = _add_months(y0, m0, i)
        projected = v0 + trend_rate * i + draw(i)
        # bounds hang off the rounded value so the band never narrows
        value = round(projected, 2)
        spread = round(uncertainty_rate * i, 2)
        out.append(
            TimeSeriesPoint(
                period=format_period(year, month),
                value=value,
                is_projected=True,
                upper_bound=round(value + spread, 2),
                lower_bound=round(value - spread, 2),
            )
        )

    log.debug("Projected %d points from %s (last=%.2f)", horizon, last.period, v0)
    return out
