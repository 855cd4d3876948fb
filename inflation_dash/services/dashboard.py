import logging
from dataclasses import dataclass, field
from typing import Any

from inflation_dash.forecast import DEFAULT_HORIZON, ForecastModel, NoiseSource, generate_forecast
from inflation_dash.models import CommodityEntry, IndicatorEntry, TimeSeriesPoint
from inflation_dash.reconcile import MergeResult
from inflation_dash.seed import SeedData

log = logging.getLogger("dashboard")

@dataclass
class DashboardState:
    history: list[TimeSeriesPoint]
    forecast: list[TimeSeriesPoint]
    commodities: list[CommodityEntry]
    indicators: list[IndicatorEntry]

    model: ForecastModel = ForecastModel.ARIMA
    show_forecast: bool = True
    horizon: int = DEFAULT_HORIZON

    # None -> the generator's default uniform noise
    noise: NoiseSource | None = field(default=None, repr=False)

    @classmethod
    def from_seed(cls, seed: SeedData, *, horizon: int = DEFAULT_HORIZON, noise: NoiseSource | None = None) -> "DashboardState":
        history = list(seed.history)
        return cls(
            history=history,
            forecast=generate_forecast(history, horizon, noise=noise),
            commodities=list(seed.commodities),
            indicators=list(seed.indicators),
            horizon=horizon,
            noise=noise,
        )

    def regenerate_forecast(self) -> list[TimeSeriesPoint]:
        self.forecast = generate_forecast(self.history, self.horizon, noise=self.noise)
        return self.forecast

    def select_model(self, label: str) -> ForecastModel:
        # labels only; every model re-runs the same projection
        self.model = ForecastModel.parse(label)
        self.regenerate_forecast()
        log.info("Forecast model set to %s", self.model.value)
        return self.model

    def apply(self, result: MergeResult) -> None:
        self.commodities, self.indicators = result.commodities, result.indicators

    def snapshot(self, refresh: dict[str, Any] | None = None) -> dict[str, Any]:
        out: dict[str, Any] = {
            "model": self.model.value,
            "show_forecast": self.show_forecast,
            "history": [p.to_dict() for p in self.history],
            "forecast": [p.to_dict() for p in self.forecast] if self.show_forecast else [],
            "commodities": [c.to_dict() for c in self.commodities],
            "indicators": [i.to_dict() for i in self.indicators],
        }
        if refresh is not None:
            out["refresh"] = refresh
        return out
