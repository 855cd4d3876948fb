"""
Shared fixtures for inflation_dash tests.
"""
import asyncio
from typing import Sequence

import pytest

from inflation_dash import seed
from inflation_dash.forecast import zero_noise
from inflation_dash.models import CommodityEntry, ExternalReadingSet, IndicatorEntry, TimeSeriesPoint
from inflation_dash.providers.base import MarketDataProvider
from inflation_dash.services.dashboard import DashboardState


class FakeProvider(MarketDataProvider):
    """Scripted provider: returns queued readings, or raises queued exceptions."""

    name = "FAKE"

    def __init__(self, *results):
        self.results = list(results)
        self.calls = 0
        self.gate: asyncio.Event | None = None

    async def fetch_readings(self) -> ExternalReadingSet:
        self.calls += 1
        if self.gate is not None:
            await self.gate.wait()
        r = self.results.pop(0) if self.results else ExternalReadingSet()
        if isinstance(r, BaseException):
            raise r
        return r

    async def analyze_economy(self, history: Sequence[TimeSeriesPoint], commodities: Sequence[CommodityEntry],
                              model_label: str) -> str:
        return f"### Current Status\nModel {model_label} over {len(history)} points\n- rice is dear"

    async def cost_of_living_tips(self, salary: float, location: str) -> str:
        return f"- Cook at home in {location}"


@pytest.fixture
def rice() -> CommodityEntry:
    return CommodityEntry(
        id="1",
        name="Rice",
        category="Food",
        current_price=95000,
        previous_price=88000,
        unit="bag",
        trend="up",
    )


@pytest.fixture
def headline() -> IndicatorEntry:
    return IndicatorEntry(
        label="Headline Inflation",
        display_value="33.8%",
        change_from_prior=1.1,
        trend="up",
        description="Year-on-Year change in CPI",
    )


@pytest.fixture
def history() -> list[TimeSeriesPoint]:
    return seed.inflation_history()


@pytest.fixture
def state() -> DashboardState:
    return DashboardState.from_seed(seed.default_seed(), noise=zero_noise)


def make_history(*pairs: tuple[str, float]) -> list[TimeSeriesPoint]:
    return [TimeSeriesPoint(period=p, value=v) for p, v in pairs]
