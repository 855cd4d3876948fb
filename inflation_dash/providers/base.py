from abc import ABC, abstractmethod
from typing import Sequence

from inflation_dash.models import CommodityEntry, ExternalReadingSet, TimeSeriesPoint

class MarketDataProvider(ABC):
    name: str

    @abstractmethod
    async def fetch_readings(self) -> ExternalReadingSet:
        """
        Return the latest headline inflation and commodity prices.
        An empty reading set means "nothing to apply"; transport or API
        failures raise ProviderError.
        """
        raise NotImplementedError

    @abstractmethod
    async def analyze_economy(
        self,
        history: Sequence[TimeSeriesPoint],
        commodities: Sequence[CommodityEntry],
        model_label: str,
    ) -> str:
        raise NotImplementedError

    @abstractmethod
    async def cost_of_living_tips(self, salary: float, location: str) -> str:
        raise NotImplementedError
