import logging
from typing import Any, Sequence

import httpx

from inflation_dash.errors import ProviderError
from inflation_dash.models import CommodityEntry, ExternalReadingSet, TimeSeriesPoint
from inflation_dash.providers.base import MarketDataProvider
from inflation_dash.utils.format import fmt_naira, fmt_number
from inflation_dash.utils.http import HttpClient
from inflation_dash.utils.text import parse_market_readings

log = logging.getLogger("provider.gemini")

DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"

READINGS_PROMPT = """
Perform a Google Search to find the very latest available data for Nigeria (current year) for:
1. Nigeria Headline Inflation Rate (NBS year-on-year % change).
2. Current market price of a 50kg bag of foreign rice in Nigeria (Lagos/General market).
3. Current pump price of Petrol (PMS) per liter in Nigeria.
4. Current price of 12.5kg Cooking Gas cylinder.

Extract the numeric values representing the current price or rate.

Return the data in this specific text format:
INFLATION: <value>%
RICE: <value>
PETROL: <value>
GAS: <value>

Example format (do not use these numbers, find real ones):
INFLATION: 33.20%
RICE: 95000
PETROL: 1050
GAS: 16000
"""

ANALYSIS_PROMPT = """
You are a Senior Economist specializing in the Nigerian economy.
Analyze the following data for a dashboard user:

Recent Inflation Trend: [{recent}]
Key Commodity Prices: [{prices}]
Forecasting Model Used: {model}

Please provide a concise, 3-paragraph executive summary:
1. **Current Status**: Interpret the latest inflation numbers. Is it accelerating or decelerating? Mention key drivers (e.g., currency devaluation, fuel subsidy).
2. **Impact Analysis**: How does the price of rice/fuel affect the average Nigerian household's purchasing power right now?
3. **Short-term Outlook**: Based on the trend, what should consumers expect in the next 3 months?

Keep the tone professional yet accessible. Use markdown for bolding key terms.
"""

TIPS_PROMPT = """
User Profile: Lives in {location}, Nigeria. Monthly Salary: ₦{salary}.
Current economic context: High inflation (~33%), high fuel costs.

Provide 4 specific, actionable, and culturally relevant money-saving tips for this user.
Focus on food substitution, transport hacks, and energy conservation relevant to Nigeria.
Format as a bulleted list.
"""

NO_KEY_ANALYSIS = "API Key not configured. Please set a valid API Key to receive AI insights."
NO_KEY_TIPS = "API Key missing."
ANALYSIS_UNAVAILABLE = "Analysis currently unavailable."
ANALYSIS_FAILED = "Unable to generate analysis at this time due to network or API restrictions."
TIPS_UNAVAILABLE = "Tips unavailable."
TIPS_FAILED = "Could not retrieve tips."

def response_text(body: Any) -> str:
    """Concatenate the text parts of the first candidate; "" for any other shape."""
    if not isinstance(body, dict):
        return ""
    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
        return ""
    content = candidates[0].get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))

class GeminiProvider(MarketDataProvider):
    name = "GEMINI"

    def __init__(
        self,
        http: HttpClient,
        api_key: str | None,
        model: str = "gemini-3-flash-preview",
        base_url: str = DEFAULT_BASE_URL,
    ):
        self.http = http
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    async def _generate(self, prompt: str, *, search: bool = False) -> str:
        payload: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if search:
            payload["tools"] = [{"google_search": {}}]
        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = await self.http.post_json(url, payload, params={"key": self.api_key})
        return response_text(body)

    async def fetch_readings(self) -> ExternalReadingSet:
        if not self.configured:
            log.warning("API key missing for live data fetch")
            return ExternalReadingSet()
        try:
            text = await self._generate(READINGS_PROMPT, search=True)
        except (httpx.HTTPError, ValueError) as ex:
            raise ProviderError(f"live data fetch failed: {ex}") from ex
        return parse_market_readings(text)

    async def analyze_economy(
        self,
        history: Sequence[TimeSeriesPoint],
        commodities: Sequence[CommodityEntry],
        model_label: str,
    ) -> str:
        if not self.configured:
            return NO_KEY_ANALYSIS

        recent = ", ".join(f"{p.period}: {fmt_number(p.value)}%" for p in list(history)[-5:])
        prices = ", ".join(f"{c.name} is {fmt_naira(c.current_price)}" for c in commodities)
        prompt = ANALYSIS_PROMPT.format(recent=recent, prices=prices, model=model_label)
        try:
            return await self._generate(prompt) or ANALYSIS_UNAVAILABLE
        except (httpx.HTTPError, ValueError) as ex:
            log.exception("Analysis request failed: %s", ex)
            return ANALYSIS_FAILED

    async def cost_of_living_tips(self, salary: float, location: str) -> str:
        if not self.configured:
            return NO_KEY_TIPS

        prompt = TIPS_PROMPT.format(location=location, salary=fmt_number(salary))
        try:
            return await self._generate(prompt) or TIPS_UNAVAILABLE
        except (httpx.HTTPError, ValueError) as ex:
            log.exception("Tips request failed: %s", ex)
            return TIPS_FAILED
