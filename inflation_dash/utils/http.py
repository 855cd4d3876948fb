import logging
from dataclasses import dataclass
from typing import Any

import httpx
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

log = logging.getLogger("http")

@dataclass(frozen=True)
class HttpPolicy:
    user_agent: str = "inflation-dash/1.0"
    timeout_seconds: float = 20.0
    attempts: int = 3

class HttpClient:
    """
    Thin async client with:
    - explicit User-Agent
    - conservative timeouts
    - retry on transport errors only (status errors propagate)
    """

    def __init__(self, policy: HttpPolicy | None = None, client: httpx.AsyncClient | None = None):
        self.policy = policy or HttpPolicy()
        self._client = client or httpx.AsyncClient(
            headers={"User-Agent": self.policy.user_agent},
            timeout=self.policy.timeout_seconds,
            follow_redirects=True,
        )
        self._retrying = retry(
            retry=retry_if_exception_type(httpx.TransportError),
            stop=stop_after_attempt(self.policy.attempts),
            wait=wait_exponential(multiplier=0.5, max=8),
            reraise=True,
        )

    async def post_json(self, url: str, payload: dict, params: dict[str, Any] | None = None) -> dict:
        async def _once() -> dict:
            resp = await self._client.post(url, json=payload, params=params)
            resp.raise_for_status()
            return resp.json()

        return await self._retrying(_once)()

    async def aclose(self) -> None:
        await self._client.aclose()
