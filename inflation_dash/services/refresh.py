import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from inflation_dash.providers.base import MarketDataProvider
from inflation_dash.reconcile import merge_live_data
from inflation_dash.services.dashboard import DashboardState
from inflation_dash.utils.format import fmt_dt
from inflation_dash.utils.timeutil import Clock

log = logging.getLogger("refresh")

class RefreshPhase(str, Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    APPLYING = "applying"

class RefreshOutcome(str, Enum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    EMPTY = "empty"
    FAILED = "failed"
    BUSY = "busy"

class RefreshController:
    """
    One fetch-then-merge cycle at a time:

        IDLE -> FETCHING -> APPLYING -> IDLE
                         \\-> IDLE (empty / failed)

    A trigger that arrives while a cycle is in flight is dropped (BUSY),
    not queued. A failed or empty fetch leaves the dashboard state as it was.
    """

    def __init__(
        self,
        provider: MarketDataProvider,
        state: DashboardState,
        *,
        fetch_timeout_seconds: float = 60.0,
        clock: Clock | None = None,
    ):
        self.provider = provider
        self.state = state
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.clock: Clock = clock or (lambda: datetime.now(timezone.utc))

        self.phase = RefreshPhase.IDLE
        self.last_updated: datetime | None = None
        self.last_error: str | None = None
        self.cycles_applied = 0
        self.cycles_skipped = 0

    @property
    def busy(self) -> bool:
        return self.phase is not RefreshPhase.IDLE

    async def refresh(self) -> RefreshOutcome:
        if self.busy:
            log.info("Refresh already in flight (%s); dropping trigger", self.phase.value)
            return RefreshOutcome.BUSY

        self.phase = RefreshPhase.FETCHING
        try:
            try:
                readings = await asyncio.wait_for(self.provider.fetch_readings(), timeout=self.fetch_timeout_seconds)
            except Exception as ex:
                self.last_error = f"{type(ex).__name__}: {ex}"
                self.cycles_skipped += 1
                log.exception("Live data fetch failed: %s", ex)
                return RefreshOutcome.FAILED

            if readings.is_empty():
                self.cycles_skipped += 1
                log.info("Live data fetch returned nothing; keeping current state")
                return RefreshOutcome.EMPTY

            self.phase = RefreshPhase.APPLYING
            result = merge_live_data(self.state.commodities, self.state.indicators, readings)
            self.state.apply(result)
            self.last_updated = self.clock()
            self.last_error = None
            self.cycles_applied += 1
            log.info("Refresh applied (changed=%s) at %s", result.changed, self.last_updated.isoformat())
            return RefreshOutcome.APPLIED if result.changed else RefreshOutcome.UNCHANGED
        finally:
            self.phase = RefreshPhase.IDLE

    def status(self) -> dict[str, Any]:
        return {
            "phase": self.phase.value,
            "last_updated": fmt_dt(self.last_updated),
            "last_error": self.last_error,
            "cycles_applied": self.cycles_applied,
            "cycles_skipped": self.cycles_skipped,
        }
