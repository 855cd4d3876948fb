import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from inflation_dash.services.refresh import RefreshController
from inflation_dash.utils.timeutil import in_seconds

log = logging.getLogger("services.scheduler")

class RefreshScheduler:
    def __init__(
        self,
        controller: RefreshController,
        *,
        tz_name: str,
        interval_minutes: int = 60,
        initial_delay_seconds: float = 2,
        refresh_on_start: bool = True,
    ):
        self.controller = controller
        self.tz_name = tz_name
        self.interval_minutes = interval_minutes
        self.initial_delay_seconds = initial_delay_seconds
        self.refresh_on_start = refresh_on_start
        self.sched = AsyncIOScheduler(timezone=tz_name)

    def start(self) -> None:
        if self.refresh_on_start:
            # initial refresh on boot
            self.sched.add_job(
                self.initial_refresh,
                "date",
                run_date=in_seconds(self.tz_name, self.initial_delay_seconds),
                id="initial_refresh",
                replace_existing=True,
            )
        self.sched.add_job(
            self.periodic_refresh,
            "interval",
            minutes=self.interval_minutes,
            id="periodic_refresh",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )
        self.sched.start()
        log.info("Scheduler started (every %d min)", self.interval_minutes)

    def shutdown(self) -> None:
        self.sched.shutdown(wait=False)

    async def initial_refresh(self) -> None:
        if self.controller.last_updated is not None:
            return
        await self.periodic_refresh()

    async def periodic_refresh(self) -> None:
        try:
            outcome = await self.controller.refresh()
            log.info("Scheduled refresh: %s", outcome.value)
        except Exception as ex:
            log.exception("Scheduled refresh error: %s", ex)
