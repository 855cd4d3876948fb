import asyncio
import logging

import uvicorn

from inflation_dash.config import load_settings
from inflation_dash.logging_config import setup_logging
from inflation_dash.providers.gemini import GeminiProvider
from inflation_dash.seed import load_seed
from inflation_dash.services.dashboard import DashboardState
from inflation_dash.services.refresh import RefreshController
from inflation_dash.services.scheduler import RefreshScheduler
from inflation_dash.utils.http import HttpClient, HttpPolicy
from inflation_dash.utils.timeutil import clock_for
from inflation_dash.web.server import create_app

log = logging.getLogger("main")

async def main() -> None:
    s = load_settings()
    setup_logging(s.log_level)

    http = HttpClient(HttpPolicy(timeout_seconds=s.http_timeout_seconds))
    provider = GeminiProvider(http=http, api_key=s.gemini_api_key, model=s.gemini_model, base_url=s.gemini_base_url)
    if not provider.configured:
        log.warning("GEMINI_API_KEY not set; live refresh and AI insights are disabled")

    state = DashboardState.from_seed(load_seed(s.seed_path), horizon=s.forecast_horizon)
    controller = RefreshController(
        provider,
        state,
        fetch_timeout_seconds=s.fetch_timeout_seconds,
        clock=clock_for(s.timezone),
    )
    log.info(
        "Loaded %d history points, %d commodities, %d indicators",
        len(state.history), len(state.commodities), len(state.indicators),
    )

    scheduler = RefreshScheduler(
        controller,
        tz_name=s.timezone,
        interval_minutes=s.refresh_interval_minutes,
        initial_delay_seconds=s.initial_delay_seconds,
        refresh_on_start=s.refresh_on_start,
    )
    scheduler.start()

    app = create_app(state, controller, provider)
    server = uvicorn.Server(uvicorn.Config(app, host=s.host, port=s.port, log_level="warning"))
    try:
        await server.serve()
    finally:
        scheduler.shutdown()
        await http.aclose()

def run() -> None:
    asyncio.run(main())

if __name__ == "__main__":
    run()
