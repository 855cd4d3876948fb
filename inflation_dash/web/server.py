import logging

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel

from inflation_dash.errors import InvalidInputError
from inflation_dash.forecast import ForecastModel, generate_forecast
from inflation_dash.providers.base import MarketDataProvider
from inflation_dash.services.dashboard import DashboardState
from inflation_dash.services.purchasing_power import (
    DEFAULT_INFLATION_RATE,
    LOCATIONS,
    purchasing_power_loss,
    real_salary,
)
from inflation_dash.services.refresh import RefreshController
from inflation_dash.utils.text import classify_lines

logger = logging.getLogger(__name__)

class ModelChoice(BaseModel):
    model: str | None = None
    show_forecast: bool | None = None

class CalculatorRequest(BaseModel):
    salary: float
    location: str = "Lagos"
    inflation_rate: float = DEFAULT_INFLATION_RATE
    include_tips: bool = True

def create_app(state: DashboardState, controller: RefreshController, provider: MarketDataProvider) -> FastAPI:
    app = FastAPI(title="Inflation dashboard")

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.get("/api/dashboard")
    def dashboard():
        return state.snapshot(refresh=controller.status())

    @app.get("/api/forecast")
    def forecast(model: str | None = None, horizon: int | None = Query(default=None, ge=1, le=60)):
        try:
            label = ForecastModel.parse(model) if model else state.model
            points = generate_forecast(state.history, horizon or state.horizon, noise=state.noise)
        except InvalidInputError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        return {"model": label.value, "points": [p.to_dict() for p in points]}

    @app.post("/api/model")
    def choose_model(choice: ModelChoice):
        try:
            if choice.model is not None:
                state.select_model(choice.model)
        except InvalidInputError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        if choice.show_forecast is not None:
            state.show_forecast = choice.show_forecast
        return state.snapshot()

    @app.post("/api/refresh")
    async def refresh():
        outcome = await controller.refresh()
        logger.info("Manual refresh: %s", outcome.value)
        status = controller.status()
        return {"outcome": outcome.value, **status}

    @app.post("/api/analysis")
    async def analysis():
        text = await provider.analyze_economy(state.history, state.commodities, state.model.value)
        return {
            "model": state.model.value,
            "text": text,
            "lines": [{"kind": t.kind, "text": t.text} for t in classify_lines(text)],
        }

    @app.post("/api/calculator")
    async def calculator(req: CalculatorRequest):
        if req.location not in LOCATIONS:
            raise HTTPException(status_code=400, detail=f"unknown location {req.location!r}")
        try:
            real = real_salary(req.salary, req.inflation_rate)
            loss = purchasing_power_loss(req.salary, req.inflation_rate)
        except InvalidInputError as ex:
            raise HTTPException(status_code=400, detail=str(ex))
        tips = await provider.cost_of_living_tips(req.salary, req.location) if req.include_tips else None
        return {
            "salary": req.salary,
            "location": req.location,
            "real_value": round(real, 2),
            "loss": round(loss, 2),
            "tips": tips,
        }

    return app
