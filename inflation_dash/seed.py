"""
Static startup data: approximate Nigerian headline inflation 2022-2024,
a handful of market prices and the headline indicator cards.

Every accessor returns a fresh list so callers can treat the result as
their own state.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from inflation_dash.models import CommodityEntry, IndicatorEntry, TimeSeriesPoint

log = logging.getLogger("seed")

_HISTORY: tuple[tuple[str, float], ...] = (
    ("2022-01", 15.6),
    ("2022-03", 15.9),
    ("2022-06", 18.6),
    ("2022-09", 20.7),
    ("2022-12", 21.3),
    ("2023-01", 21.8),
    ("2023-03", 22.0),
    ("2023-05", 22.4),
    ("2023-06", 22.8),
    ("2023-09", 26.7),
    ("2023-12", 28.9),
    ("2024-01", 29.9),
    ("2024-03", 33.2),
    ("2024-06", 34.1),
    ("2024-09", 32.7),
    ("2024-12", 33.8),
)

_COMMODITIES: tuple[dict[str, Any], ...] = (
    {"id": "1", "name": "Rice (Foreign, 50kg)", "category": "Food", "current_price": 95000, "previous_price": 88000, "unit": "bag"},
    {"id": "2", "name": "Petrol (PMS)", "category": "Energy", "current_price": 1050, "previous_price": 980, "unit": "liter"},
    {"id": "3", "name": "Cooking Gas (12.5kg)", "category": "Energy", "current_price": 16500, "previous_price": 15000, "unit": "cylinder"},
    {"id": "4", "name": "Garri (White)", "category": "Food", "current_price": 3500, "previous_price": 3600, "unit": "paint rubber"},
    # construction/housing, grouped under Transport
    {"id": "5", "name": "Cement", "category": "Transport", "current_price": 8500, "previous_price": 8500, "unit": "bag"},
)

_INDICATORS: tuple[dict[str, Any], ...] = (
    {"label": "Headline Inflation", "display_value": "33.8%", "change_from_prior": 1.1, "trend": "up",
     "description": "Year-on-Year change in CPI"},
    {"label": "Food Inflation", "display_value": "40.5%", "change_from_prior": 2.3, "trend": "up",
     "description": "Impacts basic cost of living"},
    {"label": "Exchange Rate (Parallel)", "display_value": "₦1,740", "change_from_prior": -0.5, "trend": "down",
     "description": "USD/NGN Market Rate"},
    {"label": "MPR (Interest Rate)", "display_value": "27.25%", "change_from_prior": 0.0, "trend": "neutral",
     "description": "CBN Benchmark Rate"},
)

@dataclass(frozen=True)
class SeedData:
    history: list[TimeSeriesPoint]
    commodities: list[CommodityEntry]
    indicators: list[IndicatorEntry]

def _history_from(rows) -> list[TimeSeriesPoint]:
    out: list[TimeSeriesPoint] = []
    for r in rows:
        if isinstance(r, dict):
            out.append(TimeSeriesPoint(period=str(r["period"]), value=float(r["value"])))
        else:
            period, value = r
            out.append(TimeSeriesPoint(period=str(period), value=float(value)))
    return out

def _commodities_from(rows) -> list[CommodityEntry]:
    return [
        CommodityEntry.create(
            id=str(r["id"]),
            name=r["name"],
            category=r["category"],
            current_price=float(r["current_price"]),
            previous_price=float(r["previous_price"]),
            unit=r.get("unit", ""),
        )
        for r in rows
    ]

def _indicators_from(rows) -> list[IndicatorEntry]:
    return [
        IndicatorEntry(
            label=r["label"],
            display_value=str(r["display_value"]),
            change_from_prior=float(r.get("change_from_prior", 0.0)),
            trend=r.get("trend", "neutral"),
            description=r.get("description", ""),
        )
        for r in rows
    ]

def inflation_history() -> list[TimeSeriesPoint]:
    return _history_from(_HISTORY)

def commodities() -> list[CommodityEntry]:
    return _commodities_from(_COMMODITIES)

def indicators() -> list[IndicatorEntry]:
    return _indicators_from(_INDICATORS)

def default_seed() -> SeedData:
    return SeedData(history=inflation_history(), commodities=commodities(), indicators=indicators())

def load_seed(path: str | Path | None) -> SeedData:
    """
    Load startup collections from a YAML file with optional top-level keys
    `history`, `commodities` and `indicators`. Missing keys (or no path at all)
    fall back to the built-in figures.
    """
    if not path:
        return default_seed()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    seed = SeedData(
        history=_history_from(raw["history"]) if raw.get("history") else inflation_history(),
        commodities=_commodities_from(raw["commodities"]) if raw.get("commodities") else commodities(),
        indicators=_indicators_from(raw["indicators"]) if raw.get("indicators") else indicators(),
    )
    log.info(
        "Loaded seed from %s: history=%d commodities=%d indicators=%d",
        path, len(seed.history), len(seed.commodities), len(seed.indicators),
    )
    return seed
