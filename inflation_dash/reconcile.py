import logging
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Sequence

from inflation_dash.models import (
    HEADLINE_INFLATION,
    CommodityEntry,
    ExternalReadingSet,
    IndicatorEntry,
    as_finite,
    trend_for,
)
from inflation_dash.utils.format import fmt_number

log = logging.getLogger("reconcile")

@dataclass(frozen=True)
class MergeResult:
    commodities: list[CommodityEntry]
    indicators: list[IndicatorEntry]
    changed: bool = False

def _merge_commodity(entry: CommodityEntry, prices: Mapping) -> CommodityEntry:
    live = as_finite(prices.get(entry.name))
    if live is None or live <= 0 or live == entry.current_price:
        return entry
    return replace(
        entry,
        previous_price=entry.current_price,
        current_price=live,
        trend=trend_for(live, entry.current_price),
    )

def _merge_headline(entry: IndicatorEntry, live: float) -> IndicatorEntry:
    old = entry.numeric_value
    if old is None or live == old:
        return entry
    return replace(
        entry,
        display_value=f"{fmt_number(live)}%",
        change_from_prior=round(live - old, 2),
        trend="up" if live > old else "down",
    )

def merge_live_data(
    commodities: Sequence[CommodityEntry],
    indicators: Sequence[IndicatorEntry],
    payload: ExternalReadingSet,
) -> MergeResult:
    """
    Fold a fetched reading set into the current collections.

    Entries that do not change are passed through as the same objects so the
    caller can detect changes by identity. Both returned lists are new.
    Malformed payload fields are treated as absent; this never raises.
    """
    prices = getattr(payload, "commodity_prices", None)
    if not isinstance(prices, Mapping):
        prices = {}
    headline = as_finite(getattr(payload, "headline_inflation", None))

    new_commodities = [_merge_commodity(c, prices) for c in commodities]

    new_indicators: list[IndicatorEntry] = []
    for ind in indicators:
        if headline is not None and ind.label == HEADLINE_INFLATION:
            new_indicators.append(_merge_headline(ind, headline))
        else:
            new_indicators.append(ind)

    changed = any(a is not b for a, b in zip(new_commodities, commodities)) or any(
        a is not b for a, b in zip(new_indicators, indicators)
    )
    if changed:
        log.info("Merged live data: commodities=%s headline=%s", list(prices), headline)
    return MergeResult(commodities=new_commodities, indicators=new_indicators, changed=changed)
