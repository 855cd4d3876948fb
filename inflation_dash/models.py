import math
import re
from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from typing import Any, Literal

from inflation_dash.errors import InvalidInputError

Category = Literal["Food", "Energy", "Transport"]
CommodityTrend = Literal["up", "down", "stable"]
IndicatorTrend = Literal["up", "down", "neutral"]

CATEGORIES: tuple[str, ...] = ("Food", "Energy", "Transport")
INDICATOR_TRENDS: tuple[str, ...] = ("up", "down", "neutral")

HEADLINE_INFLATION = "Headline Inflation"

_PERIOD_RE = re.compile(r"^(\d{4})-(\d{2})$")
_NUMERIC_JUNK_RE = re.compile(r"[%₦,\s]")

def parse_period(period: str) -> tuple[int, int]:
    m = _PERIOD_RE.match(period or "")
    if not m:
        raise InvalidInputError(f"period must be YYYY-MM, got {period!r}")
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise InvalidInputError(f"month out of range in period {period!r}")
    return year, month

def format_period(year: int, month: int) -> str:
    return f"{year:04d}-{month:02d}"

def trend_for(current: float, previous: float) -> CommodityTrend:
    if current > previous:
        return "up"
    if current < previous:
        return "down"
    return "stable"

def as_finite(v: Any) -> float | None:
    # bool is an int subclass; a stray True is not a reading
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return None
    f = float(v)
    return f if math.isfinite(f) else None

def parse_numeric(display_value: Any) -> float | None:
    """
    "33.8%" -> 33.8, "₦1,740" -> 1740.0, 27.25 -> 27.25.
    Anything that does not reduce to a finite number gives None.
    """
    if isinstance(display_value, (int, float)) and not isinstance(display_value, bool):
        return as_finite(display_value)
    if not isinstance(display_value, str):
        return None
    cleaned = _NUMERIC_JUNK_RE.sub("", display_value)
    if not cleaned:
        return None
    try:
        return as_finite(float(cleaned))
    except ValueError:
        return None

@dataclass(frozen=True)
class TimeSeriesPoint:
    period: str  # YYYY-MM
    value: float
    is_projected: bool = False
    upper_bound: float | None = None
    lower_bound: float | None = None

    def __post_init__(self) -> None:
        parse_period(self.period)
        if self.is_projected:
            if self.upper_bound is None or self.lower_bound is None:
                raise InvalidInputError(f"projected point {self.period} needs both bounds")
            if not self.lower_bound <= self.value <= self.upper_bound:
                raise InvalidInputError(
                    f"projected point {self.period}: {self.lower_bound} <= {self.value} <= {self.upper_bound} violated"
                )
        elif self.upper_bound is not None or self.lower_bound is not None:
            raise InvalidInputError(f"historical point {self.period} must not carry bounds")

    @property
    def year_month(self) -> tuple[int, int]:
        return parse_period(self.period)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        if not self.is_projected:
            d.pop("upper_bound")
            d.pop("lower_bound")
        return d

@dataclass(frozen=True)
class CommodityEntry:
    id: str
    name: str
    category: Category
    current_price: float
    previous_price: float
    unit: str
    trend: CommodityTrend

    def __post_init__(self) -> None:
        if self.category not in CATEGORIES:
            raise InvalidInputError(f"unknown category {self.category!r} for {self.name}")
        if self.current_price < 0 or self.previous_price < 0:
            raise InvalidInputError(f"negative price for {self.name}")
        expected = trend_for(self.current_price, self.previous_price)
        if self.trend != expected:
            raise InvalidInputError(f"{self.name}: trend {self.trend!r} disagrees with prices (expected {expected!r})")

    @classmethod
    def create(cls, *, id: str, name: str, category: Category, current_price: float,
               previous_price: float, unit: str) -> "CommodityEntry":
        return cls(
            id=id,
            name=name,
            category=category,
            current_price=current_price,
            previous_price=previous_price,
            unit=unit,
            trend=trend_for(current_price, previous_price),
        )

    @property
    def change_pct(self) -> float:
        if not self.previous_price:
            return 0.0
        return round((self.current_price - self.previous_price) / self.previous_price * 100, 2)

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["change_pct"] = self.change_pct
        return d

@dataclass(frozen=True)
class IndicatorEntry:
    label: str
    display_value: str
    change_from_prior: float
    trend: IndicatorTrend
    description: str = ""

    def __post_init__(self) -> None:
        if self.trend not in INDICATOR_TRENDS:
            raise InvalidInputError(f"unknown trend {self.trend!r} for {self.label}")

    @property
    def numeric_value(self) -> float | None:
        return parse_numeric(self.display_value)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

@dataclass(frozen=True)
class ExternalReadingSet:
    # absent field == "no update"
    headline_inflation: float | None = None
    commodity_prices: Mapping[str, float] = field(default_factory=dict)

    def is_empty(self) -> bool:
        if as_finite(self.headline_inflation) is not None:
            return False
        prices = self.commodity_prices
        if not isinstance(prices, Mapping):
            return True
        return not any(as_finite(v) for v in prices.values())
