import logging
import re
from dataclasses import dataclass
from typing import Literal

from inflation_dash.models import ExternalReadingSet

log = logging.getLogger("text")

# reply label -> commodity name in the dashboard collection
COMMODITY_LABELS: dict[str, str] = {
    "RICE": "Rice (Foreign, 50kg)",
    "PETROL": "Petrol (PMS)",
    "GAS": "Cooking Gas (12.5kg)",
}

_INFLATION_RE = re.compile(r"INFLATION:\s*([\d.]+)", re.IGNORECASE)
_LABEL_RE = {
    label: re.compile(rf"\b{label}:\s*([\d,.]+)", re.IGNORECASE) for label in COMMODITY_LABELS
}

SECTION_TITLES = ("Current Status", "Impact Analysis", "Short-term Outlook")

LineKind = Literal["header", "bullet", "paragraph"]

@dataclass(frozen=True)
class TaggedLine:
    kind: LineKind
    text: str

def _to_float(raw: str) -> float | None:
    try:
        return float(raw.replace(",", "").rstrip("."))
    except ValueError:
        return None

def parse_market_readings(text: str) -> ExternalReadingSet:
    """
    Pull `LABEL: <number>` lines out of a free-form model reply.
    A label that is missing or does not hold a number is left out.
    """
    text = text or ""

    headline = None
    m = _INFLATION_RE.search(text)
    if m:
        headline = _to_float(m.group(1))

    prices: dict[str, float] = {}
    for label, rx in _LABEL_RE.items():
        m = rx.search(text)
        if not m:
            continue
        v = _to_float(m.group(1))
        if v is not None:
            prices[COMMODITY_LABELS[label]] = v

    log.debug("Parsed readings: inflation=%s prices=%s", headline, prices)
    return ExternalReadingSet(headline_inflation=headline, commodity_prices=prices)

def _strip_md(s: str) -> str:
    return s.replace("###", "").replace("**", "").strip()

def classify_lines(text: str) -> list[TaggedLine]:
    out: list[TaggedLine] = []
    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#") or any(f"**{t}**" in line for t in SECTION_TITLES):
            out.append(TaggedLine("header", _strip_md(line).replace(":", "", 1).strip()))
        elif re.match(r"^(\d+\.|[-*•])\s", line):
            out.append(TaggedLine("bullet", re.sub(r"^(\d+\.|[-*•])\s+", "", line)))
        else:
            out.append(TaggedLine("paragraph", line))
    return out
