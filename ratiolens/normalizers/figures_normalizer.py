"""
Financial figures normalizer.

Turns raw input (form strings with thousands separators, mock-endpoint
strings, plain numbers) into the numeric operands the ratio calculator
expects. Keys may be camelCase (as sent by the UI / EDINET mock) or
snake_case.
"""

import logging
import math
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# camelCase wire name → snake_case figure name
FIGURE_FIELDS: dict[str, str] = {
    # Growth
    "revenue": "revenue",
    "marketCap": "market_cap",
    "capex": "capex",
    "depreciation": "depreciation",
    "revenueCurrentYear": "revenue_current_year",
    "revenueFourYearsAgo": "revenue_four_years_ago",
    # Profitability
    "netIncome": "net_income",
    "equity": "equity",
    "totalAssets": "total_assets",
    "operatingIncome": "operating_income",
    # Safety
    "currentAssets": "current_assets",
    "currentLiabilities": "current_liabilities",
    # Valuation
    "stockPrice": "stock_price",
    "annualDividend": "annual_dividend",
}

_SNAKE_FIELDS = frozenset(FIGURE_FIELDS.values())


def normalize_figure(v: Any) -> float | None:
    """Return float if v is a valid finite number (or numeric string), else None."""
    if v is None or isinstance(v, bool):
        return None
    if isinstance(v, str):
        v = v.replace(",", "").strip()
        if not v:
            return None
    try:
        f = float(v)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(f) or math.isinf(f):
        return None
    return f


def normalize_figures(raw: Mapping[str, Any]) -> dict[str, float]:
    """
    Map raw figures onto snake_case field names.

    Unknown keys and unparseable values are dropped. When both spellings of a
    field are present, the snake_case value wins.
    """
    out: dict[str, float] = {}
    for key, value in raw.items():
        name = key if key in _SNAKE_FIELDS else FIGURE_FIELDS.get(key)
        if name is None:
            logger.debug("[NORMALIZER] ignoring unknown figure '%s'", key)
            continue
        num = normalize_figure(value)
        if num is None:
            if value not in (None, ""):
                logger.debug("[NORMALIZER] dropping unparseable %s=%r", key, value)
            continue
        if name in out and key != name:
            continue
        out[name] = num
    return out
