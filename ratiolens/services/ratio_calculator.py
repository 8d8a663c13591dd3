"""
Deterministic ratio calculator.

Pure compute functions for the eleven investment ratios. Inputs are in
million JPY (or JPY per share for dividend yield).

Key formulas:
  PSR              = market_cap / revenue
  Current ratio %  = 100 * current_assets / current_liabilities
  Equity ratio %   = 100 * equity / total_assets
  CapEx ratio      = capex / depreciation
  Revenue growth % = 100 * (current_revenue - past_revenue) / past_revenue
  ROE %            = 100 * net_income / equity
  ROA %            = 100 * net_income / total_assets
  Op. margin %     = 100 * operating_income / revenue
  PER              = market_cap / net_income
  PBR              = market_cap / equity
  Dividend yield % = 100 * annual_dividend / stock_price

Precondition policy:
  The denominator must be strictly positive. Zero, negative, NaN and
  infinite operands raise InvalidPreconditionError. No function ever returns
  NaN / Infinity or a sentinel ratio.
"""

from __future__ import annotations

import math
from typing import Any


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class RatioLensError(Exception):
    """Base class for all ratiolens domain errors."""


class InvalidPreconditionError(RatioLensError, ValueError):
    """A required denominator (or baseline figure) is not strictly positive."""

    def __init__(self, metric: str, field: str, value: Any, message: str):
        super().__init__(message)
        self.metric = metric
        self.field = field
        self.value = value
        self.message = message


# ---------------------------------------------------------------------------
# Numeric helpers
# ---------------------------------------------------------------------------

def _is_num(v: Any) -> bool:
    if not isinstance(v, (int, float)) or isinstance(v, bool):
        return False
    try:
        return math.isfinite(v)
    except OverflowError:
        # int too large for a float
        return False


def _require_operand(metric: str, field: str, value: Any) -> float:
    if not _is_num(value):
        raise InvalidPreconditionError(
            metric, field, value, f"{field} must be a finite number (got {value!r})"
        )
    return float(value)


def _require_positive(metric: str, field: str, value: Any, label: str) -> float:
    v = _require_operand(metric, field, value)
    if v <= 0:
        raise InvalidPreconditionError(metric, field, value, f"{label} must be greater than 0")
    return v


def _checked(metric: str, ratio: float) -> float:
    # Overflow from extreme operands (e.g. 1e308 / 1e-10) must not leak out as inf
    if not math.isfinite(ratio):
        raise InvalidPreconditionError(metric, "ratio", ratio, f"{metric} ratio is not finite")
    return ratio


# ---------------------------------------------------------------------------
# Growth metrics
# ---------------------------------------------------------------------------

def calculate_psr(market_cap: float, revenue: float) -> float:
    """PSR (Price-to-Sales Ratio) = market_cap / revenue."""
    mc = _require_operand("psr", "market_cap", market_cap)
    rev = _require_positive("psr", "revenue", revenue, "Revenue")
    return _checked("psr", mc / rev)


def calculate_capex_ratio(capex: float, depreciation: float) -> float:
    """CapEx-to-depreciation ratio (x)."""
    cx = _require_operand("capex_ratio", "capex", capex)
    dep = _require_positive("capex_ratio", "depreciation", depreciation, "Depreciation")
    return _checked("capex_ratio", cx / dep)


def calculate_revenue_growth(current_revenue: float, past_revenue: float) -> float:
    """
    Revenue growth over the comparison window, in percent.

    past_revenue is the baseline (revenue four years ago in the UI) and must
    be strictly positive; current_revenue may be anything finite.
    """
    cur = _require_operand("revenue_growth", "revenue_current_year", current_revenue)
    past = _require_positive(
        "revenue_growth", "revenue_four_years_ago", past_revenue, "Past revenue"
    )
    return _checked("revenue_growth", ((cur - past) / past) * 100)


# ---------------------------------------------------------------------------
# Safety metrics
# ---------------------------------------------------------------------------

def calculate_current_ratio(current_assets: float, current_liabilities: float) -> float:
    """Current ratio in percent."""
    ca = _require_operand("current_ratio", "current_assets", current_assets)
    cl = _require_positive(
        "current_ratio", "current_liabilities", current_liabilities, "Current liabilities"
    )
    return _checked("current_ratio", (ca / cl) * 100)


def calculate_equity_ratio(equity: float, total_assets: float) -> float:
    """Equity ratio in percent."""
    eq = _require_operand("equity_ratio", "equity", equity)
    ta = _require_positive("equity_ratio", "total_assets", total_assets, "Total assets")
    return _checked("equity_ratio", (eq / ta) * 100)


# ---------------------------------------------------------------------------
# Profitability metrics
# ---------------------------------------------------------------------------

def calculate_roe(net_income: float, equity: float) -> float:
    """ROE (Return on Equity) in percent. Negative net income is allowed."""
    ni = _require_operand("roe", "net_income", net_income)
    eq = _require_positive("roe", "equity", equity, "Equity")
    return _checked("roe", (ni / eq) * 100)


def calculate_roa(net_income: float, total_assets: float) -> float:
    ni = _require_operand("roa", "net_income", net_income)
    ta = _require_positive("roa", "total_assets", total_assets, "Total assets")
    return _checked("roa", (ni / ta) * 100)


def calculate_operating_margin(operating_income: float, revenue: float) -> float:
    oi = _require_operand("operating_margin", "operating_income", operating_income)
    rev = _require_positive("operating_margin", "revenue", revenue, "Revenue")
    return _checked("operating_margin", (oi / rev) * 100)


# ---------------------------------------------------------------------------
# Valuation metrics
# ---------------------------------------------------------------------------

def calculate_per(market_cap: float, net_income: float) -> float:
    """PER (Price-to-Earnings Ratio). Loss-making companies have no PER."""
    mc = _require_operand("per", "market_cap", market_cap)
    ni = _require_positive("per", "net_income", net_income, "Net income")
    return _checked("per", mc / ni)


def calculate_pbr(market_cap: float, equity: float) -> float:
    mc = _require_operand("pbr", "market_cap", market_cap)
    eq = _require_positive("pbr", "equity", equity, "Equity")
    return _checked("pbr", mc / eq)


def calculate_dividend_yield(annual_dividend: float, stock_price: float) -> float:
    """Dividend yield in percent. annual_dividend may be zero."""
    div = _require_operand("dividend_yield", "annual_dividend", annual_dividend)
    price = _require_positive("dividend_yield", "stock_price", stock_price, "Stock price")
    return _checked("dividend_yield", (div / price) * 100)
