"""
Metric registry.

Single source of truth for:
  - which FinancialFigures fields feed each metric (numerator / denominator)
  - the compute function and the judgment classifier
  - the metric's category and display unit

Usage:
    from ratiolens.services.metric_registry import METRIC_REGISTRY, get_metric_spec
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

from ratiolens.services import judgment, ratio_calculator
from ratiolens.services.ratio_calculator import RatioLensError

Category = Literal["growth", "profitability", "safety", "valuation"]
Unit = Literal["x", "%"]


class UnknownMetricError(RatioLensError, KeyError):
    def __init__(self, metric: str):
        super().__init__(metric)
        self.metric = metric

    def __str__(self) -> str:
        return f"Unknown metric '{self.metric}'"


# ---------------------------------------------------------------------------
# Metric specification
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MetricSpec:
    metric: str
    category: Category
    numerator_field: str
    denominator_field: str
    compute: Callable[[float, float], float]
    classify: Callable[[float], judgment.Judgment]
    unit: Unit
    description: str = ""

    def to_dict(self) -> dict[str, str]:
        return {
            "metric": self.metric,
            "category": self.category,
            "numerator_field": self.numerator_field,
            "denominator_field": self.denominator_field,
            "unit": self.unit,
            "description": self.description,
        }


# ---------------------------------------------------------------------------
# Registry — one entry per metric, in display order
# ---------------------------------------------------------------------------

METRIC_REGISTRY: dict[str, MetricSpec] = {
    "psr": MetricSpec(
        metric="psr",
        category="growth",
        numerator_field="market_cap",
        denominator_field="revenue",
        compute=ratio_calculator.calculate_psr,
        classify=judgment.get_psr_judgment,
        unit="x",
        description="Price-to-Sales Ratio: market cap / revenue.",
    ),
    "capex_ratio": MetricSpec(
        metric="capex_ratio",
        category="growth",
        numerator_field="capex",
        denominator_field="depreciation",
        compute=ratio_calculator.calculate_capex_ratio,
        classify=judgment.get_capex_ratio_judgment,
        unit="x",
        description="Capital expenditure / depreciation. Proxy for investment intensity.",
    ),
    "revenue_growth": MetricSpec(
        metric="revenue_growth",
        category="growth",
        numerator_field="revenue_current_year",
        denominator_field="revenue_four_years_ago",
        compute=ratio_calculator.calculate_revenue_growth,
        classify=judgment.get_revenue_growth_judgment,
        unit="%",
        description="Revenue growth vs. four years ago.",
    ),
    "roe": MetricSpec(
        metric="roe",
        category="profitability",
        numerator_field="net_income",
        denominator_field="equity",
        compute=ratio_calculator.calculate_roe,
        classify=judgment.get_roe_judgment,
        unit="%",
        description="Return on Equity: net income / equity.",
    ),
    "roa": MetricSpec(
        metric="roa",
        category="profitability",
        numerator_field="net_income",
        denominator_field="total_assets",
        compute=ratio_calculator.calculate_roa,
        classify=judgment.get_roa_judgment,
        unit="%",
        description="Return on Assets: net income / total assets.",
    ),
    "operating_margin": MetricSpec(
        metric="operating_margin",
        category="profitability",
        numerator_field="operating_income",
        denominator_field="revenue",
        compute=ratio_calculator.calculate_operating_margin,
        classify=judgment.get_operating_margin_judgment,
        unit="%",
        description="Operating income / revenue.",
    ),
    "current_ratio": MetricSpec(
        metric="current_ratio",
        category="safety",
        numerator_field="current_assets",
        denominator_field="current_liabilities",
        compute=ratio_calculator.calculate_current_ratio,
        classify=judgment.get_current_ratio_judgment,
        unit="%",
        description="Current assets / current liabilities. Short-term liquidity.",
    ),
    "equity_ratio": MetricSpec(
        metric="equity_ratio",
        category="safety",
        numerator_field="equity",
        denominator_field="total_assets",
        compute=ratio_calculator.calculate_equity_ratio,
        classify=judgment.get_equity_ratio_judgment,
        unit="%",
        description="Equity / total assets. Capital-structure solvency.",
    ),
    "per": MetricSpec(
        metric="per",
        category="valuation",
        numerator_field="market_cap",
        denominator_field="net_income",
        compute=ratio_calculator.calculate_per,
        classify=judgment.get_per_judgment,
        unit="x",
        description="Price-to-Earnings Ratio: market cap / net income. Null for loss-makers.",
    ),
    "pbr": MetricSpec(
        metric="pbr",
        category="valuation",
        numerator_field="market_cap",
        denominator_field="equity",
        compute=ratio_calculator.calculate_pbr,
        classify=judgment.get_pbr_judgment,
        unit="x",
        description="Price-to-Book Ratio: market cap / equity.",
    ),
    "dividend_yield": MetricSpec(
        metric="dividend_yield",
        category="valuation",
        numerator_field="annual_dividend",
        denominator_field="stock_price",
        compute=ratio_calculator.calculate_dividend_yield,
        classify=judgment.get_dividend_yield_judgment,
        unit="%",
        description="Annual dividend per share / stock price.",
    ),
}


def get_metric_spec(metric: str) -> MetricSpec:
    spec = METRIC_REGISTRY.get(metric.strip().lower())
    if spec is None:
        raise UnknownMetricError(metric)
    return spec
