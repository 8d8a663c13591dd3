from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FinancialFigures(BaseModel):
    """Raw figures as entered in the UI (numbers or numeric strings, camelCase or snake_case)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Growth
    revenue: float | str | None = None
    market_cap: float | str | None = Field(default=None, alias="marketCap")
    capex: float | str | None = None
    depreciation: float | str | None = None
    revenue_current_year: float | str | None = Field(default=None, alias="revenueCurrentYear")
    revenue_four_years_ago: float | str | None = Field(default=None, alias="revenueFourYearsAgo")

    # Profitability
    net_income: float | str | None = Field(default=None, alias="netIncome")
    equity: float | str | None = None
    total_assets: float | str | None = Field(default=None, alias="totalAssets")
    operating_income: float | str | None = Field(default=None, alias="operatingIncome")

    # Safety
    current_assets: float | str | None = Field(default=None, alias="currentAssets")
    current_liabilities: float | str | None = Field(default=None, alias="currentLiabilities")

    # Valuation
    stock_price: float | str | None = Field(default=None, alias="stockPrice")
    annual_dividend: float | str | None = Field(default=None, alias="annualDividend")


class MetricRequest(BaseModel):
    numerator: float
    denominator: float


class JudgmentOut(BaseModel):
    level: str
    label: str
    title: str
    description: str


class MetricResultOut(BaseModel):
    metric: str
    category: str
    unit: str
    value: float | None = None
    judgment: JudgmentOut | None = None
    error: str | None = None


class EvaluationReportOut(BaseModel):
    results: list[MetricResultOut]
    missing: dict[str, list[str]]
    errors: list[str]


class MetricSpecOut(BaseModel):
    metric: str
    category: str
    numerator_field: str
    denominator_field: str
    unit: str
    description: str


class EdinetResponse(BaseModel):
    companyName: str
    submitDate: str
    financialData: dict[str, Any]


class EdinetEvaluationResponse(EdinetResponse):
    evaluation: EvaluationReportOut
