"""
EDINET (Electronic Disclosure for Investors' NETwork) client.

Placeholder: no filings are retrieved. Every valid securities code gets
the same fixed figures so the calculator can be exercised end to end.

Securities code rule: exactly 4 ASCII digits (e.g. "7203").
Figures are returned as strings, in million JPY (stock price and annual
dividend in JPY per share), matching what the UI form submits.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone

from ratiolens.config import get_settings
from ratiolens.services.ratio_calculator import RatioLensError

logger = logging.getLogger(__name__)

_SECURITIES_CODE_RE = re.compile(r"^[0-9]{4}$")

PLACEHOLDER_FIGURES: dict[str, str] = {
    # Growth
    "revenue": "100000",
    "marketCap": "500000",
    "capex": "5000",
    "depreciation": "3000",
    "revenueCurrentYear": "100000",
    "revenueFourYearsAgo": "80000",
    # Profitability
    "netIncome": "10000",
    "equity": "200000",
    "totalAssets": "300000",
    "operatingIncome": "15000",
    # Safety
    "currentAssets": "150000",
    "currentLiabilities": "50000",
    # Valuation
    "stockPrice": "2500",
    "annualDividend": "100",
}


class InvalidSecuritiesCodeError(RatioLensError, ValueError):
    def __init__(self, code: str):
        super().__init__("4桁の証券コードを入力してください")
        self.code = code


@dataclass
class CompanyFinancials:
    securities_code: str
    company_name: str
    submit_date: str
    financial_data: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "companyName": self.company_name,
            "submitDate": self.submit_date,
            "financialData": dict(self.financial_data),
        }


def validate_securities_code(code: str) -> str:
    code = (code or "").strip()
    if not _SECURITIES_CODE_RE.match(code):
        raise InvalidSecuritiesCodeError(code)
    return code


async def fetch_company_financials(securities_code: str) -> CompanyFinancials:
    """
    Return placeholder financials for a securities code.

    Raises InvalidSecuritiesCodeError unless the code is exactly 4 digits.
    """
    code = validate_securities_code(securities_code)
    logger.info(
        "[EDINET] %s: returning placeholder figures (no fetch from %s)",
        code, get_settings().edinet_base_url,
    )
    return CompanyFinancials(
        securities_code=code,
        company_name=f"企業コード{code}",
        submit_date=datetime.now(timezone.utc).isoformat(),
        financial_data=dict(PLACEHOLDER_FIGURES),
    )
