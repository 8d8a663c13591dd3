"""
Acceptance tests — EDINET placeholder client

Rules:
  - Only 4-digit securities codes are accepted.
  - Every valid code returns the same placeholder figures.
  - No network I/O.
"""

import asyncio

import pytest
from ratiolens.api_clients.edinet_client import (
    PLACEHOLDER_FIGURES,
    InvalidSecuritiesCodeError,
    fetch_company_financials,
)


def test_valid_code_returns_placeholder_figures():
    company = asyncio.run(fetch_company_financials("7203"))
    assert company.securities_code == "7203"
    assert company.company_name == "企業コード7203"
    assert company.financial_data == PLACEHOLDER_FIGURES
    assert company.submit_date


def test_figures_are_identical_for_every_code():
    a = asyncio.run(fetch_company_financials("7203"))
    b = asyncio.run(fetch_company_financials("6758"))
    assert a.financial_data == b.financial_data


def test_returned_figures_are_a_copy():
    company = asyncio.run(fetch_company_financials("7203"))
    company.financial_data["revenue"] = "0"
    assert PLACEHOLDER_FIGURES["revenue"] == "100000"


@pytest.mark.parametrize("code", ["", "123", "12345", "72O3", "abcd", None])
def test_invalid_code_rejected(code):
    with pytest.raises(InvalidSecuritiesCodeError, match="4桁の証券コードを入力してください"):
        asyncio.run(fetch_company_financials(code))


def test_to_dict_uses_wire_names():
    d = asyncio.run(fetch_company_financials("7203")).to_dict()
    assert set(d) == {"companyName", "submitDate", "financialData"}
    assert d["financialData"]["marketCap"] == "500000"
