"""
Acceptance tests — Figures normalizer

Rules:
  - Numeric strings may carry thousands separators and surrounding spaces.
  - Blank, non-numeric, NaN, infinite or float-overflowing input → None.
  - camelCase and snake_case keys map onto snake_case figure names;
    snake_case wins when both are present. Unknown keys are dropped.
"""

import math

import pytest
from ratiolens.normalizers.figures_normalizer import normalize_figure, normalize_figures


@pytest.mark.parametrize("raw, expected", [
    ("1,000", 1000.0),
    (" 250 ", 250.0),
    ("1,234,567.5", 1234567.5),
    ("-3000", -3000.0),
    (42, 42.0),
    (0, 0.0),
    (2.5, 2.5),
])
def test_numeric_inputs(raw, expected):
    assert normalize_figure(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", None, "nan", "inf", math.nan, math.inf, True, [1]])
def test_invalid_inputs_are_null(raw):
    assert normalize_figure(raw) is None


def test_camel_case_keys_are_mapped():
    out = normalize_figures({"marketCap": "500,000", "revenueFourYearsAgo": "80000"})
    assert out == {"market_cap": 500000.0, "revenue_four_years_ago": 80000.0}


def test_unknown_and_unparseable_entries_are_dropped():
    out = normalize_figures({"revenue": "abc", "ebitda": "100", "equity": ""})
    assert out == {}


def test_snake_case_wins_over_camel_case():
    assert normalize_figures({"market_cap": 1, "marketCap": 2}) == {"market_cap": 1.0}
    assert normalize_figures({"marketCap": 2, "market_cap": 1}) == {"market_cap": 1.0}


def test_int_beyond_float_range_is_null():
    assert normalize_figure(10**400) is None
    assert normalize_figures({"marketCap": 10**400, "revenue": "100"}) == {"revenue": 100.0}
