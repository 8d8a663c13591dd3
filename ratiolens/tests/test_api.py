"""
Acceptance tests — HTTP surface

  - POST /metrics/{metric}: 200 with judgment, 404 unknown metric,
    422 on a failed precondition.
  - POST /evaluate accepts camelCase strings with thousands separators.
  - GET /edinet/{code}: placeholder payload, 400 on an invalid code.
  - Any other fetch failure → 500 with a generic message, logged with traceback.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from ratiolens.api_clients import edinet_client
from ratiolens.main import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_metrics(client):
    body = client.get("/metrics").json()
    assert len(body) == 11
    assert body[0]["metric"] == "psr"
    assert body[0]["unit"] == "x"


def test_compute_metric(client):
    resp = client.post("/metrics/per", json={"numerator": 500000, "denominator": 10000})
    assert resp.status_code == 200
    body = resp.json()
    assert body["value"] == 50.0
    assert body["judgment"]["level"] == "very-overvalued"
    assert body["judgment"]["title"] == "割高"


def test_compute_metric_failed_precondition(client):
    resp = client.post("/metrics/roe", json={"numerator": 10000, "denominator": -5})
    assert resp.status_code == 422
    assert resp.json()["detail"] == "Equity must be greater than 0"


def test_compute_unknown_metric(client):
    resp = client.post("/metrics/ev_ebitda", json={"numerator": 1, "denominator": 1})
    assert resp.status_code == 404


def test_evaluate_camel_case_strings(client):
    resp = client.post("/evaluate", json={
        "marketCap": "500,000",
        "revenue": "100,000",
        "currentAssets": "150000",
        "currentLiabilities": "50000",
    })
    assert resp.status_code == 200
    body = resp.json()
    results = {r["metric"]: r for r in body["results"]}
    assert results["psr"]["judgment"]["level"] == "very-high"
    assert results["current_ratio"]["value"] == 300.0
    assert "roe" in body["missing"]
    assert body["errors"] == []


def test_evaluate_reports_precondition_errors(client):
    resp = client.post("/evaluate", json={"market_cap": 500000, "revenue": 0})
    body = resp.json()
    psr = body["results"][0]
    assert psr["value"] is None
    assert psr["judgment"] is None
    assert body["errors"] == ["psr: Revenue must be greater than 0"]


def test_edinet_placeholder(client):
    resp = client.get("/edinet/7203")
    assert resp.status_code == 200
    body = resp.json()
    assert body["companyName"] == "企業コード7203"
    assert body["financialData"]["netIncome"] == "10000"


def test_edinet_invalid_code(client):
    resp = client.get("/edinet/123")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "4桁の証券コードを入力してください"


def test_edinet_evaluate(client):
    body = client.get("/edinet/7203/evaluate").json()
    results = body["evaluation"]["results"]
    assert len(results) == 11
    assert all(r["judgment"] is not None for r in results)


def test_edinet_unexpected_failure_is_500_and_logged(client, monkeypatch, caplog):
    async def boom(code):
        raise RuntimeError("upstream down")

    monkeypatch.setattr(edinet_client, "fetch_company_financials", boom)
    with caplog.at_level(logging.ERROR, logger="ratiolens.main"):
        resp = client.get("/edinet/7203")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "データ取得中にエラーが発生しました"
    record = next(r for r in caplog.records if "[EDINET] fetch failed for 7203" in r.getMessage())
    assert record.exc_info[0] is RuntimeError
