import logging

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ratiolens.api_clients import edinet_client
from ratiolens.config import get_settings
from ratiolens.models import (
    EdinetEvaluationResponse,
    EdinetResponse,
    EvaluationReportOut,
    FinancialFigures,
    MetricRequest,
    MetricResultOut,
    MetricSpecOut,
)
from ratiolens.normalizers.figures_normalizer import normalize_figures
from ratiolens.services.evaluation import evaluate_figures, evaluate_metric
from ratiolens.services.metric_registry import METRIC_REGISTRY, UnknownMetricError

settings = get_settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="RatioLens Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def healthcheck():
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Ratio engine endpoints
# ---------------------------------------------------------------------------

@app.get("/metrics", response_model=list[MetricSpecOut])
def list_metrics():
    return [spec.to_dict() for spec in METRIC_REGISTRY.values()]


@app.post("/metrics/{metric}", response_model=MetricResultOut)
def compute_metric(metric: str, body: MetricRequest):
    """
    Compute and judge a single metric.

    404 for an unknown metric id, 422 when the denominator precondition fails
    (no ratio and no judgment are returned in that case).
    """
    try:
        result = evaluate_metric(metric, body.numerator, body.denominator)
    except UnknownMetricError as exc:
        raise HTTPException(status_code=404, detail=str(exc))

    if result.error:
        raise HTTPException(status_code=422, detail=result.error)
    return result.to_dict()


@app.post("/evaluate", response_model=EvaluationReportOut)
def evaluate(body: FinancialFigures):
    """Evaluate every metric that has both operands present in the body."""
    figures = normalize_figures(body.model_dump(exclude_none=True))
    return evaluate_figures(figures).to_dict()


# ---------------------------------------------------------------------------
# EDINET placeholder endpoints
# ---------------------------------------------------------------------------

async def _fetch_or_raise(code: str) -> edinet_client.CompanyFinancials:
    logger.info("[EDINET] API called with code: %s", code)
    try:
        return await edinet_client.fetch_company_financials(code)
    except edinet_client.InvalidSecuritiesCodeError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception:
        logger.exception("[EDINET] fetch failed for %s", code)
        raise HTTPException(status_code=500, detail="データ取得中にエラーが発生しました")


@app.get("/edinet/{code}", response_model=EdinetResponse)
async def get_edinet_financials(code: str):
    company = await _fetch_or_raise(code)
    return company.to_dict()


@app.get("/edinet/{code}/evaluate", response_model=EdinetEvaluationResponse)
async def evaluate_edinet_financials(code: str):
    """Fetch placeholder figures for a company and run the full evaluation."""
    company = await _fetch_or_raise(code)
    report = evaluate_figures(normalize_figures(company.financial_data))
    return {**company.to_dict(), "evaluation": report.to_dict()}
