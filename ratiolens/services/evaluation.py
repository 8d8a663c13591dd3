"""
Evaluation service.

Runs compute → classify for one metric, or for every registered metric over
one set of financial figures.

Failure policy:
  - Missing operand            → metric listed in report.missing, no result row.
  - InvalidPreconditionError   → result row with value=None, judgment=None,
                                 error=<message>. The classifier is never
                                 called on a failed computation.
  - One metric failing never affects the others.
  - Only denominators are gated. Zero or negative numerators are judged
    like any other ratio: market_cap=0 gives PSR 0 (undervalued),
    revenue_current_year=0 gives -100% growth (declining), a net loss gives
    a negative ROE (poor). The UI forms skip such inputs; the engine does not.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ratiolens.services.judgment import Judgment
from ratiolens.services.metric_registry import METRIC_REGISTRY, get_metric_spec
from ratiolens.services.ratio_calculator import InvalidPreconditionError

logger = logging.getLogger(__name__)


@dataclass
class MetricResult:
    metric: str
    category: str
    unit: str
    value: float | None = None
    judgment: Judgment | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        return {
            "metric": self.metric,
            "category": self.category,
            "unit": self.unit,
            "value": self.value,
            "judgment": self.judgment.to_dict() if self.judgment else None,
            "error": self.error,
        }


@dataclass
class EvaluationReport:
    results: list[MetricResult] = field(default_factory=list)
    missing: dict[str, list[str]] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)

    def get(self, metric: str) -> MetricResult | None:
        return next((r for r in self.results if r.metric == metric), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "missing": self.missing,
            "errors": self.errors,
        }


def evaluate_metric(metric: str, numerator: float, denominator: float) -> MetricResult:
    """
    Compute one metric and classify it.

    Raises UnknownMetricError for an unregistered metric id.
    """
    spec = get_metric_spec(metric)
    result = MetricResult(metric=spec.metric, category=spec.category, unit=spec.unit)
    try:
        result.value = spec.compute(numerator, denominator)
    except InvalidPreconditionError as exc:
        logger.debug("[EVALUATION] %s: %s. Judgment omitted.", spec.metric, exc.message)
        result.error = exc.message
        return result

    result.judgment = spec.classify(result.value)
    return result


def evaluate_figures(figures: Mapping[str, float | None]) -> EvaluationReport:
    """Evaluate every registered metric over a snake_case figures mapping."""
    report = EvaluationReport()

    for spec in METRIC_REGISTRY.values():
        absent = [
            f for f in (spec.numerator_field, spec.denominator_field)
            if figures.get(f) is None
        ]
        if absent:
            report.missing[spec.metric] = absent
            continue

        result = evaluate_metric(
            spec.metric,
            figures[spec.numerator_field],
            figures[spec.denominator_field],
        )
        if result.error:
            report.errors.append(f"{spec.metric}: {result.error}")
        report.results.append(result)

    logger.info(
        "[EVALUATION] %d judged, %d failed, %d missing inputs",
        sum(1 for r in report.results if r.ok),
        len(report.errors),
        len(report.missing),
    )
    return report
