"""
Judgment classifiers.

Maps a computed ratio to a qualitative band. One level enum per metric
family; each metric owns an ordered threshold table.

Table policy:
  - Bands are evaluated from most favourable to least favourable.
  - First match wins. Unmatched values fall to the last (catch-all) band.
  - "lt" tables match  ratio <  bound  (valuation multiples: lower is better)
  - "ge" tables match  ratio >= bound  (returns / margins: higher is better)
  - Every table covers each level of its family exactly once, so the bands
    partition the real line with no gaps and no overlaps.

Thresholds:
  PSR             <1 undervalued | <2 fair | <5 high | very-high
  Current ratio   >=200 excellent | >=150 good | >=100 fair | warning
  Equity ratio    >=50 excellent | >=40 good | >=20 fair | warning
  CapEx ratio     >=1.5 strong | >=1.0 moderate | >=0.7 stable | declining
  Revenue growth  >=50 strong | >=20 moderate | >=0 stable | declining
  ROE             >=15 excellent | >=10 good | >=5 fair | poor
  ROA             >=10 excellent | >=5 good | >=2 fair | poor
  Op. margin      >=20 excellent | >=10 good | >=5 fair | poor
  PER             <10 undervalued | <20 fair | <30 overvalued | very-overvalued
  PBR             <1 undervalued | <2 fair | <3 overvalued | very-overvalued
  Dividend yield  >=4 high-yield | >=2 fair | >=1 low-yield | no-dividend

Presentation (colours etc.) is derived from the level by the caller.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Literal, TypeVar, Union

Direction = Literal["lt", "ge"]
LevelT = TypeVar("LevelT", bound=Enum)


# ---------------------------------------------------------------------------
# Level families
# ---------------------------------------------------------------------------

class PSRLevel(str, Enum):
    UNDERVALUED = "undervalued"
    FAIR = "fair"
    HIGH = "high"
    VERY_HIGH = "very-high"


class SafetyLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    WARNING = "warning"


class GrowthLevel(str, Enum):
    STRONG = "strong"
    MODERATE = "moderate"
    STABLE = "stable"
    DECLINING = "declining"


class ProfitabilityLevel(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"


class ValuationLevel(str, Enum):
    UNDERVALUED = "undervalued"
    FAIR = "fair"
    OVERVALUED = "overvalued"
    VERY_OVERVALUED = "very-overvalued"


Level = Union[PSRLevel, SafetyLevel, GrowthLevel, ProfitabilityLevel, ValuationLevel]


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Judgment(Generic[LevelT]):
    level: LevelT
    label: str
    title: str
    description: str

    def to_dict(self) -> dict[str, str]:
        return {
            "level": self.level.value,
            "label": self.label,
            "title": self.title,
            "description": self.description,
        }


@dataclass(frozen=True)
class Band(Generic[LevelT]):
    """One row of a threshold table. bound is None for the catch-all band."""
    bound: float | None
    level: LevelT
    title: str
    description: str
    label: str | None = None

    def judgment(self) -> Judgment[LevelT]:
        return Judgment(
            level=self.level,
            label=self.label or self.level.value,
            title=self.title,
            description=self.description,
        )


@dataclass(frozen=True)
class ThresholdTable(Generic[LevelT]):
    metric: str
    family: type[LevelT]
    direction: Direction
    bands: tuple[Band[LevelT], ...]

    def __post_init__(self) -> None:
        _validate_table(self)

    def classify(self, ratio: float) -> Judgment[LevelT]:
        if not isinstance(ratio, (int, float)):
            raise ValueError(f"{self.metric}: cannot classify non-numeric ratio {ratio!r}")
        try:
            ratio = float(ratio)
        except OverflowError:
            # int beyond float range sits past every finite bound
            ratio = math.inf if ratio > 0 else -math.inf
        if math.isnan(ratio):
            raise ValueError(f"{self.metric}: cannot classify NaN ratio")
        for band in self.bands[:-1]:
            if self.direction == "lt" and ratio < band.bound:
                return band.judgment()
            if self.direction == "ge" and ratio >= band.bound:
                return band.judgment()
        return self.bands[-1].judgment()


def _validate_table(table: ThresholdTable[Enum]) -> None:
    """Reject tables that would leave gaps, overlap, or skip a family level."""
    levels = [b.level for b in table.bands]
    if sorted(lv.value for lv in levels) != sorted(lv.value for lv in table.family):
        raise ValueError(f"{table.metric}: bands must cover each {table.family.__name__} level once")
    if any(not isinstance(b.level, table.family) for b in table.bands):
        raise ValueError(f"{table.metric}: band level outside {table.family.__name__}")

    *ordered, last = table.bands
    if last.bound is not None or any(b.bound is None for b in ordered):
        raise ValueError(f"{table.metric}: only the last band may be the catch-all")

    bounds = [b.bound for b in ordered]
    if table.direction == "lt":
        monotone = all(a < b for a, b in zip(bounds, bounds[1:]))
    else:
        monotone = all(a > b for a, b in zip(bounds, bounds[1:]))
    if not monotone:
        raise ValueError(f"{table.metric}: bounds must be strictly ordered for '{table.direction}'")


# ---------------------------------------------------------------------------
# Threshold tables
# ---------------------------------------------------------------------------

PSR_TABLE: ThresholdTable[PSRLevel] = ThresholdTable("psr", PSRLevel, "lt", (
    Band(1, PSRLevel.UNDERVALUED, "割安", "時価総額が売上高を下回っており、市場の期待値は控えめ"),
    Band(2, PSRLevel.FAIR, "適正〜やや高め", "時価総額は売上高と同程度、標準的な評価"),
    Band(5, PSRLevel.HIGH, "高成長期待", "市場は将来の成長を見込んでいる"),
    Band(None, PSRLevel.VERY_HIGH, "非常に高い期待値", "高成長企業またはバブル的評価の可能性"),
))

CURRENT_RATIO_TABLE: ThresholdTable[SafetyLevel] = ThresholdTable("current_ratio", SafetyLevel, "ge", (
    Band(200, SafetyLevel.EXCELLENT, "優良", "短期的な財務安定性が非常に高い"),
    Band(150, SafetyLevel.GOOD, "良好", "事業運営に十分な流動性がある"),
    Band(100, SafetyLevel.FAIR, "普通", "最低限の流動性バッファーあり"),
    Band(None, SafetyLevel.WARNING, "要注意", "流動負債が流動資産を上回っており、流動性に懸念"),
))

EQUITY_RATIO_TABLE: ThresholdTable[SafetyLevel] = ThresholdTable("equity_ratio", SafetyLevel, "ge", (
    Band(50, SafetyLevel.EXCELLENT, "優良", "財務的自立性が非常に高い"),
    Band(40, SafetyLevel.GOOD, "良好", "強固な財務基盤を持つ"),
    Band(20, SafetyLevel.FAIR, "普通", "中程度の財務安定性"),
    Band(None, SafetyLevel.WARNING, "要注意", "借入金への依存度が高い"),
))

CAPEX_RATIO_TABLE: ThresholdTable[GrowthLevel] = ThresholdTable("capex_ratio", GrowthLevel, "ge", (
    Band(1.5, GrowthLevel.STRONG, "積極投資", "成長と資産更新に積極的に投資している"),
    Band(1.0, GrowthLevel.MODERATE, "適正投資", "資産を現状レベルで維持している"),
    Band(0.7, GrowthLevel.STABLE, "保守的", "新規投資が限定的、資産ベースが縮小傾向の可能性"),
    Band(None, GrowthLevel.DECLINING, "投資不足", "資産ベースを維持するには投資が不十分"),
))

REVENUE_GROWTH_TABLE: ThresholdTable[GrowthLevel] = ThresholdTable("revenue_growth", GrowthLevel, "ge", (
    Band(50, GrowthLevel.STRONG, "高成長", "4年間で顕著な売上高拡大"),
    Band(20, GrowthLevel.MODERATE, "堅実な成長", "健全な売上高成長軌道"),
    Band(0, GrowthLevel.STABLE, "安定", "売上高を維持または微増"),
    Band(None, GrowthLevel.DECLINING, "減少傾向", "期間内に売上高が減少"),
))

ROE_TABLE: ThresholdTable[ProfitabilityLevel] = ThresholdTable("roe", ProfitabilityLevel, "ge", (
    Band(15, ProfitabilityLevel.EXCELLENT, "優良", "株主資本を非常に効率的に活用"),
    Band(10, ProfitabilityLevel.GOOD, "良好", "株主資本を効率的に活用"),
    Band(5, ProfitabilityLevel.FAIR, "普通", "改善の余地あり"),
    Band(None, ProfitabilityLevel.POOR, "要改善", "資本効率が低い、または赤字"),
))

ROA_TABLE: ThresholdTable[ProfitabilityLevel] = ThresholdTable("roa", ProfitabilityLevel, "ge", (
    Band(10, ProfitabilityLevel.EXCELLENT, "優良", "総資産を非常に効率的に活用"),
    Band(5, ProfitabilityLevel.GOOD, "良好", "総資産を効率的に活用"),
    Band(2, ProfitabilityLevel.FAIR, "普通", "改善の余地あり"),
    Band(None, ProfitabilityLevel.POOR, "要改善", "資産効率が低い、または赤字"),
))

OPERATING_MARGIN_TABLE: ThresholdTable[ProfitabilityLevel] = ThresholdTable("operating_margin", ProfitabilityLevel, "ge", (
    Band(20, ProfitabilityLevel.EXCELLENT, "優良", "非常に高い収益性"),
    Band(10, ProfitabilityLevel.GOOD, "良好", "健全な収益性"),
    Band(5, ProfitabilityLevel.FAIR, "普通", "改善の余地あり"),
    Band(None, ProfitabilityLevel.POOR, "要改善", "収益性が低い、または赤字"),
))

PER_TABLE: ThresholdTable[ValuationLevel] = ThresholdTable("per", ValuationLevel, "lt", (
    Band(10, ValuationLevel.UNDERVALUED, "割安", "利益に対して株価が低い"),
    Band(20, ValuationLevel.FAIR, "適正", "標準的な株価水準"),
    Band(30, ValuationLevel.OVERVALUED, "やや割高", "成長期待が織り込まれている"),
    Band(None, ValuationLevel.VERY_OVERVALUED, "割高", "高い成長期待、またはバブル的"),
))

PBR_TABLE: ThresholdTable[ValuationLevel] = ThresholdTable("pbr", ValuationLevel, "lt", (
    Band(1, ValuationLevel.UNDERVALUED, "割安", "解散価値を下回る株価"),
    Band(2, ValuationLevel.FAIR, "適正", "標準的な株価水準"),
    Band(3, ValuationLevel.OVERVALUED, "やや割高", "成長期待が織り込まれている"),
    Band(None, ValuationLevel.VERY_OVERVALUED, "割高", "高い成長期待、またはバブル的"),
))

# Reuses the valuation family; the display label tells yield bands apart.
DIVIDEND_YIELD_TABLE: ThresholdTable[ValuationLevel] = ThresholdTable("dividend_yield", ValuationLevel, "ge", (
    Band(4, ValuationLevel.UNDERVALUED, "高配当", "インカムゲイン重視の投資家向け", label="high-yield"),
    Band(2, ValuationLevel.FAIR, "標準的", "平均的な配当水準"),
    Band(1, ValuationLevel.OVERVALUED, "低配当", "成長への再投資重視", label="low-yield"),
    Band(None, ValuationLevel.VERY_OVERVALUED, "無配当的", "配当をほぼ出していない", label="no-dividend"),
))

JUDGMENT_TABLES: dict[str, ThresholdTable[Level]] = {
    t.metric: t
    for t in (
        PSR_TABLE, CAPEX_RATIO_TABLE, REVENUE_GROWTH_TABLE,
        ROE_TABLE, ROA_TABLE, OPERATING_MARGIN_TABLE,
        CURRENT_RATIO_TABLE, EQUITY_RATIO_TABLE,
        PER_TABLE, PBR_TABLE, DIVIDEND_YIELD_TABLE,
    )
}


# ---------------------------------------------------------------------------
# Classifiers
# ---------------------------------------------------------------------------

def get_psr_judgment(psr: float) -> Judgment[PSRLevel]:
    return PSR_TABLE.classify(psr)


def get_current_ratio_judgment(ratio: float) -> Judgment[SafetyLevel]:
    return CURRENT_RATIO_TABLE.classify(ratio)


def get_equity_ratio_judgment(ratio: float) -> Judgment[SafetyLevel]:
    return EQUITY_RATIO_TABLE.classify(ratio)


def get_capex_ratio_judgment(ratio: float) -> Judgment[GrowthLevel]:
    return CAPEX_RATIO_TABLE.classify(ratio)


def get_revenue_growth_judgment(growth_rate: float) -> Judgment[GrowthLevel]:
    return REVENUE_GROWTH_TABLE.classify(growth_rate)


def get_roe_judgment(roe: float) -> Judgment[ProfitabilityLevel]:
    return ROE_TABLE.classify(roe)


def get_roa_judgment(roa: float) -> Judgment[ProfitabilityLevel]:
    return ROA_TABLE.classify(roa)


def get_operating_margin_judgment(margin: float) -> Judgment[ProfitabilityLevel]:
    return OPERATING_MARGIN_TABLE.classify(margin)


def get_per_judgment(per: float) -> Judgment[ValuationLevel]:
    return PER_TABLE.classify(per)


def get_pbr_judgment(pbr: float) -> Judgment[ValuationLevel]:
    return PBR_TABLE.classify(pbr)


def get_dividend_yield_judgment(yield_pct: float) -> Judgment[ValuationLevel]:
    return DIVIDEND_YIELD_TABLE.classify(yield_pct)
