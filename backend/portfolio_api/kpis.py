import logging
import operator
from typing import Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from portfolio_api.config import (
    BENCHMARK_RETURNS,
    DIVERSIFICATION_SCORE,
    PERFORMANCE_TIMELINE,
    RISK_LEVEL,
)
from portfolio_api.holdings import Holding, HoldingsStore, round_half_away

logger = logging.getLogger(__name__)


class ComputationError(Exception):
    """A derived view cannot be computed from the current holdings."""


class EmptyPortfolioError(ComputationError):
    pass


class _Schema(BaseModel):
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class AllocationBucket(_Schema):
    value: int
    percentage: float


class Allocation(_Schema):
    by_sector: dict[str, AllocationBucket]
    by_market_cap: dict[str, AllocationBucket]


class Performer(_Schema):
    symbol: str
    name: str
    gain_percent: float


class PortfolioSummary(_Schema):
    total_value: int
    total_invested: int
    total_gain_loss: int
    total_gain_loss_percent: float
    top_performer: Performer
    worst_performer: Performer
    diversification_score: float
    risk_level: str


class TimelinePoint(_Schema):
    date: str
    portfolio: int
    nifty50: int
    gold: int


class TrailingReturns(_Schema):
    one_month: float = Field(alias="1month")
    three_months: float = Field(alias="3months")
    one_year: float = Field(alias="1year")


class PerformanceSeries(_Schema):
    timeline: list[TimelinePoint]
    returns: dict[str, TrailingReturns]


def _buckets(totals: dict[str, float], total_value: float) -> dict[str, AllocationBucket]:
    # Zero total → 0% everywhere rather than NaN
    return {
        category: AllocationBucket(
            value=round_half_away(value),
            percentage=round_half_away(value / total_value * 100, 1) if total_value else 0.0,
        )
        for category, value in totals.items()
    }


def compute_allocation(holdings: Sequence[Holding]) -> Allocation:
    """
    Group holding values by sector and by market cap.
    Categories keep first-occurrence order; bucket values round to integers,
    percentages to one decimal.
    """
    total_value = 0.0
    sector_totals: dict[str, float] = {}
    market_cap_totals: dict[str, float] = {}

    for h in holdings:
        total_value += h.value
        sector_totals[h.sector] = sector_totals.get(h.sector, 0.0) + h.value
        market_cap_totals[h.market_cap] = market_cap_totals.get(h.market_cap, 0.0) + h.value

    logger.debug("Allocation over %d holdings, total value %.2f", len(holdings), total_value)
    return Allocation(
        by_sector=_buckets(sector_totals, total_value),
        by_market_cap=_buckets(market_cap_totals, total_value),
    )


def find_extreme(
    holdings: Sequence[Holding],
    better: Callable[[float, float], bool],
) -> Holding | None:
    """
    Left-to-right scan on gain_loss_percent; a candidate replaces the current
    pick only when better(candidate, current) holds, so ties keep the first.
    Returns None for an empty sequence.
    """
    best = None
    for h in holdings:
        if best is None or better(h.gain_loss_percent, best.gain_loss_percent):
            best = h
    return best


def _performer(h: Holding) -> Performer:
    return Performer(symbol=h.symbol, name=h.name, gain_percent=h.gain_loss_percent)


def compute_summary(holdings: Sequence[Holding]) -> PortfolioSummary:
    """
    Portfolio-wide totals plus best and worst holdings by gain percent.
    Raises EmptyPortfolioError when there are no holdings.
    """
    top = find_extreme(holdings, operator.gt)
    worst = find_extreme(holdings, operator.lt)
    if top is None or worst is None:
        raise EmptyPortfolioError("Portfolio has no holdings")

    total_value = sum(h.value for h in holdings)
    total_invested = sum(h.invested for h in holdings)
    total_gain_loss = total_value - total_invested
    total_gain_loss_pct = (total_gain_loss / total_invested * 100) if total_invested else 0.0

    return PortfolioSummary(
        total_value=round_half_away(total_value),
        total_invested=round_half_away(total_invested),
        total_gain_loss=round_half_away(total_gain_loss),
        total_gain_loss_percent=round_half_away(total_gain_loss_pct, 2),
        top_performer=_performer(top),
        worst_performer=_performer(worst),
        diversification_score=DIVERSIFICATION_SCORE,
        risk_level=RISK_LEVEL,
    )


def compute_performance_series() -> PerformanceSeries:
    return PerformanceSeries.model_validate(
        {"timeline": PERFORMANCE_TIMELINE, "returns": BENCHMARK_RETURNS}
    )


class MetricsEngine:
    """Recomputes each view from the injected store on every call. Nothing is cached."""

    def __init__(self, store: HoldingsStore):
        self.store = store

    def holdings(self) -> tuple[Holding, ...]:
        return self.store.list()

    def allocation(self) -> Allocation:
        return compute_allocation(self.store.list())

    def summary(self) -> PortfolioSummary:
        return compute_summary(self.store.list())

    def performance(self) -> PerformanceSeries:
        return compute_performance_series()
