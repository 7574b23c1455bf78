"""Domain models for daily metrics and period comparisons."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyRecord:
    """One calendar day of store metrics."""

    date: date
    revenue: float
    orders: int
    ad_spend: float


@dataclass(frozen=True)
class AggregatedMetrics:
    """Totals and ratios over a contiguous block of days."""

    total_revenue: float
    total_orders: int
    total_ad_spend: float
    aov: float
    roas: float
    conversion_rate_proxy: float = 0.0


@dataclass(frozen=True)
class MetricDeltas:
    """Percentage change per metric from the previous to the current period."""

    revenue_pct: float
    orders_pct: float
    ad_spend_pct: float
    aov_pct: float
    roas_pct: float


@dataclass(frozen=True)
class ComparisonResult:
    """Current period vs the period immediately preceding it."""

    current_period: AggregatedMetrics
    previous_period: AggregatedMetrics
    delta: MetricDeltas
    start_date: date
    end_date: date
    data_points: tuple[DailyRecord, ...]
    period_length: int
