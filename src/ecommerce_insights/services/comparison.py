"""Period-over-period comparison of daily metrics."""

from collections.abc import Sequence
from dataclasses import dataclass

from ecommerce_insights.domain.errors import InsufficientDataError
from ecommerce_insights.domain.metrics import (
    AggregatedMetrics,
    ComparisonResult,
    DailyRecord,
    MetricDeltas,
)

DEFAULT_PERIOD_LENGTH = 7


@dataclass
class ComparisonService:
    """Compares the most recent period against the one before it."""

    period_length: int = DEFAULT_PERIOD_LENGTH

    def compare(self, records: Sequence[DailyRecord]) -> ComparisonResult:
        """Compare records using the configured period length."""
        return compare_periods(records, self.period_length)


def compare_periods(
    records: Sequence[DailyRecord], period_length: int = DEFAULT_PERIOD_LENGTH
) -> ComparisonResult:
    """Compare the newest block of days against the block preceding it.

    Records must already be sorted oldest first. Only the last
    ``2 * period_length`` records are used.
    """
    if period_length < 1:
        raise ValueError("period_length must be at least 1")

    newest_first = list(reversed(records))
    required = period_length * 2
    if len(newest_first) < required:
        raise InsufficientDataError(required=required, available=len(newest_first))

    current = newest_first[:period_length]
    previous = newest_first[period_length:required]

    current_metrics = aggregate(current)
    previous_metrics = aggregate(previous)

    return ComparisonResult(
        current_period=current_metrics,
        previous_period=previous_metrics,
        delta=MetricDeltas(
            revenue_pct=percent_change(
                current_metrics.total_revenue, previous_metrics.total_revenue
            ),
            orders_pct=percent_change(
                current_metrics.total_orders, previous_metrics.total_orders
            ),
            ad_spend_pct=percent_change(
                current_metrics.total_ad_spend, previous_metrics.total_ad_spend
            ),
            aov_pct=percent_change(current_metrics.aov, previous_metrics.aov),
            roas_pct=percent_change(current_metrics.roas, previous_metrics.roas),
        ),
        start_date=current[-1].date,
        end_date=current[0].date,
        data_points=(*reversed(previous), *reversed(current)),
        period_length=period_length,
    )


def aggregate(records: Sequence[DailyRecord]) -> AggregatedMetrics:
    """Sum a block of days and derive AOV and ROAS."""
    total_revenue = sum(record.revenue for record in records)
    total_orders = sum(record.orders for record in records)
    total_ad_spend = sum(record.ad_spend for record in records)
    return AggregatedMetrics(
        total_revenue=total_revenue,
        total_orders=total_orders,
        total_ad_spend=total_ad_spend,
        aov=total_revenue / total_orders if total_orders > 0 else 0.0,
        roas=total_revenue / total_ad_spend if total_ad_spend > 0 else 0.0,
    )


def percent_change(current: float, previous: float) -> float:
    """Return the change from previous to current in percent, 0 on a zero base."""
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100
