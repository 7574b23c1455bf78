"""Formatting helpers for presenting a comparison."""

from decimal import ROUND_HALF_UP, Decimal

from ecommerce_insights.domain.dashboard import (
    ChartPoint,
    Dashboard,
    MetricCard,
    TrendDirection,
)
from ecommerce_insights.domain.metrics import ComparisonResult

NEUTRAL_THRESHOLD_PCT = 1.0

_ARROWS: dict[TrendDirection, str] = {"up": "↑", "down": "↓", "neutral": "—"}


def round_half_up(value: float, places: int = 0) -> Decimal:
    """Round with halves going away from zero, as dashboards display money."""
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)


def format_currency(value: float) -> str:
    """Format a USD amount without cents, e.g. ``$1,235``."""
    rounded = round_half_up(value)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def trend_direction(pct_change: float) -> TrendDirection:
    """Classify a percentage change; moves under one percent are neutral."""
    if abs(pct_change) < NEUTRAL_THRESHOLD_PCT:
        return "neutral"
    return "up" if pct_change >= 0 else "down"


def format_percent_change(pct_change: float) -> str:
    """Format a change as ``↑ 12.3% vs prev``."""
    arrow = _ARROWS[trend_direction(pct_change)]
    return f"{arrow} {abs(round_half_up(pct_change, 1))}% vs prev"


def comparison_label(period_length: int) -> str:
    """Describe the compared windows."""
    return f"Last {period_length} Days vs Previous {period_length} Days"


def build_dashboard(result: ComparisonResult) -> Dashboard:
    """Build metric cards and chart points for a comparison."""
    current = result.current_period
    delta = result.delta
    cards = [
        _card(
            "Total Revenue", format_currency(current.total_revenue), delta.revenue_pct
        ),
        _card("Total Orders", str(current.total_orders), delta.orders_pct),
        _card(
            "Ad Spend", format_currency(current.total_ad_spend), delta.ad_spend_pct
        ),
        _card("Avg Order Value (AOV)", format_currency(current.aov), delta.aov_pct),
    ]
    chart = [
        ChartPoint(
            day=record.date,
            short_date=f"{record.date:%b} {record.date.day}",
            revenue=record.revenue,
            ad_spend=record.ad_spend,
        )
        for record in result.data_points
    ]
    return Dashboard(
        comparison_label=comparison_label(result.period_length),
        cards=cards,
        chart=chart,
    )


def _card(title: str, value: str, pct_change: float) -> MetricCard:
    return MetricCard(
        title=title,
        value=value,
        pct_change=pct_change,
        direction=trend_direction(pct_change),
        change_label=format_percent_change(pct_change),
    )
