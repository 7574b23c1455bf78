"""Display models derived from a comparison result."""

from datetime import date
from typing import Literal

from pydantic import BaseModel

TrendDirection = Literal["up", "down", "neutral"]


class MetricCard(BaseModel):
    """Headline metric for the current period with its change."""

    title: str
    value: str
    pct_change: float
    direction: TrendDirection
    change_label: str


class ChartPoint(BaseModel):
    """Single day on the revenue and ad spend trend chart."""

    day: date
    short_date: str
    revenue: float
    ad_spend: float


class Dashboard(BaseModel):
    """Formatted view of a comparison."""

    comparison_label: str
    cards: list[MetricCard]
    chart: list[ChartPoint]
