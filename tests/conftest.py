"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, timedelta

import pytest

from ecommerce_insights.config import Settings
from ecommerce_insights.containers import AppContainer
from ecommerce_insights.domain.metrics import DailyRecord
from ecommerce_insights.services.analysis import AnalysisClient, RootCauseService
from ecommerce_insights.services.comparison import ComparisonService
from ecommerce_insights.services.insights import InsightsService

START_DAY = date(2024, 3, 1)


@dataclass
class FakeAnalysisClient(AnalysisClient):
    """Fake analysis client returning a fixed explanation."""

    text: str = "Revenue fell because ad spend was cut."
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def explain(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def make_records(
    orders: list[int], aov: float = 50.0, ad_spend: float = 100.0
) -> list[DailyRecord]:
    """Build consecutive daily records starting at START_DAY."""
    return [
        DailyRecord(
            date=START_DAY + timedelta(days=offset),
            revenue=count * aov,
            orders=count,
            ad_spend=ad_spend,
        )
        for offset, count in enumerate(orders)
    ]


def to_csv(records: list[DailyRecord]) -> str:
    """Render records as CSV text."""
    lines = ["date,revenue,orders,ad_spend"]
    lines.extend(
        f"{record.date.isoformat()},{record.revenue},{record.orders},{record.ad_spend}"
        for record in records
    )
    return "\n".join(lines)


@pytest.fixture
def scenario_records() -> list[DailyRecord]:
    """Fourteen days: a healthy week followed by a week with fewer orders."""
    previous = [
        DailyRecord(
            date=START_DAY + timedelta(days=offset),
            revenue=orders * 65,
            orders=orders,
            ad_spend=500.0,
        )
        for offset, orders in enumerate(range(40, 47))
    ]
    current = [
        DailyRecord(
            date=START_DAY + timedelta(days=7 + offset),
            revenue=orders * 63,
            orders=orders,
            ad_spend=200.0,
        )
        for offset, orders in enumerate(range(15, 22))
    ]
    return previous + current


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def analysis_client() -> FakeAnalysisClient:
    return FakeAnalysisClient()


@pytest.fixture
def container(
    settings: Settings, analysis_client: FakeAnalysisClient
) -> AppContainer:
    comparison_service = ComparisonService(period_length=settings.period_length)
    root_cause_service = RootCauseService(
        client=analysis_client,
        model=settings.openai_model,
        reasoning_effort=settings.openai_reasoning_effort,
        store=settings.openai_store,
    )
    insights_service = InsightsService(
        comparison_service=comparison_service,
        root_cause_service=root_cause_service,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        comparison_service=comparison_service,
        root_cause_service=root_cause_service,
        insights_service=insights_service,
        close_resources=close_resources,
    )
