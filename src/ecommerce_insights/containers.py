"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from ecommerce_insights.adapters.openai_analysis_client import OpenAIAnalysisClient
from ecommerce_insights.config import Settings
from ecommerce_insights.services.analysis import RootCauseService
from ecommerce_insights.services.comparison import ComparisonService
from ecommerce_insights.services.insights import InsightsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    comparison_service: ComparisonService
    root_cause_service: RootCauseService
    insights_service: InsightsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    openai_client = None
    if resolved_settings.openai_api_key:
        openai_client = OpenAIAnalysisClient.create(resolved_settings.openai_api_key)
    comparison_service = ComparisonService(
        period_length=resolved_settings.period_length
    )
    root_cause_service = RootCauseService(
        client=openai_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    insights_service = InsightsService(
        comparison_service=comparison_service,
        root_cause_service=root_cause_service,
    )

    async def close_resources() -> None:
        if openai_client is not None:
            await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        comparison_service=comparison_service,
        root_cause_service=root_cause_service,
        insights_service=insights_service,
        close_resources=close_resources,
    )
