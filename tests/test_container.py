"""Tests for container wiring."""

import asyncio

from ecommerce_insights.adapters.openai_analysis_client import OpenAIAnalysisClient
from ecommerce_insights.config import Settings
from ecommerce_insights.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.insights_service is not None
    assert isinstance(container.root_cause_service.client, OpenAIAnalysisClient)
    assert container.comparison_service.period_length == 7
    asyncio.run(container.close_resources())


def test_build_container_without_api_key_skips_client() -> None:
    container = build_container(Settings(openai_api_key=None, period_length=3))

    assert container.root_cause_service.client is None
    assert container.comparison_service.period_length == 3
    asyncio.run(container.close_resources())
