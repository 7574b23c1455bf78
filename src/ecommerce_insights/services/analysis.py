"""Root cause explanations generated by an LLM."""

import logging
from dataclasses import dataclass
from typing import Protocol

from ecommerce_insights.domain.metrics import ComparisonResult
from ecommerce_insights.services.presentation import round_half_up

MISSING_KEY_MESSAGE = "API Key is missing. Please set OPENAI_API_KEY."
EMPTY_RESPONSE_MESSAGE = "Unable to generate analysis at this time."
FAILURE_MESSAGE = (
    "Error connecting to AI analyst. Please ensure your API Key is valid."
)

_logger = logging.getLogger(__name__)


class AnalysisClient(Protocol):
    """Interface for LLM text generation."""

    async def explain(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return the model's text answer for a prompt."""


@dataclass
class RootCauseService:
    """Service that asks an LLM why revenue moved between periods."""

    client: AnalysisClient | None
    model: str
    reasoning_effort: str | None
    store: bool

    async def explain(self, result: ComparisonResult) -> str:
        """Return a short explanation, or a fallback message on failure."""
        if self.client is None:
            return MISSING_KEY_MESSAGE
        prompt = build_analysis_prompt(result)
        try:
            text = await self.client.explain(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=prompt,
            )
        except Exception:
            _logger.exception("Root cause analysis request failed")
            return FAILURE_MESSAGE
        return text.strip() or EMPTY_RESPONSE_MESSAGE


def build_analysis_prompt(result: ComparisonResult) -> str:
    """Build the analyst prompt from period totals and deltas."""
    days = result.period_length
    delta = result.delta
    previous_revenue = result.previous_period.total_revenue
    current_revenue = result.current_period.total_revenue
    return f"""You are an expert e-commerce Data Analyst for a small business.
Analyze the following performance comparison between the Last {days} Days vs Previous {days} Days.

DATA:
- Revenue Change: {round_half_up(delta.revenue_pct, 1)}% (From ${round_half_up(previous_revenue)} to ${round_half_up(current_revenue)})
- Orders Change: {round_half_up(delta.orders_pct, 1)}%
- Ad Spend Change: {round_half_up(delta.ad_spend_pct, 1)}%
- AOV Change: {round_half_up(delta.aov_pct, 1)}%
- ROAS Change: {round_half_up(delta.roas_pct, 1)}%

TASK:
1. Identify the primary "Root Cause" of the revenue movement.
2. Explain strictly in 3 sentences max.
3. Use a professional, direct, and helpful tone.
4. Focus on the relationship between Spend, Traffic (implied by orders/spend), and Average Order Value.

Example output format:
"Revenue dropped by 30% primarily due to a 40% reduction in Ad Spend. While your AOV remained stable, the lack of paid traffic significantly reduced total order volume. Consider scaling back up your successful campaigns."
"""  # noqa: E501
