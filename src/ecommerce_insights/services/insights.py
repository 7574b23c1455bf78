"""End-to-end analysis of an uploaded metrics CSV."""

import logging
from dataclasses import dataclass

from ecommerce_insights.domain.dashboard import Dashboard
from ecommerce_insights.domain.metrics import ComparisonResult
from ecommerce_insights.services.analysis import RootCauseService
from ecommerce_insights.services.comparison import ComparisonService
from ecommerce_insights.services.ingestion import parse_csv
from ecommerce_insights.services.presentation import build_dashboard

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    """Comparison with its formatted view and optional explanation."""

    comparison: ComparisonResult
    dashboard: Dashboard
    explanation: str | None


@dataclass
class InsightsService:
    """Parses, compares and explains daily metrics."""

    comparison_service: ComparisonService
    root_cause_service: RootCauseService

    async def analyze(self, csv_text: str, *, explain: bool = True) -> AnalysisReport:
        """Run the full analysis flow over CSV text.

        FormatError and InsufficientDataError propagate to the caller.
        """
        records = parse_csv(csv_text)
        comparison = self.comparison_service.compare(records)
        _logger.info(
            "Compared periods: records=%s current=%s..%s",
            len(records),
            comparison.start_date,
            comparison.end_date,
        )
        explanation = None
        if explain:
            explanation = await self.root_cause_service.explain(comparison)
        return AnalysisReport(
            comparison=comparison,
            dashboard=build_dashboard(comparison),
            explanation=explanation,
        )
