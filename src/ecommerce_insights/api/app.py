"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from ecommerce_insights.api.models import AnalysisRequest
from ecommerce_insights.app_logging import configure_logging
from ecommerce_insights.containers import AppContainer
from ecommerce_insights.domain.errors import InsightsError
from ecommerce_insights.services.demo import generate_demo_csv
from ecommerce_insights.services.insights import AnalysisReport


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InsightsError)
    async def insights_error_handler(
        request: Request, exc: InsightsError
    ) -> JSONResponse:
        logger.info("Rejected analysis input: %s", exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/analysis")
    async def analyze(payload: AnalysisRequest, request: Request) -> dict[str, object]:
        """Compare the uploaded periods and explain the revenue change."""
        state_container: AppContainer = request.app.state.container
        report = await state_container.insights_service.analyze(
            payload.csv_text, explain=payload.explain
        )
        return _serialize_report(report)

    @app.get("/analysis/demo")
    async def analyze_demo(request: Request, explain: bool = True) -> dict[str, object]:
        """Run the analysis over freshly generated demo data."""
        state_container: AppContainer = request.app.state.container
        csv_text = generate_demo_csv(
            period_length=state_container.settings.period_length
        )
        report = await state_container.insights_service.analyze(
            csv_text, explain=explain
        )
        return _serialize_report(report)

    @app.get("/demo.csv")
    async def demo_csv(request: Request) -> Response:
        """Download demo data in the expected CSV format."""
        state_container: AppContainer = request.app.state.container
        csv_text = generate_demo_csv(
            period_length=state_container.settings.period_length
        )
        return Response(content=csv_text, media_type="text/csv")

    return app


def _serialize_report(report: AnalysisReport) -> dict[str, object]:
    return {
        "comparison": asdict(report.comparison),
        "dashboard": report.dashboard.model_dump(mode="json"),
        "explanation": report.explanation,
    }
