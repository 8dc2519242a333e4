"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from nutrition_advisor.api.models import AnalyzeRequest
from nutrition_advisor.app_logging import configure_logging
from nutrition_advisor.containers import AppContainer
from nutrition_advisor.domain.analysis import AnalysisInput
from nutrition_advisor.domain.errors import InvalidInputError

INTERNAL_ERROR_MESSAGE = "영양 분석 중 오류가 발생했습니다."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/foods")
    async def list_foods(request: Request) -> dict[str, object]:
        """Return canonical food names and the alias map."""
        state_container: AppContainer = request.app.state.container
        return {
            "foods": state_container.catalog.names(),
            "aliases": dict(state_container.catalog.aliases),
        }

    @app.post("/api/analyze")
    async def analyze(body: AnalyzeRequest, request: Request) -> JSONResponse:
        """Identify a food and return its nutrition and suggestions."""
        state_container: AppContainer = request.app.state.container
        try:
            result = await state_container.pipeline.analyze(
                AnalysisInput(image=body.image_bytes(), food_name=body.food_name)
            )
            return JSONResponse(result.to_payload())
        except InvalidInputError as exc:
            return JSONResponse(
                {"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST
            )
        except Exception:
            logger.exception("Nutrition analysis failed")
            return JSONResponse(
                {"error": INTERNAL_ERROR_MESSAGE},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    return app
