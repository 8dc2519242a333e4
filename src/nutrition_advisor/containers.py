"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_advisor.adapters.openai_estimation_client import (
    OpenAIEstimationClient,
)
from nutrition_advisor.adapters.openai_vision_client import OpenAIVisionClient
from nutrition_advisor.config import Settings
from nutrition_advisor.services.aliases import AliasResolver
from nutrition_advisor.services.cache import InMemoryEstimateCache
from nutrition_advisor.services.catalog import FoodCatalog, default_catalog
from nutrition_advisor.services.estimation import NutritionEstimationService
from nutrition_advisor.services.fallback import RandomNutritionGenerator
from nutrition_advisor.services.pipeline import (
    CatalogStrategy,
    EstimationStrategy,
    NutritionPipeline,
    RandomFallbackStrategy,
)
from nutrition_advisor.services.recommendations import RecommendationEngine
from nutrition_advisor.services.vision import VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    pipeline: NutritionPipeline
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    timeout = resolved_settings.collaborator_timeout_seconds
    catalog = default_catalog()

    vision_client: OpenAIVisionClient | None = None
    estimation_client: OpenAIEstimationClient | None = None
    if resolved_settings.openai_configured:
        vision_client = OpenAIVisionClient.create(
            resolved_settings.openai_api_key, timeout
        )
        if resolved_settings.estimation_enabled:
            estimation_client = OpenAIEstimationClient.create(
                resolved_settings.openai_api_key, timeout
            )

    vision_service = VisionService(
        client=vision_client,
        model=resolved_settings.openai_vision_model,
        timeout_seconds=timeout,
    )
    estimation_service = NutritionEstimationService(
        client=estimation_client,
        model=resolved_settings.openai_estimation_model,
        cache=InMemoryEstimateCache(
            ttl_seconds=resolved_settings.estimation_cache_ttl_seconds
        ),
        timeout_seconds=timeout,
    )
    pipeline = NutritionPipeline(
        vision_service=vision_service,
        strategies=(
            CatalogStrategy(catalog=catalog, resolver=AliasResolver(catalog)),
            EstimationStrategy(service=estimation_service),
            RandomFallbackStrategy(generator=RandomNutritionGenerator()),
        ),
        recommendation_engine=RecommendationEngine(),
    )

    async def close_resources() -> None:
        if vision_client is not None:
            await vision_client.client.close()
        if estimation_client is not None:
            await estimation_client.client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        pipeline=pipeline,
        close_resources=close_resources,
    )
