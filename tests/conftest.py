"""Shared test fixtures."""

import random
from dataclasses import dataclass, field

import pytest

from nutrition_advisor.config import Settings
from nutrition_advisor.containers import AppContainer
from nutrition_advisor.services.aliases import AliasResolver
from nutrition_advisor.services.cache import InMemoryEstimateCache
from nutrition_advisor.services.catalog import FoodCatalog, default_catalog
from nutrition_advisor.services.estimation import (
    EstimationClient,
    NutritionEstimationService,
)
from nutrition_advisor.services.fallback import RandomNutritionGenerator
from nutrition_advisor.services.pipeline import (
    CatalogStrategy,
    EstimationStrategy,
    NutritionPipeline,
    RandomFallbackStrategy,
)
from nutrition_advisor.services.recommendations import RecommendationEngine
from nutrition_advisor.services.vision import VisionClient, VisionService

ESTIMATE_PAYLOAD: dict[str, object] = {
    "calories": 300,
    "protein": 20,
    "carbs": 35,
    "fat": 9,
    "fiber": 2.5,
    "vitamins": {"vitaminA": 120, "vitaminC": 8, "vitaminD": 0.4, "vitaminE": 1.1},
    "minerals": {"calcium": 60, "iron": 2.2, "potassium": 310},
}


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed label or raising."""

    payload: dict[str, object] = field(default_factory=lambda: {"label": "치킨"})
    error: Exception | None = None
    calls: int = 0

    async def extract(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.payload


@dataclass
class FakeEstimationClient(EstimationClient):
    """Fake estimation client returning a fixed payload or raising."""

    payload: object = field(default_factory=lambda: dict(ESTIMATE_PAYLOAD))
    error: Exception | None = None
    prompts: list[str] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.payload


def build_pipeline(
    *,
    catalog: FoodCatalog | None = None,
    vision_client: VisionClient | None = None,
    estimation_client: EstimationClient | None = None,
    seed: int = 7,
) -> NutritionPipeline:
    resolved_catalog = catalog or default_catalog()
    return NutritionPipeline(
        vision_service=VisionService(client=vision_client, model="gpt-4o"),
        strategies=(
            CatalogStrategy(
                catalog=resolved_catalog, resolver=AliasResolver(resolved_catalog)
            ),
            EstimationStrategy(
                service=NutritionEstimationService(
                    client=estimation_client,
                    model="gpt-4o-mini",
                    cache=InMemoryEstimateCache(),
                )
            ),
            RandomFallbackStrategy(
                generator=RandomNutritionGenerator(rng=random.Random(seed))
            ),
        ),
        recommendation_engine=RecommendationEngine(),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key")


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def estimation_client() -> FakeEstimationClient:
    return FakeEstimationClient()


@pytest.fixture
def container(
    settings: Settings,
    vision_client: FakeVisionClient,
    estimation_client: FakeEstimationClient,
) -> AppContainer:
    catalog = default_catalog()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        pipeline=build_pipeline(
            catalog=catalog,
            vision_client=vision_client,
            estimation_client=estimation_client,
        ),
        close_resources=close_resources,
    )
