"""Resolve a food name or photo into nutrition data and suggestions."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from nutrition_advisor.domain.analysis import (
    AnalysisInput,
    AnalysisResult,
    Resolution,
    ResolutionSource,
)
from nutrition_advisor.domain.errors import (
    CollaboratorFailureError,
    CollaboratorUnavailableError,
    InvalidInputError,
    MalformedCollaboratorResponseError,
)
from nutrition_advisor.domain.nutrition import NutritionRecord
from nutrition_advisor.services.aliases import AliasResolver
from nutrition_advisor.services.catalog import FoodCatalog
from nutrition_advisor.services.estimation import NutritionEstimationService
from nutrition_advisor.services.fallback import RandomNutritionGenerator
from nutrition_advisor.services.recommendations import RecommendationEngine
from nutrition_advisor.services.vision import VisionService

_logger = logging.getLogger(__name__)

IMAGE_UNAVAILABLE_LABEL = "이미지 분석을 사용할 수 없습니다"

MESSAGES: dict[ResolutionSource, str] = {
    ResolutionSource.EXACT_MATCH: "영양 정보 데이터베이스에서 찾은 결과입니다.",
    ResolutionSource.AI_ESTIMATE: "AI가 추정한 영양 정보입니다.",
    ResolutionSource.RANDOM_FALLBACK: (
        "영양 정보를 찾지 못해 임의의 참고값을 표시합니다. 정확한 값이 아닙니다."
    ),
}
_VISION_UNCONFIGURED_MESSAGE = (
    "OpenAI API 키를 설정하면 이미지 분석 기능을 사용할 수 있습니다."
)
_VISION_FAILED_MESSAGE = "이미지에서 음식을 인식하지 못했습니다. 음식명을 직접 입력해주세요."

_COLLABORATOR_MISSES = (CollaboratorFailureError, MalformedCollaboratorResponseError)


class ResolutionStrategy(Protocol):
    """One tier of the fallback chain; returns None on a miss."""

    async def attempt(self, food_name: str) -> Resolution | None:
        """Try to resolve ``food_name`` to a nutrition record."""


@dataclass(frozen=True)
class CatalogStrategy(ResolutionStrategy):
    """Look the name up in the static catalog via the alias resolver."""

    catalog: FoodCatalog
    resolver: AliasResolver

    async def attempt(self, food_name: str) -> Resolution | None:
        """Return the catalog record for ``food_name`` if it resolves."""
        canonical = self.resolver.resolve(food_name)
        record = self.catalog.get(canonical) if canonical else None
        if record is None:
            return None
        return _resolution(
            food_name, record, ResolutionSource.EXACT_MATCH, matched_name=canonical
        )


@dataclass(frozen=True)
class EstimationStrategy(ResolutionStrategy):
    """Ask the AI estimation service; any collaborator error is a miss."""

    service: NutritionEstimationService

    async def attempt(self, food_name: str) -> Resolution | None:
        """Return an AI-estimated record, or None when estimation fails."""
        try:
            record = await self.service.estimate(food_name)
        except CollaboratorUnavailableError:
            return None
        except _COLLABORATOR_MISSES as exc:
            _logger.warning("Nutrition estimation missed: food=%s: %s", food_name, exc)
            return None
        return _resolution(food_name, record, ResolutionSource.AI_ESTIMATE)


@dataclass(frozen=True)
class RandomFallbackStrategy(ResolutionStrategy):
    """Synthesize a placeholder record; never misses."""

    generator: RandomNutritionGenerator

    async def attempt(self, food_name: str) -> Resolution | None:
        """Return a randomized record for ``food_name``."""
        return _resolution(
            food_name, self.generator.generate(), ResolutionSource.RANDOM_FALLBACK
        )


@dataclass
class NutritionPipeline:
    """Orchestrates image identification, the fallback chain and suggestions."""

    vision_service: VisionService
    strategies: Sequence[ResolutionStrategy]
    recommendation_engine: RecommendationEngine

    async def resolve(self, request: AnalysisInput) -> Resolution:
        """Resolve the request to a food name and nutrition record.

        Raises InvalidInputError when the request has neither an image nor a
        non-blank food name. Collaborator errors never propagate.
        """
        has_text = bool(request.food_name and request.food_name.strip())
        if not request.image and not has_text:
            raise InvalidInputError("an image or a food name is required")

        if request.image:
            label, failure_message = await self._identify(request.image)
            if label is not None:
                food_name = label
            elif has_text:
                food_name = request.food_name
            else:
                return Resolution(
                    food_name=IMAGE_UNAVAILABLE_LABEL,
                    record=NutritionRecord.zero(),
                    source=ResolutionSource.PLACEHOLDER,
                    message=failure_message,
                )
        else:
            food_name = request.food_name

        for strategy in self.strategies:
            resolution = await strategy.attempt(food_name)
            if resolution is not None:
                _logger.info(
                    "Nutrition resolved: food=%s source=%s",
                    food_name,
                    resolution.source,
                )
                return resolution
        # Only reachable when the chain does not end in RandomFallbackStrategy.
        raise LookupError(f"no resolution strategy matched {food_name!r}")

    async def analyze(self, request: AnalysisInput) -> AnalysisResult:
        """Resolve the request and derive recommendations from the record."""
        resolution = await self.resolve(request)
        if resolution.source is ResolutionSource.PLACEHOLDER:
            recommendations = self.recommendation_engine.manual_entry()
        else:
            recommendations = self.recommendation_engine.recommend(resolution.record)
        return AnalysisResult(resolution=resolution, recommendations=recommendations)

    async def _identify(self, image: bytes) -> tuple[str | None, str | None]:
        try:
            return await self.vision_service.identify(image), None
        except CollaboratorUnavailableError:
            return None, _VISION_UNCONFIGURED_MESSAGE
        except _COLLABORATOR_MISSES as exc:
            _logger.warning("Image identification failed: %s", exc)
            return None, _VISION_FAILED_MESSAGE


def _resolution(
    food_name: str,
    record: NutritionRecord,
    source: ResolutionSource,
    matched_name: str | None = None,
) -> Resolution:
    return Resolution(
        food_name=food_name,
        record=record,
        source=source,
        message=MESSAGES[source],
        matched_name=matched_name,
    )
