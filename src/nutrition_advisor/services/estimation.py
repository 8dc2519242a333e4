"""Text-based nutrition estimation using an LLM."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from nutrition_advisor.domain.errors import (
    CollaboratorFailureError,
    CollaboratorUnavailableError,
    MalformedCollaboratorResponseError,
)
from nutrition_advisor.domain.nutrition import NutritionRecord
from nutrition_advisor.services.aliases import normalize_name
from nutrition_advisor.services.cache import EstimateCache

_logger = logging.getLogger(__name__)

_NUMBER = {"type": "number", "minimum": 0}

NUTRITION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "calories": _NUMBER,
        "protein": _NUMBER,
        "carbs": _NUMBER,
        "fat": _NUMBER,
        "fiber": _NUMBER,
        "vitamins": {
            "type": "object",
            "properties": {
                "vitaminA": _NUMBER,
                "vitaminC": _NUMBER,
                "vitaminD": _NUMBER,
                "vitaminE": _NUMBER,
            },
            "required": ["vitaminA", "vitaminC", "vitaminD", "vitaminE"],
            "additionalProperties": False,
        },
        "minerals": {
            "type": "object",
            "properties": {
                "calcium": _NUMBER,
                "iron": _NUMBER,
                "potassium": _NUMBER,
            },
            "required": ["calcium", "iron", "potassium"],
            "additionalProperties": False,
        },
    },
    "required": [
        "calories",
        "protein",
        "carbs",
        "fat",
        "fiber",
        "vitamins",
        "minerals",
    ],
    "additionalProperties": False,
}


class EstimationClient(Protocol):
    """Interface for LLM structured text completion."""

    async def complete(
        self,
        *,
        model: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured data matching ``schema``."""


@dataclass
class NutritionEstimationService:
    """Ask an LLM for a per-serving nutrition estimate of a named food."""

    client: EstimationClient | None
    model: str
    cache: EstimateCache
    timeout_seconds: float = 8.0

    async def estimate(self, food_name: str) -> NutritionRecord:
        """Return an estimated record for ``food_name``.

        Raises the collaborator errors from ``domain.errors``; callers treat
        any of them as a miss.
        """
        if self.client is None:
            raise CollaboratorUnavailableError("estimation client is not configured")
        cache_key = normalize_name(food_name)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        try:
            raw = await asyncio.wait_for(
                self.client.complete(
                    model=self.model,
                    schema=NUTRITION_SCHEMA,
                    prompt=_estimation_prompt(food_name),
                ),
                timeout=self.timeout_seconds,
            )
        except MalformedCollaboratorResponseError:
            raise
        except Exception as exc:
            raise CollaboratorFailureError(f"estimation call failed: {exc!r}") from exc
        try:
            record = NutritionRecord.model_validate(raw)
        except ValidationError as exc:
            raise MalformedCollaboratorResponseError(str(exc)) from exc
        self.cache.put(cache_key, record)
        _logger.info("Nutrition estimated by AI: food=%s", food_name)
        return record


def _estimation_prompt(food_name: str) -> str:
    return (
        f"'{food_name}' 1인분의 영양 성분을 추정해주세요. "
        "칼로리(kcal), 단백질/탄수화물/지방/식이섬유(g), "
        "비타민 A(μg), C(mg), D(μg), E(mg), "
        "칼슘/철분/칼륨(mg)을 숫자로만 답변해주세요."
    )
