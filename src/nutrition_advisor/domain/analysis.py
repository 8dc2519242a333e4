"""Models describing the outcome of a nutrition analysis."""

from dataclasses import dataclass
from enum import StrEnum

from nutrition_advisor.domain.nutrition import NutritionRecord
from nutrition_advisor.domain.recommendations import Suggestion


class ResolutionSource(StrEnum):
    """Which tier produced a nutrition record."""

    EXACT_MATCH = "exact_match"
    AI_ESTIMATE = "ai_estimate"
    RANDOM_FALLBACK = "random_fallback"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class AnalysisInput:
    """Caller input: an image, a typed food name, or both."""

    image: bytes | None = None
    food_name: str | None = None


@dataclass(frozen=True)
class Resolution:
    """Resolved food name, nutrition record and the tier it came from."""

    food_name: str
    record: NutritionRecord
    source: ResolutionSource
    message: str | None = None
    matched_name: str | None = None


@dataclass(frozen=True)
class AnalysisResult:
    """Resolution plus the recommendations derived from it."""

    resolution: Resolution
    recommendations: list[Suggestion]

    def to_payload(self) -> dict[str, object]:
        """Serialize into the response shape of the analyze endpoint."""
        return {
            "food": self.resolution.food_name,
            "nutrition": self.resolution.record.to_payload(),
            "recommendations": [item.to_payload() for item in self.recommendations],
            "matchedFood": self.resolution.matched_name,
            "source": self.resolution.source.value,
            "message": self.resolution.message,
        }
