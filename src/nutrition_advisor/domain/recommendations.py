"""Recommendation domain models."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from nutrition_advisor.domain.nutrition import NutritionRecord


class SuggestionTopic(StrEnum):
    """Topics a suggestion can be about."""

    IRON = "iron"
    VITAMIN_C = "vitamin_c"
    PROTEIN = "protein"
    CALCIUM = "calcium"
    VITAMIN_A = "vitamin_a"
    VITAMIN_D = "vitamin_d"
    DEFAULT = "default"
    MANUAL_ENTRY = "manual_entry"


@dataclass(frozen=True)
class Suggestion:
    """Display payload for a single "eat this next" suggestion."""

    name: str
    nutrient_summary: str
    description: str
    icon: str
    food_list: tuple[str, ...]
    recipes: tuple[str, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, object]:
        """Serialize using wire field names."""
        payload: dict[str, object] = {
            "name": self.name,
            "nutrition": self.nutrient_summary,
            "description": self.description,
            "image": self.icon,
            "foodList": list(self.food_list),
        }
        if self.recipes:
            payload["recipes"] = list(self.recipes)
        return payload


@dataclass(frozen=True)
class RecommendationRule:
    """Deficiency rule: fires when the accessed nutrient is below threshold."""

    topic: SuggestionTopic
    nutrient: Callable[[NutritionRecord], float]
    threshold: float

    def fires(self, record: NutritionRecord) -> bool:
        """Return True when the record is deficient for this rule."""
        return self.nutrient(record) < self.threshold
