"""Randomized placeholder nutrition for foods nothing else could resolve."""

import random
from dataclasses import dataclass, field

from nutrition_advisor.domain.nutrition import Minerals, NutritionRecord, Vitamins

# Inclusive bounds per field. Not physiologically derived.
FALLBACK_RANGES: dict[str, tuple[float, float]] = {
    "calories": (150, 450),
    "protein": (5, 25),
    "carbs": (15, 60),
    "fat": (2, 20),
    "fiber": (0.5, 8),
    "vitamin_a": (50, 600),
    "vitamin_c": (0, 60),
    "vitamin_d": (0, 3),
    "vitamin_e": (0.1, 5),
    "calcium": (20, 200),
    "iron": (0.5, 6),
    "potassium": (100, 500),
}


@dataclass
class RandomNutritionGenerator:
    """Draw each nutrition field independently from its fallback range."""

    rng: random.Random = field(default_factory=random.Random)
    ranges: dict[str, tuple[float, float]] = field(
        default_factory=lambda: dict(FALLBACK_RANGES)
    )

    def generate(self) -> NutritionRecord:
        """Return a synthesized record within the configured ranges."""
        return NutritionRecord(
            calories=float(round(self._draw("calories"))),
            protein=self._draw("protein"),
            carbs=self._draw("carbs"),
            fat=self._draw("fat"),
            fiber=self._draw("fiber"),
            vitamins=Vitamins(
                vitamin_a=self._draw("vitamin_a"),
                vitamin_c=self._draw("vitamin_c"),
                vitamin_d=self._draw("vitamin_d"),
                vitamin_e=self._draw("vitamin_e"),
            ),
            minerals=Minerals(
                calcium=self._draw("calcium"),
                iron=self._draw("iron"),
                potassium=self._draw("potassium"),
            ),
        )

    def _draw(self, name: str) -> float:
        low, high = self.ranges[name]
        value = round(self.rng.uniform(low, high), 1)
        return min(max(value, low), high)
