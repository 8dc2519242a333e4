"""Static food catalog: nutrition table and alias map."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from nutrition_advisor.domain.nutrition import Minerals, NutritionRecord, Vitamins


@dataclass(frozen=True)
class FoodCatalog:
    """Read-only nutrition table and alias map, shared across requests.

    ``foods`` keeps insertion order; substring matching in the alias resolver
    depends on it.
    """

    foods: Mapping[str, NutritionRecord]
    aliases: Mapping[str, str]

    @classmethod
    def create(
        cls, foods: Mapping[str, NutritionRecord], aliases: Mapping[str, str]
    ) -> "FoodCatalog":
        """Freeze copies of the given tables into a catalog."""
        return cls(
            foods=MappingProxyType(dict(foods)),
            aliases=MappingProxyType(dict(aliases)),
        )

    def get(self, name: str) -> NutritionRecord | None:
        """Return the record stored under an exact canonical name."""
        return self.foods.get(name)

    def names(self) -> list[str]:
        """Return canonical names in table order."""
        return list(self.foods)


def _record(  # noqa: PLR0913
    calories: float,
    protein: float,
    carbs: float,
    fat: float,
    fiber: float,
    vitamins: tuple[float, float, float, float],
    minerals: tuple[float, float, float],
) -> NutritionRecord:
    vitamin_a, vitamin_c, vitamin_d, vitamin_e = vitamins
    calcium, iron, potassium = minerals
    return NutritionRecord(
        calories=calories,
        protein=protein,
        carbs=carbs,
        fat=fat,
        fiber=fiber,
        vitamins=Vitamins(
            vitamin_a=vitamin_a,
            vitamin_c=vitamin_c,
            vitamin_d=vitamin_d,
            vitamin_e=vitamin_e,
        ),
        minerals=Minerals(calcium=calcium, iron=iron, potassium=potassium),
    )


# vitamins: (A, C, D, E), minerals: (calcium, iron, potassium)
DEFAULT_FOODS: dict[str, NutritionRecord] = {
    "김치찌개": _record(320, 12.5, 45.2, 8.3, 6.8, (450, 25, 2.1, 3.2), (180, 3.5, 420)),
    "샐러드": _record(150, 8.2, 25.1, 4.5, 8.2, (1200, 45, 0.5, 2.8), (120, 2.8, 380)),
    "닭가슴살": _record(165, 31.0, 0, 3.6, 0, (6, 0, 0.1, 0.3), (15, 1.0, 256)),
    "밥": _record(130, 2.7, 28.2, 0.3, 0.4, (0, 0, 0, 0.1), (10, 0.2, 35)),
    "치킨": _record(250, 25.0, 9.8, 14.5, 0.3, (40, 0, 0.2, 0.9), (20, 1.3, 230)),
    "김치볶음밥": _record(450, 11.0, 68.5, 14.2, 3.1, (280, 12, 0.3, 1.8), (45, 2.1, 310)),
    "비빔밥": _record(550, 18.5, 82.0, 15.0, 7.5, (850, 15, 0.8, 2.4), (95, 3.8, 560)),
    "불고기": _record(280, 24.0, 12.0, 15.0, 0.8, (20, 3, 0.1, 0.5), (25, 3.2, 390)),
    "된장찌개": _record(180, 13.0, 14.0, 8.0, 4.2, (160, 10, 0, 1.5), (160, 2.8, 480)),
    "라면": _record(500, 10.5, 78.0, 16.5, 3.0, (80, 2, 0, 3.0), (40, 2.3, 270)),
    "떡볶이": _record(380, 8.0, 80.0, 3.5, 2.5, (120, 4, 0, 1.2), (30, 1.4, 220)),
    "삼겹살": _record(520, 17.0, 0, 50.0, 0, (10, 0, 0.6, 0.3), (8, 0.9, 290)),
    "계란": _record(78, 6.3, 0.6, 5.3, 0, (80, 0, 1.1, 0.5), (28, 0.9, 69)),
    "두부": _record(144, 15.8, 3.5, 8.7, 2.3, (0, 0, 0, 0.1), (350, 5.4, 240)),
    "연어": _record(208, 20.0, 0, 13.0, 0, (50, 4, 11.0, 3.6), (12, 0.3, 363)),
    "우유": _record(122, 8.1, 11.7, 4.8, 0, (150, 0, 2.9, 0.1), (276, 0.1, 366)),
}

DEFAULT_ALIASES: dict[str, str] = {
    "chicken": "치킨",
    "fried chicken": "치킨",
    "후라이드치킨": "치킨",
    "양념치킨": "치킨",
    "chicken breast": "닭가슴살",
    "닭 가슴살": "닭가슴살",
    "rice": "밥",
    "쌀밥": "밥",
    "공기밥": "밥",
    "salad": "샐러드",
    "kimchi stew": "김치찌개",
    "kimchi jjigae": "김치찌개",
    "kimchi fried rice": "김치볶음밥",
    "bibimbap": "비빔밥",
    "bulgogi": "불고기",
    "doenjang jjigae": "된장찌개",
    "ramen": "라면",
    "ramyeon": "라면",
    "tteokbokki": "떡볶이",
    "pork belly": "삼겹살",
    "samgyeopsal": "삼겹살",
    "egg": "계란",
    "달걀": "계란",
    "tofu": "두부",
    "salmon": "연어",
    "milk": "우유",
    "짜장면": "자장면",
}


def default_catalog() -> FoodCatalog:
    """Build the catalog bundled with the application."""
    return FoodCatalog.create(DEFAULT_FOODS, DEFAULT_ALIASES)
