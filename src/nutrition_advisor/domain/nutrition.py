"""Nutrition domain models."""

from pydantic import BaseModel, ConfigDict, Field

# Estimates arrive as JSON, where 1e999 decodes to inf.
_RECORD_CONFIG = ConfigDict(
    frozen=True, populate_by_name=True, extra="forbid", allow_inf_nan=False
)


class Vitamins(BaseModel):
    """Vitamin content of a serving."""

    model_config = _RECORD_CONFIG

    vitamin_a: float = Field(alias="vitaminA", ge=0)
    vitamin_c: float = Field(alias="vitaminC", ge=0)
    vitamin_d: float = Field(alias="vitaminD", ge=0)
    vitamin_e: float = Field(alias="vitaminE", ge=0)


class Minerals(BaseModel):
    """Mineral content of a serving."""

    model_config = _RECORD_CONFIG

    calcium: float = Field(ge=0)
    iron: float = Field(ge=0)
    potassium: float = Field(ge=0)


class NutritionRecord(BaseModel):
    """Fully populated nutrition values for one serving of a food.

    Field names on the wire follow the presentation layer (``protein``,
    ``vitaminA``...). Every value is required and non-negative.
    """

    model_config = _RECORD_CONFIG

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float = Field(ge=0)
    vitamins: Vitamins
    minerals: Minerals

    @classmethod
    def zero(cls) -> "NutritionRecord":
        """Return a record with every value set to zero."""
        return cls(
            calories=0,
            protein=0,
            carbs=0,
            fat=0,
            fiber=0,
            vitamins=Vitamins(vitamin_a=0, vitamin_c=0, vitamin_d=0, vitamin_e=0),
            minerals=Minerals(calcium=0, iron=0, potassium=0),
        )

    def to_payload(self) -> dict[str, object]:
        """Serialize using wire field names."""
        return self.model_dump(by_alias=True)
