"""Models for image identification results."""

from pydantic import BaseModel, Field


class FoodLabel(BaseModel):
    """Structured output of the image-identification call."""

    label: str = Field(min_length=1)
