"""Request models for the analyze API."""

import base64
import binascii

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/analyze``."""

    model_config = ConfigDict(populate_by_name=True)

    image: str | None = None
    food_name: str | None = Field(default=None, alias="foodName")

    @field_validator("image")
    @classmethod
    def _check_image(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        decode_image(value)
        return value

    def image_bytes(self) -> bytes | None:
        """Return the decoded image, if one was sent."""
        if self.image is None:
            return None
        return decode_image(self.image)


def decode_image(value: str) -> bytes:
    """Decode a data URL or bare base64 string into image bytes."""
    payload = value.strip()
    if payload.startswith("data:"):
        header, _, payload = payload.partition(",")
        if not header.endswith(";base64"):
            raise ValueError("image data URL must be base64 encoded")
    try:
        return base64.b64decode(payload, validate=True)
    except binascii.Error as exc:
        raise ValueError("image is not valid base64") from exc
