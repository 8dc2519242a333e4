"""Food identification from images using an LLM."""

import asyncio
import base64
import logging
from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from nutrition_advisor.domain.errors import (
    CollaboratorFailureError,
    CollaboratorUnavailableError,
    MalformedCollaboratorResponseError,
)
from nutrition_advisor.domain.vision import FoodLabel

_logger = logging.getLogger(__name__)

VISION_PROMPT = (
    "이 이미지에 있는 음식을 한국어로 정확히 식별해주세요. "
    "음식명만 간단히 답변해주세요."
)

LABEL_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {"label": {"type": "string"}},
    "required": ["label"],
    "additionalProperties": False,
}


class VisionClient(Protocol):
    """Interface for LLM image identification."""

    async def extract(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Return structured identification data."""


@dataclass
class VisionService:
    """Service that identifies a food name from image bytes."""

    client: VisionClient | None
    model: str
    timeout_seconds: float = 8.0

    async def identify(self, image_bytes: bytes) -> str:
        """Return a short food label for the image.

        Raises CollaboratorUnavailableError when no client is configured,
        CollaboratorFailureError on transport errors or timeout, and
        MalformedCollaboratorResponseError when the label is missing.
        """
        if self.client is None:
            raise CollaboratorUnavailableError("vision client is not configured")
        data_url = _to_data_url(image_bytes)
        try:
            raw = await asyncio.wait_for(
                self.client.extract(
                    model=self.model,
                    image_data_url=data_url,
                    schema=LABEL_SCHEMA,
                    prompt=VISION_PROMPT,
                ),
                timeout=self.timeout_seconds,
            )
        except MalformedCollaboratorResponseError:
            raise
        except Exception as exc:
            raise CollaboratorFailureError(f"vision call failed: {exc!r}") from exc
        try:
            label = FoodLabel.model_validate(raw).label.strip()
        except ValidationError as exc:
            raise MalformedCollaboratorResponseError(str(exc)) from exc
        if not label:
            raise MalformedCollaboratorResponseError("vision returned a blank label")
        _logger.info("Vision identified food: label=%s", label)
        return label


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
