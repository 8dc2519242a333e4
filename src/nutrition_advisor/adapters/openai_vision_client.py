"""OpenAI Responses API client for food identification."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from nutrition_advisor.adapters.openai_responses import (
    create_async_openai,
    parse_output_json,
)
from nutrition_advisor.services.vision import VisionClient


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    max_output_tokens: int = 50

    @classmethod
    def create(cls, api_key: str, timeout_seconds: float) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(client=create_async_openai(api_key, timeout_seconds))

    async def extract(
        self,
        *,
        model: str,
        image_data_url: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with an image and structured output."""
        response = await self.client.responses.create(
            model=model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": prompt},
                        {"type": "input_image", "image_url": image_data_url},
                    ],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": "food_label",
                    "strict": True,
                    "schema": schema,
                }
            },
            max_output_tokens=self.max_output_tokens,
            store=False,
        )
        return parse_output_json(response.output_text)
