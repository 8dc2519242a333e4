"""OpenAI Responses API client for nutrition estimation."""

from dataclasses import dataclass

from openai import AsyncOpenAI

from nutrition_advisor.adapters.openai_responses import (
    create_async_openai,
    parse_output_json,
)
from nutrition_advisor.services.estimation import EstimationClient

_SYSTEM_PROMPT = (
    "You are a nutrition database. Answer with per-serving estimates only, "
    "as JSON matching the provided schema."
)


@dataclass
class OpenAIEstimationClient(EstimationClient):
    """Estimation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str, timeout_seconds: float) -> "OpenAIEstimationClient":
        """Create an OpenAI estimation client."""
        return cls(client=create_async_openai(api_key, timeout_seconds))

    async def complete(
        self,
        *,
        model: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API and return the structured output."""
        response = await self.client.responses.create(
            model=model,
            instructions=_SYSTEM_PROMPT,
            input=prompt,
            text={
                "format": {
                    "type": "json_schema",
                    "name": "nutrition_estimate",
                    "strict": True,
                    "schema": schema,
                }
            },
            store=False,
        )
        return parse_output_json(response.output_text)
