"""Shared helpers for OpenAI Responses API adapters."""

import json

import httpx
from openai import AsyncOpenAI

from nutrition_advisor.domain.errors import MalformedCollaboratorResponseError


def create_async_openai(api_key: str, timeout_seconds: float) -> AsyncOpenAI:
    """Create an SDK client with a bounded timeout and no retries."""
    return AsyncOpenAI(
        api_key=api_key,
        timeout=httpx.Timeout(timeout_seconds, connect=min(timeout_seconds, 3.0)),
        max_retries=0,
    )


def parse_output_json(output_text: str | None) -> dict[str, object]:
    """Decode a structured-output response body into a JSON object."""
    if not output_text:
        raise MalformedCollaboratorResponseError("OpenAI returned an empty response")
    try:
        payload = json.loads(output_text)
    except json.JSONDecodeError as exc:
        raise MalformedCollaboratorResponseError(
            f"OpenAI returned invalid JSON: {exc}"
        ) from exc
    if not isinstance(payload, dict):
        raise MalformedCollaboratorResponseError("OpenAI returned a non-object JSON")
    return payload
