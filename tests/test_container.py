"""Tests for container wiring."""

import asyncio

from nutrition_advisor.config import Settings
from nutrition_advisor.containers import build_container


def test_build_container_creates_openai_clients(settings) -> None:
    container = build_container(settings)

    assert container.pipeline.vision_service.client is not None
    assert len(container.pipeline.strategies) == 3
    asyncio.run(container.close_resources())


def test_build_container_without_api_key_leaves_collaborators_unconfigured() -> None:
    container = build_container(Settings(openai_api_key=None))

    assert container.pipeline.vision_service.client is None
    estimation = container.pipeline.strategies[1]
    assert estimation.service.client is None
    asyncio.run(container.close_resources())


def test_estimation_can_be_disabled() -> None:
    container = build_container(
        Settings(openai_api_key="openai-key", estimation_enabled=False)
    )

    assert container.pipeline.vision_service.client is not None
    assert container.pipeline.strategies[1].service.client is None
    asyncio.run(container.close_resources())
