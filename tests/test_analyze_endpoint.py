"""Tests for the HTTP API."""

import base64
from dataclasses import dataclass

from fastapi.testclient import TestClient

from nutrition_advisor.api.app import INTERNAL_ERROR_MESSAGE, create_app
from nutrition_advisor.containers import AppContainer
from nutrition_advisor.domain.analysis import (
    AnalysisInput,
    AnalysisResult,
    Resolution,
    ResolutionSource,
)
from nutrition_advisor.domain.nutrition import NutritionRecord
from tests.conftest import ESTIMATE_PAYLOAD, FakeEstimationClient, FakeVisionClient


@dataclass
class BrokenPipeline:
    async def analyze(self, request: AnalysisInput) -> AnalysisResult:
        raise KeyError("secret internal detail")


@dataclass
class UnrenderablePipeline:
    async def analyze(self, request: AnalysisInput) -> AnalysisResult:
        zero = NutritionRecord.zero()
        record = NutritionRecord.model_construct(
            calories=float("inf"),
            protein=0.0,
            carbs=0.0,
            fat=0.0,
            fiber=0.0,
            vitamins=zero.vitamins,
            minerals=zero.minerals,
        )
        return AnalysisResult(
            resolution=Resolution(
                food_name="피자",
                record=record,
                source=ResolutionSource.AI_ESTIMATE,
            ),
            recommendations=[],
        )


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_analyze_food_name(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/analyze", json={"foodName": "치킨"})

    assert response.status_code == 200
    data = response.json()
    assert data["food"] == "치킨"
    assert data["source"] == "exact_match"
    assert data["nutrition"]["calories"] == 250
    assert data["nutrition"]["protein"] == 25.0
    assert data["nutrition"]["minerals"]["calcium"] == 20
    assert set(data["nutrition"]["vitamins"]) == {
        "vitaminA",
        "vitaminC",
        "vitaminD",
        "vitaminE",
    }
    names = [item["nutrition"] for item in data["recommendations"]]
    assert "칼슘, 단백질" in names
    assert "오메가3, 단백질" not in names
    assert data["recommendations"][0]["foodList"]
    assert data["message"]


def test_analyze_image_data_url(
    container, vision_client: FakeVisionClient
) -> None:
    client = TestClient(create_app(container))
    encoded = base64.b64encode(b"\xff\xd8\xff-jpeg").decode()

    response = client.post(
        "/api/analyze", json={"image": f"data:image/jpeg;base64,{encoded}"}
    )

    assert response.status_code == 200
    assert response.json()["food"] == "치킨"
    assert vision_client.calls == 1


def test_analyze_without_input_is_bad_request(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/analyze", json={"foodName": "  "})

    assert response.status_code == 400
    assert "error" in response.json()


def test_analyze_rejects_invalid_image(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/api/analyze", json={"image": "not base64 ***"})

    assert response.status_code == 422


def test_analyze_hides_internal_errors(container: AppContainer) -> None:
    container.pipeline = BrokenPipeline()  # type: ignore[assignment]
    client = TestClient(create_app(container))

    response = client.post("/api/analyze", json={"foodName": "밥"})

    assert response.status_code == 500
    assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}


def test_list_foods(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/api/foods")

    assert response.status_code == 200
    data = response.json()
    assert data["foods"][0] == "김치찌개"
    assert data["aliases"]["chicken"] == "치킨"


def test_analyze_returns_error_body_when_response_cannot_render(
    container: AppContainer,
) -> None:
    container.pipeline = UnrenderablePipeline()  # type: ignore[assignment]
    client = TestClient(create_app(container))

    response = client.post("/api/analyze", json={"foodName": "피자"})

    assert response.status_code == 500
    assert response.json() == {"error": INTERNAL_ERROR_MESSAGE}


def test_analyze_infinite_estimate_uses_random_fallback(
    container, estimation_client: FakeEstimationClient
) -> None:
    estimation_client.payload = {**ESTIMATE_PAYLOAD, "calories": float("inf")}
    client = TestClient(create_app(container))

    response = client.post("/api/analyze", json={"foodName": "피자"})

    assert response.status_code == 200
    assert response.json()["source"] == "random_fallback"
