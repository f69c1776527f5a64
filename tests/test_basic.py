import pytest
from typing import Any, Dict
from httpx import AsyncClient, Response


NUTRITION_TARGET_QUERY = """
query Target($input: NutritionTargetInput!) {
  nutritionTarget(input: $input) {
    dailyCalories
    proteinGrams
    carbsGrams
    fatGrams
    weeksToGoal
    warnings
  }
}
"""


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp: Response = await client.get("/health")
    body: Dict[str, Any] = resp.json()
    assert resp.status_code == 200
    assert body["status"] == "ok"


@pytest.mark.asyncio
async def test_version(client: AsyncClient) -> None:
    resp: Response = await client.get("/version")
    assert resp.status_code == 200
    assert resp.json()["version"]


@pytest.mark.asyncio
async def test_graphql_health(client: AsyncClient) -> None:
    resp: Response = await client.post("/graphql", json={"query": "{ health }"})
    data: Dict[str, Any] = resp.json()["data"]
    assert data["health"] == "ok"


@pytest.mark.asyncio
async def test_graphql_nutrition_target(client: AsyncClient) -> None:
    variables = {
        "input": {
            "biometric": {
                "sex": "FEMALE",
                "ageYears": 30,
                "weightKg": 70,
                "heightCm": 165,
                "activityLevel": "MODERATE",
            },
            "goal": {
                "weightGoal": "LOSE",
                "goalPace": "MODERATE",
                "targetWeightKg": 60,
            },
            "today": "2026-01-01",
        }
    }
    resp: Response = await client.post(
        "/graphql",
        json={"query": NUTRITION_TARGET_QUERY, "variables": variables},
    )
    body: Dict[str, Any] = resp.json()
    assert "errors" not in body
    target: Dict[str, Any] = body["data"]["nutritionTarget"]
    assert target["dailyCalories"] == 1701
    assert target["weeksToGoal"] == 23
    assert target["warnings"] == []
