"""Tests for the FDC client and external nutrition lookup."""

import asyncio
import json

import httpx
import pytest

from recipe_nutrition.adapters.fdc_client import HttpxFdcClient
from recipe_nutrition.domain.errors import LookupUnavailableError
from recipe_nutrition.services.lookup import ExternalNutritionLookup, extract_nutrients
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.weights import WeightEstimator


def test_fdc_client_search_and_get_food() -> None:
    seen: list[tuple[str, str, dict[str, object] | None]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["api_key"] == "fdc-key"
        payload = json.loads(request.content.decode()) if request.content else None
        seen.append((request.method, request.url.path, payload))
        if request.url.path.endswith("/foods/search"):
            return httpx.Response(200, json={"foods": []})
        return httpx.Response(200, json={"fdcId": 123, "foodNutrients": []})

    transport = httpx.MockTransport(handler)
    client = HttpxFdcClient(
        api_key="fdc-key",
        base_url="https://fdc.test/v1",
        http_client=httpx.AsyncClient(transport=transport),
    )

    search = asyncio.run(client.search_foods("quinoa", page_size=3))
    food = asyncio.run(client.get_food(123))

    assert search == {"foods": []}
    assert food["fdcId"] == 123
    assert seen[0] == (
        "POST",
        "/v1/foods/search",
        {"query": "quinoa", "pageSize": 3, "dataType": ["Foundation", "SR Legacy"]},
    )
    assert seen[1][:2] == ("GET", "/v1/food/123")


def test_lookup_scales_to_quantity(lookup: ExternalNutritionLookup, fdc_client) -> None:
    result = asyncio.run(lookup.lookup("Quinoa", 200, "g"))

    assert result is not None
    assert fdc_client.queries == ["quinoa"]
    assert result.source_id == "168917"
    assert result.matched_name == "Quinoa, uncooked"
    assert result.grams == 200
    assert result.nutrients.calories_kcal == 736
    assert result.nutrients.protein_g == 28
    assert result.nutrients.sodium_mg == 10


def test_lookup_fetches_details_when_search_has_no_nutrients(
    lookup: ExternalNutritionLookup, fdc_client
) -> None:
    fdc_client.search_payload = {"foods": [{"fdcId": 42, "description": "Lentils"}]}
    fdc_client.food_payload = {
        "fdcId": 42,
        "description": "Lentils, raw",
        "foodNutrients": [
            {"nutrient": {"id": 1008}, "amount": 352},
            {"nutrient": {"id": 1003}, "amount": 24.6},
        ],
    }

    result = asyncio.run(lookup.lookup("red lentils", 100, "g"))

    assert result is not None
    assert fdc_client.fetched_ids == [42]
    assert result.nutrients.calories_kcal == 352
    assert result.nutrients.protein_g == pytest.approx(24.6)


def test_lookup_returns_none_without_match(
    lookup: ExternalNutritionLookup, fdc_client
) -> None:
    fdc_client.search_payload = {"foods": []}

    assert asyncio.run(lookup.lookup("unobtainium", 1, "g")) is None


def test_lookup_retries_then_raises(
    lookup: ExternalNutritionLookup, fdc_client
) -> None:
    fdc_client.error = httpx.ConnectError("connection refused")

    with pytest.raises(LookupUnavailableError):
        asyncio.run(lookup.lookup("quinoa", 100, "g"))

    assert len(fdc_client.queries) == 2


def test_lookup_times_out(lookup: ExternalNutritionLookup, fdc_client) -> None:
    fdc_client.delay_seconds = 1.0
    lookup.timeout_seconds = 0.01

    with pytest.raises(LookupUnavailableError):
        asyncio.run(lookup.lookup("quinoa", 100, "g"))


def test_lookup_wraps_http_status_errors(
    normalizer: IngredientNameNormalizer, weight_estimator: WeightEstimator
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "unavailable"})

    client = HttpxFdcClient(
        api_key="fdc-key",
        base_url="https://fdc.test/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    lookup = ExternalNutritionLookup(
        fdc_client=client,
        normalizer=normalizer,
        weight_estimator=weight_estimator,
        retry_attempts=0,
    )

    with pytest.raises(LookupUnavailableError) as excinfo:
        asyncio.run(lookup.lookup("quinoa", 100, "g"))

    assert isinstance(excinfo.value.__cause__, httpx.HTTPStatusError)


def test_extract_nutrients_falls_back_to_atwater_energy() -> None:
    nutrients = extract_nutrients(
        [
            {"nutrient": {"id": 2047}, "amount": 140},
            {"nutrientId": 1004, "value": 3.5},
            {"nutrientId": 1093, "value": None},
            {"nutrientId": 9999, "value": 12},
        ]
    )

    assert nutrients.calories_kcal == 140
    assert nutrients.fat_g == 3.5
    assert nutrients.sodium_mg == 0
