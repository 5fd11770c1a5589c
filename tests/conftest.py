"""Shared test fixtures."""

import asyncio
from dataclasses import dataclass, field

import pytest

from recipe_nutrition.adapters.fdc_client import DEFAULT_DATA_TYPES, FdcClient
from recipe_nutrition.config import Settings
from recipe_nutrition.services.cache import InMemoryNutritionCache
from recipe_nutrition.services.estimator import FallbackEstimator
from recipe_nutrition.services.lookup import ExternalNutritionLookup
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.nutrition import RecipeNutritionService
from recipe_nutrition.services.units import UnitConverter
from recipe_nutrition.services.weights import WeightEstimator


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "foods": [
                {
                    "fdcId": 168917,
                    "description": "Quinoa, uncooked",
                    "dataType": "SR Legacy",
                    "foodNutrients": [
                        {"nutrientId": 1008, "value": 368},
                        {"nutrientId": 1003, "value": 14},
                        {"nutrientId": 1004, "value": 6},
                        {"nutrientId": 1005, "value": 64},
                        {"nutrientId": 1079, "value": 7},
                        {"nutrientId": 2000, "value": 0},
                        {"nutrientId": 1093, "value": 5},
                    ],
                }
            ]
        }
    )
    food_payload: dict[str, object] = field(default_factory=dict)
    error: Exception | None = None
    delay_seconds: float = 0.0
    queries: list[str] = field(default_factory=list)
    fetched_ids: list[int] = field(default_factory=list)

    async def search_foods(
        self,
        query: str,
        page_size: int = 5,
        data_types: tuple[str, ...] = DEFAULT_DATA_TYPES,
    ) -> dict[str, object]:
        self.queries.append(query)
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)
        if self.error is not None:
            raise self.error
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.fetched_ids.append(fdc_id)
        return self.food_payload


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": []}
    )
    last_payload: object | None = None
    last_on_conflict: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    error: Exception | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(
        self, payload: dict[str, object], on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        if self.error is not None:
            raise self.error
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        fdc_api_key="fdc-key",
        supabase_url=None,
        supabase_service_key=None,
    )


@pytest.fixture
def normalizer() -> IngredientNameNormalizer:
    return IngredientNameNormalizer()


@pytest.fixture
def unit_converter() -> UnitConverter:
    return UnitConverter()


@pytest.fixture
def weight_estimator(
    normalizer: IngredientNameNormalizer, unit_converter: UnitConverter
) -> WeightEstimator:
    return WeightEstimator(normalizer=normalizer, converter=unit_converter)


@pytest.fixture
def estimator(
    normalizer: IngredientNameNormalizer, weight_estimator: WeightEstimator
) -> FallbackEstimator:
    return FallbackEstimator(normalizer=normalizer, weight_estimator=weight_estimator)


@pytest.fixture
def cache() -> InMemoryNutritionCache:
    return InMemoryNutritionCache()


@pytest.fixture
def fdc_client() -> FakeFdcClient:
    return FakeFdcClient()


@pytest.fixture
def lookup(
    fdc_client: FakeFdcClient,
    normalizer: IngredientNameNormalizer,
    weight_estimator: WeightEstimator,
) -> ExternalNutritionLookup:
    return ExternalNutritionLookup(
        fdc_client=fdc_client,
        normalizer=normalizer,
        weight_estimator=weight_estimator,
        timeout_seconds=1.0,
        retry_attempts=1,
        retry_delay_seconds=0.0,
    )


@pytest.fixture
def nutrition_service(
    normalizer: IngredientNameNormalizer,
    cache: InMemoryNutritionCache,
    weight_estimator: WeightEstimator,
    estimator: FallbackEstimator,
    lookup: ExternalNutritionLookup,
) -> RecipeNutritionService:
    return RecipeNutritionService(
        normalizer=normalizer,
        cache=cache,
        weight_estimator=weight_estimator,
        estimator=estimator,
        lookup=lookup,
    )


@pytest.fixture
def supabase_client() -> FakeSupabaseClient:
    return FakeSupabaseClient()
