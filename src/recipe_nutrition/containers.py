"""Dependency container wiring for the nutrition engine."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from recipe_nutrition.adapters.fdc_client import HttpxFdcClient
from recipe_nutrition.adapters.supabase_nutrition_cache import SupabaseNutritionCache
from recipe_nutrition.config import Settings
from recipe_nutrition.services.cache import (
    InMemoryNutritionCache,
    NutritionCache,
    SeededNutritionCache,
    seed_cache,
)
from recipe_nutrition.services.estimator import FallbackEstimator
from recipe_nutrition.services.lookup import ExternalNutritionLookup
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.nutrition import RecipeNutritionService
from recipe_nutrition.services.units import UnitConverter
from recipe_nutrition.services.weights import WeightEstimator


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    normalizer: IngredientNameNormalizer
    unit_converter: UnitConverter
    weight_estimator: WeightEstimator
    cache: NutritionCache
    estimator: FallbackEstimator
    lookup: ExternalNutritionLookup | None
    nutrition_service: RecipeNutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    normalizer = IngredientNameNormalizer()
    unit_converter = UnitConverter()
    weight_estimator = WeightEstimator(normalizer=normalizer, converter=unit_converter)

    store: NutritionCache
    if resolved_settings.supabase_configured:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        store = SupabaseNutritionCache(supabase_client)
    else:
        store = InMemoryNutritionCache()

    cache: NutritionCache = store
    if resolved_settings.seed_cache:
        seed = InMemoryNutritionCache()
        seed_cache(seed, normalizer)
        cache = SeededNutritionCache(store=store, seed=seed)

    fdc_client: HttpxFdcClient | None = None
    lookup: ExternalNutritionLookup | None = None
    if resolved_settings.use_external_lookup and resolved_settings.fdc_api_key:
        fdc_client = HttpxFdcClient.create(
            api_key=resolved_settings.fdc_api_key,
            base_url=resolved_settings.fdc_base_url,
            timeout_seconds=resolved_settings.fdc_timeout_seconds,
        )
        lookup = ExternalNutritionLookup(
            fdc_client=fdc_client,
            normalizer=normalizer,
            weight_estimator=weight_estimator,
            timeout_seconds=resolved_settings.fdc_timeout_seconds,
            retry_attempts=resolved_settings.fdc_retry_attempts,
        )

    estimator = FallbackEstimator(
        normalizer=normalizer, weight_estimator=weight_estimator
    )
    nutrition_service = RecipeNutritionService(
        normalizer=normalizer,
        cache=cache,
        weight_estimator=weight_estimator,
        estimator=estimator,
        lookup=lookup,
        concurrency=resolved_settings.lookup_concurrency,
        deadline_seconds=resolved_settings.recipe_deadline_seconds,
    )

    async def close_resources() -> None:
        if fdc_client is not None:
            await fdc_client.close()

    return AppContainer(
        settings=resolved_settings,
        normalizer=normalizer,
        unit_converter=unit_converter,
        weight_estimator=weight_estimator,
        cache=cache,
        estimator=estimator,
        lookup=lookup,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
