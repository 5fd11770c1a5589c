"""Tests for nutrition cache implementations."""

from concurrent.futures import ThreadPoolExecutor

from recipe_nutrition.adapters.supabase_nutrition_cache import SupabaseNutritionCache
from recipe_nutrition.domain.nutrition import NutrientVector, Provenance
from recipe_nutrition.services.cache import (
    InMemoryNutritionCache,
    SeededNutritionCache,
    seed_cache,
)
from recipe_nutrition.services.normalizer import IngredientNameNormalizer


def test_in_memory_cache_last_write_wins(cache: InMemoryNutritionCache) -> None:
    assert cache.get("quinoa") is None

    cache.put("quinoa", "1", NutrientVector(calories_kcal=100))
    cache.put("quinoa", "2", NutrientVector(calories_kcal=368))
    entry = cache.get("quinoa")

    assert entry is not None
    assert entry.source_id == "2"
    assert entry.nutrients_per_100g.calories_kcal == 368
    assert entry.provenance == Provenance.EXTERNAL
    assert len(cache) == 1


def test_in_memory_cache_concurrent_writes_keep_whole_entries(
    cache: InMemoryNutritionCache,
) -> None:
    vectors = [NutrientVector(value, value, value) for value in range(1, 33)]

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda vector: cache.put("rice", None, vector), vectors))

    entry = cache.get("rice")
    assert entry is not None
    assert entry.nutrients_per_100g in vectors


def test_seed_cache_writes_manual_entries(
    cache: InMemoryNutritionCache, normalizer: IngredientNameNormalizer
) -> None:
    written = seed_cache(cache, normalizer)

    olive_oil = cache.get("olive oil")
    chicken = cache.get("chicken")
    assert written == len(cache)
    assert olive_oil is not None
    assert olive_oil.provenance == Provenance.MANUAL
    assert olive_oil.nutrients_per_100g.calories_kcal == 884
    assert chicken is not None
    assert chicken.nutrients_per_100g.protein_g == 31


def test_supabase_cache_get(supabase_client) -> None:
    client = supabase_client
    table = client.table("ingredient_nutrition_cache")
    table.queue(
        "select",
        [
            {
                "normalized_name": "olive oil",
                "source_id": 171413,
                "provenance": "external",
                "last_updated": "2026-01-05T10:00:00+00:00",
                "calories_kcal": 884,
                "protein_g": 0,
                "carbs_g": 0,
                "fat_g": "100",
                "fiber_g": None,
                "sugar_g": 0,
                "sodium_mg": 2,
            }
        ],
    )

    cache = SupabaseNutritionCache(client)
    entry = cache.get("olive oil")

    assert entry is not None
    assert table.last_filters == [("normalized_name", "olive oil")]
    assert entry.source_id == "171413"
    assert entry.provenance == Provenance.EXTERNAL
    assert entry.nutrients_per_100g.fat_g == 100
    assert entry.nutrients_per_100g.fiber_g == 0
    assert entry.last_updated.year == 2026
    assert cache.get("missing") is None


def test_supabase_cache_put_upserts_by_name(supabase_client) -> None:
    client = supabase_client
    cache = SupabaseNutritionCache(client)

    cache.put("quinoa", "168917", NutrientVector(calories_kcal=368, protein_g=14))

    table = client.tables["ingredient_nutrition_cache"]
    assert table.last_on_conflict == "normalized_name"
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["normalized_name"] == "quinoa"
    assert table.last_payload["provenance"] == "external"
    assert table.last_payload["calories_kcal"] == 368


def _seed_entries(seed: InMemoryNutritionCache) -> None:
    seed.put("tomato", None, NutrientVector(calories_kcal=18), Provenance.MANUAL)
    seed.put("tomato paste", None, NutrientVector(calories_kcal=82), Provenance.MANUAL)
    seed.put(
        "sun dried tomato", None, NutrientVector(calories_kcal=258), Provenance.MANUAL
    )
    seed.put("pea", None, NutrientVector(calories_kcal=81), Provenance.MANUAL)


def test_find_partial_prefers_longest_whole_word_key() -> None:
    seed = InMemoryNutritionCache()
    _seed_entries(seed)
    seed.put("tomato soup", "123", NutrientVector(calories_kcal=30))

    contained = seed.find_partial("double concentrated tomato paste")
    containing = seed.find_partial("dried tomato")

    assert contained is not None
    assert contained.normalized_name == "tomato paste"
    assert containing is not None
    assert containing.normalized_name == "sun dried tomato"
    assert seed.find_partial("tomato soup mix").normalized_name == "tomato"
    assert seed.find_partial("peanut") is None
    assert seed.find_partial("pe") is None


def test_seeded_cache_prefers_store_then_seed(cache: InMemoryNutritionCache) -> None:
    seed = InMemoryNutritionCache()
    _seed_entries(seed)
    seeded = SeededNutritionCache(store=cache, seed=seed)
    cache.put("tomato", "1", NutrientVector(calories_kcal=20))

    stored = seeded.get("tomato")
    exact = seeded.get("pea")
    partial = seeded.get("chopped tomato paste")

    assert stored is not None
    assert stored.provenance == Provenance.EXTERNAL
    assert exact is not None
    assert exact.nutrients_per_100g.calories_kcal == 81
    assert partial is not None
    assert partial.normalized_name == "tomato paste"
    assert seeded.get("quinoa") is None


def test_seeded_cache_writes_to_store_only(cache: InMemoryNutritionCache) -> None:
    seed = InMemoryNutritionCache()
    seeded = SeededNutritionCache(store=cache, seed=seed)

    seeded.put("quinoa", "168917", NutrientVector(calories_kcal=368))

    assert cache.get("quinoa") is not None
    assert len(seed) == 0


def test_seeded_cache_falls_back_when_store_fails(supabase_client) -> None:
    supabase_client.table("ingredient_nutrition_cache").error = RuntimeError("down")
    seed = InMemoryNutritionCache()
    _seed_entries(seed)
    seeded = SeededNutritionCache(
        store=SupabaseNutritionCache(supabase_client), seed=seed
    )

    entry = seeded.get("tomato")

    assert entry is not None
    assert entry.provenance == Provenance.MANUAL
