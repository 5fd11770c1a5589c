"""Supabase-backed nutrition cache."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from recipe_nutrition.domain.nutrition import CacheEntry, NutrientVector, Provenance
from recipe_nutrition.services.cache import NutritionCache

_TABLE = "ingredient_nutrition_cache"
_COLUMNS = (
    "normalized_name, source_id, provenance, last_updated, calories_kcal, "
    "protein_g, carbs_g, fat_g, fiber_g, sugar_g, sodium_mg"
)


@dataclass
class SupabaseNutritionCache(NutritionCache):
    """Supabase implementation of the nutrition cache."""

    client: Client
    table_name: str = _TABLE

    def get(self, normalized_name: str) -> CacheEntry | None:
        """Return the cached row for a normalized name, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("normalized_name", normalized_name)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _entry_from_row(response.data[0])

    def put(
        self,
        normalized_name: str,
        source_id: str | None,
        nutrients_per_100g: NutrientVector,
        provenance: Provenance = Provenance.EXTERNAL,
    ) -> None:
        """Upsert the row for a normalized name."""
        payload: dict[str, object] = {
            "normalized_name": normalized_name,
            "source_id": source_id,
            "provenance": provenance.value,
            "last_updated": datetime.now(tz=UTC).isoformat(),
            **nutrients_per_100g.as_dict(),
        }
        self.client.table(self.table_name).upsert(
            payload, on_conflict="normalized_name"
        ).execute()


def _entry_from_row(row: dict[str, object]) -> CacheEntry:
    last_updated = row.get("last_updated")
    return CacheEntry(
        normalized_name=str(row["normalized_name"]),
        nutrients_per_100g=NutrientVector.from_values(
            calories_kcal=_to_float(row.get("calories_kcal")),
            protein_g=_to_float(row.get("protein_g")),
            carbs_g=_to_float(row.get("carbs_g")),
            fat_g=_to_float(row.get("fat_g")),
            fiber_g=_to_float(row.get("fiber_g")),
            sugar_g=_to_float(row.get("sugar_g")),
            sodium_mg=_to_float(row.get("sodium_mg")),
        ),
        provenance=Provenance(str(row.get("provenance") or Provenance.EXTERNAL)),
        source_id=str(row["source_id"]) if row.get("source_id") is not None else None,
        last_updated=(
            datetime.fromisoformat(last_updated)
            if isinstance(last_updated, str)
            else datetime.now(tz=UTC)
        ),
    )


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
