"""Nutrition cache abstractions."""

import logging
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol

from recipe_nutrition.domain.nutrition import CacheEntry, NutrientVector, Provenance
from recipe_nutrition.domain.seed_nutrition import SEED_NUTRIENTS, SeedRow
from recipe_nutrition.services.normalizer import IngredientNameNormalizer

MIN_PARTIAL_MATCH_LENGTH = 3

_logger = logging.getLogger(__name__)


class NutritionCache(Protocol):
    """Key-value store of per-100g nutrients keyed by normalized name."""

    def get(self, normalized_name: str) -> CacheEntry | None:
        """Return the cached entry for a normalized name, if present."""

    def put(
        self,
        normalized_name: str,
        source_id: str | None,
        nutrients_per_100g: NutrientVector,
        provenance: Provenance = Provenance.EXTERNAL,
    ) -> None:
        """Upsert the per-100g nutrients for a normalized name."""


@dataclass
class InMemoryNutritionCache(NutritionCache):
    """Process-local cache with whole-entry, last-write-wins upserts."""

    _entries: dict[str, CacheEntry]

    def __init__(self) -> None:
        self._entries = {}
        self._lock = threading.Lock()

    def get(self, normalized_name: str) -> CacheEntry | None:
        """Return the cached entry, if present."""
        with self._lock:
            return self._entries.get(normalized_name)

    def put(
        self,
        normalized_name: str,
        source_id: str | None,
        nutrients_per_100g: NutrientVector,
        provenance: Provenance = Provenance.EXTERNAL,
    ) -> None:
        """Replace the entry for a normalized name."""
        entry = CacheEntry(
            normalized_name=normalized_name,
            nutrients_per_100g=nutrients_per_100g,
            provenance=provenance,
            source_id=source_id,
            last_updated=datetime.now(tz=UTC),
        )
        with self._lock:
            self._entries[normalized_name] = entry

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def find_partial(self, normalized_name: str) -> CacheEntry | None:
        """Return a manual entry that shares whole words with the given name.

        An entry matches when its key contains the name or the name contains
        its key. Keys are tried longest first.
        """
        if len(normalized_name) < MIN_PARTIAL_MATCH_LENGTH:
            return None
        with self._lock:
            entries = [
                entry
                for entry in self._entries.values()
                if entry.provenance is Provenance.MANUAL
            ]
        entries.sort(
            key=lambda entry: (-len(entry.normalized_name), entry.normalized_name)
        )
        for entry in entries:
            key = entry.normalized_name
            if _contains_words(normalized_name, key) or _contains_words(
                key, normalized_name
            ):
                return entry
        return None


@dataclass
class SeededNutritionCache(NutritionCache):
    """Store-backed cache that falls back to curated seed entries on a miss.

    Writes go to the store only. Seed lookups try an exact key first and then
    a whole-word partial match.
    """

    store: NutritionCache
    seed: InMemoryNutritionCache

    def get(self, normalized_name: str) -> CacheEntry | None:
        """Return the stored entry, or the best matching seed entry."""
        try:
            entry = self.store.get(normalized_name)
        except Exception:
            _logger.exception("Nutrition store read failed for %r", normalized_name)
            entry = None
        if entry is not None:
            return entry
        entry = self.seed.get(normalized_name)
        if entry is not None:
            return entry
        entry = self.seed.find_partial(normalized_name)
        if entry is not None:
            _logger.debug(
                "Partial seed match %r for %r", entry.normalized_name, normalized_name
            )
        return entry

    def put(
        self,
        normalized_name: str,
        source_id: str | None,
        nutrients_per_100g: NutrientVector,
        provenance: Provenance = Provenance.EXTERNAL,
    ) -> None:
        """Write through to the backing store."""
        self.store.put(normalized_name, source_id, nutrients_per_100g, provenance)


def seed_cache(
    cache: NutritionCache,
    normalizer: IngredientNameNormalizer,
    seed: Mapping[str, SeedRow] = SEED_NUTRIENTS,
) -> int:
    """Load curated per-100g data into a cache as manual entries.

    Seed names are normalized; when two names share a key the first one wins.
    Returns the number of entries written.
    """
    written: set[str] = set()
    for name, row in seed.items():
        key = normalizer.normalize(name)
        if not key or key in written:
            continue
        calories, protein, carbs, fat, fiber, sugar, sodium = row
        cache.put(
            key,
            None,
            NutrientVector.from_values(
                calories_kcal=calories,
                protein_g=protein,
                carbs_g=carbs,
                fat_g=fat,
                fiber_g=fiber,
                sugar_g=sugar,
                sodium_mg=sodium,
            ),
            Provenance.MANUAL,
        )
        written.add(key)
    _logger.info("Seeded nutrition cache with %s entries", len(written))
    return len(written)


def _contains_words(text: str, phrase: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", text) is not None
