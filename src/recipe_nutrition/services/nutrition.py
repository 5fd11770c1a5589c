"""Recipe nutrition orchestration across cache, FDC lookup and estimates."""

import asyncio
import hashlib
import json
import logging
import math
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from recipe_nutrition.domain.errors import (
    InvalidIngredientError,
    LookupUnavailableError,
)
from recipe_nutrition.domain.nutrition import (
    CacheEntry,
    Confidence,
    IngredientLine,
    NutrientVector,
    Provenance,
    RecipeNutritionResult,
    ResolutionResult,
    ResolutionSource,
)
from recipe_nutrition.services.cache import NutritionCache
from recipe_nutrition.services.estimator import FallbackEstimator
from recipe_nutrition.services.lookup import ExternalNutritionLookup, LookupResult
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.weights import WeightEstimator

HIGH_CONFIDENCE_RATIO = 0.9
MEDIUM_CONFIDENCE_RATIO = 0.6

_logger = logging.getLogger(__name__)


@dataclass
class RecipeNutritionService:
    """Computes per-serving nutrition for a recipe's ingredient lines."""

    normalizer: IngredientNameNormalizer
    cache: NutritionCache
    weight_estimator: WeightEstimator
    estimator: FallbackEstimator
    lookup: ExternalNutritionLookup | None = None
    concurrency: int = 4
    deadline_seconds: float | None = None

    async def compute_recipe_nutrition(
        self,
        lines: Sequence[IngredientLine],
        servings: float,
        use_external_lookup: bool = True,
        deadline_seconds: float | None = None,
    ) -> RecipeNutritionResult:
        """Resolve every line and aggregate totals, per-serving values and confidence.

        Never raises. Lines still pending when the deadline expires are resolved
        through the fallback estimator instead.
        """
        lines = list(lines)
        ingredients_hash = calculate_ingredients_hash(lines, self.normalizer)
        if not lines:
            return RecipeNutritionResult(
                per_serving=NutrientVector.zero(),
                total=NutrientVector.zero(),
                ingredient_breakdown=[],
                confidence=Confidence.LOW,
                ingredients_hash=ingredients_hash,
            )

        use_lookup = use_external_lookup and self.lookup is not None
        semaphore = asyncio.Semaphore(max(self.concurrency, 1))

        async def resolve_bounded(line: IngredientLine) -> ResolutionResult:
            async with semaphore:
                try:
                    return await self._resolve_line(line, use_lookup)
                except Exception:
                    _logger.exception("Resolving %r failed, estimating", line.name)
                    return self._estimate_line(line)

        tasks = [asyncio.create_task(resolve_bounded(line)) for line in lines]
        timeout = deadline_seconds
        if timeout is None:
            timeout = self.deadline_seconds
        done, pending = await asyncio.wait(tasks, timeout=timeout)
        if pending:
            _logger.warning(
                "Recipe deadline of %ss expired with %s unresolved lines",
                timeout,
                len(pending),
            )
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

        breakdown: list[ResolutionResult] = []
        for line, task in zip(lines, tasks, strict=True):
            if task in done:
                breakdown.append(task.result())
            else:
                breakdown.append(self._estimate_line(line))

        total = NutrientVector.zero()
        for item in breakdown:
            total = total + item.nutrients

        divisor = _effective_servings(servings)
        sources = Counter(item.source for item in breakdown)
        _logger.info(
            "Resolved %s lines: cache=%s external=%s estimate=%s",
            len(breakdown),
            sources[ResolutionSource.CACHE],
            sources[ResolutionSource.EXTERNAL],
            sources[ResolutionSource.ESTIMATE],
        )
        return RecipeNutritionResult(
            per_serving=total.scale(1.0 / divisor).rounded(),
            total=total,
            ingredient_breakdown=breakdown,
            confidence=confidence_for(breakdown),
            ingredients_hash=ingredients_hash,
        )

    def compute_recipe_nutrition_sync(
        self,
        lines: Sequence[IngredientLine],
        servings: float,
        use_external_lookup: bool = True,
        deadline_seconds: float | None = None,
    ) -> RecipeNutritionResult:
        """Blocking wrapper for callers outside an event loop."""
        return asyncio.run(
            self.compute_recipe_nutrition(
                lines,
                servings,
                use_external_lookup=use_external_lookup,
                deadline_seconds=deadline_seconds,
            )
        )

    async def _resolve_line(
        self, line: IngredientLine, use_lookup: bool
    ) -> ResolutionResult:
        try:
            line.validate()
        except InvalidIngredientError as exc:
            _logger.warning("Skipping invalid ingredient line: %s", exc)
            return _zero_estimate(line)

        key = self.normalizer.normalize(line.name)
        if not key:
            return self._estimate_line(line)

        grams = self.weight_estimator.convert_to_grams(
            line.quantity, line.unit, line.name
        )
        cached = await self._cache_get(key)
        if cached is not None:
            return ResolutionResult(
                line=line,
                nutrients=cached.nutrients_per_100g.at_grams(grams),
                source=ResolutionSource.CACHE,
                grams=grams,
            )

        if use_lookup:
            found = await self._lookup(line)
            if found is not None:
                await self._cache_put(key, found)
                return ResolutionResult(
                    line=line,
                    nutrients=found.nutrients,
                    source=ResolutionSource.EXTERNAL,
                    grams=found.grams,
                )

        _logger.info("No cached or external data for %r, estimating", key)
        return self._estimate_line(line)

    async def _lookup(self, line: IngredientLine) -> LookupResult | None:
        if self.lookup is None:
            return None
        try:
            return await self.lookup.lookup(line.name, line.quantity, line.unit)
        except LookupUnavailableError as exc:
            _logger.warning("External lookup unavailable for %r: %s", line.name, exc)
        except Exception:
            _logger.exception("External lookup failed for %r", line.name)
        return None

    async def _cache_get(self, key: str) -> CacheEntry | None:
        # Store calls may block on the network; run them off the event loop.
        try:
            return await asyncio.to_thread(self.cache.get, key)
        except Exception:
            _logger.exception("Nutrition cache read failed for %r", key)
            return None

    async def _cache_put(self, key: str, found: LookupResult) -> None:
        if found.grams <= 0:
            return
        try:
            await asyncio.to_thread(
                self.cache.put,
                key,
                found.source_id,
                found.nutrients.per_100g(found.grams),
                Provenance.EXTERNAL,
            )
        except Exception:
            _logger.exception("Nutrition cache write failed for %r", key)

    def _estimate_line(self, line: IngredientLine) -> ResolutionResult:
        try:
            line.validate()
        except InvalidIngredientError:
            return _zero_estimate(line)
        grams = self.weight_estimator.convert_to_grams(
            line.quantity, line.unit, line.name
        )
        profile = self.estimator.profile_for(line.name)
        return ResolutionResult(
            line=line,
            nutrients=profile.per_100g.at_grams(grams),
            source=ResolutionSource.ESTIMATE,
            grams=grams,
        )


def confidence_for(breakdown: Sequence[ResolutionResult]) -> Confidence:
    """Classify a recipe by the share of lines resolved from real data."""
    if not breakdown:
        return Confidence.LOW
    resolved = sum(
        1 for item in breakdown if item.source is not ResolutionSource.ESTIMATE
    )
    ratio = resolved / len(breakdown)
    if ratio >= HIGH_CONFIDENCE_RATIO:
        return Confidence.HIGH
    if ratio >= MEDIUM_CONFIDENCE_RATIO:
        return Confidence.MEDIUM
    return Confidence.LOW


def calculate_ingredients_hash(
    lines: Sequence[IngredientLine], normalizer: IngredientNameNormalizer
) -> str:
    """Return a SHA-256 digest that changes only when the ingredient set does."""
    entries = sorted(
        (
            normalizer.normalize(str(line.name or "")),
            str(line.quantity),
            str(line.unit or "").strip().lower(),
        )
        for line in lines
    )
    payload = json.dumps(
        [
            {"name": name, "quantity": quantity, "unit": unit}
            for name, quantity, unit in entries
        ]
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def _effective_servings(servings: object) -> float:
    if isinstance(servings, bool) or not isinstance(servings, int | float):
        return 1.0
    if not math.isfinite(servings) or servings < 1:
        return 1.0
    return float(servings)


def _zero_estimate(line: IngredientLine) -> ResolutionResult:
    return ResolutionResult(
        line=line,
        nutrients=NutrientVector.zero(),
        source=ResolutionSource.ESTIMATE,
        grams=0.0,
    )
