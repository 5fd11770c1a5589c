"""External nutrition lookup against USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from recipe_nutrition.adapters.fdc_client import FdcClient
from recipe_nutrition.domain.errors import LookupUnavailableError
from recipe_nutrition.domain.nutrition import NutrientVector
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.weights import WeightEstimator

_NUTRIENT_IDS = {
    "calories_kcal": 1008,
    "protein_g": 1003,
    "fat_g": 1004,
    "carbs_g": 1005,
    "fiber_g": 1079,
    "sugar_g": 2000,
    "sodium_mg": 1093,
}
_ATWATER_ENERGY_IDS = (2047, 2048)

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass(frozen=True)
class LookupResult:
    """A matched food with nutrients scaled to the requested quantity."""

    nutrients: NutrientVector
    source_id: str
    matched_name: str
    grams: float


@dataclass
class ExternalNutritionLookup:
    """Looks up ingredient nutrition in FDC with a bounded timeout."""

    fdc_client: FdcClient
    normalizer: IngredientNameNormalizer
    weight_estimator: WeightEstimator
    timeout_seconds: float = 8.0
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    page_size: int = 5

    async def lookup(
        self, name: str, quantity: float, unit: str
    ) -> LookupResult | None:
        """Return nutrients for an ingredient at its quantity, or None on no match.

        Raises LookupUnavailableError on transport failures and timeouts.
        """
        query = self.normalizer.normalize(name)
        if not query:
            return None
        try:
            async with asyncio.timeout(self.timeout_seconds):
                food = await self._best_match(query)
        except TimeoutError as exc:
            raise LookupUnavailableError(
                f"FDC lookup for {query!r} timed out after {self.timeout_seconds}s"
            ) from exc
        if food is None:
            _logger.info("No FDC match for %r", query)
            return None

        per_100g = extract_nutrients(food.get("foodNutrients") or [])
        grams = self.weight_estimator.convert_to_grams(quantity, unit, name)
        description = str(food.get("description") or query)
        _logger.info(
            "FDC match: %r -> %r (fdc_id=%s)", name, description, food.get("fdcId")
        )
        return LookupResult(
            nutrients=per_100g.at_grams(grams),
            source_id=str(food.get("fdcId")),
            matched_name=description,
            grams=grams,
        )

    async def _best_match(self, query: str) -> dict[str, object] | None:
        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(query, page_size=self.page_size),
            action=f"search:{query}",
        )
        foods = payload.get("foods") or []
        if not foods:
            return None
        food = foods[0]
        if not food.get("foodNutrients") and food.get("fdcId") is not None:
            fdc_id = int(food["fdcId"])
            food = await self._call_with_retry(
                lambda: self.fdc_client.get_food(fdc_id),
                action=f"get_food:{fdc_id}",
            )
        return food

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except (httpx.HTTPError, ValueError) as exc:
                attempt += 1
                _logger.warning(
                    "FDC %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    _status_code_from_exception(exc),
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise LookupUnavailableError(f"FDC {action} failed") from exc
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def extract_nutrients(food_nutrients: list[dict[str, object]]) -> NutrientVector:
    """Extract per-100g nutrients from FDC search or detail payloads."""
    by_id = {nutrient_id: field for field, nutrient_id in _NUTRIENT_IDS.items()}
    values: dict[str, float] = {}
    atwater_energy: float | None = None
    for nutrient in food_nutrients:
        nutrient_info = nutrient.get("nutrient") or {}
        nutrient_id = nutrient_info.get("id") or nutrient.get("nutrientId")
        amount = nutrient.get("value", nutrient.get("amount"))
        if not isinstance(amount, int | float):
            continue
        if nutrient_id in _ATWATER_ENERGY_IDS and atwater_energy is None:
            atwater_energy = float(amount)
        field = by_id.get(nutrient_id)
        if field is not None:
            values[field] = float(amount)
    # Foundation foods often report energy only as Atwater factors.
    if "calories_kcal" not in values and atwater_energy is not None:
        values["calories_kcal"] = atwater_energy
    return NutrientVector.from_values(**values)
