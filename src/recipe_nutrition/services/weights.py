"""Per-item weight estimates and gram resolution for ingredient quantities."""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from recipe_nutrition.domain.units import Dimension
from recipe_nutrition.domain.weights import INGREDIENT_WEIGHTS, WEIGHT_DESCRIPTORS
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.units import UnitConverter

DEFAULT_ITEM_GRAMS = 100.0
MIN_REVERSE_MATCH_LENGTH = 3

_logger = logging.getLogger(__name__)


@dataclass
class WeightEstimator:
    """Estimates gram weights for count-based ingredient quantities."""

    normalizer: IngredientNameNormalizer
    converter: UnitConverter
    weights: Mapping[str, float] = field(default_factory=lambda: INGREDIENT_WEIGHTS)
    descriptors: Iterable[str] = WEIGHT_DESCRIPTORS
    default_item_grams: float = DEFAULT_ITEM_GRAMS

    def __post_init__(self) -> None:
        self._keys_longest_first = sorted(
            self.weights, key=lambda key: (-len(key), key)
        )
        self._key_patterns = {
            key: re.compile(rf"\b{re.escape(key)}\b") for key in self.weights
        }
        words = "|".join(re.escape(word) for word in self.descriptors)
        self._descriptor_prefix = re.compile(rf"^(?:(?:{words})\s+)+")
        self._descriptor_suffix = re.compile(rf"(?:\s+(?:{words}))+$")

    def estimate_grams(self, name: str) -> float | None:
        """Return the typical weight of one item, or None when unknown."""
        candidates = self._candidates(name)
        if not candidates:
            return None

        for candidate in candidates:
            if candidate in self.weights:
                return self.weights[candidate]
            stripped = self._strip_descriptors(candidate)
            if stripped != candidate and stripped in self.weights:
                return self.weights[stripped]

        for key in self._keys_longest_first:
            pattern = self._key_patterns[key]
            if any(pattern.search(candidate) for candidate in candidates):
                return self.weights[key]

        for key in self._keys_longest_first:
            for candidate in candidates:
                if len(candidate) >= MIN_REVERSE_MATCH_LENGTH and candidate in key:
                    return self.weights[key]
        return None

    def convert_to_grams(self, quantity: float, unit: str | None, name: str) -> float:
        """Resolve an ingredient quantity to an edible mass in grams.

        Volumes use water density; generic and unknown units use the item
        weight table, falling back to a default mass per item.
        """
        base = self.converter.to_base_unit(quantity, unit)
        if base.dimension in (Dimension.WEIGHT, Dimension.VOLUME):
            return base.amount
        descriptor = base.descriptor
        if descriptor is not None and descriptor.grams_per_unit is not None:
            return quantity * descriptor.grams_per_unit

        item_grams = self.estimate_grams(name)
        if item_grams is None:
            _logger.info(
                "No item weight for %r (unit=%r), using default %sg",
                name,
                unit,
                self.default_item_grams,
            )
            item_grams = self.default_item_grams
        return quantity * item_grams

    def _candidates(self, name: str) -> list[str]:
        candidates: list[str] = []
        for candidate in (
            self.normalizer.surface_key(name),
            self.normalizer.normalize(name),
        ):
            if candidate and candidate not in candidates:
                candidates.append(candidate)
        return candidates

    def _strip_descriptors(self, text: str) -> str:
        text = self._descriptor_prefix.sub("", text)
        return self._descriptor_suffix.sub("", text).strip()
