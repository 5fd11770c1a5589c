"""Nutrition domain models."""

import math
from dataclasses import dataclass, fields
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import StrEnum

from recipe_nutrition.domain.errors import InvalidIngredientError


class Provenance(StrEnum):
    """Where a cached nutrient vector came from."""

    EXTERNAL = "external"
    MANUAL = "manual"


class ResolutionSource(StrEnum):
    """Resolution tier that produced an ingredient's nutrients."""

    CACHE = "cache"
    EXTERNAL = "external"
    ESTIMATE = "estimate"


class Confidence(StrEnum):
    """Confidence tier of a recipe result."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


_WHOLE = Decimal("1")
_TENTHS = Decimal("0.1")


@dataclass(frozen=True)
class NutrientVector:
    """Nutrient profile, per 100g unless explicitly scaled."""

    calories_kcal: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0
    sodium_mg: float = 0.0

    @classmethod
    def zero(cls) -> "NutrientVector":
        """Return an all-zero vector."""
        return cls()

    @classmethod
    def from_values(cls, **values: float | None) -> "NutrientVector":
        """Build a vector, clamping missing or negative values to zero."""
        cleaned: dict[str, float] = {}
        for field in fields(cls):
            value = values.get(field.name)
            if value is None or not math.isfinite(float(value)):
                cleaned[field.name] = 0.0
            else:
                cleaned[field.name] = max(float(value), 0.0)
        return cls(**cleaned)

    def __add__(self, other: "NutrientVector") -> "NutrientVector":
        return NutrientVector(
            calories_kcal=self.calories_kcal + other.calories_kcal,
            protein_g=self.protein_g + other.protein_g,
            carbs_g=self.carbs_g + other.carbs_g,
            fat_g=self.fat_g + other.fat_g,
            fiber_g=self.fiber_g + other.fiber_g,
            sugar_g=self.sugar_g + other.sugar_g,
            sodium_mg=self.sodium_mg + other.sodium_mg,
        )

    def scale(self, factor: float) -> "NutrientVector":
        """Multiply every field by a non-negative factor."""
        factor = max(factor, 0.0)
        return NutrientVector(
            calories_kcal=self.calories_kcal * factor,
            protein_g=self.protein_g * factor,
            carbs_g=self.carbs_g * factor,
            fat_g=self.fat_g * factor,
            fiber_g=self.fiber_g * factor,
            sugar_g=self.sugar_g * factor,
            sodium_mg=self.sodium_mg * factor,
        )

    def at_grams(self, grams: float) -> "NutrientVector":
        """Scale a per-100g vector to an actual mass."""
        return self.scale(grams / 100.0)

    def per_100g(self, grams: float) -> "NutrientVector":
        """Rescale an at-quantity vector to per-100g; unchanged when grams is 0."""
        if grams <= 0:
            return self
        return self.scale(100.0 / grams)

    def rounded(self) -> "NutrientVector":
        """Round calories and sodium to integers and the rest to one decimal.

        Halves round up, so 122.5 kcal becomes 123.
        """
        return NutrientVector(
            calories_kcal=_round_half_up(self.calories_kcal, _WHOLE),
            protein_g=_round_half_up(self.protein_g, _TENTHS),
            carbs_g=_round_half_up(self.carbs_g, _TENTHS),
            fat_g=_round_half_up(self.fat_g, _TENTHS),
            fiber_g=_round_half_up(self.fiber_g, _TENTHS),
            sugar_g=_round_half_up(self.sugar_g, _TENTHS),
            sodium_mg=_round_half_up(self.sodium_mg, _WHOLE),
        )

    def as_dict(self) -> dict[str, float]:
        """Return the vector as a plain mapping."""
        return {field.name: getattr(self, field.name) for field in fields(self)}


@dataclass(frozen=True)
class IngredientLine:
    """A recipe ingredient line as authored by the user."""

    name: str
    quantity: float
    unit: str
    notes: str | None = None

    @classmethod
    def create(
        cls, name: str, quantity: float, unit: str, notes: str | None = None
    ) -> "IngredientLine":
        """Create a validated ingredient line."""
        line = cls(name=name, quantity=quantity, unit=unit or "", notes=notes)
        line.validate()
        return line

    def validate(self) -> None:
        """Reject empty names and non-positive quantities."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidIngredientError("Ingredient name must not be empty")
        if not isinstance(self.quantity, int | float) or isinstance(
            self.quantity, bool
        ):
            raise InvalidIngredientError(
                f"Quantity for {self.name!r} must be a number"
            )
        if not math.isfinite(self.quantity) or self.quantity <= 0:
            raise InvalidIngredientError(
                f"Quantity for {self.name!r} must be positive, got {self.quantity}"
            )


@dataclass(frozen=True)
class CacheEntry:
    """Cached per-100g nutrients for a normalized ingredient name."""

    normalized_name: str
    nutrients_per_100g: NutrientVector
    provenance: Provenance
    source_id: str | None
    last_updated: datetime


@dataclass(frozen=True)
class ResolutionResult:
    """Nutrients for one ingredient line at its actual quantity."""

    line: IngredientLine
    nutrients: NutrientVector
    source: ResolutionSource
    grams: float


@dataclass(frozen=True)
class RecipeNutritionResult:
    """Recipe-level nutrition returned to callers."""

    per_serving: NutrientVector
    total: NutrientVector
    ingredient_breakdown: list[ResolutionResult]
    confidence: Confidence
    ingredients_hash: str


def _round_half_up(value: float, step: Decimal) -> float:
    if not math.isfinite(value):
        return value
    return float(Decimal(repr(value)).quantize(step, rounding=ROUND_HALF_UP))
