"""Tests for nutrition domain models."""

import math

import pytest

from recipe_nutrition.domain.errors import InvalidIngredientError
from recipe_nutrition.domain.nutrition import IngredientLine, NutrientVector


def test_from_values_clamps_missing_and_negative_values() -> None:
    vector = NutrientVector.from_values(
        calories_kcal=120, protein_g=None, fat_g=-3, sodium_mg=math.nan
    )

    assert vector == NutrientVector(calories_kcal=120)


def test_rounded_uses_integer_calories_and_sodium() -> None:
    vector = NutrientVector(123.6, 4.44, 10.06, 0.04, 1.25, 2.0, 311.2).rounded()

    assert vector == NutrientVector(124, 4.4, 10.1, 0.0, 1.3, 2.0, 311)


def test_rounded_rounds_halves_up() -> None:
    vector = NutrientVector(122.5, 0.25, 2.5, 0.05, 0, 0, 12.5).rounded()

    assert vector == NutrientVector(123, 0.3, 2.5, 0.1, 0, 0, 13)


def test_per_100g_is_unchanged_for_zero_grams() -> None:
    vector = NutrientVector(calories_kcal=50)

    assert vector.per_100g(0) == vector
    assert vector.per_100g(50) == NutrientVector(calories_kcal=100)


@pytest.mark.parametrize(
    ("name", "quantity"),
    [("", 1), ("   ", 1), ("rice", 0), ("rice", -2), ("rice", math.inf), ("rice", True)],
)
def test_ingredient_line_rejects_invalid_input(name: str, quantity: float) -> None:
    with pytest.raises(InvalidIngredientError):
        IngredientLine.create(name, quantity, "g")


def test_ingredient_line_defaults_missing_unit() -> None:
    line = IngredientLine.create("egg", 2, None)  # type: ignore[arg-type]

    assert line.unit == ""
