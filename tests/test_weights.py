"""Tests for per-item weight estimates."""

import pytest

from recipe_nutrition.services.weights import WeightEstimator


def test_estimate_grams_exact_entries(weight_estimator: WeightEstimator) -> None:
    assert weight_estimator.estimate_grams("egg") == 50
    assert weight_estimator.estimate_grams("2 large eggs") == 50
    assert weight_estimator.estimate_grams("tomatoes") == 125


def test_estimate_grams_prefers_specific_entries(
    weight_estimator: WeightEstimator,
) -> None:
    assert weight_estimator.estimate_grams("cherry tomatoes") == 15
    assert weight_estimator.estimate_grams("vine ripened tomatoes") == 125


def test_estimate_grams_strips_descriptors(weight_estimator: WeightEstimator) -> None:
    assert weight_estimator.estimate_grams("boneless skinless chicken breasts") == 175


def test_estimate_grams_reverse_containment(weight_estimator: WeightEstimator) -> None:
    assert weight_estimator.estimate_grams("passion") == 18
    assert weight_estimator.estimate_grams("lettu") == 100


def test_estimate_grams_unknown(weight_estimator: WeightEstimator) -> None:
    assert weight_estimator.estimate_grams("dragonfruit") is None
    assert weight_estimator.estimate_grams("") is None


@pytest.mark.parametrize(
    ("quantity", "unit", "name", "expected"),
    [
        (1, "kg", "flour", 1000),
        (2, "tbsp", "olive oil", 29.5736),
        (2, "whole", "eggs", 100),
        (3, "cloves", "garlic", 9),
        (2, "can", "chopped tomatoes", 800),
        (1, "smidgen", "salt", 0.2),
        (1, "sachet", "dried yeast", 10),
        (1, "optional", "parsley", 0),
        (1, "bar", "dark chocolate", 50),
        (1, "pint", "milk", 568.261),
        (2, "large", "onions", 360),
        (4, "thighs", "chicken", 480),
        (1, "Glug", "onion", 150),
        (1, "", "dragonfruit", 100),
    ],
)
def test_convert_to_grams(
    weight_estimator: WeightEstimator,
    quantity: float,
    unit: str,
    name: str,
    expected: float,
) -> None:
    assert weight_estimator.convert_to_grams(quantity, unit, name) == pytest.approx(
        expected
    )
