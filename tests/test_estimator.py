"""Tests for the category fallback estimator."""

import pytest

from recipe_nutrition.domain.nutrition import NutrientVector
from recipe_nutrition.services.estimator import (
    DEFAULT_CATEGORIES,
    GENERIC_PROFILE,
    FallbackEstimator,
)


@pytest.mark.parametrize(
    ("name", "category"),
    [
        ("Extra virgin olive oil", "oil_fat"),
        ("unsalted butter", "oil_fat"),
        ("soy sauce", "sauce_paste"),
        ("fish sauce", "sauce_paste"),
        ("ground cumin", "spice_herb_seasoning"),
        ("carrots", "vegetable"),
        ("butter beans", "vegetable"),
        ("bananas", "fruit"),
        ("chicken thighs", "meat"),
        ("salmon fillets", "fish_seafood"),
        ("quinoa", "generic"),
    ],
)
def test_profile_for_uses_first_matching_category(
    estimator: FallbackEstimator, name: str, category: str
) -> None:
    assert estimator.profile_for(name).category == category


def test_estimate_scales_oil_profile(estimator: FallbackEstimator) -> None:
    nutrients = estimator.estimate("olive oil", 2, "tbsp")

    assert nutrients.calories_kcal == pytest.approx(884 * 29.5736 / 100)
    assert nutrients.fat_g == pytest.approx(29.5736)
    assert nutrients.protein_g == 0


def test_estimate_unknown_ingredient_uses_generic_profile(
    estimator: FallbackEstimator,
) -> None:
    nutrients = estimator.estimate("mystery ingredient", 1, "")

    assert nutrients == GENERIC_PROFILE.per_100g
    assert all(value >= 0 for value in nutrients.as_dict().values())


def test_category_profiles_per_100g() -> None:
    profiles = {
        profile.category: profile.per_100g
        for profile in (*DEFAULT_CATEGORIES, GENERIC_PROFILE)
    }

    assert profiles == {
        "oil_fat": NutrientVector(884, 0, 0, 100, 0, 0, 0),
        "sauce_paste": NutrientVector(50, 1, 10, 1, 1, 5, 400),
        "spice_herb_seasoning": NutrientVector(250, 5, 50, 5, 10, 2, 50),
        "vegetable": NutrientVector(25, 1.5, 5, 0.2, 2, 2, 10),
        "fruit": NutrientVector(50, 0.5, 12, 0.2, 2, 10, 1),
        "meat": NutrientVector(200, 25, 0, 10, 0, 0, 70),
        "fish_seafood": NutrientVector(100, 20, 0, 2, 0, 0, 80),
        "generic": NutrientVector(100, 5, 15, 3, 2, 3, 100),
    }
