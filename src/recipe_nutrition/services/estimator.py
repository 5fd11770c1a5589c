"""Category-based nutrition estimates, the resolution of last resort."""

import re
from dataclasses import dataclass, field

from recipe_nutrition.domain.nutrition import NutrientVector
from recipe_nutrition.services.normalizer import IngredientNameNormalizer
from recipe_nutrition.services.weights import WeightEstimator


@dataclass(frozen=True)
class CategoryProfile:
    """A keyword group and its representative per-100g profile."""

    category: str
    keywords: tuple[str, ...]
    per_100g: NutrientVector
    excludes: tuple[str, ...] = ()

    def matches(self, normalized_name: str) -> bool:
        """Return True when a keyword appears as a whole word in the name."""
        if any(_contains_word(normalized_name, word) for word in self.excludes):
            return False
        return any(_contains_word(normalized_name, word) for word in self.keywords)


def _contains_word(text: str, phrase: str) -> bool:
    return re.search(rf"\b{re.escape(phrase)}\b", text) is not None


DEFAULT_CATEGORIES: tuple[CategoryProfile, ...] = (
    CategoryProfile(
        category="oil_fat",
        keywords=(
            "oil",
            "butter",
            "fat",
            "lard",
            "ghee",
            "margarine",
            "dripping",
            "shortening",
            "suet",
        ),
        per_100g=NutrientVector(884, 0, 0, 100, 0, 0, 0),
        excludes=("bean",),
    ),
    CategoryProfile(
        category="sauce_paste",
        keywords=(
            "sauce",
            "paste",
            "ketchup",
            "pesto",
            "dressing",
            "chutney",
            "relish",
            "salsa",
            "gravy",
            "marinade",
        ),
        per_100g=NutrientVector(50, 1, 10, 1, 1, 5, 400),
    ),
    CategoryProfile(
        category="spice_herb_seasoning",
        keywords=(
            "spice",
            "herb",
            "seasoning",
            "powder",
            "black pepper",
            "peppercorn",
            "cumin",
            "paprika",
            "turmeric",
            "cinnamon",
            "nutmeg",
            "oregano",
            "thyme",
            "rosemary",
            "basil",
            "parsley",
            "coriander",
            "dill",
            "sage",
            "mint",
            "chilli flake",
            "garam masala",
            "clove",
            "bay",
        ),
        per_100g=NutrientVector(250, 5, 50, 5, 10, 2, 50),
    ),
    CategoryProfile(
        category="vegetable",
        keywords=(
            "vegetable",
            "veg",
            "broccoli",
            "carrot",
            "onion",
            "garlic",
            "spinach",
            "kale",
            "cabbage",
            "lettuce",
            "pepper",
            "courgette",
            "aubergine",
            "tomato",
            "potato",
            "leek",
            "celery",
            "mushroom",
            "pea",
            "bean",
            "cauliflower",
            "cucumber",
            "squash",
            "sweetcorn",
        ),
        per_100g=NutrientVector(25, 1.5, 5, 0.2, 2, 2, 10),
    ),
    CategoryProfile(
        category="fruit",
        keywords=(
            "fruit",
            "apple",
            "banana",
            "berry",
            "strawberry",
            "raspberry",
            "blueberry",
            "orange",
            "lemon",
            "lime",
            "mango",
            "pear",
            "grape",
            "peach",
            "pineapple",
            "cherry",
            "melon",
            "plum",
            "apricot",
        ),
        per_100g=NutrientVector(50, 0.5, 12, 0.2, 2, 10, 1),
    ),
    CategoryProfile(
        category="meat",
        keywords=(
            "meat",
            "chicken",
            "beef",
            "pork",
            "lamb",
            "turkey",
            "duck",
            "veal",
            "bacon",
            "ham",
            "sausage",
            "chorizo",
            "mince",
            "steak",
        ),
        per_100g=NutrientVector(200, 25, 0, 10, 0, 0, 70),
    ),
    CategoryProfile(
        category="fish_seafood",
        keywords=(
            "fish",
            "seafood",
            "salmon",
            "tuna",
            "cod",
            "haddock",
            "mackerel",
            "sardine",
            "anchovy",
            "prawn",
            "crab",
            "lobster",
            "mussel",
            "scallop",
            "squid",
        ),
        per_100g=NutrientVector(100, 20, 0, 2, 0, 0, 80),
    ),
)

GENERIC_PROFILE = CategoryProfile(
    category="generic",
    keywords=(),
    per_100g=NutrientVector(100, 5, 15, 3, 2, 3, 100),
)


@dataclass
class FallbackEstimator:
    """Conservative nutrient estimates from ingredient categories."""

    normalizer: IngredientNameNormalizer
    weight_estimator: WeightEstimator
    categories: tuple[CategoryProfile, ...] = field(default=DEFAULT_CATEGORIES)
    generic_profile: CategoryProfile = field(default=GENERIC_PROFILE)

    def profile_for(self, name: str) -> CategoryProfile:
        """Return the first category whose keywords match the name."""
        normalized = self.normalizer.normalize(name)
        for profile in self.categories:
            if profile.matches(normalized):
                return profile
        return self.generic_profile

    def estimate(self, name: str, quantity: float, unit: str) -> NutrientVector:
        """Estimate nutrients for an ingredient at its quantity."""
        grams = self.weight_estimator.convert_to_grams(quantity, unit, name)
        return self.profile_for(name).per_100g.at_grams(grams)
