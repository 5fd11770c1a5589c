"""Vocabulary tables used to normalize ingredient names.

Canonical synonym targets use UK naming and are already in normalized form,
so a canonical name never contains one of the synonym keys as a whole word.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class NormalizerVocabulary:
    """Immutable word tables for the ingredient name normalizer."""

    synonyms: Mapping[str, str] = field(default_factory=dict)
    modifiers: frozenset[str] = frozenset()
    preparations: frozenset[str] = frozenset()
    form_words: frozenset[str] = frozenset()
    irregular_plurals: Mapping[str, str] = field(default_factory=dict)
    plural_invariants: frozenset[str] = frozenset()


_SYNONYMS = {
    # Vegetables
    "eggplant": "aubergine",
    "zucchini": "courgette",
    "arugula": "rocket",
    "green onion": "spring onion",
    "scallion": "spring onion",
    "bell pepper": "pepper",
    "capsicum": "pepper",
    "red bell pepper": "red pepper",
    "green bell pepper": "green pepper",
    "yellow bell pepper": "yellow pepper",
    "snow pea": "mangetout",
    "fava bean": "broad bean",
    "rutabaga": "swede",
    "beet": "beetroot",
    "cilantro": "coriander",
    "napa cabbage": "chinese cabbage",
    "bok choy": "pak choi",
    "corn": "sweetcorn",
    "corn kernel": "sweetcorn",
    "romaine lettuce": "cos lettuce",
    "romaine": "cos lettuce",
    "endive": "chicory",
    # Meat & seafood
    "ground beef": "beef mince",
    "minced beef": "beef mince",
    "ground pork": "pork mince",
    "minced pork": "pork mince",
    "ground lamb": "lamb mince",
    "minced lamb": "lamb mince",
    "ground turkey": "turkey mince",
    "ground chicken": "chicken mince",
    "shrimp": "prawn",
    "jumbo shrimp": "king prawn",
    "canadian bacon": "back bacon",
    # Dairy
    "heavy cream": "double cream",
    "whipping cream": "double cream",
    "light cream": "single cream",
    "skim milk": "skimmed milk",
    "yogurt": "yoghurt",
    "sharp cheddar": "mature cheddar",
    "parmigiano reggiano": "parmesan",
    # Baking & pantry
    "all purpose flour": "plain flour",
    "self rising flour": "self raising flour",
    "bread flour": "strong flour",
    "whole wheat flour": "wholemeal flour",
    "superfine sugar": "caster sugar",
    "powdered sugar": "icing sugar",
    "confectioner sugar": "icing sugar",
    "turbinado sugar": "demerara sugar",
    "molasses": "treacle",
    "baking soda": "bicarbonate of soda",
    "cornstarch": "cornflour",
    "corn starch": "cornflour",
    "rolled oat": "porridge oat",
    "oatmeal": "porridge oat",
    # Stocks & sauces
    "chicken broth": "chicken stock",
    "beef broth": "beef stock",
    "vegetable broth": "vegetable stock",
    "broth": "stock",
    "bouillon cube": "stock cube",
    "bouillon": "stock cube",
    "marinara sauce": "tomato sauce",
    "tomato puree": "passata",
    "tomato ketchup": "ketchup",
    "catsup": "ketchup",
    "mayo": "mayonnaise",
    # Oils
    "canola oil": "rapeseed oil",
    "peanut oil": "groundnut oil",
    # Pulses
    "garbanzo bean": "chickpea",
    "garbanzo": "chickpea",
    "navy bean": "haricot bean",
    "white kidney bean": "cannellini bean",
    "lima bean": "butter bean",
    # Spices
    "chili": "chilli",
    "red pepper flake": "chilli flake",
    "crushed red pepper": "chilli flake",
    "tumeric": "turmeric",
}

_MODIFIERS = {
    "fresh",
    "frozen",
    "dried",
    "canned",
    "tinned",
    "jarred",
    "bottled",
    "packaged",
    "organic",
    "free range",
    "cage free",
    "grass fed",
    "wild caught",
    "farm raised",
    "local",
    "imported",
    "raw",
    "cooked",
    "uncooked",
    "ready to eat",
    "pre cooked",
    "precooked",
    "homemade",
    "home made",
    "store bought",
    "low sodium",
    "reduced sodium",
    "no salt",
    "salt free",
    "unsalted",
    "salted",
    "low fat",
    "reduced fat",
    "fat free",
    "nonfat",
    "non fat",
    "full fat",
    "lite",
    "diet",
    "sugar free",
    "no sugar",
    "unsweetened",
    "sweetened",
    "gluten free",
    "dairy free",
    "vegan",
    "kosher",
    "halal",
    "large",
    "medium",
    "small",
    "extra large",
    "baby",
    "mini",
    "jumbo",
    "regular",
    "thick",
    "thin",
    "fine",
    "coarse",
    "extra virgin",
    "virgin",
    "pure",
    "refined",
    "unrefined",
    "unbleached",
    "enriched",
    "fortified",
    "plain",
    "flavored",
    "unflavored",
    "natural",
    "good quality",
    "premium",
    "optional",
    "about",
    "approximately",
    "approx",
    "heaped",
    "level",
    "generous",
    "scant",
}

_PREPARATIONS = {
    "sliced",
    "diced",
    "chopped",
    "minced",
    "crushed",
    "grated",
    "shredded",
    "julienned",
    "cubed",
    "halved",
    "quartered",
    "whole",
    "ground",
    "powdered",
    "flaked",
    "crumbled",
    "mashed",
    "pureed",
    "blended",
    "peeled",
    "deseeded",
    "seeded",
    "pitted",
    "cored",
    "trimmed",
    "washed",
    "rinsed",
    "drained",
    "strained",
    "sifted",
    "beaten",
    "whisked",
    "melted",
    "softened",
    "room temperature",
    "toasted",
    "roasted",
    "sauteed",
    "grilled",
    "steamed",
    "boiled",
    "blanched",
    "poached",
    "smoked",
    "cured",
    "rehydrated",
    "soaked",
    "marinated",
    "seasoned",
    "unseasoned",
    "zested",
    "torn",
    "finely",
    "roughly",
    "thinly",
    "coarsely",
    "freshly",
}

_FORM_WORDS = {
    "clove",
    "cloves",
    "pod",
    "pods",
    "piece",
    "pieces",
    "head",
    "heads",
    "bunch",
    "bunches",
    "sprig",
    "sprigs",
    "stalk",
    "stalks",
    "stem",
    "stems",
    "leaf",
    "leaves",
    "slice",
    "slices",
    "wedge",
    "wedges",
    "segment",
    "segments",
    "strip",
    "strips",
    "chunk",
    "chunks",
    "floret",
    "florets",
    "fillet",
    "fillets",
    "breast",
    "breasts",
    "thigh",
    "thighs",
    "drumstick",
    "drumsticks",
    "wing",
    "wings",
    "leg",
    "legs",
    "loin",
    "loins",
    "rasher",
    "rashers",
    "tin",
    "tins",
    "can",
    "cans",
    "jar",
    "jars",
    "packet",
    "packets",
    "bag",
    "bags",
    "bottle",
    "bottles",
    "carton",
    "cartons",
    "punnet",
    "punnets",
    "pack",
    "packs",
    "sachet",
    "sachets",
}

_IRREGULAR_PLURALS = {
    "leaves": "leaf",
    "loaves": "loaf",
    "halves": "half",
    "knives": "knife",
    "cookies": "cookie",
    "chilies": "chili",
    "chillies": "chilli",
    "brownies": "brownie",
    "calves": "calf",
}

_PLURAL_INVARIANTS = {
    "asparagus",
    "hummus",
    "houmous",
    "couscous",
    "citrus",
    "octopus",
    "hibiscus",
    "swiss",
    "grits",
    "molasses",
    "series",
    "species",
    "haggis",
}

DEFAULT_VOCABULARY = NormalizerVocabulary(
    synonyms=MappingProxyType(_SYNONYMS),
    modifiers=frozenset(_MODIFIERS),
    preparations=frozenset(_PREPARATIONS),
    form_words=frozenset(_FORM_WORDS),
    irregular_plurals=MappingProxyType(_IRREGULAR_PLURALS),
    plural_invariants=frozenset(_PLURAL_INVARIANTS),
)
