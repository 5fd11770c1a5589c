"""Unit domain models and the default unit table."""

from dataclasses import dataclass
from enum import StrEnum


class Dimension(StrEnum):
    """Conversion family of a unit."""

    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"


BASE_UNITS = {
    Dimension.WEIGHT: "g",
    Dimension.VOLUME: "ml",
    Dimension.COUNT: "item",
}


@dataclass(frozen=True)
class UnitDescriptor:
    """Canonical unit metadata.

    ``factor_to_base`` converts one unit into grams (weight), millilitres
    (volume) or items (count). ``grams_per_unit`` is an approximate mass for
    count units that have a typical size, such as a clove or a can.
    """

    name: str
    aliases: tuple[str, ...]
    dimension: Dimension
    factor_to_base: float
    grams_per_unit: float | None = None


@dataclass(frozen=True)
class BaseQuantity:
    """A quantity expressed in its dimension's base unit."""

    amount: float
    dimension: Dimension
    was_converted: bool
    base_unit: str
    descriptor: UnitDescriptor | None = None


@dataclass(frozen=True)
class CombinedQuantity:
    """Result of adding two compatible quantities."""

    quantity: float
    unit: str


def _weight(name: str, factor: float, *aliases: str) -> UnitDescriptor:
    return UnitDescriptor(name, (name, *aliases), Dimension.WEIGHT, factor)


def _volume(name: str, factor: float, *aliases: str) -> UnitDescriptor:
    return UnitDescriptor(name, (name, *aliases), Dimension.VOLUME, factor)


def _count(name: str, grams: float | None, *aliases: str) -> UnitDescriptor:
    return UnitDescriptor(name, (name, *aliases), Dimension.COUNT, 1.0, grams)


DEFAULT_UNITS: tuple[UnitDescriptor, ...] = (
    # Weight, base grams
    _weight("mg", 0.001, "milligram", "milligrams", "milligramme", "milligrammes"),
    _weight("g", 1.0, "gram", "grams", "gramme", "grammes", "gr", "grm"),
    _weight("kg", 1000.0, "kilogram", "kilograms", "kilo", "kilos", "kgs"),
    _weight("oz", 28.3495, "ounce", "ounces"),
    _weight("lb", 453.592, "lbs", "pound", "pounds"),
    # Volume, base millilitres
    _volume(
        "ml", 1.0, "millilitre", "millilitres", "milliliter", "milliliters", "mls"
    ),
    _volume("cl", 10.0, "centilitre", "centilitres", "centiliter", "centiliters"),
    _volume("dl", 100.0, "decilitre", "decilitres", "deciliter", "deciliters"),
    _volume("l", 1000.0, "litre", "litres", "liter", "liters", "ltr"),
    _volume("tsp", 4.92892, "teaspoon", "teaspoons", "ts", "tsps"),
    _volume("tbsp", 14.7868, "tablespoon", "tablespoons", "tbs", "tbl", "tbsps", "tb"),
    _volume("cup", 236.588, "cups", "c"),
    _volume("fl oz", 29.5735, "fluid ounce", "fluid ounces", "floz", "fl. oz"),
    # Imperial pint
    _volume("pint", 568.261, "pints", "pt"),
    _volume("quart", 946.353, "quarts", "qt"),
    _volume("gallon", 3785.41, "gallons", "gal"),
    # Generic counts, weighed by the ingredient weight table
    _count("whole", None),
    _count("piece", None, "pieces", "pc", "pcs"),
    _count("each", None, "ea"),
    _count("item", None, "items"),
    _count("unit", None, "units"),
    # Counts with a typical size
    _count("pinch", 0.3, "pinches"),
    _count("dash", 0.5, "dashes"),
    _count("smidgen", 0.2, "smidgens"),
    _count("drop", 0.05, "drops"),
    _count("splash", 5.0, "splashes"),
    _count("drizzle", 10.0, "drizzles"),
    _count("handful", 30.0, "handfuls"),
    _count("knob", 15.0, "knobs"),
    _count("dollop", 30.0, "dollops"),
    _count("scoop", 60.0, "scoops"),
    _count("to taste", 2.0, "to-taste", "totaste"),
    _count("as needed", 5.0, "as required"),
    _count("optional", 0.0),
    _count("for garnish", 2.0),
    _count("for serving", 10.0),
    _count("serving", 100.0, "servings", "portion", "portions"),
    # Size modifiers used as units for produce
    _count("small", 75.0),
    _count("medium", 120.0),
    _count("large", 180.0),
    _count("extra large", 220.0, "extra-large"),
    # Produce
    _count("bunch", 50.0, "bunches"),
    _count("head", 300.0, "heads"),
    _count("stalk", 40.0, "stalks", "stem", "stems", "rib", "ribs"),
    _count("sprig", 2.0, "sprigs"),
    _count("leaf", 1.0, "leaves"),
    _count("clove", 3.0, "cloves"),
    _count("slice", 20.0, "slices"),
    _count("wedge", 30.0, "wedges"),
    _count("segment", 10.0, "segments"),
    _count("floret", 25.0, "florets"),
    _count("ear", 100.0, "ears"),
    _count("bulb", 60.0, "bulbs"),
    _count("root", 50.0, "roots"),
    _count("crown", 300.0, "crowns"),
    # Eggs
    _count("egg", 50.0, "eggs"),
    _count("yolk", 18.0, "yolks", "egg yolk", "egg yolks"),
    _count("white", 33.0, "whites", "egg white", "egg whites"),
    # Meat and seafood portions
    _count("fillet", 150.0, "fillets", "filet", "filets"),
    _count("breast", 175.0, "breasts"),
    _count("thigh", 120.0, "thighs"),
    _count("drumstick", 100.0, "drumsticks"),
    _count("wing", 50.0, "wings"),
    _count("leg", 150.0, "legs"),
    _count("rasher", 25.0, "rashers"),
    _count("strip", 20.0, "strips"),
    _count("patty", 100.0, "patties"),
    _count("steak", 200.0, "steaks"),
    _count("chop", 150.0, "chops"),
    _count("cutlet", 150.0, "cutlets"),
    _count("sausage", 60.0, "sausages"),
    _count("link", 60.0, "links"),
    _count("slice deli", 30.0),
    _count("prawn", 10.0, "prawns"),
    _count("shrimp", 8.0),
    _count("mussel", 15.0, "mussels"),
    _count("clam", 15.0, "clams"),
    _count("scallop", 20.0, "scallops"),
    # Containers and packages
    _count("can", 400.0, "cans", "tin", "tins"),
    _count("jar", 300.0, "jars"),
    _count("bottle", 500.0, "bottles"),
    _count("packet", 100.0, "packets"),
    _count("pack", 200.0, "packs", "package", "packages", "pkg", "bag", "bags"),
    _count("sachet", 10.0, "sachets"),
    _count("carton", 500.0, "cartons"),
    _count("box", 250.0, "boxes"),
    _count("tube", 100.0, "tubes"),
    _count("pouch", 150.0, "pouches"),
    _count("container", 200.0, "containers"),
    _count("tub", 250.0, "tubs"),
    # Baking
    _count("stick", 113.0, "sticks"),
    _count("block", 250.0, "blocks"),
    _count("sheet", 50.0, "sheets"),
    _count("round", 30.0, "rounds"),
    _count("square", 30.0, "squares"),
    _count("bar", 50.0, "bars"),
    _count("cube", 10.0, "cubes"),
)
