"""Tests for unit conversion."""

import pytest

from recipe_nutrition.domain.errors import UnitIncompatibleError
from recipe_nutrition.domain.units import CombinedQuantity, Dimension
from recipe_nutrition.services.units import UnitConverter


def test_to_base_unit_converts_weight_and_volume(unit_converter: UnitConverter) -> None:
    weight = unit_converter.to_base_unit(2, "kg")
    volume = unit_converter.to_base_unit(3, "Tablespoons")

    assert weight.amount == 2000
    assert weight.dimension == Dimension.WEIGHT
    assert weight.base_unit == "g"
    assert weight.was_converted is True
    assert volume.amount == pytest.approx(44.3604)
    assert volume.base_unit == "ml"


def test_to_base_unit_passes_unknown_units_through(
    unit_converter: UnitConverter,
) -> None:
    result = unit_converter.to_base_unit(4, "Glugs")

    assert result.amount == 4
    assert result.dimension == Dimension.COUNT
    assert result.was_converted is False
    assert result.base_unit == "glugs"


def test_combine_sums_weights_in_grams(unit_converter: UnitConverter) -> None:
    assert unit_converter.combine(500, "g", 1, "kg") == CombinedQuantity(1500, "g")


def test_combine_returns_none_across_dimensions(unit_converter: UnitConverter) -> None:
    assert unit_converter.combine(500, "g", 250, "ml") is None
    assert unit_converter.combine(1, "pinch", 2, "cloves") is None


def test_combine_promotes_large_volumes_to_litres(
    unit_converter: UnitConverter,
) -> None:
    assert unit_converter.combine(500, "ml", 750, "ml") == CombinedQuantity(1.25, "l")
    assert unit_converter.combine(1, "cup", 2, "tbsp") == CombinedQuantity(
        266.16, "ml"
    )


def test_combine_keeps_small_milligram_totals(unit_converter: UnitConverter) -> None:
    assert unit_converter.combine(200, "mg", 300, "mg") == CombinedQuantity(500, "mg")
    assert unit_converter.combine(800, "mg", 1, "g") == CombinedQuantity(1.8, "g")


def test_combine_counts_with_the_same_unit(unit_converter: UnitConverter) -> None:
    assert unit_converter.combine(2, "cloves", 1, "clove") == CombinedQuantity(
        3, "clove"
    )
    assert unit_converter.combine(1, "sprinkle", 2, "Sprinkle") == CombinedQuantity(
        3, "sprinkle"
    )


def test_convert_between_compatible_units(unit_converter: UnitConverter) -> None:
    assert unit_converter.convert(1, "lb", "oz") == pytest.approx(16.0, rel=1e-4)
    assert unit_converter.convert(1, "cup", "ml") == pytest.approx(236.588)


def test_convert_rejects_incompatible_units(unit_converter: UnitConverter) -> None:
    with pytest.raises(UnitIncompatibleError) as excinfo:
        unit_converter.convert(1, "g", "ml")

    assert excinfo.value.from_unit == "g"
    assert excinfo.value.to_unit == "ml"

    with pytest.raises(UnitIncompatibleError):
        unit_converter.convert(1, "can", "slice")


def test_are_compatible(unit_converter: UnitConverter) -> None:
    assert unit_converter.are_compatible("kg", "ounces")
    assert unit_converter.are_compatible("tsp", "l")
    assert not unit_converter.are_compatible("g", "cup")
