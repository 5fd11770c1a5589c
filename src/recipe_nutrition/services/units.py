"""Unit conversion onto gram and millilitre bases."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from recipe_nutrition.domain.errors import UnitIncompatibleError
from recipe_nutrition.domain.units import (
    BASE_UNITS,
    DEFAULT_UNITS,
    BaseQuantity,
    CombinedQuantity,
    Dimension,
    UnitDescriptor,
)

LITRE_THRESHOLD_ML = 1000.0
MILLIGRAMS_PER_GRAM = 1000.0


def _unit_key(unit: str | None) -> str:
    return " ".join((unit or "").lower().strip().rstrip(".").split())


@dataclass
class UnitConverter:
    """Pure conversions between recipe units."""

    units: Iterable[UnitDescriptor] = field(default=DEFAULT_UNITS)

    def __post_init__(self) -> None:
        self._by_alias: dict[str, UnitDescriptor] = {}
        for descriptor in self.units:
            for alias in descriptor.aliases:
                self._by_alias.setdefault(_unit_key(alias), descriptor)

    def descriptor_for(self, unit: str | None) -> UnitDescriptor | None:
        """Return the descriptor for a unit string, if it is known."""
        return self._by_alias.get(_unit_key(unit))

    def to_base_unit(self, quantity: float, unit: str | None) -> BaseQuantity:
        """Convert a quantity into its dimension's base unit.

        Unknown units pass through unconverted as counts so callers can fall
        back to per-item weight estimates.
        """
        descriptor = self.descriptor_for(unit)
        if descriptor is None:
            return BaseQuantity(
                amount=quantity,
                dimension=Dimension.COUNT,
                was_converted=False,
                base_unit=_unit_key(unit),
            )
        return BaseQuantity(
            amount=quantity * descriptor.factor_to_base,
            dimension=descriptor.dimension,
            was_converted=True,
            base_unit=BASE_UNITS[descriptor.dimension],
            descriptor=descriptor,
        )

    def are_compatible(self, unit_a: str | None, unit_b: str | None) -> bool:
        """Return True when two units can be summed."""
        return self._combined_unit(unit_a, unit_b) is not None

    def convert(self, quantity: float, from_unit: str, to_unit: str) -> float:
        """Convert between two units of the same dimension."""
        source = self.descriptor_for(from_unit)
        target = self.descriptor_for(to_unit)
        if source is None or target is None:
            if _unit_key(from_unit) == _unit_key(to_unit):
                return quantity
            raise UnitIncompatibleError(from_unit, to_unit)
        if source.dimension != target.dimension:
            raise UnitIncompatibleError(from_unit, to_unit)
        if source.dimension == Dimension.COUNT and source != target:
            raise UnitIncompatibleError(from_unit, to_unit)
        return quantity * source.factor_to_base / target.factor_to_base

    def combine(
        self, quantity_a: float, unit_a: str, quantity_b: float, unit_b: str
    ) -> CombinedQuantity | None:
        """Sum two quantities, or return None when their dimensions differ."""
        combined_unit = self._combined_unit(unit_a, unit_b)
        if combined_unit is None:
            return None
        base_a = self.to_base_unit(quantity_a, unit_a)
        base_b = self.to_base_unit(quantity_b, unit_b)
        total = base_a.amount + base_b.amount

        if base_a.dimension == Dimension.WEIGHT:
            both_mg = base_a.descriptor.name == base_b.descriptor.name == "mg"
            if both_mg and total < 1.0:
                return CombinedQuantity(round(total * MILLIGRAMS_PER_GRAM, 2), "mg")
            return CombinedQuantity(round(total, 2), "g")
        if base_a.dimension == Dimension.VOLUME:
            if total >= LITRE_THRESHOLD_ML:
                return CombinedQuantity(round(total / LITRE_THRESHOLD_ML, 2), "l")
            return CombinedQuantity(round(total, 2), "ml")
        return CombinedQuantity(round(total, 2), combined_unit)

    def _combined_unit(self, unit_a: str | None, unit_b: str | None) -> str | None:
        descriptor_a = self.descriptor_for(unit_a)
        descriptor_b = self.descriptor_for(unit_b)
        if descriptor_a is None or descriptor_b is None:
            key_a = _unit_key(unit_a)
            if descriptor_a is None and descriptor_b is None and key_a == _unit_key(
                unit_b
            ):
                return key_a
            return None
        if descriptor_a.dimension != descriptor_b.dimension:
            return None
        if descriptor_a.dimension == Dimension.COUNT:
            return descriptor_a.name if descriptor_a == descriptor_b else None
        return BASE_UNITS[descriptor_a.dimension]
