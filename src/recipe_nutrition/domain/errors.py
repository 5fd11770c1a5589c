"""Errors raised by the nutrition engine."""


class UnitIncompatibleError(ValueError):
    """Raised when quantities of different unit dimensions are combined."""

    def __init__(self, from_unit: str, to_unit: str) -> None:
        super().__init__(f"Cannot convert {from_unit!r} to {to_unit!r}")
        self.from_unit = from_unit
        self.to_unit = to_unit


class LookupUnavailableError(RuntimeError):
    """Raised when the external nutrition database cannot be reached."""


class InvalidIngredientError(ValueError):
    """Raised when an ingredient line fails boundary validation."""
