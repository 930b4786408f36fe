"""Weight units and the conversion rates between them."""

from __future__ import annotations

from enum import Enum


class UnitError(ValueError):
    """Raised when a weight unit is not one of the supported units."""


class Unit(Enum):
    """A supported weight unit; the value is its short name."""

    OZ = "oz"
    LB = "lb"
    KG = "kg"
    JIN = "jin"
    G = "g"

    def __str__(self) -> str:
        return self.value

    @property
    def description(self) -> str:
        """A human-readable description of the unit."""
        return _DESCRIPTIONS[self]

    def conversion_rate(self, target: Unit | str) -> float:
        """Return how many ``target`` units make one of this unit."""
        return conversion_rate(self, target)


_DESCRIPTIONS = {
    Unit.OZ: "Ounce (US weight unit)",
    Unit.LB: "Pound (US weight unit)",
    Unit.KG: "Kilogram (metric weight unit)",
    Unit.JIN: "Jin (Chinese weight unit)",
    Unit.G: "Gram (metric weight unit)",
}

# Rows are the source unit, columns the target unit, both in declaration order.
_RATE_TABLE = (
    (1.0, 0.0625, 0.028349523125, 0.05669904625, 28.349523125),
    (16.0, 1.0, 0.45359237, 0.90718474, 453.59237),
    (35.27396195, 2.20462262, 1.0, 2.0, 1000.0),
    (17.63698097, 1.10231131, 0.5, 1.0, 500.0),
    (0.03527396, 0.002204622, 0.001, 0.002, 1.0),
)

_RATES = {
    source: dict(zip(Unit, row)) for source, row in zip(Unit, _RATE_TABLE)
}


def parse_unit(name: str) -> Unit:
    """Return the unit whose short name is exactly ``name``."""
    try:
        return Unit(name)
    except ValueError:
        raise UnitError(f'Unit "{name}" is not supported') from None


def _as_unit(value: Unit | str) -> Unit:
    if isinstance(value, Unit):
        return value
    if isinstance(value, str):
        return parse_unit(value)
    raise UnitError("Error: Invalid unit")


def conversion_rate(source: Unit | str, target: Unit | str) -> float:
    """Return how many ``target`` units make one ``source`` unit."""
    return _RATES[_as_unit(source)][_as_unit(target)]