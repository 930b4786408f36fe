"""Products described by a price tag such as ``4.99usd/1lb``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from unitprice.currency import CurrencyRegistry, default_registry
from unitprice.text import strip_and_lower
from unitprice.units import Unit, UnitError, conversion_rate, parse_unit

_NUMBER_CHARS = set("0123456789.-")
_NUMBER_PREFIX = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


class PriceTagError(ValueError):
    """Raised when a price tag cannot be understood."""


def _format_number(value: float) -> str:
    return f"{value:g}"


def _split_number(text: str) -> tuple[str, str] | None:
    """Split ``text`` at the first character that cannot be part of a number."""
    for index, char in enumerate(text):
        if char not in _NUMBER_CHARS:
            return text[:index], text[index:]
    return None


def _parse_positive(text: str, what: str) -> float:
    if not text:
        return 1.0
    match = _NUMBER_PREFIX.match(text)
    value = float(match.group()) if match else 0.0
    if not match or value <= 0:
        raise PriceTagError(f"Please enter a valid positive number as {what}")
    return value


@dataclass
class Product:
    """A product with its price, weight and cached unit price (usd per lb)."""

    name: str
    price: float
    currency: str
    weight: float
    unit: Unit
    unit_price: float = 0.0

    @classmethod
    def from_price_tag(
        cls,
        name: str,
        tag: str,
        registry: CurrencyRegistry | None = None,
        unit_price: float | None = None,
    ) -> Product:
        """Build a product from a tag of the form ``[price]currency/[weight]unit``.

        A missing price or weight defaults to 1. Without ``unit_price`` the
        unit price in usd per lb is calculated.
        """
        registry = registry or default_registry()

        split = _split_number(strip_and_lower(tag))
        if split is None:
            raise PriceTagError("Please enter a valid currency after the price")
        price_text, rest = split
        price = _parse_positive(price_text, "price")

        currency_text, slash, rest = rest.partition("/")
        if not slash:
            raise PriceTagError("Please type '/' between currency and weight")
        currency = strip_and_lower(currency_text)
        if not registry.is_valid(currency):
            raise PriceTagError(f'Currency "{currency}" is not supported')

        split = _split_number(strip_and_lower(rest))
        if split is None:
            raise PriceTagError("Please enter a valid unit after the weight")
        weight_text, rest = split
        weight = _parse_positive(weight_text, "weight")

        unit_text = strip_and_lower(rest)
        try:
            unit = parse_unit(unit_text)
        except UnitError:
            raise PriceTagError(f'Unit "{unit_text}" is not supported') from None

        product = cls(name, price, currency, weight, unit)
        if unit_price is None:
            product.unit_price = product.calc_unit_price("usd", "lb", registry)
        else:
            product.unit_price = unit_price
        return product

    def calc_unit_price(
        self,
        currency: str,
        unit: Unit | str,
        registry: CurrencyRegistry | None = None,
    ) -> float:
        """Return the price per one ``unit`` expressed in ``currency``."""
        registry = registry or default_registry()
        currency_rate = registry.conversion_rate(self.currency, currency)
        unit_rate = conversion_rate(self.unit, unit)
        return self.price * currency_rate / self.weight / unit_rate

    def price_tag(self) -> str:
        """Return the product's price tag, e.g. ``1usd/1lb``."""
        return (
            f"{_format_number(self.price)}{self.currency}/"
            f"{_format_number(self.weight)}{self.unit}"
        )

    def to_csv(self) -> str:
        """Return the tab-separated line for this product."""
        return f"{self.name}\t{self.price_tag()}\t{_format_number(self.unit_price)}"