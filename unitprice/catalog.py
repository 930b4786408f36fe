"""A named collection of products kept in order of their unit price."""

from __future__ import annotations

import bisect
import re
from collections.abc import Iterator
from operator import attrgetter
from os import PathLike

from unitprice.currency import CurrencyRegistry
from unitprice.product import Product

_HEADER = "name\tprice_tag\tunit_price"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_BY_UNIT_PRICE = attrgetter("unit_price")


class ProductNotFoundError(LookupError):
    """Raised when a catalog holds no product of the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if not match:
        raise ValueError(f"Invalid unit price {text!r}")
    return int(match.group(1))


class Catalog:
    """Products sorted by unit price; products with equal prices keep insertion order."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._products: list[Product] = []

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def add(self, product: Product) -> None:
        """Insert ``product`` after any products with the same unit price."""
        bisect.insort_right(self._products, product, key=_BY_UNIT_PRICE)

    def _index_of(self, name: str) -> int:
        for index, product in enumerate(self._products):
            if product.name == name:
                return index
        raise ProductNotFoundError(f"Product {name} not found")

    def get(self, name: str) -> Product:
        """Return the first product called ``name``."""
        return self._products[self._index_of(name)]

    def remove(self, name: str) -> None:
        """Remove the first product called ``name``."""
        del self._products[self._index_of(name)]

    def load(
        self,
        path: str | PathLike[str],
        registry: CurrencyRegistry | None = None,
    ) -> None:
        """Add the products stored in the tab-separated file at ``path``.

        The first line is a header. Stored unit prices are read as integers.
        """
        with open(path, encoding="utf-8") as stream:
            lines = stream.read().splitlines()
        for line in lines[1:]:
            if not line.strip(" \r\n"):
                continue
            fields = line.split("\t", 2)
            if not fields[0]:
                continue
            if len(fields) < 3:
                raise ValueError(f"Malformed catalog line {line!r}")
            name, tag, unit_price = fields
            self.add(
                Product.from_price_tag(
                    name, tag, registry, float(_leading_int(unit_price))
                )
            )

    def save(self, path: str | PathLike[str]) -> None:
        """Write the catalog to ``path`` as a tab-separated file."""
        with open(path, "w", encoding="utf-8", newline="\n") as stream:
            stream.write(_HEADER + "\n")
            for product in self._products:
                stream.write(product.to_csv() + "\n")

    def render(self) -> str:
        """Return the catalog as a printable table in usd per lb."""
        lines = [f"Catalog: {self.name}"]
        lines.extend(
            f"{product.name:<128}{product.unit_price:<16.14g}usd per lb"
            for product in self._products
        )
        return "\n".join(lines) + "\n\n"