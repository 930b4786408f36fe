"""Currency codes and exchange rates from an online exchange-rate API."""

from __future__ import annotations

import json
from collections.abc import Callable
from functools import lru_cache

from unitprice.fetch import fetch

EXCHANGE_API_BASE = "https://latest.currency-api.pages.dev/v1/"


class CurrencyError(RuntimeError):
    """Raised for unknown currencies or unusable exchange-rate data."""


class CurrencyRegistry:
    """Supported currencies and their exchange rates, fetched on demand.

    ``fetcher`` takes a URL and returns the response body as text.
    The list of currencies is fetched once, the first time it is needed.
    """

    def __init__(self, fetcher: Callable[[str], str] = fetch) -> None:
        self._fetch = fetcher
        self._currencies: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        body = self._fetch(EXCHANGE_API_BASE + "currencies.min.json")
        try:
            data = json.loads(body)
        except ValueError:
            raise CurrencyError(
                "Error: Failed to process fetched currency list"
            ) from None
        if not isinstance(data, dict):
            raise CurrencyError("Error: Failed to process fetched currency list")
        return {str(code): str(data[code]) for code in sorted(data)}

    def currencies(self) -> dict[str, str]:
        """Return a mapping of currency code to description, sorted by code."""
        if not self._currencies:
            self._currencies = self._load()
        return dict(self._currencies)

    def is_valid(self, code: str) -> bool:
        """Tell whether ``code`` is a supported currency code."""
        if not self._currencies:
            self._currencies = self._load()
        return code in self._currencies

    def description(self, code: str) -> str:
        """Return the description of the currency ``code``."""
        if not self.is_valid(code):
            raise CurrencyError("Error: Invalid currency")
        assert self._currencies is not None
        return self._currencies[code]

    def conversion_rate(self, source: str, target: str) -> float:
        """Return how many ``target`` units one ``source`` unit is worth."""
        if source == target:
            return 1.0
        body = self._fetch(f"{EXCHANGE_API_BASE}currencies/{source}.min.json")
        try:
            data = json.loads(body)
            return float(data[source][target])
        except (ValueError, KeyError, TypeError):
            raise CurrencyError(
                "Error: Failed to process fetched exchange rate"
            ) from None


@lru_cache(maxsize=None)
def default_registry() -> CurrencyRegistry:
    """Return the shared registry that fetches rates with curl."""
    return CurrencyRegistry(fetch)