"""Unit prices across weight units and currencies, and catalogs sorted by them."""

__version__ = "0.1.0"