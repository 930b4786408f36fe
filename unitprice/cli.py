"""Command-line front end: one-shot conversion or an interactive catalog."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from unitprice.catalog import Catalog
from unitprice.currency import CurrencyRegistry, default_registry
from unitprice.product import Product
from unitprice.text import clear_console, getch
from unitprice.units import Unit

_HELP_ROWS = (
    ("    price", "Optional original price in original_currency, needs to be a positive number"),
    ("    original_currency", "The original currency of [price], needs to be one of supported_currencies"),
    ("    weight", "Optional original weight in original_unit, needs to be a positive number"),
    ("    original_unit", "The original unit of [weight], needs to be one of supported_units"),
    ("    target_currency", "The target currency of the unit price, needs to be one of supported_currencies"),
    ("    target_unit", "The target unit of the unit price, needs to be one of supported_units"),
)

_EXAMPLE_ROWS = (
    ("    unitprice 4.99USD/1LB EUR/KG", "How much euros per kilogram of a product that costs $4.99 per pound is worth"),
    ("    unitprice 1usd/2.5oz eur/g", "How much euros per gram of a product that costs $1 per 2.5 ounces is worth"),
    ("    unitprice uSd/JiN eUr/kG", "How much euros per kilogram of a product that costs $1 per pound is worth"),
)


def format_currencies(registry: CurrencyRegistry) -> str:
    """Return the supported currency codes, fifteen per line."""
    parts = ["Supported currencies:\n"]
    for count, code in enumerate(registry.currencies(), start=1):
        parts.append(f"{code:<8}")
        if count % 15 == 0:
            parts.append("\n")
    parts.append("\n\n")
    return "".join(parts)


def format_units() -> str:
    """Return the supported units with their descriptions."""
    lines = "".join(f"\t{unit.value:<8}{unit.description}\n" for unit in Unit)
    return f"Supported units:\n{lines}\n"


def format_help(registry: CurrencyRegistry) -> str:
    """Return the usage text followed by the supported currencies and units."""
    parts = [
        "Calculate the unit price in different units and currencies.\n\n",
        "Usage:\n",
        "    unitprice [price]original_currency/[weight]original_unit "
        "target_currency/target_unit\n\n",
    ]
    parts.extend(f"{left:<40}{right}\n" for left, right in _HELP_ROWS)
    parts.append("\nExamples:\n")
    parts.extend(f"{left:<40}{right}\n" for left, right in _EXAMPLE_ROWS)
    parts.append("\n")
    parts.append(format_currencies(registry))
    parts.append(format_units())
    return "".join(parts)


def convert(tag: str, target: str, registry: CurrencyRegistry | None = None) -> str:
    """Return the output line giving ``tag``'s unit price in ``target`` (``currency/unit``)."""
    registry = registry or default_registry()
    product = Product.from_price_tag("", tag, registry)
    currency, slash, unit = target.partition("/")
    if not slash:
        raise ValueError("Please type '/' between currency and unit")
    value = product.calc_unit_price(currency, unit, registry)
    return f"{value:<16.14g}{currency} per {unit}\n\n"


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def run_interactive(
    registry: CurrencyRegistry | None = None,
    read_line: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> None:
    """Edit a catalog saved as ``<name>.csv`` through typed commands.

    Ends on ``exit`` or at end of input.
    """
    registry = registry or default_registry()
    read_line = read_line or input
    write = write or _write_stdout

    def pause(message: str) -> None:
        write(message + "\n")
        getch()

    try:
        write("Please enter the catalog name: ")
        name = read_line()
        catalog = Catalog(name)
        path = Path(name + ".csv")
        if path.exists():
            catalog.load(path, registry)

        while True:
            clear_console()
            write(catalog.render())
            write("(add [name], del [name], save, exit)\n")
            write("> ")
            line = read_line()
            command, argument = line[:4], line[4:]
            if command == "add ":
                write("Please enter the price tag: ")
                tag = read_line()
                try:
                    catalog.add(Product.from_price_tag(argument, tag, registry))
                except Exception as exc:
                    write(f"{exc}\n")
                    pause("Please press any key to retry...")
            elif command == "del ":
                catalog.remove(argument)
            elif command == "save":
                catalog.save(Path(catalog.name + ".csv"))
            elif command == "exit":
                return
            else:
                pause("Invalid command, please press any key to retry...")
    except EOFError:
        return


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if not args:
            run_interactive()
        elif len(args) == 2:
            _write_stdout(convert(args[0], args[1], default_registry()))
        else:
            _write_stdout(format_help(default_registry()))
    except Exception as exc:
        print(exc, file=sys.stderr)
        return -1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())