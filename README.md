# unitprice

Work out what a product costs per unit of weight, in another currency
and unit, and keep a catalog of products sorted from cheapest to
dearest.

Exchange rates and the list of currencies are fetched at run time by
running `curl -s`, so `curl` has to be installed and on your `PATH`.
Nothing is cached between runs, so every command needs a network
connection.

## Installing

```
pip install .
```

## Converting a price tag

```
unitprice [price]currency/[weight]unit target_currency/target_unit
```

In the price tag the price and the weight may be left out; each
defaults to 1. The price tag is not case sensitive, and surrounding
spaces are ignored. The target is taken as written, so give its
currency and unit in lower case.

```
unitprice 4.99USD/1LB eur/kg     # euros per kilogram for $4.99 a pound
unitprice 1usd/2.5oz eur/g       # euros per gram for $1 per 2.5 ounces
unitprice uSd/JiN eur/kg         # euros per kilogram for $1 a jin
```

The result is printed followed by the target, e.g. `… eur per kg`.

Run `unitprice` with one argument, or with three or more, for help;
the help also lists every supported currency and unit. On any error
the message goes to standard error and the exit status is -1.

Supported units:

| unit | meaning                       |
|------|-------------------------------|
| oz   | Ounce (US weight unit)        |
| lb   | Pound (US weight unit)        |
| kg   | Kilogram (metric weight unit) |
| jin  | Jin (Chinese weight unit)     |
| g    | Gram (metric weight unit)     |

## Keeping a catalog

Run `unitprice` with no arguments to start the interactive catalog.
You are asked for a catalog name; if `<name>.csv` exists in the current
directory it is loaded. Products are listed by their price in US dollars
per pound, cheapest first. Commands:

- `add <name>` — add a product, then type its price tag, e.g. `3.5eur/500g`;
  a bad tag shows the problem and waits for a key press
- `del <name>` — remove the first product of that name; an unknown name
  ends the session with an error
- `save` — write the catalog to `<name>.csv`
- `exit` — leave (end of input also leaves)

Catalog files are tab-separated with the header
`name	price_tag	unit_price`. When a file is loaded, the stored unit
price is read as a whole number (anything after the integer part is
dropped), and each price tag's currency is checked against the fetched
currency list.

## Using it from Python

```python
from unitprice.currency import default_registry
from unitprice.product import Product
from unitprice.catalog import Catalog

registry = default_registry()
apples = Product.from_price_tag("apples", "2.99usd/lb", registry, None)
print(apples.calc_unit_price("eur", "kg", registry))
print(apples.to_csv())

catalog = Catalog("groceries")
catalog.add(apples)
catalog.save("groceries.csv")
print(catalog.render())
```

The pieces:

- `unitprice.units` — the `Unit` enum, `parse_unit()` and
  `conversion_rate()`; unknown units raise `UnitError`.
- `unitprice.currency` — `CurrencyRegistry(fetcher)` with `currencies()`,
  `is_valid()`, `description()` and `conversion_rate()`; problems raise
  `CurrencyError`. `default_registry()` returns a shared registry that
  fetches with curl. Any function taking a URL and returning text can
  be passed as the fetcher.
- `unitprice.product` — `Product`, built with `Product.from_price_tag()`;
  bad tags raise `PriceTagError`.
- `unitprice.catalog` — `Catalog` with `add()`, `get()`, `remove()`,
  `load()`, `save()` and `render()`; missing names raise
  `ProductNotFoundError`.
- `unitprice.fetch` — `fetch(url)`, which runs curl and raises
  `FetchError` when it gets nothing back.
- `unitprice.cli` — `main()`, `convert()`, `format_help()`,
  `format_currencies()`, `format_units()` and `run_interactive()`.

## Running the tests

```
pip install .[test]
pytest
```