import io
import json
import subprocess
import sys

import pytest

from unitprice.catalog import Catalog, ProductNotFoundError
from unitprice.cli import (
    convert,
    format_currencies,
    format_help,
    format_units,
    main,
    run_interactive,
)
from unitprice.currency import CurrencyRegistry
from unitprice.units import Unit

_CURRENCIES = {"usd": "US Dollar", "eur": "Euro", "cny": "Chinese Yuan"}
_RATES = {"usd": {"eur": 0.5, "cny": 7.0, "usd": 1.0}}


def _body(url: str) -> str:
    if url.endswith("currencies.min.json"):
        return json.dumps(_CURRENCIES)
    code = url.rsplit("/", 1)[-1].split(".")[0]
    return json.dumps({"date": "2024-01-01", code: _RATES[code]})


def _fake_run(args, *_, **__):
    if isinstance(args, list) and args and args[0] == "curl":
        return subprocess.CompletedProcess(
            args, 0, stdout=_body(args[-1]).encode(), stderr=b""
        )
    return subprocess.CompletedProcess(args, 0)


@pytest.fixture(autouse=True)
def _no_processes(monkeypatch):
    monkeypatch.setattr(subprocess, "run", _fake_run)


@pytest.fixture
def registry():
    return CurrencyRegistry(_body)


def _reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_format_units_lists_every_unit():
    text = format_units()
    assert text.startswith("Supported units:\n")
    for unit in Unit:
        assert f"\t{unit.value:<8}{unit.description}\n" in text
    assert text.endswith("\n\n")


def test_format_currencies_wraps_after_fifteen():
    codes = {f"c{i:02d}": "x" for i in range(16)}
    wide = CurrencyRegistry(lambda url: json.dumps(codes))
    text = format_currencies(wide)
    lines = text.split("\n")
    assert lines[0] == "Supported currencies:"
    assert lines[1].split() == [f"c{i:02d}" for i in range(15)]
    assert lines[2].split() == ["c15"]


def test_format_help_contains_sections(registry):
    text = format_help(registry)
    assert "Usage:" in text
    assert "Examples:" in text
    assert format_units() in text
    assert format_currencies(registry) in text


def test_convert_same_units(registry):
    assert convert("usd/lb", "usd/lb", registry) == "1".ljust(16) + "usd per lb\n\n"


def test_convert_currency(registry):
    line = convert("2usd/1lb", "eur/lb", registry)
    assert line.startswith("1 ")
    assert line.endswith("eur per lb\n\n")


def test_convert_requires_slash(registry):
    with pytest.raises(ValueError, match="between currency and unit"):
        convert("usd/lb", "usdlb", registry)


def test_main_prints_conversion(capsys):
    assert main(["usd/lb", "usd/lb"]) == 0
    assert capsys.readouterr().out == "1".ljust(16) + "usd per lb\n\n"


def test_main_reports_errors(capsys):
    assert main(["usd/lb", "usdlb"]) == -1
    assert "Please type '/'" in capsys.readouterr().err


def test_main_prints_help_for_other_argument_counts(capsys):
    assert main(["only-one"]) == 0
    assert "Usage:" in capsys.readouterr().out


def test_interactive_add_and_save(tmp_path, monkeypatch, registry):
    monkeypatch.chdir(tmp_path)
    output = []
    lines = ["shop", "add milk", "2usd/1lb", "add tea", "1usd/1lb", "save", "exit"]
    run_interactive(registry, _reader(lines), output.append)
    saved = Catalog()
    saved.load(tmp_path / "shop.csv", registry)
    assert [p.name for p in saved] == ["tea", "milk"]
    assert "Catalog: shop\n" in "".join(output)


def test_interactive_loads_existing_catalog(tmp_path, monkeypatch, registry):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "shop.csv").write_text(
        "name\tprice_tag\tunit_price\nmilk\t2usd/1lb\t2\n", encoding="utf-8"
    )
    output = []
    run_interactive(registry, _reader(["shop", "exit"]), output.append)
    text = "".join(output)
    assert "Catalog: shop\nmilk" in text
    assert text.count("Catalog: shop\n") == 1
    assert f"{'milk':<128}{'2':<16}usd per lb\n" in text


def test_interactive_bad_tag_reports_message(tmp_path, monkeypatch, registry):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("k"))
    output = []
    run_interactive(registry, _reader(["shop", "add x", "usdlb", "exit"]), output.append)
    text = "".join(output)
    assert "Please type '/' between currency and weight" in text
    assert "Please press any key to retry..." in text


def test_interactive_invalid_command(tmp_path, monkeypatch, registry):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(sys, "stdin", io.StringIO("k"))
    output = []
    run_interactive(registry, _reader(["shop", "bogus", "exit"]), output.append)
    assert "Invalid command, please press any key to retry...\n" in output


def test_interactive_delete_missing_raises(tmp_path, monkeypatch, registry):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ProductNotFoundError):
        run_interactive(registry, _reader(["shop", "del ghost"]), lambda text: None)


def test_interactive_delete_removes_product(tmp_path, monkeypatch, registry):
    monkeypatch.chdir(tmp_path)
    lines = ["shop", "add milk", "usd/lb", "add tea", "usd/lb", "del milk", "save", "exit"]
    run_interactive(registry, _reader(lines), lambda text: None)
    saved = Catalog()
    saved.load(tmp_path / "shop.csv", registry)
    assert [p.name for p in saved] == ["tea"]