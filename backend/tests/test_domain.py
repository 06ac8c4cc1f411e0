from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from backend.domain.benchmarks import (
    DEFAULT_BENCHMARKS,
    Benchmark,
    BenchmarkCatalog,
    UnknownBenchmark,
    default_catalog,
    load_catalog,
)
from backend.domain.frequency import (
    DEFAULT_BOUNDS,
    PayFrequency,
    clamp_contribution,
    clamp_years,
    pay_frequency_options,
    snap_contribution,
)


def test_pay_frequency_options_in_display_order():
    options = [(option.label, option.value) for option in pay_frequency_options()]

    assert options == [
        ("Weekly", 52),
        ("Bi-weekly", 26),
        ("Semi-monthly", 24),
        ("Monthly", 12),
    ]


def test_pay_frequency_is_an_int():
    assert PayFrequency.MONTHLY * 10 == 120
    assert PayFrequency(26) is PayFrequency.BI_WEEKLY
    assert PayFrequency.SEMI_MONTHLY.label == "Semi-monthly"


def test_clamp_contribution_only_floors_at_zero():
    assert clamp_contribution(-40) == 0.0
    assert clamp_contribution(10) == 10.0
    assert clamp_contribution(5000) == 5000.0


@pytest.mark.parametrize(
    "value,expected",
    [(0, 25), (25, 25), (37, 25), (38, 50), (1990, 2000), (2500, 2000), (200, 200)],
)
def test_snap_contribution_follows_slider(value, expected):
    assert snap_contribution(value) == expected


@pytest.mark.parametrize("value,expected", [(1, 5), (5, 5), (30, 30), (50, 50), (75, 50)])
def test_clamp_years(value, expected):
    assert clamp_years(value) == expected


def test_default_bounds_match_calculator_form():
    assert DEFAULT_BOUNDS.defaultContribution == 200
    assert DEFAULT_BOUNDS.defaultFrequency == PayFrequency.BI_WEEKLY
    assert DEFAULT_BOUNDS.defaultYears == 30
    assert DEFAULT_BOUNDS.defaultBenchmark in default_catalog()


def test_default_catalog_lookup_is_case_insensitive():
    catalog = default_catalog()

    assert len(catalog) == len(DEFAULT_BENCHMARKS)
    assert catalog.symbols() == ["SPY", "QQQ", "VTI", "VOO", "IWM", "DIA"]
    assert catalog.get("qqq").avgReturn == 14.2
    assert "dia" in catalog
    assert 42 not in catalog


def test_unknown_benchmark_raises():
    with pytest.raises(UnknownBenchmark) as excinfo:
        default_catalog().get("ARKK")

    assert str(excinfo.value) == "unknown benchmark 'ARKK'"
    assert isinstance(excinfo.value, KeyError)


def test_duplicate_symbols_are_rejected():
    spy = Benchmark(symbol="SPY", name="S&P 500", avgReturn=10.5)

    with pytest.raises(ValueError):
        BenchmarkCatalog([spy, spy.model_copy(update={"symbol": "spy"})])


def test_load_catalog_from_json(tmp_path):
    path = tmp_path / "benchmarks.json"
    path.write_text(
        json.dumps(
            [
                {"symbol": "BND", "name": "Total Bond Market", "avgReturn": 3.1},
                {"symbol": "VXUS", "name": "Total International", "avgReturn": 5.4, "description": "Ex-US"},
            ]
        ),
        encoding="utf-8",
    )

    catalog = load_catalog(path)

    assert catalog.symbols() == ["BND", "VXUS"]
    assert catalog.get("vxus").description == "Ex-US"


def test_load_catalog_validates_records(tmp_path):
    path = tmp_path / "benchmarks.json"
    path.write_text(json.dumps([{"symbol": "BND", "avgReturn": 3.1}]), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_catalog(path)


@pytest.mark.parametrize("value,expected", [(37.5, 50), (62.5, 75), (1987.5, 2000)])
def test_snap_contribution_rounds_half_steps_up(value, expected):
    assert snap_contribution(value) == expected
