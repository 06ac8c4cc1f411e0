from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class UnknownBenchmark(KeyError):
    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"unknown benchmark {self.symbol!r}"


class Benchmark(BaseModel):
    """An index fund the user can pick, with its historical average annual return in percent.

    These figures are illustrative, not validated market data.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    symbol: str = Field(min_length=1)
    name: str
    avgReturn: float
    description: str = ""


DEFAULT_BENCHMARKS: List[Benchmark] = [
    Benchmark(symbol="SPY", name="S&P 500", avgReturn=10.5, description="Tracks the S&P 500 index"),
    Benchmark(symbol="QQQ", name="Nasdaq 100", avgReturn=14.2, description="Tech-heavy growth ETF"),
    Benchmark(symbol="VTI", name="Total Stock Market", avgReturn=10.3, description="Entire US stock market"),
    Benchmark(symbol="VOO", name="Vanguard S&P 500", avgReturn=10.5, description="Low-cost S&P 500 tracker"),
    Benchmark(symbol="IWM", name="Russell 2000", avgReturn=9.1, description="Small-cap stocks"),
    Benchmark(symbol="DIA", name="Dow Jones", avgReturn=9.8, description="Blue-chip 30 companies"),
]

_benchmark_list = TypeAdapter(List[Benchmark])


class BenchmarkCatalog:
    """Ordered, case-insensitive lookup over a set of benchmarks."""

    def __init__(self, benchmarks: Iterable[Benchmark]):
        self._by_symbol: Dict[str, Benchmark] = {}
        for benchmark in benchmarks:
            key = benchmark.symbol.upper()
            if key in self._by_symbol:
                raise ValueError(f"duplicate benchmark symbol {benchmark.symbol!r}")
            self._by_symbol[key] = benchmark

    def __iter__(self) -> Iterator[Benchmark]:
        return iter(self._by_symbol.values())

    def __len__(self) -> int:
        return len(self._by_symbol)

    def __contains__(self, symbol: object) -> bool:
        return isinstance(symbol, str) and symbol.upper() in self._by_symbol

    def get(self, symbol: str) -> Benchmark:
        try:
            return self._by_symbol[symbol.upper()]
        except KeyError:
            raise UnknownBenchmark(symbol) from None

    def symbols(self) -> List[str]:
        return [benchmark.symbol for benchmark in self]


def default_catalog() -> BenchmarkCatalog:
    return BenchmarkCatalog(DEFAULT_BENCHMARKS)


def load_catalog(path: Union[str, Path]) -> BenchmarkCatalog:
    """Read a JSON array of benchmark records, e.g. [{"symbol": "SPY", "name": ..., "avgReturn": 10.5}]."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return BenchmarkCatalog(_benchmark_list.validate_python(raw))
