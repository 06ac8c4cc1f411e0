"""Data contracts for the projection endpoint."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from backend.core.presentation import SummaryStats
from backend.domain.benchmarks import Benchmark


class ProjectionRequest(BaseModel):
    """Calculator form values; the return comes from either a number or a benchmark symbol."""

    model_config = ConfigDict(extra="forbid")

    contribution: float = Field(..., ge=0, allow_inf_nan=False, description="Amount invested per paycheck.")
    frequency: int = Field(..., ge=1, le=366, description="Paychecks per year, e.g. 26 for bi-weekly.")
    years: int = Field(..., ge=0, le=200, description="Investment horizon in years.")
    annualReturnPercent: Optional[float] = Field(
        default=None,
        allow_inf_nan=False,
        description="Expected annual return in percent (10.5 means 10.5%).",
    )
    benchmark: Optional[str] = Field(default=None, description="Benchmark symbol, e.g. SPY.")

    @model_validator(mode="after")
    def ensure_single_return_source(self) -> "ProjectionRequest":
        if (self.annualReturnPercent is None) == (self.benchmark is None):
            raise ValueError("provide exactly one of annualReturnPercent or benchmark")
        return self


class DisplayValues(BaseModel):
    total: str
    totalContributed: str
    totalEarnings: str
    returnMultiple: str
    annualContribution: str
    monthlyEquivalent: str
    yearlySnapshots: List[str]


class ProjectionResponse(BaseModel):
    total: float
    totalContributed: float
    totalEarnings: float
    yearlySnapshots: List[float]
    annualReturnPercent: float
    benchmark: Optional[Benchmark] = None
    returnMultiple: Optional[float] = None
    chartHeights: List[float]
    stats: SummaryStats
    display: DisplayValues
