"""Pay cadences offered by the calculator and the bounds of its input widgets."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field


class PayFrequency(IntEnum):
    """Periods per year for each supported paycheck cadence."""

    WEEKLY = 52
    BI_WEEKLY = 26
    SEMI_MONTHLY = 24
    MONTHLY = 12

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[PayFrequency, str] = {
    PayFrequency.WEEKLY: "Weekly",
    PayFrequency.BI_WEEKLY: "Bi-weekly",
    PayFrequency.SEMI_MONTHLY: "Semi-monthly",
    PayFrequency.MONTHLY: "Monthly",
}


class FrequencyOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: int


def pay_frequency_options() -> List[FrequencyOption]:
    # declaration order is the display order
    return [FrequencyOption(label=freq.label, value=int(freq)) for freq in PayFrequency]


class InputBounds(BaseModel):
    """Slider ranges and starting values of the calculator form."""

    model_config = ConfigDict(frozen=True)

    contributionMin: float = 25
    contributionMax: float = 2000
    contributionStep: float = Field(default=25, gt=0)
    yearsMin: int = 5
    yearsMax: int = 50

    defaultContribution: float = 200
    defaultFrequency: int = int(PayFrequency.BI_WEEKLY)
    defaultYears: int = 30
    defaultBenchmark: str = "SPY"


DEFAULT_BOUNDS = InputBounds()


def clamp_contribution(value: float) -> float:
    """Typed-in amounts are only floored at zero; the slider range does not apply."""
    return max(0.0, float(value))


def snap_contribution(value: float, bounds: InputBounds = DEFAULT_BOUNDS) -> float:
    """Slider semantics: clamp into range, then snap to the nearest step above the minimum."""
    clamped = min(max(float(value), bounds.contributionMin), bounds.contributionMax)
    # half steps round up, like a browser range input
    steps = math.floor((clamped - bounds.contributionMin) / bounds.contributionStep + 0.5)
    snapped = bounds.contributionMin + steps * bounds.contributionStep
    return min(snapped, bounds.contributionMax)


def clamp_years(value: int, bounds: InputBounds = DEFAULT_BOUNDS) -> int:
    return min(max(int(value), bounds.yearsMin), bounds.yearsMax)
