from __future__ import annotations

import logging
import math
import operator
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)


class InvalidInput(ValueError):
    """Raised when projection inputs fall outside the engine's domain."""

    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


class ProjectionInput(BaseModel):
    """One immutable set of widget values (contribution per paycheck, cadence, horizon, return)."""

    model_config = ConfigDict(frozen=True)

    contribution: float
    frequency: int
    years: int
    annualReturnPercent: float


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    total: float
    totalContributed: float
    totalEarnings: float
    # balance right after the last period of each completed year
    yearlySnapshots: Tuple[float, ...]


def _as_int(value: object) -> Optional[int]:
    """Plain int for anything usable as an index (int, numpy.int64, ...); None otherwise."""
    if isinstance(value, bool):
        return None
    try:
        return operator.index(value)
    except TypeError:
        return None


def validate_inputs(
    contribution: float,
    frequency: int,
    years: int,
    annual_return_percent: float,
) -> List[str]:
    """Return a list of precondition violations (empty when the inputs are usable)."""
    errors: List[str] = []

    if not math.isfinite(contribution):
        errors.append("contribution must be a finite number")
    elif contribution < 0:
        errors.append("contribution must be >= 0")

    periods_per_year = _as_int(frequency)
    if periods_per_year is None:
        errors.append("frequency must be an integer")
    elif periods_per_year < 1:
        errors.append("frequency must be >= 1")

    horizon = _as_int(years)
    if horizon is None:
        errors.append("years must be an integer")
    elif horizon < 0:
        errors.append("years must be >= 0")

    if not math.isfinite(annual_return_percent):
        errors.append("annualReturnPercent must be a finite number")

    return errors


def project(
    contribution: float,
    frequency: int,
    years: int,
    annual_return_percent: float,
) -> ProjectionResult:
    """
    Compound a fixed contribution made every period for `years` years.

    Order of operations (per period):
      1) Add the contribution at the START of the period.
      2) Grow the balance by one period at annual_return_percent / 100 / frequency.
      3) On a year boundary (period % frequency == 0), record a snapshot.

    Balances are plain floats compounded one period at a time. Overflow is not
    trapped: an extreme rate/horizon simply yields inf or nan. At a 0% rate the
    total equals the contributions only up to float rounding, so earnings can
    come out a few ulps below zero.
    """
    errors = validate_inputs(contribution, frequency, years, annual_return_percent)
    if errors:
        raise InvalidInput(errors)

    contribution = float(contribution)
    frequency = operator.index(frequency)
    years = operator.index(years)
    periodic_rate = annual_return_percent / 100 / frequency
    total_periods = frequency * years

    balance = 0.0
    snapshots: List[float] = []
    for period in range(1, total_periods + 1):
        balance = (balance + contribution) * (1 + periodic_rate)
        if period % frequency == 0:
            snapshots.append(balance)

    total_contributed = contribution * total_periods

    logger.debug(
        "projected %s periods at %.6f per period: total=%.2f",
        total_periods,
        periodic_rate,
        balance,
    )

    return ProjectionResult(
        total=balance,
        totalContributed=total_contributed,
        totalEarnings=balance - total_contributed,
        yearlySnapshots=tuple(snapshots),
    )


def project_input(inputs: ProjectionInput) -> ProjectionResult:
    return project(
        contribution=inputs.contribution,
        frequency=inputs.frequency,
        years=inputs.years,
        annual_return_percent=inputs.annualReturnPercent,
    )


__all__ = [
    "InvalidInput",
    "ProjectionInput",
    "ProjectionResult",
    "validate_inputs",
    "project",
    "project_input",
]
