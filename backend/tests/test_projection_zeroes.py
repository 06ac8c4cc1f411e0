from __future__ import annotations

from math import isclose

import pytest

from backend.core.projection import project


def test_zero_contribution_produces_zero_snapshots():
    """
    Sanity check: with nothing invested, the rate is irrelevant and every output stays at zero.
    """
    result = project(contribution=0.0, frequency=12, years=10, annual_return_percent=7.0)

    assert result.total == 0.0
    assert result.totalContributed == 0.0
    assert result.totalEarnings == 0.0
    assert len(result.yearlySnapshots) == 10
    #just check all are zeros, don't need to go line by line
    for snapshot in result.yearlySnapshots:
        assert isclose(snapshot, 0.0, abs_tol=0.0)


@pytest.mark.parametrize("rate", [-25.0, 0.0, 10.5, 250.0])
def test_zero_years_runs_no_periods(rate):
    result = project(contribution=500.0, frequency=52, years=0, annual_return_percent=rate)

    assert result.total == 0.0
    assert result.totalContributed == 0.0
    assert result.totalEarnings == 0.0
    assert result.yearlySnapshots == ()
