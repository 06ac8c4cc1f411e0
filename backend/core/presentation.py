"""Display helpers that turn a ProjectionResult into what the calculator shows.

Nothing here feeds back into the projection itself.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Iterator, List, Optional, Sequence

from pydantic import BaseModel

from backend.core.projection import ProjectionResult

NOT_AVAILABLE = "n/a"
MILLION = 1_000_000


def _round_half_up(value: float, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        # wide enough for any finite float
        ctx.prec = 400
        return Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP)


def format_currency(value: float) -> str:
    """$1.16M for a million and up, otherwise whole dollars with thousands separators."""
    if not math.isfinite(value):
        return NOT_AVAILABLE
    if value >= MILLION:
        return f"${_round_half_up(value / MILLION, 2)}M"

    sign = "-" if value < 0 else ""
    return f"{sign}${_round_half_up(abs(value), 0):,}"


def return_multiple(result: ProjectionResult) -> Optional[float]:
    """How many times the contributions grew; None when nothing was contributed."""
    if result.totalContributed == 0:
        return None
    return result.total / result.totalContributed


def format_multiple(multiple: Optional[float]) -> str:
    if multiple is None or not math.isfinite(multiple):
        return NOT_AVAILABLE
    return f"{_round_half_up(multiple, 1)}x"


def chart_heights(snapshots: Sequence[float]) -> List[float]:
    """Bar heights in percent of the tallest bar (floored at 1 so all-zero series stay flat)."""
    if not snapshots:
        return []
    peak = max(max(snapshots), 1)
    return [value / peak * 100 for value in snapshots]


# --- number animation ---


def ease_out_cubic(progress: float) -> float:
    progress = min(max(progress, 0.0), 1.0)
    return 1 - (1 - progress) ** 3


def interpolate(start: float, end: float, elapsed: float, duration: float = 1.0) -> float:
    """Displayed value `elapsed` seconds into an animation from start to end."""
    if duration <= 0:
        return end
    eased = ease_out_cubic(elapsed / duration)
    return start + (end - start) * eased


def animation_frames(
    start: float, end: float, duration: float = 1.0, fps: int = 60
) -> Iterator[float]:
    """Yield one displayed value per frame; the last frame is exactly `end`."""
    if fps <= 0:
        raise ValueError("fps must be positive")
    frame_count = max(1, math.ceil(duration * fps))
    for frame in range(1, frame_count):
        yield interpolate(start, end, frame / fps, duration)
    yield end


class SummaryStats(BaseModel):
    annualContribution: float
    monthlyEquivalent: float
    expectedReturn: str


def summary_stats(
    contribution: float, frequency: int, annual_return_percent: float
) -> SummaryStats:
    annual = contribution * frequency
    return SummaryStats(
        annualContribution=annual,
        monthlyEquivalent=annual / 12,
        expectedReturn=f"{annual_return_percent:g}%",
    )


__all__ = [
    "NOT_AVAILABLE",
    "format_currency",
    "return_multiple",
    "format_multiple",
    "chart_heights",
    "ease_out_cubic",
    "interpolate",
    "animation_frames",
    "SummaryStats",
    "summary_stats",
]
