from .base import BaseGolfModel
from .hole_stat import (
    FairwayDirection,
    GreenDirection,
    HoleStat,
    ScrambleOutcome,
    ScrambleShotType,
)
from .round import Round
from .stats import (
    ApproachDispersion,
    ChartPoint,
    DispersionStats,
    HandicapResult,
    RoundStats,
    RoundStatsReport,
    ScrambleClubStats,
    ScrambleSummary,
    TeeDispersion,
    TimeSeries,
    format_handicap,
)

__all__ = [
    "BaseGolfModel",
    "FairwayDirection",
    "GreenDirection",
    "HoleStat",
    "ScrambleOutcome",
    "ScrambleShotType",
    "Round",
    "ApproachDispersion",
    "ChartPoint",
    "DispersionStats",
    "HandicapResult",
    "RoundStats",
    "RoundStatsReport",
    "ScrambleClubStats",
    "ScrambleSummary",
    "TeeDispersion",
    "TimeSeries",
    "format_handicap",
]
