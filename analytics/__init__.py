from .dispersion import (
    DEFAULT_BAG,
    compute_dispersion_stats,
    scramble_by_club,
    sort_clubs_by_bag,
)
from .handicap import compute_handicap, format_handicap, select_count
from .round_stats import compute_round_stats
from .time_range import TimeRange

__all__ = [
    "DEFAULT_BAG",
    "TimeRange",
    "compute_dispersion_stats",
    "compute_handicap",
    "compute_round_stats",
    "format_handicap",
    "scramble_by_club",
    "select_count",
    "sort_clubs_by_bag",
]
