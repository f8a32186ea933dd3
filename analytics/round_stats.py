"""Period summary and monthly performance series for a player's rounds."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from models.hole_stat import HoleStat
from models.round import Round
from models.stats import ChartPoint, RoundStats, RoundStatsReport, TimeSeries

from .metrics import (
    average_over_par,
    average_putts,
    average_score,
    fir_percent,
    gir_percent,
    holes_of,
    scores_of,
    scramble_percent,
)
from .time_range import TimeRange, as_utc

logger = logging.getLogger(__name__)

ALL_COURSES = "all"

MONTH_LABEL_FORMAT = "%b %y"


@dataclass
class _MonthBucket:
    label: str
    rounds: List[Round] = field(default_factory=list)


# TimeSeries field -> calculator(bucket_rounds, bucket_holes)
_SERIES_METRICS: Tuple[Tuple[str, Callable], ...] = (
    ("avg_score", lambda rounds, holes: average_score(rounds)),
    ("avg_over_par", lambda rounds, holes: average_over_par(holes)),
    ("avg_putts", lambda rounds, holes: average_putts(holes)),
    ("fir_percent", lambda rounds, holes: fir_percent(holes)),
    ("gir_percent", lambda rounds, holes: gir_percent(holes)),
    ("scramble_percent", lambda rounds, holes: scramble_percent(holes)),
)


def course_names(rounds: Iterable[Round]) -> List[str]:
    """Distinct course names in first-seen order."""
    seen: Dict[str, None] = {}
    for round_ in rounds:
        seen.setdefault(round_.course_name, None)
    return list(seen)


def filter_rounds(
    rounds: Iterable[Round],
    cutoff: Optional[datetime],
    course_filter: str = ALL_COURSES,
) -> List[Round]:
    """Rounds played on/after cutoff (None = no cutoff) at the selected course."""
    if cutoff is not None:
        cutoff = as_utc(cutoff)
    selected = []
    for round_ in rounds:
        if cutoff is not None and (round_.played_at is None or as_utc(round_.played_at) < cutoff):
            continue
        if course_filter != ALL_COURSES and round_.course_name != course_filter:
            continue
        selected.append(round_)
    return selected


def summarize_rounds(rounds: Sequence[Round], courses: List[str]) -> RoundStats:
    """Aggregate summary over an already-filtered set of rounds."""
    holes = holes_of(rounds)
    scores = scores_of(rounds)
    return RoundStats(
        total_rounds=len(rounds),
        best_score=min(scores) if scores else None,
        avg_score=average_score(rounds),
        avg_over_par=average_over_par(holes),
        avg_putts=average_putts(holes),
        fir_percent=fir_percent(holes),
        gir_percent=gir_percent(holes),
        scramble_percent=scramble_percent(holes),
        courses=courses,
    )


def month_buckets(rounds: Iterable[Round], now: datetime) -> List[_MonthBucket]:
    """
    Group rounds by calendar month of play.

    Buckets come out in the order their first round appears in the input,
    not in calendar order. Callers pass rounds sorted by play date; unsorted
    input yields out-of-order months.
    """
    buckets: Dict[Tuple[int, int], _MonthBucket] = {}
    order: List[Tuple[int, int]] = []
    for round_ in rounds:
        when = round_.bucket_date(now)
        key = (when.year, when.month)
        if key not in buckets:
            buckets[key] = _MonthBucket(label=when.strftime(MONTH_LABEL_FORMAT))
            order.append(key)
        buckets[key].rounds.append(round_)
    return [buckets[key] for key in order]


def build_time_series(rounds: Sequence[Round], now: datetime) -> TimeSeries:
    """Per-month value of each metric; months with no data for a metric are skipped."""
    series: Dict[str, List[ChartPoint]] = {name: [] for name, _ in _SERIES_METRICS}
    for bucket in month_buckets(rounds, now):
        bucket_holes: List[HoleStat] = holes_of(bucket.rounds)
        for name, calculate in _SERIES_METRICS:
            value: Optional[Union[int, float]] = calculate(bucket.rounds, bucket_holes)
            if value is not None:
                series[name].append(ChartPoint(label=bucket.label, value=value))
    return TimeSeries(**series)


def compute_round_stats(
    rounds: Sequence[Round],
    time_range: Union[TimeRange, str] = TimeRange.ALL_TIME,
    course_filter: str = ALL_COURSES,
    *,
    now: datetime,
    courses: Optional[Sequence[str]] = None,
) -> RoundStatsReport:
    """
    Summary stats and monthly series for the selected period and course.

    `rounds` is the player's full round history with holes attached; the
    course list is drawn from all of it so filter choices stay populated even
    when the selection is empty. Callers that pre-filter `rounds` at the data
    source pass the player's full `courses` list instead.
    """
    time_range = TimeRange(time_range)
    courses = list(courses) if courses is not None else course_names(rounds)
    selected = filter_rounds(rounds, time_range.cutoff(now), course_filter)
    logger.debug(
        "Round stats: %d of %d rounds selected (range=%s, course=%s)",
        len(selected), len(rounds), time_range.value, course_filter,
    )

    if not selected:
        return RoundStatsReport(stats=RoundStats(courses=courses), time_series=TimeSeries())

    return RoundStatsReport(
        stats=summarize_rounds(selected, courses),
        time_series=build_time_series(selected, now),
    )
