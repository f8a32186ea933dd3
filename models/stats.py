"""Derived, read-only views computed from rounds and hole stats.

These are never persisted. Field names are snake_case in Python and
serialize with camelCase aliases for the presentation layer.
"""

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel
from typing import List, Optional


class DerivedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class RoundStats(DerivedModel):
    total_rounds: int = 0
    best_score: Optional[int] = None
    avg_score: Optional[float] = None
    avg_over_par: Optional[float] = None
    avg_putts: Optional[float] = None
    fir_percent: Optional[int] = None
    gir_percent: Optional[int] = None
    scramble_percent: Optional[int] = None
    courses: List[str] = Field(default_factory=list)


class ChartPoint(DerivedModel):
    label: str
    value: float


class TimeSeries(DerivedModel):
    """One ordered list of points per metric. Buckets with no data emit no point."""
    avg_score: List[ChartPoint] = Field(default_factory=list)
    avg_over_par: List[ChartPoint] = Field(default_factory=list)
    avg_putts: List[ChartPoint] = Field(default_factory=list)
    fir_percent: List[ChartPoint] = Field(default_factory=list)
    gir_percent: List[ChartPoint] = Field(default_factory=list)
    scramble_percent: List[ChartPoint] = Field(default_factory=list)


class RoundStatsReport(DerivedModel):
    stats: RoundStats
    time_series: TimeSeries


class TeeDispersion(DerivedModel):
    total: int = 0
    fw_hit: int = 0
    left: int = 0
    right: int = 0
    short: int = 0


class ApproachDispersion(DerivedModel):
    total: int = 0
    on_green: int = 0
    long: int = 0
    left: int = 0
    right: int = 0
    short: int = 0


class ScrambleClubStats(DerivedModel):
    club: str
    attempts: int
    successes: int
    success_rate: int


class ScrambleSummary(DerivedModel):
    total: int = 0
    clubs: List[ScrambleClubStats] = Field(default_factory=list)


class DispersionStats(DerivedModel):
    tee_shots: TeeDispersion
    approach: ApproachDispersion
    scramble: ScrambleSummary
    tee_clubs: List[str] = Field(default_factory=list)
    approach_clubs: List[str] = Field(default_factory=list)


MIN_HANDICAP_ROUNDS = 3


def format_handicap(value: Optional[float]) -> str:
    """Index as shown to the player: '+' for better than scratch, '--' when unknown.

    Presentation only; the stored value keeps its sign.
    """
    if value is None:
        return "--"
    if value < 0:
        return f"+{abs(value)}"
    return str(value)


class HandicapResult(DerivedModel):
    handicap: Optional[float] = None
    rounds_used: int = 0
    rounds_available: int = 0

    @computed_field
    @property
    def rounds_needed(self) -> int:
        """Rounds still to be played before an index can be produced."""
        return max(0, MIN_HANDICAP_ROUNDS - self.rounds_available)

    @computed_field
    @property
    def display(self) -> str:
        return format_handicap(self.handicap)
