"""Hole-level metric calculations shared by the period summary and its time series.

Every function returns None when no hole qualifies for the metric; zero is a
real result (e.g. 0% fairways hit) and is never used to mean "no data".
"""

from __future__ import annotations

from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal
from typing import Iterable, List, Optional, Sequence

from models.hole_stat import HoleStat, ScrambleOutcome
from models.round import Round

HOLES_PER_ROUND = 18


def round_half_up(value: float, ndigits: int = 0):
    """Round halves toward positive infinity (-2.25 -> -2.2). Returns an int when ndigits is 0."""
    quantum = Decimal(1).scaleb(-ndigits)
    # HALF_DOWN on a negative number moves the tie toward zero, i.e. upward.
    mode = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    rounded = Decimal(repr(value)).quantize(quantum, rounding=mode)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)


def percent(hits: int, total: int) -> Optional[int]:
    if total == 0:
        return None
    return round_half_up(hits / total * 100)


def holes_of(rounds: Iterable[Round]) -> List[HoleStat]:
    return [hole for round_ in rounds for hole in round_.holes]


def scores_of(rounds: Iterable[Round]) -> List[int]:
    return [r.total_score for r in rounds if r.total_score is not None]


def average_score(rounds: Sequence[Round]) -> Optional[float]:
    scores = scores_of(rounds)
    if not scores:
        return None
    return round_half_up(sum(scores) / len(scores), 1)


def average_over_par(holes: Iterable[HoleStat]) -> Optional[float]:
    """Accumulated score-to-par expressed as a full 18-hole rate.

    Dividing by holes/18 keeps partial rounds and odd hole counts comparable.
    """
    total_over = 0
    holes_with_par = 0
    for hole in holes:
        to_par = hole.to_par()
        if to_par is not None:
            total_over += to_par
            holes_with_par += 1
    if holes_with_par == 0:
        return None
    return round_half_up(total_over / (holes_with_par / HOLES_PER_ROUND), 1)


def average_putts(holes: Iterable[HoleStat]) -> Optional[float]:
    putts = [h.putts for h in holes if h.putts is not None]
    if not putts:
        return None
    return round_half_up(sum(putts) / len(putts), 1)


def fir_percent(holes: Iterable[HoleStat]) -> Optional[int]:
    # Par 3s carry no fir value and drop out of both sides.
    tracked = [h.fir for h in holes if h.fir is not None]
    return percent(sum(1 for hit in tracked if hit), len(tracked))


def gir_percent(holes: Iterable[HoleStat]) -> Optional[int]:
    tracked = [h.gir for h in holes if h.gir is not None]
    return percent(sum(1 for hit in tracked if hit), len(tracked))


def scramble_percent(holes: Iterable[HoleStat]) -> Optional[int]:
    attempts = [h for h in holes if h.is_scramble_attempt()]
    successes = sum(1 for h in attempts if h.scramble == ScrambleOutcome.YES)
    return percent(successes, len(attempts))
