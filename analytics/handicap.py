"""Trackd Handicap: a rolling skill index from the player's recent rounds."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from models.round import Round
from models.stats import MIN_HANDICAP_ROUNDS, HandicapResult, format_handicap

from .metrics import round_half_up
from .time_range import as_utc

logger = logging.getLogger(__name__)

HANDICAP_WINDOW = 20

# (minimum differentials available, how many of the best are averaged)
SELECTION_TABLE = (
    (20, 8),
    (13, 6),
    (7, 5),
)

__all__ = [
    "HANDICAP_WINDOW",
    "SELECTION_TABLE",
    "compute_handicap",
    "differentials_for",
    "format_handicap",
    "most_recent",
    "select_count",
]


def select_count(available: int) -> int:
    """Number of best differentials averaged for a given number available."""
    for minimum, count in SELECTION_TABLE:
        if available >= minimum:
            return count
    return MIN_HANDICAP_ROUNDS


def _played_sort_key(round_: Round):
    # Undated rounds sort after every dated one.
    played = round_.played_at
    if played is None:
        return (1, 0.0)
    return (0, -as_utc(played).timestamp())


def most_recent(rounds: Iterable[Round], limit: int = HANDICAP_WINDOW) -> List[Round]:
    """The `limit` latest rounds by played_at, newest first."""
    return sorted(rounds, key=_played_sort_key)[:limit]


def differentials_for(rounds: Iterable[Round]) -> List[int]:
    """Score-minus-par for each round that has both a total score and par data."""
    differentials = []
    for round_ in rounds:
        differential = round_.differential()
        if differential is not None:
            differentials.append(differential)
    return differentials


def compute_handicap(rounds: Sequence[Round]) -> HandicapResult:
    """
    Average of the best differentials among the last HANDICAP_WINDOW rounds.

    With fewer than three usable rounds there is no index; rounds_used and
    rounds_available then both report how many differentials exist.
    """
    differentials = sorted(differentials_for(most_recent(rounds)))
    available = len(differentials)

    if available < MIN_HANDICAP_ROUNDS:
        logger.debug("Handicap: only %d usable rounds", available)
        return HandicapResult(handicap=None, rounds_used=available, rounds_available=available)

    used = select_count(available)
    best = differentials[:used]
    handicap = round_half_up(sum(best) / used, 1)
    logger.debug("Handicap: best %d of %d differentials -> %s", used, available, handicap)
    return HandicapResult(handicap=handicap, rounds_used=used, rounds_available=available)
