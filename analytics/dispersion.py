"""Shot dispersion and club performance breakdowns over a player's holes."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Union

from models.hole_stat import (
    FairwayDirection,
    GreenDirection,
    HoleStat,
    ScrambleOutcome,
)
from models.stats import (
    ApproachDispersion,
    DispersionStats,
    ScrambleClubStats,
    ScrambleSummary,
    TeeDispersion,
)

from .metrics import round_half_up

logger = logging.getLogger(__name__)

ALL_CLUBS = "all"
ALL_SHOT_TYPES = "all"

DEFAULT_BAG = [
    "Driver",
    "3 Wood",
    "5 Wood",
    "4 Iron",
    "5 Iron",
    "6 Iron",
    "7 Iron",
    "8 Iron",
    "9 Iron",
    "PW",
    "SW",
    "GW",
    "LW",
    "Putter",
]


def _share(count: int, total: int) -> int:
    # Each direction rounds on its own; the shares are not forced to total 100.
    if total == 0:
        return 0
    return round_half_up(count / total * 100)


def _distinct(values: Iterable[Optional[str]]) -> List[str]:
    seen: Dict[str, None] = {}
    for value in values:
        if value:
            seen.setdefault(value, None)
    return list(seen)


def _count(directions: Sequence[Enum], target: Enum) -> int:
    return sum(1 for d in directions if d == target)


def tee_dispersion(holes: Iterable[HoleStat], club: str = ALL_CLUBS) -> TeeDispersion:
    """Where tee shots finished, as whole-number percentages of tracked drives."""
    directions = [
        h.fir_direction for h in holes
        if h.fir_direction is not None and (club == ALL_CLUBS or h.tee_club == club)
    ]
    total = len(directions)
    return TeeDispersion(
        total=total,
        fw_hit=_share(_count(directions, FairwayDirection.HIT), total),
        left=_share(_count(directions, FairwayDirection.LEFT), total),
        right=_share(_count(directions, FairwayDirection.RIGHT), total),
        short=_share(_count(directions, FairwayDirection.SHORT), total),
    )


def approach_dispersion(holes: Iterable[HoleStat], club: str = ALL_CLUBS) -> ApproachDispersion:
    """Where approach shots finished, as whole-number percentages of tracked approaches."""
    directions = [
        h.gir_direction for h in holes
        if h.gir_direction is not None and (club == ALL_CLUBS or h.approach_club == club)
    ]
    total = len(directions)
    return ApproachDispersion(
        total=total,
        on_green=_share(_count(directions, GreenDirection.HIT), total),
        long=_share(_count(directions, GreenDirection.LONG), total),
        left=_share(_count(directions, GreenDirection.LEFT), total),
        right=_share(_count(directions, GreenDirection.RIGHT), total),
        short=_share(_count(directions, GreenDirection.SHORT), total),
    )


def scramble_by_club(
    holes: Iterable[HoleStat],
    shot_type: str = ALL_SHOT_TYPES,
) -> ScrambleSummary:
    """
    Scramble success per recovery club, best first.

    Only holes with a yes/no scramble count. Attempts without a recorded club
    count toward the total but not toward any club. Clubs with the same
    success rate are ordered by attempts (more first), then by name.
    """
    shot_type = getattr(shot_type, "value", shot_type)
    attempts = [
        h for h in holes
        if h.is_scramble_attempt()
        and (shot_type == ALL_SHOT_TYPES
             or (h.scramble_shot_type is not None and h.scramble_shot_type.value == shot_type))
    ]

    tallies: Dict[str, List[int]] = {}
    for hole in attempts:
        if not hole.scramble_club:
            continue
        tally = tallies.setdefault(hole.scramble_club, [0, 0])
        tally[0] += 1
        if hole.scramble == ScrambleOutcome.YES:
            tally[1] += 1

    clubs = [
        ScrambleClubStats(
            club=club,
            attempts=tried,
            successes=made,
            success_rate=round_half_up(made / tried * 100),
        )
        for club, (tried, made) in tallies.items()
    ]
    clubs.sort(key=lambda c: (-c.success_rate, -c.attempts, c.club))
    return ScrambleSummary(total=len(attempts), clubs=clubs)


def sort_clubs_by_bag(clubs: Sequence[str], bag_order: Sequence[str]) -> List[str]:
    """Order clubs as they sit in the player's bag; clubs not in the bag go last."""
    position = {name: index for index, name in enumerate(bag_order)}
    unbagged = len(position)
    return sorted(clubs, key=lambda club: position.get(club, unbagged))


def compute_dispersion_stats(
    holes: Sequence[HoleStat],
    tee_club: str = ALL_CLUBS,
    approach_club: str = ALL_CLUBS,
    shot_type: Union[str, Enum] = ALL_SHOT_TYPES,
    bag_order: Optional[Sequence[str]] = None,
) -> DispersionStats:
    """
    Dispersion and scramble breakdowns over every hole the player has recorded.

    Club option lists always cover all holes regardless of the filters. When
    `bag_order` is given they are sorted against it, otherwise they keep the
    order clubs were first seen.
    """
    tee_clubs = _distinct(h.tee_club for h in holes)
    approach_clubs = _distinct(h.approach_club for h in holes)
    if bag_order is not None:
        tee_clubs = sort_clubs_by_bag(tee_clubs, bag_order)
        approach_clubs = sort_clubs_by_bag(approach_clubs, bag_order)

    stats = DispersionStats(
        tee_shots=tee_dispersion(holes, tee_club),
        approach=approach_dispersion(holes, approach_club),
        scramble=scramble_by_club(holes, shot_type),
        tee_clubs=tee_clubs,
        approach_clubs=approach_clubs,
    )
    logger.debug(
        "Dispersion: %d holes, %d tee shots, %d approaches, %d scramble attempts",
        len(holes), stats.tee_shots.total, stats.approach.total, stats.scramble.total,
    )
    return stats
