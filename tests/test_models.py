import pytest
from datetime import datetime
from pydantic import ValidationError

from models import (
    FairwayDirection,
    GreenDirection,
    HoleStat,
    Round,
    RoundStats,
    ScrambleOutcome,
    ScrambleShotType,
)


# ================================================================
# HoleStat
# ================================================================

def test_hole_stat_parses_enums():
    h = HoleStat(
        hole_number=7, par=4, score=5,
        fir=False, fir_direction="left",
        gir=False, gir_direction="short",
        scramble="n/a", scramble_shot_type="bunker",
    )
    assert h.fir_direction is FairwayDirection.LEFT
    assert h.gir_direction is GreenDirection.SHORT
    assert h.scramble is ScrambleOutcome.NOT_APPLICABLE
    assert h.scramble_shot_type is ScrambleShotType.BUNKER
    assert h.to_par() == 1
    assert h.is_scramble_attempt() is False


def test_hole_stat_validation():
    with pytest.raises(ValidationError):
        HoleStat(hole_number=0)
    with pytest.raises(ValidationError):
        HoleStat(hole_number=1, par=7)
    with pytest.raises(ValidationError):
        HoleStat(hole_number=1, putts=-1)
    with pytest.raises(ValidationError):
        HoleStat(hole_number=1, fir_direction="long")   # long is a green miss only
    with pytest.raises(ValidationError):
        HoleStat(hole_number=1, scramble="maybe")


def test_hole_number_not_capped_at_18():
    assert HoleStat(hole_number=27).hole_number == 27


def test_par_three_has_no_fairway():
    h = HoleStat(hole_number=3, par=3, score=3, gir=True, gir_direction="hit")
    assert h.fir is None
    assert h.fir_direction is None


def test_to_par_needs_score_and_par():
    assert HoleStat(hole_number=1, par=4).to_par() is None
    assert HoleStat(hole_number=1, score=4).to_par() is None
    assert HoleStat(hole_number=1, par=5, score=4).to_par() == -1


def test_assignment_is_validated():
    h = HoleStat(hole_number=1, par=4)
    h.putts = 2
    assert h.putts == 2

    with pytest.raises(ValidationError):
        h.putts = -3
    assert h.putts == 2


# ================================================================
# Round
# ================================================================

def _round(**kwargs) -> Round:
    holes = [
        HoleStat(hole_number=1, par=4, score=5),
        HoleStat(hole_number=2, par=3, score=None),
        HoleStat(hole_number=3, par=None, score=6),
    ]
    return Round(id="r1", course_name="Pine Hills", holes=holes, **kwargs)


def test_round_course_par_and_total():
    r = _round(total_score=11)
    assert r.course_par() == 7
    assert r.calculate_total_score() == 11
    assert r.differential() == 4


def test_round_without_data():
    r = Round(id="r2", course_name="Pine Hills")
    assert r.course_par() is None
    assert r.calculate_total_score() is None
    assert r.differential() is None


def test_round_bucket_date_fallbacks():
    fallback = datetime(2024, 6, 1)
    played = datetime(2024, 4, 2)
    created = datetime(2024, 4, 3)

    assert _round(played_at=played, created_at=created).bucket_date(fallback) == played
    assert _round(created_at=created).bucket_date(fallback) == created
    assert _round().bucket_date(fallback) == fallback


# ================================================================
# Derived models
# ================================================================

def test_derived_models_accept_either_name_and_are_frozen():
    stats = RoundStats(totalRounds=2, avg_score=80.5)
    assert stats.total_rounds == 2
    assert stats.avg_score == 80.5
    assert stats.fir_percent is None

    with pytest.raises(ValidationError):
        stats.total_rounds = 3
