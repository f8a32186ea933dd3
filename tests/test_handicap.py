from datetime import datetime, timedelta, timezone

import pytest

from analytics.handicap import (
    HANDICAP_WINDOW,
    compute_handicap,
    differentials_for,
    most_recent,
    select_count,
)
from models import HandicapResult, HoleStat, Round, format_handicap

START = datetime(2024, 1, 1)


def _round(index, differential, *, played_at=None, par_holes=18) -> Round:
    """A round whose total score sits `differential` strokes from a par-72 course."""
    holes = [HoleStat(hole_number=i, par=4) for i in range(1, par_holes + 1)]
    course_par = 4 * par_holes
    return Round(
        id=f"r{index}",
        course_name="Pine Hills",
        total_score=course_par + differential if differential is not None else None,
        played_at=played_at or START + timedelta(days=index),
        holes=holes,
    )


def _rounds(differentials):
    return [_round(i, d) for i, d in enumerate(differentials)]


@pytest.mark.parametrize(
    "available, expected",
    [(3, 3), (6, 3), (7, 5), (12, 5), (13, 6), (19, 6), (20, 8)],
)
def test_select_count_graduated_table(available, expected):
    assert select_count(available) == expected


def test_best_five_of_eight():
    result = compute_handicap(_rounds([5, 3, 8, 1, 9, 2, 7, -1]))

    assert result.handicap == 2.0
    assert result.rounds_used == 5
    assert result.rounds_available == 8


def test_fewer_than_three_differentials_has_no_index():
    result = compute_handicap(_rounds([4, 10]))

    assert result.handicap is None
    assert result.rounds_used == 2
    assert result.rounds_available == 2
    assert result.rounds_needed == 1
    assert result.display == "--"


def test_no_rounds():
    result = compute_handicap([])
    assert result == HandicapResult(handicap=None, rounds_used=0, rounds_available=0)
    assert result.rounds_needed == 3


def test_rounds_without_score_or_par_are_skipped():
    rounds = _rounds([2, 4, 6])
    rounds.append(_round(10, None))
    rounds.append(_round(11, 1, par_holes=0))

    assert differentials_for(rounds) == [2, 4, 6]
    result = compute_handicap(rounds)
    assert result.rounds_available == 3
    assert result.handicap == 4.0


def test_course_par_sums_only_known_pars():
    round_ = Round(
        id="r1",
        course_name="Nine Hole Muni",
        total_score=40,
        played_at=START,
        holes=[HoleStat(hole_number=1, par=4), HoleStat(hole_number=2, par=None),
               HoleStat(hole_number=3, par=3)],
    )
    assert round_.course_par() == 7
    assert round_.differential() == 33


def test_only_latest_twenty_rounds_count():
    # 5 old rounds far worse than the 20 recent ones
    old = [_round(i, 30, played_at=START + timedelta(days=i)) for i in range(5)]
    recent = [_round(100 + i, i, played_at=START + timedelta(days=100 + i)) for i in range(20)]

    result = compute_handicap(old + recent)

    assert result.rounds_available == HANDICAP_WINDOW
    assert result.rounds_used == 8
    # best 8 of differentials 0..19
    assert result.handicap == 3.5


def test_most_recent_orders_newest_first_and_undated_last():
    undated = Round(id="x", course_name="C", played_at=None)
    rounds = [_round(1, 0), undated, _round(3, 0), _round(2, 0)]
    assert [r.id for r in most_recent(rounds, 3)] == ["r3", "r2", "r1"]
    assert most_recent(rounds)[-1].id == "x"


def test_most_recent_handles_mixed_timezones():
    aware = _round(1, 0, played_at=datetime(2024, 3, 1, tzinfo=timezone.utc))
    naive = _round(2, 0, played_at=datetime(2024, 2, 1))
    assert [r.id for r in most_recent([naive, aware])] == ["r1", "r2"]


def test_handicap_rounds_to_one_decimal():
    # best 3 of [1, 1, 2] -> 1.333...
    result = compute_handicap(_rounds([1, 2, 1]))
    assert result.handicap == 1.3


def test_negative_index_keeps_sign_and_displays_plus():
    result = compute_handicap(_rounds([-2, -1, -3]))

    assert result.handicap == -2.0
    assert result.display == "+2.0"
    assert result.model_dump(by_alias=True) == {
        "handicap": -2.0,
        "roundsUsed": 3,
        "roundsAvailable": 3,
        "roundsNeeded": 0,
        "display": "+2.0",
    }


def test_format_handicap():
    assert format_handicap(None) == "--"
    assert format_handicap(12.4) == "12.4"
    assert format_handicap(0.0) == "0.0"
    assert format_handicap(-1.5) == "+1.5"


def test_negative_tie_rounds_toward_positive():
    # best 8 of 20: two -3s and six -2s -> -18 / 8 = -2.25
    result = compute_handicap(_rounds([-3, -3] + [-2] * 6 + [10] * 12))

    assert result.rounds_used == 8
    assert result.handicap == -2.2
    assert result.display == "+2.2"
