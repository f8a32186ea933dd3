"""Conversion between asyncpg rows and the Round / HoleStat models."""

from typing import Dict, List, Optional, Sequence
from uuid import UUID

from models import HoleStat, Round


def _id(value) -> Optional[str]:
    return str(value) if value is not None else None


# ================================================================
# Row -> Model (reads)
# ================================================================

def hole_stat_from_row(row) -> HoleStat:
    """public.hole_stats row -> HoleStat model."""
    return HoleStat(
        round_id=_id(row["round_id"]),
        hole_number=row["hole_number"],
        par=row["par"],
        score=row["score"],
        fir=row["fir"],
        fir_direction=row["fir_direction"],
        gir=row["gir"],
        gir_direction=row["gir_direction"],
        scramble=row["scramble"],
        putts=row["putts"],
        tee_club=row["tee_club"],
        approach_club=row["approach_club"],
        scramble_club=row["scramble_club"],
        scramble_shot_type=row["scramble_shot_type"],
    )


def round_from_rows(round_row, hole_rows: Sequence) -> Round:
    """public.rounds row + its hole_stats rows -> Round, holes ordered by number."""
    holes = sorted(
        (hole_stat_from_row(r) for r in hole_rows),
        key=lambda h: h.hole_number,
    )
    return Round(
        id=str(round_row["id"]),
        user_id=_id(round_row["user_id"]),
        course_name=round_row["course_name"],
        course_id=_id(round_row["course_id"]),
        total_score=round_row["total_score"],
        played_at=round_row["played_at"],
        created_at=round_row["created_at"],
        holes=holes,
    )


def rounds_from_rows(round_rows: Sequence, hole_rows: Sequence) -> List[Round]:
    """Attach hole rows to their rounds, keeping the round rows' order."""
    holes_by_round: Dict[str, list] = {}
    for row in hole_rows:
        holes_by_round.setdefault(str(row["round_id"]), []).append(row)
    return [
        round_from_rows(r, holes_by_round.get(str(r["id"]), []))
        for r in round_rows
    ]


# ================================================================
# Model -> Row (writes)
# ================================================================

def _enum_value(value) -> Optional[str]:
    return value.value if value is not None else None


def hole_stat_to_row(hole: HoleStat, round_id: UUID) -> tuple:
    """HoleStat -> tuple for the hole_stats UPDATE in the edit-round flow."""
    return (
        round_id, hole.hole_number,
        hole.score, hole.fir, _enum_value(hole.fir_direction),
        hole.gir, _enum_value(hole.gir_direction),
        _enum_value(hole.scramble), hole.putts,
        hole.tee_club, hole.approach_club, hole.scramble_club,
        _enum_value(hole.scramble_shot_type),
    )
