"""Stats endpoints: period summary, dispersion, and Trackd Handicap."""

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from analytics import (
    DEFAULT_BAG,
    TimeRange,
    compute_dispersion_stats,
    compute_handicap,
    compute_round_stats,
)
from analytics.handicap import HANDICAP_WINDOW
from analytics.round_stats import ALL_COURSES
from api.dependencies import get_app_settings, get_db
from config import Settings
from database.db_manager import DatabaseManager
from models import DispersionStats, HandicapResult, RoundStatsReport

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{user_id}/rounds", response_model=RoundStatsReport)
async def get_round_stats(
    user_id: UUID,
    time_range: TimeRange = Query(TimeRange.ALL_TIME, alias="range"),
    course: str = Query(ALL_COURSES),
    db: DatabaseManager = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    now = datetime.now(timezone.utc)
    rounds = await db.rounds.get_rounds_for_user(
        str(user_id),
        since=time_range.cutoff(now),
        course_name=None if course == ALL_COURSES else course,
        limit=settings.stats_round_limit,
    )
    courses = await db.rounds.get_course_names(str(user_id))
    return compute_round_stats(rounds, time_range, course, now=now, courses=courses)


@router.get("/{user_id}/dispersion", response_model=DispersionStats)
async def get_dispersion(
    user_id: UUID,
    tee_club: str = Query("all"),
    approach_club: str = Query("all"),
    shot_type: str = Query("all", pattern="^(all|pitch|chip|bunker)$"),
    bag: Optional[List[str]] = Query(None),
    db: DatabaseManager = Depends(get_db),
):
    holes = await db.rounds.get_hole_stats_for_user(str(user_id))
    return compute_dispersion_stats(
        holes,
        tee_club=tee_club,
        approach_club=approach_club,
        shot_type=shot_type,
        bag_order=bag or DEFAULT_BAG,
    )


@router.get("/{user_id}/handicap", response_model=HandicapResult)
async def get_handicap(user_id: UUID, db: DatabaseManager = Depends(get_db)):
    rounds = await db.rounds.get_recent_rounds(str(user_id), limit=HANDICAP_WINDOW)
    result = compute_handicap(rounds)
    logger.info(
        "Handicap for %s: %s (best %d of %d)",
        user_id, result.display, result.rounds_used, result.rounds_available,
    )
    return result
