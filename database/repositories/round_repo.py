"""Reads and edits for rounds and their hole_stats."""

import asyncpg
import logging
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

from pydantic import ValidationError

from models import HoleStat, Round
from database.converters import (
    hole_stat_from_row,
    hole_stat_to_row,
    round_from_rows,
    rounds_from_rows,
)
from database.exceptions import DataFetchError, NotFoundError

logger = logging.getLogger(__name__)

# Failures that mean the snapshot could not be read.
FETCH_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, ValidationError)


class RoundRepositoryDB:
    """Async access to a player's rounds with their hole stats attached."""

    def __init__(self, pool: asyncpg.Pool):
        self._pool = pool

    # ================================================================
    # Private helpers
    # ================================================================

    async def _attach_holes(self, conn, round_rows: Sequence) -> List[Round]:
        """Load hole_stats for all rounds in one query and build Round models."""
        if not round_rows:
            return []
        hole_rows = await conn.fetch(
            """SELECT * FROM public.hole_stats
               WHERE round_id = ANY($1::uuid[])
               ORDER BY round_id, hole_number""",
            [r["id"] for r in round_rows],
        )
        return rounds_from_rows(round_rows, hole_rows)

    # ================================================================
    # Read
    # ================================================================

    async def get_round(self, round_id: str) -> Optional[Round]:
        """Get a round with its holes."""
        try:
            async with self._pool.acquire() as conn:
                row = await conn.fetchrow(
                    "SELECT * FROM public.rounds WHERE id = $1", UUID(round_id)
                )
                if not row:
                    return None
                hole_rows = await conn.fetch(
                    """SELECT * FROM public.hole_stats
                       WHERE round_id = $1 ORDER BY hole_number""",
                    row["id"],
                )
                return round_from_rows(row, hole_rows)
        except FETCH_ERRORS as e:
            logger.exception("Failed to load round %s", round_id)
            raise DataFetchError(str(e)) from e

    async def get_rounds_for_user(
        self,
        user_id: str,
        *,
        since: Optional[datetime] = None,
        course_name: Optional[str] = None,
        limit: int = 500,
    ) -> List[Round]:
        """Get a user's rounds ordered by played_at ASC, holes attached.

        `since` and `course_name` narrow the query. `limit` keeps the newest
        rounds: rows are selected newest first and returned oldest first.
        """
        conditions = ["user_id = $1"]
        params: list = [UUID(user_id)]
        if since is not None:
            params.append(since)
            conditions.append(f"played_at >= ${len(params)}")
        if course_name is not None:
            params.append(course_name)
            conditions.append(f"course_name = ${len(params)}")
        params.append(limit)

        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    f"""SELECT * FROM public.rounds
                        WHERE {" AND ".join(conditions)}
                        ORDER BY played_at DESC NULLS FIRST
                        LIMIT ${len(params)}""",
                    *params,
                )
                rounds = await self._attach_holes(conn, list(reversed(rows)))
        except FETCH_ERRORS as e:
            logger.exception("Failed to load rounds for user %s", user_id)
            raise DataFetchError(str(e)) from e
        logger.debug("Loaded %d rounds for user %s", len(rounds), user_id)
        return rounds

    async def get_recent_rounds(self, user_id: str, *, limit: int = 20) -> List[Round]:
        """Get a user's latest rounds ordered by played_at DESC, holes attached."""
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    """SELECT * FROM public.rounds
                       WHERE user_id = $1
                       ORDER BY played_at DESC NULLS LAST
                       LIMIT $2""",
                    UUID(user_id), limit,
                )
                return await self._attach_holes(conn, rows)
        except FETCH_ERRORS as e:
            logger.exception("Failed to load recent rounds for user %s", user_id)
            raise DataFetchError(str(e)) from e

    async def get_course_names(self, user_id: str) -> List[str]:
        """Distinct course names across all of a user's rounds."""
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    """SELECT DISTINCT course_name FROM public.rounds
                       WHERE user_id = $1 ORDER BY course_name""",
                    UUID(user_id),
                )
        except FETCH_ERRORS as e:
            logger.exception("Failed to load course names for user %s", user_id)
            raise DataFetchError(str(e)) from e
        return [r["course_name"] for r in rows]

    async def get_hole_stats_for_user(self, user_id: str) -> List[HoleStat]:
        """Every recorded hole across all of a user's rounds."""
        try:
            async with self._pool.acquire() as conn:
                rows = await conn.fetch(
                    """SELECT hs.* FROM public.hole_stats hs
                       JOIN public.rounds r ON r.id = hs.round_id
                       WHERE r.user_id = $1
                       ORDER BY r.played_at ASC NULLS LAST, hs.hole_number""",
                    UUID(user_id),
                )
                return [hole_stat_from_row(r) for r in rows]
        except FETCH_ERRORS as e:
            logger.exception("Failed to load hole stats for user %s", user_id)
            raise DataFetchError(str(e)) from e

    # ================================================================
    # Update
    # ================================================================

    async def update_hole_stats(self, round_id: str, holes: List[HoleStat]) -> Round:
        """Apply edited hole stats and recompute the round's total score.

        Returns the updated Round.
        """
        try:
            async with self._pool.acquire() as conn:
                round_row = await conn.fetchrow(
                    "SELECT * FROM public.rounds WHERE id = $1", UUID(round_id)
                )
                if not round_row:
                    raise NotFoundError(f"Round {round_id} not found")

                async with conn.transaction():
                    await conn.executemany(
                        """UPDATE public.hole_stats
                           SET score = $3, fir = $4, fir_direction = $5,
                               gir = $6, gir_direction = $7,
                               scramble = $8, putts = $9,
                               tee_club = $10, approach_club = $11,
                               scramble_club = $12, scramble_shot_type = $13
                           WHERE round_id = $1 AND hole_number = $2""",
                        [hole_stat_to_row(h, UUID(round_id)) for h in holes],
                    )

                    hole_rows = await conn.fetch(
                        """SELECT * FROM public.hole_stats
                           WHERE round_id = $1 ORDER BY hole_number""",
                        round_row["id"],
                    )
                    updated = round_from_rows(round_row, hole_rows)
                    updated.total_score = updated.calculate_total_score()
                    await conn.execute(
                        "UPDATE public.rounds SET total_score = $2 WHERE id = $1",
                        round_row["id"], updated.total_score,
                    )
        except FETCH_ERRORS as e:
            logger.exception("Failed to update holes on round %s", round_id)
            raise DataFetchError(str(e)) from e
        logger.info(
            "Updated %d holes on round %s (total=%s)", len(holes), round_id, updated.total_score
        )
        return updated

    # ================================================================
    # Delete
    # ================================================================

    async def delete_round(self, round_id: str) -> bool:
        """Delete round and its hole_stats (CASCADE). Returns True if deleted."""
        try:
            async with self._pool.acquire() as conn:
                result = await conn.execute(
                    "DELETE FROM public.rounds WHERE id = $1", UUID(round_id)
                )
        except FETCH_ERRORS as e:
            logger.exception("Failed to delete round %s", round_id)
            raise DataFetchError(str(e)) from e
        return result == "DELETE 1"
