"""Round endpoints for the view / edit / delete flows."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_db
from api.schemas import UpdateHolesRequest
from database.db_manager import DatabaseManager
from models import Round

router = APIRouter()


@router.get("/{round_id}", response_model=Round)
async def get_round(round_id: UUID, db: DatabaseManager = Depends(get_db)):
    round_ = await db.rounds.get_round(str(round_id))
    if not round_:
        raise HTTPException(404, "Round not found")
    return round_


@router.put("/{round_id}/holes", response_model=Round)
async def update_round_holes(
    round_id: UUID, body: UpdateHolesRequest, db: DatabaseManager = Depends(get_db)
):
    holes = [h.to_hole_stat(str(round_id)) for h in body.holes]
    return await db.rounds.update_hole_stats(str(round_id), holes)


@router.delete("/{round_id}", status_code=204)
async def delete_round(round_id: UUID, db: DatabaseManager = Depends(get_db)):
    deleted = await db.rounds.delete_round(str(round_id))
    if not deleted:
        raise HTTPException(404, "Round not found")
