"""API request models for the edit-round flow."""

from pydantic import BaseModel, Field
from typing import List, Optional

from models import (
    FairwayDirection,
    GreenDirection,
    HoleStat,
    ScrambleOutcome,
    ScrambleShotType,
)


class HoleStatUpdate(BaseModel):
    """Edited statistics for one hole; every field is replaced. Par is not editable."""
    hole_number: int = Field(..., ge=1)
    score: Optional[int] = Field(None, ge=1)
    fir: Optional[bool] = None
    fir_direction: Optional[FairwayDirection] = None
    gir: Optional[bool] = None
    gir_direction: Optional[GreenDirection] = None
    scramble: Optional[ScrambleOutcome] = None
    putts: Optional[int] = Field(None, ge=0)
    tee_club: Optional[str] = None
    approach_club: Optional[str] = None
    scramble_club: Optional[str] = None
    scramble_shot_type: Optional[ScrambleShotType] = None

    def to_hole_stat(self, round_id: str) -> HoleStat:
        return HoleStat(round_id=round_id, **self.model_dump())


class UpdateHolesRequest(BaseModel):
    holes: List[HoleStatUpdate]
