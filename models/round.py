from datetime import datetime
from pydantic import Field
from typing import List, Optional

from .base import BaseGolfModel
from .hole_stat import HoleStat


class Round(BaseGolfModel):
    """A finished round of golf and its per-hole statistics."""
    id: str
    user_id: Optional[str] = None
    course_name: str
    course_id: Optional[str] = None
    total_score: Optional[int] = None
    played_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    holes: List[HoleStat] = Field(default_factory=list)

    def course_par(self) -> Optional[int]:
        """Sum of recorded hole pars. None when no hole carries a par."""
        pars = [h.par for h in self.holes if h.par is not None]
        return sum(pars) if pars else None

    def calculate_total_score(self) -> Optional[int]:
        """Recompute total strokes from the hole scores."""
        scores = [h.score for h in self.holes if h.score is not None]
        return sum(scores) if scores else None

    def differential(self) -> Optional[int]:
        """Total score minus course par, used as the raw handicap signal."""
        course_par = self.course_par()
        if self.total_score is None or not course_par:
            return None
        return self.total_score - course_par

    def bucket_date(self, fallback: datetime) -> datetime:
        """Date used to place the round in a time bucket."""
        return self.played_at or self.created_at or fallback
