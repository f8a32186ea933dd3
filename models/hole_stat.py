from enum import Enum
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class FairwayDirection(str, Enum):
    """Where the tee shot finished relative to the fairway."""
    HIT = "hit"
    LEFT = "left"
    RIGHT = "right"
    SHORT = "short"


class GreenDirection(str, Enum):
    """Where the approach shot finished relative to the green."""
    HIT = "hit"
    LEFT = "left"
    RIGHT = "right"
    LONG = "long"
    SHORT = "short"


class ScrambleOutcome(str, Enum):
    YES = "yes"
    NO = "no"
    NOT_APPLICABLE = "n/a"


class ScrambleShotType(str, Enum):
    PITCH = "pitch"
    CHIP = "chip"
    BUNKER = "bunker"


class HoleStat(BaseGolfModel):
    """A player's recorded statistics for a single hole of a round.

    Fairway fields stay None on par 3s. Scramble is only yes/no when the
    green was missed; "n/a" means no scramble was attempted.
    """
    round_id: Optional[str] = None
    hole_number: int = Field(..., ge=1)
    par: Optional[int] = Field(None, ge=3, le=6)
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

    def to_par(self) -> Optional[int]:
        """Score relative to par (+2, -1, etc.), None unless both are recorded."""
        if self.score is None or self.par is None:
            return None
        return self.score - self.par

    def is_scramble_attempt(self) -> bool:
        return self.scramble in (ScrambleOutcome.YES, ScrambleOutcome.NO)
