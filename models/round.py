from datetime import datetime
from pydantic import Field, model_validator
from typing import Literal, Optional

from .base import BaseGolfModel
from .strokes_gained import StrokesGained


class Round(BaseGolfModel):
    """A logged round: score, par and the optional advanced stats."""
    id: Optional[str] = None
    user_id: Optional[str] = None
    date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    score: int = Field(..., ge=9, le=250)
    par: int = Field(72, ge=27, le=80)
    holes_played: Literal[9, 18] = 18
    course_name: Optional[str] = None

    # Advanced stats - None means not tracked
    fir_hit: Optional[int] = Field(None, ge=0, le=18)
    fir_possible: Optional[int] = Field(None, ge=0, le=18)
    gir_hit: Optional[int] = Field(None, ge=0, le=18)
    putts: Optional[int] = Field(None, ge=0, le=100)
    penalties: Optional[int] = Field(None, ge=0, le=40)

    strokes_gained: Optional[StrokesGained] = None

    @model_validator(mode='after')
    def validate_stat_consistency(self):
        if self.gir_hit is not None and self.gir_hit > self.holes_played:
            raise ValueError(
                f"GIR ({self.gir_hit}) cannot exceed holes played ({self.holes_played})"
            )
        if (self.fir_hit is not None and self.fir_possible is not None
                and self.fir_hit > self.fir_possible):
            raise ValueError(
                f"Fairways hit ({self.fir_hit}) cannot exceed fairways possible ({self.fir_possible})"
            )
        return self

    @property
    def to_par(self) -> int:
        """Score relative to par (+3, -1, etc.)."""
        return self.score - self.par

    @property
    def score_per_hole(self) -> float:
        return self.score / self.holes_played
