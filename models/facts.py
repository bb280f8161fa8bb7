from enum import Enum
from pydantic import Field
from typing import Literal, Optional

from .base import FrozenGolfModel
from .strokes_gained import StrokesGained

ComponentName = Literal["off_tee", "approach", "putting", "penalties"]


class PerformanceBand(str, Enum):
    """Coarse round quality bucket, derived from total strokes gained."""
    TOUGH = "tough"
    BELOW = "below"
    EXPECTED = "expected"
    ABOVE = "above"
    GREAT = "great"
    UNKNOWN = "unknown"


class MissingStats(FrozenGolfModel):
    """True for each advanced stat that was not recorded."""
    fir: bool = False
    gir: bool = False
    putts: bool = False
    penalties: bool = False


class RoundEvidence(FrozenGolfModel):
    """Raw counts quoted next to a named area ("8/14 fairways")."""
    fairways_hit: Optional[int] = Field(None, ge=0)
    fairways_possible: Optional[int] = Field(None, ge=0)
    greens_hit: Optional[int] = Field(None, ge=0)
    greens_possible: Optional[int] = Field(None, ge=0)
    putts_total: Optional[int] = Field(None, ge=0)
    penalties_total: Optional[int] = Field(None, ge=0)


class MeasuredComponent(FrozenGolfModel):
    """A tracked strokes-gained area. Positive = strokes gained."""
    name: ComponentName
    label: str
    value: float


class RoundPerformanceFacts(FrozenGolfModel):
    """Everything the insight engine knows about one round."""
    score: float
    to_par: float
    avg_score: Optional[float] = None
    band: PerformanceBand = PerformanceBand.UNKNOWN
    holes_played: Literal[9, 18] = 18
    round_evidence: RoundEvidence = Field(default_factory=RoundEvidence)
    missing: MissingStats = Field(default_factory=MissingStats)
    strokes_gained: StrokesGained = Field(default_factory=StrokesGained)
