"""Closed outcome taxonomy.

Each message slot resolves to exactly one decision type. A decision carries
the data its renderer needs, so the classifier and the phrasing tables cannot
drift apart.
"""

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from models.facts import MeasuredComponent


class OutcomeCode(str, Enum):
    M1_A = "M1-A"
    M1_B = "M1-B"
    M1_C = "M1-C"
    M1_D = "M1-D"
    M2_A = "M2-A"
    M2_C = "M2-C"
    M2_D = "M2-D"
    M2_E = "M2-E"
    M3_A = "M3-A"
    M3_B = "M3-B"
    M3_C = "M3-C"
    M3_E = "M3-E"
    OB_1 = "OB-1"
    OB_2_BETTER = "OB-2-BETTER"
    OB_2_SAME = "OB-2-SAME"
    OB_2_WORSE = "OB-2-WORSE"
    OB_3_BETTER = "OB-3-BETTER"
    OB_3_SAME = "OB-3-SAME"
    OB_3_WORSE = "OB-3-WORSE"


ScoreBucket = Literal["better", "near", "worse"]


class _Decision(BaseModel):
    model_config = ConfigDict(frozen=True)


# ================================================================
# Message 1: what defined the round
# ================================================================

class ScoreOnlyRound(_Decision):
    """No tracked components: frame the round by score alone."""
    code: Literal[OutcomeCode.M1_A] = OutcomeCode.M1_A


class StandoutLostStrokes(_Decision):
    """Even the best tracked area lost strokes."""
    code: Literal[OutcomeCode.M1_B] = OutcomeCode.M1_B
    best: MeasuredComponent
    single: bool


class StandoutGainedStrokes(_Decision):
    code: Literal[OutcomeCode.M1_C] = OutcomeCode.M1_C
    best: MeasuredComponent
    single: bool


class StandoutNearEven(_Decision):
    """Best area near even, or untracked swing makes the diagnosis shaky."""
    code: Literal[OutcomeCode.M1_D] = OutcomeCode.M1_D
    best: MeasuredComponent
    single: bool
    ambiguous: bool = False


DefiningDecision = Union[ScoreOnlyRound, StandoutLostStrokes, StandoutGainedStrokes, StandoutNearEven]


# ================================================================
# Message 2: scoring implication
# ================================================================

class ScoreVersusAverage(_Decision):
    """Under two tracked areas: compare score to the recent average."""
    code: Literal[OutcomeCode.M2_A] = OutcomeCode.M2_A
    bucket: ScoreBucket
    measured_count: int
    has_baseline: bool = True


class OpportunityNeutral(_Decision):
    code: Literal[OutcomeCode.M2_C] = OutcomeCode.M2_C
    opportunity: MeasuredComponent


class OpportunityLeak(_Decision):
    code: Literal[OutcomeCode.M2_D] = OutcomeCode.M2_D
    opportunity: MeasuredComponent


class OpportunityPositive(_Decision):
    """Even the weakest tracked area finished net positive."""
    code: Literal[OutcomeCode.M2_E] = OutcomeCode.M2_E
    opportunity: MeasuredComponent


ImplicationDecision = Union[ScoreVersusAverage, OpportunityNeutral, OpportunityLeak, OpportunityPositive]


# ================================================================
# Message 3: next round action
# ================================================================

class TrackAndPlayGeneric(_Decision):
    """Two or more stats missing."""
    code: Literal[OutcomeCode.M3_A] = OutcomeCode.M3_A
    missing_list: str


class TrackOneAndAct(_Decision):
    """Exactly one stat missing. ``area`` is None when no weak area is known."""
    code: Literal[OutcomeCode.M3_B] = OutcomeCode.M3_B
    missing_list: str
    area: Optional[str] = None


class AreaAction(_Decision):
    code: Literal[OutcomeCode.M3_C] = OutcomeCode.M3_C
    area: str


class GenericAction(_Decision):
    code: Literal[OutcomeCode.M3_E] = OutcomeCode.M3_E


ActionDecision = Union[TrackAndPlayGeneric, TrackOneAndAct, AreaAction, GenericAction]


# ================================================================
# Onboarding
# ================================================================

OnboardingTrend = Literal["better", "same", "worse"]


class OnboardingDecision(_Decision):
    code: OutcomeCode
    round_number: int
    trend: Optional[OnboardingTrend] = None
    delta: float = 0.0


ONBOARDING_CODES = {
    (2, "better"): OutcomeCode.OB_2_BETTER,
    (2, "same"): OutcomeCode.OB_2_SAME,
    (2, "worse"): OutcomeCode.OB_2_WORSE,
    (3, "better"): OutcomeCode.OB_3_BETTER,
    (3, "same"): OutcomeCode.OB_3_SAME,
    (3, "worse"): OutcomeCode.OB_3_WORSE,
}
