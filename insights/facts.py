"""Build ``RoundPerformanceFacts`` from a logged round and the rounds before it."""

import logging
from typing import List, Optional, Sequence

from insights.config import (
    BASELINE_WINDOW,
    SG_ABOVE_EXPECTATIONS,
    SG_BELOW_EXPECTATIONS,
    SG_EXCEPTIONAL,
    SG_TOUGH_ROUND,
    stroke_scale,
)
from insights.formatting import is_finite
from insights.missing_stats import get_missing_stats
from insights.onboarding import order_rounds
from models.facts import MissingStats, PerformanceBand, RoundEvidence, RoundPerformanceFacts
from models.round import Round
from models.strokes_gained import StrokesGained

logger = logging.getLogger(__name__)


def classify_band(total_sg: Optional[float], holes_played: Optional[int] = 18) -> PerformanceBand:
    """Coarse round quality from total strokes gained.

    The cut-offs are 18-hole values and shrink with ``stroke_scale`` so a
    9-hole round lands in the same band as the 18-hole round it projects to.
    """
    if not is_finite(total_sg):
        return PerformanceBand.UNKNOWN
    scale = stroke_scale(holes_played)
    if total_sg <= SG_TOUGH_ROUND * scale:
        return PerformanceBand.TOUGH
    if total_sg <= SG_BELOW_EXPECTATIONS * scale:
        return PerformanceBand.BELOW
    if total_sg >= SG_EXCEPTIONAL * scale:
        return PerformanceBand.GREAT
    if total_sg >= SG_ABOVE_EXPECTATIONS * scale:
        return PerformanceBand.ABOVE
    return PerformanceBand.EXPECTED


def prior_rounds(round_: Round, history: Sequence[Round]) -> List[Round]:
    """Rounds strictly before ``round_`` in date / created / id order."""
    others = [r for r in history if r is not round_ and (r.id is None or r.id != round_.id)]
    ordered = order_rounds(others + [round_])
    position = next(i for i, r in enumerate(ordered) if r is round_)
    return ordered[:position]


def baseline_average(round_: Round, history: Sequence[Round], window: int = BASELINE_WINDOW) -> Optional[float]:
    """Average of the last ``window`` prior rounds, scaled to this round's holes.

    Scores are compared per hole so 9- and 18-hole rounds share a baseline.
    """
    previous = prior_rounds(round_, history)[-window:]
    if not previous:
        return None
    per_hole = sum(r.score_per_hole for r in previous) / len(previous)
    return per_hole * round_.holes_played


def build_evidence(round_: Round) -> RoundEvidence:
    return RoundEvidence(
        fairways_hit=round_.fir_hit,
        fairways_possible=round_.fir_possible if round_.fir_hit is not None else None,
        greens_hit=round_.gir_hit,
        greens_possible=round_.holes_played if round_.gir_hit is not None else None,
        putts_total=round_.putts,
        penalties_total=round_.penalties,
    )


def tracked_strokes_gained(sg: Optional[StrokesGained], missing: MissingStats) -> StrokesGained:
    """Drop components whose underlying stat was not recorded."""
    if sg is None:
        return StrokesGained()
    return StrokesGained(
        total=sg.total,
        off_tee=None if missing.fir else sg.off_tee,
        approach=None if missing.gir else sg.approach,
        putting=None if missing.putts else sg.putting,
        penalties=None if missing.penalties else sg.penalties,
        residual=sg.residual,
    )


def build_round_facts(round_: Round, history: Sequence[Round] = ()) -> RoundPerformanceFacts:
    """Everything the engine needs for ``round_``.

    ``history`` is the user's other rounds; it may include ``round_`` itself.
    """
    missing = get_missing_stats(
        fir_hit=round_.fir_hit,
        gir_hit=round_.gir_hit,
        putts=round_.putts,
        penalties=round_.penalties,
    )
    sg = tracked_strokes_gained(round_.strokes_gained, missing)
    facts = RoundPerformanceFacts(
        score=round_.score,
        to_par=round_.to_par,
        avg_score=baseline_average(round_, history),
        band=classify_band(sg.total, round_.holes_played),
        holes_played=round_.holes_played,
        round_evidence=build_evidence(round_),
        missing=missing,
        strokes_gained=sg,
    )
    logger.debug("Built facts for round %s: band=%s avg=%s", round_.id, facts.band.value, facts.avg_score)
    return facts
