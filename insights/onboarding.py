"""Onboarding policy for a user's first three rounds.

There is no baseline yet, so these rounds are compared only to the round
before them. The copy is fixed (no variant rotation) and never talks about
strokes gained or averages.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from insights import templates
from insights.config import ONBOARDING_ROUNDS, ONBOARDING_SAME_DELTA
from insights.copy_guard import assert_clean_copy
from insights.exceptions import OnboardingRoundError
from insights.formatting import (
    fill_template,
    format_score_line,
    format_whole_or_one_decimal,
    is_finite,
    stroke_word,
)
from insights.outcomes import ONBOARDING_CODES, OnboardingDecision, OnboardingTrend, OutcomeCode
from models.insight import InsightLevel, InsightMessage, PostRoundInsights
from models.round import Round

logger = logging.getLogger(__name__)

ONBOARDING_LEVELS = (InsightLevel.SUCCESS, InsightLevel.INFO, InsightLevel.INFO)


def is_onboarding_round(round_number: Optional[int]) -> bool:
    return round_number is not None and 1 <= round_number <= ONBOARDING_ROUNDS


# ================================================================
# Round ordinals
# ================================================================

def _round_sort_key(round_: Round):
    # Missing values sort last; flags keep None out of comparisons
    return (
        round_.date is None, round_.date,
        round_.created_at is None, round_.created_at,
        round_.id is None, round_.id or "",
    )


def order_rounds(rounds: Sequence[Round]) -> List[Round]:
    """Strict order by date, then creation time, then id."""
    return sorted(rounds, key=_round_sort_key)


def round_ordinal(rounds: Sequence[Round], round_id: str) -> Tuple[Optional[int], Optional[Round]]:
    """1-based position of ``round_id`` among ``rounds`` and the round before it.

    Returns (None, None) when the round is not in the list.
    """
    ordered = order_rounds(rounds)
    for position, round_ in enumerate(ordered):
        if round_.id is not None and str(round_.id) == str(round_id):
            previous = ordered[position - 1] if position > 0 else None
            return position + 1, previous
    return None, None


# ================================================================
# Classification and copy
# ================================================================

def classify_trend(score: float, previous_score: Optional[float]) -> OnboardingTrend:
    """better / same / worse against the previous round, with a 0.1 stroke dead zone."""
    if not is_finite(previous_score):
        return "same"
    delta = score - previous_score
    if delta < -ONBOARDING_SAME_DELTA:
        return "better"
    if delta > ONBOARDING_SAME_DELTA:
        return "worse"
    return "same"


def classify_onboarding(
    round_number: int, score: float, previous_score: Optional[float]
) -> OnboardingDecision:
    if not is_onboarding_round(round_number):
        raise OnboardingRoundError(f"Unsupported onboarding round number: {round_number}")
    if round_number == 1:
        return OnboardingDecision(code=OutcomeCode.OB_1, round_number=1)

    trend = classify_trend(score, previous_score)
    delta = score - previous_score if is_finite(previous_score) else 0.0
    return OnboardingDecision(
        code=ONBOARDING_CODES[(round_number, trend)],
        round_number=round_number,
        trend=trend,
        delta=delta,
    )


def _onboarding_copy(decision: OnboardingDecision) -> Tuple[str, str, str]:
    if decision.round_number == 1:
        return templates.ONBOARDING_FIRST_ROUND
    if decision.round_number == 2:
        return (
            templates.ONBOARDING_SECOND_ROUND[decision.trend],
            templates.ONBOARDING_SECOND_ROUND_FOLLOW[decision.trend],
            templates.ONBOARDING_SECOND_ROUND_NEXT,
        )
    return (
        templates.ONBOARDING_THIRD_ROUND[decision.trend],
        templates.ONBOARDING_THIRD_ROUND_FOLLOW,
        templates.ONBOARDING_THIRD_ROUND_NEXT,
    )


def build_onboarding_insights(
    round_number: int,
    score: float,
    to_par: float,
    previous_score: Optional[float] = None,
) -> PostRoundInsights:
    """Three fixed messages for onboarding round 1, 2 or 3.

    Raises OnboardingRoundError for any other round number.
    """
    decision = classify_onboarding(round_number, score, previous_score)
    outcome = decision.code.value
    replacements = {
        "scoreLine": format_score_line(score, to_par),
        "delta": format_whole_or_one_decimal(decision.delta),
        "strokeWord": stroke_word(float(format_whole_or_one_decimal(decision.delta))),
    }

    messages = []
    for template, level in zip(_onboarding_copy(decision), ONBOARDING_LEVELS):
        text = fill_template(template, replacements)
        assert_clean_copy(text, message_key="onboarding", outcome=outcome)
        messages.append(InsightMessage(text=text, level=level, outcome=outcome))

    logger.debug("Onboarding round %s -> %s", round_number, outcome)
    return PostRoundInsights(
        messages=messages,
        trace={
            "onboarding": True,
            "round_number": round_number,
            "previous_score": previous_score,
            "trend": decision.trend,
        },
    )
