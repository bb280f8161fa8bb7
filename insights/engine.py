"""Entry point for the post-round insight engine.

Pure and synchronous: no I/O, no shared state. Identical inputs always give
byte-identical output, so concurrent callers can compute the same round
without coordination.
"""

import logging
from typing import Optional

from insights.config import DEFAULT_TUNING, MODEL_USED, SelectionTuning
from insights.onboarding import build_onboarding_insights, is_onboarding_round
from insights.policy import build_standard_insights
from insights.variants import VariantOptions, build_variant_seed
from models.facts import RoundPerformanceFacts
from models.insight import PostRoundInsights

logger = logging.getLogger(__name__)


def generate_post_round_insights(
    facts: RoundPerformanceFacts,
    *,
    round_number: Optional[int] = None,
    previous_score: Optional[float] = None,
    total_rounds: Optional[int] = None,
    round_id: Optional[str] = None,
    variant_offset: int = 0,
    fixed_variant_index: Optional[int] = None,
    tuning: SelectionTuning = DEFAULT_TUNING,
) -> PostRoundInsights:
    """Three ordered messages, levels and outcome codes for one round.

    Args:
        facts: Resolved facts for the round.
        round_number: 1-based ordinal of the round among the user's rounds.
            Rounds 1-3 use the onboarding policy.
        previous_score: Score of the round immediately before, for onboarding.
        total_rounds: Number of rounds the user has logged (trace only).
        round_id: Seeds phrasing rotation. Without it, ``variant_offset``
            alone picks the variant.
        variant_offset: Persisted offset; bumping it is the only way to get
            new phrasing for the same facts.
        fixed_variant_index: Force one index in every pool (tests).
        tuning: Residual dominance and separation tunables, 18-hole values.

    Returns:
        PostRoundInsights with a trace of the intermediate signals.
    """
    seed = build_variant_seed(round_id)
    context = {
        "round_number": round_number,
        "total_rounds": total_rounds,
        "seed": seed,
        "variant_offset": variant_offset,
        "model_used": MODEL_USED,
    }

    if is_onboarding_round(round_number):
        result = build_onboarding_insights(
            round_number, facts.score, facts.to_par, previous_score
        )
    else:
        options = VariantOptions(
            seed=seed, offset=variant_offset, fixed_index=fixed_variant_index
        )
        result = build_standard_insights(facts, options, tuning)
        context["onboarding"] = False

    logger.debug("Generated insights %s for round %s", result.outcomes, round_id)
    return result.model_copy(update={"trace": {**result.trace, **context}})
