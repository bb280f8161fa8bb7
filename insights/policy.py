"""Standard post-round policy: classify and render the three messages.

Message 1 says what defined the round, message 2 what it meant for scoring,
message 3 (see ``next_round_focus``) what to do next time. Classification is
split from rendering so tests can assert on outcome codes without caring
which phrasing variant came out.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from insights import templates
from insights.config import (
    DEFAULT_TUNING,
    RESIDUAL_SENTENCE_THRESHOLD,
    SCORE_CONTEXT_MATCH_DELTA,
    SCORE_ONLY_NEAR_DELTA,
    SG_NEUTRAL_EPS,
    SelectionTuning,
    stroke_scale,
    weakness_threshold,
)
from insights.copy_guard import assert_clean_copy
from insights.exceptions import UnknownBandError
from insights.formatting import (
    evidence_token,
    fill_template,
    format_abs_one_decimal,
    format_one_decimal,
    format_score_line,
    format_signed_one_decimal,
    is_finite,
    round_one,
    stroke_word,
)
from insights.next_round_focus import classify_next_round_focus, render_next_round_focus
from insights.outcomes import (
    DefiningDecision,
    ImplicationDecision,
    OpportunityLeak,
    OpportunityNeutral,
    OpportunityPositive,
    ScoreBucket,
    ScoreOnlyRound,
    ScoreVersusAverage,
    StandoutGainedStrokes,
    StandoutLostStrokes,
    StandoutNearEven,
)
from insights.sg_selection import MeasuredSelection, select_measured
from insights.variants import VariantOptions, pick_variant
from models.facts import PerformanceBand, RoundPerformanceFacts
from models.insight import InsightLevel, InsightMessage, PostRoundInsights

logger = logging.getLogger(__name__)

_GREAT_BANDS = {PerformanceBand.ABOVE, PerformanceBand.GREAT}
_SUCCESS_BANDS = {
    PerformanceBand.TOUGH,
    PerformanceBand.BELOW,
    PerformanceBand.EXPECTED,
    PerformanceBand.UNKNOWN,
}


def band_level(band: Any) -> InsightLevel:
    """Severity for message 1. Raises UnknownBandError outside the closed enum."""
    try:
        band = PerformanceBand(band)
    except ValueError as e:
        raise UnknownBandError(f"Unknown performance band: {band!r}") from e
    if band in _GREAT_BANDS:
        return InsightLevel.GREAT
    if band in _SUCCESS_BANDS:
        return InsightLevel.SUCCESS
    raise UnknownBandError(f"Unhandled performance band: {band!r}")


def build_score_sentence(score: float, to_par: float, avg_score: Optional[float]) -> str:
    """"You shot 75 (+3), which is 1.0 stroke above your recent average of 74.0." """
    line = format_score_line(score, to_par)
    if not is_finite(avg_score):
        return f"You shot {line}."

    avg_text = format_one_decimal(avg_score)
    delta = score - avg_score
    if abs(delta) < SCORE_CONTEXT_MATCH_DELTA:
        return f"You shot {line}, which matches your recent average of {avg_text}."

    delta_text = format_abs_one_decimal(delta)
    word = stroke_word(round_one(abs(delta)))
    if delta > 0:
        return f"You shot {line}, which is {delta_text} {word} above your recent average of {avg_text}."
    return f"You shot {line}, which is {delta_text} {word} better than your recent average of {avg_text}."


# ================================================================
# Message 1
# ================================================================

def classify_defining(selection: MeasuredSelection, neutral_eps: float = SG_NEUTRAL_EPS) -> DefiningDecision:
    best = selection.best
    if best is None:
        return ScoreOnlyRound()

    single = selection.component_count == 1
    if selection.residual_dominant:
        return StandoutNearEven(best=best, single=single, ambiguous=True)
    if best.value < -neutral_eps:
        return StandoutLostStrokes(best=best, single=single)
    if best.value > neutral_eps:
        return StandoutGainedStrokes(best=best, single=single)
    return StandoutNearEven(best=best, single=single)


def _defining_pool(decision: DefiningDecision):
    if isinstance(decision, ScoreOnlyRound):
        return templates.M1_A_VARIANTS
    if isinstance(decision, StandoutLostStrokes):
        return templates.M1_SINGLE_B_VARIANTS if decision.single else templates.M1_B_VARIANTS
    if isinstance(decision, StandoutGainedStrokes):
        if decision.single:
            return templates.M1_SINGLE_C_VARIANTS
        if decision.best.name == "penalties":
            return templates.M1_C_PENALTIES_VARIANTS
        return templates.M1_C_VARIANTS
    if decision.ambiguous:
        return templates.M1_SINGLE_D_AMBIGUOUS_VARIANTS if decision.single else templates.M1_D_AMBIGUOUS_VARIANTS
    return templates.M1_SINGLE_D_VARIANTS if decision.single else templates.M1_D_VARIANTS


def render_defining(
    decision: DefiningDecision, facts: RoundPerformanceFacts, options: VariantOptions
) -> Tuple[str, Dict[str, Any]]:
    outcome = decision.code.value
    pick = pick_variant(outcome, _defining_pool(decision), options.child("m1"))

    replacements = {
        "scoreSentence": build_score_sentence(facts.score, facts.to_par, facts.avg_score),
    }
    if not isinstance(decision, ScoreOnlyRound):
        best = decision.best
        replacements.update({
            "BestLabel": best.label,
            "bestAbs1": format_abs_one_decimal(best.value),
            "bestSigned1": format_signed_one_decimal(best.value),
            "evidence": evidence_token(best, facts.round_evidence),
        })

    text = fill_template(pick.text, replacements)
    assert_clean_copy(text, message_key="message1", outcome=outcome, variant_index=pick.index)
    return text, {"outcome": outcome, "variant": pick.index}


# ================================================================
# Message 2
# ================================================================

def score_bucket(score: float, avg_score: Optional[float], near_delta: float) -> ScoreBucket:
    """better / near / worse against the recent average; near when there is none."""
    if not is_finite(avg_score):
        return "near"
    delta = score - avg_score
    if delta > near_delta:
        return "worse"
    if delta < -near_delta:
        return "better"
    return "near"


def classify_implication(
    facts: RoundPerformanceFacts,
    selection: MeasuredSelection,
    neutral_eps: float = SG_NEUTRAL_EPS,
    near_delta: float = SCORE_ONLY_NEAR_DELTA,
) -> ImplicationDecision:
    opportunity = selection.opportunity
    if selection.component_count < 2 or opportunity is None:
        return ScoreVersusAverage(
            bucket=score_bucket(facts.score, facts.avg_score, near_delta),
            measured_count=selection.component_count,
            has_baseline=is_finite(facts.avg_score),
        )
    if opportunity.value < -neutral_eps:
        return OpportunityLeak(opportunity=opportunity)
    if opportunity.value > neutral_eps:
        return OpportunityPositive(opportunity=opportunity)
    return OpportunityNeutral(opportunity=opportunity)


def implication_level(decision: ImplicationDecision) -> InsightLevel:
    if isinstance(decision, ScoreVersusAverage):
        return InsightLevel.WARNING if decision.bucket == "worse" else InsightLevel.SUCCESS
    if isinstance(decision, OpportunityLeak):
        return InsightLevel.WARNING
    return InsightLevel.SUCCESS


_BUCKET_POOLS = {
    "better": templates.M2_A_BETTER_VARIANTS,
    "near": templates.M2_A_NEAR_VARIANTS,
    "worse": templates.M2_A_WORSE_VARIANTS,
}


def _implication_body(
    decision: ImplicationDecision, facts: RoundPerformanceFacts, options: VariantOptions
) -> Tuple[str, int]:
    outcome = decision.code.value
    child = options.child("m2")

    if isinstance(decision, ScoreVersusAverage):
        pool = _BUCKET_POOLS[decision.bucket] if decision.has_baseline else templates.M2_A_NO_BASELINE_VARIANTS
        lead = pick_variant(outcome, pool, child)
        caveats = (
            templates.M2_A_SCORE_ONLY_CAVEATS
            if decision.measured_count == 0
            else templates.M2_A_SINGLE_CAVEATS
        )
        caveat = pick_variant(outcome, caveats, options.child("m2caveat"))
        return f"{lead.text} {caveat.text}", lead.index

    opportunity = decision.opportunity
    is_penalties = opportunity.name == "penalties"
    if isinstance(decision, OpportunityLeak):
        pool = templates.M2_D_PENALTIES_VARIANTS if is_penalties else templates.M2_D_VARIANTS
    elif isinstance(decision, OpportunityPositive):
        pool = templates.M2_E_PENALTIES_VARIANTS if is_penalties else templates.M2_E_VARIANTS
    else:
        pool = templates.M2_C_VARIANTS

    pick = pick_variant(outcome, pool, child)
    text = fill_template(pick.text, {
        "OppLabel": opportunity.label,
        "oppAbs1": format_abs_one_decimal(opportunity.value),
        "oppSigned1": format_signed_one_decimal(opportunity.value),
        "evidence": evidence_token(opportunity, facts.round_evidence),
        "followUp": templates.M2_E_FOLLOW_UP,
    })
    return text, pick.index


def should_add_residual_sentence(
    residual: Optional[float], residual_dominant: bool, threshold: float = RESIDUAL_SENTENCE_THRESHOLD
) -> bool:
    if not is_finite(residual):
        return False
    return abs(residual) >= threshold or residual_dominant


def build_residual_sentence(residual: float, outcome: str, options: VariantOptions) -> str:
    """Positive residuals read as signed gains, negative ones as a plain count of strokes lost."""
    pool = templates.RESIDUAL_POSITIVE_VARIANTS if residual > 0 else templates.RESIDUAL_NEGATIVE_VARIANTS
    pick = pick_variant(outcome, pool, options.child("m2residual"))
    return fill_template(pick.text, {
        "residualSigned1": format_signed_one_decimal(residual),
        "residualAbs1": format_abs_one_decimal(residual),
    })


def render_implication(
    decision: ImplicationDecision,
    facts: RoundPerformanceFacts,
    selection: MeasuredSelection,
    options: VariantOptions,
    residual_threshold: float = RESIDUAL_SENTENCE_THRESHOLD,
) -> Tuple[str, Dict[str, Any]]:
    outcome = decision.code.value
    body, index = _implication_body(decision, facts, options)

    residual = facts.strokes_gained.residual
    with_residual = should_add_residual_sentence(residual, selection.residual_dominant, residual_threshold)
    if with_residual:
        body = f"{body} {build_residual_sentence(residual, outcome, options)}"

    text = fill_template(body, {})
    assert_clean_copy(text, message_key="message2", outcome=outcome, variant_index=index)
    return text, {"outcome": outcome, "variant": index, "residual_sentence": with_residual}


# ================================================================
# Composition
# ================================================================

def build_standard_insights(
    facts: RoundPerformanceFacts,
    options: VariantOptions = VariantOptions(),
    tuning: SelectionTuning = DEFAULT_TUNING,
) -> PostRoundInsights:
    """Classify and render all three messages for a post-onboarding round."""
    scale = stroke_scale(facts.holes_played)
    scaled_tuning = tuning.scaled(scale)
    neutral_eps = SG_NEUTRAL_EPS * scale

    selection = select_measured(
        facts.strokes_gained, weakness_threshold(facts.holes_played), scaled_tuning
    )

    level_1 = band_level(facts.band)
    defining = classify_defining(selection, neutral_eps)
    text_1, trace_1 = render_defining(defining, facts, options)

    implication = classify_implication(
        facts, selection, neutral_eps, SCORE_ONLY_NEAR_DELTA * scale
    )
    text_2, trace_2 = render_implication(
        implication, facts, selection, options, RESIDUAL_SENTENCE_THRESHOLD * scale
    )

    action = classify_next_round_focus(facts.missing, selection, scaled_tuning)
    text_3, trace_3 = render_next_round_focus(action, options)

    logger.debug(
        "Post-round outcomes %s / %s / %s",
        defining.code.value, implication.code.value, action.code.value,
    )

    messages = [
        InsightMessage(text=text_1, level=level_1, outcome=defining.code.value),
        InsightMessage(text=text_2, level=implication_level(implication), outcome=implication.code.value),
        InsightMessage(text=text_3, level=InsightLevel.INFO, outcome=action.code.value),
    ]
    trace = {
        "holes_played": facts.holes_played,
        "stroke_scale": scale,
        "missing": facts.missing.model_dump(),
        "components": [c.model_dump() for c in selection.components],
        "best": selection.best.name if selection.best else None,
        "opportunity": selection.opportunity.name if selection.opportunity else None,
        "opportunity_is_weak": selection.opportunity_is_weak,
        "residual_dominant": selection.residual_dominant,
        "weak_separation": selection.weak_separation,
        "messages": [trace_1, trace_2, trace_3],
    }
    return PostRoundInsights(messages=messages, trace=trace)
