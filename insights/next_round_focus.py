"""Message 3: what to do next round.

Combines how many stats went unrecorded with the weak-area signal from the
strokes-gained selection. Output always starts with ``Next round:`` and is one
sentence, or two when a tracking clause is included.
"""

import logging
from typing import Any, Dict, Tuple

from insights import templates
from insights.config import DEFAULT_TUNING, SelectionTuning
from insights.copy_guard import assert_clean_copy
from insights.formatting import fill_template
from insights.missing_stats import format_missing_list, missing_count
from insights.outcomes import (
    ActionDecision,
    AreaAction,
    GenericAction,
    TrackAndPlayGeneric,
    TrackOneAndAct,
)
from insights.sg_selection import MeasuredSelection
from insights.variants import VariantOptions, pick_variant
from models.facts import MissingStats

logger = logging.getLogger(__name__)

MESSAGE_KEY = "message3"


def classify_next_round_focus(
    missing: MissingStats,
    selection: MeasuredSelection,
    tuning: SelectionTuning = DEFAULT_TUNING,
) -> ActionDecision:
    """Pick the message-3 outcome.

    ``tuning`` must already be scaled for holes played; its
    ``measured_leak_strong`` decides when a leak is clear enough to name even
    though the two lowest areas sit close together.
    """
    count = missing_count(missing)
    opportunity = selection.opportunity
    strong_leak = opportunity is not None and opportunity.value <= tuning.measured_leak_strong

    if count >= 2:
        return TrackAndPlayGeneric(missing_list=format_missing_list(missing))

    if count == 1:
        area = None
        if opportunity is not None and (selection.opportunity_is_weak or strong_leak):
            area = opportunity.name
        return TrackOneAndAct(missing_list=format_missing_list(missing), area=area)

    if opportunity is None or not selection.opportunity_is_weak:
        return GenericAction()
    if selection.weak_separation and not strong_leak:
        return GenericAction()
    return AreaAction(area=opportunity.name)


def _action_sentence(area, options: VariantOptions, outcome: str) -> Tuple[str, int]:
    if area is None:
        pool = templates.GENERIC_ACTION_VARIANTS
        child = options.child("m3action|generic")
    else:
        pool = templates.AREA_ACTION_VARIANTS[area]
        child = options.child(f"m3action|{area}")
    pick = pick_variant(outcome, pool, child)
    return pick.text, pick.index


def _tracking_sentence(missing_list: str, options: VariantOptions, outcome: str) -> Tuple[str, int]:
    pick = pick_variant(outcome, templates.TRACKING_CLAUSE_VARIANTS, options.child("m3track"))
    return fill_template(pick.text, {"missingList": missing_list}), pick.index


def render_next_round_focus(
    decision: ActionDecision, options: VariantOptions
) -> Tuple[str, Dict[str, Any]]:
    """Render the decision to text. Returns (text, trace)."""
    outcome = decision.code.value
    trace: Dict[str, Any] = {"outcome": outcome}

    parts = [templates.NEXT_ROUND_LEAD]
    if isinstance(decision, (TrackAndPlayGeneric, TrackOneAndAct)):
        tracking, tracking_index = _tracking_sentence(decision.missing_list, options, outcome)
        parts.append(tracking)
        trace["tracking_variant"] = tracking_index

    area = decision.area if isinstance(decision, (TrackOneAndAct, AreaAction)) else None
    action, action_index = _action_sentence(area, options, outcome)
    parts.append(action)
    trace["action_variant"] = action_index
    trace["area"] = area

    text = fill_template(" ".join(parts), {})
    assert_clean_copy(text, message_key=MESSAGE_KEY, outcome=outcome, variant_index=action_index)
    logger.debug("Next round focus %s (area=%s)", outcome, area)
    return text, trace
