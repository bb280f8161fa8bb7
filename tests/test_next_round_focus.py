import itertools
import re

import pytest

from insights.config import DEFAULT_TUNING
from insights.next_round_focus import classify_next_round_focus, render_next_round_focus
from insights.outcomes import AreaAction, GenericAction, TrackAndPlayGeneric, TrackOneAndAct
from insights.sg_selection import MeasuredSelection
from insights.variants import VariantOptions
from models import MeasuredComponent, MissingStats

_SENTENCE_END = re.compile(r"[.!?](?=\s|$)")


def _component(name, value):
    labels = {"off_tee": "Off The Tee", "approach": "Approach", "putting": "Putting", "penalties": "Penalties"}
    return MeasuredComponent(name=name, label=labels[name], value=value)


def _selection(opportunity=None, *, weak=False, weak_separation=False):
    best = _component("off_tee", 0.5)
    components = [best] + ([opportunity] if opportunity else [])
    return MeasuredSelection(
        components=components,
        best=best,
        opportunity=opportunity,
        opportunity_is_weak=weak,
        weak_separation=weak_separation,
    )


def _sentence_count(text):
    body = text[len("Next round:"):]
    return len(_SENTENCE_END.findall(body))


WEAK_PUTTING = _selection(_component("putting", -2.1), weak=True)


# ================================================================
# Classification
# ================================================================

@pytest.mark.parametrize("tracked", list(itertools.product([True, False], repeat=4)))
def test_outcome_table_for_all_tracking_patterns(tracked):
    missing = MissingStats(**{key: not on for key, on in zip(["fir", "gir", "putts", "penalties"], tracked)})
    decision = classify_next_round_focus(missing, WEAK_PUTTING)
    missing_total = 4 - sum(tracked)

    if missing_total >= 2:
        assert decision.code.value == "M3-A"
    elif missing_total == 1:
        assert decision.code.value == "M3-B"
        assert decision.area == "putting"
    else:
        assert decision.code.value == "M3-C"


def test_one_missing_without_weak_area_is_generic():
    decision = classify_next_round_focus(MissingStats(putts=True), _selection())
    assert decision == TrackOneAndAct(missing_list="putts", area=None)


def test_one_missing_with_strong_leak_names_area():
    tuning = DEFAULT_TUNING.model_copy(update={"measured_leak_strong": -0.5})
    selection = _selection(_component("approach", -0.8), weak=False)
    decision = classify_next_round_focus(MissingStats(fir=True), selection, tuning)
    assert decision.area == "approach"


def test_nothing_missing_and_no_opportunity_is_generic():
    assert classify_next_round_focus(MissingStats(), _selection()) == GenericAction()


def test_opportunity_not_weak_is_generic():
    selection = _selection(_component("approach", -0.6), weak=False)
    assert classify_next_round_focus(MissingStats(), selection) == GenericAction()


def test_weak_separation_without_strong_leak_is_generic():
    selection = _selection(_component("approach", -0.9), weak=True, weak_separation=True)
    assert classify_next_round_focus(MissingStats(), selection) == GenericAction()


def test_weak_separation_with_strong_leak_names_area():
    selection = _selection(_component("approach", -1.5), weak=True, weak_separation=True)
    assert classify_next_round_focus(MissingStats(), selection) == AreaAction(area="approach")


def test_strong_leak_threshold_scales_for_nine_holes():
    selection = _selection(_component("approach", -0.6), weak=True, weak_separation=True)
    assert classify_next_round_focus(MissingStats(), selection, DEFAULT_TUNING) == GenericAction()
    assert classify_next_round_focus(
        MissingStats(), selection, DEFAULT_TUNING.scaled(0.5)
    ) == AreaAction(area="approach")


# ================================================================
# Rendering
# ================================================================

@pytest.mark.parametrize("decision", [
    GenericAction(),
    AreaAction(area="off_tee"),
    AreaAction(area="approach"),
    AreaAction(area="putting"),
    AreaAction(area="penalties"),
])
def test_action_only_is_one_sentence(decision):
    for offset in range(10):
        text, _ = render_next_round_focus(decision, VariantOptions(seed="post-round:s", offset=offset))
        assert text.startswith("Next round: ")
        assert _sentence_count(text) == 1, text


@pytest.mark.parametrize("decision", [
    TrackAndPlayGeneric(missing_list="FIR, GIR, putts, and penalties"),
    TrackOneAndAct(missing_list="GIR", area="putting"),
    TrackOneAndAct(missing_list="penalties", area=None),
])
def test_tracking_clause_adds_one_sentence(decision):
    for offset in range(10):
        text, _ = render_next_round_focus(decision, VariantOptions(seed="post-round:s", offset=offset))
        assert _sentence_count(text) == 2, text
        assert decision.missing_list in text


def test_putting_actions_are_about_pace_or_putts():
    for offset in range(10):
        text, trace = render_next_round_focus(AreaAction(area="putting"), VariantOptions(offset=offset))
        assert "putt" in text.lower() or "lag" in text.lower()
        assert trace["action_variant"] == offset


def test_tracking_and_action_use_separate_seeds():
    options = VariantOptions(seed="post-round:abc")
    _, trace = render_next_round_focus(TrackOneAndAct(missing_list="putts", area="approach"), options)
    assert set(trace) >= {"tracking_variant", "action_variant", "area"}
    assert trace["area"] == "approach"
