import pytest

from insights import templates
from insights.copy_guard import assert_clean_copy, find_banned_fragment
from insights.exceptions import BannedCopyError
from insights.formatting import fill_template

SAMPLE_SLOTS = {
    "scoreSentence": "You shot 75 (+3), which is 1.0 stroke above your recent average of 74.0.",
    "BestLabel": "Approach",
    "bestAbs1": "1.2",
    "bestSigned1": "+1.2",
    "evidence": " (9/18 greens in regulation)",
    "OppLabel": "Putting",
    "oppAbs1": "2.1",
    "oppSigned1": "-0.2",
    "followUp": templates.M2_E_FOLLOW_UP,
    "residualSigned1": "+1.6",
    "residualAbs1": "1.6",
    "missingList": "FIR, GIR, and putts",
    "scoreLine": "82 (+10)",
    "delta": "3",
    "strokeWord": "strokes",
}

VARIANT_POOLS = {
    name: value
    for name, value in vars(templates).items()
    if name.endswith(("_VARIANTS", "_CAVEATS")) and isinstance(value, tuple)
}


def _all_pools():
    for name, pool in VARIANT_POOLS.items():
        yield name, pool
    for area, pool in templates.AREA_ACTION_VARIANTS.items():
        yield f"action:{area}", pool


# ================================================================
# Pools
# ================================================================

@pytest.mark.parametrize("name, pool", list(_all_pools()))
def test_every_variant_renders_clean(name, pool):
    """Each phrasing, once filled, passes the guard."""
    for index, template in enumerate(pool):
        text = fill_template(template, SAMPLE_SLOTS)
        assert_clean_copy(text, message_key=name, outcome=name, variant_index=index)


@pytest.mark.parametrize("name, pool", list(_all_pools()))
def test_pools_hold_ten_distinct_variants(name, pool):
    assert len(pool) == 10
    assert len(set(pool)) == 10


def test_onboarding_copy_renders_clean():
    fixed = list(templates.ONBOARDING_FIRST_ROUND)
    fixed += list(templates.ONBOARDING_SECOND_ROUND.values())
    fixed += list(templates.ONBOARDING_SECOND_ROUND_FOLLOW.values())
    fixed += list(templates.ONBOARDING_THIRD_ROUND.values())
    fixed += [
        templates.ONBOARDING_SECOND_ROUND_NEXT,
        templates.ONBOARDING_THIRD_ROUND_FOLLOW,
        templates.ONBOARDING_THIRD_ROUND_NEXT,
    ]
    for template in fixed:
        assert_clean_copy(fill_template(template, SAMPLE_SLOTS), message_key="onboarding", outcome="OB")


# ================================================================
# Guard behavior
# ================================================================

@pytest.mark.parametrize("text, token", [
    ("Putting needs more focus next time.", "needs more focus"),
    ("You Could tighten up on the greens.", "could"),
    ("Work on this area before your next round.", "this area"),
    ("Putting and putting cost the most.", "Putting and putting"),
    ("Approach lost strokes and Approach gained none.", "Approach lost strokes and Approach"),
    ("Your off_tee value was low.", "off_tee"),
    ("You gained {bestAbs1} strokes.", "{"),
    ("You lost None strokes.", "None"),
    ("Putting lost NaN strokes.", "NaN"),
    ("Great round — keep going.", "—"),
    ("Based on your data, putting was weak.", "based on your data"),
])
def test_banned_fragments_found(text, token):
    assert find_banned_fragment(text) == token


def test_clean_text_passes():
    text = "Putting cost the most at 2.1 strokes (34 total putts)."
    assert find_banned_fragment(text) is None
    assert assert_clean_copy(text, message_key="message2", outcome="M2-D") == text


def test_guard_raises_with_context():
    with pytest.raises(BannedCopyError) as exc_info:
        assert_clean_copy(
            "The data shows a leak.", message_key="message2", outcome="M2-D", variant_index=4
        )
    err = exc_info.value
    assert err.token == "the data shows"
    assert err.message_key == "message2"
    assert err.outcome == "M2-D"
    assert err.variant_index == 4
    assert isinstance(err, AssertionError)
