from datetime import datetime

import pytest

from insights.exceptions import OnboardingRoundError
from insights.onboarding import (
    build_onboarding_insights,
    classify_trend,
    order_rounds,
    round_ordinal,
)
from models import InsightLevel, Round


def _round(round_id, *, day=1, created_hour=0, score=85):
    return Round(
        id=round_id,
        user_id="u-1",
        date=datetime(2024, 5, day),
        created_at=datetime(2024, 5, day, created_hour),
        score=score,
    )


# ================================================================
# Policy
# ================================================================

def test_first_round():
    result = build_onboarding_insights(1, 88, 16)

    assert result.outcomes == ["OB-1", "OB-1", "OB-1"]
    assert result.levels == [InsightLevel.SUCCESS, InsightLevel.INFO, InsightLevel.INFO]
    assert "88 (+16)" in result.texts[0]
    assert "Two more rounds" in result.texts[2]


def test_second_round_better_golden():
    result = build_onboarding_insights(2, 82, 10, previous_score=85)

    assert result.outcomes == ["OB-2-BETTER"] * 3
    assert result.texts[0] == "Round 2 logged: 82 (+10), better than your first round by 3 strokes."
    assert "One more round" in result.texts[2]


def test_second_round_single_stroke_wording():
    result = build_onboarding_insights(2, 84, 12, previous_score=85)
    assert result.texts[0].endswith("by 1 stroke.")


def test_second_round_same():
    result = build_onboarding_insights(2, 85, 13, previous_score=85)
    assert result.outcomes == ["OB-2-SAME"] * 3
    assert "matching your first round" in result.texts[0]


def test_second_round_without_previous_score_is_same():
    assert build_onboarding_insights(2, 85, 13).outcomes[0] == "OB-2-SAME"


def test_third_round_worse():
    result = build_onboarding_insights(3, 90, 18, previous_score=88)

    assert result.outcomes == ["OB-3-WORSE"] * 3
    assert "2 strokes higher than last round" in result.texts[0]
    assert "next round" in result.texts[2]


def test_third_round_better():
    assert build_onboarding_insights(3, 80, 8, previous_score=83).outcomes[0] == "OB-3-BETTER"


@pytest.mark.parametrize("score, previous, trend", [
    (85, 85, "same"),
    (85, 85.05, "same"),
    (85, 84.95, "same"),
    (85, 84.8, "worse"),
    (85, 85.2, "better"),
    (85, None, "same"),
])
def test_trend_dead_zone(score, previous, trend):
    assert classify_trend(score, previous) == trend


@pytest.mark.parametrize("round_number", [0, 4, -1])
def test_round_number_outside_onboarding_raises(round_number):
    with pytest.raises(OnboardingRoundError):
        build_onboarding_insights(round_number, 85, 13)


@pytest.mark.parametrize("round_number, previous", [(1, None), (2, 80), (3, 90)])
def test_onboarding_copy_avoids_baseline_language(round_number, previous):
    for text in build_onboarding_insights(round_number, 85, 13, previous_score=previous).texts:
        lowered = text.lower()
        assert "average" not in lowered
        assert "strokes gained" not in lowered


@pytest.mark.parametrize("round_number", [1, 2, 3])
def test_onboarding_ends_with_next_round_message(round_number):
    last = build_onboarding_insights(round_number, 85, 13, previous_score=86).texts[2]
    assert last.startswith("Next round:")


# ================================================================
# Round ordering
# ================================================================

def test_order_by_date_then_created_then_id():
    rounds = [
        _round("c", day=2, created_hour=1),
        _round("b", day=2, created_hour=1),
        _round("a", day=2, created_hour=0),
        _round("z", day=1, created_hour=9),
    ]
    assert [r.id for r in order_rounds(rounds)] == ["z", "a", "b", "c"]


def test_undated_rounds_sort_last():
    undated = Round(id="x", score=80)
    rounds = [undated, _round("a", day=3)]
    assert [r.id for r in order_rounds(rounds)] == ["a", "x"]


def test_round_ordinal_and_previous():
    rounds = [_round("r3", day=3), _round("r1", day=1, score=90), _round("r2", day=2)]

    number, previous = round_ordinal(rounds, "r2")
    assert number == 2
    assert previous.id == "r1"
    assert previous.score == 90

    assert round_ordinal(rounds, "r1") == (1, None)
    assert round_ordinal(rounds, "missing") == (None, None)
