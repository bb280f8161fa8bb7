from datetime import datetime

import pytest

from insights.facts import (
    baseline_average,
    build_evidence,
    build_round_facts,
    classify_band,
    prior_rounds,
)
from models import PerformanceBand, Round, StrokesGained


def _round(round_id, day, score, *, holes=18, **fields):
    return Round(
        id=round_id,
        user_id="u-1",
        date=datetime(2024, 6, day),
        created_at=datetime(2024, 6, day, 12),
        score=score,
        holes_played=holes,
        par=72 if holes == 18 else 36,
        **fields,
    )


@pytest.mark.parametrize("total, band", [
    (None, PerformanceBand.UNKNOWN),
    (float("nan"), PerformanceBand.UNKNOWN),
    (-6.0, PerformanceBand.TOUGH),
    (-5.0, PerformanceBand.TOUGH),
    (-4.9, PerformanceBand.BELOW),
    (-2.0, PerformanceBand.BELOW),
    (-1.9, PerformanceBand.EXPECTED),
    (0.0, PerformanceBand.EXPECTED),
    (1.9, PerformanceBand.EXPECTED),
    (2.0, PerformanceBand.ABOVE),
    (4.9, PerformanceBand.ABOVE),
    (5.0, PerformanceBand.GREAT),
])
def test_classify_band(total, band):
    assert classify_band(total) == band


@pytest.mark.parametrize("total, band", [
    (-3.0, PerformanceBand.TOUGH),
    (-2.5, PerformanceBand.TOUGH),
    (-2.4, PerformanceBand.BELOW),
    (-1.0, PerformanceBand.BELOW),
    (-0.9, PerformanceBand.EXPECTED),
    (0.9, PerformanceBand.EXPECTED),
    (1.0, PerformanceBand.ABOVE),
    (1.5, PerformanceBand.ABOVE),
    (2.5, PerformanceBand.GREAT),
])
def test_classify_band_nine_holes(total, band):
    assert classify_band(total, holes_played=9) == band


@pytest.mark.parametrize("total_18, band", [
    (-6.0, PerformanceBand.TOUGH),
    (-3.0, PerformanceBand.BELOW),
    (3.0, PerformanceBand.ABOVE),
    (6.0, PerformanceBand.GREAT),
])
def test_nine_hole_band_matches_eighteen_hole_equivalent(total_18, band):
    f18 = build_round_facts(_round("r18", 10, 76, strokes_gained=StrokesGained(total=total_18)))
    f9 = build_round_facts(_round("r9", 10, 38, holes=9, strokes_gained=StrokesGained(total=total_18 / 2)))

    assert f18.band == band
    assert f9.band == f18.band


# ================================================================
# Baseline
# ================================================================

def test_no_history_means_no_baseline():
    round_ = _round("r1", 1, 80)
    assert baseline_average(round_, []) is None
    assert baseline_average(round_, [round_]) is None


def test_baseline_uses_last_five_prior_rounds():
    history = [_round(f"h{day}", day, 80 + day) for day in range(1, 8)]
    round_ = _round("now", 20, 85)
    # days 3..7 -> 83..87
    assert baseline_average(round_, history + [round_]) == pytest.approx(85.0)


def test_baseline_ignores_later_rounds():
    history = [_round("early", 1, 90), _round("later", 10, 70)]
    round_ = _round("now", 5, 85)
    assert [r.id for r in prior_rounds(round_, history)] == ["early"]
    assert baseline_average(round_, history) == pytest.approx(90.0)


def test_baseline_normalizes_per_hole():
    history = [_round("a", 1, 80), _round("b", 2, 82)]
    nine = _round("nine", 3, 42, holes=9)
    assert baseline_average(nine, history) == pytest.approx(40.5)


# ================================================================
# Facts
# ================================================================

def test_build_facts_full_round():
    round_ = _round(
        "now", 10, 75,
        fir_hit=8, fir_possible=14, gir_hit=9, putts=33, penalties=1,
        strokes_gained=StrokesGained(
            total=-0.9, off_tee=0.2, approach=-0.7, putting=-2.1, penalties=-0.3, residual=2.0,
        ),
    )
    facts = build_round_facts(round_, [_round("prev", 1, 74), round_])

    assert facts.score == 75
    assert facts.to_par == 3
    assert facts.avg_score == pytest.approx(74.0)
    assert facts.band == PerformanceBand.EXPECTED
    assert facts.missing.model_dump() == {"fir": False, "gir": False, "putts": False, "penalties": False}
    assert facts.round_evidence.greens_possible == 18
    assert facts.strokes_gained.putting == -2.1


def test_untracked_stats_drop_their_components():
    round_ = _round(
        "now", 10, 80,
        fir_hit=7, fir_possible=14,
        strokes_gained=StrokesGained(total=-3.0, off_tee=-0.4, putting=-1.0, residual=-1.6),
    )
    facts = build_round_facts(round_)

    assert facts.missing.putts is True
    assert facts.strokes_gained.off_tee == -0.4
    assert facts.strokes_gained.putting is None
    assert facts.strokes_gained.residual == -1.6
    assert facts.band == PerformanceBand.BELOW


def test_round_without_strokes_gained():
    facts = build_round_facts(_round("now", 10, 95))
    assert facts.band == PerformanceBand.UNKNOWN
    assert facts.strokes_gained == StrokesGained()
    assert facts.missing.fir and facts.missing.penalties


def test_evidence_only_for_recorded_stats():
    evidence = build_evidence(_round("now", 10, 80, gir_hit=6, holes=9))
    assert evidence.greens_hit == 6
    assert evidence.greens_possible == 9
    assert evidence.fairways_possible is None
    assert evidence.putts_total is None
