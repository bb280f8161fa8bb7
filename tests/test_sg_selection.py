import itertools

import pytest
from pydantic import ValidationError

from insights.config import DEFAULT_TUNING, stroke_scale, weakness_threshold
from insights.sg_selection import (
    build_measured_components,
    has_weak_separation,
    is_residual_dominant,
    pick_best,
    pick_opportunity,
    select_measured,
)
from models import StrokesGained


# ================================================================
# Component building and picks
# ================================================================

def test_components_exclude_untracked_and_residual():
    sg = StrokesGained(off_tee=0.4, approach=None, putting=-1.1, penalties=None, residual=-2.0)
    components = build_measured_components(sg)

    assert [c.name for c in components] == ["off_tee", "putting"]
    assert [c.label for c in components] == ["Off The Tee", "Putting"]


def test_components_skip_nan():
    sg = StrokesGained(off_tee=float("nan"), approach=0.5)
    assert [c.name for c in build_measured_components(sg)] == ["approach"]


def test_best_and_opportunity():
    sg = StrokesGained(off_tee=0.2, approach=-0.7, putting=-2.1, penalties=-0.3)
    selection = select_measured(sg, weakness_threshold(18))

    assert selection.best.name == "off_tee"
    assert selection.opportunity.name == "putting"
    assert selection.opportunity_is_weak is True
    assert selection.weak_separation is False


def test_single_component_has_no_opportunity():
    sg = StrokesGained(putting=-1.4)
    selection = select_measured(sg, weakness_threshold(18))

    assert selection.best.name == "putting"
    assert selection.opportunity is None
    assert selection.opportunity_is_weak is False


def test_opportunity_is_never_the_best_area():
    """With a tie at the top, the opportunity is the other tied area."""
    components = build_measured_components(StrokesGained(off_tee=0.5, approach=0.5))
    best = pick_best(components)
    opportunity = pick_opportunity(components, best)

    assert best.name == "off_tee"
    assert opportunity.name == "approach"


def test_selection_is_frozen_and_dumpable():
    selection = select_measured(StrokesGained(off_tee=0.4, putting=-1.1), -1.0)

    with pytest.raises(ValidationError):
        selection.best = None
    assert selection.model_dump()["opportunity"]["name"] == "putting"
    assert selection.component_count == 2


def test_opportunity_not_weak_above_threshold():
    sg = StrokesGained(off_tee=0.8, approach=-0.9)
    selection = select_measured(sg, weakness_threshold(18))
    assert selection.opportunity_is_weak is False


def test_weakness_threshold_halves_for_nine_holes():
    assert weakness_threshold(18) == -1.0
    assert weakness_threshold(9) == -0.5
    assert stroke_scale(None) == 1.0

    sg = StrokesGained(off_tee=0.3, approach=-0.6)
    assert select_measured(sg, weakness_threshold(9)).opportunity_is_weak is True
    assert select_measured(sg, weakness_threshold(18)).opportunity_is_weak is False


@pytest.mark.parametrize("tracked", list(itertools.product([True, False], repeat=4)))
def test_all_tracking_combinations(tracked):
    """Every presence pattern yields a consistent selection."""
    values = dict(zip(["off_tee", "approach", "putting", "penalties"], [0.6, -1.4, -0.2, 0.1]))
    sg = StrokesGained(**{name: (v if on else None) for (name, v), on in zip(values.items(), tracked)})
    selection = select_measured(sg, weakness_threshold(18))
    count = sum(tracked)

    assert selection.component_count == count
    assert (selection.best is None) == (count == 0)
    assert (selection.opportunity is None) == (count < 2)
    if selection.opportunity is not None:
        assert selection.opportunity.name != selection.best.name
        assert selection.opportunity.value == min(
            c.value for c in selection.components if c.name != selection.best.name
        )


# ================================================================
# Residual dominance
# ================================================================

def test_residual_dominant_when_biggest_signal():
    sg = StrokesGained(off_tee=1.0, approach=-0.5, residual=2.5)
    components = build_measured_components(sg)
    assert is_residual_dominant(sg, components) is True


def test_residual_below_floor_never_dominant():
    sg = StrokesGained(off_tee=0.2, approach=-0.1, residual=0.9)
    components = build_measured_components(sg)
    assert is_residual_dominant(sg, components) is False


def test_missing_residual_is_not_dominant():
    sg = StrokesGained(off_tee=0.2, approach=-0.1)
    assert is_residual_dominant(sg, build_measured_components(sg)) is False


def test_residual_dominant_by_share_of_total():
    sg = StrokesGained(total=-2.0, off_tee=-1.5, approach=0.3, residual=-1.2)
    components = build_measured_components(sg)
    # 1.2 / 2.0 = 0.6 meets the ratio
    assert is_residual_dominant(sg, components) is True

    sg = StrokesGained(total=-2.5, off_tee=-1.5, approach=0.3, residual=-1.2)
    assert is_residual_dominant(sg, build_measured_components(sg)) is False


def test_residual_share_needs_total():
    sg = StrokesGained(total=None, off_tee=-1.5, approach=0.3, residual=-1.2)
    assert is_residual_dominant(sg, build_measured_components(sg)) is False


def test_residual_tuning_scales_for_nine_holes():
    sg = StrokesGained(off_tee=0.4, residual=0.6)
    components = build_measured_components(sg)

    assert is_residual_dominant(sg, components, DEFAULT_TUNING) is False
    assert is_residual_dominant(sg, components, DEFAULT_TUNING.scaled(stroke_scale(9))) is True


def test_custom_ratio_floor():
    tuning = DEFAULT_TUNING.model_copy(update={"total_floor_for_ratio": 3.0})
    sg = StrokesGained(total=-2.0, off_tee=-1.5, approach=0.3, residual=-1.2)
    assert is_residual_dominant(sg, build_measured_components(sg), tuning) is False


# ================================================================
# Weak separation
# ================================================================

def test_weak_separation_when_lowest_two_are_close():
    components = build_measured_components(StrokesGained(off_tee=0.5, approach=-1.2, putting=-1.0))
    assert has_weak_separation(components) is True


def test_clear_separation():
    components = build_measured_components(StrokesGained(off_tee=0.2, approach=-0.7, putting=-2.1))
    assert has_weak_separation(components) is False


def test_weak_separation_scales_for_nine_holes():
    components = build_measured_components(StrokesGained(approach=-1.2, putting=-0.95))
    assert has_weak_separation(components, DEFAULT_TUNING) is True
    assert has_weak_separation(components, DEFAULT_TUNING.scaled(0.5)) is False


def test_single_component_never_weakly_separated():
    components = build_measured_components(StrokesGained(putting=-2.0))
    assert has_weak_separation(components) is False
