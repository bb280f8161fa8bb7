"""Pick the standout and weak area among the tracked strokes-gained components.

The residual bucket is never treated as a measured component. It only feeds
the residual-dominance signal.
"""

import math
from typing import List, Optional

from pydantic import Field

from insights.config import DEFAULT_TUNING, SelectionTuning
from models.base import FrozenGolfModel
from models.facts import MeasuredComponent
from models.strokes_gained import StrokesGained

COMPONENT_LABELS = {
    "off_tee": "Off The Tee",
    "approach": "Approach",
    "putting": "Putting",
    "penalties": "Penalties",
}

COMPONENT_ORDER = ["off_tee", "approach", "putting", "penalties"]


class MeasuredSelection(FrozenGolfModel):
    """Derived per round, never stored."""
    components: List[MeasuredComponent] = Field(default_factory=list)
    best: Optional[MeasuredComponent] = None
    opportunity: Optional[MeasuredComponent] = None
    opportunity_is_weak: bool = False
    residual_dominant: bool = False
    weak_separation: bool = False

    @property
    def component_count(self) -> int:
        return len(self.components)


def _is_finite(value: Optional[float]) -> bool:
    return value is not None and math.isfinite(value)


def build_measured_components(sg: StrokesGained) -> List[MeasuredComponent]:
    """Tracked components in canonical order. Untracked ones are left out."""
    components = []
    for name in COMPONENT_ORDER:
        value = getattr(sg, name)
        if _is_finite(value):
            components.append(
                MeasuredComponent(name=name, label=COMPONENT_LABELS[name], value=value)
            )
    return components


def pick_best(components: List[MeasuredComponent]) -> Optional[MeasuredComponent]:
    if not components:
        return None
    return max(components, key=lambda c: c.value)


def pick_opportunity(
    components: List[MeasuredComponent], best: Optional[MeasuredComponent]
) -> Optional[MeasuredComponent]:
    """Lowest-value component other than ``best``; needs two tracked areas."""
    if len(components) < 2 or best is None:
        return None
    alternatives = [c for c in components if c.name != best.name]
    return min(alternatives, key=lambda c: c.value)


def is_residual_dominant(
    sg: StrokesGained,
    components: List[MeasuredComponent],
    tuning: SelectionTuning = DEFAULT_TUNING,
) -> bool:
    """Untracked swing is the biggest signal or a large share of the total."""
    if not _is_finite(sg.residual):
        return False
    residual_abs = abs(sg.residual)
    if residual_abs < tuning.dominance_absolute_floor:
        return False

    max_measured_abs = max((abs(c.value) for c in components), default=0.0)
    if residual_abs > max_measured_abs:
        return True

    if not _is_finite(sg.total):
        return False
    total_abs = abs(sg.total)
    if total_abs < tuning.ratio_floor or total_abs == 0:
        return False
    return residual_abs / total_abs >= tuning.dominance_ratio


def has_weak_separation(
    components: List[MeasuredComponent], tuning: SelectionTuning = DEFAULT_TUNING
) -> bool:
    """The two lowest components are too close to name one as the weakness."""
    if len(components) < 2:
        return False
    lowest, second = sorted(c.value for c in components)[:2]
    return abs(lowest - second) < tuning.weak_separation_delta


def select_measured(
    sg: StrokesGained,
    weakness_threshold: float,
    tuning: SelectionTuning = DEFAULT_TUNING,
) -> MeasuredSelection:
    """Run the full selection for one round.

    ``weakness_threshold`` and ``tuning`` must already be scaled for the
    number of holes played.
    """
    components = build_measured_components(sg)
    best = pick_best(components)
    opportunity = pick_opportunity(components, best)
    return MeasuredSelection(
        components=components,
        best=best,
        opportunity=opportunity,
        opportunity_is_weak=bool(opportunity and opportunity.value <= weakness_threshold),
        residual_dominant=is_residual_dominant(sg, components, tuning),
        weak_separation=has_weak_separation(components, tuning),
    )
