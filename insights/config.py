"""Thresholds for the post-round insight engine.

All stroke magnitudes are expressed for an 18-hole round and multiplied by
``stroke_scale(holes_played)`` before use.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MODEL_USED = "deterministic-v1"

SG_WEAKNESS = -1.0
SG_NEUTRAL_EPS = 0.3

# Total strokes gained -> performance band
SG_TOUGH_ROUND = -5.0
SG_BELOW_EXPECTATIONS = -2.0
SG_ABOVE_EXPECTATIONS = 2.0
SG_EXCEPTIONAL = 5.0

RESIDUAL_SENTENCE_THRESHOLD = 1.5
SCORE_ONLY_NEAR_DELTA = 1.5
SCORE_CONTEXT_MATCH_DELTA = 0.1   # not scaled: it is a display tolerance
ONBOARDING_SAME_DELTA = 0.1

ONBOARDING_ROUNDS = 3
BASELINE_WINDOW = 5


class SelectionTuning(BaseModel):
    """Tunables for residual dominance and weak-separation detection."""
    model_config = ConfigDict(frozen=True)

    dominance_ratio: float = Field(0.6, gt=0, le=1)
    dominance_absolute_floor: float = Field(1.0, ge=0)
    weak_separation_delta: float = Field(0.4, ge=0)
    measured_leak_strong: float = -1.0
    total_floor_for_ratio: Optional[float] = None

    def scaled(self, scale: float) -> "SelectionTuning":
        """Return a copy with every stroke magnitude multiplied by ``scale``."""
        return SelectionTuning(
            dominance_ratio=self.dominance_ratio,
            dominance_absolute_floor=self.dominance_absolute_floor * scale,
            weak_separation_delta=self.weak_separation_delta * scale,
            measured_leak_strong=self.measured_leak_strong * scale,
            total_floor_for_ratio=(
                self.total_floor_for_ratio * scale
                if self.total_floor_for_ratio is not None else None
            ),
        )

    @property
    def ratio_floor(self) -> float:
        if self.total_floor_for_ratio is not None:
            return self.total_floor_for_ratio
        return self.dominance_absolute_floor


DEFAULT_TUNING = SelectionTuning()


def stroke_scale(holes_played: Optional[int]) -> float:
    """Scale factor for stroke thresholds: 1.0 for 18 holes, 0.5 for 9."""
    if not holes_played or holes_played <= 0:
        return 1.0
    return holes_played / 18


def weakness_threshold(holes_played: Optional[int]) -> float:
    """Strokes-gained value at or below which an area counts as weak."""
    return SG_WEAKNESS * stroke_scale(holes_played)
