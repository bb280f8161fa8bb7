from .base import BaseGolfModel, FrozenGolfModel
from .facts import (
    MeasuredComponent,
    MissingStats,
    PerformanceBand,
    RoundEvidence,
    RoundPerformanceFacts,
)
from .insight import InsightLevel, InsightMessage, PersistedInsightRecord, PostRoundInsights
from .round import Round
from .strokes_gained import StrokesGained
from .user import User

__all__ = [
    "BaseGolfModel",
    "FrozenGolfModel",
    "InsightLevel",
    "InsightMessage",
    "MeasuredComponent",
    "MissingStats",
    "PerformanceBand",
    "PersistedInsightRecord",
    "PostRoundInsights",
    "Round",
    "RoundEvidence",
    "RoundPerformanceFacts",
    "StrokesGained",
    "User",
]
