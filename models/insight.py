from datetime import datetime
from enum import Enum
from pydantic import Field
from typing import Any, Dict, List, Optional

from .base import BaseGolfModel, FrozenGolfModel


class InsightLevel(str, Enum):
    """Severity shown next to each message."""
    GREAT = "great"
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


class InsightMessage(FrozenGolfModel):
    """One rendered message and the outcome code that produced it."""
    text: str
    level: InsightLevel
    outcome: str


class PostRoundInsights(FrozenGolfModel):
    """The three ordered messages for a round.

    Order: what defined the round, scoring implication, next round action.
    """
    messages: List[InsightMessage] = Field(..., min_length=3, max_length=3)
    trace: Dict[str, Any] = Field(default_factory=dict)

    @property
    def texts(self) -> List[str]:
        return [m.text for m in self.messages]

    @property
    def levels(self) -> List[InsightLevel]:
        return [m.level for m in self.messages]

    @property
    def outcomes(self) -> List[str]:
        return [m.outcome for m in self.messages]


class PersistedInsightRecord(BaseGolfModel):
    """Row stored per round by the persistence layer."""
    round_id: str
    user_id: str
    messages: List[str] = Field(..., min_length=3, max_length=3)
    levels: List[InsightLevel] = Field(..., min_length=3, max_length=3)
    outcomes: List[str] = Field(..., min_length=3, max_length=3)
    variant_offset: int = Field(0, ge=0)
    generated_at: Optional[datetime] = None
    model_used: str = "deterministic-v1"
    onboarding: bool = False
    trace: Dict[str, Any] = Field(default_factory=dict)
