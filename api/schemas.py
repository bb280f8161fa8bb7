"""API-specific response models."""

from datetime import datetime
from pydantic import BaseModel
from typing import List, Optional

from models import InsightLevel, PersistedInsightRecord


class InsightMessageResponse(BaseModel):
    text: str
    level: InsightLevel
    outcome: str


class RoundInsightsResponse(BaseModel):
    """Post-round insights as shown to one viewer.

    Free-tier viewers get only the first ``visible_count`` messages;
    ``locked_count`` says how many were held back.
    """
    round_id: str
    messages: List[InsightMessageResponse]
    visible_count: int
    locked_count: int
    variant_offset: int = 0
    generated_at: Optional[datetime] = None
    model_used: str
    onboarding: bool = False

    @classmethod
    def from_record(cls, record: PersistedInsightRecord, visible_count: int) -> "RoundInsightsResponse":
        messages = [
            InsightMessageResponse(text=text, level=level, outcome=outcome)
            for text, level, outcome in zip(record.messages, record.levels, record.outcomes)
        ]
        return cls(
            round_id=record.round_id,
            messages=messages[:visible_count],
            visible_count=min(visible_count, len(messages)),
            locked_count=max(0, len(messages) - visible_count),
            variant_offset=record.variant_offset,
            generated_at=record.generated_at,
            model_used=record.model_used,
            onboarding=record.onboarding,
        )
